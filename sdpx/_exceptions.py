"""
Exceptions raised or recorded while handling SDP text.

Parse-time errors are never raised out of ``parse()``: they are attached to
the ``MalformedLine`` entries of a ``ParseReport``. Only ``render()`` raises.
"""

from __future__ import annotations


class SDPError(Exception):
    """Base exception for SDP errors."""

    pass


# =============================================================================
# Classification errors (recorded in ParseReport.malformed)
# =============================================================================


class MalformedLineError(SDPError, ValueError):
    """A line could not be classified as a known, well-formed field."""

    pass


class MissingSeparatorError(MalformedLineError):
    """Raised when a line has no ``=`` or nothing before it."""

    pass


class EmptyValueError(MalformedLineError):
    """Raised when a line has nothing after the ``=``."""

    pass


class UnknownFieldError(MalformedLineError):
    """Raised when the type tag is not in the classification table."""

    def __init__(self, tag: str):
        super().__init__(f"Unknown field type {tag!r}")
        self.tag = tag


class FieldSyntaxError(MalformedLineError):
    """Raised when a field value does not match its grammar."""

    pass


class AddressFamilyMismatchError(FieldSyntaxError):
    """Raised when the IP4/IP6 tag disagrees with the address literal."""

    def __init__(self, address_type: str, address: str):
        super().__init__(
            f"Address type {address_type} does not match address {address!r}"
        )
        self.address_type = address_type
        self.address = address


# =============================================================================
# Serialization errors
# =============================================================================


class RenderError(SDPError, ValueError):
    """Raised when a model value cannot be expressed as SDP text."""

    pass


__all__ = [
    "SDPError",
    "MalformedLineError",
    "MissingSeparatorError",
    "EmptyValueError",
    "UnknownFieldError",
    "FieldSyntaxError",
    "AddressFamilyMismatchError",
    "RenderError",
]
