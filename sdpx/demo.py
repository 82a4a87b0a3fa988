"""Command-line demo for the SDP parser.

Reads an SDP document from a file (or stdin), prints its canonical rendering
and a table of every line the parser ignored or could not classify. With
``--example`` it builds one session by hand and prints it instead.
"""

from __future__ import annotations

import argparse
import ipaddress
import logging
import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from . import (
	ConnectionData,
	MediaDescription,
	Origin,
	ParseReport,
	ParserOptions,
	RenderError,
	SessionDescription,
	parse,
	render,
)
from ._utils import CRLF, EOL, console as CONSOLE


def _build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description="Parse and re-render an SDP document")
	parser.add_argument("source", nargs="?", default="-", help="SDP file to read ('-' for stdin)")
	parser.add_argument(
		"--example",
		action="store_true",
		help="Ignore SOURCE and render a session built in code",
	)
	parser.add_argument(
		"--skip-blank",
		action="store_true",
		help="Drop blank lines instead of reporting them as unparsed",
	)
	parser.add_argument(
		"--strip",
		action="store_true",
		help="Strip trailing whitespace from each line before parsing",
	)
	parser.add_argument("--crlf", action="store_true", help="Render with CRLF line endings")
	parser.add_argument(
		"--strict",
		action="store_true",
		help="Exit with status 1 when any line was ignored or unparsed",
	)
	parser.add_argument(
		"--log-level",
		default="WARNING",
		choices={"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"},
		help="Logging verbosity",
	)
	parser.add_argument(
		"--debug",
		action="store_true",
		help="Shortcut for --log-level=DEBUG with per-line tracing",
	)
	return parser


def _configure_logging(level: str, debug: bool, console: Console) -> None:
	effective_level = "DEBUG" if debug else level
	logging.basicConfig(
		level=getattr(logging, effective_level.upper(), logging.WARNING),
		format="%(message)s",
		handlers=[
			RichHandler(
				console=console,
				rich_tracebacks=True,
				show_path=False,
				show_time=False,
			)
		],
		force=True,
	)


def example_session() -> SessionDescription:
	"""The session from RFC 4566 Section 5, restricted to supported fields."""
	return SessionDescription(
		protocol_version=0,
		origin=Origin(
			username="jdoe",
			session_id="2890844526",
			session_version=2890842807,
			network_address=ipaddress.ip_address("10.47.16.5"),
		),
		session_name="SDP Seminar",
		session_information=["A Seminar on the session description protocol"],
		uri="http://www.example.com/seminars/sdp.pdf",
		connection_data=ConnectionData(ipaddress.ip_address("224.2.17.12"), ttl=127),
		media=[
			MediaDescription("audio", 49170, "RTP/AVP", ["0"]),
			MediaDescription("video", 51372, "RTP/AVP", ["99"]),
		],
	)


def _diagnostics_table(report: ParseReport) -> Table:
	table = Table(title="Diagnostics", show_lines=False)
	table.add_column("Line", justify="right")
	table.add_column("Kind")
	table.add_column("Content")
	table.add_column("Reason")

	for field in report.ignored_lines:
		table.add_row(
			str(field.line_number),
			"[yellow]ignored[/]",
			escape(f"{field.tag}="),
			"not valid in this section",
		)
	for entry in report.malformed:
		table.add_row(
			str(entry.line_number),
			"[red]unparsed[/]",
			escape(entry.line),
			escape(entry.reason),
		)
	return table


def _read_source(source: str) -> str:
	if source == "-":
		return sys.stdin.read()
	with open(source, "r", encoding="utf-8", newline="") as f:
		return f.read()


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
	args = _build_parser().parse_args(argv)
	console = console or CONSOLE
	_configure_logging(args.log_level, args.debug, console)
	eol = CRLF if args.crlf else EOL

	if args.example:
		report = ParseReport(desc=example_session())
		title = "Example Session"
	else:
		try:
			text = _read_source(args.source)
		except OSError as exc:
			logging.error(f"Cannot read {args.source}: {exc}")
			return 2
		options = ParserOptions(
			skip_blank_lines=args.skip_blank,
			strip_whitespace=args.strip,
			trace=args.debug,
		)
		report = parse(text, options=options)
		title = "Canonical SDP" if args.source == "-" else f"Canonical SDP ({args.source})"

	try:
		rendered = render(report.desc, eol=eol)
	except RenderError as exc:
		logging.error(f"Cannot render session: {exc}")
		return 1

	console.print(Panel(Text(rendered.rstrip() or "<empty>"), title=title, border_style="cyan"))
	if not report.ok:
		console.print(_diagnostics_table(report))
		logging.info(
			f"{len(report.ignored_lines)} ignored, {len(report.unparsed_lines)} unparsed"
		)
		if args.strict:
			return 1
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
