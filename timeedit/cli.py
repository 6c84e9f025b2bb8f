"""
CLI (Command Line Interface).

    timeedit resolve <course_code>
    timeedit events <course_code> [--filter-empty] [--semester] ...
    timeedit export <course_code> <file.ics>

Prints plain text. Errors from the client are reported on stderr and
turn into exit code 1.
"""

from __future__ import annotations

import argparse
import logging
import sys

from timeedit.client import TimeEditAPI
from timeedit.config import KTH_BASE_URL, TimeEditConfig
from timeedit.errors import TimeEditError
from timeedit.export_ics import export_events_to_ics
from timeedit.model import Event

logger = logging.getLogger(__name__)

LOG_HANDLER_NAME = "timeedit-cli"


def setup_logging(verbose: bool = False) -> None:
    """
    Send log records to stderr. INFO with -v, WARNING otherwise.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO if verbose else logging.WARNING)
    if not any(h.get_name() == LOG_HANDLER_NAME for h in root_logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(LOG_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        root_logger.addHandler(handler)

    # Mute urllib3 connection chatter
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def format_event(event: Event) -> str:
    start = event.start_date.strftime("%Y-%m-%d %H:%M")
    end = event.end_date.strftime("%Y-%m-%d %H:%M")
    return (
        f"Start:\t\t{start}\n"
        f"End:\t\t{end}\n"
        f"Lecturers:\t{','.join(event.lecturers)}\n"
        f"Location:\t{','.join(event.location)}\n"
        f"Type:\t\t{event.type}\n"
    )


def _config_from_args(args: argparse.Namespace) -> TimeEditConfig:
    return TimeEditConfig(
        base_url=args.base_url,
        filter_empty=args.filter_empty,
        filter_to_semester=args.semester,
        start_date=args.start_date,
        end_date=args.end_date,
        use_kth_places=args.kth_places,
        filter_end_date=args.filter_end_date,
        strict=not args.lenient,
    )


def _cmd_resolve(args: argparse.Namespace, api: TimeEditAPI) -> int:
    print(api.get_course_id(args.course_code))
    return 0


def _cmd_events(args: argparse.Namespace, api: TimeEditAPI) -> int:
    events = api.fetch_course_events(args.course_code)
    if not events:
        print("No events.")
        return 0

    for ev in events:
        print(format_event(ev))
    return 0


def _cmd_export(args: argparse.Namespace, api: TimeEditAPI) -> int:
    out_path = (args.out or "").strip()
    if not out_path:
        print("Please provide output .ics path.")
        return 1

    events = api.fetch_course_events(args.course_code)
    n = export_events_to_ics(events, out_path, summary=args.course_code)
    print(f"Exported {n} events to: {out_path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--base-url", default=KTH_BASE_URL, help="TimeEdit instance URL (with trailing slash)")
    common.add_argument("--filter-empty", action="store_true", help="Drop events without lecturers/location/type")
    common.add_argument("--semester", action="store_true", help="Only keep events of the current KTH period")
    common.add_argument("--start-date", default=None, help="Only keep events that end before this ISO date")
    common.add_argument("--end-date", default=None, help="Only keep events that start after this ISO date")
    common.add_argument("--filter-end-date", action="store_true", help="Enable the --end-date filter")
    common.add_argument("--kth-places", action="store_true", help="Replace locations with kth.se search links")
    common.add_argument("--lenient", action="store_true", help="Log bad HTTP status instead of failing")
    common.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")

    parser = argparse.ArgumentParser(prog="timeedit", description="TimeEdit course schedule client")
    sub = parser.add_subparsers(dest="command", required=True)

    p_resolve = sub.add_parser("resolve", parents=[common], help="Print the TimeEdit object id of a course")
    p_resolve.add_argument("course_code", type=str, help="Course code (e.g. DD2482)")

    p_events = sub.add_parser("events", parents=[common], help="List events of a course")
    p_events.add_argument("course_code", type=str, help="Course code (e.g. DD2482)")

    p_export = sub.add_parser("export", parents=[common], help="Export events of a course to .ics")
    p_export.add_argument("course_code", type=str, help="Course code (e.g. DD2482)")
    p_export.add_argument("out", type=str, help="Output file path (e.g. out.ics)")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if not args.course_code.strip():
        print("Please provide a course code.")
        raise SystemExit(1)

    try:
        api = TimeEditAPI(_config_from_args(args))
    except ValueError as exc:
        print(f"Invalid option: {exc}", file=sys.stderr)
        raise SystemExit(1)

    if args.end_date and not args.filter_end_date:
        logger.warning("--end-date has no effect without --filter-end-date")

    handlers = {"resolve": _cmd_resolve, "events": _cmd_events, "export": _cmd_export}
    try:
        raise SystemExit(handlers[args.command](args, api))
    except TimeEditError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1)
