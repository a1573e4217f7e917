"""
CLI entry point for profile-records.

Usage:
    python -m profile_records expert_grants
    python -m profile_records scholar_publications --format html
    python -m profile_records scholar_publications --html-file page.html
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

import structlog

# Log level mapping
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def setup_logging(level: str = "INFO", json_output: bool = False):
    """Configure structured logging (to stderr, stdout carries the records)."""
    log_level = LOG_LEVELS.get(level.upper(), logging.INFO)

    if json_output:
        processors = [
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="profile-records",
        description="Fetch and extract research grants or publications from a profile page",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Fetch grants through the relay and print JSON
  python -m profile_records expert_grants

  # Render the publications modal fragment
  python -m profile_records scholar_publications --format html

  # Parse a saved page instead of fetching
  python -m profile_records scholar_publications --html-file page.html

  # Use custom config file
  python -m profile_records expert_grants --config /path/to/widgets.yml
        """,
    )

    parser.add_argument(
        "widget_id",
        nargs="?",
        help="Widget to run (see --list)",
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="List configured widgets and exit",
    )

    parser.add_argument(
        "--html-file",
        type=str,
        help="Parse a local HTML file instead of fetching the profile",
    )

    parser.add_argument(
        "--format",
        choices=["json", "jsonl", "html"],
        default="json",
        help="Output format (default: json)",
    )

    parser.add_argument(
        "--output",
        type=str,
        help="Write output to this file instead of stdout",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to widgets.yml config file",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Output logs as JSON",
    )

    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version and exit",
    )

    return parser.parse_args(argv)


def format_state(state, widget, output_format: str) -> str:
    """Serialize a widget state in the requested format."""
    if output_format == "html":
        return widget.render(state)
    if output_format == "jsonl":
        return "\n".join(
            json.dumps(r.to_dict(), ensure_ascii=False) for r in state.records
        )
    return json.dumps(state.to_dict(), ensure_ascii=False, indent=2)


async def main_async(args):
    """Async main function."""
    from .config.loader import load_widget
    from .widget import ProfileWidget

    logger = structlog.get_logger(__name__)

    config = load_widget(args.widget_id, args.config)
    widget = ProfileWidget(config)
    state = widget.initial_state()

    logger.info(
        "starting_widget",
        widget_id=config.widget_id,
        kind=config.kind.value,
        html_file=args.html_file,
    )

    if args.html_file:
        html = Path(args.html_file).read_text(encoding="utf-8")
        state = state.with_result(widget.extract(html))
    else:
        state = await widget.load(state)

    output = format_state(state, widget, args.format)

    if args.output:
        Path(args.output).write_text(output + "\n", encoding="utf-8")
        logger.info("saved_output", path=args.output, records=len(state.records))
    else:
        print(output)

    return state


def list_widgets(config_path=None):
    """Print configured widgets."""
    from .config.loader import load_widgets

    for config in load_widgets(config_path):
        print(f"{config.widget_id}\t{config.kind.value}\t{config.profile_url}")


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    if args.version:
        from . import __version__
        print(f"profile-records {__version__}")
        sys.exit(0)

    setup_logging(args.log_level, args.json_logs)

    if args.list:
        list_widgets(args.config)
        sys.exit(0)

    if not args.widget_id:
        print("error: widget_id is required (use --list to see widgets)", file=sys.stderr)
        sys.exit(2)

    try:
        state = asyncio.run(main_async(args))
        sys.exit(0 if state.has_records else 1)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        logger = structlog.get_logger(__name__)
        logger.exception("fatal_error", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
