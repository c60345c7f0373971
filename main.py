"""access-stats — endpoint, per-minute and status-code counts for an access log."""

import logging
import sys
from argparse import ArgumentParser

from access_stats.config import load_config, load_yaml_config
from access_stats.errors import FileAccessError
from access_stats.formatter import format_stats_json, format_stats_text
from access_stats.reader import load_records
from access_stats.stats import compute_stats

PROMPT = "Enter the path to the log file: "

logger = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="access-stats",
        description="Count API calls per endpoint, per minute and per status code.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="Log file path (prompted for when omitted)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--output",
        choices=["text", "json"],
        default=None,
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug details to stderr",
    )
    return parser


def run_pipeline(args) -> None:
    """Read, parse, truncate, aggregate and print."""
    config = load_config(args, load_yaml_config(args.config))
    logging.getLogger().setLevel(config.log_level)

    path = args.path or input(PROMPT)
    records = load_records(path, limit=config.max_records, encoding=config.encoding)
    logger.info("Analyzing %d records from %s", len(records), path)

    stats = compute_stats(records)
    if config.output == "json":
        print(format_stats_json(stats))
    else:
        print(format_stats_text(stats))


def main():
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [ACCESS-STATS] %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        run_pipeline(args)
    except FileAccessError as exc:
        logger.error("Error: %s", exc)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(0)
    except EOFError:
        sys.exit(1)
    except BrokenPipeError:
        sys.exit(0)


if __name__ == "__main__":
    main()
