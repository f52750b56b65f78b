"""
Restaurant Critic

CLI entry point: reviews a restaurant list and prints the favorite
and least favorite restaurant.
"""

import argparse
import logging
import sys

from critic.exceptions import CriticError
from critic.orchestrator import ReviewPipeline
import config.settings as settings

USAGE = """
Usage:
    python main.py --input ravintolat.csv

Parameters
    --input     Name of the .csv file to read
"""


def setup_logging(log_level: str = "INFO", log_file: str = settings.LOG_FILE):
    """Configure logging for the entire application."""
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=handlers
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Restaurant Critic - rates restaurants by weekly opening hours",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Review a restaurant list
  python main.py --input ravintolat.csv

  # Skip malformed lines and export the review table
  python main.py --input ravintolat.csv --skip-invalid --export-dir output
        """
    )

    parser.add_argument(
        "--input",
        help="Semicolon-delimited restaurant list (id;name;postalCode;city;openingHours)"
    )

    parser.add_argument(
        "--export-dir",
        help=f"Write the review table CSV and metadata here (e.g. {settings.OUTPUT_ROOT})"
    )

    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        default=settings.CONTINUE_ON_RECORD_FAILURE,
        help="Skip lines with malformed opening hours instead of aborting"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    parser.add_argument(
        "--log-file",
        default=settings.LOG_FILE,
        help=f"Log file (default: {settings.LOG_FILE}, empty string disables)"
    )

    return parser


def main(argv=None) -> int:
    """Main CLI entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    if not args.input:
        print(USAGE)
        return 1

    setup_logging(args.log_level, args.log_file)
    logger = logging.getLogger(__name__)

    pipeline = ReviewPipeline(continue_on_record_failure=args.skip_invalid)

    try:
        review = pipeline.run(args.input, export_dir=args.export_dir)
    except CriticError as e:
        logger.error(f"Review failed: {e}")
        print(f"Review failed: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        logger.warning("Review interrupted by user")
        print("Review interrupted", file=sys.stderr)
        return 1

    except Exception as e:
        logger.error(f"Review failed: {e}", exc_info=True)
        print(f"Review failed: {e}", file=sys.stderr)
        print(f"Check {args.log_file or 'the log'} for details", file=sys.stderr)
        return 1

    print(review)
    logger.info("Review completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
