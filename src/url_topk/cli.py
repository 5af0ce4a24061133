"""Command-line interface for url-topk."""

import argparse
import logging
import sys

from url_topk.errors import InvalidInputError, PipelineIOError
from url_topk.partition import KEY_LENGTH
from url_topk.reduce import DEFAULT_MAX_SHARD_BYTES, DEFAULT_TOP_K
from url_topk.solver.solve import main_solve

logger = logging.getLogger(__name__)

# sysexits.h codes, spelled out for platforms without os.EX_*.
EXIT_OK = 0
EXIT_INVALID_INPUT = 65
EXIT_IO_ERROR = 74


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="url-topk",
        description="Find the most frequent URLs in a newline-delimited file.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the input file (one URL per line)",
    )

    parser.add_argument(
        "output_file",
        help="Path to write results to (url = <url>, count = <count>)",
    )

    parser.add_argument(
        "--top-k",
        type=int,
        default=DEFAULT_TOP_K,
        help=f"Number of most frequent URLs to report (default: {DEFAULT_TOP_K})",
    )

    parser.add_argument(
        "--key-length",
        type=int,
        default=KEY_LENGTH,
        help=f"Prefix length used to route URLs to shards (default: {KEY_LENGTH})",
    )

    parser.add_argument(
        "--shard-dir",
        default=".",
        help="Directory for temporary shard files (default: current directory)",
    )

    parser.add_argument(
        "--max-shard-mb",
        type=int,
        default=DEFAULT_MAX_SHARD_BYTES // (1024 * 1024),
        help="Fail if any shard exceeds this size in MiB, 0 disables the check (default: 500)",
    )

    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker count when TOPK_EXECUTOR selects threads or processes (default: auto)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    return parser


def main() -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args()

    # Configure logging based on --log-level
    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    if args.top_k < 1:
        parser.error(f"--top-k must be at least 1, got {args.top_k}")
    if args.key_length < 1:
        parser.error(f"--key-length must be at least 1, got {args.key_length}")
    if args.max_shard_mb < 0:
        parser.error(f"--max-shard-mb must not be negative, got {args.max_shard_mb}")

    try:
        main_solve(
            input_path=args.input_file,
            output_path=args.output_file,
            k=args.top_k,
            shard_dir=args.shard_dir,
            key_length=args.key_length,
            max_shard_bytes=args.max_shard_mb * 1024 * 1024,
            workers=args.workers,
        )
    except InvalidInputError as exc:
        logger.error("Invalid input: %s", exc)
        return EXIT_INVALID_INPUT
    except PipelineIOError as exc:
        logger.error("I/O failure: %s", exc)
        return EXIT_IO_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
