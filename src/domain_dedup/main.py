from __future__ import annotations

import argparse
import sys

import structlog

from .config import LOG_LEVELS, Settings, settings
from .errors import DomainDedupError
from .logging_config import setup_logging
from .models import RunStats
from .pipeline import DedupPipeline
from .streams import open_output, read_hostnames
from .suffix_table import SuffixTable, default_table
from .validator import DomainValidator

log = structlog.get_logger()


def _parse_args(argv: list[str] | None, defaults: Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="domain-dedup",
        description="Validate hostnames against known TLDs and write each registrable domain once.",
    )
    parser.add_argument("input", help="file with one hostname per line, or - for stdin")
    parser.add_argument(
        "output",
        nargs="?",
        default=defaults.output_file,
        help=f"destination file, or - for stdout (default: {defaults.output_file})",
    )
    parser.add_argument(
        "--validate-special-chars",
        action=argparse.BooleanOptionalAction,
        default=defaults.validate_special_chars,
        help="reject hostnames with characters outside [A-Za-z0-9._-]",
    )
    parser.add_argument("--progress-interval", type=int, default=defaults.progress_interval)
    parser.add_argument("--tld-file", default=defaults.tld_file, help="IANA-format TLD list to use instead of the bundled one")
    parser.add_argument("--log-level", type=str.upper, default=defaults.log_level, choices=LOG_LEVELS)
    return parser.parse_args(argv)


def run(input_path: str, output_path: str, strict: bool, progress_interval: int, tld_file: str | None = None) -> RunStats:
    log.info("run_started", input=input_path, output=output_path, validate_special_chars=strict)

    # 1. Reference data first, nothing is opened if it is unavailable
    table = SuffixTable.from_file(tld_file) if tld_file else default_table()
    log.info("suffix_table_ready", tlds=len(table.valid_tlds), registrable_slds=len(table.registrable_slds))

    # 2. Open input before truncating the output
    lines = read_hostnames(input_path)

    # 3. Stream
    pipeline = DedupPipeline(DomainValidator(strict=strict, table=table), progress_interval=progress_interval)
    with lines, open_output(output_path) as sink:
        stats = pipeline.run(lines, sink)

    log.info("run_complete", **stats.model_dump())
    return stats


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv, settings)
    setup_logging(args.log_level)

    try:
        run(
            args.input,
            args.output,
            strict=args.validate_special_chars,
            progress_interval=args.progress_interval,
            tld_file=args.tld_file,
        )
    except DomainDedupError as exc:
        log.error("run_failed", error=str(exc), error_type=type(exc).__name__)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
