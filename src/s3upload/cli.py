"""Upload local files or URLs to an S3 bucket and print where they ended up."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from s3upload.config.credentials import default_credentials_path, load_credentials
from s3upload.config.run_options import DEFAULT_BUCKET, RunOptions
from s3upload.dispatch import report_result, run_all
from s3upload.errors import ConfigError
from s3upload.logging_config import configure_logging, get_logger
from s3upload.objects.fetcher import HttpFetcher
from s3upload.storage.object_store import ObjectStore

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="s3upload",
        usage="%(prog)s [-p] [-t] [-bucket <bucketName>] <filename>...",
        description="Upload files or URLs to an S3 bucket.",
    )
    parser.add_argument("-p", dest="private", action="store_true", help="private upload")
    parser.add_argument("-t", dest="timestamp", action="store_true", help="add timestamp")
    parser.add_argument(
        "-bucket",
        "--bucket",
        dest="bucket",
        default=DEFAULT_BUCKET,
        help=f"bucket to upload (default: {DEFAULT_BUCKET})",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Path to credentials TOML (default: {default_credentials_path()})",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostics verbosity on stderr (default: $LOG_LEVEL or WARNING).",
    )
    parser.add_argument("files", nargs="*", metavar="file-or-url", help="local path or http(s) URL")
    return parser


def exit_with(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.files:
        parser.print_help(sys.stderr)
        return 1

    configure_logging(level=args.log_level, service="s3upload.cli")
    options = RunOptions(private=args.private, add_timestamp=args.timestamp, target_bucket=args.bucket)

    try:
        credentials = load_credentials(args.config)
        bucket = credentials.bucket(options.target_bucket)
        store = ObjectStore.for_bucket(credentials, bucket)
        fetcher = HttpFetcher()
    except ConfigError as e:
        return exit_with(str(e))

    logger.info(
        "Starting upload run: files=%s bucket=%s private=%s timestamp=%s",
        len(args.files),
        bucket.name,
        options.private,
        options.add_timestamp,
    )
    run_all(args.files, options, bucket, store, fetcher, on_result=report_result)
    # Per-file failures are reported on stderr but do not change the exit status.
    return 0


if __name__ == "__main__":
    sys.exit(main())
