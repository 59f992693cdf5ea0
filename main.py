#!/usr/bin/env python3
"""
wordfreq - Main CLI Entry Point

Dem tan suat word trong tat ca text files cua mot thu muc
va in bang xep hang (count giam dan) + tong so word.

Usage:
    python main.py <folder> [--pattern "*.txt"] [--recursive] [--top N] [--workers N]

Exit codes:
    0: Thanh cong
    1: Loi loader (thu muc khong ton tai, khong co file, loi doc file)
    2: Loi usage (argparse)
"""

import argparse
import sys
from typing import List, Optional

from config.paths import DEBUG_MODE
from core.errors import WordFreqError
from core.logging_config import flush_logs, log_error, log_info, set_debug_mode
from services.service_container import ServiceContainer
from services.settings_manager import load_app_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordfreq",
        description="Count word frequencies across the text files of a folder",
    )
    parser.add_argument("folder", help="Folder containing the text files (absolute or relative to cwd)")
    parser.add_argument("--pattern", dest="file_pattern", help="File pattern to include (default: *.txt)")
    parser.add_argument("--exclude", action="append", default=None, help="Pattern to exclude (repeatable)")
    parser.add_argument("--recursive", action="store_true", default=None, help="Scan subfolders too")
    parser.add_argument("--encoding", help="Text encoding of the files (default: utf-8)")
    parser.add_argument("--workers", dest="max_workers", type=int, help="Maximum number of worker threads")
    parser.add_argument("--top", dest="top_n", type=int, help="Only list the N most frequent words")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug or DEBUG_MODE:
        set_debug_mode(True)

    settings = load_app_settings().with_overrides(
        file_pattern=args.file_pattern,
        excluded_patterns="\n".join(args.exclude) if args.exclude else None,
        recursive=args.recursive,
        encoding=args.encoding,
        max_workers=args.max_workers,
        top_n=args.top_n,
    )
    if settings.max_workers < 1 or settings.top_n < 0:
        parser.error("--workers must be >= 1 and --top must be >= 0")

    container = ServiceContainer(settings)
    try:
        result = container.word_frequency.run_directory(args.folder)
    except WordFreqError as e:
        log_error(str(e))
        flush_logs()
        return 1

    log_info(f"[main] Done: {len(result)} distinct words")
    flush_logs()
    return 0


if __name__ == "__main__":
    sys.exit(main())
