#!/usr/bin/env python3
"""
Strip tracking parameters from URLs given as arguments or on stdin.

    python main.py "https://example.com?utm_source=fb&id=1"
    cat urls.txt | python main.py --keep source --keep ref
    python main.py --check "https://example.com?gclid=abc"
"""

import argparse
import json
import sys
from typing import Iterable, List, Optional

from urlcleanser.clean.url_cleaner import clean_url, tracking_parameters
from urlcleanser.config import DEFAULT_WHITELIST
from urlcleanser.logging import setup_logging, get_logger

logger = get_logger(__name__)


def _read_urls(args_urls: List[str]) -> Iterable[str]:
    if args_urls:
        return args_urls
    return (line.strip() for line in sys.stdin if line.strip())


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Remove tracking query parameters from URLs.")
    parser.add_argument("urls", nargs="*", help="URLs to clean (default: read from stdin)")
    parser.add_argument(
        "--keep",
        action="append",
        default=[],
        metavar="NAME",
        help="Parameter name to keep even if it looks like a tracker (repeatable)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Print the tracking params of each URL as JSON; exit 1 if any were found",
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    whitelist = DEFAULT_WHITELIST.union(args.keep)

    found_any = False
    for url in _read_urls(args.urls):
        if args.check:
            found = tracking_parameters(url, whitelist)
            found_any = found_any or bool(found)
            print(json.dumps({"url": url, "tracking_parameters": found}))
        else:
            print(clean_url(url, whitelist))

    return 1 if found_any else 0


if __name__ == "__main__":
    sys.exit(main())
