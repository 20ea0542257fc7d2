#!/usr/bin/env python3
"""
Generate a batch of passwords and their bcrypt hashes from the command line.

Usage (from repo root):
    python scripts/generate_passwords.py --count 3 --length 16 --cost-factor 12
    python scripts/generate_passwords.py --no-special --easy-to-read --format csv > passwords.csv
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import init_settings
from core.passwords import (
    PasswordBatchGenerator,
    InvalidRequestError,
    PasswordGenerationError,
    to_clipboard_text,
    to_csv,
    to_text,
)
from core.passwords.models import GeneratePasswordsRequest, GenerationOptionsModel

FORMATTERS = {
    "text": to_text,
    "csv": to_csv,
    "clipboard": to_clipboard_text,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Generate random passwords with bcrypt hashes")
    p.add_argument("--count", type=int, default=None)
    p.add_argument("--length", type=int, default=None)
    p.add_argument("--cost-factor", type=int, default=None)
    for flag in ("uppercase", "lowercase", "numbers", "special", "easy-to-read"):
        p.add_argument(f"--{flag}", action=argparse.BooleanOptionalAction, default=None)
    p.add_argument("--workers", type=int, default=None, help="Hashing threads (default from config)")
    p.add_argument("--config", default=None, help="YAML config file")
    p.add_argument(
        "--format",
        choices=sorted(FORMATTERS) + ["json"],
        default="text",
    )
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.WARNING, stream=sys.stderr)

    settings = init_settings(args.config)
    request = GeneratePasswordsRequest(
        count=args.count,
        length=args.length,
        cost_factor=args.cost_factor,
        options=GenerationOptionsModel(
            uppercase=args.uppercase,
            lowercase=args.lowercase,
            numbers=args.numbers,
            special=args.special,
            easy_to_read=args.easy_to_read,
        ),
    ).to_domain(settings.defaults)

    generator = PasswordBatchGenerator(
        limits=settings.limits,
        max_workers=args.workers or settings.concurrency.max_workers,
    )

    try:
        result = generator.generate_batch(request)
    except InvalidRequestError as e:
        for err in e.errors:
            print(f"error: {err['field']} {err['message']} (got {err['value']!r})", file=sys.stderr)
        return 2
    except PasswordGenerationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for notice in result.notices:
        print(f"notice: {notice}", file=sys.stderr)

    if args.format == "json":
        sys.stdout.write(json.dumps(result.to_dict(), indent=2) + "\n")
    else:
        sys.stdout.write(FORMATTERS[args.format](result.passwords))
    return 0


if __name__ == "__main__":
    sys.exit(main())
