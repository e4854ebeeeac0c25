#!/usr/bin/env python3
"""
Bounty validation utility.
Validates bounty or claim JSON documents from the command line.
"""

import argparse
import json
import sys

from bounty_board.core.config import VERSION, validate_config
from bounty_board.core.policy import OperationMode
from bounty_board.core.validator import build_bounty_validator, build_claim_validator
from bounty_board.api.schemas import ValidationErrorResponse, ValidationSuccessResponse
from bounty_board.util.logging import logger


def _load_document(path):
    if path == "-":
        return json.load(sys.stdin)
    with open(path, "r", encoding="utf-8") as handle:
        return json.load(handle)


def build_parser():
    parser = argparse.ArgumentParser(description="Validate bounty records against the bounty schema")
    parser.add_argument(
        "paths",
        nargs="+",
        help="JSON documents to validate ('-' reads stdin)"
    )
    parser.add_argument(
        "--mode",
        choices=["create", "update", "claim"],
        default="create",
        help="Operation to validate for (default: create)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output results in JSON format"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}"
    )
    return parser


def main(argv=None):
    """Validate each document and exit non-zero if any is rejected."""
    args = build_parser().parse_args(argv)

    issues = validate_config()
    if issues:
        for issue in issues:
            print(f"❌ ERROR: {issue}")
        sys.exit(2)

    if args.mode == "claim":
        validator, mode = build_claim_validator(), None
    else:
        validator, mode = build_bounty_validator(), OperationMode(args.mode)

    failures = 0
    for path in args.paths:
        try:
            document = _load_document(path)
        except (OSError, json.JSONDecodeError) as e:
            print(f"❌ {path}: could not read document: {e}")
            logger.error(f"CLI failed to load {path}: {e}")
            sys.exit(2)

        result = validator.validate(document, mode)

        if args.json:
            if result.ok:
                payload = ValidationSuccessResponse.from_result(result, args.mode).model_dump(mode="json")
            else:
                payload = ValidationErrorResponse.from_result(result).model_dump(mode="json")
            print(json.dumps({"path": path, **payload}, indent=2))
        elif result.ok:
            print(f"✅ {path}: valid for {args.mode}")
        else:
            print(f"❌ {path}: {len(result.violations)} violation(s)")
            for violation in result.violations:
                print(f"   {violation.path or '<record>'}: {violation.message}")

        if not result.ok:
            failures += 1

    if failures:
        sys.exit(1)


if __name__ == "__main__":
    main()
