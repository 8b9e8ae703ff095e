"""
Command line entry point for the building identifier codec.

Encodes, decodes and validates single UBID codes.
"""

import argparse
import json
import sys
from typing import List, Optional

from .core import Config, setup_logger, LoggerContext
from .codec import UbidCode
from .exceptions import BuildingIdError


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="buildingid",
        description="Unique Building Identifier (UBID) codec"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    encode = subparsers.add_parser("encode", help="Encode a bounding box as a UBID")
    for name in ("south", "west", "north", "east", "center_latitude", "center_longitude"):
        encode.add_argument(name, type=float)
    encode.add_argument(
        "--code-length",
        type=int,
        default=None,
        help="Number of digits in the Plus Code. Default: from configuration"
    )

    decode = subparsers.add_parser("decode", help="Decode a UBID to its bounding box")
    decode.add_argument("code", type=str)

    validate = subparsers.add_parser("validate", help="Check whether a UBID is well formed")
    validate.add_argument("code", type=str)

    return parser


def run(args: argparse.Namespace, config: Config) -> int:
    """
    Execute a parsed command.

    Returns:
        Process exit status
    """
    logger = setup_logger(
        log_file=config.log_file,
        log_level=args.log_level or config.log_level
    )
    logger.debug(f"Configuration: {config}")

    if args.command == "encode":
        code_length = args.code_length if args.code_length is not None else config.code_length
        with LoggerContext(logger, "encode"):
            code = UbidCode.encode(
                args.south,
                args.west,
                args.north,
                args.east,
                args.center_latitude,
                args.center_longitude,
                code_length=code_length,
            )
        print(code.value)
        return 0

    if args.command == "decode":
        with LoggerContext(logger, f"decode {args.code}"):
            area = UbidCode(args.code).decode()
        print(json.dumps(area.to_dict(), indent=2))
        return 0

    valid = UbidCode(args.code).is_valid()
    print("valid" if valid else "invalid")
    return 0 if valid else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config(config_file=args.config)
        return run(args, config)
    except (BuildingIdError, ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
