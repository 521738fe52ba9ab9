import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import Any, Optional, Sequence

from hexbytes import HexBytes

from abi_return_guesser.config import load_config, resolve_log_level
from abi_return_guesser.lib import format_types, guess_and_decode_return_data, guess_return_types


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="abi-return-guesser",
        description="Guess the Solidity types of raw EVM call return data.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "return_data",
        help="Raw return data as hex (0x-prefixed or not).",
    )
    parser.add_argument(
        "--decode",
        action="store_true",
        help="Also decode the return data with the guessed types and print the values as JSON.",
    )
    parser.add_argument(
        "--unknown-type",
        required=False,
        help="Type name to emit for words that cannot be classified. Defaults to dropping them.",
    )
    parser.add_argument(
        "--log-level",
        required=False,
        help="Logging level. Defaults to ABI_RETURN_GUESSER_LOG_LEVEL env or WARNING.",
    )
    return parser


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return HexBytes(value).to_0x_hex()
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]
    if isinstance(value, int) and not isinstance(value, bool):
        # uint256 values overflow JSON consumers
        return str(value)
    return value


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    if args.unknown_type is not None:
        config = replace(config, unknown_type=args.unknown_type)
    if args.log_level is not None:
        config = replace(config, log_level=args.log_level)

    try:
        logging.basicConfig(level=resolve_log_level(config.log_level), format="%(levelname)s %(name)s: %(message)s")
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    if not args.decode:
        types = guess_return_types(args.return_data, config)
        if not types:
            print("Could not derive return parameter types", file=sys.stderr)
            return 1
        print(format_types(types))
        return 0

    decoded = guess_and_decode_return_data(args.return_data, config)
    if decoded is None:
        print("Could not derive return parameter types", file=sys.stderr)
        return 1

    types, values = decoded
    print(format_types(types))
    print(json.dumps(_to_jsonable(values)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
