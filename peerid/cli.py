import argparse
import json
import sys

import trio

from peerid.crypto.key_generation import (
    DEFAULT_RSA_BITS,
)
from peerid.crypto.keys import (
    KeyType,
)
from peerid.exceptions import (
    BasePeerIdError,
)
from peerid.id import (
    PeerId,
)

GENERATABLE_KEY_TYPES = (KeyType.RSA, KeyType.Ed25519, KeyType.Secp256k1)


async def run(key_type: KeyType, bits: int, exclude_private: bool) -> None:
    peer_id = await PeerId.create(key_type=key_type, bits=bits)
    result = peer_id.to_json()
    if exclude_private:
        result.pop("privKey", None)
    print(json.dumps(result, indent=2))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="peerid",
        description="Generate a new peer identity and print it as JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  peerid                          # RSA 2048 identity
  peerid --key-type Ed25519       # inline Ed25519 identity (12D3Koo...)
  peerid --bits 4096              # larger RSA key
  peerid --exclude-private        # id and public key only
        """,
    )
    parser.add_argument(
        "--key-type",
        "-t",
        choices=[key_type.name for key_type in GENERATABLE_KEY_TYPES],
        default=KeyType.RSA.name,
        help="Key type to generate (default: RSA)",
    )
    parser.add_argument(
        "--bits",
        "-b",
        type=int,
        default=DEFAULT_RSA_BITS,
        help=f"RSA modulus size in bits (default: {DEFAULT_RSA_BITS})",
    )
    parser.add_argument(
        "--exclude-private",
        action="store_true",
        help="Leave the private key out of the output",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main function with argument parsing."""
    args = build_parser().parse_args(argv)

    try:
        trio.run(
            run, KeyType.from_name(args.key_type), args.bits, args.exclude_private
        )
    except BasePeerIdError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
