"""Embedding and extracting text messages, and the command-line front end."""

from __future__ import annotations

import argparse
import enum
import os
import sys
from collections.abc import Sequence

from .hamming import bits_to_string, decode_bits, encode_bits, string_to_bits
from .images import ImageError
from .lsb_dct import embed_lsb_dct, extract_lsb_dct
from .pvd import embed_pvd, extract_pvd


class Method(enum.Enum):
    """Steganographic method used to hide or recover the bits."""

    PVD = "pvd"
    LSB_DCT = "lsb-dct"

    @property
    def label(self) -> str:
        """Human-readable name of the method."""
        return "PVD" if self is Method.PVD else "LSB-DCT"


def embed_message(
    image_path: str | os.PathLike,
    message: str,
    save_path: str | os.PathLike,
    method: Method | str = Method.PVD,
) -> int:
    """Hide ``message`` (Hamming-coded) in an image and save the stego-image.

    Returns the number of bits embedded.
    """
    method = Method(method)
    encoded = encode_bits(string_to_bits(message))
    if method is Method.PVD:
        return embed_pvd(image_path, encoded, save_path)
    return embed_lsb_dct(image_path, encoded, save_path)


def extract_message(
    image_path: str | os.PathLike,
    num_bits: int,
    method: Method | str = Method.PVD,
) -> str:
    """Read ``num_bits`` Hamming-coded bits from a stego-image and decode them.

    Raises ValueError if no message can be recovered.
    """
    method = Method(method)
    if method is Method.PVD:
        bits = extract_pvd(image_path, num_bits)
    else:
        bits = extract_lsb_dct(image_path, num_bits)

    if not bits:
        raise ValueError("It was impossible to extract the message.")
    try:
        return bits_to_string(decode_bits(bits))
    except ValueError as exc:
        raise ValueError(f"It was impossible to extract the message: {exc}") from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stegokit",
        description="Hide text in images or recover it with PVD or LSB-DCT.",
    )
    methods = [m.value for m in Method]
    commands = parser.add_subparsers(dest="command", required=True)

    embed = commands.add_parser("embed", help="hide a message in an image")
    embed.add_argument("image", help="cover image")
    embed.add_argument("message", help="text to hide")
    embed.add_argument("output", help="where to save the stego-image")
    embed.add_argument("--method", choices=methods, default=Method.PVD.value)

    extract = commands.add_parser("extract", help="recover a message from an image")
    extract.add_argument("image", help="stego-image")
    extract.add_argument("num_bits", type=int, help="number of bits to extract")
    extract.add_argument("--method", choices=methods, default=Method.PVD.value)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    method = Method(args.method)
    try:
        if args.command == "embed":
            count = embed_message(args.image, args.message, args.output, method)
            print(f"Message was embedded using the method: {method.label}")
            print(f"THE NUMBER OF BITS EMBEDDED: {count}")
        else:
            if args.num_bits < 0:
                raise ValueError("number of bits must not be negative")
            print(extract_message(args.image, args.num_bits, method))
    except (ImageError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())