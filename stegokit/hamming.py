"""Hamming (8,4) coding and conversion between text and bit sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_MSB_FIRST = range(7, -1, -1)


def _bits_to_int(bits: Iterable[int]) -> int:
    value = 0
    for bit in bits:
        value = (value << 1) | int(bit)
    return value


def _byte_to_bits(byte: int) -> list[int]:
    return [(byte >> shift) & 1 for shift in _MSB_FIRST]


def encode_hamming(nibble: int) -> int:
    """Encode the low four bits of ``nibble`` into an 8-bit code word.

    The data bits occupy the high half of the result, the parity bits the
    low half.
    """
    a = (nibble >> 3) & 1
    b = (nibble >> 2) & 1
    c = (nibble >> 1) & 1
    d = nibble & 1

    e = a ^ b
    f = c ^ d
    g = a ^ c
    h = b ^ d

    return (
        (a << 7) | (b << 6) | (c << 5) | (d << 4)
        | (e << 3) | (f << 2) | (g << 1) | h
    )


def decode_hamming(byte: int) -> int:
    """Return the four data bits of a code word (no error correction)."""
    return (byte >> 4) & 0x0F


def encode_bits(bits: Iterable[int]) -> list[int]:
    """Encode bits four at a time into 8-bit code words.

    A trailing group of fewer than four bits is dropped.
    """
    encoded: list[int] = []
    stream = iter(bits)
    for group in zip(stream, stream, stream, stream):
        encoded.extend(_byte_to_bits(encode_hamming(_bits_to_int(group))))
    return encoded


def decode_bits(encoded: Sequence[int]) -> list[int]:
    """Decode a sequence of 8-bit code words back into data bits."""
    if len(encoded) % 8:
        raise ValueError(
            f"encoded length {len(encoded)} is not a multiple of 8"
        )
    decoded: list[int] = []
    stream = iter(encoded)
    for group in zip(*[stream] * 8):
        nibble = decode_hamming(_bits_to_int(group))
        decoded.extend((nibble >> shift) & 1 for shift in range(3, -1, -1))
    return decoded


def string_to_bits(message: str | bytes) -> list[int]:
    """Turn text (UTF-8) or bytes into bits, most significant bit first."""
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    return [bit for byte in data for bit in _byte_to_bits(byte)]


def bits_to_string(bits: Sequence[int]) -> str:
    """Turn a bit sequence back into text.

    Raises ValueError if the length is not a multiple of 8 or a value is not
    a bit.
    """
    if len(bits) % 8:
        raise ValueError(f"bit count {len(bits)} is not a multiple of 8")
    if any(bit not in (0, 1) for bit in bits):
        raise ValueError("bit sequence holds values other than 0 and 1")
    stream = iter(bits)
    data = bytes(_bits_to_int(group) for group in zip(*[stream] * 8))
    return data.decode("utf-8", errors="replace")