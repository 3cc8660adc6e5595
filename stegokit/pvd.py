"""Pixel-value differencing steganography on colour images."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

import numpy as np

from .images import load_color, save_image

PVD_RANGES: tuple[tuple[int, int], ...] = (
    (0, 7),
    (8, 15),
    (16, 31),
    (32, 63),
    (64, 127),
    (128, 255),
)


def get_pvd_range(diff: int) -> tuple[int, int]:
    """Return the (lower, upper) range holding ``diff``; the last range otherwise."""
    return next(
        (bounds for bounds in PVD_RANGES if bounds[0] <= diff <= bounds[1]),
        PVD_RANGES[-1],
    )


def _capacity(lower: int, upper: int) -> int:
    """Number of bits a pair with this range carries: floor(log2(width))."""
    return (upper - lower + 1).bit_length() - 1


def _slots(height: int, width: int) -> Iterator[tuple[int, int, int]]:
    """Yield (row, left column, channel) for each horizontal pixel pair."""
    for row in range(height):
        for col in range(0, width - 1, 2):
            for channel in range(3):
                yield row, col, channel


def _clamp(value: int) -> int:
    return max(0, min(255, value))


def embed_pvd(
    image_path: str | os.PathLike,
    message_bits: Iterable[int],
    output_path: str | os.PathLike,
) -> int:
    """Hide bits in the differences of horizontal pixel pairs.

    Returns the length of the message. An empty message writes nothing and
    returns 0.
    """
    image = load_color(image_path).astype(np.int32)
    bits = [int(bit) for bit in message_bits]
    if not bits:
        return 0

    height, width = image.shape[:2]
    pointer = 0
    for row, col, channel in _slots(height, width):
        if pointer >= len(bits):
            break
        first = int(image[row, col, channel])
        second = int(image[row, col + 1, channel])
        diff = abs(first - second)

        lower, upper = get_pvd_range(diff)
        count = _capacity(lower, upper)
        chunk = bits[pointer:pointer + count]
        pointer += len(chunk)
        chunk += [0] * (count - len(chunk))

        value = 0
        for bit in chunk:
            value = (value << 1) | bit

        delta = lower + value - diff
        half_up = -(-delta // 2)
        half_down = delta // 2
        if first >= second:
            first, second = first + half_up, second - half_down
        else:
            first, second = first - half_down, second + half_up

        image[row, col, channel] = _clamp(first)
        image[row, col + 1, channel] = _clamp(second)

    save_image(output_path, image.astype(np.uint8))
    return len(bits)


def extract_pvd(stego_path: str | os.PathLike, num_bits: int) -> list[int]:
    """Read ``num_bits`` bits back from pixel-pair differences.

    Raises ValueError if the image holds fewer than ``num_bits`` bits.
    """
    image = load_color(stego_path).astype(np.int32)
    height, width = image.shape[:2]
    bits: list[int] = []

    for row, col, channel in _slots(height, width):
        if len(bits) >= num_bits:
            break
        diff = abs(int(image[row, col, channel]) - int(image[row, col + 1, channel]))
        lower, upper = get_pvd_range(diff)
        count = _capacity(lower, upper)
        if count == 0:
            continue
        value = diff - lower
        bits.extend((value >> shift) & 1 for shift in range(count - 1, -1, -1))

    del bits[num_bits:]
    if len(bits) < num_bits:
        raise ValueError(
            f"only {len(bits)} bits could be extracted, {num_bits} requested"
        )
    return bits