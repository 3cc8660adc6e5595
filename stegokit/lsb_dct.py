"""Hiding bits in the least significant bit of quantised DCT coefficients."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from itertools import islice

import numpy as np

from .images import load_grayscale, save_image

BLOCK_SIZE = 8

QUANT_TABLE = np.array(
    [
        [16, 11, 10, 16, 24, 40, 51, 61],
        [12, 12, 14, 19, 26, 58, 60, 55],
        [14, 13, 16, 24, 40, 57, 69, 56],
        [14, 17, 22, 29, 51, 87, 80, 62],
        [18, 22, 37, 56, 68, 109, 103, 77],
        [24, 35, 55, 64, 81, 104, 113, 92],
        [49, 64, 78, 87, 103, 121, 120, 101],
        [72, 92, 95, 98, 112, 100, 103, 99],
    ],
    dtype=np.int32,
)

_CARRIER = (2, 2)


def _dct_matrix(size: int) -> np.ndarray:
    k = np.arange(size).reshape(-1, 1)
    n = np.arange(size).reshape(1, -1)
    matrix = np.cos(np.pi * (2 * n + 1) * k / (2 * size))
    scale = np.full((size, 1), np.sqrt(2.0 / size))
    scale[0, 0] = np.sqrt(1.0 / size)
    return (matrix * scale).astype(np.float32)


_DCT = _dct_matrix(BLOCK_SIZE)


def _round_half_away(values: np.ndarray) -> np.ndarray:
    return np.sign(values) * np.floor(np.abs(values) + np.float32(0.5))


def _check_block(block: np.ndarray) -> None:
    if block.shape != (BLOCK_SIZE, BLOCK_SIZE):
        raise ValueError(f"block must be {BLOCK_SIZE}x{BLOCK_SIZE}, got {block.shape}")


def dct_quantize(block: np.ndarray, quant_table: np.ndarray = QUANT_TABLE) -> np.ndarray:
    """Apply a 2-D DCT to an 8x8 pixel block and quantise the coefficients."""
    data = np.asarray(block, dtype=np.float32)
    _check_block(data)
    coeffs = _DCT @ data @ _DCT.T
    quantised = _round_half_away(coeffs / np.asarray(quant_table, dtype=np.float32))
    return quantised.astype(np.float32)


def idct_dequantize(block: np.ndarray, quant_table: np.ndarray = QUANT_TABLE) -> np.ndarray:
    """Dequantise an 8x8 coefficient block and return its uint8 pixels."""
    coeffs = np.asarray(block, dtype=np.float32)
    _check_block(coeffs)
    coeffs = coeffs * np.asarray(quant_table, dtype=np.float32)
    pixels = _DCT.T @ coeffs @ _DCT
    return np.clip(np.rint(pixels), 0, 255).astype(np.uint8)


def _block_origins(shape: tuple[int, ...]) -> Iterator[tuple[int, int]]:
    rows, cols = shape[:2]
    for y in range(0, rows - BLOCK_SIZE + 1, BLOCK_SIZE):
        for x in range(0, cols - BLOCK_SIZE + 1, BLOCK_SIZE):
            yield y, x


def embed_lsb_dct(
    image_path: str | os.PathLike,
    message_bits: Iterable[int],
    output_path: str | os.PathLike,
) -> int:
    """Hide one bit per 8x8 block of a grey image and save the result.

    Returns the length of the message, even when the image has fewer blocks.
    """
    bits = [int(bit) for bit in message_bits]
    image = load_grayscale(image_path)

    for (y, x), bit in zip(_block_origins(image.shape), bits):
        window = (slice(y, y + BLOCK_SIZE), slice(x, x + BLOCK_SIZE))
        coeffs = dct_quantize(image[window])
        coeff = int(coeffs[_CARRIER])
        coeffs[_CARRIER] = (coeff & ~1) | (bit & 1)
        image[window] = idct_dequantize(coeffs)

    save_image(output_path, image)
    return len(bits)


def extract_lsb_dct(stego_path: str | os.PathLike, num_bits: int) -> list[int]:
    """Read up to ``num_bits`` bits, one per 8x8 block, from a grey image."""
    image = load_grayscale(stego_path)
    return [
        int(
            dct_quantize(image[y:y + BLOCK_SIZE, x:x + BLOCK_SIZE])[_CARRIER]
        ) & 1
        for y, x in islice(_block_origins(image.shape), num_bits)
    ]