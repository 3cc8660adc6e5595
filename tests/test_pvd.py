import numpy as np
import pytest

from stegokit.hamming import bits_to_string, decode_bits, encode_bits, string_to_bits
from stegokit.images import ImageError, load_color, save_image
from stegokit.pvd import embed_pvd, extract_pvd, get_pvd_range


@pytest.fixture
def cover(tmp_path):
    path = tmp_path / "cover.png"
    save_image(path, np.full((2, 2, 3), 128, dtype=np.uint8))
    return path


def test_get_pvd_range_values_and_out_of_range():
    assert get_pvd_range(0) == (0, 7)
    assert get_pvd_range(255) == (128, 255)
    assert get_pvd_range(-1) == (128, 255)
    assert get_pvd_range(300) == (128, 255)


@pytest.mark.parametrize(
    "diff, expected",
    [(7, (0, 7)), (8, (8, 15)), (31, (16, 31)), (32, (32, 63)), (127, (64, 127))],
)
def test_get_pvd_range_boundaries(diff, expected):
    assert get_pvd_range(diff) == expected


def test_embed_returns_message_length(cover, tmp_path):
    message = [1, 0, 1, 1, 0, 1]
    out = tmp_path / "stego_good.png"
    assert embed_pvd(cover, message, out) == len(message)
    assert load_color(out).shape == (2, 2, 3)


def test_embed_empty_message_returns_zero(cover, tmp_path):
    out = tmp_path / "stego_empty.png"
    assert embed_pvd(cover, [], out) == 0
    assert not out.exists()


def test_embed_bad_path_raises(tmp_path):
    with pytest.raises(ImageError):
        embed_pvd(tmp_path / "no_such.png", [0, 1], tmp_path / "stego_bad.png")


def test_extract_matches_message(cover, tmp_path):
    message = [1, 0, 1, 1, 0, 1]
    stego = tmp_path / "stego.png"
    assert embed_pvd(cover, message, stego) == len(message)
    assert extract_pvd(stego, len(message)) == message


def test_extract_more_bits_than_embedded(cover, tmp_path):
    message = [1, 1, 0]
    stego = tmp_path / "stego_over.png"
    assert embed_pvd(cover, message, stego) == len(message)
    extracted = extract_pvd(stego, 5)
    assert len(extracted) == 5
    assert extracted[:3] == message


def test_extract_bad_path_raises(tmp_path):
    with pytest.raises(ImageError):
        extract_pvd(tmp_path / "nonexistent.png", 4)


def test_extract_beyond_capacity_raises(cover):
    with pytest.raises(ValueError):
        extract_pvd(cover, 1000)


def test_text_round_trip_through_hamming(tmp_path):
    cover_path = tmp_path / "cover.png"
    save_image(cover_path, np.full((16, 16, 3), 100, dtype=np.uint8))
    encoded = encode_bits(string_to_bits("Hi"))
    stego = tmp_path / "stego.png"
    assert embed_pvd(cover_path, encoded, stego) == len(encoded)
    extracted = extract_pvd(stego, len(encoded))
    assert bits_to_string(decode_bits(extracted)) == "Hi"