import numpy as np
import pytest

from stegokit.images import ImageError, load_color, load_grayscale, save_image


def test_grayscale_round_trip(tmp_path):
    pixels = np.arange(64, dtype=np.uint8).reshape(8, 8)
    path = tmp_path / "grey.png"
    save_image(path, pixels)
    loaded = load_grayscale(path)
    assert loaded.shape == (8, 8)
    assert np.array_equal(loaded, pixels)


def test_color_round_trip(tmp_path):
    rng = np.random.default_rng(1)
    pixels = rng.integers(0, 256, size=(5, 7, 3), dtype=np.uint8)
    path = tmp_path / "colour.png"
    save_image(path, pixels)
    loaded = load_color(path)
    assert np.array_equal(loaded, pixels)


def test_grayscale_of_colour_image_is_two_dimensional(tmp_path):
    pixels = np.full((4, 6, 3), 128, dtype=np.uint8)
    path = tmp_path / "colour.png"
    save_image(path, pixels)
    loaded = load_grayscale(path)
    assert loaded.shape == (4, 6)
    assert np.all(loaded == 128)


def test_color_of_grey_image_repeats_channels(tmp_path):
    pixels = np.full((3, 3), 200, dtype=np.uint8)
    path = tmp_path / "grey.png"
    save_image(path, pixels)
    loaded = load_color(path)
    assert loaded.shape == (3, 3, 3)
    assert np.all(loaded == 200)


def test_loaded_array_is_writable(tmp_path):
    path = tmp_path / "grey.png"
    save_image(path, np.zeros((2, 2), dtype=np.uint8))
    loaded = load_grayscale(path)
    loaded[0, 0] = 9
    assert loaded[0, 0] == 9


def test_missing_file_raises(tmp_path):
    with pytest.raises(ImageError):
        load_grayscale(tmp_path / "no_image.png")
    with pytest.raises(ImageError):
        load_color(tmp_path / "no_image.png")


def test_non_image_file_raises(tmp_path):
    path = tmp_path / "text.png"
    path.write_text("not an image")
    with pytest.raises(ImageError):
        load_color(path)


def test_save_unknown_extension_raises(tmp_path):
    with pytest.raises(ImageError):
        save_image(tmp_path / "out.unknownext", np.zeros((2, 2), dtype=np.uint8))


def test_save_bad_shape_raises(tmp_path):
    with pytest.raises(ValueError):
        save_image(tmp_path / "out.png", np.zeros(5, dtype=np.uint8))