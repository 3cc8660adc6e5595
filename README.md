# stegokit

stegokit hides a short text message inside an image and reads it back out.
It offers two embedding methods:

- **PVD** (pixel-value differencing): works on the colour (RGB) image. Pixels
  are taken in horizontal pairs along each row, one colour channel at a time.
  The absolute difference of each pair falls into one of the ranges `0–7`,
  `8–15`, `16–31`, `32–63`, `64–127` or `128–255`, and the difference is
  rewritten so that its offset inside the range carries `log2(range width)`
  message bits.
- **LSB-DCT**: works on the greyscale image. The image is cut into 8×8 blocks,
  each block is transformed with the DCT and quantized with the standard JPEG
  luminance table, and one message bit is stored in the least significant bit
  of the coefficient at row 2, column 2.

Before embedding, the text is encoded as UTF-8 and turned into bits (8 per
byte, most significant bit first), and every group of 4 bits is expanded into
an 8-bit Hamming (8,4) code word. Decoding takes the four data bits back from
each code word; it does not correct errors.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The package installs a `stegokit` command with two subcommands.

Hide a message and save the stego image:

```
stegokit embed cover.png "secret message" stego.png --method pvd
```

Recover a message, giving the number of encoded bits to read:

```
stegokit extract stego.png 224 --method pvd
```

`--method` is `pvd` (the default) or `lsb-dct`. `embed` prints the method used
and the number of bits embedded; `extract` prints the decoded text. When an
image cannot be read or written, or no message can be recovered, the command
prints `Error: ...` to standard error and exits with status 1. The same
command line is available as `python -m stegokit.app`.

The number of bits to extract is 16 per byte of the UTF-8 message (8 bits per
byte, doubled by the Hamming code), so the 14-character message above needs
224 bits.

Save stego images in a lossless format such as PNG; lossy compression destroys
the hidden bits. The output format follows the file extension.

## Library use

The high-level helpers in `stegokit.app` take a `Method` (`Method.PVD` or
`Method.LSB_DCT`, or the strings `"pvd"` and `"lsb-dct"`):

- `embed_message(image_path, message, save_path, method)` encodes the text and
  writes the stego image, returning the number of bits embedded.
- `extract_message(image_path, num_bits, method)` reads the bits back and
  returns the decoded text. It raises `ValueError` when no bits, or a number of
  bits that does not form whole code words and bytes, could be read.

The building blocks can also be used on their own:

```python
from stegokit.hamming import string_to_bits, encode_bits, decode_bits, bits_to_string
from stegokit.pvd import embed_pvd, extract_pvd

bits = encode_bits(string_to_bits("Hi"))
embedded = embed_pvd("cover.png", bits, "stego.png")

recovered = extract_pvd("stego.png", len(bits))
print(bits_to_string(decode_bits(recovered)))  # Hi
```

- `stegokit.hamming`: `encode_hamming` and `decode_hamming` work on a single
  nibble and code word; `encode_bits` drops a trailing group of fewer than four
  bits; `decode_bits` and `bits_to_string` raise `ValueError` when the length
  is not a multiple of 8, and `bits_to_string` also when a value is not 0 or 1.
  Bytes that are not valid UTF-8 come back as replacement characters.
- `stegokit.pvd`: `get_pvd_range(diff)` returns the `(lower, upper)` range for
  a pixel difference, and the last range for anything outside them.
  `embed_pvd` returns the message length and writes nothing for an empty
  message (returning 0). `extract_pvd` raises `ValueError` when the image holds
  fewer bits than requested.
- `stegokit.lsb_dct`: `embed_lsb_dct` returns the message length even when the
  image has fewer blocks than bits; `extract_lsb_dct` returns at most one bit
  per block, so it may return fewer bits than requested. `dct_quantize` and
  `idct_dequantize` work on a single 8×8 block with `QUANT_TABLE` as the
  default table.
- `stegokit.images`: `load_grayscale`, `load_color` and `save_image` read and
  write numpy pixel arrays; a file that cannot be read or written raises
  `ImageError`.

## Capacity

- LSB-DCT stores one bit per full 8×8 block; partial blocks at the right and
  bottom edges are left alone.
- PVD stores between 3 and 7 bits per pixel pair and channel, depending on how
  different the two pixels already are; an odd last column is left alone.
  Pixels whose new value would leave the range 0–255 are clamped, which can
  corrupt the bits stored in that pair.

## What it does not do

stegokit has no graphical window for picking images or previewing results;
it is used from the command line or as a library.