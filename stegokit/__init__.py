"""Hide text in images with pixel-value differencing or LSB of DCT coefficients, with Hamming (8,4) coding."""

__version__ = "0.1.0"