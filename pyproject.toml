[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stegokit"
version = "0.1.0"
description = "Hide text in images with pixel-value differencing or LSB of quantized DCT coefficients"
requires-python = ">=3.10"
keywords = ["steganography", "pvd", "dct", "lsb", "hamming", "image"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
stegokit = "stegokit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["stegokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
