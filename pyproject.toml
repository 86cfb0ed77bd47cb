[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "caes"
version = "0.1.0"
description = "Pure-Python signal-processing helpers (FFT and DFT spectra, apodisation windows, Remez FIR design) and small text and number formatting utilities."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dsp",
    "fft",
    "dft",
    "window",
    "apodization",
    "remez",
    "fir",
    "spectrum",
    "convolution",
    "formatting",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["caes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
