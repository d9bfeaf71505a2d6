[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seedsp"
version = "0.1.0"
description = "Sample-by-sample audio building blocks: envelopes, dynamics, effects and a stereo reverb"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dsp",
    "audio",
    "synthesis",
    "envelope",
    "compressor",
    "limiter",
    "reverb",
    "effects",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["seedsp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
