[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moviecbr"
version = "0.1.0"
description = "Case-based reasoning movie finder that ranks titles by similarity to a chosen movie"
requires-python = ">=3.10"
dependencies = []
keywords = ["case-based reasoning", "recommendation", "similarity", "movies", "levenshtein", "jaccard"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: X11 Applications",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
moviecbr = "moviecbr.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["moviecbr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
