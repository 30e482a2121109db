[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gnomics"
version = "1.0.0"
description = "Building blocks for sparse distributed representations: dendrite memory with permanence learning, output history with change tracking, and a discrete category encoder"
requires-python = ">=3.10"
keywords = [
    "machine-learning",
    "neuroscience",
    "htm",
    "sparse-distributed-representations",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]
dependencies = [
    "bitarray",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gnomics"]

[tool.pytest.ini_options]
addopts = "-ra"
