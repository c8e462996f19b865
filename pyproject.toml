[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ckks"
version = "0.1.0"
description = "Encoder for the CKKS homomorphic encryption scheme: complex vectors to polynomial coefficients and back"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["ckks", "homomorphic encryption", "encoding", "canonical embedding", "cryptography"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ckks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
