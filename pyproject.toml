[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "poseidon_merkle"
version = "0.1.0"
description = "Poseidon hash over the BN254 scalar field and Merkle trees with membership proofs"
requires-python = ">=3.10"
dependencies = []
keywords = ["poseidon", "merkle", "bn254", "hash", "zero-knowledge", "cryptography"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["poseidon_merkle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
