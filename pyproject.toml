[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "specrypt"
version = "0.1.0"
description = "Readable reference implementations of AES-128 (block, CTR), BIP-340 Schnorr signatures and BLS12-381 hash-to-field and map-to-curve"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "aes",
    "ctr",
    "aes-ni",
    "schnorr",
    "bip-340",
    "secp256k1",
    "bls12-381",
    "hash-to-curve",
    "expand-message-xmd",
    "specification",
]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["specrypt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
