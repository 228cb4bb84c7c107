[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tronctl"
version = "0.1.0"
description = "TRON address conversion, ABI encoding, CLI configuration and parsing of transaction parameters"
requires-python = ">=3.10"
keywords = ["tron", "trx", "blockchain", "abi", "base58", "trc10", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Topic :: Utilities",
]
dependencies = [
    "pycryptodome",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tronctl = "tronctl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tronctl"]

[tool.pytest.ini_options]
addopts = "-ra"
