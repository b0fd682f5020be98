[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spongenet"
version = "0.1.0"
description = "Building blocks for a user-space TCP stack: wrapping sequence numbers, network-order parsing, Internet checksums and hexdumps"
requires-python = ">=3.10"
dependencies = []
keywords = ["tcp", "sequence numbers", "checksum", "networking", "parser", "hexdump"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spongenet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
