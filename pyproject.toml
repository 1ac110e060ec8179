[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "baorust"
version = "0.4.0"
description = "Building blocks for generating Rust source: a code builder, file assembly, syntax builders, naming and type mapping"
requires-python = ">=3.10"
keywords = ["codegen", "generator", "rust", "source", "builder"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["baorust"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
