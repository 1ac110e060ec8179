"""Building blocks for generating Rust source: code builder, files, syntax, naming and types."""

__version__ = "0.4.0"