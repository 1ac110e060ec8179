"""Identifier case conversion and Rust naming conventions."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, FrozenSet


def to_snake_case(name: str) -> str:
    """Convert an identifier such as `HelloWorld` or `my-command` to snake_case."""
    text = re.sub(r"[\s\-]+", "_", name)
    text = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", text)
    text = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", text)
    return text.lower()


def to_pascal_case(name: str) -> str:
    """Convert an identifier such as `hello_world` or `my-command` to PascalCase."""
    parts = re.split(r"[_\-\s]+", name)
    return "".join(part[:1].upper() + part[1:] for part in parts if part)


@dataclass(frozen=True)
class NamingConvention:
    """How a target language names types, files and fields."""

    command_to_type: Callable[[str], str]
    command_to_file: Callable[[str], str]
    field_to_name: Callable[[str], str]
    reserved_words: FrozenSet[str]
    escape_reserved: Callable[[str], str]

    def type_name(self, name: str) -> str:
        return self.command_to_type(name)

    def file_name(self, name: str) -> str:
        return self.command_to_file(name)

    def field_name(self, name: str) -> str:
        return self.field_to_name(name)

    def is_reserved(self, name: str) -> bool:
        return name in self.reserved_words

    def safe_name(self, name: str) -> str:
        """The name, escaped if it is a reserved word."""
        return self.escape_reserved(name) if self.is_reserved(name) else name


def _escape_rust_reserved(name: str) -> str:
    return f"r#{name}"


RUST_NAMING = NamingConvention(
    command_to_type=to_pascal_case,
    command_to_file=to_snake_case,
    field_to_name=to_snake_case,
    reserved_words=frozenset(
        {
            "as", "async", "await", "break", "const", "continue", "crate", "dyn", "else",
            "enum", "extern", "false", "fn", "for", "if", "impl", "in", "let", "loop",
            "match", "mod", "move", "mut", "pub", "ref", "return", "self", "Self",
            "static", "struct", "super", "trait", "true", "type", "unsafe", "use",
            "where", "while", "abstract", "become", "box", "do", "final", "macro",
            "override", "priv", "try", "typeof", "unsized", "virtual", "yield",
        }
    ),
    escape_reserved=_escape_rust_reserved,
)