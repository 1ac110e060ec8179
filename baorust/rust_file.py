"""Structured Rust source files: use statements followed by body items."""

from __future__ import annotations

from typing import Iterable, List

from baorust.code import CodeBuilder, Fragment, Indent, Line, Renderable


class Use:
    """A Rust `use` statement."""

    def __init__(self, module: str) -> None:
        self.module = module
        self._symbols: List[str] = []

    def symbol(self, symbol: str) -> "Use":
        self._symbols.append(symbol)
        return self

    def symbols(self, symbols: Iterable[str]) -> "Use":
        self._symbols.extend(symbols)
        return self

    def __str__(self) -> str:
        if not self._symbols:
            return f"use {self.module};"
        if len(self._symbols) == 1:
            return f"use {self.module}::{self._symbols[0]};"
        return f"use {self.module}::{{{', '.join(self._symbols)}}};"

    def to_fragments(self) -> List[Fragment]:
        return [Line(str(self))]


class RustFile:
    """A Rust file made of use statements and body items separated by blank lines."""

    def __init__(self) -> None:
        self._uses: List[Use] = []
        self._body: List[List[Fragment]] = []

    def use_stmt(self, use: Use) -> "RustFile":
        self._uses.append(use)
        return self

    def use_stmts(self, uses: Iterable[Use]) -> "RustFile":
        self._uses.extend(uses)
        return self

    def add(self, node: Renderable) -> "RustFile":
        self._body.append(list(node.to_fragments()))
        return self

    def add_all(self, nodes: Iterable[Renderable]) -> "RustFile":
        for node in nodes:
            self.add(node)
        return self

    def render(self) -> str:
        """Render with Rust's four-space indentation."""
        return self.render_with_indent(Indent.RUST)

    def render_with_header(self, header: str) -> str:
        content = self.render()
        return f"{header}\n" if not content else f"{header}\n\n{content}"

    def render_with_indent(self, indent: Indent) -> str:
        builder = CodeBuilder(indent)
        for use in self._uses:
            builder.emit(use)
        if self._uses and self._body:
            builder.blank()
        for position, fragments in enumerate(self._body):
            if position:
                builder.blank()
            for fragment in fragments:
                builder.apply(fragment)
        return builder.build()

    def is_empty(self) -> bool:
        return not self._uses and not self._body


class RawCode:
    """Verbatim code added to a file body, one line per fragment."""

    def __init__(self, code: str) -> None:
        self.code = code

    @classmethod
    def lines(cls, lines: Iterable[str]) -> "RawCode":
        return cls("\n".join(lines))

    def to_fragments(self) -> List[Fragment]:
        return [Line(text) for text in self.code.splitlines()]