"""Builders for Rust functions and match expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from baorust.code import Block, CodeBuilder, Doc, Fragment, Line


@dataclass
class Param:
    """A function parameter; an empty type renders the name alone (e.g. `self`)."""

    name: str
    ty: str

    def __str__(self) -> str:
        return self.name if not self.ty else f"{self.name}: {self.ty}"


class Arm:
    """A match arm: `pattern => body`."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self.lines: List[str] = []

    def body(self, body: str) -> "Arm":
        """Use a single-line body, rendered as `pattern => body,`."""
        self.lines = [body]
        return self

    def body_block(self, content: str) -> "Arm":
        """Append a multi-line body, rendered as a `pattern => { ... }` block."""
        self.lines.extend(content.splitlines())
        return self

    def _fragment(self) -> Fragment:
        if not self.lines:
            return Line(f"{self.pattern} => {{}},")
        if len(self.lines) == 1:
            return Line(f"{self.pattern} => {self.lines[0]},")
        return Block(
            header=f"{self.pattern} => {{",
            body=[Line(text) for text in self.lines],
            close="}",
        )


class Match:
    """A Rust `match` expression."""

    def __init__(self, expr: str) -> None:
        self.expr = expr
        self.arms: List[Arm] = []

    def arm(self, arm: Arm) -> "Match":
        self.arms.append(arm)
        return self

    def render(self, builder: CodeBuilder) -> CodeBuilder:
        """Render the expression into an existing builder."""
        return builder.emit(self)

    def build(self) -> str:
        return self.render(CodeBuilder.rust()).build()

    def to_fragments(self) -> List[Fragment]:
        return [
            Block(
                header=f"match {self.expr} {{",
                body=[arm._fragment() for arm in self.arms],
                close="}",
            )
        ]


class Fn:
    """A Rust function definition, public and synchronous by default."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._doc: Optional[str] = None
        self._attrs: List[str] = []
        self.is_public = True
        self.is_async = False
        self.params: List[Param] = []
        self.return_type: Optional[str] = None
        self.lines: List[str] = []

    def doc(self, doc: str) -> "Fn":
        self._doc = doc
        return self

    def attr(self, attr: str) -> "Fn":
        self._attrs.append(attr)
        return self

    def private(self) -> "Fn":
        self.is_public = False
        return self

    def async_(self) -> "Fn":
        self.is_async = True
        return self

    def param(self, param: Param) -> "Fn":
        self.params.append(param)
        return self

    def returns(self, ty: str) -> "Fn":
        self.return_type = ty
        return self

    def body_line(self, line: str) -> "Fn":
        """Append one line to the body."""
        self.lines.append(line)
        return self

    def body(self, content: str) -> "Fn":
        """Append content that may span several lines to the body."""
        self.lines.extend(content.splitlines())
        return self

    def body_match(self, match_expr: Match) -> "Fn":
        """Append a rendered match expression to the body."""
        return self.body(match_expr.build())

    def _signature(self) -> str:
        vis = "pub " if self.is_public else ""
        async_kw = "async " if self.is_async else ""
        params = ", ".join(str(param) for param in self.params)
        returns = f" -> {self.return_type}" if self.return_type is not None else ""
        return f"{vis}{async_kw}fn {self.name}({params}){returns} {{"

    def render(self, builder: CodeBuilder) -> CodeBuilder:
        """Render the function into an existing builder."""
        return builder.emit(self)

    def build(self) -> str:
        return self.render(CodeBuilder.rust()).build()

    def to_fragments(self) -> List[Fragment]:
        fragments: List[Fragment] = []
        if self._doc is not None:
            fragments.append(Doc(self._doc))
        fragments.extend(Line(f"#[{attr}]") for attr in self._attrs)
        fragments.append(
            Block(
                header=self._signature(),
                body=[Line(text) for text in self.lines],
                close="}",
            )
        )
        return fragments