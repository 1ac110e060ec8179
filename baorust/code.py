"""Line-oriented code builder and the fragments it renders."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, List, Optional, Protocol, Union


@dataclass(frozen=True)
class Indent:
    """One level of indentation."""

    unit: str

    RUST: ClassVar["Indent"]


Indent.RUST = Indent("    ")


@dataclass
class Line:
    """A single line of code at the current indentation."""

    text: str


@dataclass
class Doc:
    """A `///` documentation comment, possibly spanning several lines."""

    text: str


@dataclass
class Raw:
    """Pre-rendered text, emitted line by line at the current indentation."""

    text: str


@dataclass
class Blank:
    """An empty line."""


@dataclass
class Block:
    """A header line, an indented body and an optional closing line."""

    header: str
    body: List["Fragment"] = field(default_factory=list)
    close: Optional[str] = None


Fragment = Union[Line, Doc, Raw, Blank, Block]


class Renderable(Protocol):
    """Anything that can describe itself as code fragments."""

    def to_fragments(self) -> List[Fragment]: ...


class CodeBuilder:
    """Accumulates indented lines of code.

    Every method returns the builder, so calls can be chained.
    """

    def __init__(self, indent: Indent = Indent.RUST) -> None:
        self._unit = indent.unit
        self._level = 0
        self._lines: List[str] = []

    @classmethod
    def rust(cls) -> "CodeBuilder":
        """A builder using Rust's four-space indentation."""
        return cls(Indent.RUST)

    def _push(self, text: str) -> None:
        self._lines.append(self._unit * self._level + text if text else "")

    def line(self, text: str) -> "CodeBuilder":
        self._push(text)
        return self

    def rust_doc(self, text: str) -> "CodeBuilder":
        for doc_line in text.splitlines() or [""]:
            self._push(f"/// {doc_line}" if doc_line else "///")
        return self

    def raw(self, text: str) -> "CodeBuilder":
        for raw_line in text.splitlines():
            self._push(raw_line)
        return self

    def blank(self) -> "CodeBuilder":
        self._lines.append("")
        return self

    def indent(self) -> "CodeBuilder":
        self._level += 1
        return self

    def dedent(self) -> "CodeBuilder":
        self._level = max(0, self._level - 1)
        return self

    def apply(self, fragment: Fragment) -> "CodeBuilder":
        """Render one fragment into the builder."""
        match fragment:
            case Line(text=text):
                self.line(text)
            case Doc(text=text):
                self.rust_doc(text)
            case Raw(text=text):
                self.raw(text)
            case Blank():
                self.blank()
            case Block(header=header, body=body, close=close):
                self.line(header).indent()
                for inner in body:
                    self.apply(inner)
                self.dedent()
                if close is not None:
                    self.line(close)
            case _:
                raise TypeError(f"not a code fragment: {fragment!r}")
        return self

    def emit(self, node: Renderable) -> "CodeBuilder":
        """Render every fragment of a renderable node."""
        for fragment in node.to_fragments():
            self.apply(fragment)
        return self

    def build(self) -> str:
        """The accumulated code, each line terminated by a newline."""
        if not self._lines:
            return ""
        return "\n".join(self._lines) + "\n"