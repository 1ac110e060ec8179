"""Builder for Rust enums."""

from __future__ import annotations

from typing import List, Optional

from baorust.code import Block, CodeBuilder, Doc, Fragment, Line


class Variant:
    """An enum variant, optionally carrying tuple data."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._doc: Optional[str] = None
        self.data: Optional[str] = None

    @property
    def documentation(self) -> Optional[str]:
        return self._doc

    def doc(self, doc: str) -> "Variant":
        self._doc = doc
        return self

    def tuple(self, data: str) -> "Variant":
        """Set tuple data, rendered as `Name(data)`."""
        self.data = data
        return self

    def _fragments(self) -> List[Fragment]:
        fragments: List[Fragment] = []
        if self._doc is not None:
            fragments.append(Doc(self._doc))
        text = f"{self.name}({self.data})," if self.data is not None else f"{self.name},"
        fragments.append(Line(text))
        return fragments


class Enum:
    """A Rust enum definition, public by default."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._doc: Optional[str] = None
        self.derives: List[str] = []
        self.attrs: List[str] = []
        self.variants: List[Variant] = []
        self.is_public = True

    def doc(self, doc: str) -> "Enum":
        self._doc = doc
        return self

    def derive(self, derive: str) -> "Enum":
        self.derives.append(derive)
        return self

    def attr(self, attr: str) -> "Enum":
        self.attrs.append(attr)
        return self

    def variant(self, variant: Variant) -> "Enum":
        self.variants.append(variant)
        return self

    def private(self) -> "Enum":
        self.is_public = False
        return self

    def render(self, builder: CodeBuilder) -> CodeBuilder:
        """Render the enum into an existing builder."""
        return builder.emit(self)

    def build(self) -> str:
        return self.render(CodeBuilder.rust()).build()

    def to_fragments(self) -> List[Fragment]:
        vis = "pub " if self.is_public else ""
        fragments: List[Fragment] = []
        if self._doc is not None:
            fragments.append(Doc(self._doc))
        if self.derives:
            fragments.append(Line(f"#[derive({', '.join(self.derives)})]"))
        fragments.extend(Line(f"#[{attr}]") for attr in self.attrs)
        if not self.variants:
            fragments.append(Line(f"{vis}enum {self.name} {{}}"))
        else:
            body: List[Fragment] = []
            for variant in self.variants:
                body.extend(variant._fragments())
            fragments.append(
                Block(header=f"{vis}enum {self.name} {{", body=body, close="}")
            )
        return fragments