"""Builder for Rust structs."""

from __future__ import annotations

from typing import List, Optional

from baorust.code import Block, CodeBuilder, Doc, Fragment, Line


class Field:
    """A struct field, public by default."""

    def __init__(self, name: str, ty: str) -> None:
        self.name = name
        self.ty = ty
        self._doc: Optional[str] = None
        self.attrs: List[str] = []
        self.is_public = True

    @property
    def documentation(self) -> Optional[str]:
        return self._doc

    def doc(self, doc: str) -> "Field":
        self._doc = doc
        return self

    def attr(self, attr: str) -> "Field":
        self.attrs.append(attr)
        return self

    def private(self) -> "Field":
        self.is_public = False
        return self

    def _fragments(self) -> List[Fragment]:
        vis = "pub " if self.is_public else ""
        fragments: List[Fragment] = []
        if self._doc is not None:
            fragments.append(Doc(self._doc))
        fragments.extend(Line(f"#[{attr}]") for attr in self.attrs)
        fragments.append(Line(f"{vis}{self.name}: {self.ty},"))
        return fragments


class Struct:
    """A Rust struct definition, public by default."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._doc: Optional[str] = None
        self.derives: List[str] = []
        self.attrs: List[str] = []
        self.fields: List[Field] = []
        self.is_public = True

    def doc(self, doc: str) -> "Struct":
        self._doc = doc
        return self

    def derive(self, derive: str) -> "Struct":
        self.derives.append(derive)
        return self

    def attr(self, attr: str) -> "Struct":
        self.attrs.append(attr)
        return self

    def field(self, field: Field) -> "Struct":
        self.fields.append(field)
        return self

    def private(self) -> "Struct":
        self.is_public = False
        return self

    def render(self, builder: CodeBuilder) -> CodeBuilder:
        """Render the struct into an existing builder."""
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
        if not self.fields:
            fragments.append(Line(f"{vis}struct {self.name} {{}}"))
        else:
            body: List[Fragment] = []
            for field in self.fields:
                body.extend(field._fragments())
            fragments.append(
                Block(header=f"{vis}struct {self.name} {{", body=body, close="}")
            )
        return fragments