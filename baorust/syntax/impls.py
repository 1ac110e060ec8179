"""Builder for Rust impl blocks."""

from __future__ import annotations

from typing import List, Optional

from baorust.code import Blank, Block, CodeBuilder, Fragment
from baorust.syntax.fns import Fn


class Impl:
    """An `impl` block for a type, optionally implementing a trait."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        self.trait_name: Optional[str] = None
        self.methods: List[Fn] = []

    def for_trait(self, trait_name: str) -> "Impl":
        self.trait_name = trait_name
        return self

    def method(self, method: Fn) -> "Impl":
        self.methods.append(method)
        return self

    def _header(self) -> str:
        if self.trait_name is not None:
            return f"impl {self.trait_name} for {self.type_name} {{"
        return f"impl {self.type_name} {{"

    def render(self, builder: CodeBuilder) -> CodeBuilder:
        """Render the block into an existing builder."""
        return builder.emit(self)

    def build(self) -> str:
        return self.render(CodeBuilder.rust()).build()

    def to_fragments(self) -> List[Fragment]:
        body: List[Fragment] = []
        for position, method in enumerate(self.methods):
            if position:
                body.append(Blank())
            body.extend(method.to_fragments())
        return [Block(header=self._header(), body=body, close="}")]