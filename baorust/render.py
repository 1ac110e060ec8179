"""Rendering of import sets and whole Rust source files."""

from __future__ import annotations

from typing import Iterable, Mapping, Optional, Union

from baorust.code import CodeBuilder


def _ordered(symbols: Iterable[str]) -> list:
    if isinstance(symbols, (set, frozenset)):
        return sorted(symbols)
    return list(dict.fromkeys(symbols))


def render_imports(imports: Mapping[str, Iterable[str]]) -> str:
    """Render a module-to-symbols mapping as Rust `use` statements."""
    lines = []
    for module, symbols in imports.items():
        names = _ordered(symbols)
        if not names:
            lines.append(f"use {module};")
        elif len(names) == 1:
            lines.append(f"use {module}::{names[0]};")
        else:
            lines.append(f"use {module}::{{{', '.join(names)}}};")
    return "\n".join(lines)


def render_rust(
    imports: Mapping[str, Iterable[str]],
    code: Union[CodeBuilder, str],
    header: Optional[str] = None,
) -> str:
    """Combine an optional header, imports and code with blank lines between them."""
    code_str = code.build() if isinstance(code, CodeBuilder) else code
    parts = [header] if header is not None else []
    if imports:
        parts.append(render_imports(imports))
    parts.append(code_str)
    return "\n\n".join(parts)