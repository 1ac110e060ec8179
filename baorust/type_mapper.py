"""Mapping of manifest types onto Rust types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ArgType(Enum):
    """Type of a command argument or flag."""

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    PATH = "path"


class DatabaseType(Enum):
    """Supported database engines."""

    POSTGRES = "postgres"
    MYSQL = "mysql"
    SQLITE = "sqlite"


@dataclass(frozen=True)
class ContextFieldType:
    """Kind of a context field: a database pool, or an HTTP client when `database` is None."""

    database: Optional[DatabaseType] = None


_ARG_TYPES = {
    ArgType.STRING: "String",
    ArgType.INT: "i64",
    ArgType.FLOAT: "f64",
    ArgType.BOOL: "bool",
    ArgType.PATH: "std::path::PathBuf",
}

_POOL_TYPES = {
    DatabaseType.POSTGRES: "sqlx::PgPool",
    DatabaseType.MYSQL: "sqlx::MySqlPool",
    DatabaseType.SQLITE: "sqlx::SqlitePool",
}


class RustTypeMapper:
    """Maps argument and context types to Rust type names."""

    def language(self) -> str:
        return "rust"

    def map_arg_type(self, arg_type: ArgType) -> str:
        return _ARG_TYPES[arg_type]

    def map_optional_arg_type(self, arg_type: ArgType) -> str:
        return f"Option<{self.map_arg_type(arg_type)}>"

    def map_context_type(self, field_type: ContextFieldType) -> str:
        if field_type.database is None:
            return "reqwest::Client"
        return _POOL_TYPES[field_type.database]