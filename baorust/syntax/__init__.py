"""Builders for Rust structs, enums, functions, match expressions and impl blocks."""