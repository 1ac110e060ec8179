# baorust

Building blocks for generating Rust source text from Python.

The package produces strings of Rust code. It does not run a Rust toolchain and does not check that the code it produces compiles.

## What is included

- `baorust.code`: `CodeBuilder` accumulates indented lines. Its methods are `line`, `rust_doc`, `raw`, `blank`, `indent`, `dedent`, `apply` and `emit`, and each one returns the builder. `build()` returns the text, with each line ended by a newline. `CodeBuilder.rust()` uses four-space indentation (`Indent.RUST`). Code is described by the fragment types `Line`, `Doc` (`///` comments), `Raw`, `Blank` and `Block` (a header, an indented body and an optional closing line).
- `baorust.rust_file`: `RustFile` groups `Use` statements and body items into one file. A blank line separates the `use` statements from the body, and another separates each pair of body items. `render_with_header` puts a comment line at the top. `RawCode` adds code as it is given.
- `baorust.syntax`: builders for Rust items. Each builder has `build()` and `to_fragments()`.
  - `syntax.structs`: `Struct` and `Field`
  - `syntax.enums`: `Enum` and `Variant`
  - `syntax.fns`: `Fn`, `Param`, `Match` and `Arm`
  - `syntax.impls`: `Impl`, with optional `for_trait`
- `baorust.naming`: `to_snake_case` and `to_pascal_case`, and a `NamingConvention`. `RUST_NAMING` is the convention for Rust. It converts names to type, file and field names, detects Rust reserved words and escapes them (`type` becomes `r#type`).
- `baorust.type_mapper`: the enums `ArgType` and `DatabaseType`, and `ContextFieldType`, which is a database pool or, when `database` is `None`, an HTTP client. `RustTypeMapper` maps these to Rust types, for example `ArgType.INT` to `i64` and a Postgres field to `sqlx::PgPool`.
- `baorust.render`: `render_imports` turns a mapping of module to symbols into `use` lines. `render_rust` joins an optional header, the imports and the code with blank lines between them.

## Example

```python
from baorust.syntax.structs import Struct, Field
from baorust.syntax.fns import Fn, Param

args = (
    Struct("GreetArgs")
    .doc("Greet someone")
    .derive("Args")
    .derive("Debug")
    .field(Field("name", "String").doc("Name to greet"))
)
print(args.build())

run = (
    Fn("run")
    .param(Param("_ctx", "&Context"))
    .param(Param("args", "GreetArgs"))
    .returns("eyre::Result<()>")
    .body_line('todo!("implement greet command")')
)
print(run.build())
```

To assemble a whole file:

```python
from baorust.rust_file import RustFile, Use, RawCode

source = (
    RustFile()
    .use_stmt(Use("clap").symbol("Parser"))
    .add(RawCode("fn main() {}"))
    .render_with_header("// Generated by Bao - DO NOT EDIT")
)
```

## What it does not do

The package stops at building blocks. It does not:

- read a CLI manifest
- produce the files of a complete project, such as `Cargo.toml`, `main.rs`, command modules or handler stubs
- write anything to disk
- clean up stale files
- provide adapters for particular frameworks, beyond the type names `RustTypeMapper` returns

There is no command-line tool. The `baorust.adapters` and `baorust.files` subpackages exist but contain no modules.

## Running the tests

```
pip install -e ".[test]"
pytest
```