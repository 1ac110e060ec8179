from baorust.code import CodeBuilder
from baorust.rust_file import RawCode, RustFile, Use


def test_empty_file():
    file = RustFile()
    assert file.is_empty()
    assert file.render() == ""


def test_use_single_symbol():
    builder = CodeBuilder.rust()
    builder.emit(Use("clap").symbol("Parser"))
    assert builder.build() == "use clap::Parser;\n"


def test_use_multiple_symbols():
    builder = CodeBuilder.rust()
    builder.emit(Use("std::collections").symbols(["HashMap", "HashSet"]))
    assert builder.build() == "use std::collections::{HashMap, HashSet};\n"


def test_use_without_symbols():
    assert str(Use("crate::generated::commands::hello::HelloArgs")) == (
        "use crate::generated::commands::hello::HelloArgs;"
    )


def test_uses_only():
    file = RustFile().use_stmt(Use("clap").symbol("Parser"))
    assert file.render() == "use clap::Parser;\n"


def test_raw_code_body():
    file = RustFile().add(RawCode("fn main() {}"))
    assert file.render() == "fn main() {}\n"


def test_full_file():
    code = RustFile().use_stmt(Use("clap").symbol("Parser")).add(RawCode("fn main() {}")).render()
    assert "use clap::Parser;" in code
    assert "fn main() {}" in code
    assert code == "use clap::Parser;\n\nfn main() {}\n"


def test_blank_lines_between_body():
    code = RustFile().add(RawCode("struct Foo;")).add(RawCode("struct Bar;")).render()
    assert "struct Foo;\n\nstruct Bar;" in code


def test_render_with_header():
    code = (
        RustFile()
        .use_stmt(Use("clap").symbol("Parser"))
        .add(RawCode("fn main() {}"))
        .render_with_header("// Generated by Bao")
    )
    assert code.startswith("// Generated by Bao")
    assert "use clap::Parser;" in code


def test_render_with_header_on_empty_file():
    assert RustFile().render_with_header("// Generated by Bao") == "// Generated by Bao\n"


def test_raw_code_lines_joins():
    code = RustFile().add(RawCode.lines(["pub mod cli;", "pub mod commands;"])).render()
    assert code == "pub mod cli;\npub mod commands;\n"


def test_add_all_and_use_stmts_match_individual_calls():
    uses = [Use("clap").symbol("Parser"), Use("crate::context").symbol("Context")]
    nodes = [RawCode("struct Foo;"), RawCode("struct Bar;")]
    bulk = RustFile().use_stmts(uses).add_all(nodes).render()
    single = (
        RustFile()
        .use_stmt(uses[0])
        .use_stmt(uses[1])
        .add(nodes[0])
        .add(nodes[1])
        .render()
    )
    assert bulk == single


def test_non_empty_after_use():
    assert not RustFile().use_stmt(Use("clap")).is_empty()