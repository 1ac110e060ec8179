from baorust.code import CodeBuilder
from baorust.syntax.fns import Fn, Param
from baorust.syntax.impls import Impl


def test_empty_impl():
    i = Impl("Foo").build()
    assert "impl Foo {" in i
    assert i == "impl Foo {\n}\n"


def test_impl_with_method():
    i = (
        Impl("Counter")
        .method(
            Fn("increment")
            .param(Param("&mut self", ""))
            .body_line("self.count += 1;")
        )
        .build()
    )
    assert "impl Counter {" in i
    assert "pub fn increment(&mut self) {" in i
    assert i == (
        "impl Counter {\n"
        "    pub fn increment(&mut self) {\n"
        "        self.count += 1;\n"
        "    }\n"
        "}\n"
    )


def test_impl_for_trait():
    i = (
        Impl("MyStruct")
        .for_trait("Display")
        .method(
            Fn("fmt")
            .param(Param("&self", ""))
            .param(Param("f", "&mut std::fmt::Formatter<'_>"))
            .returns("std::fmt::Result")
        )
        .build()
    )
    assert "impl Display for MyStruct {" in i
    assert "pub fn fmt(&self, f: &mut std::fmt::Formatter<'_>) -> std::fmt::Result {" in i


def test_impl_with_multiple_methods():
    i = Impl("Foo").method(Fn("bar")).method(Fn("baz")).build()
    assert "pub fn bar()" in i
    assert "pub fn baz()" in i
    assert i == (
        "impl Foo {\n"
        "    pub fn bar() {\n"
        "    }\n"
        "\n"
        "    pub fn baz() {\n"
        "    }\n"
        "}\n"
    )


def test_impl_method_doc_is_indented():
    i = Impl("Cli").method(Fn("dispatch").doc("Dispatch it")).build()
    assert "    /// Dispatch it\n    pub fn dispatch() {" in i


def test_fragments_match_build():
    i = Impl("Foo").for_trait("Bar").method(Fn("a")).method(Fn("b").async_())
    assert CodeBuilder.rust().emit(i).build() == i.build()