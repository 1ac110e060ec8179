from baorust.type_mapper import ArgType, ContextFieldType, DatabaseType, RustTypeMapper


def test_rust_arg_types():
    mapper = RustTypeMapper()
    assert mapper.map_arg_type(ArgType.STRING) == "String"
    assert mapper.map_arg_type(ArgType.INT) == "i64"
    assert mapper.map_arg_type(ArgType.FLOAT) == "f64"
    assert mapper.map_arg_type(ArgType.BOOL) == "bool"
    assert mapper.map_arg_type(ArgType.PATH) == "std::path::PathBuf"


def test_rust_optional_types():
    mapper = RustTypeMapper()
    assert mapper.map_optional_arg_type(ArgType.STRING) == "Option<String>"
    assert mapper.map_optional_arg_type(ArgType.INT) == "Option<i64>"


def test_rust_context_types():
    mapper = RustTypeMapper()
    assert mapper.map_context_type(ContextFieldType(DatabaseType.POSTGRES)) == "sqlx::PgPool"
    assert mapper.map_context_type(ContextFieldType(DatabaseType.MYSQL)) == "sqlx::MySqlPool"
    assert mapper.map_context_type(ContextFieldType(DatabaseType.SQLITE)) == "sqlx::SqlitePool"
    assert mapper.map_context_type(ContextFieldType()) == "reqwest::Client"


def test_language():
    assert RustTypeMapper().language() == "rust"


def test_arg_type_from_manifest_value():
    assert ArgType("path") is ArgType.PATH