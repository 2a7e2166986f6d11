from tabdiff import data


def test_check_schema_ignores_column_order():
    assert data.check_schema(old_columns=("id", "name"), new_columns=("name", "id")) is None


def test_check_schema_reports_columns_missing_from_either_side():
    error = data.check_schema(old_columns=("id", "name", "city"), new_columns=("id", "name", "zip"))
    assert isinstance(error, data.SchemaMismatch)
    assert error.context == {"old_only": ("city",), "new_only": ("zip",)}
    assert "city" in str(error)
    assert "zip" in str(error)


def test_check_schema_rejects_repeated_header_names():
    error = data.check_schema(old_columns=("id", "v", "v"), new_columns=("id", "v"))

    assert isinstance(error, data.DuplicateColumn)
    assert error.context == {"side": "old", "column_names": ("v",)}


def test_check_schema_rejects_repeated_header_names_in_the_new_file():
    error = data.check_schema(old_columns=("id", "v"), new_columns=("v", "id", "v", "id"))

    assert isinstance(error, data.DuplicateColumn)
    assert error.context == {"side": "new", "column_names": ("v", "id")}
