import json

from tabdiff import data, main


def _run(argv: list[str], config: data.Config | None = None) -> None | data.Error:
    args = main.build_parser().parse_args(argv)
    return main._run(args, config=config or data.Config())


def test_diff_command_prints_text(write_file_fixture, capsys):
    old_file = write_file_fixture("old.csv", "id,name\n1,Alice\n2,Bob\n")
    new_file = write_file_fixture("new.csv", "id,name\n1,Alicia\n3,Carol\n")

    result = _run(["diff", "--old", str(old_file), "--new", str(new_file), "--key", "id"])

    assert result is None
    out = capsys.readouterr().out
    assert "Added: 1" in out
    assert "Removed: 1" in out
    assert "    name: 'Alice' -> 'Alicia'" in out


def test_diff_command_prints_json(write_file_fixture, capsys):
    old_file = write_file_fixture("old.csv", "id,name,city\n1,Alice,Austin\n")
    new_file = write_file_fixture("new.csv", "id,name,city\n1,Alicia,Boston\n")

    result = _run(
        [
            "diff",
            "--old", str(old_file),
            "--new", str(new_file),
            "--key", "id",
            "--compare", "city",
            "--format", "json",
        ]
    )

    assert result is None
    d = json.loads(capsys.readouterr().out)
    assert d["modified"][0]["changes"] == [{"column": "city", "oldValue": "Austin", "newValue": "Boston"}]


def test_diff_command_returns_errors(write_file_fixture):
    old_file = write_file_fixture("old.csv", "id,name\n1,Alice\n1,Alicia\n")
    new_file = write_file_fixture("new.csv", "id,name\n1,Alice\n")

    result = _run(
        ["diff", "--old", str(old_file), "--new", str(new_file), "--key", "id"],
        config=data.Config(duplicate_keys="error"),
    )

    assert isinstance(result, data.DuplicateKey)


def test_diff_command_rejects_duplicate_key_columns(write_file_fixture):
    old_file = write_file_fixture("old.csv", "id,name\n1,Alice\n")

    result = _run(["diff", "--old", str(old_file), "--new", str(old_file), "--key", "id", "id"])

    assert isinstance(result, data.Error)
    assert "duplicate" in result.message


def test_columns_command(write_file_fixture, capsys):
    file = write_file_fixture("customers.csv", "customer_id,first_name\n1,Steve\n")

    result = _run(["columns", "--file", str(file)])

    assert result is None
    assert capsys.readouterr().out.splitlines() == ["customer_id", "first_name"]


def test_unrecognized_command():
    result = _run([])

    assert isinstance(result, data.Error)
    assert "Unrecognized command" in result.message


def test_preview_command(write_file_fixture, capsys):
    file = write_file_fixture("customers.csv", "id,name\n1,Alice\n2,Bob\n3,Carol\n")

    result = _run(["preview", "--file", str(file), "--rows", "2"])

    assert result is None
    assert capsys.readouterr().out.splitlines() == ["id | name", "1 | Alice", "2 | Bob"]


def test_preview_command_rejects_a_non_positive_row_count(write_file_fixture):
    file = write_file_fixture("customers.csv", "id\n1\n")

    result = _run(["preview", "--file", str(file), "--rows", "0"])

    assert isinstance(result, data.Error)
    assert "--rows" in result.message
