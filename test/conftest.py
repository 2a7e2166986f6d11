import pathlib
import typing

import pytest


@pytest.fixture(scope="function")
def write_file_fixture(tmp_path: pathlib.Path) -> typing.Callable[..., pathlib.Path]:
    def _write(name: str, content: str | bytes) -> pathlib.Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(scope="function")
def old_customers_fixture() -> list[dict[str, str]]:
    return [
        {"customer_id": "1", "first_name": "Steve", "last_name": "Smith", "city": "Austin"},
        {"customer_id": "2", "first_name": "Mandie", "last_name": "Mandlebrot", "city": "Boston"},
        {"customer_id": "3", "first_name": "Bill", "last_name": "Button", "city": "Chicago"},
    ]


@pytest.fixture(scope="function")
def new_customers_fixture() -> list[dict[str, str]]:
    return [
        {"customer_id": "1", "first_name": "Steve", "last_name": "Smith", "city": "Austin"},
        {"customer_id": "3", "first_name": "Bill", "last_name": "Buttons", "city": "Denver"},
        {"customer_id": "4", "first_name": "Amy", "last_name": "Apples", "city": "El Paso"},
    ]
