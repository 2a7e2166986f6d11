import pytest

from tabdiff import data


def test_frozen_dict_is_hashable_and_equal_to_a_plain_dict():
    row = data.FrozenDict({"id": "1", "name": "Alice"})
    assert row == {"id": "1", "name": "Alice"}
    assert hash(row) == hash(data.FrozenDict({"name": "Alice", "id": "1"}))


@pytest.mark.parametrize(
    "mutate",
    [
        lambda row: row.__setitem__("name", "Bob"),
        lambda row: row.__delitem__("name"),
        lambda row: row.update(name="Bob"),
        lambda row: row.pop("name"),
        lambda row: row.clear(),
        lambda row: row.setdefault("city", "Austin"),
    ],
)
def test_frozen_dict_is_read_only(mutate):
    row = data.FrozenDict({"id": "1", "name": "Alice"})
    with pytest.raises(TypeError):
        mutate(row)
    assert row == {"id": "1", "name": "Alice"}


def test_to_row_keeps_existing_frozen_dicts():
    row = data.FrozenDict({"id": "1"})
    assert data.to_row(row) is row
    assert isinstance(data.to_row({"id": "1"}), data.FrozenDict)
