import json

from tabdiff import adapter, data


def test_load(write_file_fixture):
    config_file = write_file_fixture(
        "config.json",
        json.dumps(
            {
                "duplicate-keys": "error",
                "missing-columns": "error",
                "timeout-seconds": 30,
                "progress-queue-size": 10,
            }
        ),
    )

    config = adapter.config.load(config_file=config_file)

    assert config == data.Config(
        duplicate_keys="error",
        missing_columns="error",
        timeout_seconds=30.0,
        progress_queue_size=10,
    )
    assert config.diff_options == data.DiffOptions(duplicate_keys="error", missing_columns="error")


def test_load_fills_in_defaults(write_file_fixture):
    config_file = write_file_fixture("config.json", "{}")

    assert adapter.config.load(config_file=config_file) == data.Config()


def test_load_rejects_a_missing_file(tmp_path):
    result = adapter.config.load(config_file=tmp_path / "config.json")

    assert isinstance(result, data.Error)
    assert "does not exist" in result.message


def test_load_rejects_unrecognized_entries(write_file_fixture):
    config_file = write_file_fixture("config.json", json.dumps({"batch-size": 100}))

    result = adapter.config.load(config_file=config_file)

    assert isinstance(result, data.Error)
    assert "batch-size" in result.message


def test_load_rejects_invalid_values(write_file_fixture):
    config_file = write_file_fixture("config.json", json.dumps({"duplicate-keys": "first"}))

    result = adapter.config.load(config_file=config_file)

    assert isinstance(result, data.Error)
    assert "invalid entry" in result.message


def test_load_rejects_invalid_json(write_file_fixture):
    config_file = write_file_fixture("config.json", "{not json")

    result = adapter.config.load(config_file=config_file)

    assert isinstance(result, data.Error)
    assert "not valid json" in result.message


def test_shipped_config_file_loads():
    config_path = adapter.fs.get_config_path()
    assert not isinstance(config_path, data.Error)

    assert adapter.config.load(config_file=config_path) == data.Config()


def test_config_repr_shows_every_field():
    text = repr(data.Config(timeout_seconds=5.0))

    for field in ("duplicate_keys", "missing_columns", "timeout_seconds=5.0", "progress_queue_size=100"):
        assert field in text
