import json

import pytest

from alarmtimer.config import ConfigError, TimeConfiguration


def _write(path, document):
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def test_load_reads_all_fields(tmp_path):
    path = _write(
        tmp_path / "configuration.json",
        {"target_time": "00 : 10 : 00", "version": "2.5", "name": "Kitchen"},
    )
    config = TimeConfiguration(path)
    assert config.target_time == "00 : 10 : 00"
    assert config.version == "2.5"
    assert config.name == "Kitchen"
    assert config.config_path == path


def test_missing_file_keeps_defaults(tmp_path):
    config = TimeConfiguration(tmp_path / "absent.json")
    assert config.target_time == "00 : 00 : 00"
    assert config.version == "1.0"
    assert config.name == "AlarmApp"


def test_load_missing_file_raises_and_remembers_path(tmp_path):
    config = TimeConfiguration()
    missing = tmp_path / "absent.json"
    with pytest.raises(ConfigError):
        config.load(missing)
    assert config.config_path == missing


def test_load_invalid_json_raises(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        TimeConfiguration().load(path)


def test_load_empty_file_raises(tmp_path):
    path = tmp_path / "empty.json"
    path.write_bytes(b"")
    with pytest.raises(ConfigError):
        TimeConfiguration().load(path)


def test_load_non_object_raises(tmp_path):
    path = _write(tmp_path / "list.json", ["00 : 00 : 01"])
    with pytest.raises(ConfigError):
        TimeConfiguration().load(path)


def test_missing_or_non_string_keys_become_empty(tmp_path):
    path = _write(tmp_path / "partial.json", {"target_time": 5, "name": "Desk"})
    config = TimeConfiguration(path)
    assert config.target_time == ""
    assert config.version == ""
    assert config.name == "Desk"


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "configuration.json"
    config = TimeConfiguration(path)
    config.target_time = "01 : 02 : 03"
    config.save()

    reloaded = TimeConfiguration(path)
    assert reloaded.target_time == "01 : 02 : 03"
    assert reloaded.version == "1.0"
    assert reloaded.name == "AlarmApp"


def test_save_writes_sorted_indented_json(tmp_path):
    path = tmp_path / "configuration.json"
    TimeConfiguration(path).save()
    text = path.read_text(encoding="utf-8")
    assert text.startswith('{\n    "name"')
    assert list(json.loads(text)) == ["name", "target_time", "version"]


def test_default_constructed_is_empty_and_cannot_save():
    config = TimeConfiguration()
    assert (config.target_time, config.version, config.name) == ("", "", "")
    with pytest.raises(ConfigError):
        config.save()


def test_save_to_directory_raises(tmp_path):
    config = TimeConfiguration(tmp_path)
    with pytest.raises(ConfigError):
        config.save()