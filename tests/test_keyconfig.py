import pytest

from rpgkit.keyconfig import KeyMappingConfig
from rpgkit.keys import Key


def test_from_mapping_reads_bindings():
    config = KeyMappingConfig.from_mapping(
        {"exit": "Esc", "moveUp": "w", "moveDown": "s", "hitYourself": "h", "torch": "f"}
    )
    assert config.exit is Key.ESC
    assert config.move_up is Key.W
    assert config.move_down is Key.S
    assert config.hit_yourself is Key.H
    assert config.torch is Key.F


def test_missing_bindings_are_unknown():
    config = KeyMappingConfig.from_mapping({"use": "e"})
    assert config.use is Key.E
    assert config.inventory is Key.UNKNOWN
    assert config.move_left is Key.UNKNOWN


def test_unrecognised_key_name_is_unknown():
    config = KeyMappingConfig.from_mapping({"inventory": "nonsense"})
    assert config.inventory is Key.UNKNOWN


def test_numeric_value_maps_to_digit_key():
    config = KeyMappingConfig.from_mapping({"moveRight": 1})
    assert config.move_right is Key.NUM1


def test_empty_mapping_gives_defaults():
    assert KeyMappingConfig.from_mapping(None) == KeyMappingConfig()


@pytest.mark.parametrize("value", [None, ["a"], {"a": 1}])
def test_non_scalar_value_rejected(value):
    with pytest.raises(ValueError):
        KeyMappingConfig.from_mapping({"exit": value})


def test_non_mapping_rejected():
    with pytest.raises(ValueError):
        KeyMappingConfig.from_mapping(["exit", "esc"])


def test_from_file(tmp_path):
    path = tmp_path / "keys.yml"
    path.write_text("exit: esc\nmoveLeft: a\nmoveRight: d\ninventory: tab\n", encoding="utf-8")
    config = KeyMappingConfig.from_file(path)
    assert config.exit is Key.ESC
    assert config.move_left is Key.A
    assert config.move_right is Key.D
    assert config.inventory is Key.TAB
    assert config.use is Key.UNKNOWN


def test_from_empty_file(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert KeyMappingConfig.from_file(path) == KeyMappingConfig()


def test_from_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        KeyMappingConfig.from_file(tmp_path / "absent.yml")