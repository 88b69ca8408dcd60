from pathlib import Path

import pytest

from cubeparse.config import ParserConfig, load_config


def test_load_yaml_config_fills_defaults(tmp_path: Path) -> None:
    path = tmp_path / "parser.yaml"
    path.write_text("trim_trailing_whitespace: false\n")
    cfg = load_config(path)
    assert cfg.trim_trailing_whitespace is False
    assert cfg.skip_blank_lines is True
    assert cfg.encoding == "utf-8"


def test_load_json_config(tmp_path: Path) -> None:
    path = tmp_path / "parser.json"
    path.write_text('{"skip_blank_lines": false, "encoding": "latin-1"}')
    cfg = load_config(path)
    assert cfg == ParserConfig(skip_blank_lines=False, encoding="latin-1")


def test_empty_yaml_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "parser.yml"
    path.write_text("")
    assert load_config(path) == ParserConfig()


def test_unknown_keys_are_rejected() -> None:
    with pytest.raises(ValueError, match="trim_whitespace"):
        ParserConfig.from_mapping({"trim_whitespace": True})


def test_non_mapping_config_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "parser.yaml"
    path.write_text("- trim_trailing_whitespace\n")
    with pytest.raises(ValueError, match="mapping"):
        load_config(path)


def test_prepare_applies_trailing_policy() -> None:
    assert ParserConfig().prepare("Game 1: 1 red \t\r\n") == "Game 1: 1 red"
    assert ParserConfig(trim_trailing_whitespace=False).prepare("x \n") == "x \n"
