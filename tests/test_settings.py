from pathlib import Path

from pydantic import ValidationError
from pytest import raises

from deckgen.exceptions import SettingsError
from deckgen.settings import EmitterSettings


def test_defaults() -> None:
    settings = EmitterSettings()

    assert settings.encoding == "utf8"
    assert not settings.check_nesting


def test_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "settings.yml"
    path.write_text("encoding: latin-1\ncheck_nesting: true\n", encoding="utf8")

    settings = EmitterSettings.from_yaml(path)

    assert settings.encoding == "latin-1"
    assert settings.check_nesting


def test_from_empty_yaml(tmp_path: Path) -> None:
    path = tmp_path / "settings.yml"
    path.write_text("", encoding="utf8")

    assert EmitterSettings.from_yaml(path) == EmitterSettings()


def test_from_missing_yaml(tmp_path: Path) -> None:
    with raises(SettingsError, match="could not find"):
        EmitterSettings.from_yaml(tmp_path / "missing.yml")


def test_from_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "settings.yml"
    path.write_text("check_nesting: [not, a, bool]\n", encoding="utf8")

    with raises(SettingsError, match="invalid settings"):
        EmitterSettings.from_yaml(path)


def test_from_malformed_yaml(tmp_path: Path) -> None:
    path = tmp_path / "settings.yml"
    path.write_text("encoding: [unclosed\n", encoding="utf8")

    with raises(SettingsError):
        EmitterSettings.from_yaml(path)


def test_unknown_encoding() -> None:
    with raises(ValidationError, match="unknown encoding"):
        EmitterSettings(encoding="utf-9")


def test_unknown_encoding_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "settings.yml"
    path.write_text("encoding: utf-9\n", encoding="utf8")

    with raises(SettingsError, match="unknown encoding"):
        EmitterSettings.from_yaml(path)
