from codecs import lookup
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator
from yaml import YAMLError, safe_load

from .exceptions import SettingsError


class EmitterSettings(BaseModel):
    """Knobs of the emitter. None of them changes the markup itself."""

    encoding: str = "utf8"
    """Encoding used when the sink is a binary stream."""

    check_nesting: bool = False
    """Raise on misordered deck and slide brackets. Meant as a debugging aid."""

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            lookup(value)
        except LookupError as e:
            raise ValueError(str(e)) from e
        return value

    @classmethod
    def from_yaml(cls, path: Path) -> "EmitterSettings":
        if not path.is_file():
            msg = f"could not find settings file at {path}"
            raise SettingsError(msg)
        try:
            content = safe_load(path.read_text(encoding="utf8"))
            return cls.model_validate(content or {})
        except (YAMLError, ValidationError) as e:
            msg = f"invalid settings file {path}: {e}"
            raise SettingsError(msg) from e
