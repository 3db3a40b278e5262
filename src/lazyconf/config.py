"""Library settings: default file name, enumeration rules and extension mapping."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from lazyconf.errors import ResourceNotFoundError, SettingsError

__all__ = ["Settings", "DEFAULT_TYPE_TAGS"]

DEFAULT_TYPE_TAGS: dict[str, str] = {
    "py": "py",
    "json": "json",
    "ini": "ini",
    "xml": "xml",
    "yaml": "yaml",
    "yml": "yaml",
    "toml": "toml",
}


class Settings(BaseModel):
    """Options shared by every node and resource of one configuration tree.

    Attributes:
        default_file: Entry name of the file merged into its container's keys.
        skip_hidden: Whether dot-entries are left out of child enumeration.
        follow_symlinks: Whether symlinked directories are descended.
        type_tags: File extension (lowercase, no dot) to loader type tag.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_file: str = ".ini"
    skip_hidden: bool = True
    follow_symlinks: bool = False
    type_tags: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_TYPE_TAGS))

    @field_validator("default_file")
    @classmethod
    def _check_default_file(cls, v: str) -> str:
        if not v or "/" in v or v in (".", ".."):
            raise ValueError("default_file must be a plain entry name")
        return v

    @field_validator("type_tags")
    @classmethod
    def _normalize_type_tags(cls, v: dict[str, str]) -> dict[str, str]:
        return {ext.lower().lstrip("."): tag for ext, tag in v.items()}

    def type_tag_for(self, extension: str) -> str:
        """Return the type tag for a file extension, or "" if unknown."""
        return self.type_tags.get(extension.lower().lstrip("."), "")

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> Settings:
        """Validate a plain mapping into Settings.

        Raises:
            SettingsError: If a field is unknown or has the wrong type.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise SettingsError(
                message=f"Invalid settings: {e.error_count()} error(s)",
                errors=[{"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()],
                cause=e,
            ) from e

    @classmethod
    def load(cls, yaml_path: str | os.PathLike[str]) -> Settings:
        """Load settings from a YAML file.

        An empty file yields the defaults.

        Raises:
            ResourceNotFoundError: If the file does not exist.
            SettingsError: If the YAML is invalid or does not describe valid settings.
        """
        path = Path(yaml_path)
        if not path.is_file():
            raise ResourceNotFoundError(resource_path=str(path))

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise SettingsError(message=f"Invalid YAML in {path}: {e}", cause=e) from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise SettingsError(message=f"Settings file must be a YAML mapping: {path}")
        return cls.from_mapping(data)
