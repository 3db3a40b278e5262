"""Filesystem resource provider: directories are containers, files are leaves."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from lazyconf.config import Settings
from lazyconf.errors import InvalidInputError, ResourceNotFoundError, ResourceReadError
from lazyconf.resources.base import split_name

logger = logging.getLogger(__name__)

__all__ = ["FileResource"]

_SKIP_DIR_NAMES = {"__pycache__"}


class FileResource:
    """A file or directory exposed through the Resource contract.

    Directory entries are listed once, on first use, sorted by entry name.
    """

    def __init__(self, path: str | os.PathLike[str], settings: Settings | None = None) -> None:
        self._path = Path(path)
        self._settings = settings or Settings()
        self._is_dir = self._path.is_dir()
        entry_name = self._path.name
        if self._is_dir:
            self._name, self._ext = entry_name, ""
        else:
            self._name, self._ext = split_name(entry_name)
        self._entries: dict[str, Path] | None = None

    @classmethod
    def open(cls, path: str | os.PathLike[str], settings: Settings | None = None) -> FileResource:
        """Create a resource for an existing path.

        Raises:
            ResourceNotFoundError: If the path does not exist.
        """
        p = Path(path)
        if not p.exists():
            raise ResourceNotFoundError(resource_path=str(p))
        return cls(p.resolve(), settings=settings)

    @property
    def name(self) -> str:
        return self._name

    @property
    def type_tag(self) -> str:
        if self._is_dir:
            return ""
        return self._settings.type_tag_for(self._ext)

    @property
    def path(self) -> str:
        return str(self._path)

    def is_container(self) -> bool:
        return self._is_dir

    def children(self) -> list[str]:
        return list(self._scan())

    def get_child(self, name: str) -> FileResource | None:
        """Child by enumerated name, else a file by its exact entry name.

        The exact-name fallback reaches files the listing skips, such as a
        hidden default file. It never returns a directory.
        """
        if not self._is_dir or not name or "/" in name or os.sep in name or name in (".", ".."):
            return None
        entry = self._scan().get(name)
        if entry is not None:
            return FileResource(entry, settings=self._settings)
        exact = self._path / name
        if exact.is_file():
            return FileResource(exact, settings=self._settings)
        return None

    def read(self) -> bytes:
        if self._is_dir:
            raise InvalidInputError(message=f"Cannot read content of a directory: {self._path}")
        try:
            return self._path.read_bytes()
        except OSError as e:
            raise ResourceReadError(resource_path=str(self._path), reason=str(e), cause=e) from e

    def _scan(self) -> dict[str, Path]:
        if self._entries is not None:
            return self._entries
        entries: dict[str, Path] = {}
        if not self._is_dir:
            self._entries = entries
            return entries

        try:
            dir_entries = sorted(os.scandir(self._path), key=lambda e: e.name)
        except PermissionError as e:
            logger.error("Permission denied listing %s: %s", self._path, e)
            dir_entries = []
        except OSError as e:
            logger.error("OS error listing %s: %s", self._path, e)
            dir_entries = []

        follow = self._settings.follow_symlinks
        for entry in dir_entries:
            if self._settings.skip_hidden and entry.name.startswith("."):
                continue
            if entry.name in _SKIP_DIR_NAMES:
                continue

            try:
                is_dir = entry.is_dir(follow_symlinks=follow)
                is_file = entry.is_file(follow_symlinks=True)
            except OSError as e:
                logger.error("OS error accessing %s: %s", entry.path, e)
                continue

            if is_dir:
                name = entry.name
            elif is_file:
                name = split_name(entry.name)[0]
            else:
                continue

            if name in entries:
                logger.warning(
                    "Duplicate resource name '%s' at %s, already found at %s. Skipping.",
                    name,
                    entry.path,
                    entries[name],
                )
                continue
            entries[name] = Path(entry.path)

        self._entries = entries
        return entries

    def __repr__(self) -> str:
        return f"FileResource({str(self._path)!r})"
