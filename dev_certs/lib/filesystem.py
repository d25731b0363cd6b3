"""Filesystem access used by the provisioner."""

import shutil
from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    """Operations the provisioner needs from a filesystem."""

    def is_dir(self, path: Path) -> bool: ...

    def make_dirs(self, path: Path) -> None: ...

    def write_text(self, path: Path, contents: str) -> None: ...

    def read_text(self, path: Path) -> str: ...

    def remove_tree(self, path: Path) -> None: ...


class LocalFileSystem:
    """FileSystem backed by the local disk through pathlib."""

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def make_dirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def write_text(self, path: Path, contents: str) -> None:
        path.write_text(contents, encoding="utf-8")

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def remove_tree(self, path: Path) -> None:
        """Remove path recursively, doing nothing if it is already gone."""
        if path.exists():
            shutil.rmtree(path)
