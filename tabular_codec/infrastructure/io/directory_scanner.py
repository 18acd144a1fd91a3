from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, override

from ...application.models import FileItem, FolderStructure
from ...application.ports.services import DirectoryScannerPort
from ..logging.null_logger import NullLogger
from .exceptions import DataSourceNotFoundError

if TYPE_CHECKING:
    from ...application.ports.services import LoggerPort

ROOT = Path(".")


class DirectoryScanner(DirectoryScannerPort):
    """Walk a directory tree and list every file and folder below it.

    Paths in the result are relative to the scan root and use ``/`` as the
    separator. ``depth`` is 0 for entries directly under the root.
    ``folder_paths`` holds every folder that leads to a file, without the root
    itself, shallowest first so a parent always comes before its children.
    """

    def __init__(self, logger: LoggerPort | None = None) -> None:
        super().__init__()
        self._logger = logger or NullLogger()

    @override
    def scan(self, root: str | Path) -> FolderStructure:
        root_path = Path(root)
        if not root_path.is_dir():
            raise DataSourceNotFoundError(f"Directory not found: {root_path}")
        structure = FolderStructure()
        parents: set[str] = set()
        for current, dirnames, filenames in os.walk(root_path, onerror=self._skip):
            dirnames.sort()
            here = Path(current)
            for dirname in dirnames:
                folder = self._item(root_path, here / dirname, is_directory=True)
                if folder is not None:
                    structure.folders.append(folder)
            for filename in sorted(filenames):
                item = self._item(root_path, here / filename, is_directory=False)
                if item is None:
                    continue
                structure.files.append(item)
                parent = Path(item.relative_path).parent
                parents.update(
                    ancestor.as_posix()
                    for ancestor in (parent, *parent.parents)
                    if ancestor != ROOT
                )
        structure.folder_paths = sorted(
            parents, key=lambda path: (path.count("/"), path)
        )
        self._logger.verbose(
            f"Scanned {root_path}: {len(structure.files)} files in "
            f"{len(structure.folders)} folders"
        )
        return structure

    def _item(
        self, root: Path, path: Path, *, is_directory: bool
    ) -> FileItem | None:
        relative = path.relative_to(root)
        try:
            full_path = path.resolve(strict=True)
        except OSError as e:
            self._logger.warning(f"Skipping {path}: {e}")
            return None
        return FileItem(
            name=path.name,
            full_path=full_path,
            relative_path=relative.as_posix(),
            is_directory=is_directory,
            depth=len(relative.parts) - 1,
        )

    def _skip(self, error: OSError) -> None:
        self._logger.warning(f"Skipping unreadable entry {error.filename}: {error}")
