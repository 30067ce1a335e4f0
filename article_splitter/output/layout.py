"""Output file naming and directory preparation.

First occurrences of a title go to `{directory}/{title}{extension}`, later
ones to `{directory}/{dupes}/{title} ({n}){extension}` with n starting at 2.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from ..core.errors import OutputDirectoryError


@dataclass
class OutputLayout:
    """Where article files are written.

    Attributes:
        directory: Primary output directory
        dupes_dirname: Name of the duplicates directory inside `directory`
        extension: Suffix appended to every file name, may be empty
    """

    directory: str = "output"
    dupes_dirname: str = "dupes"
    extension: str = ".txt"

    @property
    def dupes_directory(self) -> str:
        return str(PurePosixPath(self.directory) / self.dupes_dirname)

    def target_for(self, title: str, occurrence: int) -> str:
        """Return the file path for the given occurrence of a title.

        An empty or "." directory yields a bare file name.
        """
        if occurrence == 1:
            return str(PurePosixPath(self.directory) / f"{title}{self.extension}")
        name = f"{title} ({occurrence}){self.extension}"
        return str(PurePosixPath(self.dupes_directory) / name)

    def prepare(self) -> None:
        """Create the output directories, refusing to reuse a non-empty one.

        Raises:
            OutputDirectoryError: If a directory cannot be created or the
                output directory already contains files
        """
        directory = Path(self.directory or ".")
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputDirectoryError(
                f"cannot create output directory {directory}: {exc}"
            ) from exc

        try:
            is_empty = next(directory.iterdir(), None) is None
        except OSError as exc:
            raise OutputDirectoryError(
                f"cannot check whether output directory {directory} is empty: {exc}"
            ) from exc
        if not is_empty:
            raise OutputDirectoryError(
                f"output directory {directory} is not empty"
            )

        dupes = Path(self.dupes_directory)
        try:
            dupes.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputDirectoryError(
                f"cannot create duplicates directory {dupes}: {exc}"
            ) from exc
