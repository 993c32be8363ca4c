"""Persistence of generated sitemap content.

:class:`FileSink` is the narrow seam the generator writes through;
:class:`LocalFileSink` is the filesystem implementation used by default.
"""

import logging
import os
from pathlib import Path
from typing import Protocol, Union

from sitemapgen.errors import (
    DirectoryCreationError,
    DirectoryNotWritableError,
    FileNotWritableError,
    FileWriteError,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class FileSink(Protocol):
    def write(self, path: PathLike, content: str) -> None:
        """Persist *content* at *path*, replacing any existing file."""
        ...


class LocalFileSink:
    """Writes sitemap content to the local filesystem as UTF-8."""

    def write(self, path: PathLike, content: str) -> None:
        """Write *content* to *path*, creating missing parent directories.

        Raises:
            DirectoryCreationError: if the parent directory cannot be created.
            DirectoryNotWritableError: if the parent directory is not writable.
            FileNotWritableError: if *path* exists and is not writable.
            FileWriteError: if writing the content fails.
        """
        target = Path(path)
        directory = target.parent

        if not directory.is_dir():
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                logger.error("Failed to create directory %s: %s", directory, exc)
                raise DirectoryCreationError("Failed to create directory", str(directory)) from exc

        if not os.access(directory, os.W_OK):
            logger.warning("Directory is not writable: %s", directory)
            raise DirectoryNotWritableError("Directory is not writable", str(directory))

        if target.exists() and not os.access(target, os.W_OK):
            logger.warning("File exists and is not writable: %s", target)
            raise FileNotWritableError("File exists and is not writable", str(target))

        try:
            # newline="" keeps "\n" row terminators on every platform
            with target.open("w", encoding="utf-8", newline="") as handle:
                handle.write(content)
        except OSError as exc:
            logger.error("Unable to save content to %s: %s", target, exc)
            raise FileWriteError("Unable to save content to file", str(target)) from exc

        logger.info("Sitemap written", extra={"path": str(target), "bytes": len(content.encode("utf-8"))})
