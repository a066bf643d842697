"""
Directory traversal for Terraform posture files.
"""

import errno
import os
from typing import Iterator, Optional, Union, TYPE_CHECKING

from posture_validator.types import ConfigurationFile, ReadFailure

if TYPE_CHECKING:
    from posture_validator.utils.logger import Logger


DEFAULT_EXTENSION = ".tf"


class TreeWalkError(Exception):
    """Raised when the tree itself cannot be traversed."""

    def __init__(self, path: str, error: OSError) -> None:
        super().__init__(f"{path}: {error.strerror or error}")
        self.path = path
        self.error = error


def iter_configuration_files(
    root: Union[str, "os.PathLike[str]"],
    extension: str = DEFAULT_EXTENSION,
    logger: Optional["Logger"] = None,
) -> Iterator[Union[ConfigurationFile, ReadFailure]]:
    """
    Walk ``root`` depth-first in lexical order and yield every matching file.

    Files whose name ends with ``extension`` (case-insensitive) are read in
    full and yielded as ConfigurationFile; read failures are yielded as
    ReadFailure so the caller can record them and carry on. Anything else
    is skipped silently.

    Raises:
        TreeWalkError: If ``root`` or one of its subdirectories cannot be
            listed. Files already yielded stay yielded.
    """
    root = os.fspath(root)
    if not os.path.isdir(root):
        try:
            os.stat(root)
        except OSError as e:
            raise TreeWalkError(root, e) from e
        raise TreeWalkError(
            root, NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), root)
        )

    yield from _walk(root, extension.lower(), logger)


def _walk(
    directory: str, extension: str, logger: Optional["Logger"]
) -> Iterator[Union[ConfigurationFile, ReadFailure]]:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        raise TreeWalkError(directory, e) from e

    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            yield from _walk(entry.path, extension, logger)
            continue

        if not entry.name.lower().endswith(extension):
            continue

        try:
            # Stat errors on the target (e.g. a symlink loop) count as read failures
            if not entry.is_file():
                continue
            with open(entry.path, "rb") as f:
                content = f.read()
        except OSError as e:
            if logger:
                logger.warn("Could not read file", {"path": entry.path, "error": str(e)})
            yield ReadFailure(path=entry.path, error=e)
            continue

        if logger:
            logger.debug("Read file", {"path": entry.path, "bytes": len(content)})
        yield ConfigurationFile(path=entry.path, content=content)
