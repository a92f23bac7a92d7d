"""
Directory traversal for the suppression audit.

Produces the ordered list of candidate source files under a root
directory, honouring the extension allow-list and the excluded
directory names.
"""

import logging
import os
import stat
from typing import Callable, Iterable, Iterator, Optional

from suppressaudit.core.errors import AccessError, AuditError, DirectoryNotFoundError


logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".js", ".jsx", ".ts", ".vue")
DEFAULT_EXCLUDE_DIRS = ("node_modules",)

ErrorHandler = Callable[[AuditError], None]


def _list_dir(directory: str, sort_entries: bool) -> list:
    try:
        names = os.listdir(directory)
    except OSError as e:
        raise AccessError(directory, e.strerror or str(e)) from e
    if sort_entries:
        names.sort()
    return names


def walk(
    root_dir: str,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
    sort_entries: bool = True,
    on_error: Optional[ErrorHandler] = None,
) -> Iterator[str]:
    """
    Recursively yield files under ``root_dir`` whose extension is allowed.

    Traversal is depth-first. Directories named in ``exclude_dirs`` are
    never entered, however deeply nested. Symlinks are followed.

    Args:
        root_dir: Directory to walk.
        extensions: Allowed file extensions, e.g. ``".ts"``.
        exclude_dirs: Directory names that are not descended into.
        sort_entries: Visit entries of each directory in name order
            instead of the order the filesystem lists them.
        on_error: Called with the ``AccessError`` of an unreadable entry,
            which is then skipped. When omitted the error is raised.

    Raises:
        DirectoryNotFoundError: ``root_dir`` is missing or not a directory.
        AccessError: An entry cannot be listed or stat'd and no
            ``on_error`` handler was given.
    """
    if not os.path.isdir(root_dir):
        raise DirectoryNotFoundError(root_dir)

    allowed = frozenset(extensions)
    excluded = frozenset(exclude_dirs)
    return _walk(root_dir, allowed, excluded, sort_entries, on_error)


def _walk(directory, allowed, excluded, sort_entries, on_error) -> Iterator[str]:
    try:
        names = _list_dir(directory, sort_entries)
    except AccessError as e:
        if on_error is None:
            raise
        on_error(e)
        return

    for name in names:
        path = os.path.join(directory, name)
        try:
            mode = os.stat(path).st_mode
        except OSError as e:
            error = AccessError(path, e.strerror or str(e))
            if on_error is None:
                raise error from e
            on_error(error)
            continue

        if stat.S_ISDIR(mode):
            if name in excluded:
                logger.debug("Skipping excluded directory %s", path)
                continue
            yield from _walk(path, allowed, excluded, sort_entries, on_error)
        elif stat.S_ISREG(mode) and os.path.splitext(name)[1] in allowed:
            yield path
