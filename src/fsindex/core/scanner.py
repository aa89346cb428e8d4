# src/fsindex/core/scanner.py
import asyncio
import logging
import os
from typing import Iterable, List, Optional, Tuple

import pathspec

from fsindex.config import DEFAULT_EXTENSIONS
from fsindex.core.ignore import filter_ignored
from fsindex.models import FileRecord
from fsindex.utils.paths import get_file_extension, get_name_without_extension

logger = logging.getLogger(__name__)

# Entry kinds reported by _read_directory
FILE = "file"
DIRECTORY = "directory"
OTHER = "other"


def _read_directory(directory: str) -> List[Tuple[str, str]]:
    """
    Enumerates the direct entries of a directory as (name, kind) pairs,
    in the order the filesystem yields them. Symlinks are never followed,
    so a link to a file or directory is reported as OTHER.
    """
    entries = []
    with os.scandir(directory) as it:
        for entry in it:
            if entry.is_file(follow_symlinks=False):
                kind = FILE
            elif entry.is_dir(follow_symlinks=False):
                kind = DIRECTORY
            else:
                kind = OTHER
            entries.append((entry.name, kind))
    return entries


def create_file_record(name: str, directory: str, index: Optional[int] = None) -> FileRecord:
    relative_path = os.path.join(directory, name)
    return FileRecord(
        absolute_path=os.path.abspath(relative_path),
        extension=get_file_extension(name),
        name=name,
        name_without_extension=get_name_without_extension(name),
        parent_directory=directory,
        relative_path=relative_path,
        index=index,
    )


def is_folder(path: str) -> bool:
    """True if `path` exists and is a directory itself (not a link to one)."""
    return os.path.isdir(path) and not os.path.islink(path)


async def list_files(directory: str) -> List[FileRecord]:
    """Lists the regular files directly inside `directory`, indexed from 1."""
    files: List[FileRecord] = []
    entries = await asyncio.to_thread(_read_directory, directory)

    for name, kind in entries:
        if kind == FILE:
            files.append(create_file_record(name, directory, len(files) + 1))

    return files


async def list_files_recursive(directory: str, files: Optional[List[FileRecord]] = None) -> List[FileRecord]:
    """
    Depth-first listing of every regular file below `directory`.

    Records are appended to `files` (a new list when omitted), which is
    handed down to every nested call, so each index is the record's 1-based
    position in the whole walk. Entries are handled one at a time in
    enumeration order: a subdirectory is walked completely before the
    entries that follow it. A failed directory read at any depth propagates
    and aborts the walk.
    """
    if files is None:
        files = []

    entries = await asyncio.to_thread(_read_directory, directory)
    logger.debug("Read %d entries from %s", len(entries), directory)

    for name, kind in entries:
        if kind == FILE:
            files.append(create_file_record(name, directory, len(files) + 1))
        elif kind == DIRECTORY:
            await list_files_recursive(os.path.join(directory, name), files)

    return files


def filter_by_extension(files: Iterable[FileRecord], extensions: Iterable[str],
                        ignore_files: Iterable[str] = ()) -> List[FileRecord]:
    """Keeps records whose extension is allowed and whose name is not blacklisted."""
    allowed = set(extensions)
    ignored = set(ignore_files)
    return [f for f in files if f.extension in allowed and f.name not in ignored]


async def list_files_with_extension(directory: str, extensions: Iterable[str] = DEFAULT_EXTENSIONS,
                                    ignore_files: Iterable[str] = ()) -> List[FileRecord]:
    files = await list_files(directory)
    return filter_by_extension(files, extensions, ignore_files)


class DirectoryScanner:
    """Lists a directory and applies the extension and ignore-pattern filters."""

    def __init__(self, root: str, recursive: bool = False, extensions: Optional[Iterable[str]] = None,
                 ignore_files: Iterable[str] = (), ignore_spec: Optional[pathspec.PathSpec] = None):
        self.root = root
        self.recursive = recursive
        self.extensions = set(extensions) if extensions is not None else None
        self.ignore_files = set(ignore_files)
        self.ignore_spec = ignore_spec

    async def scan(self) -> List[FileRecord]:
        if self.recursive:
            files = await list_files_recursive(self.root)
        else:
            files = await list_files(self.root)
        found = len(files)

        if self.extensions is not None:
            files = filter_by_extension(files, self.extensions, self.ignore_files)
        elif self.ignore_files:
            files = [f for f in files if f.name not in self.ignore_files]

        if self.ignore_spec is not None:
            files = filter_ignored(files, self.root, self.ignore_spec)

        logger.info("Scanned %s: %d files found, %d kept", self.root, found, len(files))
        return files
