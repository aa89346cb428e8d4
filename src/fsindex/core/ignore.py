# src/fsindex/core/ignore.py
import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional

import pathspec

from fsindex.models import FileRecord

logger = logging.getLogger(__name__)


def load_ignore_spec(ignore_file: Optional[Path], extra_patterns: Optional[List[str]] = None) -> pathspec.PathSpec:
    """
    Loads gitignore-style rules from `ignore_file` (if it exists) plus any
    extra patterns, and builds a PathSpec from them.
    """
    lines: List[str] = []

    if ignore_file is not None and ignore_file.exists():
        with open(ignore_file, "r", encoding="utf-8") as f:
            lines = f.readlines()
        logger.debug("Loaded %d ignore rules from %s", len(lines), ignore_file)

    if extra_patterns:
        lines.extend(extra_patterns)

    try:
        return pathspec.PathSpec.from_lines("gitwildmatch", lines)
    except Exception:
        logger.error("Error parsing ignore rules: %s", ignore_file)
        raise


def filter_ignored(files: Iterable[FileRecord], root: str, spec: pathspec.PathSpec) -> List[FileRecord]:
    """Drops records whose path below `root` matches an ignore rule."""
    kept = []
    for f in files:
        rel_path = Path(os.path.relpath(f.relative_path, root)).as_posix()
        if spec.match_file(rel_path):
            logger.debug("Ignoring %s", rel_path)
            continue
        kept.append(f)
    return kept
