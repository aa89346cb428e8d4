# src/fsindex/utils/paths.py
import os
from typing import Optional


def get_file_extension(file_name: str) -> Optional[str]:
    """Returns the dotted extension of a file name, or None if it has none."""
    extension = os.path.splitext(file_name)[1]
    return extension if extension else None


def get_name_without_extension(file_name: str) -> str:
    base = os.path.basename(file_name)
    return os.path.splitext(base)[0]


def _strip_trailing_separators(path: str) -> str:
    # Keep a bare root ("/") intact
    stripped = path.rstrip("/" + os.sep)
    return stripped or path


def get_enclosing_folder_path(folder_path: str) -> str:
    return os.path.dirname(_strip_trailing_separators(folder_path)) or "."


def get_folder_name_from_path(folder_path: str) -> str:
    return os.path.basename(_strip_trailing_separators(folder_path))
