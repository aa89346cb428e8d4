# src/fsindex/utils/storage.py
"""
Directory creation and whole-file save/load helpers.

Blocking filesystem calls run in a worker thread so the coroutines can be
awaited from an event loop. Failures are logged where they are detected and
re-raised unchanged.
"""
import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

from fsindex.config import JSON_INDENT, TEXT_ENCODING

logger = logging.getLogger(__name__)


def _make_directories(directory_path: str) -> Optional[str]:
    # Find the topmost missing ancestor before creating the chain
    first_created = None
    current = Path(directory_path).absolute()
    while not current.exists():
        first_created = str(current)
        if current.parent == current:
            break
        current = current.parent

    os.makedirs(directory_path, exist_ok=True)
    return first_created


async def create_directory(directory_path: str) -> Optional[str]:
    """
    Ensures a directory exists, creating missing ancestors.
    Returns the first directory that had to be created, or None if the
    path already existed.
    """
    return await asyncio.to_thread(_make_directories, directory_path)


def _read_text(filename: str) -> str:
    # Undecodable bytes become U+FFFD and surface as a JSON parse error
    with open(filename, "r", encoding=TEXT_ENCODING, errors="replace") as f:
        return f.read()


async def read_json_file(filename: str) -> Any:
    data = await asyncio.to_thread(_read_text, filename)
    try:
        return json.loads(data)
    except json.JSONDecodeError:
        logger.error("Error parsing JSON file: %s", filename)
        raise


def _write(full_path: str, data: Union[str, bytes]) -> None:
    if isinstance(data, bytes):
        with open(full_path, "wb") as f:
            f.write(data)
    else:
        with open(full_path, "w", encoding=TEXT_ENCODING) as f:
            f.write(data)


async def save_file(directory_path: str, file_name: str, data: Union[str, bytes]) -> None:
    """Writes `data` to `directory_path/file_name`, creating the directory first."""
    full_path = os.path.join(directory_path, file_name)
    await create_directory(directory_path)
    try:
        await asyncio.to_thread(_write, full_path, data)
    except OSError:
        logger.error("Error saving file: %s", full_path)
        raise
    logger.debug("Saved %s", full_path)


async def save_json_file(directory_path: str, file_name: str, data: Any) -> None:
    await save_file(directory_path, file_name, json.dumps(data, indent=JSON_INDENT))
