# src/fsindex/utils/transfer.py
import asyncio
import logging
import os
import shutil
from typing import Iterable, List, Optional

from fsindex.models import FileRecord, TransferRecord

logger = logging.getLogger(__name__)


def plan_transfers(files: Iterable[FileRecord], destination_root: str, root: str,
                   action_reason: Optional[str] = None) -> List[TransferRecord]:
    """Builds one transfer per file, mirroring its location below `root` under `destination_root`."""
    transfers = []
    for f in files:
        rel_path = os.path.relpath(f.relative_path, root)
        transfers.append(TransferRecord(
            file=f,
            destination=os.path.join(destination_root, rel_path),
            action_reason=action_reason,
        ))
    return transfers


async def copy_file(transfer: TransferRecord) -> None:
    # Source is rebuilt from the path as listed, not from absolute_path
    source = os.path.join(transfer.file.parent_directory, transfer.file.name)
    try:
        await asyncio.to_thread(shutil.copyfile, source, transfer.destination)
    except OSError:
        logger.exception("Error copying %s to %s", source, transfer.destination)
        raise
    logger.debug("Copied %s -> %s (%s)", source, transfer.destination, transfer.action_reason or "no reason given")


async def copy_files(transfers: Iterable[TransferRecord]) -> None:
    """Copies files one at a time, in order. The first failure aborts the rest."""
    for transfer in transfers:
        await copy_file(transfer)
