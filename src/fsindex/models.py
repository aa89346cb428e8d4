# src/fsindex/models.py
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class FileRecord:
    """A file found while listing a directory."""
    absolute_path: str
    extension: Optional[str]
    name: str
    name_without_extension: str
    parent_directory: str
    relative_path: str
    index: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class TransferRecord:
    """A planned copy of one file to a destination path."""
    file: FileRecord
    destination: str
    action_reason: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.file.relative_path,
            "destination": self.destination,
            "action_reason": self.action_reason,
        }
