"""Data models for Jira CSV exports."""

from enum import Enum
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field


class JiraPriority(str, Enum):
    """The five priority levels of a default Jira scheme."""

    HIGHEST = "Highest"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    LOWEST = "Lowest"


PRIORITY_MAP: dict[str, int] = {
    JiraPriority.HIGHEST.value: 1,
    JiraPriority.HIGH.value: 2,
    JiraPriority.MEDIUM.value: 3,
    JiraPriority.LOW.value: 4,
    JiraPriority.LOWEST.value: 0,
}


class HeaderEntry(BaseModel):
    """One column of the export: its unique name and its name in the source file."""

    deduped: str
    original: str


class DedupedHeaders(BaseModel):
    """Result of rewriting an export so that every header is unique."""

    file_path: Path  # The sanitized copy
    header_map: list[HeaderEntry] = Field(default_factory=list)  # Original column order

    def original_for(self, deduped: str) -> Optional[str]:
        """Return the original header name for a deduplicated one."""
        for entry in self.header_map:
            if entry.deduped == deduped:
                return entry.original
        return None


class ImportFileError(Exception):
    """Exception raised when an export cannot be read, parsed or rewritten."""

    pass


class ConfigurationError(Exception):
    """Exception raised when the importer has no way to build issue URLs."""

    pass
