"""Jira CSV export handling."""

from .models import (
    JiraPriority,
    PRIORITY_MAP,
    HeaderEntry,
    DedupedHeaders,
    ImportFileError,
    ConfigurationError,
)
from .headers import dedupe_headers, dedupe_header_names, deduped_file_path
from .labels import SPECIAL_COLUMNS, METADATA_COLUMNS, SpecialColumn, convert_to_label
from .transform import RowTransformer, map_priority, build_issue_url, build_description
from .importer import JiraCsvImporter, read_rows

__all__ = [
    "JiraPriority",
    "PRIORITY_MAP",
    "HeaderEntry",
    "DedupedHeaders",
    "ImportFileError",
    "ConfigurationError",
    "dedupe_headers",
    "dedupe_header_names",
    "deduped_file_path",
    "SPECIAL_COLUMNS",
    "METADATA_COLUMNS",
    "SpecialColumn",
    "convert_to_label",
    "RowTransformer",
    "map_priority",
    "build_issue_url",
    "build_description",
    "JiraCsvImporter",
    "read_rows",
]
