"""Importer for Jira CSV exports."""

import csv
import logging
from pathlib import Path
from typing import Optional, Union

from ..config import settings
from ..importers.base import Importer
from ..importers.models import ImportResult
from .headers import dedupe_headers
from .models import ImportFileError
from .transform import RowTransformer

logger = logging.getLogger(__name__)

# Allow description cells beyond the default 128 KiB field limit
FIELD_SIZE_LIMIT = 2**31 - 1
csv.field_size_limit(FIELD_SIZE_LIMIT)


def read_rows(file_path: Path) -> list[dict[str, str]]:
    """Parse a CSV file whose headers are unique into rows keyed by header."""
    try:
        with file_path.open("r", encoding="utf-8", newline="") as handle:
            # Short rows read as empty cells
            reader = csv.DictReader(handle, restval="")
            return list(reader)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read {file_path}: {e}")
        raise ImportFileError(f"Could not read {file_path}: {e}") from e
    except csv.Error as e:
        logger.error(f"Malformed CSV in {file_path}: {e}")
        raise ImportFileError(f"Malformed CSV in {file_path}: {e}") from e


class JiraCsvImporter(Importer):
    """Imports issues from a Jira CSV export."""

    def __init__(
        self,
        file_path: Union[str, Path],
        org_slug: Optional[str] = None,
        custom_url: Optional[str] = None,
        keep_deduped_file: Optional[bool] = None,
    ):
        self.file_path = Path(file_path)
        self.org_slug = org_slug
        self.custom_url = custom_url
        self.keep_deduped_file = (
            settings.keep_deduped_file if keep_deduped_file is None else keep_deduped_file
        )

    @property
    def name(self) -> str:
        return "Jira (CSV)"

    @property
    def default_team_name(self) -> str:
        return "Jira"

    def import_issues(self) -> ImportResult:
        """
        Import every issue in the export.

        Raises:
            ImportFileError: If the export cannot be read, rewritten or parsed
        """
        logger.info(f"Importing Jira CSV export {self.file_path}")
        deduped = dedupe_headers(self.file_path)
        try:
            rows = read_rows(deduped.file_path)
        finally:
            if not self.keep_deduped_file:
                deduped.file_path.unlink(missing_ok=True)

        transformer = RowTransformer(org_slug=self.org_slug, custom_url=self.custom_url)
        return transformer.transform(rows, deduped.header_map)
