"""Label derivation rules for Jira CSV rows."""

from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from .models import HeaderEntry

Row = Mapping[str, Optional[str]]

# Columns copied onto every issue as `_jira_<column>: <value>` labels, in order
METADATA_COLUMNS = (
    "Release",
    "Creator",
    "Created",
    "Assignee",
    "Issue key",
    "Issue id",
    "Parent id",
)


def get_cell(row: Row, column: str) -> Optional[str]:
    """Return the cell value, or None when the column is absent or empty."""
    value = row.get(column)
    return value if value else None


def label_prefix(column: str) -> str:
    """Build the generic prefix for a column, e.g. ``Issue key`` -> ``_jira_issue_key: ``."""
    return f"_jira_{'_'.join(column.split(' ')).lower()}: "


def convert_to_label(row: Row, column: str, prefix: Optional[str] = None) -> Optional[str]:
    """Turn a non-empty cell into a label, using the generic prefix unless one is given."""
    value = get_cell(row, column)
    if value is None:
        return None
    if prefix is None:
        prefix = label_prefix(column)
    return f"{prefix}{value}"


def _is_creator(row: Row, value: str) -> bool:
    return value == get_cell(row, "Creator")


@dataclass(frozen=True)
class SpecialColumn:
    """Label rule for a column matched by its original header name."""

    prefix: str
    suppress: Optional[Callable[[Row, str], bool]] = None


SPECIAL_COLUMNS: dict[str, SpecialColumn] = {
    "Labels": SpecialColumn(prefix=""),
    "Outward issue link (Blocks)": SpecialColumn(prefix="_jira_blocks_key: "),
    "Outward issue link (Relates)": SpecialColumn(prefix="_jira_related_key: "),
    "Outward issue link (Duplicate)": SpecialColumn(prefix="_jira_dupe_key: "),
    # A creator watching their own issue adds nothing
    "Watchers": SpecialColumn(prefix="_jira_watcher: ", suppress=_is_creator),
}


def metadata_labels(row: Row) -> list[str]:
    """Labels for the fixed metadata columns present in the row."""
    labels = []
    for column in METADATA_COLUMNS:
        label = convert_to_label(row, column)
        if label:
            labels.append(label)
    return labels


def special_column_labels(row: Row, header_map: list[HeaderEntry]) -> list[str]:
    """
    Labels for link, watcher and label columns.

    Every column whose original header has a rule contributes, so repeated
    columns such as several ``Watchers`` each yield their own label.
    """
    labels = []
    for entry in header_map:
        rule = SPECIAL_COLUMNS.get(entry.original)
        if rule is None:
            continue
        value = get_cell(row, entry.deduped)
        if value is None:
            continue
        if rule.suppress and rule.suppress(row, value):
            continue
        labels.append(f"{rule.prefix}{value}")
    return labels
