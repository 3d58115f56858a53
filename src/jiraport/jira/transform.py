"""Transformation of parsed Jira CSV rows into the normalized import model."""

import logging
from typing import Callable, Iterable, Optional

from ..importers.models import ImportResult, Issue
from .labels import Row, get_cell, metadata_labels, special_column_labels
from .markup import jira_to_markdown
from .models import HeaderEntry, PRIORITY_MAP

logger = logging.getLogger(__name__)

ORIGINAL_LINK_TEXT = "View original issue in Jira"


def map_priority(value: Optional[str]) -> int:
    """Map a Jira priority name to an integer; unknown values map to 0."""
    if not value:
        return 0
    return PRIORITY_MAP.get(value, 0)


def build_issue_url(
    issue_key: str,
    org_slug: Optional[str] = None,
    custom_url: Optional[str] = None,
) -> Optional[str]:
    """Build the browse URL of an issue on Jira Cloud or a self-hosted Jira."""
    if org_slug:
        return f"https://{org_slug}.atlassian.net/browse/{issue_key}"
    if custom_url:
        return f"{custom_url.rstrip('/')}/browse/{issue_key}"
    return None


def build_description(
    raw: Optional[str],
    url: Optional[str],
    converter: Callable[[str], str] = jira_to_markdown,
) -> Optional[str]:
    """Convert a description to Markdown and append a link back to Jira."""
    markdown = converter(raw) if raw else None
    footer = f"[{ORIGINAL_LINK_TEXT}]({url})" if url else None
    if markdown and footer:
        return f"{markdown}\n\n{footer}"
    return footer or markdown


class RowTransformer:
    """
    Builds an ImportResult from rows keyed by deduplicated header names.

    Statuses and users are registered up front from the whole dataset; each
    row then yields one issue, and every label on it is registered once.
    """

    def __init__(
        self,
        org_slug: Optional[str] = None,
        custom_url: Optional[str] = None,
        markup_converter: Callable[[str], str] = jira_to_markdown,
    ):
        self.org_slug = org_slug
        self.custom_url = custom_url
        self.markup_converter = markup_converter

    def transform(self, rows: Iterable[Row], header_map: list[HeaderEntry]) -> ImportResult:
        """
        Transform every row into the import model.

        Args:
            rows: Parsed rows keyed by deduplicated header
            header_map: Deduplicated-to-original header map in column order

        Returns:
            ImportResult with issues, labels, users and statuses
        """
        rows = list(rows)
        result = ImportResult()

        for status in dict.fromkeys(row.get("Status") or "" for row in rows):
            result.add_status(status)
        # TODO: confirm with product whether an empty assignee should become a user
        assignees = [row["Assignee"] for row in rows if row.get("Assignee") is not None]
        for assignee in dict.fromkeys(assignees):
            result.add_user(assignee)

        for row in rows:
            result.add_issue(self.build_issue(row, header_map))

        stats = result.get_statistics()
        logger.info(
            f"Transformed {stats['issue_count']} issues "
            f"({stats['label_count']} labels, {stats['user_count']} users, "
            f"{stats['status_count']} statuses)"
        )
        return result

    def build_issue(self, row: Row, header_map: list[HeaderEntry]) -> Issue:
        """Build a single issue from a row."""
        issue_key = row.get("Issue key") or ""
        url = build_issue_url(issue_key, self.org_slug, self.custom_url)

        labels = [f"Type: {row.get('Issue Type') or ''}"]
        labels.extend(metadata_labels(row))
        labels.extend(special_column_labels(row, header_map))

        issue = Issue(
            title=row.get("Summary") or "",
            description=build_description(get_cell(row, "Description"), url, self.markup_converter),
            status=row.get("Status") or "",
            priority=map_priority(row.get("Priority")),
            url=url,
            assignee_id=get_cell(row, "Assignee"),
            labels=labels,
        )
        logger.debug(f"Built issue {issue_key} with {len(labels)} labels")
        return issue
