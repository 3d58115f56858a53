"""Conversion of Jira wiki markup to Markdown."""

from jira2markdown import convert


def jira_to_markdown(text: str) -> str:
    """Convert a Jira wiki markup description to Markdown."""
    return convert(text)
