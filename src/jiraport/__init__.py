"""jiraport - convert Jira CSV exports into a normalized issue import model."""

__version__ = "0.1.0"
