"""Configuration management for jiraport."""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


def _parse_optional(name: str) -> Optional[str]:
    """Read an environment variable, treating an empty value as unset."""
    value = os.getenv(name)
    if value:
        return value.strip() or None
    return None


class Settings(BaseModel):
    """Application settings."""

    # Jira Cloud organization slug (https://<slug>.atlassian.net)
    jira_org_slug: Optional[str] = _parse_optional("JIRA_ORG_SLUG")

    # Base URL of a self-hosted Jira, used only when no org slug is set
    jira_custom_url: Optional[str] = _parse_optional("JIRA_CUSTOM_URL")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Keep the header-deduplicated copy of the export next to the input
    keep_deduped_file: bool = os.getenv("KEEP_DEDUPED_FILE", "true").lower() == "true"

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


settings = Settings()
