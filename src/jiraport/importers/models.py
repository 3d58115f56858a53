"""Data models for the normalized issue import format."""

from typing import Optional
from pydantic import BaseModel, Field


class Label(BaseModel):
    """A label to create in the target tracker, keyed by its name."""

    name: str


class User(BaseModel):
    """A user referenced by imported issues, keyed by its name."""

    name: str


class Status(BaseModel):
    """A workflow status referenced by imported issues, keyed by its name."""

    name: str


class Issue(BaseModel):
    """A single normalized issue."""

    title: str
    description: Optional[str] = None
    status: str
    priority: int = Field(default=0, ge=0, le=4)
    url: Optional[str] = None
    assignee_id: Optional[str] = Field(default=None, serialization_alias="assigneeId")  # Key into users
    labels: list[str] = Field(default_factory=list)  # Duplicates are allowed


class ImportResult(BaseModel):
    """Aggregate produced by an importer and handed to the uploader."""

    issues: list[Issue] = Field(default_factory=list)
    labels: dict[str, Label] = Field(default_factory=dict)
    users: dict[str, User] = Field(default_factory=dict)
    statuses: dict[str, Status] = Field(default_factory=dict)

    def add_label(self, name: str):
        """Register a label; later duplicates are no-ops."""
        if name not in self.labels:
            self.labels[name] = Label(name=name)

    def add_user(self, name: str):
        """Register a user; later duplicates are no-ops."""
        if name not in self.users:
            self.users[name] = User(name=name)

    def add_status(self, name: str):
        """Register a status; later duplicates are no-ops."""
        if name not in self.statuses:
            self.statuses[name] = Status(name=name)

    def add_issue(self, issue: Issue):
        """Append an issue and register every label attached to it."""
        self.issues.append(issue)
        for label in issue.labels:
            self.add_label(label)

    def get_statistics(self) -> dict:
        """Calculate summary counts for this result."""
        return {
            "issue_count": len(self.issues),
            "label_count": len(self.labels),
            "user_count": len(self.users),
            "status_count": len(self.statuses),
            "unassigned_count": sum(1 for issue in self.issues if issue.assignee_id is None),
        }
