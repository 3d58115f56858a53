"""Base interface for issue importers."""

from abc import ABC, abstractmethod

from .models import ImportResult


class Importer(ABC):
    """Abstract base class for importers that produce an ImportResult."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the import source."""
        pass

    @property
    @abstractmethod
    def default_team_name(self) -> str:
        """Team name suggested to the caller for the imported issues."""
        pass

    @abstractmethod
    def import_issues(self) -> ImportResult:
        """Run the import and return the normalized result."""
        pass
