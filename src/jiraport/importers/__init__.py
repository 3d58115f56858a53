"""Importer contract and normalized import models."""

from .base import Importer
from .models import ImportResult, Issue, Label, User, Status

__all__ = [
    "Importer",
    "ImportResult",
    "Issue",
    "Label",
    "User",
    "Status",
]
