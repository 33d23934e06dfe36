"""Abstract AI collaborators used while editing catalog items.

Both are best-effort services: implementations raise
``CollaboratorError`` on failure and the application handlers turn
that into "no new data".
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class TagSuggestionService(ABC):

    @abstractmethod
    def suggest(self, description: str) -> list[str]:
        """Return suggested tags for an item description (may be empty)."""


class ImageGenerationService(ABC):

    @abstractmethod
    def generate(self, name: str, description: str) -> str:
        """Return a reference to a generated product image."""
