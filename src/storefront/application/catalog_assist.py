"""Application services: AI assistance while editing catalog items.

Both collaborators are best-effort.  A failure is logged and yields no
new data; it never reaches the caller as an exception.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from storefront.domain.exceptions import CollaboratorError
from storefront.domain.service.assistants import (
    ImageGenerationService,
    TagSuggestionService,
)

logger = logging.getLogger(__name__)

FALLBACK_IMAGE_REF = "https://placehold.co/600x400.png"


class SuggestTagsHandler:

    def __init__(self, service: TagSuggestionService) -> None:
        self._service = service

    def handle(self, description: str, existing_tags: Iterable[str] = ()) -> list[str]:
        """Return suggested tags not already present on the item."""
        if not description or not description.strip():
            return []

        try:
            suggested = self._service.suggest(description.strip())
        except CollaboratorError as exc:
            logger.warning("Tag suggestion failed: %s", exc)
            return []

        seen = {t.strip().lower() for t in existing_tags}
        result: list[str] = []
        for tag in suggested:
            tag = tag.strip().lower()
            if tag and tag not in seen:
                seen.add(tag)
                result.append(tag)
        return result


class GenerateItemImageHandler:

    def __init__(
        self,
        service: ImageGenerationService,
        fallback_ref: str = FALLBACK_IMAGE_REF,
    ) -> None:
        self._service = service
        self._fallback_ref = fallback_ref

    def handle(self, name: str, description: str) -> str:
        """Return a generated image reference, or the fallback reference."""
        try:
            image_ref = self._service.generate(name, description)
        except CollaboratorError as exc:
            logger.warning("Image generation failed for %r: %s", name, exc)
            return self._fallback_ref
        return image_ref or self._fallback_ref
