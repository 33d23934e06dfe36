"""Tests for the best-effort AI assistance handlers."""

import logging

from storefront.application.catalog_assist import (
    FALLBACK_IMAGE_REF,
    GenerateItemImageHandler,
    SuggestTagsHandler,
)
from tests.fakes import FakeImageGenerationService, FakeTagSuggestionService


class TestSuggestTags:

    def test_new_tags_normalised_and_deduplicated(self):
        service = FakeTagSuggestionService([" Summer ", "hat", "Beach", "beach", ""])
        tags = SuggestTagsHandler(service).handle("A wide straw hat", existing_tags=["Hat"])
        assert tags == ["summer", "beach"]

    def test_blank_description_skips_service(self):
        service = FakeTagSuggestionService(["x"])
        assert SuggestTagsHandler(service).handle("   ") == []
        assert service.calls == []

    def test_failure_yields_no_tags(self, caplog):
        service = FakeTagSuggestionService(fail=True)
        with caplog.at_level(logging.WARNING):
            assert SuggestTagsHandler(service).handle("A straw hat") == []
        assert "Tag suggestion failed" in caplog.text


class TestGenerateItemImage:

    def test_generated_reference_returned(self):
        service = FakeImageGenerationService("data:image/png;base64,AAAA")
        ref = GenerateItemImageHandler(service).handle("Hat", "Straw hat")
        assert ref == "data:image/png;base64,AAAA"

    def test_failure_falls_back(self):
        service = FakeImageGenerationService(fail=True)
        assert GenerateItemImageHandler(service).handle("Hat", "") == FALLBACK_IMAGE_REF

    def test_empty_result_falls_back_to_custom_reference(self):
        service = FakeImageGenerationService("")
        handler = GenerateItemImageHandler(service, fallback_ref="placeholder.png")
        assert handler.handle("Hat", "Straw hat") == "placeholder.png"
