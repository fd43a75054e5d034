"""Unit tests for intent extraction.

Tests pattern matching, entity capture, keyword fallback and default tables.
"""

import pytest

from polyglotflow.core.models import SupportedLanguage
from polyglotflow.i18n.intent import (
    FALLBACK_CONFIDENCE,
    PATTERN_CONFIDENCE,
    IntentExtractor,
    extract_intent,
)


@pytest.mark.unit
class TestEnglishPatterns:
    """Test English intent patterns."""

    def test_create_skips_articles(self) -> None:
        """Test the target is the noun after articles and "new"."""
        result = extract_intent("create a new project", SupportedLanguage.EN)

        assert result.intent == "create"
        assert result.entities == {"target": "project"}
        assert result.confidence == 0.8

    @pytest.mark.parametrize(
        ("text", "intent", "target"),
        [
            ("build the service", "create", "service"),
            ("remove the file", "delete", "file"),
            ("update config", "update", "config"),
        ],
    )
    def test_action_targets(self, text: str, intent: str, target: str) -> None:
        """Test create/delete/update capture their target."""
        result = extract_intent(text, SupportedLanguage.EN)

        assert result.intent == intent
        assert result.entities["target"] == target

    def test_search_captures_query(self) -> None:
        """Test the search query is everything after the verb."""
        result = extract_intent("find all open issues", SupportedLanguage.EN)

        assert result.intent == "search"
        assert result.entities == {"query": "all open issues"}

    def test_status_has_no_entities(self) -> None:
        """Test patterns without groups produce no entities."""
        result = extract_intent("show me the status", SupportedLanguage.EN)

        assert result.intent == "status"
        assert result.entities == {}
        assert result.confidence == PATTERN_CONFIDENCE


@pytest.mark.unit
class TestOtherLanguagePatterns:
    """Test Russian and Japanese intent patterns."""

    def test_russian_create(self) -> None:
        """Test Russian create skips the adjective "new"."""
        result = extract_intent("создать новый проект", SupportedLanguage.RU)

        assert result.intent == "create"
        assert result.entities == {"target": "проект"}

    def test_russian_search(self) -> None:
        """Test Russian search captures the query."""
        result = extract_intent("найти документы", SupportedLanguage.RU)

        assert result.intent == "search"
        assert result.entities == {"query": "документы"}

    def test_japanese_create(self) -> None:
        """Test Japanese create captures the object of 作成."""
        result = extract_intent("新しいプロジェクトを作成", SupportedLanguage.JA)

        assert result.intent == "create"
        assert result.entities == {"target": "プロジェクト"}

    def test_japanese_status(self) -> None:
        """Test Japanese status pattern."""
        result = extract_intent("ステータスを表示", SupportedLanguage.JA)

        assert result.intent == "status"
        assert result.confidence == PATTERN_CONFIDENCE


@pytest.mark.unit
class TestFallback:
    """Test keyword fallback and default table resolution."""

    def test_keyword_fallback(self) -> None:
        """Test a keyword hit yields the lower confidence."""
        result = extract_intent("what is this", SupportedLanguage.EN)

        assert result.intent == "search"
        assert result.entities == {}
        assert result.confidence == FALLBACK_CONFIDENCE

    def test_general_when_nothing_matches(self) -> None:
        """Test texts without any signal get the general intent."""
        result = extract_intent("nothing here", SupportedLanguage.EN)

        assert result.intent == "general"
        assert result.confidence == 0.5

    def test_pattern_beats_fallback_confidence(self) -> None:
        """Test pattern matches always carry higher confidence."""
        assert PATTERN_CONFIDENCE > FALLBACK_CONFIDENCE

    @pytest.mark.parametrize(
        "text",
        ["create a new project", "find all open issues", "what is this", "nothing here"],
    )
    def test_language_without_table_uses_default(self, text: str) -> None:
        """Test a language without patterns behaves like the default language."""
        assert extract_intent(text, SupportedLanguage.DE) == extract_intent(
            text, SupportedLanguage.EN
        )

    def test_unknown_language_uses_default(self) -> None:
        """Test unknown language codes do not raise."""
        assert extract_intent("create a new project", "xx") == extract_intent(
            "create a new project", SupportedLanguage.EN
        )

    def test_custom_default_language(self) -> None:
        """Test the default table is configurable."""
        extractor = IntentExtractor(default_language=SupportedLanguage.RU)

        result = extractor.extract("создать проект", SupportedLanguage.FR)

        assert result.intent == "create"
        assert result.entities == {"target": "проект"}

    def test_repeated_calls_are_identical(self) -> None:
        """Test extraction is deterministic."""
        extractor = IntentExtractor()

        results = [extractor.extract("delete the cache", "en") for _ in range(5)]

        assert all(result == results[0] for result in results)
        assert results[0].entities == {"target": "cache"}
