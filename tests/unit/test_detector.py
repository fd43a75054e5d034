"""Unit tests for language detection.

Tests scoring, confidence, alternatives, script classification and memoization.
"""

from unittest.mock import patch

import pytest

from polyglotflow.core.cache import DetectionCache
from polyglotflow.core.models import Script, SupportedLanguage
from polyglotflow.i18n.detector import LanguageDetector, detect_script, score_languages


@pytest.mark.unit
class TestLanguageDetection:
    """Test LanguageDetector.detect results."""

    def test_english_greeting(self) -> None:
        """Test plain English is detected with full confidence."""
        result = LanguageDetector().detect("Hello, how are you today?")

        assert result.language == SupportedLanguage.EN
        assert result.confidence > 0.5
        assert result.script == Script.LATIN

    def test_russian_greeting(self) -> None:
        """Test Cyrillic text is detected as Russian."""
        result = LanguageDetector().detect("Привет, как дела?")

        assert result.language == SupportedLanguage.RU
        assert result.script == Script.CYRILLIC
        assert result.confidence == 1.0

    def test_japanese_beats_chinese(self) -> None:
        """Test kana and phrases outweigh the shared Han characters."""
        result = LanguageDetector().detect("こんにちは、お元気ですか？")

        assert result.language == SupportedLanguage.JA
        assert result.script == Script.CJK
        assert result.confidence == pytest.approx(14 / 16)
        assert [alt.language for alt in result.alternatives[:2]] == [
            SupportedLanguage.ZH_CN,
            SupportedLanguage.ZH_TW,
        ]

    def test_korean(self) -> None:
        """Test Hangul text is detected as Korean."""
        result = LanguageDetector().detect("안녕하세요")

        assert result.language == SupportedLanguage.KO
        assert result.script == Script.CJK

    def test_hindi(self) -> None:
        """Test Devanagari text is detected as Hindi."""
        result = LanguageDetector().detect("नमस्ते")

        assert result.language == SupportedLanguage.HI
        assert result.script == Script.DEVANAGARI

    @pytest.mark.parametrize("text", ["", "   ", "12345", "!!!"])
    def test_no_signal_is_well_formed(self, text: str) -> None:
        """Test input without signal yields the first language at zero confidence."""
        result = LanguageDetector().detect(text)

        assert result.language == SupportedLanguage.EN
        assert result.confidence == 0.0
        assert len(result.alternatives) == 3
        assert all(alt.confidence == 0.0 for alt in result.alternatives)

    def test_alternatives_exclude_winner_and_are_sorted(self) -> None:
        """Test alternatives never contain the winner and are best first."""
        result = LanguageDetector().detect("こんにちは、お元気ですか？")
        scores = [alt.confidence for alt in result.alternatives]

        assert result.language not in [alt.language for alt in result.alternatives]
        assert scores == sorted(scores, reverse=True)
        assert len(result.alternatives) <= 3


@pytest.mark.unit
class TestScoring:
    """Test raw language scores."""

    def test_phrase_weight(self) -> None:
        """Test a common phrase counts ten, a lexical marker one."""
        scores = dict(score_languages("Hello, how are you today?"))

        # "are" + "hello"
        assert scores[SupportedLanguage.EN] == 11

    def test_russian_score(self) -> None:
        """Test three Cyrillic words plus one phrase."""
        scores = dict(score_languages("Привет, как дела?"))

        assert scores[SupportedLanguage.RU] == 13

    def test_ties_keep_enumeration_order(self) -> None:
        """Test languages with equal scores stay in enumeration order."""
        ranked = [language for language, _ in score_languages("")]

        assert ranked == list(SupportedLanguage)

    def test_phrase_match_is_case_insensitive(self) -> None:
        """Test phrases are found regardless of letter case."""
        scores = dict(score_languages("MERCI BEAUCOUP"))

        assert scores[SupportedLanguage.FR] >= 10


@pytest.mark.unit
class TestDetectScript:
    """Test script classification."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("plain ascii", Script.LATIN),
            ("", Script.LATIN),
            ("Grüße", Script.LATIN),
            ("Привет", Script.CYRILLIC),
            ("你好", Script.CJK),
            ("カタカナ", Script.CJK),
            ("한국어", Script.CJK),
            ("مرحبا", Script.ARABIC),
            ("नमस्ते", Script.DEVANAGARI),
        ],
    )
    def test_script_families(self, text: str, expected: Script) -> None:
        """Test each character family maps to its script."""
        assert detect_script(text) == expected

    def test_cyrillic_has_priority(self) -> None:
        """Test Cyrillic wins over CJK when both are present."""
        assert detect_script("你好 привет") == Script.CYRILLIC


@pytest.mark.unit
class TestDetectionCaching:
    """Test detection memoization."""

    def test_second_call_uses_cache(self) -> None:
        """Test repeated detection does not recompute."""
        detector = LanguageDetector()

        with patch.object(detector, "_compute", wraps=detector._compute) as compute:
            first = detector.detect("Hello, how are you today?")
            second = detector.detect("Hello, how are you today?")

        assert compute.call_count == 1
        assert first == second
        assert detector.cache.metrics.hits == 1
        assert detector.cache.metrics.misses == 1

    def test_clear_forces_recomputation(self) -> None:
        """Test clearing the cache makes the next call recompute."""
        cache = DetectionCache()
        detector = LanguageDetector(cache=cache)

        first = detector.detect("Привет, как дела?")
        cache.clear()
        second = detector.detect("Привет, как дела?")

        assert first == second
        assert cache.metrics.misses == 2
        assert cache.metrics.hits == 0

    def test_cache_keyed_by_exact_text(self) -> None:
        """Test texts differing only in case are cached separately."""
        detector = LanguageDetector()

        detector.detect("Hello")
        detector.detect("hello")

        assert len(detector.cache) == 2
