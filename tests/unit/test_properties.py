"""Property-based tests for the language pipeline.

Uses Hypothesis to check invariants of detection, normalization, intent
extraction and number formatting over generated input.
"""

from typing import Any

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from polyglotflow.core.cache import DetectionCache
from polyglotflow.core.models import PluralRule, SupportedLanguage
from polyglotflow.cultural.plurals import plural_category
from polyglotflow.i18n.detector import LanguageDetector
from polyglotflow.i18n.intent import FALLBACK_CONFIDENCE, PATTERN_CONFIDENCE, IntentExtractor
from polyglotflow.i18n.normalizer import normalize

# ============================================================================
# Custom Strategies
# ============================================================================

MIXED_ALPHABET = (
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789 ,.?!\t\n"
    "абвгдежзиклмнопрстуфхцчшщыэюяПРИВЕТ"
    "こんにちはありがとうございます日本語"
    "你好谢谢請"
    "ＡＢＣａｂｃ１２３！"
    "안녕하세요"
)


@st.composite
def mixed_text_strategy(draw: Any, max_size: int = 80) -> str:
    """Generate text mixing Latin, Cyrillic, CJK and full-width characters."""
    return draw(st.text(alphabet=MIXED_ALPHABET, max_size=max_size))


@st.composite
def language_strategy(draw: Any) -> SupportedLanguage:
    """Generate a supported language."""
    return draw(st.sampled_from(list(SupportedLanguage)))


# ============================================================================
# Detection Properties
# ============================================================================


@pytest.mark.unit
class TestDetectionProperties:
    """Invariants of language detection."""

    @given(text=st.text(max_size=100))
    @settings(max_examples=100)
    def test_confidence_is_a_share(self, text: str) -> None:
        """Confidence values always lie in [0, 1] and alternatives are ordered."""
        result = LanguageDetector().detect(text)

        assert 0.0 <= result.confidence <= 1.0
        assert len(result.alternatives) <= 3
        assert all(alt.confidence <= result.confidence for alt in result.alternatives)
        assert result.language not in {alt.language for alt in result.alternatives}

    @given(text=mixed_text_strategy())
    @settings(max_examples=50)
    def test_detection_is_deterministic(self, text: str) -> None:
        """Independent detectors agree on every input."""
        first = LanguageDetector(cache=DetectionCache()).detect(text)
        second = LanguageDetector(cache=DetectionCache()).detect(text)

        assert first == second

    @given(text=mixed_text_strategy())
    @settings(max_examples=50)
    def test_cached_result_matches_computed(self, text: str) -> None:
        """A cache hit returns the same result as the first computation."""
        detector = LanguageDetector()

        assert detector.detect(text) == detector.detect(text)


# ============================================================================
# Normalization Properties
# ============================================================================


@pytest.mark.unit
class TestNormalizationProperties:
    """Invariants of text normalization."""

    @given(text=mixed_text_strategy(), language=language_strategy())
    @settings(max_examples=100)
    def test_idempotent(self, text: str, language: SupportedLanguage) -> None:
        """Normalizing twice equals normalizing once."""
        once = normalize(text, language)

        assert normalize(once, language) == once

    @given(text=mixed_text_strategy(), language=language_strategy())
    @settings(max_examples=100)
    def test_trimmed(self, text: str, language: SupportedLanguage) -> None:
        """Normalized text never starts or ends with whitespace."""
        normalized = normalize(text, language)

        assert normalized == normalized.strip()


# ============================================================================
# Intent Properties
# ============================================================================


@pytest.mark.unit
class TestIntentProperties:
    """Invariants of intent extraction."""

    @given(text=mixed_text_strategy(), language=language_strategy())
    @settings(max_examples=100)
    def test_confidence_marks_provenance(self, text: str, language: SupportedLanguage) -> None:
        """Confidence is always one of the two provenance markers."""
        result = IntentExtractor().extract(text, language)

        assert result.confidence in (PATTERN_CONFIDENCE, FALLBACK_CONFIDENCE)
        assert result.intent

    @given(text=mixed_text_strategy())
    @settings(max_examples=50)
    def test_languages_without_patterns_use_default(self, text: str) -> None:
        """German has no intent table, so it behaves exactly like English."""
        extractor = IntentExtractor()

        assert extractor.extract(text, SupportedLanguage.DE) == extractor.extract(
            text, SupportedLanguage.EN
        )


# ============================================================================
# Plural Properties
# ============================================================================


@pytest.mark.unit
class TestPluralProperties:
    """Invariants of plural category selection."""

    @given(count=st.integers(min_value=0, max_value=10**6))
    def test_east_slavic_categories(self, count: int) -> None:
        """Russian integers always fall into one, few or many."""
        assert plural_category(count, PluralRule.EAST_SLAVIC) in ("one", "few", "many")

    @given(count=st.integers(min_value=0, max_value=10**6))
    def test_no_plural_languages(self, count: int) -> None:
        """Languages without grammatical plural always select other."""
        assert plural_category(count, PluralRule.ALWAYS_OTHER) == "other"
