# Copyright 2025 KTTC AI (https://github.com/kttc-ai)
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Language pipeline entry points.

Module-level functions run against a process-wide default LanguageManager and
CulturalContextAnalyzer, created on first use. Applications that need isolated
caches create their own LanguageManager instead.

Usage:
    from polyglotflow.i18n import detect_language, extract_intent, normalize

    result = detect_language("Hello, how are you today?")
    text = normalize("  Create a new project ", result.language)
    intent = extract_intent(text, result.language)  # intent="create"

    clear_cache()
    get_cache_stats()  # CacheStats(translation_entries=0, detection_entries=0, ...)
"""

from __future__ import annotations

from datetime import date, datetime, time

from polyglotflow.core.models import (
    CacheStats,
    CulturalProfile,
    DetectionResult,
    IntentResult,
    SensitivityReport,
    SupportedLanguage,
)
from polyglotflow.cultural.analyzer import CulturalContextAnalyzer
from polyglotflow.i18n.detector import LanguageDetector, detect_script, score_languages
from polyglotflow.i18n.intent import IntentExtractor
from polyglotflow.i18n.manager import LanguageManager
from polyglotflow.i18n.normalizer import fold_full_width

# Global instances
_manager: LanguageManager | None = None
_analyzer: CulturalContextAnalyzer | None = None


def get_language_manager() -> LanguageManager:
    """Get the global language manager.

    Returns:
        LanguageManager singleton instance
    """
    global _manager
    if _manager is None:
        _manager = LanguageManager()
    return _manager


def get_cultural_analyzer() -> CulturalContextAnalyzer:
    """Get the global cultural context analyzer."""
    global _analyzer
    if _analyzer is None:
        _analyzer = CulturalContextAnalyzer()
    return _analyzer


def detect_language(text: str) -> DetectionResult:
    """Detect the language of text (memoized).

    Examples:
        >>> detect_language("Привет, как дела?").script
        <Script.CYRILLIC: 'cyrillic'>
    """
    return get_language_manager().detect_language(text)


def normalize(text: str, language: SupportedLanguage | str) -> str:
    """Canonicalize text for its language."""
    return get_language_manager().normalize(text, language)


def extract_intent(text: str, language: SupportedLanguage | str) -> IntentResult:
    """Extract intent and entities from normalized text."""
    return get_language_manager().extract_intent(text, language)


def analyze_culture(
    language: SupportedLanguage | str,
    text: str,
    region: str | None = None,
    timezone: str | None = None,
    time_of_day: datetime | time | None = None,
) -> CulturalProfile:
    """Derive the cultural profile of text.

    Args:
        language: Language of the text
        text: Raw input text
        region: Region override
        timezone: Timezone override
        time_of_day: Local time used to pick the greeting

    Returns:
        Fresh CulturalProfile
    """
    return get_cultural_analyzer().analyze(
        language, text, region=region, timezone=timezone, time_of_day=time_of_day
    )


def format_date(value: date, profile: CulturalProfile) -> str:
    """Format a date in the profile's date format."""
    return get_cultural_analyzer().format_date(value, profile)


def format_number(value: float, profile: CulturalProfile) -> str:
    """Format a number in the profile's number format."""
    return get_cultural_analyzer().format_number(value, profile)


def format_currency(value: float, profile: CulturalProfile) -> str:
    """Format an amount in the profile's currency format."""
    return get_cultural_analyzer().format_currency(value, profile)


def format_number_by_locale(
    value: float, language: SupportedLanguage | str, format: str | None = None
) -> str:
    """Format a number with the language's locale database conventions."""
    return get_cultural_analyzer().format_number_by_locale(value, language, format=format)


def format_date_by_locale(
    value: date, language: SupportedLanguage | str, format: str = "medium"
) -> str:
    """Format a date with the language's locale database conventions."""
    return get_cultural_analyzer().format_date_by_locale(value, language, format=format)


def format_currency_by_locale(
    amount: float, language: SupportedLanguage | str, currency: str | None = None
) -> str:
    """Format an amount in the language's (or the given ISO 4217) currency.

    Examples:
        >>> format_currency_by_locale(1234.5, "en")
        '$1,234.50'
    """
    return get_cultural_analyzer().format_currency_by_locale(amount, language, currency=currency)


def get_communication_recommendations(profile: CulturalProfile) -> list[str]:
    """Get communication advice for a profile."""
    return get_cultural_analyzer().get_communication_recommendations(profile)


def check_cultural_sensitivity(text: str, profile: CulturalProfile) -> SensitivityReport:
    """Flag sensitive topics and informal wording in formal contexts."""
    return get_cultural_analyzer().check_cultural_sensitivity(text, profile)


def clear_cache() -> None:
    """Empty the global detection and translation caches."""
    get_language_manager().clear_cache()


def get_cache_stats() -> CacheStats:
    """Get occupancy of the global caches."""
    return get_language_manager().get_cache_stats()


__all__ = [
    # Call contracts
    "detect_language",
    "normalize",
    "extract_intent",
    "analyze_culture",
    "format_date",
    "format_number",
    "format_currency",
    "format_number_by_locale",
    "format_date_by_locale",
    "format_currency_by_locale",
    "get_communication_recommendations",
    "check_cultural_sensitivity",
    "clear_cache",
    "get_cache_stats",
    # Building blocks
    "detect_script",
    "fold_full_width",
    "score_languages",
    # Classes
    "IntentExtractor",
    "LanguageDetector",
    "LanguageManager",
    "get_cultural_analyzer",
    "get_language_manager",
]
