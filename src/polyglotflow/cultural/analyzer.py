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


"""Cultural context analysis.

Resolves the base cultural profile of a language and refines a private copy
from the text being handled:

1. Region and timezone overrides
2. Formality from marker counts (any very-formal marker wins)
3. Greeting for the time of day
4. Etiquette forced by the first business topic found

Also exposes the profile-driven helpers: formatting, pluralization,
communication recommendations and sensitivity checks.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time

from polyglotflow.core.models import (
    CommunicationStyle,
    CulturalProfile,
    DecisionMaking,
    FormalityLevel,
    SensitivityReport,
    SupportedLanguage,
)
from polyglotflow.cultural import formatting, plurals
from polyglotflow.rules.cultural import (
    BUSINESS_INDICATORS,
    BUSINESS_TOPIC_ETIQUETTE,
    INFORMAL_IN_FORMAL_MARKERS,
    SENSITIVE_TOPICS,
    TIME_BASED_GREETINGS,
    get_base_profile,
)
from polyglotflow.rules.languages import get_rule_set
from polyglotflow.utils.config import get_settings

logger = logging.getLogger(__name__)

# Advice per etiquette value, in output order
_STYLE_ADVICE: dict[CommunicationStyle, tuple[str, ...]] = {
    CommunicationStyle.DIRECT: (),
    CommunicationStyle.INDIRECT: (
        "Use indirect communication, avoid direct confrontation",
        "Pay attention to non-verbal cues and context",
    ),
    CommunicationStyle.CONTEXTUAL: (
        "Consider the broader context when communicating",
        "Build relationship before discussing business",
    ),
}

_DECISION_ADVICE: dict[DecisionMaking, tuple[str, ...]] = {
    DecisionMaking.INDIVIDUAL: (),
    DecisionMaking.CONSENSUS: (
        "Involve all stakeholders in decision-making",
        "Allow time for group discussion and agreement",
    ),
    DecisionMaking.HIERARCHICAL: (
        "Respect organizational hierarchy",
        "Defer to senior members for final decisions",
    ),
}

_VERY_FORMAL_ADVICE = (
    "Use honorifics and formal titles",
    "Maintain professional distance",
)


def greeting_period(hour: int) -> str:
    """Map an hour (0-23) to morning, afternoon, evening or night."""
    if 5 <= hour < 12:
        return "morning"
    if 12 <= hour < 17:
        return "afternoon"
    if 17 <= hour < 21:
        return "evening"
    return "night"


class CulturalContextAnalyzer:
    """Derives per-request cultural profiles.

    Base profiles are never modified: every call works on a deep copy.

    Example:
        >>> analyzer = CulturalContextAnalyzer()
        >>> profile = analyzer.analyze(SupportedLanguage.JA, "誠にありがとうございます")
        >>> profile.formality_level
        <FormalityLevel.VERY_FORMAL: 'very-formal'>
    """

    @staticmethod
    def _resolve_language(language: SupportedLanguage | str) -> SupportedLanguage:
        try:
            return SupportedLanguage.parse(language)
        except ValueError:
            fallback = get_settings().default_language
            logger.warning(
                f"Unsupported language '{language}', using {fallback.value} cultural profile"
            )
            return fallback

    def analyze(
        self,
        language: SupportedLanguage | str,
        text: str,
        region: str | None = None,
        timezone: str | None = None,
        time_of_day: datetime | time | None = None,
    ) -> CulturalProfile:
        """Analyze the cultural context of text.

        Unsupported language codes fall back to the configured default language.

        Args:
            language: Language of the text
            text: Raw input text
            region: Region override (e.g., "GB")
            timezone: Timezone override (e.g., "Europe/London")
            time_of_day: Local time used to pick the greeting

        Returns:
            A fresh CulturalProfile derived from the language's base profile
        """
        language = self._resolve_language(language)
        profile = get_base_profile(language)

        if region:
            profile.region = region
        if timezone:
            profile.timezone = timezone

        formality = self.detect_formality_level(text, language)
        if formality is not None:
            profile.formality_level = formality

        if time_of_day is not None and profile.business_etiquette is not None:
            greeting = self.get_time_based_greeting(language, time_of_day.hour)
            if greeting:
                profile.business_etiquette.greeting_style = greeting

        topic = self.detect_business_topic(text)
        if topic is not None and profile.business_etiquette is not None:
            forced = BUSINESS_TOPIC_ETIQUETTE.get(topic)
            if forced is not None:
                style, decision = forced
                profile.business_etiquette.communication_style = style
                profile.business_etiquette.decision_making = decision

        logger.debug(
            f"Cultural profile for {language.value}: "
            f"formality={profile.formality_level.value}, topic={topic}"
        )
        return profile

    def detect_formality_level(
        self, text: str, language: SupportedLanguage
    ) -> FormalityLevel | None:
        """Classify the register of text from marker counts.

        Each marker counts once if it occurs anywhere (case-insensitive).

        Args:
            text: Text to inspect
            language: Language whose markers apply

        Returns:
            FormalityLevel, or None when the language has no marker table
        """
        markers = get_rule_set(language).formality_markers
        if markers is None:
            return None

        lowered = text.lower()
        informal = sum(1 for marker in markers.informal if marker in lowered)
        formal = sum(1 for marker in markers.formal if marker in lowered)
        very_formal = sum(1 for marker in markers.very_formal if marker in lowered)

        if very_formal > 0:
            return FormalityLevel.VERY_FORMAL
        if formal > informal:
            return FormalityLevel.FORMAL
        if informal > formal:
            return FormalityLevel.INFORMAL
        return FormalityLevel.NEUTRAL

    def get_time_based_greeting(self, language: SupportedLanguage, hour: int) -> str | None:
        """Get the customary greeting for an hour of the day, if known."""
        greetings = TIME_BASED_GREETINGS.get(language)
        if not greetings:
            return None
        return greetings.get(greeting_period(hour))

    def detect_business_topic(self, text: str) -> str | None:
        """Find the first business topic mentioned in text.

        Topics are checked in a fixed order (meeting, presentation,
        negotiation, contract); later topics are not considered.

        Returns:
            Topic name, or None
        """
        lowered = text.lower()
        for topic, keywords in BUSINESS_INDICATORS:
            if any(keyword in lowered for keyword in keywords):
                return topic
        return None

    def get_communication_recommendations(self, profile: CulturalProfile) -> list[str]:
        """Get communication advice for a profile.

        Args:
            profile: Cultural profile

        Returns:
            Advice strings: communication style first, then decision making,
            then formality
        """
        recommendations: list[str] = []
        etiquette = profile.business_etiquette
        if etiquette is not None:
            recommendations.extend(_STYLE_ADVICE[etiquette.communication_style])
            recommendations.extend(_DECISION_ADVICE[etiquette.decision_making])
        if profile.formality_level == FormalityLevel.VERY_FORMAL:
            recommendations.extend(_VERY_FORMAL_ADVICE)
        return recommendations

    def check_cultural_sensitivity(self, text: str, profile: CulturalProfile) -> SensitivityReport:
        """Flag sensitive topics and register mismatches.

        Args:
            text: Text to check
            profile: Cultural profile of the audience

        Returns:
            SensitivityReport listing one warning per sensitive topic found and
            one for informal wording in a formal context
        """
        lowered = text.lower()
        warnings = [
            f"Contains potentially sensitive topic: {topic}"
            for topic, keywords in SENSITIVE_TOPICS
            if any(keyword in lowered for keyword in keywords)
        ]
        if profile.formality_level.is_formal and any(
            marker in lowered for marker in INFORMAL_IN_FORMAL_MARKERS
        ):
            warnings.append("Informal language detected in formal context")

        return SensitivityReport(is_sensitive=bool(warnings), warnings=warnings)

    def format_date(self, value: date, profile: CulturalProfile) -> str:
        return formatting.format_date(value, profile)

    def format_number(self, value: float, profile: CulturalProfile) -> str:
        return formatting.format_number(value, profile)

    def format_currency(self, value: float, profile: CulturalProfile) -> str:
        return formatting.format_currency(value, profile)

    def format_number_by_locale(
        self, value: float, language: SupportedLanguage | str, format: str | None = None
    ) -> str:
        return formatting.format_number_by_locale(
            value, self._resolve_language(language), format=format
        )

    def format_date_by_locale(
        self, value: date, language: SupportedLanguage | str, format: str = "medium"
    ) -> str:
        return formatting.format_date_by_locale(
            value, self._resolve_language(language), format=format
        )

    def format_currency_by_locale(
        self, amount: float, language: SupportedLanguage | str, currency: str | None = None
    ) -> str:
        return formatting.format_currency_by_locale(
            amount, self._resolve_language(language), currency=currency
        )

    def apply_pluralization(
        self, count: float, singular: str, plural: str, profile: CulturalProfile
    ) -> str:
        return plurals.apply_pluralization(count, singular, plural, profile)
