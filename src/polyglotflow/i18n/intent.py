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


"""Intent extraction from normalized commands.

Two stages, both deterministic:

1. The language's ordered intent patterns (or the default language's table when
   the language has none). The first match wins and its named groups become the
   entities. Confidence 0.8.
2. A flat keyword classifier over the lowercased text. First hit wins.
   Confidence 0.5. When nothing matches at all the intent is "general".

The two confidence values mark where a result came from; they are not
probabilities.
"""

from __future__ import annotations

import logging
import re

from polyglotflow.core.models import IntentResult, SupportedLanguage
from polyglotflow.rules.languages import (
    DEFAULT_INTENT_LANGUAGE,
    INTENT_KEYWORDS,
    get_rule_set,
)

logger = logging.getLogger(__name__)

PATTERN_CONFIDENCE = 0.8
FALLBACK_CONFIDENCE = 0.5
GENERAL_INTENT = "general"


class IntentExtractor:
    """Extracts an intent and its entities from normalized text.

    Example:
        >>> extractor = IntentExtractor()
        >>> result = extractor.extract("create a new project", SupportedLanguage.EN)
        >>> result.intent, result.entities, result.confidence
        ('create', {'target': 'project'}, 0.8)
    """

    def __init__(self, default_language: SupportedLanguage = DEFAULT_INTENT_LANGUAGE) -> None:
        """Initialize extractor.

        Args:
            default_language: Language whose patterns are used when the requested
                language has no intent table
        """
        self.default_language = default_language

    def _patterns_for(
        self, language: SupportedLanguage | str
    ) -> tuple[tuple[str, re.Pattern[str]], ...]:
        try:
            rules = get_rule_set(SupportedLanguage.parse(language))
        except ValueError:
            rules = None
        if rules is None or not rules.has_intent_patterns:
            rules = get_rule_set(self.default_language)
        return rules.intent_patterns

    def extract(self, text: str, language: SupportedLanguage | str) -> IntentResult:
        """Extract intent and entities.

        Never raises: unknown languages and texts without any signal produce
        a "general" intent.

        Args:
            text: Normalized command text
            language: Language of the text

        Returns:
            IntentResult with intent label, named entities and confidence
        """
        for intent, pattern in self._patterns_for(language):
            match = pattern.search(text)
            if match:
                entities = {
                    name: value for name, value in match.groupdict().items() if value is not None
                }
                return IntentResult(
                    intent=intent, entities=entities, confidence=PATTERN_CONFIDENCE
                )

        lowered = text.lower()
        for intent, keywords in INTENT_KEYWORDS:
            if any(keyword in lowered for keyword in keywords):
                logger.debug(f"Keyword fallback matched intent '{intent}'")
                return IntentResult(intent=intent, confidence=FALLBACK_CONFIDENCE)

        return IntentResult(intent=GENERAL_INTENT, confidence=FALLBACK_CONFIDENCE)


def extract_intent(
    text: str,
    language: SupportedLanguage | str,
    default_language: SupportedLanguage = DEFAULT_INTENT_LANGUAGE,
) -> IntentResult:
    """Extract intent with a throwaway extractor.

    Args:
        text: Normalized command text
        language: Language of the text
        default_language: Fallback pattern table language

    Returns:
        IntentResult
    """
    return IntentExtractor(default_language).extract(text, language)
