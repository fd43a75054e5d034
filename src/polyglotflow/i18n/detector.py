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


"""Rule-based language detection.

Scores every supported language against its rule set and ranks them:

    score = (lexical marker matches) + 10 * (common phrases found)

Confidence is the winner's share of the total score. The writing system is
classified separately, by the first character family present.

Example:
    >>> detector = LanguageDetector()
    >>> result = detector.detect("Привет, как дела?")
    >>> result.language, result.script
    (<SupportedLanguage.RU: 'ru'>, <Script.CYRILLIC: 'cyrillic'>)
"""

from __future__ import annotations

import logging
import re

from polyglotflow.core.cache import DetectionCache
from polyglotflow.core.models import (
    DetectionResult,
    LanguageAlternative,
    Script,
    SupportedLanguage,
)
from polyglotflow.rules.languages import PHRASE_WEIGHT, RULE_SETS

logger = logging.getLogger(__name__)

MAX_ALTERNATIVES = 3

# Checked in order; the first family present decides the script
_SCRIPT_PATTERNS: tuple[tuple[Script, re.Pattern[str]], ...] = (
    (Script.CYRILLIC, re.compile(r"[а-яА-ЯёЁ]")),
    (Script.CJK, re.compile(r"[\u4e00-\u9fff\u3040-\u30ff\uac00-\ud7af]")),
    (Script.ARABIC, re.compile(r"[\u0600-\u06ff]")),
    (Script.DEVANAGARI, re.compile(r"[\u0900-\u097f]")),
)


def detect_script(text: str) -> Script:
    """Classify the writing system of text.

    Cyrillic wins over CJK (Han, Kana, Hangul), then Arabic, then Devanagari.
    Anything else, including empty text, is Latin.

    Args:
        text: Text to classify

    Returns:
        Script family
    """
    for script, pattern in _SCRIPT_PATTERNS:
        if pattern.search(text):
            return script
    return Script.LATIN


def score_languages(text: str) -> list[tuple[SupportedLanguage, int]]:
    """Score every supported language for text, best first.

    Ties keep enumeration order, so an input without any signal ranks English first.

    Args:
        text: Text to score

    Returns:
        (language, score) pairs sorted by descending score
    """
    lowered = text.lower()
    scores: list[tuple[SupportedLanguage, int]] = []
    for language in SupportedLanguage:
        rules = RULE_SETS[language]
        score = sum(
            sum(1 for _ in pattern.finditer(text)) for pattern in rules.lexical_markers
        )
        score += PHRASE_WEIGHT * sum(
            1 for phrase in rules.common_phrases if phrase.lower() in lowered
        )
        scores.append((language, score))
    return sorted(scores, key=lambda item: item[1], reverse=True)


class LanguageDetector:
    """Detects the language of free text, memoizing results.

    Results are cached by exact input string. With the default cache nothing
    is ever evicted; call clear_cache() (or pass a bounded DetectionCache)
    to release memory.
    """

    def __init__(self, cache: DetectionCache | None = None) -> None:
        """Initialize detector.

        Args:
            cache: Detection cache to use (default: a private unbounded cache)
        """
        self.cache = cache if cache is not None else DetectionCache()

    def detect(self, text: str) -> DetectionResult:
        """Detect the language of text.

        Never raises on empty or unrecognizable input: such text yields
        confidence 0.0 and the first enumerated language.

        Args:
            text: Text to analyze

        Returns:
            DetectionResult with confidence, up to three alternatives and script
        """
        cached = self.cache.get(text)
        if cached is not None:
            return cached

        result = self._compute(text)
        self.cache.put(text, result)
        return result

    def _compute(self, text: str) -> DetectionResult:
        ranked = score_languages(text)
        total = sum(score for _, score in ranked)

        def share(score: int) -> float:
            return score / total if total > 0 else 0.0

        winner, top_score = ranked[0]
        alternatives = tuple(
            LanguageAlternative(language=language, confidence=share(score))
            for language, score in ranked[1 : 1 + MAX_ALTERNATIVES]
        )
        result = DetectionResult(
            language=winner,
            confidence=share(top_score),
            alternatives=alternatives,
            script=detect_script(text),
        )
        logger.debug(
            f"Detected {result.language.value} "
            f"(confidence={result.confidence:.2f}, script={result.script.value})"
        )
        return result
