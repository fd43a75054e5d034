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


"""Language manager: detection, normalization, intent and cached translation.

The manager owns the two process-lifetime caches and the translator, so one
instance forms a self-contained language pipeline. Separate instances share
nothing, which keeps tests isolated.
"""

from __future__ import annotations

import logging

from polyglotflow.core.cache import DetectionCache, TranslationCache
from polyglotflow.core.models import (
    CacheStats,
    DetectionResult,
    IntentResult,
    SupportedLanguage,
)
from polyglotflow.i18n.detector import LanguageDetector
from polyglotflow.i18n.intent import IntentExtractor
from polyglotflow.i18n.normalizer import normalize
from polyglotflow.mt.base import BaseTranslator, TranslationContext
from polyglotflow.mt.tagging import TaggingTranslator
from polyglotflow.utils.config import Settings, get_settings

logger = logging.getLogger(__name__)


class LanguageManager:
    """Coordinates the language stages of the pipeline.

    Example:
        >>> manager = LanguageManager()
        >>> manager.detect_language("Hello, how are you today?").language
        <SupportedLanguage.EN: 'en'>
        >>> manager.get_cache_stats().detection_entries
        1
    """

    def __init__(
        self,
        detection_cache: DetectionCache | None = None,
        translation_cache: TranslationCache | None = None,
        translator: BaseTranslator | None = None,
        default_language: SupportedLanguage | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize manager.

        Args:
            detection_cache: Cache for detection results (default: built from settings)
            translation_cache: Cache for translations (default: built from settings)
            translator: Translator collaborator (default: TaggingTranslator)
            default_language: Fallback language for intent patterns
                (default: settings.default_language)
            settings: Settings to use (default: global settings)
        """
        self.settings = settings or get_settings()
        if detection_cache is None:
            detection_cache = DetectionCache(
                max_entries=self.settings.detection_cache_max_entries,
                ttl_seconds=self.settings.cache_ttl_seconds,
            )
        self.detection_cache = detection_cache
        if translation_cache is None:
            translation_cache = TranslationCache(
                max_entries=self.settings.translation_cache_max_entries,
                ttl_seconds=self.settings.cache_ttl_seconds,
            )
        self.translation_cache = translation_cache
        self.translator = translator or TaggingTranslator()
        self.default_language = default_language or self.settings.default_language

        self.detector = LanguageDetector(cache=self.detection_cache)
        self.intent_extractor = IntentExtractor(default_language=self.default_language)

    def detect_language(self, text: str) -> DetectionResult:
        """Detect the language of text (memoized by exact input)."""
        return self.detector.detect(text)

    def normalize(self, text: str, language: SupportedLanguage | str) -> str:
        """Canonicalize text for its language."""
        return normalize(text, language)

    def extract_intent(self, text: str, language: SupportedLanguage | str) -> IntentResult:
        """Extract intent and entities from normalized text."""
        return self.intent_extractor.extract(text, language)

    async def translate(self, text: str, context: TranslationContext) -> str:
        """Translate text through the cache.

        A cached translation for (text, target language) is returned without
        calling the translator. Translator errors propagate unchanged.

        Args:
            text: Text to translate
            context: Translation context

        Returns:
            Translated text
        """
        cached = self.translation_cache.get(text, context.target_language)
        if cached is not None:
            return cached

        logger.info(
            "Translation requested: "
            f"{context.source_language.value} -> {context.target_language.value}"
        )

        translated = await self.translator.translate(text, context)
        self.translation_cache.put(text, context.target_language, translated)
        return translated

    def clear_cache(self) -> None:
        """Empty both caches. The next detection of any text recomputes it."""
        self.detection_cache.clear()
        self.translation_cache.clear()
        logger.info("Language caches cleared")

    def get_cache_stats(self) -> CacheStats:
        """Get a snapshot of cache occupancy.

        Returns:
            CacheStats with distinct translated texts, cached detections and the
            UTF-16 size of cached translations
        """
        return CacheStats(
            translation_entries=self.translation_cache.source_count,
            detection_entries=len(self.detection_cache),
            total_size=self.translation_cache.total_size,
        )
