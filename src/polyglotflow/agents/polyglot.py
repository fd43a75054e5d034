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


"""Polyglot agent: the request pipeline.

Runs one request through the stages in a fixed order:

    detect -> analyze culture -> normalize + extract intent -> execute -> adapt -> log

and fans a single response out to several languages concurrently.

Example:
    >>> agent = PolyglotAgent(executor=MyExecutor())
    >>> result = await agent.process_in_native_language("Привет, как дела?")
    >>> result.language
    <SupportedLanguage.RU: 'ru'>
    >>> responses = await agent.generate_multilingual_response(
    ...     "hello", [SupportedLanguage.EN, SupportedLanguage.RU]
    ... )
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from polyglotflow.agents.base import BaseExecutor, MultilingualResponseError
from polyglotflow.core.models import (
    CulturalProfile,
    LanguageAgentConfig,
    MultilingualCommand,
    PolyglotCapabilities,
    ProcessResult,
    SupportedLanguage,
)
from polyglotflow.cultural.adaptation import ResponseAdapter
from polyglotflow.cultural.analyzer import CulturalContextAnalyzer
from polyglotflow.i18n.manager import LanguageManager
from polyglotflow.memory.interactions import (
    InMemoryInteractionLog,
    InteractionLog,
    PolyglotMemoryEntry,
    extract_tags,
)
from polyglotflow.mt.base import BaseTranslator, TranslationContext
from polyglotflow.utils.config import Settings, get_settings

logger = logging.getLogger(__name__)

L = SupportedLanguage

DEFAULT_LANGUAGE_CONFIGS: dict[SupportedLanguage, LanguageAgentConfig] = {
    L.EN: LanguageAgentConfig(language=L.EN, response_template="professional"),
    L.RU: LanguageAgentConfig(language=L.RU, response_template="formal"),
    L.JA: LanguageAgentConfig(
        language=L.JA,
        response_template="polite",
        specialized_vocabulary=["敬語", "丁寧語", "謙譲語"],
    ),
    L.ZH_CN: LanguageAgentConfig(language=L.ZH_CN, response_template="professional"),
}


class PolyglotAgent:
    """Multilingual request pipeline with cultural awareness.

    All collaborators are injectable. The defaults build an isolated
    LanguageManager (own caches, TaggingTranslator), an in-memory
    interaction log and the default per-language configurations.
    """

    def __init__(
        self,
        executor: BaseExecutor,
        translator: BaseTranslator | None = None,
        primary_language: SupportedLanguage | str | None = None,
        manager: LanguageManager | None = None,
        analyzer: CulturalContextAnalyzer | None = None,
        adapter: ResponseAdapter | None = None,
        interaction_log: InteractionLog | None = None,
        language_configs: dict[SupportedLanguage, LanguageAgentConfig] | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize agent.

        Args:
            executor: Executor performing the business action
            translator: Translator for the default manager (ignored if manager is given)
            primary_language: Language of base responses (default: settings.primary_language)
            manager: Language manager (default: a new one with private caches)
            analyzer: Cultural context analyzer
            adapter: Response adapter
            interaction_log: Interaction log (default: in-memory)
            language_configs: Per-language configuration (default: EN, RU, JA, ZH_CN)
            settings: Settings to use (default: global settings)

        Raises:
            ValueError: If both translator and manager are given, or the
                primary language is not supported
        """
        if translator is not None and manager is not None:
            raise ValueError("Pass either a translator or a manager, not both")

        self.settings = settings or get_settings()
        self.executor = executor
        self.primary_language = SupportedLanguage.parse(
            primary_language or self.settings.primary_language
        )
        self.manager = manager or LanguageManager(translator=translator, settings=self.settings)
        self.analyzer = analyzer or CulturalContextAnalyzer()
        self.adapter = adapter or ResponseAdapter()
        self.interaction_log = (
            interaction_log if interaction_log is not None else InMemoryInteractionLog()
        )
        self.language_configs = dict(
            DEFAULT_LANGUAGE_CONFIGS if language_configs is None else language_configs
        )

    async def process_in_native_language(
        self,
        input_text: str,
        explicit_language: SupportedLanguage | str | None = None,
    ) -> ProcessResult:
        """Process a request in the language it was written in.

        Args:
            input_text: Raw user input
            explicit_language: Language to assume instead of detecting it

        Returns:
            ProcessResult with the adapted response, language, cultural
            profile and intent confidence

        Raises:
            Exception: Whatever the executor or interaction log raised
        """
        try:
            if explicit_language is not None:
                language = SupportedLanguage.parse(explicit_language)
            else:
                language = self.detect_language(input_text)

            profile = self.analyzer.analyze(language, input_text)
            command = self.parse_command(input_text, language, profile)
            config = self.language_configs.get(language)
            response = await self._execute_with_cultural_context(command, profile, config)
            await self._store_interaction(input_text, response, language, profile)

            return ProcessResult(
                response=response,
                language=language,
                cultural_context=profile,
                confidence=command.confidence,
            )
        except Exception as e:
            logger.error(f"Error processing native language input: {e}")
            raise

    def detect_language(self, text: str) -> SupportedLanguage:
        """Detect the language of text, warning on low confidence.

        A low-confidence detection is only logged; the best guess is used anyway.
        """
        detection = self.manager.detect_language(text)
        if (
            detection.confidence < self.settings.low_confidence_threshold
            and detection.alternatives
        ):
            alternatives = ", ".join(
                f"{alt.language.value}={alt.confidence:.2f}" for alt in detection.alternatives
            )
            logger.warning(
                f"Low confidence language detection: {detection.language.value} "
                f"({detection.confidence:.2f}), alternatives: {alternatives}"
            )
        return detection.language

    def parse_command(
        self,
        input_text: str,
        language: SupportedLanguage,
        profile: CulturalProfile | None = None,
    ) -> MultilingualCommand:
        """Normalize input and extract its intent.

        Args:
            input_text: Raw user input
            language: Language of the input
            profile: Cultural profile to attach

        Returns:
            MultilingualCommand ready for execution
        """
        normalized = self.manager.normalize(input_text, language)
        intent = self.manager.extract_intent(normalized, language)
        return MultilingualCommand(
            raw_input=input_text,
            detected_language=language,
            normalized_command=normalized,
            intent=intent.intent,
            entities=intent.entities,
            cultural_context=profile,
            confidence=intent.confidence,
        )

    async def _execute_with_cultural_context(
        self,
        command: MultilingualCommand,
        profile: CulturalProfile,
        config: LanguageAgentConfig | None,
    ) -> str:
        result = await self.executor.execute(command, profile)
        return self.adapter.adapt(result, command.detected_language, profile, config)

    async def _store_interaction(
        self,
        input_text: str,
        response: str,
        language: SupportedLanguage,
        profile: CulturalProfile,
    ) -> None:
        etiquette = profile.business_etiquette
        entry = PolyglotMemoryEntry(
            language=language,
            original_content=input_text,
            translations={language: response},
            cultural_context=profile,
            cultural_notes=etiquette.communication_style.value if etiquette else None,
            tags=extract_tags(input_text),
        )
        await self.interaction_log.append(entry)

    async def translate(
        self,
        content: str,
        target_language: SupportedLanguage | str,
        **options: Any,
    ) -> str:
        """Translate content, adapting it to the target culture.

        Args:
            content: Text to translate
            target_language: Language to translate into
            **options: TranslationContext fields overriding the defaults
                (source_language=detected, cultural_adaptation=True,
                preserve_formatting=True)

        Returns:
            Translated (and, by default, culturally formatted) text

        Raises:
            Exception: Whatever the translator raised
        """
        params: dict[str, Any] = {
            "target_language": SupportedLanguage.parse(target_language),
            "cultural_adaptation": True,
            "preserve_formatting": True,
            **options,
        }
        if "source_language" not in params:
            params["source_language"] = self.detect_language(content)
        context = TranslationContext(**params)

        translated = await self.manager.translate(content, context)
        if context.cultural_adaptation:
            profile = self.analyzer.analyze(context.target_language, translated)
            return self.adapter.apply_cultural_formatting(translated, profile)
        return translated

    async def generate_multilingual_response(
        self,
        prompt: str,
        languages: list[SupportedLanguage | str],
    ) -> dict[SupportedLanguage, str]:
        """Produce one response and translate it into several languages.

        The base response is produced once in the primary language; the
        translations then run concurrently. The result always holds the
        primary language with the unmodified base response.

        Args:
            prompt: Request to execute
            languages: Languages wanted in the result

        Returns:
            Response per language

        Raises:
            MultilingualResponseError: If any translation failed; raised only
                after every translation has finished
        """
        targets = list(
            dict.fromkeys(
                language
                for language in (SupportedLanguage.parse(code) for code in languages)
                if language != self.primary_language
            )
        )

        command = self.parse_command(prompt, self.primary_language)
        base_response = await self.executor.execute(command)
        responses: dict[SupportedLanguage, str] = {self.primary_language: base_response}

        results = await asyncio.gather(
            *(self.translate(base_response, language, domain="technical") for language in targets),
            return_exceptions=True,
        )

        failures: dict[SupportedLanguage, BaseException] = {}
        for language, result in zip(targets, results):
            if isinstance(result, BaseException):
                failures[language] = result
            else:
                responses[language] = result

        if failures:
            for language, error in failures.items():
                logger.error(f"Translation to {language.value} failed: {error}")
            first_error = next(iter(failures.values()))
            raise MultilingualResponseError(failures, responses) from first_error

        return responses

    async def get_memories_in_language(
        self, language: SupportedLanguage | str, limit: int = 10
    ) -> list[PolyglotMemoryEntry]:
        """Get the latest logged interactions in a language, oldest first."""
        return await self.interaction_log.recent(SupportedLanguage.parse(language), limit)

    def get_capabilities(self) -> PolyglotCapabilities:
        """Describe the languages and translation pairs this agent supports."""
        languages = list(SupportedLanguage)
        return PolyglotCapabilities(
            languages=languages,
            primary_language=self.primary_language,
            translation_pairs=[
                (source, target) for source in languages for target in languages if source != target
            ],
        )
