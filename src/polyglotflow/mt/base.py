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


"""Base abstract class for translators.

Defines the interface the pipeline uses to translate text. The default
implementation (TaggingTranslator) only tags text with its target language;
a real machine translation backend can be plugged in behind the same interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, Field

from polyglotflow.core.models import SupportedLanguage


class TranslationContext(BaseModel):
    """Everything a translator needs to know about one request."""

    source_language: SupportedLanguage = Field(..., description="Language of the input text")
    target_language: SupportedLanguage = Field(..., description="Language to translate into")
    domain: str | None = Field(default=None, description="Domain hint (e.g., 'technical')")
    preserve_formatting: bool = Field(default=True, description="Keep markup and layout")
    cultural_adaptation: bool = Field(
        default=False, description="Apply the target culture's formatting conventions"
    )
    glossary: dict[str, str] = Field(default_factory=dict, description="Forced term mappings")
    tone: str | None = Field(default=None, description="Tone hint (e.g., 'formal')")


class BaseTranslator(ABC):
    """Abstract base class for translators.

    Implementations must be safe to call concurrently: the orchestrator fans
    out one call per target language.
    """

    @abstractmethod
    async def translate(self, text: str, context: TranslationContext) -> str:
        """Translate text.

        Args:
            text: Text to translate
            context: Source/target languages and translation options

        Returns:
            Translated text

        Raises:
            TranslationError: If translation fails

        Example:
            >>> translator = TaggingTranslator()
            >>> context = TranslationContext(
            ...     source_language=SupportedLanguage.EN,
            ...     target_language=SupportedLanguage.RU,
            ... )
            >>> await translator.translate("Hello", context)
            '[RU] Hello'
        """
        ...


class TranslationError(Exception):
    """Base exception for translation errors."""
