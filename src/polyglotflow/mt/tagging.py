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


"""Reversible placeholder translator.

TaggingTranslator does not translate: it prefixes the text with the target
language tag, e.g. "[RU] Hello". The contract is round-trip stability, so
untag() recovers the exact input.
"""

from __future__ import annotations

import logging
import re

from polyglotflow.core.models import SupportedLanguage
from polyglotflow.mt.base import BaseTranslator, TranslationContext

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"^\[(?P<tag>[A-Z]{2}(?:-[A-Z]{2})?)\] ")


def language_tag(language: SupportedLanguage) -> str:
    """Get the bracket tag for a language, e.g. "ZH-CN"."""
    return language.value.upper()


class TaggingTranslator(BaseTranslator):
    """Deterministic, invertible translator that tags the target language."""

    async def translate(self, text: str, context: TranslationContext) -> str:
        tagged = f"[{language_tag(context.target_language)}] {text}"
        logger.debug(
            f"Tagged text {context.source_language.value} -> {context.target_language.value}"
        )
        return tagged

    @staticmethod
    def untag(text: str) -> tuple[SupportedLanguage | None, str]:
        """Strip a language tag added by translate().

        Args:
            text: Possibly tagged text

        Returns:
            (tagged language, original text); (None, text) when untagged
        """
        match = _TAG_RE.match(text)
        if match is None:
            return None, text
        try:
            language = SupportedLanguage.parse(match.group("tag"))
        except ValueError:
            return None, text
        return language, text[match.end() :]
