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


"""Response adaptation to a cultural profile.

Applied to a response that has already been produced, in three steps:

1. Very formal audiences get the profile's greeting in front (once).
2. The language's response template adds a closing line:
   "formal" the business email closing, "polite" the thank-you line,
   "professional" nothing.
3. ISO dates (YYYY-MM-DD) in the text are rewritten in the profile's date format.
"""

from __future__ import annotations

import logging
import re
from datetime import date

from polyglotflow.core.models import (
    CulturalProfile,
    FormalityLevel,
    LanguageAgentConfig,
    SupportedLanguage,
)
from polyglotflow.cultural.formatting import format_date
from polyglotflow.rules.cultural import BUSINESS_TEMPLATES

logger = logging.getLogger(__name__)

_ISO_DATE_RE = re.compile(r"\b(\d{4})-(\d{2})-(\d{2})\b")

# Response template name -> business template line appended to the response
TEMPLATE_CLOSINGS: dict[str, str | None] = {
    "professional": None,
    "formal": "email_closing",
    "polite": "thank_you",
}


class ResponseAdapter:
    """Shapes responses to the cultural profile of their audience."""

    def adapt(
        self,
        response: str,
        language: SupportedLanguage,
        profile: CulturalProfile,
        config: LanguageAgentConfig | None = None,
    ) -> str:
        """Adapt a response.

        Args:
            response: Response text to adapt
            language: Language of the response
            profile: Cultural profile of the audience
            config: Per-language configuration carrying the response template

        Returns:
            Adapted response
        """
        adapted = response
        if profile.formality_level == FormalityLevel.VERY_FORMAL:
            adapted = self.apply_formality(adapted, profile)
        if config is not None and config.response_template:
            adapted = self.apply_template(adapted, config.response_template, language)
        return self.apply_cultural_formatting(adapted, profile)

    def apply_formality(self, response: str, profile: CulturalProfile) -> str:
        """Prefix the profile's greeting unless the response already starts with it."""
        if profile.business_etiquette is None:
            return response
        greeting = profile.business_etiquette.greeting_style
        if not greeting or response.startswith(greeting):
            return response
        return f"{greeting} {response}"

    def apply_template(self, response: str, template: str, language: SupportedLanguage) -> str:
        """Append the closing line of a response template.

        Unknown template names leave the response unchanged.
        """
        if template not in TEMPLATE_CLOSINGS:
            logger.warning(f"Unknown response template '{template}'")
            return response
        key = TEMPLATE_CLOSINGS[template]
        if key is None:
            return response
        line = BUSINESS_TEMPLATES.get(language, {}).get(key)
        if not line or response.endswith(line):
            return response
        return f"{response}\n\n{line}"

    def apply_cultural_formatting(self, response: str, profile: CulturalProfile) -> str:
        """Rewrite ISO dates in the profile's date format. Invalid dates are kept."""

        def _replace(match: re.Match[str]) -> str:
            try:
                value = date(int(match.group(1)), int(match.group(2)), int(match.group(3)))
            except ValueError:
                return match.group(0)
            return format_date(value, profile)

        return _ISO_DATE_RE.sub(_replace, response)
