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


"""Language-keyed text normalization.

Every text is trimmed, then exactly one transform is applied:
- Japanese: full-width ASCII forms folded to half-width
- Chinese (simplified and traditional): left as is, reserved for variant reconciliation
- Everything else: lowercased
"""

from __future__ import annotations

import re

from polyglotflow.core.models import SupportedLanguage

# Full-width ASCII variants (U+FF01 to U+FF5E) sit at a fixed offset from ASCII
_FULL_WIDTH_RE = re.compile(r"[\uff01-\uff5e]")
_FULL_WIDTH_OFFSET = 0xFEE0

_IDENTITY_LANGUAGES = frozenset({SupportedLanguage.ZH_CN, SupportedLanguage.ZH_TW})


def fold_full_width(text: str) -> str:
    """Convert full-width ASCII characters to their half-width forms.

    Example:
        >>> fold_full_width("ＡＢＣ１２３")
        'ABC123'
    """
    return _FULL_WIDTH_RE.sub(lambda m: chr(ord(m.group()) - _FULL_WIDTH_OFFSET), text)


def normalize(text: str, language: SupportedLanguage | str) -> str:
    """Normalize text for the given language.

    Pure and idempotent. Language codes outside the supported set take the
    default (lowercase) branch.

    Args:
        text: Text to normalize
        language: Language of the text

    Returns:
        Normalized text
    """
    normalized = text.strip()

    try:
        language = SupportedLanguage.parse(language)
    except ValueError:
        return normalized.lower()

    if language == SupportedLanguage.JA:
        return fold_full_width(normalized)
    if language in _IDENTITY_LANGUAGES:
        return normalized
    return normalized.lower()
