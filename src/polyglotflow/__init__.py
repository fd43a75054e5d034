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


"""
polyglotflow - multilingual command understanding with cultural awareness

Detects the language of free text, extracts an actionable intent, derives the
cultural communication profile of the writer and shapes responses to it.
"""

__version__ = "0.1.0"

from polyglotflow.agents import BaseExecutor, MultilingualResponseError, PolyglotAgent
from polyglotflow.core.models import (
    CulturalProfile,
    DetectionResult,
    FormalityLevel,
    MultilingualCommand,
    ProcessResult,
    SupportedLanguage,
)
from polyglotflow.i18n import LanguageManager
from polyglotflow.mt import BaseTranslator, TaggingTranslator, TranslationContext

__all__ = [
    "BaseExecutor",
    "BaseTranslator",
    "CulturalProfile",
    "DetectionResult",
    "FormalityLevel",
    "LanguageManager",
    "MultilingualCommand",
    "MultilingualResponseError",
    "PolyglotAgent",
    "ProcessResult",
    "SupportedLanguage",
    "TaggingTranslator",
    "TranslationContext",
    "__version__",
]
