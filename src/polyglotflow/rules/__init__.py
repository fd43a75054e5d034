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


"""Immutable per-language rule tables."""

from polyglotflow.rules.cultural import (
    BASE_PROFILES,
    BUSINESS_TEMPLATES,
    LANGUAGE_CURRENCIES,
    LANGUAGE_LOCALES,
    TIME_BASED_GREETINGS,
    get_base_profile,
)
from polyglotflow.rules.languages import (
    DEFAULT_INTENT_LANGUAGE,
    RULE_SETS,
    FormalityMarkers,
    LanguageRuleSet,
    get_rule_set,
)

__all__ = [
    "BASE_PROFILES",
    "BUSINESS_TEMPLATES",
    "DEFAULT_INTENT_LANGUAGE",
    "FormalityMarkers",
    "LANGUAGE_CURRENCIES",
    "LANGUAGE_LOCALES",
    "LanguageRuleSet",
    "RULE_SETS",
    "TIME_BASED_GREETINGS",
    "get_base_profile",
    "get_rule_set",
]
