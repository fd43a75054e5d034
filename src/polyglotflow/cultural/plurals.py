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


"""Pluralization by rule kind.

Each profile names one PluralRule; the rule is evaluated here with a match
statement. Categories follow CLDR naming (one, few, many, other).

Example:
    >>> plural_category(21, PluralRule.EAST_SLAVIC)
    'one'
    >>> plural_category(5, PluralRule.EAST_SLAVIC)
    'many'
"""

from __future__ import annotations

import math
from typing import Literal

from polyglotflow.core.models import CulturalProfile, PluralRule

PluralCategory = Literal["one", "few", "many", "other"]


def _east_slavic(count: float) -> PluralCategory:
    if not math.isfinite(count) or count != int(count):
        return "other"
    n = abs(int(count))
    if n % 10 == 1 and n % 100 != 11:
        return "one"
    if 2 <= n % 10 <= 4 and not 12 <= n % 100 <= 14:
        return "few"
    return "many"


def plural_category(count: float, rule: PluralRule) -> PluralCategory:
    """Get the plural category of count under a rule.

    Args:
        count: Number of items
        rule: Rule kind

    Returns:
        CLDR plural category
    """
    match rule:
        case PluralRule.ALWAYS_OTHER:
            return "other"
        case PluralRule.ONE_IF_EQUAL_1:
            return "one" if count == 1 else "other"
        case PluralRule.ONE_IF_0_OR_1:
            return "one" if count in (0, 1) else "other"
        case PluralRule.EAST_SLAVIC:
            return _east_slavic(count)
    raise ValueError(f"Unknown plural rule: {rule!r}")


def apply_pluralization(
    count: float, singular: str, plural: str, profile: CulturalProfile
) -> str:
    """Choose the singular or plural word form for count.

    Only two forms are supplied, so "one" selects the singular and every
    other category (few, many, other) selects the plural.

    Args:
        count: Number of items
        singular: Singular form
        plural: Plural form
        profile: Cultural profile carrying the rule

    Returns:
        The chosen word form
    """
    if plural_category(count, profile.pluralization_rule) == "one":
        return singular
    return plural
