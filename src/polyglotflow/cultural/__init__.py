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


"""Cultural context analysis, formatting and response adaptation."""

from polyglotflow.cultural.adaptation import ResponseAdapter
from polyglotflow.cultural.analyzer import CulturalContextAnalyzer, greeting_period
from polyglotflow.cultural.formatting import (
    NumberStyle,
    format_currency,
    format_currency_by_locale,
    format_date,
    format_date_by_locale,
    format_number,
    format_number_by_locale,
    get_locale,
    parse_number_style,
)
from polyglotflow.cultural.plurals import apply_pluralization, plural_category

__all__ = [
    "CulturalContextAnalyzer",
    "NumberStyle",
    "ResponseAdapter",
    "apply_pluralization",
    "format_currency",
    "format_currency_by_locale",
    "format_date",
    "format_date_by_locale",
    "format_number",
    "format_number_by_locale",
    "get_locale",
    "greeting_period",
    "parse_number_style",
    "plural_category",
]
