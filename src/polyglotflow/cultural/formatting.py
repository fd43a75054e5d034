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


"""Date, number and currency formatting against a cultural profile.

Profiles carry sample strings rather than locale names: the date template
("DD.MM.YYYY"), a sample number ("1 234,56") and a sample amount ("1 234,56 ₽").
Separators, grouping and symbol placement are read off those samples, so no
locale database is involved.

The *_by_locale variants instead format through the CLDR data shipped with
Babel, using the locale tag and currency mapped to each language.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from babel import Locale, dates, numbers

from polyglotflow.core.models import CulturalProfile, SupportedLanguage
from polyglotflow.rules.cultural import LANGUAGE_CURRENCIES, LANGUAGE_LOCALES


@dataclass(frozen=True)
class NumberStyle:
    """Separators and grouping read from a sample number.

    Attributes:
        group_separator: Thousands separator ("" when the sample has none)
        decimal_separator: Decimal mark
        indian_grouping: Groups of two above the first three digits (1,23,456)
    """

    group_separator: str = ","
    decimal_separator: str = "."
    indian_grouping: bool = False


def _has_decimal_part(sample: str) -> bool:
    return len(sample) >= 3 and not sample[-3].isdigit() and sample[-2:].isdigit()


def parse_number_style(sample: str) -> NumberStyle:
    """Read separators and grouping from a sample number.

    Args:
        sample: Sample such as "1,234.56", "1.234,56" or "1,23,456.78"

    Returns:
        NumberStyle describing the sample
    """
    sample = sample.strip()
    decimal_separator = "."
    integer_part = sample
    if _has_decimal_part(sample):
        decimal_separator = sample[-3]
        integer_part = sample[:-3]

    group_separator = next((char for char in integer_part if not char.isdigit()), "")
    indian_grouping = False
    if group_separator:
        groups = integer_part.split(group_separator)
        indian_grouping = len(groups) >= 3 and len(groups[1]) == 2

    return NumberStyle(
        group_separator=group_separator,
        decimal_separator=decimal_separator,
        indian_grouping=indian_grouping,
    )


def _group_digits(digits: str, style: NumberStyle) -> str:
    if not style.group_separator or len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    size = 2 if style.indian_grouping else 3
    groups = [tail]
    while head:
        groups.insert(0, head[-size:])
        head = head[:-size]
    return style.group_separator.join(groups)


def _format_with_style(value: float, style: NumberStyle, decimals: int) -> str:
    text = f"{abs(value):.{decimals}f}"
    digits, _, fraction = text.partition(".")
    formatted = _group_digits(digits, style)
    if fraction:
        formatted = f"{formatted}{style.decimal_separator}{fraction}"
    if value < 0 and round(abs(value), decimals) != 0:
        formatted = f"-{formatted}"
    return formatted


def format_date(value: date, profile: CulturalProfile) -> str:
    """Format a date with the profile's YYYY/MM/DD template.

    Args:
        value: Date (or datetime) to format
        profile: Cultural profile

    Returns:
        Formatted date, e.g. "2024年03月15日" for Japanese

    Example:
        >>> format_date(date(2024, 3, 15), get_base_profile(SupportedLanguage.RU))
        '15.03.2024'
    """
    return (
        profile.date_format.replace("YYYY", f"{value.year:04d}")
        .replace("MM", f"{value.month:02d}")
        .replace("DD", f"{value.day:02d}")
    )


def format_number(value: float, profile: CulturalProfile) -> str:
    """Format a number with two decimals in the profile's style.

    Args:
        value: Number to format
        profile: Cultural profile

    Returns:
        Formatted number, e.g. "1.234.567,89" for German
    """
    return _format_with_style(value, parse_number_style(profile.number_format), 2)


def format_currency(value: float, profile: CulturalProfile) -> str:
    """Format an amount like the profile's currency sample.

    The sample's text before the first digit and after the last digit (symbol
    and spacing) wraps the number. Samples without a decimal part ("¥1,234")
    format with zero decimals. Without a currency sample this is format_number().

    Args:
        value: Amount to format
        profile: Cultural profile

    Returns:
        Formatted amount, e.g. "1 234,56 ₽" for Russian
    """
    sample = profile.currency_format
    if not sample or not any(char.isdigit() for char in sample):
        return format_number(value, profile)

    first = next(i for i, char in enumerate(sample) if char.isdigit())
    last = max(i for i, char in enumerate(sample) if char.isdigit())
    prefix, amount, suffix = sample[:first], sample[first : last + 1], sample[last + 1 :]
    decimals = 2 if _has_decimal_part(amount) else 0

    number = _format_with_style(abs(value), parse_number_style(profile.number_format), decimals)
    sign = "-" if value < 0 and round(abs(value), decimals) != 0 else ""
    return f"{sign}{prefix}{number}{suffix}"


def get_locale(language: SupportedLanguage) -> Locale:
    """Get the Babel locale mapped to a language (e.g. ru-RU for Russian)."""
    return Locale.parse(LANGUAGE_LOCALES[language], sep="-")


def format_number_by_locale(
    value: float, language: SupportedLanguage, format: str | None = None
) -> str:
    """Format a number with the language's locale conventions.

    Args:
        value: Number to format
        language: Language whose locale applies
        format: Optional CLDR number pattern (e.g. "#,##0.00")

    Returns:
        Formatted number, e.g. "12,34,567.891" for Hindi
    """
    return numbers.format_decimal(value, format=format, locale=get_locale(language))


def format_date_by_locale(value: date, language: SupportedLanguage, format: str = "medium") -> str:
    """Format a date with the language's locale conventions.

    Args:
        value: Date to format
        language: Language whose locale applies
        format: "short", "medium", "long", "full" or a CLDR date pattern

    Returns:
        Formatted date, e.g. "15.03.24" for German short dates
    """
    return dates.format_date(value, format=format, locale=get_locale(language))


def format_currency_by_locale(
    amount: float, language: SupportedLanguage, currency: str | None = None
) -> str:
    """Format an amount with the language's locale conventions.

    Args:
        amount: Amount to format
        language: Language whose locale applies
        currency: ISO 4217 code (default: the language's own currency)

    Returns:
        Formatted amount, e.g. "$1,234.50" for English
    """
    return numbers.format_currency(
        amount, currency or LANGUAGE_CURRENCIES[language], locale=get_locale(language)
    )
