"""Unit tests for date, number and currency formatting."""

from datetime import date, datetime

import pytest

from polyglotflow.core.models import SupportedLanguage
from polyglotflow.cultural.formatting import (
    format_currency,
    format_currency_by_locale,
    format_date,
    format_date_by_locale,
    format_number,
    format_number_by_locale,
    get_locale,
    parse_number_style,
)
from polyglotflow.rules import LANGUAGE_CURRENCIES, LANGUAGE_LOCALES, get_base_profile

L = SupportedLanguage


@pytest.mark.unit
class TestFormatDate:
    """Test date template substitution."""

    @pytest.mark.parametrize(
        ("language", "expected"),
        [
            (L.EN, "03/15/2024"),
            (L.RU, "15.03.2024"),
            (L.FR, "15/03/2024"),
            (L.JA, "2024年03月15日"),
            (L.KO, "2024년 03월 15일"),
        ],
    )
    def test_date_formats(self, language: SupportedLanguage, expected: str) -> None:
        """Test each profile's template is filled."""
        assert format_date(date(2024, 3, 15), get_base_profile(language)) == expected

    def test_accepts_datetime(self) -> None:
        """Test datetimes format by their date part."""
        value = datetime(2024, 12, 1, 18, 30)

        assert format_date(value, get_base_profile(L.DE)) == "01.12.2024"


@pytest.mark.unit
class TestFormatNumber:
    """Test number formatting from sample strings."""

    @pytest.mark.parametrize(
        ("language", "expected"),
        [
            (L.EN, "1,234,567.89"),
            (L.RU, "1 234 567,89"),
            (L.DE, "1.234.567,89"),
            (L.HI, "12,34,567.89"),
        ],
    )
    def test_grouping_and_decimals(self, language: SupportedLanguage, expected: str) -> None:
        """Test separators and grouping follow the profile sample."""
        assert format_number(1234567.891, get_base_profile(language)) == expected

    def test_small_number(self) -> None:
        """Test numbers below a thousand are not grouped."""
        assert format_number(12.5, get_base_profile(L.EN)) == "12.50"

    def test_negative(self) -> None:
        """Test negative numbers keep their sign."""
        assert format_number(-1234.5, get_base_profile(L.DE)) == "-1.234,50"

    def test_negative_rounding_to_zero(self) -> None:
        """Test values rounding to zero lose the sign."""
        assert format_number(-0.001, get_base_profile(L.EN)) == "0.00"


@pytest.mark.unit
class TestParseNumberStyle:
    """Test separator detection."""

    @pytest.mark.parametrize(
        ("sample", "group", "decimal", "indian"),
        [
            ("1,234.56", ",", ".", False),
            ("1 234,56", " ", ",", False),
            ("1.234,56", ".", ",", False),
            ("1,23,456.78", ",", ".", True),
            ("1234", "", ".", False),
        ],
    )
    def test_samples(self, sample: str, group: str, decimal: str, indian: bool) -> None:
        """Test each sample style is recognized."""
        style = parse_number_style(sample)

        assert style.group_separator == group
        assert style.decimal_separator == decimal
        assert style.indian_grouping is indian


@pytest.mark.unit
class TestFormatCurrency:
    """Test currency formatting from sample amounts."""

    @pytest.mark.parametrize(
        ("language", "expected"),
        [
            (L.EN, "$1,234.56"),
            (L.RU, "1 234,56 ₽"),
            (L.DE, "1.234,56 €"),
            (L.PT, "R$ 1.234,56"),
            (L.IT, "€ 1.234,56"),
            (L.ZH_TW, "NT$1,234.56"),
        ],
    )
    def test_symbol_placement(self, language: SupportedLanguage, expected: str) -> None:
        """Test the symbol and spacing of the sample wrap the amount."""
        assert format_currency(1234.56, get_base_profile(language)) == expected

    @pytest.mark.parametrize(("language", "expected"), [(L.JA, "¥1,235"), (L.KO, "₩1,235")])
    def test_zero_decimal_currencies(self, language: SupportedLanguage, expected: str) -> None:
        """Test samples without decimals format whole amounts."""
        assert format_currency(1234.56, get_base_profile(language)) == expected

    def test_indian_grouping(self) -> None:
        """Test rupee amounts use Indian grouping."""
        assert format_currency(123456.78, get_base_profile(L.HI)) == "₹1,23,456.78"

    def test_negative_amount(self) -> None:
        """Test the sign goes in front of the symbol."""
        assert format_currency(-5, get_base_profile(L.EN)) == "-$5.00"

    def test_without_currency_sample(self) -> None:
        """Test profiles without a currency sample format a plain number."""
        profile = get_base_profile(L.EN).model_copy(update={"currency_format": None})

        assert format_currency(1234.56, profile) == format_number(1234.56, profile)


@pytest.mark.unit
class TestLocaleFormatting:
    """Test formatting through the locale database."""

    def test_tables_cover_every_language(self) -> None:
        """Test each language has a parseable locale and a currency."""
        for language in SupportedLanguage:
            assert get_locale(language).language == language.value.split("-")[0]
            assert len(LANGUAGE_CURRENCIES[language]) == 3
        assert LANGUAGE_LOCALES[L.HI] == "hi-IN"

    @pytest.mark.parametrize(
        ("language", "expected"),
        [
            (L.EN, "1,234,567.891"),
            (L.DE, "1.234.567,891"),
            (L.HI, "12,34,567.891"),
        ],
    )
    def test_number(self, language: SupportedLanguage, expected: str) -> None:
        """Test locale separators and grouping."""
        assert format_number_by_locale(1234567.891, language) == expected

    def test_number_pattern(self) -> None:
        """Test an explicit number pattern."""
        assert format_number_by_locale(1234.5, L.EN, format="#,##0.00") == "1,234.50"

    @pytest.mark.parametrize(
        ("language", "format", "expected"),
        [
            (L.EN, "short", "3/15/24"),
            (L.DE, "short", "15.03.24"),
            (L.EN, "medium", "Mar 15, 2024"),
            (L.JA, "yyyy-MM-dd", "2024-03-15"),
        ],
    )
    def test_date(self, language: SupportedLanguage, format: str, expected: str) -> None:
        """Test locale date styles and patterns."""
        assert format_date_by_locale(date(2024, 3, 15), language, format=format) == expected

    def test_currency_defaults_to_language_currency(self) -> None:
        """Test the language's own currency is used by default."""
        assert format_currency_by_locale(1234.5, L.EN) == "$1,234.50"

        german = format_currency_by_locale(1234.5, L.DE)
        assert "1.234,50" in german
        assert "€" in german

    def test_currency_override(self) -> None:
        """Test an explicit ISO 4217 code wins."""
        assert format_currency_by_locale(1234.5, L.EN, currency="EUR") == "€1,234.50"

    def test_currency_without_minor_units(self) -> None:
        """Test currencies without minor units drop decimals."""
        won = format_currency_by_locale(1234.0, L.KO)

        assert "1,234" in won
        assert "." not in won
