"""Value formatting tests."""

from datetime import datetime, timedelta, timezone

import pytest

from pyjson2widget import ABSENT, DateStyle, FieldFormat, FormatKind, format_value, get_format_preview
from pyjson2widget._errors import InvalidFieldFormatError

CURRENCY = FieldFormat(kind=FormatKind.CURRENCY)
PERCENTAGE = FieldFormat(kind=FormatKind.PERCENTAGE)
NUMBER = FieldFormat(kind=FormatKind.NUMBER)
DATE = FieldFormat(kind=FormatKind.DATE)
TEXT = FieldFormat(kind=FormatKind.TEXT)

UTC = timezone.utc


class TestEmptyValues:
    @pytest.mark.parametrize("value", [None, "", ABSENT])
    @pytest.mark.parametrize("fmt", [None, TEXT, NUMBER, CURRENCY, PERCENTAGE, DATE])
    def test_dash(self, value, fmt):
        assert format_value(value, fmt) == "-"


class TestText:
    def test_string(self):
        assert format_value("abc") == "abc"

    def test_bool(self):
        assert format_value(True, TEXT) == "true"
        assert format_value(False, TEXT) == "false"

    def test_integral_float(self):
        assert format_value(42.0) == "42"

    def test_float(self):
        assert format_value(3.5) == "3.5"

    def test_containers(self):
        assert format_value({"a": 1}) == '{"a":1}'
        assert format_value([1, 2]) == "[1,2]"

    def test_zero_is_not_empty(self):
        assert format_value(0) == "0"


class TestCurrency:
    def test_default_decimals(self):
        assert format_value(1234.5, CURRENCY) == "$1,234.50"

    def test_negative(self):
        assert format_value(-1234.5, CURRENCY) == "-$1,234.50"

    def test_negative_rounding_to_zero_keeps_sign(self):
        assert format_value(-0.004, CURRENCY) == "-$0.00"
        assert format_value(0.004, CURRENCY) == "$0.00"

    def test_string_amount(self):
        assert format_value("$1,234.5", CURRENCY) == "$1,234.50"

    def test_decimals(self):
        fmt = FieldFormat(kind=FormatKind.CURRENCY, decimals=0)
        assert format_value(1234.5, fmt) == "$1,235"

    def test_known_symbol(self):
        fmt = FieldFormat(kind=FormatKind.CURRENCY, currency_code="eur")
        assert format_value(1234.5, fmt) == "€1,234.50"

    def test_other_code(self):
        fmt = FieldFormat(kind=FormatKind.CURRENCY, currency_code="CHF")
        assert format_value(1234.5, fmt) == "CHF\u00a01,234.50"

    def test_unparseable_falls_back(self):
        assert format_value("abc", CURRENCY) == "abc"


class TestPercentage:
    def test_fraction_is_scaled(self):
        assert format_value(0.1234, PERCENTAGE) == "12.34%"

    def test_percent_units_not_scaled(self):
        assert format_value(45.2, PERCENTAGE) == "45.20%"

    def test_negative_fraction(self):
        assert format_value(-0.5, PERCENTAGE) == "-50.00%"

    def test_one_is_not_scaled(self):
        assert format_value(1, PERCENTAGE) == "1.00%"

    def test_small_percent_value_is_scaled(self):
        # 0.5 meaning "0.5%" is indistinguishable from a fraction
        assert format_value("0.5", PERCENTAGE) == "50.00%"

    def test_string_with_sign(self):
        assert format_value("12.5%", PERCENTAGE) == "12.50%"

    def test_decimals(self):
        fmt = FieldFormat(kind=FormatKind.PERCENTAGE, decimals=1)
        assert format_value(0.1234, fmt) == "12.3%"


class TestNumber:
    def test_grouping(self):
        assert format_value(1234567.89, NUMBER) == "1,234,567.89"

    def test_integer_has_no_decimals(self):
        assert format_value(1234567, NUMBER) == "1,234,567"

    def test_trailing_zeros_dropped(self):
        assert format_value(1234.5, NUMBER) == "1,234.5"

    def test_rounds_to_two_places(self):
        assert format_value(2.005, NUMBER) == "2.01"

    def test_fixed_decimals(self):
        fmt = FieldFormat(kind=FormatKind.NUMBER, decimals=3)
        assert format_value(1234.5, fmt) == "1,234.500"

    def test_prefix_and_suffix(self):
        fmt = FieldFormat(kind=FormatKind.NUMBER, prefix="~", suffix=" units")
        assert format_value(12, fmt) == "~12 units"

    def test_numeric_string(self):
        assert format_value("1,234.5", NUMBER) == "1,234.5"

    def test_leading_number_only(self):
        assert format_value("12-3", NUMBER) == "12"

    def test_currency_code_ignored(self):
        fmt = FieldFormat(kind=FormatKind.NUMBER, currency_code="EUR")
        assert format_value(5, fmt) == "5"

    def test_unparseable_falls_back(self):
        assert format_value("N/A", NUMBER) == "N/A"
        assert format_value(True, NUMBER) == "true"


class TestDate:
    def test_default_style(self):
        assert format_value("2024-01-15T00:00:00Z", DATE) == "1/15/2024"

    def test_date_only(self):
        assert format_value("2024-01-15", DATE) == "1/15/2024"

    def test_us_format(self):
        assert format_value("01/15/2024", DATE) == "1/15/2024"

    def test_rfc_2822(self):
        assert format_value("Mon, 15 Jan 2024 10:00:00 GMT", DATE) == "1/15/2024"

    def test_epoch_millis(self):
        assert format_value(1705276800000, DATE) == "1/15/2024"

    def test_iso_style(self):
        fmt = FieldFormat(kind=FormatKind.DATE, date_style=DateStyle.ISO)
        assert format_value("2024-01-15T00:00:00Z", fmt) == "2024-01-15"

    def test_iso_style_is_utc(self):
        fmt = FieldFormat(kind=FormatKind.DATE, date_style="yyyy-MM-dd")
        assert format_value("2024-01-15T23:30:00-05:00", fmt) == "2024-01-16"

    def test_unknown_style_uses_default(self):
        fmt = FieldFormat(kind=FormatKind.DATE, date_style="dd.MM")
        assert format_value("2024-01-15", fmt) == "1/15/2024"

    def test_unparseable(self):
        assert format_value("not a date", DATE) == "not a date"
        assert format_value({"a": 1}, DATE) == '{"a":1}'


class TestRelativeDate:
    FMT = FieldFormat(kind=FormatKind.DATE, date_style=DateStyle.RELATIVE)
    THEN = datetime(2024, 1, 15, tzinfo=UTC)

    @pytest.mark.parametrize("delta,expected", [
        (timedelta(seconds=30), "30s ago"),
        (timedelta(seconds=90), "1m ago"),
        (timedelta(hours=2, minutes=5), "2h ago"),
        (timedelta(days=3, hours=1), "3d ago"),
    ])
    def test_buckets(self, delta, expected):
        now = self.THEN + delta
        assert format_value("2024-01-15T00:00:00Z", self.FMT, now=now) == expected

    def test_naive_value_is_utc(self):
        now = self.THEN + timedelta(minutes=5)
        assert format_value("2024-01-15T00:00:00", self.FMT, now=now) == "5m ago"

    def test_wall_clock(self):
        recent = (datetime.now(UTC) - timedelta(hours=3)).isoformat()
        assert format_value(recent, self.FMT) == "3h ago"


class TestTotality:
    VALUES = [None, ABSENT, "", "abc", 42, 3.14159, "2024-01-15T00:00:00Z", {}, [], True, -0.0, 10**40]
    FORMATS = [
        None,
        TEXT,
        NUMBER,
        CURRENCY,
        PERCENTAGE,
        DATE,
        FieldFormat(kind=FormatKind.DATE, date_style=DateStyle.ISO),
        FieldFormat(kind=FormatKind.DATE, date_style=DateStyle.RELATIVE),
        FieldFormat(kind=FormatKind.NUMBER, decimals=20),
    ]

    @pytest.mark.parametrize("fmt", FORMATS)
    def test_always_returns_string(self, fmt):
        for value in self.VALUES:
            result = format_value(value, fmt)
            assert isinstance(result, str)
            assert "NaN" not in result
            assert "Invalid Date" not in result

    def test_huge_number_string(self):
        assert format_value("9" * 60, NUMBER) == f"{int('9' * 60):,}"


class TestFormatPreview:
    def test_canned_samples(self):
        assert get_format_preview(None, CURRENCY) == "$1,234.56"
        assert get_format_preview(None, PERCENTAGE) == "12.34%"
        assert get_format_preview(None, NUMBER) == "1,234,567.89"
        assert get_format_preview(None, TEXT) == "Sample Text"

    def test_absent_uses_canned_sample(self):
        assert get_format_preview(ABSENT, CURRENCY) == "$1,234.56"

    def test_date_sample_is_now(self):
        fmt = FieldFormat(kind=FormatKind.DATE, date_style=DateStyle.ISO)
        before = datetime.now(UTC).date().isoformat()
        result = get_format_preview(None, fmt)
        after = datetime.now(UTC).date().isoformat()
        assert result in (before, after)

    def test_real_sample(self):
        assert get_format_preview(0.5, PERCENTAGE) == "50.00%"

    def test_empty_string_sample(self):
        assert get_format_preview("", CURRENCY) == "-"


class TestFieldFormat:
    def test_defaults(self):
        fmt = FieldFormat()
        assert fmt.kind == FormatKind.TEXT
        assert fmt.decimals is None

    def test_kind_from_string(self):
        assert FieldFormat(kind="number").kind is FormatKind.NUMBER

    def test_invalid_kind(self):
        with pytest.raises(InvalidFieldFormatError):
            FieldFormat(kind="money")

    @pytest.mark.parametrize("decimals", [-1, 21, "2", True, 1.5])
    def test_invalid_decimals(self, decimals):
        with pytest.raises(InvalidFieldFormatError):
            FieldFormat(kind=FormatKind.NUMBER, decimals=decimals)

    def test_from_dict_dashboard_keys(self):
        fmt = FieldFormat.from_dict({"type": "currency", "currency": "EUR", "decimals": 1})
        assert fmt == FieldFormat(kind=FormatKind.CURRENCY, decimals=1, currency_code="EUR")

    def test_from_dict_long_keys(self):
        fmt = FieldFormat.from_dict({"kind": "date", "dateStyle": "relative"})
        assert fmt.kind == FormatKind.DATE
        assert fmt.date_style == DateStyle.RELATIVE

    def test_from_dict_empty(self):
        assert FieldFormat.from_dict({}) == FieldFormat()

    def test_from_dict_invalid_option(self):
        with pytest.raises(InvalidFieldFormatError):
            FieldFormat.from_dict({"type": "currency", "currency": 5})

    def test_to_dict(self):
        fmt = FieldFormat(kind=FormatKind.NUMBER, decimals=1, prefix="~")
        assert fmt.to_dict() == {"type": "number", "decimals": 1, "prefix": "~"}

    def test_to_dict_is_accepted_by_from_dict(self):
        fmt = FieldFormat(kind=FormatKind.DATE, date_style="yyyy-MM-dd")
        assert FieldFormat.from_dict(fmt.to_dict()) == fmt
