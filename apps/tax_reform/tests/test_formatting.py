"""
Formatação do resultado (Pytest)
"""
import pytest
from decimal import Decimal

from apps.tax_reform.formatting import (
    PLACEHOLDER,
    SEGMENT_LABELS,
    COSTS_LABELS,
    format_aliquot,
    format_currency,
    format_percent,
    get_label,
    to_decimal,
)

NBSP = '\xa0'


class TestFormatCurrency:

    @pytest.mark.parametrize("value,expected", [
        (1234.56, f'R${NBSP}1.234,56'),
        (Decimal('1000000'), f'R${NBSP}1.000.000,00'),
        (0, f'R${NBSP}0,00'),
        (-6750.0, f'-R${NBSP}6.750,00'),
        (0.005, f'R${NBSP}0,01'),
        ('152500.5', f'R${NBSP}152.500,50'),
    ])
    def test_format(self, value, expected):
        assert format_currency(value) == expected

    @pytest.mark.parametrize("value", [None, 'abc', '', True, {}])
    def test_missing_value_placeholder(self, value):
        assert format_currency(value) == PLACEHOLDER


class TestFormatPercent:

    @pytest.mark.parametrize("value,expected", [
        (15.25, '15.25%'),
        (14.575, '14.58%'),
        (0, '0.00%'),
        (-0.675, '-0.68%'),
        (Decimal('26.5'), '26.50%'),
    ])
    def test_format(self, value, expected):
        assert format_percent(value) == expected

    def test_scale(self):
        """Frações (red_setorial, k_creditavel) exibidas x100"""
        assert format_percent(0.9, scale=100) == '90.00%'
        assert format_percent(Decimal('0.4'), scale=100) == '40.00%'

    def test_missing_value_placeholder(self):
        assert format_percent(None) == PLACEHOLDER
        assert format_percent(None, scale=100) == PLACEHOLDER


class TestFormatAliquot:

    @pytest.mark.parametrize("value,expected", [
        (Decimal('8.8'), '8,8 %'),
        (Decimal('17.75'), '17,75 %'),
        (12, '12,0 %'),
        (Decimal('0.125'), '0,13 %'),
    ])
    def test_format(self, value, expected):
        assert format_aliquot(value) == expected

    def test_missing_value_placeholder(self):
        assert format_aliquot(None) == PLACEHOLDER


class TestGetLabel:

    def test_known_code(self):
        assert get_label(SEGMENT_LABELS, 1) == 'Indústria'
        assert get_label(COSTS_LABELS, 3) == '60–90% (margem baixa)'

    def test_numeric_string(self):
        assert get_label(SEGMENT_LABELS, '4') == 'Agropecuária'

    def test_unknown_code(self):
        assert get_label(SEGMENT_LABELS, 9) == '#9'

    def test_missing_code(self):
        assert get_label(SEGMENT_LABELS, None) == '#-'


class TestToDecimal:

    @pytest.mark.parametrize("value,expected", [
        (1, Decimal('1')),
        (0.1, Decimal('0.1')),
        ('2.50', Decimal('2.50')),
        (None, None),
        (True, None),
        ('NaN', None),
        ('x', None),
    ])
    def test_to_decimal(self, value, expected):
        assert to_decimal(value) == expected


class TestOutOfRangeValues:
    """Números finitos além da precisão do Decimal viram placeholder"""

    @pytest.mark.parametrize("value", [1e30, Decimal('1E+40'), '-1e35'])
    def test_currency(self, value):
        assert format_currency(value) == PLACEHOLDER

    @pytest.mark.parametrize("value", [1e30, Decimal('1E+40')])
    def test_percent(self, value):
        assert format_percent(value) == PLACEHOLDER
        assert format_percent(value, scale=100) == PLACEHOLDER

    def test_aliquot(self):
        assert format_aliquot(1e30) == PLACEHOLDER
