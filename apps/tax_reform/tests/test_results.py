"""
Modelo de resultado (Pytest)

- Classification: três casos, duas grafias para redução
- parse_result(): identifica o formato pela chave de comparação
"""
import pytest
from decimal import Decimal

from apps.tax_reform.results import (
    Classification,
    DetailedResult,
    SummaryResult,
    parse_result,
)


class TestClassification:

    @pytest.mark.parametrize("text,expected", [
        ('aumento de carga', Classification.INCREASE),
        ('redução de carga', Classification.DECREASE),
        ('reducao de carga', Classification.DECREASE),
        ('Redução de Carga', Classification.DECREASE),
        ('  REDUCAO  DE CARGA ', Classification.DECREASE),
        ('neutro', Classification.NEUTRAL),
    ])
    def test_parse(self, text, expected):
        assert Classification.parse(text) is expected

    def test_exactly_three_cases(self):
        assert len(Classification) == 3

    @pytest.mark.parametrize("text", ['aumento', '', None, 1, 'redução'])
    def test_unknown_raises(self, text):
        with pytest.raises(ValueError):
            Classification.parse(text)

    def test_badge_class(self):
        assert Classification.INCREASE.badge_class == 'bg-red-100 text-red-700'
        assert Classification.DECREASE.badge_class == 'bg-emerald-100 text-emerald-700'
        assert Classification.NEUTRAL.badge_class == 'bg-amber-100 text-amber-700'

    def test_label_uses_accented_spelling(self):
        assert Classification.parse('reducao de carga').label == 'redução de carga'


class TestParseSummary:

    def test_parse(self, summary_data):
        result = parse_result(summary_data)

        assert isinstance(result, SummaryResult)
        assert result.is_detailed is False
        assert result.before.tax == Decimal('152500.0')
        assert result.after.net_tax == Decimal('145750.0')
        assert result.parameters.ibs_rate == Decimal('17.7')
        assert result.parameters.creditable_factor == Decimal('0.9')
        assert result.comparison.classification is Classification.DECREASE
        assert result.comparison.difference == Decimal('-6750.0')
        assert result.inputs['segment'] == Decimal('1')

    def test_missing_values_stay_none(self, summary_data):
        del summary_data['antes']['imposto']
        summary_data['depois']['base'] = None
        del summary_data['parameters']

        result = parse_result(summary_data)

        assert result.before.tax is None
        assert result.after.base is None
        assert result.parameters.current_rate is None

    def test_unknown_classification(self, summary_data):
        summary_data['comparacao']['classificacao'] = 'desconhecida'

        with pytest.raises(ValueError):
            parse_result(summary_data)


class TestParseDetailed:

    def test_parse(self, detailed_data):
        result = parse_result(detailed_data)

        assert isinstance(result, DetailedResult)
        assert result.is_detailed is True
        assert result.before.total_due == Decimal('9000')
        assert result.before.entries[0].code == 'icms'
        assert result.before.entries[0].credit == Decimal('9000')
        assert result.before.entries[0].debit is None
        assert result.before.exits[0].due == Decimal('9000')
        assert result.after.exits[0].label == 'CBS'
        assert result.after_totals.due_with_reduction == Decimal('13250')
        assert result.projected_rates.ibs_aliquot == Decimal('17.7')
        assert result.comparison.classification is Classification.INCREASE
        assert result.comparison.difference_pp == Decimal('4.25')

    def test_lines_must_be_a_list(self, detailed_data):
        detailed_data['before']['entries'] = {'code': 'icms'}

        with pytest.raises(ValueError):
            parse_result(detailed_data)

    def test_missing_lines(self, detailed_data):
        del detailed_data['after']['entries']

        result = parse_result(detailed_data)

        assert result.after.entries == []


class TestParseInvalid:

    @pytest.mark.parametrize("data", [None, [], 'ok', {}, {'inputs': {}}])
    def test_unknown_shape(self, data):
        with pytest.raises(ValueError):
            parse_result(data)

    def test_section_must_be_object(self, summary_data):
        summary_data['antes'] = [1, 2]

        with pytest.raises(ValueError):
            parse_result(summary_data)
