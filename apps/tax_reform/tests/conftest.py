"""
Fixtures compartilhadas dos testes do app tax_reform
"""
import pytest


@pytest.fixture
def summary_data():
    """Resposta do formato resumo (formulário rápido)"""
    return {
        'inputs': {'segment': 1, 'invoicing': 1000000.0, 'costs': 2, 'activity': 3},
        'antes': {'base': 1000000.0, 'imposto': 152500.0, 'aliquota_efetiva': 15.25},
        'depois': {
            'base': 1000000.0,
            'imposto_bruto': 265000.0,
            'credito_insumos': 119250.0,
            'imposto_liquido': 145750.0,
            'aliquota_efetiva': 14.575,
        },
        'parameters': {
            't_atual': 15.25,
            't_IBS': 17.7,
            't_CBS': 8.8,
            't_total_bruta': 26.5,
            't_total_efetiva_bruta': 26.5,
            'red_setorial': 0.0,
            'k_creditavel': 0.9,
            't_credito': 26.5,
            'custos_percent': 45.0,
        },
        'comparacao': {
            'dif_reais': -6750.0,
            'dif_pp': -0.675,
            'classificacao': 'redução de carga',
        },
    }


@pytest.fixture
def detailed_data():
    """Resposta do formato detalhado (formulário por imposto)"""
    return {
        'inputs': {'segment': 2, 'cbs_aliquot_entry': 8.8},
        'before': {
            'entries': [
                {'code': 'icms', 'label': 'ICMS', 'aliquot': 18, 'base': 50000, 'credit': 9000},
            ],
            'exits': [
                {
                    'code': 'icms', 'label': 'ICMS', 'aliquot': 18, 'base': 100000,
                    'debit': 18000, 'credit': 9000, 'due': 9000,
                },
            ],
            'total_due': 9000,
        },
        'after': {
            'entries': [
                {'code': 'cbs', 'label': 'CBS', 'aliquot': 8.8, 'base': 50000, 'credit': 4400},
            ],
            'exits': [
                {
                    'code': 'cbs', 'label': 'CBS', 'aliquot': 8.8, 'base': 100000,
                    'debit': 8800, 'credit': 4400, 'due': 4400,
                },
            ],
            'totals': {'due': 13250, 'reduction_percent': 0, 'due_with_reduction': 13250},
            'projected_rates': {
                'cbs_aliquot': 8.8, 'ibs_aliquot': 17.7, 'is_aliquot': 0, 'reduction_percent': 0,
            },
        },
        'comparison': {
            'difference': 4250,
            'difference_percent_points': 4.25,
            'classification': 'aumento de carga',
        },
    }


@pytest.fixture
def simulation_form_data():
    """POST válido do formulário rápido"""
    return {
        'segment': '1',
        'invoicing': 'R$ 1.000.000,00',
        'costs': '2',
        'activity': '3',
    }


@pytest.fixture
def detailed_form_data():
    """POST válido do formulário detalhado (CBS/IBS com alíquota fixa)"""
    data = {'segment': '2'}
    for code in ('pis_pasep', 'cofins', 'ipi', 'icms'):
        for side in ('entry', 'exit'):
            data[f'{code}_aliquot_{side}'] = '1.65'
            data[f'{code}_base_{side}'] = 'R$ 10.000,00'
    for code in ('cbs', 'ibs'):
        for side in ('entry', 'exit'):
            data[f'{code}_base_{side}'] = '1000000'
    return data
