"""
Formulários da simulação da reforma tributária

- TaxReformForm: simulação rápida (segmento, faturamento, custos, regime)
- TaxReformDetailedForm: alíquota e base por imposto, entradas e saídas
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional

from django import forms
from django.conf import settings

from apps.core.forms import AliquotField, MoneyField
from .formatting import ACTIVITY_LABELS, COSTS_LABELS, SEGMENT_LABELS


def _choices(labels: Dict[int, str], empty_label: str):
    return [('', empty_label)] + [(str(code), label) for code, label in labels.items()]


def _segment_field():
    return forms.ChoiceField(
        label='Dados iniciais',
        help_text='Sua empresa atua em qual setor?',
        choices=_choices(SEGMENT_LABELS, 'Selecione o segmento'),
        error_messages={'required': 'Selecione o segmento'},
        widget=forms.Select(attrs={'class': 'form-select'}),
    )


class TaxReformForm(forms.Form):
    """Simulação rápida"""

    segment = _segment_field()

    invoicing = MoneyField(
        label='Faturamento',
        positive=True,
        error_messages={
            'required': 'Informe um faturamento válido',
            'positive': 'Informe um faturamento válido',
        },
    )

    costs = forms.ChoiceField(
        label='Estrutura de custos',
        help_text='Qual a proporção média entre custos e faturamento da sua empresa?',
        choices=_choices(COSTS_LABELS, 'Selecione a proporção'),
        error_messages={'required': 'Selecione a faixa de custos'},
        widget=forms.Select(attrs={'class': 'form-select'}),
    )

    activity = forms.ChoiceField(
        label='Tipo de atividade e regime atual',
        help_text='Sua empresa presta serviços ou vende produtos?',
        choices=_choices(ACTIVITY_LABELS, 'Selecione o regime da sua empresa'),
        error_messages={'required': 'Selecione o regime da empresa'},
        widget=forms.Select(attrs={'class': 'form-select'}),
    )

    def to_payload(self) -> dict:
        """Corpo enviado ao serviço de cálculo (form já validado)"""
        data = self.cleaned_data
        return {
            'segment': data['segment'],
            'invoicing': data['invoicing'],
            'costs': data['costs'],
            'activity': data['activity'],
        }


# =============================================================================
# Formulário detalhado
# =============================================================================

ENTRY = 'entry'
EXIT = 'exit'

SIDE_TITLES = {
    ENTRY: ('Entradas', 'Compras / insumos'),
    EXIT: ('Saídas', 'Vendas / saídas'),
}


@dataclass(frozen=True)
class TaxCard:
    """Um imposto do formulário detalhado"""
    code: str
    title: str
    period: str  # 'before' | 'after'
    sides: tuple = (ENTRY, EXIT)
    required: bool = True


TAX_CARDS = [
    TaxCard('pis_pasep', 'PIS/PASEP', 'before'),
    TaxCard('cofins', 'COFINS', 'before'),
    TaxCard('ipi', 'IPI', 'before'),
    TaxCard('icms', 'ICMS', 'before'),
    TaxCard('cbs', 'CBS', 'after'),
    TaxCard('ibs', 'IBS', 'after'),
    TaxCard('iss', 'ISS', 'before', sides=(EXIT,), required=False),
]


def aliquot_name(code: str, side: str) -> str:
    return f'{code}_aliquot_{side}'


def base_name(code: str, side: str) -> str:
    return f'{code}_base_{side}'


def get_fixed_aliquots() -> Dict[str, Dict[str, Decimal]]:
    """
    Alíquotas fixas por imposto/lado (settings.TAX_REFORM_FIXED_ALIQUOTS)

    Exemplo: {'cbs': {'entry': Decimal('8.8'), 'exit': Decimal('8.8')}}
    """
    configured = getattr(settings, 'TAX_REFORM_FIXED_ALIQUOTS', None) or {}
    return {
        code: {side: Decimal(str(value)) for side, value in sides.items()}
        for code, sides in configured.items()
    }


class TaxReformDetailedForm(forms.Form):
    """Simulação detalhada por imposto"""

    segment = _segment_field()

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fixed_aliquots = get_fixed_aliquots()

        for card in TAX_CARDS:
            for side in card.sides:
                if self.get_fixed_aliquot(card.code, side) is None:
                    self.fields[aliquot_name(card.code, side)] = AliquotField(
                        required=card.required,
                        error_messages={'required': 'Informe a alíquota'},
                    )
                self.fields[base_name(card.code, side)] = MoneyField(
                    label='Base de cálculo',
                    required=card.required,
                    error_messages={'required': 'Informe a base de cálculo'},
                )

    def get_fixed_aliquot(self, code: str, side: str) -> Optional[Decimal]:
        return self.fixed_aliquots.get(code, {}).get(side)

    @property
    def cards(self) -> List[dict]:
        """Estrutura para o template: um item por imposto, com entradas/saídas"""
        cards = []
        for card in TAX_CARDS:
            sides = []
            for side in card.sides:
                title, hint = SIDE_TITLES[side]
                aliquot_field = aliquot_name(card.code, side)
                sides.append({
                    'tone': side,
                    'title': title,
                    'hint': hint,
                    'fixed_aliquot': self.get_fixed_aliquot(card.code, side),
                    'aliquot': self[aliquot_field] if aliquot_field in self.fields else None,
                    'base': self[base_name(card.code, side)],
                })
            cards.append({'code': card.code, 'title': card.title, 'period': card.period, 'sides': sides})
        return cards

    def clean(self):
        """Impostos opcionais: alíquota e base informadas juntas ou nenhuma"""
        cleaned_data = super().clean()

        for card in TAX_CARDS:
            if card.required:
                continue
            for side in card.sides:
                aliquot_key = aliquot_name(card.code, side)
                base_key = base_name(card.code, side)
                if aliquot_key not in self.fields:
                    continue
                aliquot = cleaned_data.get(aliquot_key)
                base = cleaned_data.get(base_key)
                if aliquot is None and base is not None:
                    self.add_error(aliquot_key, 'Informe a alíquota junto com a base.')
                elif aliquot is not None and base is None and base_key not in self.errors:
                    self.add_error(base_key, 'Informe a base junto com a alíquota.')

        return cleaned_data

    def to_payload(self) -> dict:
        """Campos do TaxReformPayload; impostos opcionais vazios ficam de fora"""
        data = self.cleaned_data
        payload = {'segment': data['segment']}

        for card in TAX_CARDS:
            for side in card.sides:
                aliquot = self.get_fixed_aliquot(card.code, side)
                if aliquot is None:
                    aliquot = data.get(aliquot_name(card.code, side))
                base = data.get(base_name(card.code, side))

                if not card.required and base is None:
                    continue
                payload[aliquot_name(card.code, side)] = aliquot
                payload[base_name(card.code, side)] = base

        return payload
