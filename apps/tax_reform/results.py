"""
Modelo do resultado devolvido pelo serviço de cálculo

O backend responde em dois formatos:
- resumo (formulário rápido): antes / depois / parameters / comparacao
- detalhado (formulário por imposto): before / after / comparison

parse_result() identifica o formato pelas chaves presentes.
"""
import enum
import unicodedata
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional, Union

from .formatting import to_decimal


def _fold(text: str) -> str:
    """minúsculas, sem acentos e sem espaços extras"""
    decomposed = unicodedata.normalize('NFKD', text)
    stripped = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return ' '.join(stripped.casefold().split())


class Classification(enum.Enum):
    """Impacto da reforma sobre a carga tributária"""

    INCREASE = 'aumento de carga'
    DECREASE = 'redução de carga'
    NEUTRAL = 'neutro'

    @classmethod
    def parse(cls, text) -> 'Classification':
        """
        Aceita as grafias enviadas pelo backend

        'redução de carga' e 'reducao de carga' são o mesmo caso.
        Texto desconhecido -> ValueError
        """
        if isinstance(text, cls):
            return text
        if not isinstance(text, str):
            raise ValueError(f"Classificação inválida: {text!r}")

        folded = _fold(text)
        for member in cls:
            if _fold(member.value) == folded:
                return member
        raise ValueError(f"Classificação desconhecida: {text!r}")

    @property
    def label(self) -> str:
        return self.value

    @property
    def badge_class(self) -> str:
        return {
            Classification.INCREASE: 'bg-red-100 text-red-700',
            Classification.DECREASE: 'bg-emerald-100 text-emerald-700',
            Classification.NEUTRAL: 'bg-amber-100 text-amber-700',
        }[self]


def _section(data, key) -> dict:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"Campo '{key}' deveria ser um objeto")
    return value


def _number(data: dict, key: str) -> Optional[Decimal]:
    return to_decimal(data.get(key))


def _inputs(data: dict) -> Dict[str, Optional[Decimal]]:
    return {
        str(key): to_decimal(value)
        for key, value in _section(data, 'inputs').items()
    }


# =============================================================================
# Formato resumo
# =============================================================================

@dataclass
class BeforeSummary:
    base: Optional[Decimal] = None
    tax: Optional[Decimal] = None
    effective_rate: Optional[Decimal] = None


@dataclass
class AfterSummary:
    base: Optional[Decimal] = None
    gross_tax: Optional[Decimal] = None
    input_credit: Optional[Decimal] = None
    net_tax: Optional[Decimal] = None
    effective_rate: Optional[Decimal] = None


@dataclass
class Parameters:
    current_rate: Optional[Decimal] = None
    ibs_rate: Optional[Decimal] = None
    cbs_rate: Optional[Decimal] = None
    gross_total_rate: Optional[Decimal] = None
    effective_total_rate: Optional[Decimal] = None
    sector_reduction: Optional[Decimal] = None
    creditable_factor: Optional[Decimal] = None
    credit_rate: Optional[Decimal] = None
    costs_percent: Optional[Decimal] = None


@dataclass
class Comparison:
    classification: Classification
    difference: Optional[Decimal] = None
    difference_pp: Optional[Decimal] = None


@dataclass
class SummaryResult:
    inputs: Dict[str, Optional[Decimal]]
    before: BeforeSummary
    after: AfterSummary
    parameters: Parameters
    comparison: Comparison

    is_detailed = False

    @classmethod
    def from_dict(cls, data: dict) -> 'SummaryResult':
        antes = _section(data, 'antes')
        depois = _section(data, 'depois')
        params = _section(data, 'parameters')
        comparacao = _section(data, 'comparacao')

        return cls(
            inputs=_inputs(data),
            before=BeforeSummary(
                base=_number(antes, 'base'),
                tax=_number(antes, 'imposto'),
                effective_rate=_number(antes, 'aliquota_efetiva'),
            ),
            after=AfterSummary(
                base=_number(depois, 'base'),
                gross_tax=_number(depois, 'imposto_bruto'),
                input_credit=_number(depois, 'credito_insumos'),
                net_tax=_number(depois, 'imposto_liquido'),
                effective_rate=_number(depois, 'aliquota_efetiva'),
            ),
            parameters=Parameters(
                current_rate=_number(params, 't_atual'),
                ibs_rate=_number(params, 't_IBS'),
                cbs_rate=_number(params, 't_CBS'),
                gross_total_rate=_number(params, 't_total_bruta'),
                effective_total_rate=_number(params, 't_total_efetiva_bruta'),
                sector_reduction=_number(params, 'red_setorial'),
                creditable_factor=_number(params, 'k_creditavel'),
                credit_rate=_number(params, 't_credito'),
                costs_percent=_number(params, 'custos_percent'),
            ),
            comparison=Comparison(
                classification=Classification.parse(comparacao.get('classificacao')),
                difference=_number(comparacao, 'dif_reais'),
                difference_pp=_number(comparacao, 'dif_pp'),
            ),
        )


# =============================================================================
# Formato detalhado
# =============================================================================

@dataclass
class TaxLine:
    """Linha de entrada (crédito) ou saída (débito) de um imposto"""
    code: str
    label: str
    aliquot: Optional[Decimal] = None
    base: Optional[Decimal] = None
    credit: Optional[Decimal] = None
    debit: Optional[Decimal] = None
    due: Optional[Decimal] = None

    @classmethod
    def from_dict(cls, data) -> 'TaxLine':
        if not isinstance(data, dict):
            raise ValueError("Linha de imposto deveria ser um objeto")
        return cls(
            code=str(data.get('code', '')),
            label=str(data.get('label') or data.get('code', '')),
            aliquot=_number(data, 'aliquot'),
            base=_number(data, 'base'),
            credit=_number(data, 'credit'),
            debit=_number(data, 'debit'),
            due=_number(data, 'due'),
        )


def _lines(data: dict, key: str) -> List[TaxLine]:
    items = data.get(key) or []
    if not isinstance(items, list):
        raise ValueError(f"Campo '{key}' deveria ser uma lista")
    return [TaxLine.from_dict(item) for item in items]


@dataclass
class Period:
    """Entradas e saídas de um período (antes ou depois da reforma)"""
    entries: List[TaxLine] = field(default_factory=list)
    exits: List[TaxLine] = field(default_factory=list)
    total_due: Optional[Decimal] = None


@dataclass
class AfterTotals:
    due: Optional[Decimal] = None
    reduction_percent: Optional[Decimal] = None
    due_with_reduction: Optional[Decimal] = None


@dataclass
class ProjectedRates:
    cbs_aliquot: Optional[Decimal] = None
    ibs_aliquot: Optional[Decimal] = None
    is_aliquot: Optional[Decimal] = None
    reduction_percent: Optional[Decimal] = None


@dataclass
class DetailedResult:
    inputs: Dict[str, Optional[Decimal]]
    before: Period
    after: Period
    after_totals: AfterTotals
    projected_rates: ProjectedRates
    comparison: Comparison

    is_detailed = True

    @classmethod
    def from_dict(cls, data: dict) -> 'DetailedResult':
        before = _section(data, 'before')
        after = _section(data, 'after')
        totals = _section(after, 'totals')
        rates = _section(after, 'projected_rates')
        comparison = _section(data, 'comparison')

        return cls(
            inputs=_inputs(data),
            before=Period(
                entries=_lines(before, 'entries'),
                exits=_lines(before, 'exits'),
                total_due=_number(before, 'total_due'),
            ),
            after=Period(
                entries=_lines(after, 'entries'),
                exits=_lines(after, 'exits'),
                total_due=_number(totals, 'due'),
            ),
            after_totals=AfterTotals(
                due=_number(totals, 'due'),
                reduction_percent=_number(totals, 'reduction_percent'),
                due_with_reduction=_number(totals, 'due_with_reduction'),
            ),
            projected_rates=ProjectedRates(
                cbs_aliquot=_number(rates, 'cbs_aliquot'),
                ibs_aliquot=_number(rates, 'ibs_aliquot'),
                is_aliquot=_number(rates, 'is_aliquot'),
                reduction_percent=_number(rates, 'reduction_percent'),
            ),
            comparison=Comparison(
                classification=Classification.parse(comparison.get('classification')),
                difference=_number(comparison, 'difference'),
                difference_pp=_number(comparison, 'difference_percent_points'),
            ),
        )


def parse_result(data) -> Union[SummaryResult, DetailedResult]:
    """
    Converte o `data` da resposta no resultado tipado

    Raises:
        ValueError: formato desconhecido ou classificação inválida
    """
    if not isinstance(data, dict):
        raise ValueError("Resultado deveria ser um objeto")

    if 'comparacao' in data:
        return SummaryResult.from_dict(data)
    if 'comparison' in data:
        return DetailedResult.from_dict(data)
    raise ValueError("Formato de resultado desconhecido")
