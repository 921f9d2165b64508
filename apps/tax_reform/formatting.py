"""
Formatação dos resultados da simulação

Todas as funções aceitam valores ausentes e devolvem o placeholder '--'.
"""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Dict, Optional

from apps.core.money import CENTS, format_number, render_amount, to_cents


PLACEHOLDER = '--'


SEGMENT_LABELS = {
    1: 'Indústria',
    2: 'Comércio',
    3: 'Serviços',
    4: 'Agropecuária',
    5: 'Outros',
}

COSTS_LABELS = {
    1: '0–30% (margem alta)',
    2: '30–60% (margem média)',
    3: '60–90% (margem baixa)',
}

ACTIVITY_LABELS = {
    1: 'Simples Nacional',
    2: 'Lucro Presumido',
    3: 'Lucro Real',
}


def to_decimal(value) -> Optional[Decimal]:
    """Número (int, float, Decimal, str numérica) -> Decimal, senão None"""
    if value is None or isinstance(value, bool):
        return None

    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return None

    return number if number.is_finite() else None


def _round(number: Decimal, exp: Decimal = CENTS) -> Optional[Decimal]:
    """quantize que devolve None quando o número excede a precisão do Decimal"""
    try:
        return number.quantize(exp, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return None


def format_currency(value) -> str:
    """R$ 1.234,56 (negativos: -R$ 1.234,56)"""
    if to_decimal(value) is None:
        return PLACEHOLDER

    cents = to_cents(value)
    if cents is None:
        return PLACEHOLDER
    return render_amount(cents)


def format_percent(value, scale=1) -> str:
    """
    Percentual com 2 casas e ponto decimal: '12.50%'

    Args:
        value: número a exibir
        scale: multiplicador (100 para frações como 0.4 -> '40.00%')
    """
    number = to_decimal(value)
    if number is None:
        return PLACEHOLDER

    number = _round(number * scale)
    if number is None:
        return PLACEHOLDER
    return f"{number:.2f}%"


def format_aliquot(value) -> str:
    """Alíquota fixa no padrão pt-BR, 1 a 2 casas: '8,8 %', '17,75 %'"""
    number = to_decimal(value)
    if number is None:
        return PLACEHOLDER

    number = _round(number)
    if number is None:
        return PLACEHOLDER
    decimal_pos = 1 if number == number.quantize(Decimal('0.1')) else 2
    return f"{format_number(number, decimal_pos=decimal_pos)} %"


def get_label(labels: Dict[int, str], key) -> str:
    """Rótulo de um código numérico; desconhecido -> '#<código>'"""
    code = key
    if isinstance(key, str) and key.strip().isdigit():
        code = int(key)

    if isinstance(code, int) and not isinstance(code, bool) and code in labels:
        return labels[code]
    return f"#{'-' if key is None else key}"
