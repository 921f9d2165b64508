"""
Normalização de campos monetários (R$)

Cada edição do campo gera um novo FieldState a partir do texto completo:
- extrai apenas os dígitos (símbolo, separadores e vírgula são só formatação)
- interpreta os dígitos como centavos
- renderiza de novo no formato pt-BR (R$ 1.234,56)

Texto e valor nunca divergem: o texto é sempre a renderização do valor.
"""
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional

from django.utils import numberformat


CURRENCY_SYMBOL = 'R$'
# Intl pt-BR usa espaço não separável entre o símbolo e o número
CURRENCY_SPACE = '\xa0'
DECIMAL_SEPARATOR = ','
THOUSAND_SEPARATOR = '.'

# Mesma precisão dos DecimalField (max_digits=15)
MAX_DIGITS = 15

CENTS = Decimal('0.01')

_NON_DIGITS = re.compile(r'[^0-9]')


def format_number(value: Decimal, decimal_pos: int = 2) -> str:
    """Número no padrão pt-BR (1.234,56), sem símbolo"""
    return numberformat.format(
        value,
        DECIMAL_SEPARATOR,
        decimal_pos=decimal_pos,
        grouping=3,
        thousand_sep=THOUSAND_SEPARATOR,
        force_grouping=True,
        use_l10n=False,
    )


def render_amount(cents: Optional[int]) -> str:
    """
    Renderiza centavos como moeda pt-BR

    Args:
        cents: valor em centavos (None = campo vazio)

    Returns:
        'R$ 1.234,56' ou '' quando não há valor
    """
    if cents is None:
        return ''

    amount = Decimal(cents).scaleb(-2)
    sign = '-' if amount < 0 else ''
    return f"{sign}{CURRENCY_SYMBOL}{CURRENCY_SPACE}{format_number(abs(amount))}"


def to_cents(value) -> Optional[int]:
    """
    Converte um valor (Decimal, int, float, str numérica) em centavos

    Arredonda meio centavo para cima (ROUND_HALF_UP), como no restante do
    projeto. Valores vazios ou inválidos viram None.
    """
    if value is None or str(value).strip() == '':
        return None

    try:
        amount = Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError, TypeError):
        return None

    if not amount.is_finite():
        return None
    return int(amount.scaleb(2))


@dataclass(frozen=True)
class FieldState:
    """
    Estado de um campo monetário

    Fields:
        display: texto exibido/editado pelo usuário
        cents: valor canônico em centavos (None = não preenchido)
    """
    display: str = ''
    cents: Optional[int] = None

    @classmethod
    def empty(cls) -> 'FieldState':
        return cls()

    @classmethod
    def from_cents(cls, cents: Optional[int]) -> 'FieldState':
        return cls(display=render_amount(cents), cents=cents)

    @classmethod
    def from_amount(cls, value) -> 'FieldState':
        """
        Estado inicial a partir de um valor já conhecido (ex.: initial do form)

        Valores negativos não são representáveis no campo: viram estado vazio.
        """
        cents = to_cents(value)
        if cents is None or cents < 0:
            return cls.empty()
        return cls.from_cents(cents)

    @property
    def is_unset(self) -> bool:
        return self.cents is None

    @property
    def amount(self) -> Optional[Decimal]:
        """Valor canônico com exatamente 2 casas decimais"""
        if self.cents is None:
            return None
        return Decimal(self.cents).scaleb(-2).quantize(CENTS)


def extract_digits(raw_input: Optional[str]) -> str:
    """Mantém só os dígitos 0-9, na ordem em que aparecem"""
    if not raw_input:
        return ''
    return _NON_DIGITS.sub('', str(raw_input))


def normalize(raw_input: Optional[str], previous_state: Optional[FieldState] = None) -> FieldState:
    """
    Recalcula o estado do campo após uma edição

    Args:
        raw_input: texto completo do campo depois da edição
        previous_state: estado anterior (edição nula e limite de dígitos)

    Returns:
        Novo FieldState. Nunca lança exceção: qualquer entrada sem dígitos
        resulta no estado vazio. Uma edição que passa de MAX_DIGITS é
        ignorada (devolve previous_state), como um input com maxlength; sem
        estado anterior os dígitos excedentes são descartados.

    Exemplos:
        normalize('')            -> ('', None)
        normalize('100')         -> ('R$ 1,00', 100)
        normalize('R$ 1.234,56') -> ('R$ 1.234,56', 123456)
    """
    if previous_state is not None and raw_input == previous_state.display:
        return previous_state

    digits = extract_digits(raw_input)
    if not digits:
        return FieldState.empty()

    # Zeros à esquerda não contam
    digits = digits.lstrip('0')
    if len(digits) > MAX_DIGITS:
        if previous_state is not None:
            return previous_state
        digits = digits[:MAX_DIGITS]
    return FieldState.from_cents(int(digits or '0'))


def exceeds_max_digits(raw_input: Optional[str]) -> bool:
    """True quando o texto tem mais dígitos significativos que MAX_DIGITS"""
    return len(extract_digits(raw_input).lstrip('0')) > MAX_DIGITS
