"""
Campos de formulário compartilhados: valores e alíquotas

- MoneyInput: widget que sempre exibe o texto normalizado (R$ 1.234,56)
- MoneyField: texto digitado -> Decimal com 2 casas (via centavos)
- AliquotField: alíquota em %, vazio vira None
"""
from decimal import Decimal

from django import forms
from django.core.exceptions import ValidationError

from .money import MAX_DIGITS, FieldState, exceeds_max_digits, normalize, to_cents


class MoneyInput(forms.TextInput):
    """
    Widget de valor monetário

    Seja o texto bruto devolvido pelo POST ou um Decimal inicial,
    o campo sempre mostra a mesma renderização do valor canônico.
    """

    def __init__(self, attrs=None):
        defaults = {
            'class': 'form-control',
            'inputmode': 'numeric',
            'autocomplete': 'off',
            'placeholder': 'R$ 0,00',
            'data-money-input': '',
        }
        if attrs:
            defaults.update(attrs)
        super().__init__(defaults)

    def format_value(self, value):
        if value is None or value == '':
            return None
        if isinstance(value, str):
            display = normalize(value).display
        else:
            display = FieldState.from_amount(value).display
        return display or None


class MoneyField(forms.Field):
    """
    Campo de valor monetário

    Args:
        positive: rejeita zero quando True
        max_value: limite superior (Decimal)
    """
    widget = MoneyInput
    default_error_messages = {
        'invalid': 'Informe um valor válido.',
        'max_digits': 'Informe no máximo %(max)s dígitos.',
        'positive': 'Informe um valor maior que zero.',
        'max_value': 'Valor acima do permitido.',
    }

    def __init__(self, *, positive=False, max_value=None, **kwargs):
        self.positive = positive
        self.max_value = max_value
        super().__init__(**kwargs)

    def to_python(self, value):
        """Extrai os dígitos e devolve o valor"""
        if isinstance(value, (Decimal, int, float)):
            if to_cents(value) is not None and value < 0:
                raise ValidationError(self.error_messages['invalid'], code='invalid')
            return FieldState.from_amount(value).amount

        if exceeds_max_digits(value):
            raise ValidationError(
                self.error_messages['max_digits'],
                code='max_digits',
                params={'max': MAX_DIGITS},
            )
        return normalize(value).amount

    def validate(self, value):
        super().validate(value)
        if value is None:
            return

        if self.positive and value <= 0:
            raise ValidationError(self.error_messages['positive'], code='positive')

        if self.max_value is not None and value > self.max_value:
            raise ValidationError(self.error_messages['max_value'], code='max_value')

    def has_changed(self, initial, data):
        try:
            return self.to_python(initial) != self.to_python(data)
        except ValidationError:
            return True


class AliquotField(forms.DecimalField):
    """Alíquota (%) entre 0 e 100, com 2 casas decimais"""

    def __init__(self, **kwargs):
        kwargs.setdefault('label', 'Alíquota (%)')
        kwargs.setdefault('min_value', Decimal('0'))
        kwargs.setdefault('max_value', Decimal('100'))
        kwargs.setdefault('max_digits', 5)
        kwargs.setdefault('decimal_places', 2)
        kwargs.setdefault('widget', forms.NumberInput(attrs={
            'class': 'form-control',
            'step': '0.01',
            'min': '0',
            'placeholder': '0,00',
        }))
        super().__init__(**kwargs)
