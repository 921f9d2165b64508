"""
Filtros de template para a página de resultado

    {% load tax_reform_format %}
    {{ result.before.tax|brl }}
    {{ result.parameters.sector_reduction|percent:100 }}
"""
from django import template

from ..formatting import format_aliquot, format_currency, format_percent

register = template.Library()


@register.filter
def brl(value):
    return format_currency(value)


@register.filter
def percent(value, scale=1):
    return format_percent(value, scale=scale)


@register.filter
def aliquot(value):
    return format_aliquot(value)
