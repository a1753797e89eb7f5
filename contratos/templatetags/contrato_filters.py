from django import template
from decimal import Decimal, InvalidOperation

from ..exceptions import ValorInvalidoError
from ..extenso import valor_por_extenso
from ..utils import formatar_moeda, formatar_data_extenso
from ..validators import formatar_cnpj

register = template.Library()


def _to_decimal(value):
    """Converte o valor para Decimal; None, vazio ou inválido viram None."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        return value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None


@register.filter
def currency_br(value):
    """
    Formata um valor monetário no padrão brasileiro: R$ 1.234,56
    Trata corretamente valores negativos: -R$ 1.234,56
    """
    value = _to_decimal(value)
    if value is None:
        return "R$ 0,00"
    return formatar_moeda(value)


@register.filter
def valor_extenso(value):
    """Valor em reais por extenso; vazio quando o valor não é utilizável."""
    value = _to_decimal(value)
    if value is None:
        return ''
    try:
        return valor_por_extenso(value)
    except ValorInvalidoError:
        return ''


@register.filter
def data_extenso(value):
    """Data no formato "05 de março de 2025"."""
    if not value:
        return ''
    return formatar_data_extenso(value)


@register.filter
def cnpj(value):
    """CNPJ formatado para exibição."""
    return formatar_cnpj(value) if value else ''
