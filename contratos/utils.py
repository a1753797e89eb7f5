from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from datetime import datetime
import re
from django.utils import timezone
import pytz
from functools import lru_cache

from .constants import FormatConfig

# Cache do fuso horário para melhor performance
@lru_cache(maxsize=1)
def _get_fuso_brasil():
    """Retorna o fuso horário do Brasil com cache para performance."""
    return pytz.timezone(FormatConfig.TIMEZONE)

def get_data_atual_brasil():
    """
    Obtém a data atual no fuso horário do Brasil (America/Sao_Paulo).

    Usada pelo preenchimento de contratos para a data de emissão, que é
    sempre calculada no momento da chamada.

    Returns:
        date: Data atual no fuso horário do Brasil
    """
    fuso_brasil = _get_fuso_brasil()
    return timezone.localtime(timezone.now(), fuso_brasil).date()

def parse_currency_value(value_str):
    """
    Converte uma string de valor monetário formatado (ex: "1.234,56") para Decimal.

    Args:
        value_str (str): String com valor formatado no padrão brasileiro

    Returns:
        Decimal: Valor convertido para Decimal

    Raises:
        ValueError: Se o valor não puder ser convertido
    """
    if not value_str:
        return Decimal('0.00')

    value_str = str(value_str).strip()

    # Se já é um número válido (sem formatação), converte diretamente
    try:
        return Decimal(value_str)
    except InvalidOperation:
        pass

    # Remove caracteres não numéricos exceto vírgula e ponto
    clean_value = re.sub(r'[^\d,.]', '', value_str)
    if not clean_value:
        raise ValueError(f"Valor inválido: {value_str}")

    # Se há vírgula, assume formato brasileiro (vírgula = decimal, ponto = milhares)
    if ',' in clean_value:
        clean_value = clean_value.replace('.', '').replace(',', '.')

    try:
        return Decimal(clean_value)
    except InvalidOperation:
        raise ValueError(f"Valor inválido: {value_str}")

def format_currency_br(value):
    """
    Formata um valor Decimal para o padrão brasileiro.
    Trata corretamente valores negativos.

    Args:
        value (Decimal): Valor a ser formatado

    Returns:
        str: Valor formatado (ex: "1.234,56" ou "-1.234,56")
    """
    if not isinstance(value, Decimal):
        value = Decimal(str(value))

    # Mesmo arredondamento do valor por extenso (meio-para-cima)
    value = value.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
    is_negative = value < 0
    abs_value = abs(value)

    formatted = f"{abs_value:,.2f}".replace(',', 'X').replace('.', ',').replace('X', '.')

    if is_negative:
        return f"-{formatted}"
    return formatted

def formatar_moeda(value):
    """
    Formata um valor monetário com o símbolo da moeda: R$ 1.234,56
    Valores negativos ficam como -R$ 1.234,56
    """
    formatted = format_currency_br(value)
    if formatted.startswith('-'):
        return f"-{FormatConfig.CURRENCY_SYMBOL} {formatted[1:]}"
    return f"{FormatConfig.CURRENCY_SYMBOL} {formatted}"

def formatar_data_extenso(data):
    """
    Formata uma data por extenso: "05 de março de 2025".

    Args:
        data (date | datetime): Data a ser formatada

    Returns:
        str: Dia com dois dígitos, mês em minúsculas e ano com quatro dígitos
    """
    if isinstance(data, datetime):
        data = data.date()
    mes = FormatConfig.MESES[data.month - 1]
    return f"{data.day:02d} de {mes} de {data.year:04d}"
