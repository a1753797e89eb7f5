"""Escrita de valores monetários por extenso em português.

Exemplo:
    >>> valor_por_extenso(Decimal('1500.75'))
    'mil e quinhentos reais e setenta e cinco centavos'
"""

from decimal import Decimal, ROUND_HALF_UP

from .constants import ErrorMessages
from .exceptions import ValorInvalidoError

UNIDADES = ['', 'um', 'dois', 'três', 'quatro', 'cinco', 'seis', 'sete', 'oito', 'nove']
DEZ_A_DEZENOVE = ['dez', 'onze', 'doze', 'treze', 'quatorze', 'quinze',
                  'dezesseis', 'dezessete', 'dezoito', 'dezenove']
DEZENAS = ['', '', 'vinte', 'trinta', 'quarenta', 'cinquenta',
           'sessenta', 'setenta', 'oitenta', 'noventa']
CENTENAS = ['', 'cento', 'duzentos', 'trezentos', 'quatrocentos', 'quinhentos',
            'seiscentos', 'setecentos', 'oitocentos', 'novecentos']


def _ate_mil(numero):
    """Extenso de 1 a 999; partes não nulas unidas por " e "."""
    if numero == 100:
        return 'cem'

    partes = []
    centena, resto = divmod(numero, 100)
    if centena:
        partes.append(CENTENAS[centena])

    if 10 <= resto < 20:
        partes.append(DEZ_A_DEZENOVE[resto - 10])
    else:
        dezena, unidade = divmod(resto, 10)
        if dezena:
            partes.append(DEZENAS[dezena])
        if unidade:
            partes.append(UNIDADES[unidade])

    return ' e '.join(partes)


def numero_por_extenso(numero: int) -> str:
    """
    Escreve um inteiro não negativo por extenso.

    Bilhões, milhões e milhares são decompostos recursivamente ("dois mil",
    "cento e vinte mil", "dois milhões", "mil bilhões");
    exatamente mil é "mil" e o resto abaixo do milhar entra sempre com " e "
    ("mil e cem", "mil e duzentos e trinta e quatro").
    """
    if numero < 0:
        raise ValorInvalidoError(ErrorMessages.VALOR_NEGATIVO, code='VALOR_NEGATIVO',
                                 details={'valor': numero})
    if numero == 0:
        return 'zero'

    bilhoes, numero = divmod(numero, 1000000000)
    milhoes, numero = divmod(numero, 1000000)
    milhares, resto = divmod(numero, 1000)
    partes = []
    if bilhoes == 1:
        partes.append('um bilhão')
    elif bilhoes:
        partes.append(f"{numero_por_extenso(bilhoes)} bilhões")
    if milhoes == 1:
        partes.append('um milhão')
    elif milhoes:
        partes.append(f"{numero_por_extenso(milhoes)} milhões")
    if milhares == 1:
        partes.append('mil')
    elif milhares:
        partes.append(f"{numero_por_extenso(milhares)} mil")
    if resto:
        partes.append(_ate_mil(resto))

    return ' e '.join(partes)


def _separar_reais_centavos(valor):
    """Separa o valor em (reais, centavos) arredondando os centavos meio-para-cima."""
    if not isinstance(valor, Decimal):
        try:
            valor = Decimal(str(valor))
        except ArithmeticError:
            raise ValorInvalidoError(ErrorMessages.VALOR_INVALIDO, code='VALOR_INVALIDO',
                                     details={'valor': str(valor)})

    if not valor.is_finite():
        raise ValorInvalidoError(ErrorMessages.VALOR_INVALIDO, code='VALOR_INVALIDO',
                                 details={'valor': str(valor)})
    if valor < 0:
        raise ValorInvalidoError(ErrorMessages.VALOR_NEGATIVO, code='VALOR_NEGATIVO',
                                 details={'valor': str(valor)})

    # Arredondar o total em centavos leva 1,999 a 2 reais em vez de "cem centavos"
    total_centavos = int((valor * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP))
    reais, centavos = divmod(total_centavos, 100)
    return reais, centavos


def valor_por_extenso(valor) -> str:
    """
    Escreve um valor em reais por extenso.

    Args:
        valor (Decimal | int | float | str): Valor não negativo

    Returns:
        str: Ex: "um real e vinte e cinco centavos", "cinquenta centavos",
        "zero reais" para valor nulo

    Raises:
        ValorInvalidoError: Se o valor for negativo ou não numérico
    """
    reais, centavos = _separar_reais_centavos(valor)

    partes = []
    if reais == 1:
        partes.append('um real')
    elif reais > 0:
        # "um milhão de reais", mas "um milhão e cem reais"
        unidade = ' de reais' if reais % 1000000 == 0 else ' reais'
        partes.append(numero_por_extenso(reais) + unidade)
    if centavos > 0:
        partes.append(numero_por_extenso(centavos) + (' centavo' if centavos == 1 else ' centavos'))

    return ' e '.join(partes) or 'zero reais'
