from django.core.exceptions import ValidationError
import re

from .constants import ErrorMessages

def limpar_cnpj(cnpj: str) -> str:
    """Remove qualquer caractere não numérico do CNPJ."""
    return re.sub(r'\D', '', cnpj or '')

def validar_cnpj(cnpj: str) -> bool:
    """
    Valida um número de CNPJ brasileiro.

    Args:
        cnpj: String contendo o CNPJ a ser validado

    Returns:
        bool: True se o CNPJ for válido, False caso contrário
    """
    cnpj = limpar_cnpj(cnpj)

    # Verifica se tem 14 dígitos
    if len(cnpj) != 14:
        return False

    # Verifica se todos os dígitos são iguais
    if cnpj == cnpj[0] * 14:
        return False

    # Calcula o primeiro dígito verificador
    pesos1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    soma = sum(int(cnpj[i]) * pesos1[i] for i in range(12))
    resto = soma % 11
    digito1 = 0 if resto < 2 else 11 - resto

    if int(cnpj[12]) != digito1:
        return False

    # Calcula o segundo dígito verificador
    pesos2 = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    soma = sum(int(cnpj[i]) * pesos2[i] for i in range(13))
    resto = soma % 11
    digito2 = 0 if resto < 2 else 11 - resto

    return int(cnpj[13]) == digito2

def django_validar_cnpj(value: str) -> None:
    """
    Validator para uso em campos do Django.

    Raises:
        ValidationError: Se o CNPJ for inválido
    """
    if not validar_cnpj(value):
        raise ValidationError(ErrorMessages.CNPJ_INVALIDO)

def formatar_cnpj(cnpj: str) -> str:
    """
    Formata um CNPJ para exibição.

    Args:
        cnpj: CNPJ sem formatação

    Returns:
        str: CNPJ formatado (XX.XXX.XXX/XXXX-XX)
    """
    cnpj = limpar_cnpj(cnpj)
    if len(cnpj) == 14:
        return f'{cnpj[:2]}.{cnpj[2:5]}.{cnpj[5:8]}/{cnpj[8:12]}-{cnpj[12:]}'
    return cnpj

def validar_tamanho(valor: str, minimo: int, maximo: int, rotulo: str):
    """
    Retorna a mensagem de erro de tamanho do texto, ou None se estiver dentro do limite.

    O texto é considerado sem espaços nas pontas.
    """
    tamanho = len((valor or '').strip())
    if tamanho < minimo:
        return f'{rotulo} deve ter no mínimo {minimo} caracteres.'
    if tamanho > maximo:
        return f'{rotulo} deve ter no máximo {maximo} caracteres.'
    return None
