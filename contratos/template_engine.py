"""Preenchimento de templates de contrato.

O template é texto livre com lacunas no formato {{CHAVE}}. As chaves
reconhecidas formam um conjunto fechado (``Placeholder``); qualquer outra
sequência entre chaves é mantida como está. A substituição é feita em uma
única passada, então valores inseridos nunca são reexpandidos.

A função é pura: é chamada a cada alteração do formulário (prévia) e mais
uma vez ao salvar o contrato.
"""

import enum
import re
import time
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Callable, Dict, List, Optional

from .constants import Recorrencia, TemplateConfig
from .extenso import valor_por_extenso
from .logging_config import get_logger
from .utils import formatar_moeda, formatar_data_extenso, get_data_atual_brasil

logger = get_logger('contratos.template_engine')


class Placeholder(enum.Enum):
    """Lacunas reconhecidas no template; o valor é o token literal."""
    RAZAO_SOCIAL = '{{RAZAO_SOCIAL}}'
    CNPJ = '{{CNPJ}}'
    ENDERECO = '{{ENDERECO}}'
    RESPONSAVEL = '{{RESPONSAVEL}}'
    CONTATO = '{{CONTATO}}'
    VALOR = '{{VALOR}}'
    VALOR_EXTENSO = '{{VALOR_EXTENSO}}'
    RECORRENCIA = '{{RECORRENCIA}}'
    DATA_INICIO = '{{DATA_INICIO}}'
    DATA_FIM = '{{DATA_FIM}}'
    SERVICO = '{{SERVICO}}'
    DIA_VENCIMENTO = '{{DIA_VENCIMENTO}}'
    CIDADE = '{{CIDADE}}'
    DATA_ATUAL = '{{DATA_ATUAL}}'

    @property
    def token(self):
        return self.value


@dataclass(frozen=True)
class DadosContrato:
    """Parâmetros do contrato usados no preenchimento."""
    valor_contrato: Decimal
    recorrencia: str
    data_inicio: date
    data_fim: Optional[date] = None
    servico: Optional[str] = None
    dia_vencimento: Optional[int] = None
    cidade: Optional[str] = None


# Resolver: (cliente, dados, hoje) -> texto
Resolver = Callable[[object, DadosContrato, date], str]


def _campo_cliente(atributo, lacuna):
    def resolver(cliente, dados, hoje):
        valor = getattr(cliente, atributo, None) if cliente is not None else None
        return str(valor) if valor else lacuna
    return resolver


def _data_fim(cliente, dados, hoje):
    if dados.data_fim is None:
        return TemplateConfig.LACUNA_DATA_FIM
    return formatar_data_extenso(dados.data_fim)


def _dia_vencimento(cliente, dados, hoje):
    return str(dados.dia_vencimento or TemplateConfig.DIA_VENCIMENTO_PADRAO)


RESOLVERS: Dict[Placeholder, Resolver] = {
    Placeholder.RAZAO_SOCIAL: _campo_cliente('razao_social', TemplateConfig.LACUNA_RAZAO_SOCIAL),
    Placeholder.CNPJ: _campo_cliente('cnpj', TemplateConfig.LACUNA_CNPJ),
    Placeholder.ENDERECO: _campo_cliente('endereco', TemplateConfig.LACUNA_ENDERECO),
    Placeholder.RESPONSAVEL: _campo_cliente('responsavel', TemplateConfig.LACUNA_RESPONSAVEL),
    Placeholder.CONTATO: _campo_cliente('contato_interno', TemplateConfig.LACUNA_CONTATO),
    Placeholder.VALOR: lambda cliente, dados, hoje: formatar_moeda(dados.valor_contrato),
    Placeholder.VALOR_EXTENSO: lambda cliente, dados, hoje: valor_por_extenso(dados.valor_contrato),
    Placeholder.RECORRENCIA: lambda cliente, dados, hoje: Recorrencia.rotulo_contrato(dados.recorrencia),
    Placeholder.DATA_INICIO: lambda cliente, dados, hoje: formatar_data_extenso(dados.data_inicio),
    Placeholder.DATA_FIM: _data_fim,
    Placeholder.SERVICO: lambda cliente, dados, hoje: dados.servico or TemplateConfig.LACUNA_SERVICO,
    Placeholder.DIA_VENCIMENTO: _dia_vencimento,
    Placeholder.CIDADE: lambda cliente, dados, hoje: dados.cidade or TemplateConfig.LACUNA_CIDADE,
    Placeholder.DATA_ATUAL: lambda cliente, dados, hoje: formatar_data_extenso(hoje),
}

_faltando = set(Placeholder) - set(RESOLVERS)
if _faltando:
    raise RuntimeError(f"Placeholders sem resolver: {sorted(p.name for p in _faltando)}")

DESCRICOES = {
    Placeholder.RAZAO_SOCIAL: 'Razão social do cliente',
    Placeholder.CNPJ: 'CNPJ do cliente',
    Placeholder.ENDERECO: 'Endereço do cliente',
    Placeholder.RESPONSAVEL: 'Nome do responsável',
    Placeholder.CONTATO: 'Contato do cliente',
    Placeholder.VALOR: 'Valor do contrato formatado',
    Placeholder.VALOR_EXTENSO: 'Valor por extenso',
    Placeholder.RECORRENCIA: 'Tipo de recorrência',
    Placeholder.DATA_INICIO: 'Data de início',
    Placeholder.DATA_FIM: 'Data de término',
    Placeholder.SERVICO: 'Descrição do serviço',
    Placeholder.DIA_VENCIMENTO: 'Dia do vencimento',
    Placeholder.CIDADE: 'Cidade',
    Placeholder.DATA_ATUAL: 'Data atual',
}

_POR_TOKEN = {p.token: p for p in Placeholder}
_PADRAO_TOKENS = re.compile('|'.join(re.escape(p.token) for p in Placeholder))

_LACUNAS = [
    TemplateConfig.LACUNA_RAZAO_SOCIAL,
    TemplateConfig.LACUNA_CNPJ,
    TemplateConfig.LACUNA_ENDERECO,
    TemplateConfig.LACUNA_RESPONSAVEL,
    TemplateConfig.LACUNA_CONTATO,
    TemplateConfig.LACUNA_DATA_FIM,
    TemplateConfig.LACUNA_SERVICO,
    TemplateConfig.LACUNA_CIDADE,
]


def preencher_template(template: str, cliente, dados: DadosContrato,
                       hoje: Optional[date] = None) -> str:
    """
    Substitui as lacunas conhecidas do template pelos dados do contrato.

    Args:
        template: Texto do contrato com lacunas {{CHAVE}}
        cliente: Objeto com razao_social, cnpj, endereco, responsavel e
            contato_interno (ex: ``Cliente``), ou None
        dados: Parâmetros do contrato
        hoje: Data usada em {{DATA_ATUAL}}; por padrão, a data atual no Brasil

    Returns:
        str: Template preenchido. Dados ausentes viram rótulos entre
        colchetes (ex: "[CIDADE]") e chaves desconhecidas ficam intactas.
    """
    if not template:
        return template

    start_time = time.time()
    resolvidos = {}

    def substituir(match):
        placeholder = _POR_TOKEN[match.group(0)]
        if placeholder not in resolvidos:
            data_ref = hoje
            if placeholder is Placeholder.DATA_ATUAL and data_ref is None:
                data_ref = get_data_atual_brasil()
            resolvidos[placeholder] = RESOLVERS[placeholder](cliente, dados, data_ref)
        return resolvidos[placeholder]

    preenchido = _PADRAO_TOKENS.sub(substituir, template)

    logger.debug(
        "Template preenchido",
        extra={
            'operation': 'FILL_TEMPLATE',
            'template_length': len(template),
            'duration_ms': int((time.time() - start_time) * 1000),
        },
    )
    return preenchido


def listar_placeholders() -> List[Dict[str, str]]:
    """Catálogo estático das lacunas suportadas, na ordem de exibição."""
    return [{'key': p.token, 'description': DESCRICOES[p]} for p in Placeholder]


def placeholders_nao_resolvidos(texto: str) -> List[str]:
    """
    Lista os rótulos de lacuna que continuam no texto preenchido.

    Útil para avisar quem redige o contrato sobre os campos que ainda
    precisam ser completados à mão. A ordem é a da primeira ocorrência.
    """
    if not texto:
        return []
    encontrados = [(texto.find(lacuna), lacuna) for lacuna in _LACUNAS if lacuna in texto]
    return [lacuna for _, lacuna in sorted(encontrados)]
