"""Constantes centralizadas para a aplicação contratos.

Este módulo contém todas as constantes utilizadas na aplicação,
evitando valores mágicos espalhados pelo código e facilitando a manutenção.
"""

# Recorrência de cobrança
class Recorrencia:
    """Constantes para a recorrência de cobrança de contratos e clientes."""
    UNICO = 'unico'
    MENSAL = 'mensal'
    TRIMESTRAL = 'trimestral'
    SEMESTRAL = 'semestral'
    ANUAL = 'anual'

    CHOICES = [
        (UNICO, 'Pagamento Único'),
        (MENSAL, 'Mensal'),
        (TRIMESTRAL, 'Trimestral'),
        (SEMESTRAL, 'Semestral'),
        (ANUAL, 'Anual'),
    ]

    # Clientes não têm pagamento único
    CHOICES_CLIENTE = CHOICES[1:]

    # Rótulos usados dentro do texto do contrato
    ROTULOS_CONTRATO = {
        UNICO: 'pagamento único',
        MENSAL: 'mensal',
        TRIMESTRAL: 'trimestral',
        SEMESTRAL: 'semestral',
        ANUAL: 'anual',
    }

    @classmethod
    def get_all_types(cls):
        """Retorna todos os códigos de recorrência disponíveis."""
        return [codigo for codigo, _ in cls.CHOICES]

    @classmethod
    def rotulo_contrato(cls, codigo):
        """Rótulo em português para o texto do contrato; códigos desconhecidos voltam como vieram."""
        return cls.ROTULOS_CONTRATO.get(codigo, codigo)


class StatusContrato:
    """Constantes para o status de um contrato."""
    ATIVO = 'ativo'
    PENDENTE = 'pendente'
    ENCERRADO = 'encerrado'
    CANCELADO = 'cancelado'

    CHOICES = [
        (ATIVO, 'Ativo'),
        (PENDENTE, 'Pendente'),
        (ENCERRADO, 'Encerrado'),
        (CANCELADO, 'Cancelado'),
    ]


# Configurações de formatação
class FormatConfig:
    """Constantes para formatação de valores e datas."""
    DECIMAL_PLACES = 2
    MAX_DIGITS = 12
    CURRENCY_SYMBOL = 'R$'
    TIMEZONE = 'America/Sao_Paulo'

    MESES = [
        'janeiro', 'fevereiro', 'março', 'abril', 'maio', 'junho',
        'julho', 'agosto', 'setembro', 'outubro', 'novembro', 'dezembro',
    ]


# Lacunas do template
class TemplateConfig:
    """Valores padrão e rótulos de lacuna usados no preenchimento de contratos."""
    DIA_VENCIMENTO_PADRAO = 10

    LACUNA_RAZAO_SOCIAL = '[RAZÃO SOCIAL]'
    LACUNA_CNPJ = '[CNPJ]'
    LACUNA_ENDERECO = '[ENDEREÇO]'
    LACUNA_RESPONSAVEL = '[RESPONSÁVEL]'
    LACUNA_CONTATO = '[CONTATO]'
    LACUNA_DATA_FIM = '[DATA DE TÉRMINO]'
    LACUNA_SERVICO = '[DESCRIÇÃO DO SERVIÇO]'
    LACUNA_CIDADE = '[CIDADE]'


# Mensagens de erro padronizadas
class ErrorMessages:
    """Mensagens de erro padronizadas para a aplicação."""
    VALOR_NEGATIVO = 'O valor não pode ser negativo.'
    VALOR_ZERO = 'O valor deve ser maior que zero.'
    VALOR_MUITO_ALTO = 'Valor muito alto.'
    VALOR_INVALIDO = 'Valor inválido.'
    CLIENTE_INEXISTENTE = 'O cliente especificado não existe.'
    CONTRATO_INEXISTENTE = 'O contrato especificado não existe.'
    CNPJ_INVALIDO = 'CNPJ inválido.'
    DATA_FIM_ANTERIOR = 'A data de término não pode ser anterior à data de início.'
    DIA_VENCIMENTO_INVALIDO = 'O dia de vencimento deve estar entre 1 e 31.'
    CONTEUDO_CURTO = 'Conteúdo do contrato deve ter no mínimo 50 caracteres.'


# Mensagens de sucesso padronizadas
class SuccessMessages:
    """Mensagens de sucesso padronizadas para a aplicação."""
    CONTRATO_CRIADO = 'Contrato criado com sucesso.'
    CONTRATO_EXCLUIDO = 'Contrato excluído com sucesso.'


# Configurações de validação
class ValidationConfig:
    """Configurações para validações."""
    MIN_RAZAO_SOCIAL_LENGTH = 3
    MAX_RAZAO_SOCIAL_LENGTH = 200
    MIN_ENDERECO_LENGTH = 10
    MAX_ENDERECO_LENGTH = 300
    MIN_RESPONSAVEL_LENGTH = 3
    MAX_RESPONSAVEL_LENGTH = 100
    MIN_CONTATO_LENGTH = 8
    MAX_CONTATO_LENGTH = 50
    MIN_TITULO_LENGTH = 3
    MAX_TITULO_LENGTH = 200
    MIN_CONTEUDO_LENGTH = 50
    MAX_VALOR_PAGO = 10000000
    MAX_VALOR_CONTRATO = 100000000


# Template padrão de contrato com lacunas
TEMPLATE_PADRAO = """CONTRATO DE PRESTAÇÃO DE SERVIÇOS

CONTRATANTE: {{RAZAO_SOCIAL}}
CNPJ: {{CNPJ}}
Endereço: {{ENDERECO}}
Responsável: {{RESPONSAVEL}}

CONTRATADA: [NOME DA SUA EMPRESA]
CNPJ: [SEU CNPJ]

CLÁUSULA 1ª - DO OBJETO
O presente contrato tem por objeto a prestação de serviços de {{SERVICO}} pela CONTRATADA à CONTRATANTE.

CLÁUSULA 2ª - DO VALOR E FORMA DE PAGAMENTO
Pelos serviços prestados, a CONTRATANTE pagará à CONTRATADA o valor de {{VALOR}} ({{VALOR_EXTENSO}}), com recorrência {{RECORRENCIA}}.

O pagamento deverá ser efetuado até o dia {{DIA_VENCIMENTO}} de cada período.

CLÁUSULA 3ª - DO PRAZO
O presente contrato terá vigência a partir de {{DATA_INICIO}}, com término previsto para {{DATA_FIM}}.

CLÁUSULA 4ª - DAS OBRIGAÇÕES DA CONTRATADA
a) Executar os serviços conforme especificado;
b) Manter sigilo sobre informações da CONTRATANTE;
c) Emitir notas fiscais correspondentes.

CLÁUSULA 5ª - DAS OBRIGAÇÕES DA CONTRATANTE
a) Efetuar os pagamentos nas datas acordadas;
b) Fornecer informações necessárias à execução dos serviços;
c) Comunicar alterações que afetem o contrato.

CLÁUSULA 6ª - DA RESCISÃO
O contrato poderá ser rescindido por qualquer das partes, mediante aviso prévio de 30 dias.

{{CIDADE}}, {{DATA_ATUAL}}

_________________________
CONTRATANTE: {{RESPONSAVEL}}

_________________________
CONTRATADA: [NOME DO RESPONSÁVEL]"""
