from django.db import models
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator, MaxValueValidator
from dateutil.relativedelta import relativedelta
from decimal import Decimal

from .constants import Recorrencia, StatusContrato, FormatConfig, ErrorMessages, ValidationConfig
from .template_engine import DadosContrato
from .validators import django_validar_cnpj, formatar_cnpj, limpar_cnpj, validar_tamanho


class Cliente(models.Model):
    """
    Cliente (pessoa jurídica) da carteira.
    O CNPJ é sempre armazenado formatado (XX.XXX.XXX/XXXX-XX).
    """
    razao_social = models.CharField(
        max_length=ValidationConfig.MAX_RAZAO_SOCIAL_LENGTH,
        verbose_name='Razão Social'
    )

    cnpj = models.CharField(
        max_length=18,
        unique=True,
        validators=[django_validar_cnpj],
        verbose_name='CNPJ',
        help_text='Apenas números ou formato XX.XXX.XXX/XXXX-XX'
    )

    endereco = models.CharField(
        max_length=ValidationConfig.MAX_ENDERECO_LENGTH,
        verbose_name='Endereço'
    )

    valor_pago = models.DecimalField(
        max_digits=FormatConfig.MAX_DIGITS,
        decimal_places=FormatConfig.DECIMAL_PLACES,
        validators=[
            MinValueValidator(Decimal('0.01'), message=ErrorMessages.VALOR_ZERO),
            MaxValueValidator(Decimal(ValidationConfig.MAX_VALOR_PAGO), message=ErrorMessages.VALOR_MUITO_ALTO),
        ],
        verbose_name='Valor Pago'
    )

    recorrencia = models.CharField(
        max_length=20,
        choices=Recorrencia.CHOICES_CLIENTE,
        default=Recorrencia.MENSAL,
        verbose_name='Recorrência'
    )

    responsavel = models.CharField(
        max_length=ValidationConfig.MAX_RESPONSAVEL_LENGTH,
        verbose_name='Responsável'
    )

    contato_interno = models.CharField(
        max_length=ValidationConfig.MAX_CONTATO_LENGTH,
        verbose_name='Contato Interno'
    )

    # Campos de auditoria
    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'Cliente'
        verbose_name_plural = 'Clientes'
        ordering = ['razao_social']

    def __str__(self):
        return f"{self.razao_social} - {self.cnpj}"

    def clean(self):
        """
        Validações customizadas do modelo.
        """
        super().clean()

        self.razao_social = (self.razao_social or '').strip()
        self.endereco = (self.endereco or '').strip()
        self.responsavel = (self.responsavel or '').strip()
        self.contato_interno = (self.contato_interno or '').strip()

        erros = {}
        limites = [
            ('razao_social', ValidationConfig.MIN_RAZAO_SOCIAL_LENGTH, ValidationConfig.MAX_RAZAO_SOCIAL_LENGTH, 'Razão Social'),
            ('endereco', ValidationConfig.MIN_ENDERECO_LENGTH, ValidationConfig.MAX_ENDERECO_LENGTH, 'Endereço'),
            ('responsavel', ValidationConfig.MIN_RESPONSAVEL_LENGTH, ValidationConfig.MAX_RESPONSAVEL_LENGTH, 'Nome do responsável'),
            ('contato_interno', ValidationConfig.MIN_CONTATO_LENGTH, ValidationConfig.MAX_CONTATO_LENGTH, 'Contato'),
        ]
        for campo, minimo, maximo, rotulo in limites:
            mensagem = validar_tamanho(getattr(self, campo), minimo, maximo, rotulo)
            if mensagem:
                erros[campo] = mensagem

        if erros:
            raise ValidationError(erros)

        if self.cnpj:
            self.cnpj = formatar_cnpj(self.cnpj)

    def save(self, *args, **kwargs):
        """
        Sobrescreve o método save para garantir o CNPJ formatado.
        """
        if self.cnpj:
            self.cnpj = formatar_cnpj(self.cnpj)
        super().save(*args, **kwargs)

    @property
    def cnpj_numeros(self):
        """CNPJ apenas com dígitos."""
        return limpar_cnpj(self.cnpj)


class Contrato(models.Model):
    """
    Contrato firmado com um cliente.

    O campo ``conteudo`` guarda o texto já preenchido a partir do template no
    momento em que o contrato foi salvo.
    """
    cliente = models.ForeignKey(
        Cliente,
        on_delete=models.PROTECT,
        related_name='contratos',
        verbose_name='Cliente'
    )

    titulo = models.CharField(
        max_length=ValidationConfig.MAX_TITULO_LENGTH,
        verbose_name='Título'
    )

    valor_contrato = models.DecimalField(
        max_digits=FormatConfig.MAX_DIGITS,
        decimal_places=FormatConfig.DECIMAL_PLACES,
        validators=[
            MinValueValidator(Decimal('0.01'), message=ErrorMessages.VALOR_ZERO),
            MaxValueValidator(Decimal(ValidationConfig.MAX_VALOR_CONTRATO), message=ErrorMessages.VALOR_MUITO_ALTO),
        ],
        verbose_name='Valor do Contrato'
    )

    recorrencia = models.CharField(
        max_length=20,
        choices=Recorrencia.CHOICES,
        default=Recorrencia.MENSAL,
        verbose_name='Recorrência'
    )

    data_inicio = models.DateField(verbose_name='Data de Início')

    data_fim = models.DateField(
        null=True,
        blank=True,
        verbose_name='Data de Término'
    )

    status = models.CharField(
        max_length=20,
        choices=StatusContrato.CHOICES,
        default=StatusContrato.PENDENTE,
        verbose_name='Status'
    )

    conteudo = models.TextField(verbose_name='Conteúdo')

    # Dados extras usados só no preenchimento do template
    servico = models.CharField(
        max_length=300,
        blank=True,
        verbose_name='Descrição do Serviço'
    )

    dia_vencimento = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[
            MinValueValidator(1, message=ErrorMessages.DIA_VENCIMENTO_INVALIDO),
            MaxValueValidator(31, message=ErrorMessages.DIA_VENCIMENTO_INVALIDO),
        ],
        verbose_name='Dia de Vencimento'
    )

    cidade = models.CharField(
        max_length=100,
        blank=True,
        verbose_name='Cidade'
    )

    # Campos de auditoria
    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'Contrato'
        verbose_name_plural = 'Contratos'
        ordering = ['-data_inicio', '-criado_em']

    def __str__(self):
        return f"{self.titulo} - {self.cliente_nome}"

    def clean(self):
        """
        Validações customizadas do modelo.
        """
        super().clean()

        self.titulo = (self.titulo or '').strip()

        erros = {}
        mensagem = validar_tamanho(self.titulo, ValidationConfig.MIN_TITULO_LENGTH,
                                   ValidationConfig.MAX_TITULO_LENGTH, 'Título')
        if mensagem:
            erros['titulo'] = mensagem

        if len((self.conteudo or '').strip()) < ValidationConfig.MIN_CONTEUDO_LENGTH:
            erros['conteudo'] = ErrorMessages.CONTEUDO_CURTO

        if self.data_inicio and self.data_fim and self.data_fim < self.data_inicio:
            erros['data_fim'] = ErrorMessages.DATA_FIM_ANTERIOR

        if erros:
            raise ValidationError(erros)

    @property
    def cliente_nome(self):
        if self.cliente_id is None:
            return 'Cliente não encontrado'
        return self.cliente.razao_social

    @property
    def duracao_meses(self):
        """
        Duração do contrato em meses completos.
        None quando o contrato não tem data de término.
        """
        if not self.data_fim:
            return None
        delta = relativedelta(self.data_fim, self.data_inicio)
        return delta.years * 12 + delta.months

    def dados_template(self):
        """Monta os parâmetros de preenchimento do template a partir do contrato."""
        return DadosContrato(
            valor_contrato=self.valor_contrato,
            recorrencia=self.recorrencia,
            data_inicio=self.data_inicio,
            data_fim=self.data_fim,
            servico=self.servico or None,
            dia_vencimento=self.dia_vencimento,
            cidade=self.cidade or None,
        )
