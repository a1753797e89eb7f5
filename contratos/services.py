"""Serviços de negócio para a aplicação contratos.

Este módulo contém as classes de serviço que centralizam a lógica de negócio,
separando-a dos models para melhor organização e testabilidade.
"""

from django.core.exceptions import ValidationError
from django.db import transaction
import logging
import time

from .models import Cliente, Contrato
from .constants import ErrorMessages, StatusContrato, SuccessMessages
from .exceptions import ContratoServiceError
from .logging_config import get_logger
from .template_engine import preencher_template

logger = get_logger('contratos.services')


class ContratoService:
    """Serviço para operações relacionadas a contratos."""

    @staticmethod
    def _obter_cliente(cliente_id, operation):
        try:
            return Cliente.objects.get(id=cliente_id)
        except Cliente.DoesNotExist:
            logger.log_error(
                operation=operation,
                error=f"Cliente com ID {cliente_id} não encontrado",
                entity_type='Cliente',
                entity_id=cliente_id,
                error_code='CLIENTE_NOT_FOUND'
            )
            raise ContratoServiceError(ErrorMessages.CLIENTE_INEXISTENTE, code='CLIENTE_NOT_FOUND',
                                       details={'cliente_id': cliente_id})

    @staticmethod
    def _obter_contrato(contrato_id, operation):
        try:
            return Contrato.objects.select_related('cliente').get(id=contrato_id)
        except Contrato.DoesNotExist:
            logger.log_error(
                operation=operation,
                error=f"Contrato com ID {contrato_id} não encontrado",
                entity_type='Contrato',
                entity_id=contrato_id,
                error_code='CONTRATO_NOT_FOUND'
            )
            raise ContratoServiceError(ErrorMessages.CONTRATO_INEXISTENTE, code='CONTRATO_NOT_FOUND',
                                       details={'contrato_id': contrato_id})

    @staticmethod
    def gerar_previa(template, cliente_id, dados, hoje=None):
        """
        Gera a prévia do contrato preenchido, sem salvar nada.

        Args:
            template (str): Texto do contrato com lacunas
            cliente_id (int, optional): ID do cliente; sem cliente, as lacunas
                do cliente aparecem como rótulos entre colchetes
            dados (DadosContrato): Parâmetros do contrato
            hoje (date, optional): Data de emissão

        Returns:
            str: Texto preenchido

        Raises:
            ContratoServiceError: Se o cliente informado não existir
        """
        cliente = None
        if cliente_id is not None:
            cliente = ContratoService._obter_cliente(cliente_id, 'PREVIEW_CONTRATO')
        return preencher_template(template, cliente, dados, hoje=hoje)

    @staticmethod
    def criar_contrato(cliente_id, titulo, template, dados, status=StatusContrato.PENDENTE, hoje=None):
        """
        Cria um contrato preenchendo o template com os dados informados.

        Args:
            cliente_id (int): ID do cliente
            titulo (str): Título do contrato
            template (str): Texto do contrato com lacunas
            dados (DadosContrato): Parâmetros do contrato
            status (str): Status inicial
            hoje (date, optional): Data de emissão

        Returns:
            Contrato: O contrato criado

        Raises:
            ContratoServiceError: Se o cliente não existir ou os dados forem inválidos
        """
        start_time = time.time()
        cliente = ContratoService._obter_cliente(cliente_id, 'CREATE_CONTRATO')

        contrato = Contrato(
            cliente=cliente,
            titulo=titulo,
            status=status,
            conteudo=preencher_template(template, cliente, dados, hoje=hoje),
            valor_contrato=dados.valor_contrato,
            recorrencia=dados.recorrencia,
            data_inicio=dados.data_inicio,
            data_fim=dados.data_fim,
            servico=dados.servico or '',
            dia_vencimento=dados.dia_vencimento,
            cidade=dados.cidade or '',
        )

        try:
            with transaction.atomic():
                contrato.full_clean()
                contrato.save()
        except ValidationError as e:
            logger.log_error(
                operation='CREATE_CONTRATO',
                error=e,
                entity_type='Contrato',
                error_code='VALIDATION_ERROR',
                cliente_id=cliente_id
            )
            raise ContratoServiceError(f"Dados do contrato inválidos: {e}", code='VALIDATION_ERROR',
                                       details=e.message_dict)

        duration_ms = int((time.time() - start_time) * 1000)
        logger.log_operation(
            level=logging.INFO,
            operation='CREATE_CONTRATO',
            entity_type='Contrato',
            entity_id=contrato.id,
            message=SuccessMessages.CONTRATO_CRIADO,
            duration_ms=duration_ms,
            cliente_id=cliente.id,
            contrato_id=contrato.id
        )
        return contrato

    @staticmethod
    def atualizar_contrato(contrato_id, template=None, hoje=None, **campos):
        """
        Atualiza um contrato existente.

        Quando ``template`` é informado, o conteúdo é preenchido novamente com
        os dados já atualizados; caso contrário o texto salvo é mantido.

        Args:
            contrato_id (int): ID do contrato
            template (str, optional): Novo texto com lacunas
            hoje (date, optional): Data de emissão
            **campos: Campos do contrato a alterar (titulo, status, cliente_id, ...)

        Returns:
            Contrato: O contrato atualizado

        Raises:
            ContratoServiceError: Se o contrato/cliente não existir ou os dados forem inválidos
        """
        start_time = time.time()
        contrato = ContratoService._obter_contrato(contrato_id, 'UPDATE_CONTRATO')

        cliente_id = campos.pop('cliente_id', None)
        if cliente_id is not None:
            contrato.cliente = ContratoService._obter_cliente(cliente_id, 'UPDATE_CONTRATO')

        for campo, valor in campos.items():
            if campo in ('servico', 'cidade') and valor is None:
                valor = ''
            setattr(contrato, campo, valor)

        if template is not None:
            contrato.conteudo = preencher_template(template, contrato.cliente,
                                                   contrato.dados_template(), hoje=hoje)

        try:
            with transaction.atomic():
                contrato.full_clean()
                contrato.save()
        except ValidationError as e:
            logger.log_error(
                operation='UPDATE_CONTRATO',
                error=e,
                entity_type='Contrato',
                entity_id=contrato_id,
                error_code='VALIDATION_ERROR'
            )
            raise ContratoServiceError(f"Dados do contrato inválidos: {e}", code='VALIDATION_ERROR',
                                       details=e.message_dict)

        logger.log_performance(
            operation='UPDATE_CONTRATO',
            duration_ms=int((time.time() - start_time) * 1000),
            entity_type='Contrato',
            entity_id=contrato.id,
            campos=sorted(campos) + (['conteudo'] if template is not None else [])
        )
        return contrato

    @staticmethod
    def listar_por_cliente(cliente_id):
        """Contratos de um cliente, do mais recente para o mais antigo."""
        return Contrato.objects.filter(cliente_id=cliente_id).order_by('-data_inicio', '-criado_em')

    @staticmethod
    def remover_contrato(contrato_id):
        """
        Remove um contrato.

        Raises:
            ContratoServiceError: Se o contrato não existir
        """
        contrato = ContratoService._obter_contrato(contrato_id, 'DELETE_CONTRATO')
        contrato.delete()

        logger.log_operation(
            level=logging.INFO,
            operation='DELETE_CONTRATO',
            entity_type='Contrato',
            entity_id=contrato_id,
            message=SuccessMessages.CONTRATO_EXCLUIDO
        )
