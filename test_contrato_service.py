#!/usr/bin/env python
from datetime import date
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db.models import ProtectedError
from django.test import TestCase

from contratos.constants import StatusContrato, TEMPLATE_PADRAO
from contratos.exceptions import ContratoServiceError
from contratos.models import Cliente, Contrato
from contratos.services import ContratoService
from contratos.template_engine import DadosContrato

HOJE = date(2025, 3, 5)


def criar_cliente(**kwargs):
    valores = dict(
        razao_social='Agência Exemplo Ltda',
        cnpj='11222333000181',
        endereco='Rua das Flores, 100 - Recife/PE',
        valor_pago=Decimal('1500.00'),
        recorrencia='mensal',
        responsavel='Maria Souza',
        contato_interno='(81) 99999-0000',
    )
    valores.update(kwargs)
    cliente = Cliente(**valores)
    cliente.full_clean()
    cliente.save()
    return cliente


def dados(**kwargs):
    valores = dict(
        valor_contrato=Decimal('1500.75'),
        recorrencia='trimestral',
        data_inicio=date(2025, 3, 5),
        data_fim=None,
        servico='consultoria em marketing',
        dia_vencimento=None,
        cidade='Recife',
    )
    valores.update(kwargs)
    return DadosContrato(**valores)


class ClienteModelTest(TestCase):

    def test_cnpj_armazenado_formatado(self):
        cliente = criar_cliente()
        self.assertEqual(cliente.cnpj, '11.222.333/0001-81')
        self.assertEqual(cliente.cnpj_numeros, '11222333000181')

    def test_cnpj_invalido(self):
        with self.assertRaises(ValidationError) as ctx:
            criar_cliente(cnpj='11.222.333/0001-82')
        self.assertIn('cnpj', ctx.exception.message_dict)

    def test_cnpj_duplicado_em_formato_diferente(self):
        criar_cliente()
        with self.assertRaises(ValidationError) as ctx:
            criar_cliente(cnpj='11.222.333/0001-81')
        self.assertIn('cnpj', ctx.exception.message_dict)

    def test_tamanhos_minimos(self):
        with self.assertRaises(ValidationError) as ctx:
            criar_cliente(razao_social='  AB  ', endereco='curto', contato_interno='123')
        erros = ctx.exception.message_dict
        self.assertEqual(set(erros), {'razao_social', 'endereco', 'contato_interno'})

    def test_valor_pago_deve_ser_positivo(self):
        with self.assertRaises(ValidationError) as ctx:
            criar_cliente(valor_pago=Decimal('0'))
        self.assertIn('valor_pago', ctx.exception.message_dict)

    def test_cliente_nao_aceita_pagamento_unico(self):
        with self.assertRaises(ValidationError) as ctx:
            criar_cliente(recorrencia='unico')
        self.assertIn('recorrencia', ctx.exception.message_dict)


class ContratoServiceTest(TestCase):

    def setUp(self):
        self.cliente = criar_cliente()

    def test_gerar_previa_com_cliente(self):
        texto = ContratoService.gerar_previa('{{RAZAO_SOCIAL}} / {{CNPJ}} / {{VALOR}}',
                                             self.cliente.id, dados(), hoje=HOJE)
        self.assertEqual(texto, 'Agência Exemplo Ltda / 11.222.333/0001-81 / R$ 1.500,75')

    def test_gerar_previa_sem_cliente(self):
        texto = ContratoService.gerar_previa('{{RAZAO_SOCIAL}}', None, dados(), hoje=HOJE)
        self.assertEqual(texto, '[RAZÃO SOCIAL]')

    def test_gerar_previa_cliente_inexistente(self):
        with self.assertRaises(ContratoServiceError) as ctx:
            ContratoService.gerar_previa('{{RAZAO_SOCIAL}}', 9999, dados(), hoje=HOJE)
        self.assertEqual(ctx.exception.code, 'CLIENTE_NOT_FOUND')

    def test_criar_contrato_salva_texto_preenchido(self):
        with self.assertLogs('contratos.services', level='INFO') as logs:
            contrato = ContratoService.criar_contrato(
                self.cliente.id, 'Contrato de consultoria', TEMPLATE_PADRAO, dados(), hoje=HOJE,
            )

        contrato.refresh_from_db()
        self.assertEqual(contrato.status, StatusContrato.PENDENTE)
        self.assertEqual(contrato.valor_contrato, Decimal('1500.75'))
        self.assertEqual(contrato.cidade, 'Recife')
        self.assertNotIn('{{', contrato.conteudo)
        self.assertIn('R$ 1.500,75 (mil e quinhentos reais e setenta e cinco centavos)', contrato.conteudo)
        self.assertIn('com recorrência trimestral', contrato.conteudo)
        self.assertIn('até o dia 10 de cada período', contrato.conteudo)
        self.assertIn('término previsto para [DATA DE TÉRMINO]', contrato.conteudo)
        self.assertEqual(logs.records[-1].operation, 'CREATE_CONTRATO')

    def test_criar_contrato_conteudo_curto(self):
        with self.assertRaises(ContratoServiceError) as ctx:
            ContratoService.criar_contrato(self.cliente.id, 'Contrato', '{{CIDADE}}', dados(), hoje=HOJE)
        self.assertEqual(ctx.exception.code, 'VALIDATION_ERROR')
        self.assertIn('conteudo', ctx.exception.details)
        self.assertFalse(Contrato.objects.exists())

    def test_criar_contrato_data_fim_anterior(self):
        with self.assertRaises(ContratoServiceError) as ctx:
            ContratoService.criar_contrato(self.cliente.id, 'Contrato anual', TEMPLATE_PADRAO,
                                           dados(data_fim=date(2025, 1, 1)), hoje=HOJE)
        self.assertIn('data_fim', ctx.exception.details)

    def test_criar_contrato_cliente_inexistente(self):
        with self.assertRaises(ContratoServiceError):
            ContratoService.criar_contrato(9999, 'Contrato', TEMPLATE_PADRAO, dados(), hoje=HOJE)

    def test_atualizar_contrato_repreenche_template(self):
        contrato = ContratoService.criar_contrato(self.cliente.id, 'Contrato de consultoria',
                                                  TEMPLATE_PADRAO, dados(), hoje=HOJE)
        atualizado = ContratoService.atualizar_contrato(
            contrato.id,
            template=TEMPLATE_PADRAO,
            hoje=HOJE,
            valor_contrato=Decimal('2000'),
            data_fim=date(2026, 3, 4),
            status=StatusContrato.ATIVO,
        )
        self.assertEqual(atualizado.status, StatusContrato.ATIVO)
        self.assertIn('R$ 2.000,00 (dois mil reais)', atualizado.conteudo)
        self.assertIn('término previsto para 04 de março de 2026', atualizado.conteudo)
        self.assertEqual(atualizado.duracao_meses, 11)

    def test_atualizar_sem_template_mantem_conteudo(self):
        contrato = ContratoService.criar_contrato(self.cliente.id, 'Contrato de consultoria',
                                                  TEMPLATE_PADRAO, dados(), hoje=HOJE)
        atualizado = ContratoService.atualizar_contrato(contrato.id, titulo='Novo título')
        self.assertEqual(atualizado.titulo, 'Novo título')
        self.assertEqual(atualizado.conteudo, contrato.conteudo)

    def test_atualizar_contrato_inexistente(self):
        with self.assertRaises(ContratoServiceError) as ctx:
            ContratoService.atualizar_contrato(9999, titulo='Outro')
        self.assertEqual(ctx.exception.code, 'CONTRATO_NOT_FOUND')

    def test_listar_e_remover(self):
        antigo = ContratoService.criar_contrato(self.cliente.id, 'Contrato 2024', TEMPLATE_PADRAO,
                                                dados(data_inicio=date(2024, 1, 1)), hoje=HOJE)
        recente = ContratoService.criar_contrato(self.cliente.id, 'Contrato 2025', TEMPLATE_PADRAO,
                                                 dados(), hoje=HOJE)
        self.assertEqual(list(ContratoService.listar_por_cliente(self.cliente.id)), [recente, antigo])

        ContratoService.remover_contrato(antigo.id)
        self.assertEqual(list(ContratoService.listar_por_cliente(self.cliente.id)), [recente])

        with self.assertRaises(ContratoServiceError):
            ContratoService.remover_contrato(antigo.id)

    def test_cliente_com_contrato_nao_pode_ser_excluido(self):
        ContratoService.criar_contrato(self.cliente.id, 'Contrato', TEMPLATE_PADRAO, dados(), hoje=HOJE)
        with self.assertRaises(ProtectedError):
            self.cliente.delete()

    def test_dados_template_do_contrato(self):
        contrato = ContratoService.criar_contrato(self.cliente.id, 'Contrato', TEMPLATE_PADRAO,
                                                  dados(servico=None, cidade=None), hoje=HOJE)
        self.assertEqual(contrato.dados_template(), dados(servico=None, cidade=None))
        self.assertEqual(contrato.cliente_nome, 'Agência Exemplo Ltda')
        self.assertIsNone(contrato.duracao_meses)
