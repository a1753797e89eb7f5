import json
from datetime import datetime
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from contratos.constants import Recorrencia, TEMPLATE_PADRAO
from contratos.exceptions import ContratosBaseException
from contratos.services import ContratoService
from contratos.template_engine import DadosContrato, listar_placeholders, placeholders_nao_resolvidos
from contratos.utils import get_data_atual_brasil, parse_currency_value


def _data(valor, opcao):
    try:
        return datetime.strptime(valor, '%Y-%m-%d').date()
    except ValueError:
        raise CommandError(f'{opcao} deve estar no formato AAAA-MM-DD: {valor!r}')


class Command(BaseCommand):
    help = 'Preenche um template de contrato com os dados de um cliente'

    def add_arguments(self, parser):
        parser.add_argument('--template', help='Arquivo com o template (padrão: template interno)')
        parser.add_argument('--cliente', type=int, help='ID do cliente')
        parser.add_argument('--valor', default='0', help='Valor do contrato (ex: 1.234,56)')
        parser.add_argument('--recorrencia', default=Recorrencia.MENSAL,
                            choices=Recorrencia.get_all_types())
        parser.add_argument('--inicio', help='Data de início AAAA-MM-DD (padrão: hoje)')
        parser.add_argument('--fim', help='Data de término AAAA-MM-DD')
        parser.add_argument('--servico', help='Descrição do serviço')
        parser.add_argument('--dia-vencimento', type=int, dest='dia_vencimento')
        parser.add_argument('--cidade')
        parser.add_argument('--saida', help='Arquivo de saída (padrão: stdout)')
        parser.add_argument('--listar-placeholders', action='store_true', dest='listar_placeholders',
                            help='Lista as lacunas suportadas e sai')

    def handle(self, *args, **options):
        if options['listar_placeholders']:
            for item in listar_placeholders():
                self.stdout.write(f"{item['key']:<20} {item['description']}")
            return

        if options['template']:
            caminho = Path(options['template'])
            if not caminho.is_file():
                raise CommandError(f'Template não encontrado: {caminho}')
            template = caminho.read_text(encoding='utf-8')
        else:
            template = TEMPLATE_PADRAO

        try:
            valor = parse_currency_value(options['valor'])
        except ValueError as e:
            raise CommandError(str(e))

        inicio = _data(options['inicio'], '--inicio') if options['inicio'] else get_data_atual_brasil()
        fim = _data(options['fim'], '--fim') if options['fim'] else None

        dados = DadosContrato(
            valor_contrato=valor,
            recorrencia=options['recorrencia'],
            data_inicio=inicio,
            data_fim=fim,
            servico=options['servico'],
            dia_vencimento=options['dia_vencimento'],
            cidade=options['cidade'],
        )

        try:
            texto = ContratoService.gerar_previa(template, options['cliente'], dados)
        except ContratosBaseException as e:
            if options['verbosity'] > 1:
                self.stderr.write(json.dumps(e.to_dict(), ensure_ascii=False, default=str))
            raise CommandError(e.message)

        if options['saida']:
            Path(options['saida']).write_text(texto, encoding='utf-8')
            self.stdout.write(self.style.SUCCESS(f"✓ Contrato gravado em {options['saida']}"))
        else:
            self.stdout.write(texto)

        pendentes = placeholders_nao_resolvidos(texto)
        if pendentes:
            self.stderr.write(
                self.style.WARNING(f"⚠ Campos a completar manualmente: {', '.join(pendentes)}")
            )
