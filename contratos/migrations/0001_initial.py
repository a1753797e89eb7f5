from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models

import contratos.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Cliente',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('razao_social', models.CharField(max_length=200, verbose_name='Razão Social')),
                ('cnpj', models.CharField(help_text='Apenas números ou formato XX.XXX.XXX/XXXX-XX', max_length=18, unique=True, validators=[contratos.validators.django_validar_cnpj], verbose_name='CNPJ')),
                ('endereco', models.CharField(max_length=300, verbose_name='Endereço')),
                ('valor_pago', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.01'), message='O valor deve ser maior que zero.'), django.core.validators.MaxValueValidator(Decimal('10000000'), message='Valor muito alto.')], verbose_name='Valor Pago')),
                ('recorrencia', models.CharField(choices=[('mensal', 'Mensal'), ('trimestral', 'Trimestral'), ('semestral', 'Semestral'), ('anual', 'Anual')], default='mensal', max_length=20, verbose_name='Recorrência')),
                ('responsavel', models.CharField(max_length=100, verbose_name='Responsável')),
                ('contato_interno', models.CharField(max_length=50, verbose_name='Contato Interno')),
                ('criado_em', models.DateTimeField(auto_now_add=True)),
                ('atualizado_em', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Cliente',
                'verbose_name_plural': 'Clientes',
                'ordering': ['razao_social'],
            },
        ),
        migrations.CreateModel(
            name='Contrato',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('titulo', models.CharField(max_length=200, verbose_name='Título')),
                ('valor_contrato', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.01'), message='O valor deve ser maior que zero.'), django.core.validators.MaxValueValidator(Decimal('100000000'), message='Valor muito alto.')], verbose_name='Valor do Contrato')),
                ('recorrencia', models.CharField(choices=[('unico', 'Pagamento Único'), ('mensal', 'Mensal'), ('trimestral', 'Trimestral'), ('semestral', 'Semestral'), ('anual', 'Anual')], default='mensal', max_length=20, verbose_name='Recorrência')),
                ('data_inicio', models.DateField(verbose_name='Data de Início')),
                ('data_fim', models.DateField(blank=True, null=True, verbose_name='Data de Término')),
                ('status', models.CharField(choices=[('ativo', 'Ativo'), ('pendente', 'Pendente'), ('encerrado', 'Encerrado'), ('cancelado', 'Cancelado')], default='pendente', max_length=20, verbose_name='Status')),
                ('conteudo', models.TextField(verbose_name='Conteúdo')),
                ('servico', models.CharField(blank=True, max_length=300, verbose_name='Descrição do Serviço')),
                ('dia_vencimento', models.PositiveSmallIntegerField(blank=True, null=True, validators=[django.core.validators.MinValueValidator(1, message='O dia de vencimento deve estar entre 1 e 31.'), django.core.validators.MaxValueValidator(31, message='O dia de vencimento deve estar entre 1 e 31.')], verbose_name='Dia de Vencimento')),
                ('cidade', models.CharField(blank=True, max_length=100, verbose_name='Cidade')),
                ('criado_em', models.DateTimeField(auto_now_add=True)),
                ('atualizado_em', models.DateTimeField(auto_now=True)),
                ('cliente', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='contratos', to='contratos.cliente', verbose_name='Cliente')),
            ],
            options={
                'verbose_name': 'Contrato',
                'verbose_name_plural': 'Contratos',
                'ordering': ['-data_inicio', '-criado_em'],
            },
        ),
    ]
