#!/usr/bin/env python
from decimal import Decimal

from django.test import SimpleTestCase

from contratos.exceptions import ValorInvalidoError
from contratos.extenso import numero_por_extenso, valor_por_extenso


class NumeroPorExtensoTest(SimpleTestCase):

    def test_unidades_e_dezenas(self):
        casos = {
            0: 'zero',
            1: 'um',
            9: 'nove',
            10: 'dez',
            14: 'quatorze',
            19: 'dezenove',
            20: 'vinte',
            21: 'vinte e um',
            99: 'noventa e nove',
        }
        for numero, esperado in casos.items():
            with self.subTest(numero=numero):
                self.assertEqual(numero_por_extenso(numero), esperado)

    def test_centenas(self):
        casos = {
            100: 'cem',
            101: 'cento e um',
            110: 'cento e dez',
            123: 'cento e vinte e três',
            200: 'duzentos',
            305: 'trezentos e cinco',
            999: 'novecentos e noventa e nove',
        }
        for numero, esperado in casos.items():
            with self.subTest(numero=numero):
                self.assertEqual(numero_por_extenso(numero), esperado)

    def test_milhares(self):
        casos = {
            1000: 'mil',
            1001: 'mil e um',
            1100: 'mil e cem',
            1500: 'mil e quinhentos',
            1234: 'mil e duzentos e trinta e quatro',
            2000: 'dois mil',
            21000: 'vinte e um mil',
            100000: 'cem mil',
            120000: 'cento e vinte mil',
            999999: 'novecentos e noventa e nove mil e novecentos e noventa e nove',
        }
        for numero, esperado in casos.items():
            with self.subTest(numero=numero):
                self.assertEqual(numero_por_extenso(numero), esperado)

    def test_milhoes(self):
        self.assertEqual(numero_por_extenso(1000000), 'um milhão')
        self.assertEqual(numero_por_extenso(2500000), 'dois milhões e quinhentos mil')

    def test_nunca_gera_e_zero(self):
        for numero in (100, 200, 1000, 1100, 2000, 10000, 300000):
            with self.subTest(numero=numero):
                self.assertNotIn('zero', numero_por_extenso(numero))

    def test_negativo(self):
        with self.assertRaises(ValorInvalidoError):
            numero_por_extenso(-1)


class ValorPorExtensoTest(SimpleTestCase):

    def test_valores_exatos(self):
        casos = [
            (0, 'zero reais'),
            (1, 'um real'),
            (2, 'dois reais'),
            (100, 'cem reais'),
            (101, 'cento e um reais'),
            (1000, 'mil reais'),
            (2000, 'dois mil reais'),
            (1100, 'mil e cem reais'),
            (Decimal('1.01'), 'um real e um centavo'),
            (Decimal('1.25'), 'um real e vinte e cinco centavos'),
            (Decimal('1500.75'), 'mil e quinhentos reais e setenta e cinco centavos'),
        ]
        for valor, esperado in casos:
            with self.subTest(valor=valor):
                self.assertEqual(valor_por_extenso(valor), esperado)

    def test_somente_centavos(self):
        self.assertEqual(valor_por_extenso(Decimal('0.50')), 'cinquenta centavos')
        self.assertEqual(valor_por_extenso(Decimal('0.01')), 'um centavo')

    def test_float_sem_erro_de_arredondamento(self):
        self.assertEqual(valor_por_extenso(10.10), 'dez reais e dez centavos')
        self.assertEqual(valor_por_extenso(0.1), 'dez centavos')
        self.assertEqual(valor_por_extenso(1500.75), 'mil e quinhentos reais e setenta e cinco centavos')

    def test_arredondamento_dos_centavos(self):
        self.assertEqual(valor_por_extenso(Decimal('2.005')), 'dois reais e um centavo')
        self.assertEqual(valor_por_extenso(Decimal('1.999')), 'dois reais')

    def test_string_numerica(self):
        self.assertEqual(valor_por_extenso('250.00'), 'duzentos e cinquenta reais')

    def test_milhao_de_reais(self):
        self.assertEqual(valor_por_extenso(1000000), 'um milhão de reais')
        self.assertEqual(valor_por_extenso(1000100), 'um milhão e cem reais')

    def test_bilhoes(self):
        self.assertEqual(numero_por_extenso(1000000000), 'um bilhão')
        self.assertEqual(numero_por_extenso(2000000001), 'dois bilhões e um')
        self.assertEqual(numero_por_extenso(1500000000), 'um bilhão e quinhentos milhões')
        self.assertEqual(valor_por_extenso(3000000000), 'três bilhões de reais')

    def test_valores_invalidos(self):
        for valor in (-1, Decimal('-0.01'), 'abc', float('nan')):
            with self.subTest(valor=valor):
                with self.assertRaises(ValorInvalidoError):
                    valor_por_extenso(valor)
