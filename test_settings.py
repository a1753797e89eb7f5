#!/usr/bin/env python
import importlib
import os
from unittest import mock

from django.test import SimpleTestCase

import crm.settings


class ConfiguracaoTest(SimpleTestCase):

    def recarregar(self, **ambiente):
        with mock.patch.dict(os.environ, ambiente):
            modulo = importlib.reload(crm.settings)
        self.addCleanup(importlib.reload, crm.settings)
        return modulo

    def test_padroes_de_desenvolvimento(self):
        self.assertIsInstance(crm.settings.DEBUG, bool)
        self.assertIsInstance(crm.settings.ALLOWED_HOSTS, list)

    def test_valores_convertidos_do_ambiente(self):
        modulo = self.recarregar(
            CRM_DEBUG='False',
            CRM_ALLOWED_HOSTS='crm.exemplo.com.br, localhost',
            CRM_LOG_LEVEL='WARNING',
        )
        self.assertIs(modulo.DEBUG, False)
        self.assertEqual(modulo.ALLOWED_HOSTS, ['crm.exemplo.com.br', 'localhost'])
        self.assertEqual(modulo.LOGGING['loggers']['contratos']['level'], 'WARNING')

    def test_postgresql(self):
        modulo = self.recarregar(CRM_DB_ENGINE='postgresql', CRM_DB_NAME='crm_prod', CRM_DB_PORT='6432')
        banco = modulo.DATABASES['default']
        self.assertEqual(banco['ENGINE'], 'django.db.backends.postgresql')
        self.assertEqual(banco['NAME'], 'crm_prod')
        self.assertEqual(banco['PORT'], 6432)
