"""
Configurações do projeto crm.

Valores sensíveis e dependentes de ambiente vêm do .env ou de variáveis de
ambiente via python-decouple; os padrões servem para desenvolvimento local e testes.
"""

import os
from pathlib import Path

from decouple import Csv, config

from contratos.logging_config import build_logging_config

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = config('CRM_SECRET_KEY', default='dev-only-insecure-key')

DEBUG = config('CRM_DEBUG', default=True, cast=bool)

ALLOWED_HOSTS = config('CRM_ALLOWED_HOSTS', default='localhost,127.0.0.1', cast=Csv())

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'contratos',
]

MIDDLEWARE = []

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {},
    },
]

# Banco de dados: SQLite por padrão, PostgreSQL quando CRM_DB_ENGINE=postgresql
if config('CRM_DB_ENGINE', default='sqlite') == 'postgresql':
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': config('CRM_DB_NAME', default='crm'),
            'USER': config('CRM_DB_USER', default='postgres'),
            'PASSWORD': config('CRM_DB_PASSWORD', default=''),
            'HOST': config('CRM_DB_HOST', default='localhost'),
            'PORT': config('CRM_DB_PORT', default=5432, cast=int),
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': config('CRM_DB_NAME', default=str(BASE_DIR / 'db.sqlite3')),
        }
    }

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Internacionalização
LANGUAGE_CODE = 'pt-br'
TIME_ZONE = 'America/Sao_Paulo'
USE_I18N = True
USE_TZ = True

# Logging estruturado; arquivos só quando CRM_LOG_DIR estiver definido
LOG_DIR = config('CRM_LOG_DIR', default='')
if LOG_DIR:
    os.makedirs(LOG_DIR, exist_ok=True)

LOGGING = build_logging_config(LOG_DIR or None, config('CRM_LOG_LEVEL', default='INFO'))
