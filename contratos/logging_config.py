import logging
import os
from datetime import datetime, timezone
import json


class StructuredFormatter(logging.Formatter):
    """
    Formatter personalizado para logs estruturados em JSON.
    """

    CAMPOS_EXTRAS = (
        'operation', 'entity_type', 'entity_id', 'duration_ms',
        'error_code', 'cliente_id', 'contrato_id', 'template_length',
    )

    def format(self, record):
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        # Adicionar informações extras se disponíveis
        for campo in self.CAMPOS_EXTRAS:
            if hasattr(record, campo):
                log_entry[campo] = getattr(record, campo)

        # Adicionar informações de exceção se presente
        if record.exc_info:
            log_entry['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': self.formatException(record.exc_info)
            }

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class ContratosLoggerAdapter(logging.LoggerAdapter):
    """
    Adapter para adicionar contexto específico de contratos aos logs.
    """

    def __init__(self, logger, extra=None):
        super().__init__(logger, extra or {})

    def process(self, msg, kwargs):
        if 'extra' not in kwargs:
            kwargs['extra'] = {}

        kwargs['extra'].update(self.extra)
        return msg, kwargs

    def log_operation(self, level, operation, entity_type=None, entity_id=None,
                      message=None, duration_ms=None, **kwargs):
        """
        Log estruturado para operações do sistema.

        Args:
            level: Nível do log (INFO, ERROR, etc.)
            operation: Nome da operação (CREATE_CONTRATO, FILL_TEMPLATE, etc.)
            entity_type: Tipo da entidade (Contrato, Cliente, etc.)
            entity_id: ID da entidade
            message: Mensagem adicional
            duration_ms: Duração da operação em milissegundos
        """
        extra = {
            'operation': operation,
            'entity_type': entity_type,
            'entity_id': entity_id,
            'duration_ms': duration_ms,
        }
        extra.update(kwargs)

        # Filtrar valores None
        extra = {k: v for k, v in extra.items() if v is not None}

        self.log(level, message or f"Operação {operation} executada", extra=extra)

    def log_error(self, operation, error, entity_type=None, entity_id=None,
                  error_code=None, **kwargs):
        """
        Log estruturado para erros.
        """
        extra = {
            'operation': operation,
            'entity_type': entity_type,
            'entity_id': entity_id,
            'error_code': error_code,
        }
        extra.update(kwargs)
        extra = {k: v for k, v in extra.items() if v is not None}

        self.error(f"Erro na operação {operation}: {str(error)}", extra=extra, exc_info=True)

    def log_performance(self, operation, duration_ms, entity_type=None,
                        entity_id=None, **kwargs):
        """
        Log estruturado para métricas de performance.
        """
        level = logging.WARNING if duration_ms and duration_ms > 1000 else logging.INFO

        self.log_operation(
            level=level,
            operation=operation,
            entity_type=entity_type,
            entity_id=entity_id,
            duration_ms=duration_ms,
            message=f"Operação {operation} executada em {duration_ms}ms",
            **kwargs
        )


def build_logging_config(log_dir=None, level='INFO'):
    """
    Monta o dicionário de configuração de logging.

    Sem ``log_dir`` apenas o console é usado; com ele, os logs estruturados
    e de erro vão para arquivos rotativos dentro do diretório.
    """
    handlers = {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
            'level': level,
        },
    }
    app_handlers = ['console']

    if log_dir:
        handlers['file_structured'] = {
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': os.path.join(log_dir, 'contratos_structured.log'),
            'maxBytes': 10 * 1024 * 1024,  # 10MB
            'backupCount': 5,
            'formatter': 'structured',
            'level': level,
        }
        handlers['file_errors'] = {
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': os.path.join(log_dir, 'contratos_errors.log'),
            'maxBytes': 10 * 1024 * 1024,  # 10MB
            'backupCount': 5,
            'formatter': 'structured',
            'level': 'ERROR',
        }
        app_handlers += ['file_structured', 'file_errors']

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'structured': {
                '()': 'contratos.logging_config.StructuredFormatter',
            },
            'simple': {
                'format': '{asctime} {levelname} {name} {message}',
                'style': '{',
            },
        },
        'handlers': handlers,
        'loggers': {
            'contratos': {
                'handlers': app_handlers,
                'level': level,
                'propagate': False,
            },
        },
    }


def get_logger(name):
    """
    Retorna um logger estruturado para o módulo especificado.

    Args:
        name: Nome do módulo/logger

    Returns:
        ContratosLoggerAdapter: Logger com funcionalidades estruturadas
    """
    logger = logging.getLogger(name)
    return ContratosLoggerAdapter(logger)