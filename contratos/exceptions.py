"""Exceções customizadas para a aplicação contratos.

Este módulo define exceções específicas do domínio da aplicação,
facilitando o tratamento de erros e a depuração.
"""

class ContratosBaseException(Exception):
    """Exceção base para todas as exceções da aplicação contratos."""

    def __init__(self, message, code=None, details=None):
        """
        Inicializa a exceção base.

        Args:
            message (str): Mensagem de erro
            code (str, optional): Código do erro para identificação
            details (dict, optional): Detalhes adicionais do erro
        """
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self):
        return f"{self.__class__.__name__}: {self.message}"

    def to_dict(self):
        """Converte a exceção para um dicionário para serialização."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'code': self.code,
            'details': self.details
        }

class ContratoServiceError(ContratosBaseException):
    """Exceção para erros relacionados ao serviço de contratos."""
    pass

class ValorInvalidoError(ContratosBaseException):
    """Exceção para valores monetários fora do domínio aceito (ex: negativos)."""
    pass
