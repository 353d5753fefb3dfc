# jexpense/core/errors.py


class JExpenseError(Exception):
    """Base de los errores de dominio; ``status_code`` es el HTTP equivalente."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RemoteCallError(JExpenseError):
    """Falló un procedimiento remoto o una consulta a una tabla."""

    status_code = 500

    def __init__(self, source: str, message: str):
        super().__init__(f"{source}: {message}")
        self.source = source


class ValidationError(JExpenseError):
    status_code = 400


class NotFoundError(JExpenseError):
    status_code = 404
