"""Error types raised by services and turned into responses at the handler boundary."""


class AppError(Exception):
    code = 500

    def __init__(self, message, errors=None, code=None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []
        if code is not None:
            self.code = code


class ValidationError(AppError):
    code = 400


class Unauthorized(AppError):
    code = 401


class Forbidden(AppError):
    code = 403


class NotFound(AppError):
    code = 404


class InternalError(AppError):
    code = 500
