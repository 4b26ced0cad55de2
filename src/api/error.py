from fastapi import status
from src.core.result import Error, ErrorKind

# Single mapping from error kind to HTTP status
_KIND_STATUS = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.AUTH: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.DEPENDENCY: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Codes whose transport status differs from their kind's default
_CODE_STATUS = {
    "CURRENT_PASSWORD_INCORRECT": status.HTTP_400_BAD_REQUEST,
}


def status_code_for(error: Error) -> int:
    if error.code in _CODE_STATUS:
        return _CODE_STATUS[error.code]
    return _KIND_STATUS.get(error.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error):
    """Raise the ClientError or ServerError matching the error's status code"""
    status_code = status_code_for(error)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
