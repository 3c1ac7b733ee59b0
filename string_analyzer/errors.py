from fastapi import status


class StringAnalyzerError(Exception):
    """Base class for errors surfaced to API clients"""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingFieldError(StringAnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidTypeError(StringAnalyzerError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class ConflictError(StringAnalyzerError):
    status_code = status.HTTP_409_CONFLICT


class NotFoundError(StringAnalyzerError):
    status_code = status.HTTP_404_NOT_FOUND


class InvalidParameterError(StringAnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST


class UnparseableQueryError(StringAnalyzerError):
    """Raised when no natural language rule matches a query"""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, query: str, message: str = "Unable to parse natural language query"):
        self.query = query
        super().__init__(message)
