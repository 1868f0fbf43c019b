from http import HTTPStatus


class ExtractionServiceError(Exception):
    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ValidationError(ExtractionServiceError):
    def __init__(self, message: str = "url required") -> None:
        super().__init__(message, HTTPStatus.BAD_REQUEST)


class FetchError(ExtractionServiceError):
    def __init__(self, message: str = "failed to fetch pdf") -> None:
        super().__init__(message, HTTPStatus.BAD_REQUEST)


class ParseError(ExtractionServiceError):
    def __init__(self, detail: str) -> None:
        super().__init__(
            f"failed to parse pdf: {detail}",
            HTTPStatus.INTERNAL_SERVER_ERROR,
        )


class InternalError(ExtractionServiceError):
    def __init__(self, message: str) -> None:
        super().__init__(message, HTTPStatus.INTERNAL_SERVER_ERROR)
