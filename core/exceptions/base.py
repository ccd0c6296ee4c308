from typing import Optional


class AbstractException(Exception):
    """
    Base class for every error that is turned into a JSON response.

    :param message: Human readable detail, sent as ``mensaje``.
    :param error_code: Stable machine readable code, sent as ``codigo``.
    :param title: Short classification, sent as ``error``.
    :param status_code: HTTP status used for the response.
    """

    status_code: int = 400
    error_code: str = "BAD_REQUEST"
    title: str = "Solicitud inválida"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        title: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        if error_code is not None:
            self.error_code = error_code
        if title is not None:
            self.title = title
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {
            "error": self.title,
            "mensaje": self.message,
            "codigo": self.error_code,
        }
