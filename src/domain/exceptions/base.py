"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Subclasses set ``status_code`` to the HTTP status the API layer
    should answer with.
    """

    status_code: int = 400

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)
