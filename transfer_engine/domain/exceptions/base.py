"""Base domain exception classes."""


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Subclasses declare their machine-readable ``code`` as a class attribute;
    an explicit ``code`` argument overrides it.
    """

    code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"
