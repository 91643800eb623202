"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class BankNotFoundError(DomainException):
    """No bank with the requested code exists in the catalog"""

    def __init__(self, code: str):
        super().__init__(f"Unknown bank code: {code}")
        self.code = code
