"""Exceptions raised by jcomplex."""


class ComplexDomainError(ArithmeticError):
    """Raised when a complex value cannot be narrowed to a real number."""

    def __init__(self, value, target: str = "float"):
        self.value = value
        self.target = target
        super().__init__(
            f"cannot convert {value} to {target}: imaginary part {value.im!r} is not zero"
        )
