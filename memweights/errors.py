"""Exceptions raised while building neighborhood matrices."""

from typing import Iterable


class WeightMatrixError(ValueError):
    """Base class for all weightmatrix errors."""


class InvalidInputError(WeightMatrixError):
    """Distance matrix or numeric parameter is malformed."""


class InvalidMethodError(WeightMatrixError):
    """Unknown weighting method."""

    def __init__(self, method: object, valid: Iterable[str]) -> None:
        self.method = method
        self.valid = tuple(valid)
        super().__init__(
            f"Unsupported method: '{method}'. Use one of: {', '.join(self.valid)}."
        )


class MissingParameterError(WeightMatrixError):
    """A parameter required by the chosen method was not supplied."""

    def __init__(self, parameter: str, method: str) -> None:
        self.parameter = parameter
        self.method = method
        super().__init__(f"`{parameter}` is required when method='{method}'.")
