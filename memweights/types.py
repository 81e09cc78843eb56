"""memweights共通型定義"""

from enum import Enum
from typing import Callable, TypeAlias, Union

import numpy as np
from numpy.typing import NDArray

from memweights.errors import InvalidMethodError

# Type aliases
FloatMatrix: TypeAlias = NDArray[np.float64]
BoolMatrix: TypeAlias = NDArray[np.bool_]
EdgeDistances: TypeAlias = NDArray[np.float64]
MstStrategy: TypeAlias = Callable[[FloatMatrix], EdgeDistances]


class WeightMethod(Enum):
    """Edge weighting function applied to the distance matrix.

    DBMEM: 1 - (d / 4t)^2 (distance-based MEM).
    LINEAR: 1 - d / max(d).
    CONCAVE_DOWN: 1 - (d / max(d))^alpha.
    CONCAVE_UP: 1 / d^beta.
    CONNECTIVITY: binary connectivity only.
    """

    DBMEM = "dbmem"
    LINEAR = "linear"
    CONCAVE_DOWN = "concave-down"
    CONCAVE_UP = "concave-up"
    CONNECTIVITY = "connectivity"

    @classmethod
    def parse(cls, value: Union["WeightMethod", str]) -> "WeightMethod":
        if isinstance(value, cls):
            return value
        valid = [m.value for m in cls]
        if not isinstance(value, str):
            raise InvalidMethodError(value, valid)
        key = value.strip().lower().replace("_", "-")
        for member in cls:
            if member.value == key:
                return member
        raise InvalidMethodError(value, valid)
