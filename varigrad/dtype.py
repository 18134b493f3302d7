# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Varigrad — Reverse-Mode Autodiff Core                               ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Element types accepted for :class:`~varigrad.variable.Variable` data."""
from __future__ import annotations

import enum
import numpy as np


class dtype(enum.Enum):
    """Numeric element types a Variable may carry."""
    float16 = "float16"
    float32 = "float32"
    float64 = "float64"
    int32 = "int32"
    int64 = "int64"

    def to_numpy(self) -> np.dtype:
        return np.dtype(self.value)

    @property
    def is_floating_point(self) -> bool:
        return self.name.startswith('float')

    @staticmethod
    def from_numpy(np_dtype: np.dtype) -> 'dtype':
        """Map a NumPy dtype onto a varigrad dtype.

        Raises :class:`TypeError` for non-numeric dtypes (object, str,
        bool, complex) since those cannot carry gradients.
        """
        try:
            return dtype(np.dtype(np_dtype).name)
        except ValueError:
            raise TypeError(
                f"unsupported element type {np.dtype(np_dtype)!s}") from None

    def __repr__(self) -> str:
        return f"varigrad.{self.name}"


float16 = dtype.float16
float32 = dtype.float32
float64 = dtype.float64
int32 = dtype.int32
int64 = dtype.int64
half = float16
double = float64
long = int64
