# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Varigrad — Reverse-Mode Autodiff Core                               ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Graph node holding a value, its gradient slot and its provenance."""
from __future__ import annotations

import numpy as np
from typing import Any

from . import engine as _engine
from .dtype import dtype as Dtype
from .errors import ShapeMismatchError
from .function import Calculation


class Variable:
    """A NumPy value recorded in the computation graph.

    Leaves are created directly by the user.  Derived Variables come out
    of :class:`~varigrad.function.Function` calls and carry the
    :class:`~varigrad.function.Calculation` that produced them.

    The gradient slot is read through :attr:`grad`; it is written only by
    the backward engine, :meth:`seed_grad` and :meth:`cleargrad`.
    """

    __slots__ = ('_data', '_grad', '_creator', '_generation', 'name',
                 '__weakref__')

    # Let ``ndarray * Variable`` dispatch to ``Variable.__rmul__``
    __array_priority__ = 200

    # ------------------------------------------------------------------ #
    #  Construction                                                      #
    # ------------------------------------------------------------------ #

    def __init__(
        self,
        data: Any,
        name: str | None = None,
        dtype: Dtype | np.dtype | None = None,
    ):
        if isinstance(data, Variable):
            raise TypeError(
                "Variable data must be array-like, not another Variable")
        arr = data if isinstance(data, np.ndarray) else np.asarray(data)
        if dtype is not None:
            if isinstance(dtype, Dtype):
                arr = arr.astype(dtype.to_numpy())
            else:
                arr = arr.astype(dtype)

        self._data: np.ndarray = arr
        self._grad: np.ndarray | None = None
        self._creator: Calculation | None = None
        self._generation: int = 0
        self.name = name

    # ------------------------------------------------------------------ #
    #  Properties                                                        #
    # ------------------------------------------------------------------ #

    @property
    def data(self) -> np.ndarray:
        return self._data

    @property
    def grad(self) -> np.ndarray | None:
        return self._grad

    @property
    def creator(self) -> Calculation | None:
        return self._creator

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_leaf(self) -> bool:
        return self._creator is None

    @property
    def shape(self) -> tuple:
        return self._data.shape

    @property
    def ndim(self) -> int:
        return self._data.ndim

    @property
    def size(self) -> int:
        return self._data.size

    @property
    def dtype(self) -> Dtype:
        return Dtype.from_numpy(self._data.dtype)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        body = str(self._data).replace('\n', '\n' + ' ' * 9)
        if self.name is not None:
            return f"variable({body}, name={self.name!r})"
        return f"variable({body})"

    # ------------------------------------------------------------------ #
    #  Gradient slot                                                     #
    # ------------------------------------------------------------------ #

    def seed_grad(self, g) -> None:
        """Set the gradient directly, replacing any previous value.

        Used on the root before :meth:`backward` to differentiate with
        respect to something other than an all-ones cotangent.
        """
        g = g if isinstance(g, np.ndarray) else np.asarray(g)
        if g.shape != self._data.shape:
            raise ShapeMismatchError(
                "seed gradient does not match data", self._data.shape,
                g.shape)
        self._grad = g

    def cleargrad(self) -> None:
        self._grad = None

    def backward(self) -> None:
        """Accumulate gradients into every Variable upstream of this one.

        Gradients already present are added to, not replaced; call
        :func:`~varigrad.engine.clear_grads` first for a fresh pass.
        """
        _engine.backward(self)

    # ------------------------------------------------------------------ #
    #  Arithmetic                                                        #
    # ------------------------------------------------------------------ #

    def __add__(self, other):
        from . import ops
        return ops.add(self, other)

    def __radd__(self, other):
        from . import ops
        return ops.add(other, self)

    def __sub__(self, other):
        from . import ops
        return ops.sub(self, other)

    def __rsub__(self, other):
        from . import ops
        return ops.sub(other, self)

    def __mul__(self, other):
        from . import ops
        return ops.mul(self, other)

    def __rmul__(self, other):
        from . import ops
        return ops.mul(other, self)

    def __truediv__(self, other):
        from . import ops
        return ops.div(self, other)

    def __rtruediv__(self, other):
        from . import ops
        return ops.div(other, self)

    def __neg__(self):
        from . import ops
        return ops.neg(self)

    def __pow__(self, exponent):
        from . import ops
        if isinstance(exponent, Variable):
            return ops.power(self, exponent)
        return ops.pow(self, exponent)

    def __rpow__(self, base):
        from . import ops
        return ops.power(base, self)


__all__ = ['Variable']
