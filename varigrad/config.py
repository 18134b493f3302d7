# ╔══════════════════════════════════════════════════════════════════════╗
# ║  Varigrad — Reverse-Mode Autodiff Core                               ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Global graph-recording mode.

Set ``VARIGRAD_NO_GRAD=1`` in the environment to start with recording
disabled (useful for pure forward evaluation in scripts).
"""
from __future__ import annotations

import contextlib
import functools
import os


class Config:
    """Process-wide switches read by :class:`~varigrad.function.Function`."""
    enable_backprop: bool = os.environ.get('VARIGRAD_NO_GRAD', '0') != '1'


def is_grad_enabled() -> bool:
    return Config.enable_backprop


def set_grad_enabled(mode: bool) -> None:
    Config.enable_backprop = bool(mode)


@contextlib.contextmanager
def using_config(name: str, value):
    """Temporarily override a :class:`Config` attribute."""
    if not hasattr(Config, name):
        raise AttributeError(f"Config has no option {name!r}")
    old = getattr(Config, name)
    setattr(Config, name, value)
    try:
        yield
    finally:
        setattr(Config, name, old)


class no_grad:
    """Context manager / decorator that disables graph recording.

    Outputs created inside are plain leaves with no creator, so calling
    ``backward()`` on them stops right there.
    """

    def __enter__(self):
        self._prev = Config.enable_backprop
        set_grad_enabled(False)
        return self

    def __exit__(self, *args):
        set_grad_enabled(self._prev)

    def __call__(self, fn):
        @functools.wraps(fn)
        def wrapper(*a, **kw):
            with self:
                return fn(*a, **kw)
        return wrapper


__all__ = [
    'Config',
    'is_grad_enabled',
    'set_grad_enabled',
    'using_config',
    'no_grad',
]
