"""Public package surface for changetree.

Exports ``main`` for programmatic CLI invocation.
Rendering lives in ``changetree.file_tree`` and ``changetree.presentation``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
