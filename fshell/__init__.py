"""fshell package: an interactive filesystem shell built on ports and adapters.

Submodules are imported directly; keep __all__ empty.
"""

__all__: list[str] = []

__version__ = "0.1.0"
