"""Top-level package for the lastmod CLI.

The scanning API lives in :mod:`lastmod.scan`; the installed version is
resolved lazily from the distribution metadata.
"""

from importlib import metadata as _metadata

__all__ = ["__version__"]


def __getattr__(name: str):
    if name != "__version__":
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return _metadata.version("lastmod")


def __dir__():
    return sorted([*globals().keys(), "__version__"])
