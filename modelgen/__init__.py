"""modelgen: typed accessor classes generated from database tables."""

from .codegen import __version__

__all__ = ["__version__"]
