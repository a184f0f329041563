"""HTTP API server with JSONC configuration and coloured request logging."""

__version__ = "0.1.0"

__all__ = ["__version__"]