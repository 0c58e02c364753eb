"""Category-grouped launcher for installed desktop applications."""

__version__ = "0.1.0"
