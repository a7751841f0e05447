"""Cubic spline interpolation of test functions, with error tables, plots and a command line."""

__version__ = "0.1.0"

__all__ = ["__version__"]