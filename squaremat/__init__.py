"""Square matrices of floats with arithmetic, comparison, transpose, power and determinant."""

__version__ = "0.1.0"
__all__ = ["__version__"]