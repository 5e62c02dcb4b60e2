"""Step-by-step visualization of classic sorting algorithms with a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]