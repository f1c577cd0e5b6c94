"""Calendar date differences and a small text-mode Mandelbrot renderer."""

__version__ = "0.1.0"
__all__ = ["dates", "mandelbrot"]