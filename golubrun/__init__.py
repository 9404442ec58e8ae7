"""A pixel-art game shell: window, animated introduction, mouse, buttons and error overlay."""

__version__ = "0.1.0"
__all__ = ["app", "button", "errors", "introduction", "mouse", "names", "window"]