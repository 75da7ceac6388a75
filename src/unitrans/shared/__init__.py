"""Models shared by the proxy server and the terminal client."""

from .models import TranslationResult

__all__ = ["TranslationResult"]
