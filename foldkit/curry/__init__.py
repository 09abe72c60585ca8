from .adapter import Curried, Ready, curry

__all__ = ("Curried", "Ready", "curry")
