from .buffer import BoolBuffer

__all__ = ["BoolBuffer"]
