from .identity import IdGenerator

__all__ = ["IdGenerator"]
