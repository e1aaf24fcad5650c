from .parking import router

__all__ = ["router"]
