from . import productos

__all__ = ["productos"]
