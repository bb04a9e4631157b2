from app.api import proxy

__all__ = ["proxy"]
