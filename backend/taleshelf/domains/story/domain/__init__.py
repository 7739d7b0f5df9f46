from .entities import Story

__all__ = ["Story"]
