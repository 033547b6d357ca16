from .catalog import QUOTES, get_quotes

__all__ = ["QUOTES", "get_quotes"]
