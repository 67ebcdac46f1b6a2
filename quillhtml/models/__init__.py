from .delta import Delta, InsertOp, parse_delta

__all__ = ["Delta", "InsertOp", "parse_delta"]
