"""EVM instruction traits, per-revision gas costs and dispatch tables."""

__version__ = "0.1.0"

__all__ = ["baseline_table", "op_table", "traits"]