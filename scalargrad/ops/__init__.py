# scalargrad/ops/__init__.py

# Convenience re-exports so users can do: from scalargrad.ops import leaf, add, mul
from .arithmetic import leaf, add, mul

__all__ = ["leaf", "add", "mul"]
