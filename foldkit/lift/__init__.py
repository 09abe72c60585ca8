"""
Result bridge with semantic namespaces.

    from foldkit import lift as L

Architecture:
- L.up.*    - lift values and failing calls into kungfu Result
- L.down.*  - get values back out of Result
- L.call()  - call an operation, toolkit errors become Error(...)

Examples:
    from foldkit import first, reduce, lift as L

    total = L.call(reduce, "+", prices)
    admin = L.up.optional(first(is_admin, users), error=NoAdmin)
    value = L.down.or_else(total, 0)
"""

from __future__ import annotations

from . import down, up
from .call import call, lifted
from .down import or_else, to_result, unsafe
from .up import catching, optional, pure

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "pure",
    "optional",
    "catching",
    # Call
    "call",
    "lifted",
    # Down
    "to_result",
    "unsafe",
    "or_else",
)
