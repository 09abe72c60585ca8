from .filter import filter
from .map import flat_map, flatten, map

__all__ = (
    "filter",
    "flat_map",
    "flatten",
    "map",
)
