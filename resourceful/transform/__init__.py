from .effects import tap
from .fold import cata, fold
from .functor import bimap, map, map_error

__all__ = (
    "map",
    "map_error",
    "bimap",
    "fold",
    "cata",
    "tap",
)
