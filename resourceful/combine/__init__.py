from .apply import ap, lift2, lift3, lift4
from .concat import concat, concat3, concat4
from .sequence import sequence

__all__ = (
    "ap",
    "lift2",
    "lift3",
    "lift4",
    "concat",
    "concat3",
    "concat4",
    "sequence",
)
