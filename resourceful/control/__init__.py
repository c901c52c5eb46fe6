from .alt import alt
from .chain import chain
from .recover import recover

__all__ = (
    "chain",
    "alt",
    "recover",
)
