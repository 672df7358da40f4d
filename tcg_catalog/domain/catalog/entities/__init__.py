from .expansion import EXPANSION_DELIMITER, Expansion
from .serie import Serie

__all__ = [
    "EXPANSION_DELIMITER",
    "Expansion",
    "Serie",
]
