from enum import Enum
from typing import Optional


class VariantType(str, Enum):
    """Structural variant classes recognised in fusion event text."""

    DELETION = "DELETION"
    DUPLICATION = "DUPLICATION"
    INSERTION = "INSERTION"
    INVERSION = "INVERSION"
    TRANSLOCATION = "TRANSLOCATION"
    FUSION = "FUSION"
    INTRAGENIC = "INTRAGENIC"

    @classmethod
    def from_token(cls, token: Optional[str]) -> Optional["VariantType"]:
        """Case-insensitive lookup, None when the token is not a variant class."""
        if not token:
            return None
        return cls.__members__.get(token.upper())
