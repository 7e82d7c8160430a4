class InvalidArgumentError(ValueError):
    """Raised when a mapping call is given input it cannot process."""


class GeneResolverError(Exception):
    """Raised when the gene catalog cannot be queried (distinct from "no match")."""
