from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Union
from pydantic import BaseModel

from fusionsv.schemas.gene import GeneIdentity

SUMMARY_PROJECTION = "SUMMARY"


class GeneFound(BaseModel):
    gene: GeneIdentity

    class Config:
        frozen = True


class GeneNotFound(BaseModel):
    symbol: str

    class Config:
        frozen = True


class GeneLookupError(BaseModel):
    """The catalog could not answer, as opposed to answering "no such gene"."""
    symbol: str
    message: str

    class Config:
        frozen = True


GeneLookupResult = Union[GeneFound, GeneNotFound, GeneLookupError]


class GeneResolver(ABC):
    """Gene catalog lookups used to resolve the second gene of a fusion."""

    @abstractmethod
    def lookup_by_symbol(self, symbol: str) -> GeneLookupResult:
        """Exact symbol lookup. Must not raise for catalog problems."""
        pass

    @abstractmethod
    def search_by_alias(self, alias: str, projection: str = SUMMARY_PROJECTION) -> List[GeneIdentity]:
        """Alias search, best match first. Raises GeneResolverError when the catalog fails."""
        pass


class InMemoryGeneResolver(GeneResolver):
    """Resolver backed by a gene list held in memory."""

    def __init__(
        self,
        genes: Iterable[GeneIdentity],
        aliases: Optional[Dict[str, List[str]]] = None
    ):
        self._genes = list(genes)
        self._by_symbol = {g.hugo_gene_symbol.upper(): g for g in self._genes}
        # hugo symbol -> alias symbols
        self._aliases = {
            symbol.upper(): [a.upper() for a in alias_list]
            for symbol, alias_list in (aliases or {}).items()
        }

    def lookup_by_symbol(self, symbol: str) -> GeneLookupResult:
        gene = self._by_symbol.get(symbol.upper())
        if gene is None:
            return GeneNotFound(symbol=symbol)
        return GeneFound(gene=gene)

    def search_by_alias(self, alias: str, projection: str = SUMMARY_PROJECTION) -> List[GeneIdentity]:
        needle = alias.upper()
        return [
            gene for gene in self._genes
            if any(needle in a for a in self._aliases.get(gene.hugo_gene_symbol.upper(), []))
        ]
