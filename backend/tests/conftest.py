import pytest
from typing import Dict, Iterable, List, Optional

from fusionsv.core.exceptions import GeneResolverError
from fusionsv.core.gene_resolver import (
    GeneResolver,
    GeneFound,
    GeneNotFound,
    GeneLookupError,
    SUMMARY_PROJECTION
)
from fusionsv.schemas import GeneIdentity, MutationRecord

GENES = {
    "ABL1": GeneIdentity(entrez_gene_id=25, hugo_gene_symbol="ABL1"),
    "ALK": GeneIdentity(entrez_gene_id=238, hugo_gene_symbol="ALK"),
    "BCR": GeneIdentity(entrez_gene_id=613, hugo_gene_symbol="BCR"),
    "EML4": GeneIdentity(entrez_gene_id=27436, hugo_gene_symbol="EML4"),
    "KIAA1549": GeneIdentity(entrez_gene_id=57670, hugo_gene_symbol="KIAA1549"),
    "SLC1A6": GeneIdentity(entrez_gene_id=6511, hugo_gene_symbol="SLC1A6"),
    "TERT": GeneIdentity(entrez_gene_id=7015, hugo_gene_symbol="TERT"),
    "TUFT1": GeneIdentity(entrez_gene_id=7286, hugo_gene_symbol="TUFT1"),
    "ZNF595": GeneIdentity(entrez_gene_id=152687, hugo_gene_symbol="ZNF595"),
    "ZSWIM4": GeneIdentity(entrez_gene_id=65249, hugo_gene_symbol="ZSWIM4"),
}


class RecordingGeneResolver(GeneResolver):
    """Test double that records every catalog call."""

    def __init__(
        self,
        genes: Iterable[GeneIdentity] = (),
        alias_results: Optional[Dict[str, List[GeneIdentity]]] = None,
        failing_lookups: Iterable[str] = (),
        failing_alias_searches: Iterable[str] = ()
    ):
        self.genes = {g.hugo_gene_symbol.upper(): g for g in genes}
        self.alias_results = alias_results or {}
        self.failing_lookups = set(failing_lookups)
        self.failing_alias_searches = set(failing_alias_searches)
        self.lookups: List[str] = []
        self.alias_searches: List[tuple] = []

    def lookup_by_symbol(self, symbol: str):
        self.lookups.append(symbol)
        if symbol in self.failing_lookups:
            return GeneLookupError(symbol=symbol, message="read timeout")
        gene = self.genes.get(symbol.upper())
        if gene is None:
            return GeneNotFound(symbol=symbol)
        return GeneFound(gene=gene)

    def search_by_alias(self, alias: str, projection: str = SUMMARY_PROJECTION):
        self.alias_searches.append((alias, projection))
        if alias in self.failing_alias_searches:
            raise GeneResolverError(f"alias search failed for {alias}")
        return list(self.alias_results.get(alias, []))

    @property
    def call_count(self) -> int:
        return len(self.lookups) + len(self.alias_searches)


@pytest.fixture
def resolver():
    return RecordingGeneResolver(genes=GENES.values())


@pytest.fixture
def make_fusion():
    """Factory for fusion mutation records, keyed by the owning gene symbol."""
    def _make(
        symbol: str = "EML4",
        protein_change: Optional[str] = "EML4-ALK",
        sample_id: str = "P-0000012-T01-IM3",
        study_id: str = "msk_impact_2017",
        **overrides
    ) -> MutationRecord:
        fields = dict(
            study_id=study_id,
            sample_id=sample_id,
            patient_id=sample_id[:9],
            molecular_profile_id=f"{study_id}_mutations",
            gene=GENES[symbol],
            chr="2",
            ncbi_build="GRCh37",
            center="MSKCC",
            start_position=42492091,
            protein_change=protein_change,
            mutation_type="Fusion",
            keyword="EML4-ALK fusion",
        )
        fields.update(overrides)
        return MutationRecord(**fields)

    return _make
