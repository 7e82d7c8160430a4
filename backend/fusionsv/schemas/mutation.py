from pydantic import BaseModel, Field
from typing import Optional, Set
from fusionsv.schemas.gene import GeneIdentity


class MutationRecord(BaseModel):
    """A mutation row as reported by the mutation store, read-only input."""
    study_id: str
    sample_id: str
    patient_id: str
    molecular_profile_id: str
    gene: GeneIdentity
    chr: Optional[str] = None
    ncbi_build: Optional[str] = None
    center: Optional[str] = None
    start_position: Optional[float] = Field(default=None, allow_inf_nan=False)
    protein_change: Optional[str] = Field(
        default=None, description="Free-text event (e.g., ZSWIM4-SLC1A6, TUFT1-intragenic)"
    )
    mutation_type: Optional[str] = None
    keyword: Optional[str] = None

    class Config:
        frozen = True
        from_attributes = True

    @property
    def entrez_gene_id(self) -> int:
        return self.gene.entrez_gene_id

    @property
    def hugo_gene_symbol(self) -> str:
        return self.gene.hugo_gene_symbol


class MutationCountByGene(BaseModel):
    entrez_gene_id: int
    hugo_gene_symbol: str
    number_of_altered_cases: int = 0
    number_of_profiled_cases: Optional[int] = None
    total_count: int = 0
    matching_gene_panel_ids: Set[str] = set()

    class Config:
        from_attributes = True
