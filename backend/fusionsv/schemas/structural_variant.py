from pydantic import BaseModel, model_validator
from typing import Optional, List, Set
from fusionsv.schemas.gene import GeneIdentity


class StructuralVariant(BaseModel):
    # Sample details
    sample_id: str
    patient_id: str
    study_id: str
    molecular_profile_id: str

    # Site 1 always comes from the mutation's own gene
    site1_entrez_gene_id: int
    site1_hugo_symbol: str
    site1_chromosome: Optional[str] = None
    site1_position: Optional[int] = None

    # Site 2 is only known when the event names a resolvable gene
    site2_entrez_gene_id: Optional[int] = None
    site2_hugo_symbol: Optional[str] = None

    center: Optional[str] = None
    comments: Optional[str] = None
    ncbi_build: Optional[str] = None
    variant_class: Optional[str] = None
    event_info: Optional[str] = None  # raw protein change text

    class Config:
        from_attributes = True

    @model_validator(mode="after")
    def check_site2_pair(self) -> "StructuralVariant":
        if (self.site2_entrez_gene_id is None) != (self.site2_hugo_symbol is None):
            raise ValueError("site2 entrez gene id and hugo symbol must be set together")
        return self

    @property
    def site1_gene(self) -> GeneIdentity:
        return GeneIdentity(
            entrez_gene_id=self.site1_entrez_gene_id,
            hugo_gene_symbol=self.site1_hugo_symbol
        )

    @property
    def site2_gene(self) -> Optional[GeneIdentity]:
        if self.site2_entrez_gene_id is None:
            return None
        return GeneIdentity(
            entrez_gene_id=self.site2_entrez_gene_id,
            hugo_gene_symbol=self.site2_hugo_symbol
        )


class StructuralVariantCountByGene(BaseModel):
    entrez_gene_id: int
    hugo_gene_symbol: str
    number_of_altered_cases: int = 0
    number_of_profiled_cases: Optional[int] = None
    total_count: int = 0
    matching_gene_panel_ids: Set[str] = set()

    class Config:
        from_attributes = True


class ResolutionFailure(BaseModel):
    """A record whose second gene could not be resolved because the alias search errored."""
    study_id: str
    sample_id: str
    event_info: Optional[str] = None
    gene_symbol: str
    reason: str


class FusionMappingResult(BaseModel):
    structural_variants: List[StructuralVariant] = []
    resolution_failures: List[ResolutionFailure] = []
