from pydantic import BaseModel, Field


class GeneIdentity(BaseModel):
    """Resolved gene: Entrez ID and HUGO symbol always travel together."""
    entrez_gene_id: int = Field(..., description="Entrez gene ID (e.g., 7015)")
    hugo_gene_symbol: str = Field(..., description="HUGO gene symbol (e.g., TERT)")

    class Config:
        frozen = True
        from_attributes = True
