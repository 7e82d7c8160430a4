from fusionsv.schemas.gene import GeneIdentity
from fusionsv.schemas.mutation import MutationRecord, MutationCountByGene
from fusionsv.schemas.structural_variant import (
    StructuralVariant,
    StructuralVariantCountByGene,
    ResolutionFailure,
    FusionMappingResult
)

__all__ = [
    "GeneIdentity",
    "MutationRecord",
    "MutationCountByGene",
    "StructuralVariant",
    "StructuralVariantCountByGene",
    "ResolutionFailure",
    "FusionMappingResult"
]
