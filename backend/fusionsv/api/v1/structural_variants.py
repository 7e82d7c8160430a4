from fastapi import APIRouter, Depends, HTTPException
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from fusionsv.config import get_settings
from fusionsv.core.exceptions import InvalidArgumentError
from fusionsv.core.gene_resolver import GeneResolver
from fusionsv.core.sv_mapper import MutationMapper
from fusionsv.external.cbioportal import get_gene_resolver
from fusionsv.schemas import (
    MutationRecord,
    MutationCountByGene,
    StructuralVariantCountByGene,
    FusionMappingResult
)
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


class FusionMappingRequest(BaseModel):
    mutations: List[MutationRecord]
    molecular_profile_id_replace_map: Dict[str, str] = {}
    filter_by_protein_change: Optional[bool] = Field(
        default=None, description="Keep one fusion per study/sample/protein change (server default if omitted)"
    )


@router.post("/fusions", response_model=FusionMappingResult)
def map_fusions(
    request: FusionMappingRequest,
    gene_resolver: GeneResolver = Depends(get_gene_resolver)
):
    """Map fusion mutation records to structural variants."""
    filter_by_protein_change = request.filter_by_protein_change
    if filter_by_protein_change is None:
        filter_by_protein_change = get_settings().filter_by_protein_change

    mapper = MutationMapper(gene_resolver)
    try:
        return mapper.map_fusions(
            request.mutations,
            request.molecular_profile_id_replace_map,
            filter_by_protein_change
        )
    except InvalidArgumentError as e:
        logger.warning(f"Rejected fusion mapping request: {e}")
        raise HTTPException(400, str(e))


@router.post("/counts", response_model=List[StructuralVariantCountByGene])
def map_fusion_counts(counts: List[MutationCountByGene]):
    """Convert fusion counts by gene to structural variant counts by gene."""
    return MutationMapper.map_fusion_counts_to_structural_variant_counts(counts)
