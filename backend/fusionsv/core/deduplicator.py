from typing import Dict, List, Sequence, Tuple
import logging

from fusionsv.core.exceptions import InvalidArgumentError
from fusionsv.schemas.mutation import MutationRecord

logger = logging.getLogger(__name__)


def dedupe_fusions(
    fusions: Sequence[MutationRecord],
    filter_by_protein_change: bool
) -> List[MutationRecord]:
    """
    Keep one fusion per (study, sample, protein change).

    The same event is often reported once for each partner gene, so the record
    whose own gene symbol prefixes the protein change is preferred. Groups come
    back in the order their key was first seen.
    """
    if not filter_by_protein_change:
        return list(fusions)

    unique_fusions: Dict[Tuple[str, str, str], MutationRecord] = {}
    for fusion in fusions:
        if fusion.protein_change is None:
            raise InvalidArgumentError(
                f"Cannot filter by protein change: sample {fusion.sample_id} "
                f"in study {fusion.study_id} has no protein change"
            )

        key = (fusion.study_id, fusion.sample_id, fusion.protein_change)
        # Both partner genes usually report the event; prefer the one it starts with
        starts_with_gene = fusion.protein_change.upper().startswith(fusion.hugo_gene_symbol)
        if key not in unique_fusions or starts_with_gene:
            unique_fusions[key] = fusion

    logger.debug(f"Deduplicated {len(fusions)} fusions to {len(unique_fusions)}")
    return list(unique_fusions.values())
