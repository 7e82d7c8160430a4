from typing import Dict, List, Optional, Sequence, Tuple
import logging

from fusionsv.core.deduplicator import dedupe_fusions
from fusionsv.core.exceptions import GeneResolverError
from fusionsv.core.gene_resolver import (
    GeneResolver,
    GeneFound,
    GeneLookupError,
    SUMMARY_PROJECTION
)
from fusionsv.core.parsers.event import FusionEventParser
from fusionsv.schemas.gene import GeneIdentity
from fusionsv.schemas.mutation import MutationRecord, MutationCountByGene
from fusionsv.schemas.structural_variant import (
    StructuralVariant,
    StructuralVariantCountByGene,
    ResolutionFailure,
    FusionMappingResult
)

logger = logging.getLogger(__name__)


class MutationMapper:
    """Turns fusion mutation records into structural variants."""

    def __init__(self, gene_resolver: GeneResolver, parser: Optional[FusionEventParser] = None):
        self.gene_resolver = gene_resolver
        self.parser = parser or FusionEventParser()

    def map_fusions(
        self,
        fusions: Sequence[MutationRecord],
        molecular_profile_id_replace_map: Optional[Dict[str, str]] = None,
        filter_by_protein_change: bool = False
    ) -> FusionMappingResult:
        """
        Map fusions to structural variants, one per (deduplicated) fusion, in input order.

        A failing alias search only affects its own record: the structural
        variant is still emitted without a site 2 gene and the failure is
        reported alongside the results.
        """
        replace_map = molecular_profile_id_replace_map or {}
        filtered_fusions = dedupe_fusions(fusions, filter_by_protein_change)

        structural_variants = []
        resolution_failures = []
        for fusion in filtered_fusions:
            structural_variant, failure = self._build_structural_variant(fusion, replace_map)
            structural_variants.append(structural_variant)
            if failure:
                resolution_failures.append(failure)

        logger.info(
            f"Mapped {len(filtered_fusions)} of {len(fusions)} fusions to structural variants "
            f"({len(resolution_failures)} unresolved)"
        )
        return FusionMappingResult(
            structural_variants=structural_variants,
            resolution_failures=resolution_failures
        )

    def map_fusions_to_structural_variants(
        self,
        fusions: Sequence[MutationRecord],
        molecular_profile_id_replace_map: Optional[Dict[str, str]] = None,
        filter_by_protein_change: bool = False
    ) -> List[StructuralVariant]:
        return self.map_fusions(
            fusions, molecular_profile_id_replace_map, filter_by_protein_change
        ).structural_variants

    @staticmethod
    def map_fusion_counts_to_structural_variant_counts(
        mutation_count_by_genes: Sequence[MutationCountByGene]
    ) -> List[StructuralVariantCountByGene]:
        return [
            StructuralVariantCountByGene(
                entrez_gene_id=count.entrez_gene_id,
                hugo_gene_symbol=count.hugo_gene_symbol,
                number_of_altered_cases=count.number_of_altered_cases,
                number_of_profiled_cases=count.number_of_profiled_cases,
                total_count=count.total_count,
                matching_gene_panel_ids=set(count.matching_gene_panel_ids)
            )
            for count in mutation_count_by_genes
        ]

    def _build_structural_variant(
        self,
        fusion: MutationRecord,
        replace_map: Dict[str, str]
    ) -> Tuple[StructuralVariant, Optional[ResolutionFailure]]:
        fields = {
            # Sample details
            "patient_id": fusion.patient_id,
            "sample_id": fusion.sample_id,
            "study_id": fusion.study_id,
            "molecular_profile_id": replace_map.get(
                fusion.molecular_profile_id, fusion.molecular_profile_id
            ),
            # Fusion details
            "site1_entrez_gene_id": fusion.entrez_gene_id,
            "site1_hugo_symbol": fusion.hugo_gene_symbol,
            "site1_chromosome": fusion.chr,
            "site1_position": int(fusion.start_position) if fusion.start_position is not None else None,
            "center": fusion.center,
            "comments": fusion.keyword,
            "ncbi_build": fusion.ncbi_build,
            "variant_class": fusion.mutation_type,
            "event_info": fusion.protein_change,
        }
        failure = None

        parsed = self.parser.parse(fusion.protein_change)
        site2_symbol = parsed.second_gene_symbol
        if site2_symbol is not None:
            site2_gene = None
            try:
                site2_gene = self._resolve_site2_gene(site2_symbol, fusion)
            except GeneResolverError as e:
                logger.warning(
                    f"Could not resolve {site2_symbol} for sample {fusion.sample_id} "
                    f"({fusion.protein_change}): {e}"
                )
                failure = self._resolution_failure(fusion, site2_symbol, str(e))
            except Exception as e:
                logger.error(
                    f"Unexpected error resolving {site2_symbol} for sample {fusion.sample_id} "
                    f"({fusion.protein_change}): {e!r}"
                )
                failure = self._resolution_failure(fusion, site2_symbol, repr(e))

            if site2_gene:
                fields["site2_entrez_gene_id"] = site2_gene.entrez_gene_id
                fields["site2_hugo_symbol"] = site2_gene.hugo_gene_symbol

        if parsed.variant_type is not None:
            fields["variant_class"] = parsed.variant_type.name

        return StructuralVariant(**fields), failure

    @staticmethod
    def _resolution_failure(fusion: MutationRecord, symbol: str, reason: str) -> ResolutionFailure:
        return ResolutionFailure(
            study_id=fusion.study_id,
            sample_id=fusion.sample_id,
            event_info=fusion.protein_change,
            gene_symbol=symbol,
            reason=reason
        )

    def _resolve_site2_gene(self, symbol: str, fusion: MutationRecord) -> Optional[GeneIdentity]:
        """Resolve the partner gene: self fusion, exact symbol, then first alias match."""
        if symbol.upper() == fusion.hugo_gene_symbol.upper():
            return fusion.gene

        result = self.gene_resolver.lookup_by_symbol(symbol)
        if isinstance(result, GeneFound):
            return result.gene

        if isinstance(result, GeneLookupError):
            logger.warning(f"Gene lookup failed for {symbol}: {result.message}, trying alias search")
        else:
            logger.debug(f"Gene {symbol} not found, trying alias search")

        alias_genes = self.gene_resolver.search_by_alias(symbol, SUMMARY_PROJECTION)
        if alias_genes:
            return alias_genes[0]

        logger.debug(f"No alias match for {symbol}, site 2 left unset")
        return None
