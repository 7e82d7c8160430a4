"""
cBioPortal API client used as the gene catalog for fusion partner resolution.

Two endpoints are used:
- GET /genes/{symbol} for the exact HUGO symbol lookup
- GET /genes?alias=... for the alias fallback
"""

import httpx
from pydantic import ValidationError
from typing import Optional, List, Dict, Any
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential
import logging

from fusionsv.config import get_settings
from fusionsv.core.exceptions import GeneResolverError
from fusionsv.core.gene_resolver import (
    GeneResolver,
    GeneLookupResult,
    GeneFound,
    GeneNotFound,
    GeneLookupError,
    SUMMARY_PROJECTION
)
from fusionsv.schemas.gene import GeneIdentity

logger = logging.getLogger(__name__)


def _to_gene_identity(data: Any) -> Optional[GeneIdentity]:
    """
    Build a GeneIdentity from a cBioPortal gene, None when either field is missing.

    Raises pydantic.ValidationError when the fields are present but malformed.
    """
    if not isinstance(data, dict):
        return None
    entrez_id = data.get("entrezGeneId")
    symbol = data.get("hugoGeneSymbol")
    if entrez_id is None or not symbol:
        return None
    return GeneIdentity(entrez_gene_id=entrez_id, hugo_gene_symbol=symbol)


class CBioPortalGeneResolver(GeneResolver):
    """Client for the cBioPortal gene endpoints."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        retry_attempts: Optional[int] = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        settings = get_settings()
        self.base_url = base_url or settings.cbioportal_api_url
        self.timeout = timeout if timeout is not None else settings.cbioportal_timeout
        self.retry_attempts = retry_attempts or settings.cbioportal_retry_attempts
        self._transport = transport

    @retry(
        retry=retry_if_exception_type(httpx.TransportError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        reraise=True
    )
    def _get(self, endpoint: str, params: Optional[Dict] = None) -> Any:
        with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
            url = f"{self.base_url}{endpoint}"
            headers = {"Accept": "application/json"}
            response = client.get(url, params=params, headers=headers)
            response.raise_for_status()
            return response.json()

    def _request(self, endpoint: str, params: Optional[Dict] = None) -> Any:
        """GET a cBioPortal endpoint, retrying connection problems up to retry_attempts times."""
        get = self._get.retry_with(stop=stop_after_attempt(self.retry_attempts))
        return get(self, endpoint, params)

    def lookup_by_symbol(self, symbol: str) -> GeneLookupResult:
        try:
            data = self._request(f"/genes/{symbol}")
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                return GeneNotFound(symbol=symbol)
            logger.warning(f"cBioPortal API error {e.response.status_code} looking up {symbol}")
            return GeneLookupError(symbol=symbol, message=f"HTTP {e.response.status_code}")
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"cBioPortal request failed looking up {symbol}: {e}")
            return GeneLookupError(symbol=symbol, message=str(e))

        if not isinstance(data, dict):
            logger.warning(f"Unexpected gene payload for {symbol} in cBioPortal: {type(data).__name__}")
            return GeneLookupError(symbol=symbol, message="unexpected gene payload")

        try:
            gene = _to_gene_identity(data)
        except ValidationError as e:
            logger.warning(f"Malformed gene record for {symbol} in cBioPortal: {e}")
            return GeneLookupError(symbol=symbol, message="malformed gene record")

        if gene is None:
            logger.warning(f"Incomplete gene record for {symbol} in cBioPortal")
            return GeneNotFound(symbol=symbol)
        return GeneFound(gene=gene)

    def search_by_alias(self, alias: str, projection: str = SUMMARY_PROJECTION) -> List[GeneIdentity]:
        try:
            data = self._request("/genes", params={"alias": alias, "projection": projection})
        except (httpx.HTTPError, ValueError) as e:
            raise GeneResolverError(f"cBioPortal alias search failed for {alias}: {e}") from e

        if not isinstance(data, list):
            raise GeneResolverError(
                f"cBioPortal alias search for {alias} returned {type(data).__name__}, expected a list"
            )

        genes = []
        for item in data:
            try:
                gene = _to_gene_identity(item)
            except ValidationError:
                logger.debug(f"Skipping malformed gene in alias search for {alias}: {item}")
                continue
            if gene:
                genes.append(gene)

        logger.debug(f"Alias search for {alias} returned {len(genes)} genes")
        return genes


# Singleton client
_gene_resolver: Optional[CBioPortalGeneResolver] = None


def get_gene_resolver() -> CBioPortalGeneResolver:
    """Get or create the cBioPortal gene resolver instance."""
    global _gene_resolver
    if _gene_resolver is None:
        _gene_resolver = CBioPortalGeneResolver()
    return _gene_resolver
