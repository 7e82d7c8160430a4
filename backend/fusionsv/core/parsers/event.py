"""
Parser for the free-text event stored in a fusion's protein change field.

Recognised shapes (separator is "-", "_" or whitespace):

    INTRAGENIC              pure variant class
    TUFT1-intragenic        <gene>-<variant class>
    ZSWIM4-SLC1A6           <gene1>-<gene2>
    ZNF595-TERT fusion      <gene1>-<gene2> <variant class>

Gene symbols that contain "-" themselves are not supported by the pattern.
"""

import re
from typing import Optional, Union
from pydantic import BaseModel

from fusionsv.core.variant_type import VariantType

EVENT_PATTERN = re.compile(
    r"^([A-Za-z0-9_.]+)(?:-|_|\s)([A-Za-z0-9_.]+)(?:\s+(\w+))?$",
    re.ASCII
)

# Placeholder events that carry no gene or class information
UNPARSED_EVENTS = {"FUSION", "SV"}


class PureType(BaseModel):
    variant_type: VariantType

    class Config:
        frozen = True

    @property
    def second_gene_symbol(self) -> Optional[str]:
        return None


class GeneAndType(BaseModel):
    gene_symbol: str
    variant_type: VariantType

    class Config:
        frozen = True

    @property
    def second_gene_symbol(self) -> Optional[str]:
        return self.gene_symbol


class GenePair(BaseModel):
    first_symbol: str  # informational, site 1 is never taken from the event
    second_symbol: str
    variant_type: Optional[VariantType] = None

    class Config:
        frozen = True

    @property
    def second_gene_symbol(self) -> Optional[str]:
        return self.second_symbol


class NoMatch(BaseModel):
    class Config:
        frozen = True

    @property
    def variant_type(self) -> Optional[VariantType]:
        return None

    @property
    def second_gene_symbol(self) -> Optional[str]:
        return None


ParsedEvent = Union[PureType, GeneAndType, GenePair, NoMatch]


class FusionEventParser:
    """Classifies fusion event text into a gene pair and variant class."""

    def parse(self, event: Optional[str]) -> ParsedEvent:
        if event is None or event.upper() in UNPARSED_EVENTS:
            return NoMatch()

        # A bare class keyword carries no separator, so it never reaches the pattern
        bare_type = VariantType.from_token(event) if event.isascii() else None
        if bare_type is not None:
            return PureType(variant_type=bare_type)

        match = EVENT_PATTERN.match(event)
        if not match:
            return NoMatch()

        token1, token2, token3 = match.group(1), match.group(2), match.group(3)

        first_type = VariantType.from_token(token1)
        if first_type is not None:
            # event names only a variant class
            return PureType(variant_type=first_type)

        second_type = VariantType.from_token(token2)
        if second_type is not None:
            # ex: TUFT1-intragenic
            return GeneAndType(gene_symbol=token1, variant_type=second_type)

        # ex: ZSWIM4-SLC1A6 or ZNF595-TERT fusion
        return GenePair(
            first_symbol=token1,
            second_symbol=token2,
            variant_type=VariantType.from_token(token3)
        )
