from fusionsv.core.parsers.event import (
    FusionEventParser,
    ParsedEvent,
    PureType,
    GeneAndType,
    GenePair,
    NoMatch
)

__all__ = ["FusionEventParser", "ParsedEvent", "PureType", "GeneAndType", "GenePair", "NoMatch"]
