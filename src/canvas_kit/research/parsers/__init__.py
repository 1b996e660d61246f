from .base import FrameworkParser
from .canvas import BusinessModelCanvasParser
from .competitive import CompetitiveAnalysisParser
from .lean import LeanCanvasParser
from .market_sizing import MarketSizingParser
from .persona import UserPersonaParser
from .swot import SwotAnalysisParser
from .value_prop import ValuePropositionCanvasParser

__all__ = [
    "FrameworkParser",
    "BusinessModelCanvasParser",
    "CompetitiveAnalysisParser",
    "LeanCanvasParser",
    "MarketSizingParser",
    "SwotAnalysisParser",
    "UserPersonaParser",
    "ValuePropositionCanvasParser",
]
