"""On-demand text-generation analysis."""
from .pipeline import StockAnalyst, PipelineError, GenerationError, AnalysisError
from .slot import AnalysisSlot, SlotSnapshot, SlotStatus

__all__ = [
    "StockAnalyst",
    "PipelineError",
    "GenerationError",
    "AnalysisError",
    "AnalysisSlot",
    "SlotSnapshot",
    "SlotStatus"
]
