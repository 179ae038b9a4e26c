"""Fault-isolating processing of workflow input items."""
from flowsafe.processing.items import ItemHandler, ItemProcessor, ProcessingStage

__all__ = ["ItemHandler", "ItemProcessor", "ProcessingStage"]
