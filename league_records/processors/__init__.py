"""Processors for the career table and the record book cards."""

from .base_processor import BaseProcessor
from .career_stats_processor import CareerStatsProcessor, SortState
from .records_processor import RecordsProcessor

__all__ = [
    'BaseProcessor',
    'CareerStatsProcessor',
    'SortState',
    'RecordsProcessor',
]
