"""
Analysis module.

Provides descriptive statistics, the analysis configuration and the single
recomputation entry point analyze().
"""
from .statistics import SummaryStatistics, calculate_statistics
from .config import AnalysisConfig, load_config_from_yaml, save_config_to_yaml
from .pipeline import AnalysisResult, analyze, calculate_indicators

__all__ = [
    'SummaryStatistics',
    'calculate_statistics',
    'AnalysisConfig',
    'load_config_from_yaml',
    'save_config_to_yaml',
    'AnalysisResult',
    'analyze',
    'calculate_indicators',
]
