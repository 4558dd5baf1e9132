"""
Parsing strategies for the supported grammar families.
"""

from .base_strategy import ParsingStrategy
from .javascript_strategy import JavaScriptParsingStrategy
from .python_strategy import PythonParsingStrategy
from .strategy_factory import StrategyFactory

__all__ = ['ParsingStrategy', 'JavaScriptParsingStrategy', 'PythonParsingStrategy', 'StrategyFactory']
