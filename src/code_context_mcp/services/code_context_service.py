"""
Code Context Service - Business logic for directory overviews and symbol analysis.

This service validates a get_code_context request, walks the requested
directory with a fresh AnalysisRun, and renders the tree together with the
run-level summary.
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

from ..constants import DEFAULT_MAX_DEPTH, DEFAULT_SYMBOL_TYPE
from ..indexing import AnalysisRun, DirectoryTreeWalker, WalkOptions
from ..utils import ValidationHelper
from ..utils.response_formatter import ResponseFormatter
from .base_service import BaseService

logger = logging.getLogger(__name__)


@dataclass
class CodeContextResult:
    """Outcome of one analysis request."""

    text: str
    run: AnalysisRun


class CodeContextService(BaseService):
    """
    Business service producing the directory tree and code symbol overview.

    Every call owns its own AnalysisRun, so concurrent requests never share
    analysis state.
    """

    def get_code_context(self,
                         absolute_path: str,
                         analyze_js: bool = False,
                         include_symbols: bool = False,
                         symbol_type: str = DEFAULT_SYMBOL_TYPE,
                         file_patterns: Optional[List[str]] = None,
                         max_depth: int = DEFAULT_MAX_DEPTH) -> str:
        """
        Render the directory tree of a project, optionally with code symbols.

        Args:
            absolute_path: Absolute path of the directory to analyze
            analyze_js: Whether to analyze JavaScript/TypeScript and Python files
            include_symbols: Whether to list symbols under each analyzed file
            symbol_type: Kind of symbols to list (functions, variables,
                classes, imports, exports or all)
            file_patterns: Optional allow-list of file patterns to analyze
                instead of the supported languages
            max_depth: Maximum directory depth for code analysis

        Returns:
            The rendered report text

        Raises:
            ValueError: If the request is rejected by validation
        """
        return self.analyze(
            absolute_path,
            analyze_js=analyze_js,
            include_symbols=include_symbols,
            symbol_type=symbol_type,
            file_patterns=file_patterns,
            max_depth=max_depth,
        ).text

    def analyze(self,
                absolute_path: str,
                analyze_js: bool = False,
                include_symbols: bool = False,
                symbol_type: str = DEFAULT_SYMBOL_TYPE,
                file_patterns: Optional[List[str]] = None,
                max_depth: int = DEFAULT_MAX_DEPTH) -> CodeContextResult:
        """Same as get_code_context, also returning the AnalysisRun."""
        self._validate_request(absolute_path, symbol_type, file_patterns, max_depth)

        normalized_path = os.path.normpath(absolute_path.strip())
        depth_label = str(max_depth) if max_depth != DEFAULT_MAX_DEPTH else f"{max_depth} (default)"
        logger.info(
            f"Analyzing directory: {normalized_path} "
            f"(analyze: {analyze_js}, maxAnalysisDepth: {depth_label})"
        )

        options = WalkOptions(
            root_path=normalized_path,
            analyze=analyze_js,
            include_symbols=include_symbols,
            symbol_type=symbol_type,
            file_patterns=tuple(file_patterns) if file_patterns else None,
            max_depth=max_depth,
        )
        run = AnalysisRun()
        tree = DirectoryTreeWalker(options, extractor=self.extractor, run=run).walk()

        summary_text = ''
        if analyze_js:
            summary_text = ResponseFormatter.analysis_summary(
                run.summarize(), file_patterns=file_patterns, max_depth=max_depth
            )

        return CodeContextResult(
            text=ResponseFormatter.code_context_response(normalized_path, summary_text, tree),
            run=run,
        )

    def _validate_request(self, absolute_path: str, symbol_type: str,
                          file_patterns: Optional[List[str]], max_depth: int) -> None:
        """
        Validate the request according to business rules.

        Raises:
            ValueError: If validation fails
        """
        self._require(ValidationHelper.validate_analysis_root(absolute_path))
        self._require(ValidationHelper.validate_symbol_type(symbol_type))
        self._require(ValidationHelper.validate_file_patterns(file_patterns))
        self._require(ValidationHelper.validate_max_depth(max_depth))
