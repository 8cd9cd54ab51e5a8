"""Rule-based code complexity gate backed by an LLM."""

__version__ = "1.0.0"

from .models import (
    AnalysisSummary,
    ComplexityRule,
    RuleAnalysisResult,
    RuleOutcome,
    RuleStatus,
)
from .analyzer import RuleComplexityAnalyzer

__all__ = [
    "AnalysisSummary",
    "ComplexityRule",
    "RuleAnalysisResult",
    "RuleOutcome",
    "RuleStatus",
    "RuleComplexityAnalyzer",
]
