"""
Data models for rule-based complexity counting.

Pydantic models for rule descriptors, LLM response validation and the
aggregated summary.
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field


class ComplexityRule(BaseModel):
    """
    A single complexity rule loaded from the rules file.

    The description doubles as the rule's identifier: the model must echo
    it back verbatim in the ``rule`` field of its answer.
    """

    model_config = ConfigDict(frozen=True)

    description: str = Field(
        description="Unique rule name, echoed back by the model"
    )
    hint: str = Field(
        description="Natural-language pattern the model should count"
    )


class RuleAnalysisResult(BaseModel):
    """
    Per-rule answer from the LLM.

    This is the exact schema the LLM must return.
    """

    count: int = Field(ge=0, description="Occurrences matching the rule hint")
    explanation: str = Field(description="Short justification of the count")
    rule: str = Field(description="Echo of the rule description")


class RuleStatus(str, Enum):
    ACCEPTED = "accepted"
    INVALID = "invalid"
    FAILED = "failed"


class RuleOutcome(BaseModel):
    """Tagged outcome of evaluating one rule."""

    rule: str
    status: RuleStatus
    result: Optional[RuleAnalysisResult] = None
    reason: Optional[str] = None

    @classmethod
    def accepted(cls, result: RuleAnalysisResult) -> "RuleOutcome":
        return cls(rule=result.rule, status=RuleStatus.ACCEPTED, result=result)

    @classmethod
    def invalid(cls, rule: ComplexityRule, reason: str) -> "RuleOutcome":
        return cls(rule=rule.description, status=RuleStatus.INVALID, reason=reason)

    @classmethod
    def failed(cls, rule: ComplexityRule, reason: str) -> "RuleOutcome":
        return cls(rule=rule.description, status=RuleStatus.FAILED, reason=reason)


class AnalysisSummary(BaseModel):
    """
    Aggregate of one run over a rule list.

    Only accepted results are summed; skipped rules contribute nothing.
    """

    results: list[RuleAnalysisResult] = Field(default_factory=list)
    skipped: list[RuleOutcome] = Field(default_factory=list)
    limit: Union[int, float]

    @classmethod
    def from_outcomes(
        cls,
        outcomes: list[RuleOutcome],
        limit: Union[int, float],
    ) -> "AnalysisSummary":
        results = [o.result for o in outcomes if o.status is RuleStatus.ACCEPTED]
        skipped = [o for o in outcomes if o.status is not RuleStatus.ACCEPTED]
        return cls(results=results, skipped=skipped, limit=limit)

    @computed_field
    @property
    def total_count(self) -> int:
        return sum(result.count for result in self.results)

    @computed_field
    @property
    def within_limit(self) -> bool:
        return self.total_count <= self.limit

    @computed_field
    @property
    def evaluated(self) -> int:
        return len(self.results)
