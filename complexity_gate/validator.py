"""
Validation of untrusted model replies.

The model is asked for strict JSON but nothing enforces it, so every reply
goes through ``parse_rule_result`` before it can reach the aggregate.
"""

import json

from pydantic import ValidationError

from .models import ComplexityRule, RuleAnalysisResult


class ResultParseError(ValueError):
    """Raised when a model reply is not valid JSON."""

    def __init__(self, rule: str, detail: str):
        self.rule = rule
        super().__init__(f"Could not parse reply for rule {rule!r} as JSON: {detail}")


class InvalidRuleResultError(ValueError):
    """Raised when a parsed reply does not match the expected shape."""

    def __init__(self, rule: str, detail: str):
        self.rule = rule
        self.detail = detail
        super().__init__(f"Invalid reply for rule {rule!r}: {detail}")


def _field_errors(e: ValidationError) -> str:
    # Field paths and error codes only; values come from the model.
    return "; ".join(
        f"{'.'.join(str(loc) for loc in err['loc'])}: {err['type']}"
        for err in e.errors()
    )


def parse_rule_result(raw: str, rule: ComplexityRule) -> RuleAnalysisResult:
    """
    Parse a raw model reply into a result for ``rule``.

    Args:
        raw: Reply text exactly as returned by the model
        rule: Rule the reply was requested for

    Returns:
        Validated RuleAnalysisResult

    Raises:
        ResultParseError: If the reply is not JSON
        InvalidRuleResultError: If fields are missing, mistyped, or the
            echoed rule name differs from ``rule.description``
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        raise ResultParseError(rule.description, str(e)) from e

    if not isinstance(data, dict):
        raise InvalidRuleResultError(rule.description, "reply is not a JSON object")

    try:
        result = RuleAnalysisResult.model_validate(data)
    except ValidationError as e:
        raise InvalidRuleResultError(rule.description, _field_errors(e)) from e

    if result.rule != rule.description:
        raise InvalidRuleResultError(
            rule.description,
            f"echoed rule {result.rule!r} does not match",
        )

    return result
