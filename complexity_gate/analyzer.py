"""
Rule Complexity Analyzer.

Sequential pipeline: one LLM call per rule, validate, aggregate.
"""

from typing import Protocol, Union

import httpx

from .config import logger
from .models import AnalysisSummary, ComplexityRule, RuleOutcome
from .prompts import build_rule_prompt
from .validator import InvalidRuleResultError, ResultParseError, parse_rule_result
from providers.groq_provider import GroqAPIError


class CompletionProvider(Protocol):
    async def complete(self, prompt: str) -> str: ...


class RuleComplexityAnalyzer:
    """
    Counts rule matches in code using an LLM.

    A failing rule never aborts the run; it becomes a skipped outcome.
    """

    def __init__(self, provider: CompletionProvider):
        """
        Initialize analyzer.

        Args:
            provider: Inference client, shared by every rule evaluation
        """
        self._provider = provider

    async def close(self) -> None:
        """Close provider connection, if the provider has one."""
        close = getattr(self._provider, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def evaluate_rule(self, code: str, rule: ComplexityRule) -> RuleOutcome:
        """
        Evaluate one rule against the code.

        Args:
            code: Source code, passed verbatim
            rule: Rule to count

        Returns:
            Accepted outcome with the validated result, or an invalid/failed
            outcome carrying the reason
        """
        prompt = build_rule_prompt(code, rule)

        try:
            raw = await self._provider.complete(prompt)
            logger.info("Reply for rule %r: %s", rule.description, raw)
            result = parse_rule_result(raw, rule)
        except InvalidRuleResultError as e:
            logger.warning("Invalid API response for rule: %s (%s)", rule.description, e.detail)
            return RuleOutcome.invalid(rule, str(e))
        except (GroqAPIError, httpx.HTTPError, ResultParseError) as e:
            logger.error("Error processing rule %s: %s", rule.description, e)
            return RuleOutcome.failed(rule, str(e))
        except Exception as e:
            logger.error("Unexpected error processing rule %s: %s", rule.description, e, exc_info=True)
            return RuleOutcome.failed(rule, f"{type(e).__name__}: {e}")

        return RuleOutcome.accepted(result)

    async def analyze(
        self,
        code: str,
        rules: list[ComplexityRule],
        limit: Union[int, float],
    ) -> AnalysisSummary:
        """
        Evaluate every rule in order and aggregate the accepted counts.

        Args:
            code: Source code string to analyze (any language)
            rules: Rules in evaluation order
            limit: Threshold for the total count (inclusive)

        Returns:
            AnalysisSummary over the accepted results
        """
        outcomes = []
        for rule in rules:
            outcomes.append(await self.evaluate_rule(code, rule))

        summary = AnalysisSummary.from_outcomes(outcomes, limit)
        logger.info(
            "Evaluated %d of %d rules (%d skipped), total count %d",
            summary.evaluated,
            len(rules),
            len(summary.skipped),
            summary.total_count,
        )
        return summary
