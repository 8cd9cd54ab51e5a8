"""
Prompt templates for rule-based complexity counting.

One prompt per rule; the model answers with a single JSON object.
"""

from .models import ComplexityRule


RESPONSE_SCHEMA = '{"count": int, "explanation": string, "rule": string}'


def build_rule_prompt(code: str, rule: ComplexityRule) -> str:
    """
    Build the counting prompt for a single rule.

    Args:
        code: Source code to analyze, passed verbatim
        rule: Rule whose hint the model should count

    Returns:
        Prompt string with the code appended after a blank line
    """
    instructions = f"""Analyze the following code and count occurrences of elements matching the hint: "{rule.hint}". Return a JSON object with the total count, a brief explanation, and the rule name as: "{rule.description}".

The structure of the json must be: {RESPONSE_SCHEMA}

The return must be only the json without any markdown."""

    return f"{instructions}\n\n{code}"
