"""
Input loading for the code file and the rules file.
"""

import json
from pathlib import Path
from typing import Union

from pydantic import TypeAdapter, ValidationError

from .models import ComplexityRule


PathLike = Union[str, Path]

_RULES_ADAPTER = TypeAdapter(list[ComplexityRule])


class MalformedRulesError(ValueError):
    """Raised when the rules file is not a JSON array of rule objects."""

    def __init__(self, path: PathLike, detail: str):
        self.path = str(path)
        self.detail = detail
        super().__init__(f"Malformed complexity rules file {self.path}: {detail}")


def _require_file(path: PathLike, kind: str) -> Path:
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"{kind} not found: {file_path}")
    return file_path


def read_code_file(code_file_path: PathLike) -> str:
    """
    Read a source file and return its content verbatim.

    Raises:
        FileNotFoundError: If the path is not an existing file
    """
    return _require_file(code_file_path, "Code file").read_text(encoding="utf-8", errors="replace")


def read_complexity_rules(rules_file_path: PathLike) -> list[ComplexityRule]:
    """
    Read and validate the JSON rules file.

    Args:
        rules_file_path: Path to a JSON array of {"hint", "description"} objects

    Returns:
        Rules in file order

    Raises:
        FileNotFoundError: If the path is not an existing file
        MalformedRulesError: If the content is not a valid rules array
    """
    file_path = _require_file(rules_file_path, "Complexity rules file")
    data = file_path.read_text(encoding="utf-8")

    try:
        raw_rules = json.loads(data)
    except json.JSONDecodeError as e:
        raise MalformedRulesError(file_path, f"invalid JSON ({e})") from e

    if not isinstance(raw_rules, list):
        raise MalformedRulesError(file_path, "expected a JSON array of rules")

    try:
        return _RULES_ADAPTER.validate_python(raw_rules)
    except ValidationError as e:
        raise MalformedRulesError(file_path, f"{e.error_count()} invalid rule field(s)") from e
