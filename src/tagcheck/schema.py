from __future__ import annotations

from typing import Any, Dict, List, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tagcheck.exceptions import InvalidOptionsError
from tagcheck.tag_names import DEFAULT_MODE

Mode = Literal["jsdoc", "typescript", "closure", "permissive"]


class RuleOptions(BaseModel):
    """Options accepted by the tag-name rule; unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, strict=True)

    defined_tags: List[str] = Field(default_factory=list, alias="definedTags")
    jsx_tags: bool = Field(default=False, alias="jsxTags")
    typed: bool = False


class TagCheckSettings(BaseModel):
    """Shared settings resolved by the host before the rule runs."""

    model_config = ConfigDict(populate_by_name=True)

    mode: Mode = DEFAULT_MODE
    tag_name_preference: Dict[str, Any] = Field(
        default_factory=dict, alias="tagNamePreference"
    )
    structured_tags: Dict[str, Any] = Field(
        default_factory=dict, alias="structuredTags"
    )


class LintEntryDTO(BaseModel):
    path: str
    line: int
    col: int
    code: str
    message: str
    severity: str = "warning"
    fixable: bool = False


class TextEditDTO(BaseModel):
    path: str
    start: tuple[int, int]
    end: tuple[int, int]
    replacement: str


def _error_lines(exc: ValidationError) -> list[str]:
    lines: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        lines.append(f"{location or '<root>'}: {error.get('msg', '')}")
    return lines


def validate_rule_options(payload: Mapping[str, object] | None) -> RuleOptions:
    try:
        return RuleOptions.model_validate(dict(payload or {}))
    except ValidationError as exc:
        errors = _error_lines(exc)
        raise InvalidOptionsError(
            "Invalid tag-name rule options: " + "; ".join(errors),
            errors=errors,
        ) from exc


def validate_settings(payload: Mapping[str, object] | None) -> TagCheckSettings:
    try:
        return TagCheckSettings.model_validate(dict(payload or {}))
    except ValidationError as exc:
        errors = _error_lines(exc)
        raise InvalidOptionsError(
            "Invalid tagcheck settings: " + "; ".join(errors),
            errors=errors,
        ) from exc

