from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from tagcheck.ambient import is_in_ambient_context, is_top_level_declaration
from tagcheck.model import SyntaxNode, Tag
from tagcheck.tag_names import (
    TYPED_TAGS_ALWAYS_UNNECESSARY,
    TYPED_TAGS_UNNECESSARY_OUTSIDE_DECLARE,
)


class RedundancyRule(StrEnum):
    ALWAYS = "always"
    OUTSIDE_AMBIENT = "outside_ambient"
    UNNAMED_TEMPLATE = "unnamed_template"


@dataclass(frozen=True)
class Redundancy:
    rule: RedundancyRule
    message: str


def _redundant_outside_ambient(
    tag: Tag,
    *,
    node: SyntaxNode | None,
    filename: str | None,
) -> bool:
    if tag.name not in TYPED_TAGS_UNNECESSARY_OUTSIDE_DECLARE:
        return False
    # Default values stay meaningful alongside a type system.
    if tag.name == "default" or tag.name_path == "default":
        return False
    if is_top_level_declaration(node, filename=filename):
        return False
    return not is_in_ambient_context(node, filename=filename)


def classify_typed_redundancy(
    tag: Tag,
    *,
    node: SyntaxNode | None,
    filename: str | None,
) -> Redundancy | None:
    if tag.name in TYPED_TAGS_ALWAYS_UNNECESSARY:
        return Redundancy(
            RedundancyRule.ALWAYS,
            f"'@{tag.name}' is redundant when using a type system.",
        )
    if _redundant_outside_ambient(tag, node=node, filename=filename):
        return Redundancy(
            RedundancyRule.OUTSIDE_AMBIENT,
            f"'@{tag.name}' is redundant outside of ambient (`declare`/`.d.ts`) "
            "contexts when using a type system.",
        )
    if tag.name == "template" and not tag.name_path:
        return Redundancy(
            RedundancyRule.UNNAMED_TEMPLATE,
            "'@template' without a name is redundant when using a type system.",
        )
    return None
