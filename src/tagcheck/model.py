from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Mapping, Tuple, TypeAlias

Position = Tuple[int, int]

ROOT_NODE_TYPE = "Program"


@dataclass(frozen=True)
class SourceSpan:
    start: Position
    end: Position


@dataclass(frozen=True)
class TextEdit:
    path: str
    start: Position
    end: Position
    replacement: str


@dataclass(frozen=True)
class Tokens:
    """One comment line as split by the documentation-comment parser."""

    start: str = ""
    delimiter: str = ""
    post_delimiter: str = ""
    tag: str = ""
    post_tag: str = ""
    type: str = ""
    post_type: str = ""
    name: str = ""
    post_name: str = ""
    description: str = ""
    line_end: str = ""
    end: str = ""

    def render(self) -> str:
        return "".join(
            (
                self.start,
                self.delimiter,
                self.post_delimiter,
                self.tag,
                self.post_tag,
                self.type,
                self.post_type,
                self.name,
                self.post_name,
                self.description,
                self.line_end,
                self.end,
            )
        )


@dataclass(frozen=True)
class SourceLine:
    number: int
    tokens: Tokens


@dataclass(frozen=True)
class Tag:
    name: str
    type_text: str | None = None
    name_path: str | None = None
    description: str = ""
    span: SourceSpan = SourceSpan(start=(1, 1), end=(1, 1))
    lines: Tuple[int, ...] = ()


@dataclass(frozen=True)
class TagBlock:
    source: str
    span: SourceSpan
    description: str = ""
    tags: Tuple[Tag, ...] = ()
    lines: Tuple[SourceLine, ...] = ()


@dataclass(frozen=True)
class SyntaxNode:
    type: str
    declare: bool = False
    parent: SyntaxNode | None = None


@dataclass(frozen=True)
class NoReplacement:
    message: str | None = None


@dataclass(frozen=True)
class Rename:
    name: str


@dataclass(frozen=True)
class RenameWithMessage:
    name: str
    message: str


Preference: TypeAlias = NoReplacement | Rename | RenameWithMessage


@dataclass(frozen=True)
class NamingPolicy:
    allowed_extra: frozenset[str] = frozenset()
    preferences: Mapping[str, Preference] = field(default_factory=dict)
    non_preferred_names: frozenset[str] = frozenset()
    structured_tag_names: frozenset[str] = frozenset()
    builtin_tag_names: frozenset[str] = frozenset()
    builtin_synonyms: Mapping[str, str] = field(default_factory=dict)
    jsx_exempt: bool = False


@dataclass(frozen=True)
class TypedModeConfig:
    enabled: bool = False


class IssueKind(StrEnum):
    UNKNOWN_TAG = "TAGCHECK_UNKNOWN_TAG"
    BLOCKED_TAG = "TAGCHECK_BLOCKED_TAG"
    PREFERRED_NAME = "TAGCHECK_PREFERRED_NAME"
    TYPED_REDUNDANT = "TAGCHECK_TYPED_REDUNDANT"
    SETTINGS = "TAGCHECK_SETTINGS"


class DecisionKind(StrEnum):
    SKIP = "skip"
    REPORT_ONLY = "report_only"
    REPORT_AND_REPLACE = "report_and_replace"


@dataclass(frozen=True)
class Decision:
    kind: DecisionKind
    issue: IssueKind | None = None
    message: str = ""
    preferred_name: str | None = None


SKIP = Decision(kind=DecisionKind.SKIP)
