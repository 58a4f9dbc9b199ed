"""Turn tag decisions into diagnostics and whole-block text fixes.

Every fix produces the complete replacement text of the comment block.
Name substitutions operate on the raw block text; removals and type strips
re-render the block from the parser's line tokens so untouched lines stay
byte-identical.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import re
from typing import Callable, Iterable

from tagcheck.invariants import never
from tagcheck.model import Decision, DecisionKind, IssueKind, SourceLine, TagBlock, TextEdit, Tokens
from tagcheck.reporting import Report, Reporter

_CLEARED_CONTENT = {
    "tag": "",
    "post_tag": "",
    "type": "",
    "post_type": "",
    "name": "",
    "post_name": "",
    "description": "",
    "line_end": "",
}


@dataclass(frozen=True)
class TagFix:
    description: str
    apply: Callable[[str], str]

    def text_edit(self, path: str, block: TagBlock) -> TextEdit:
        return TextEdit(
            path=path,
            start=block.span.start,
            end=block.span.end,
            replacement=self.apply(block.source),
        )


def replace_tag_name(text: str, original: str, preferred: str) -> str:
    pattern = re.compile(rf"@{re.escape(original)}\b")
    return pattern.sub(lambda _match: f"@{preferred}", text, count=1)


def render_lines(lines: Iterable[SourceLine]) -> str:
    return "\n".join(line.tokens.render() for line in lines)


def _has_content(tokens: Tokens) -> bool:
    return any(
        (
            tokens.tag,
            tokens.type,
            tokens.name,
            tokens.description,
        )
    )


def _tidy(tokens: Tokens) -> Tokens:
    if _has_content(tokens) or tokens.end:
        return tokens
    return replace(tokens, post_delimiter="", post_tag="", post_type="", post_name="", line_end="")


def _clear_line(tokens: Tokens) -> Tokens:
    opening = tokens.delimiter == "/**"
    return replace(
        tokens,
        delimiter=tokens.delimiter if opening else "",
        post_delimiter=" " if opening and tokens.end else "",
        **_CLEARED_CONTENT,
    )


def strip_tag_type(block: TagBlock, tag_index: int, *, strip_tag_name: bool = True) -> str:
    tag_lines = set(block.tags[tag_index].lines)
    lines: list[SourceLine] = []
    for index, line in enumerate(block.lines):
        tokens = line.tokens
        if index in tag_lines:
            if tokens.type:
                tokens = replace(tokens, type="", post_type="")
            if strip_tag_name and tokens.tag:
                tokens = replace(tokens, tag="", post_tag="")
            tokens = _tidy(tokens)
        lines.append(replace(line, tokens=tokens))
    return render_lines(lines)


def remove_tag(block: TagBlock, tag_index: int, *, remove_empty_block: bool = True) -> str:
    remaining_tags = len(block.tags) - 1
    if remove_empty_block and remaining_tags == 0 and not block.description.strip():
        return ""
    tag_lines = set(block.tags[tag_index].lines)
    lines: list[SourceLine] = []
    for index, line in enumerate(block.lines):
        if index not in tag_lines:
            lines.append(line)
            continue
        tokens = line.tokens
        if tokens.delimiter == "/**" or tokens.end:
            # The line carries a comment delimiter and cannot be dropped.
            lines.append(replace(line, tokens=_clear_line(tokens)))
    return render_lines(lines)


def preferred_name_fix(original: str, preferred: str) -> TagFix:
    return TagFix(
        description=f"Replace @{original} with @{preferred}",
        apply=lambda text: replace_tag_name(text, original, preferred),
    )


def typed_removal_fix(block: TagBlock, tag_index: int) -> TagFix:
    tag = block.tags[tag_index]
    if tag.description.strip():
        rewritten = strip_tag_type(block, tag_index)
        return TagFix(
            description=f"Strip @{tag.name} and its type, keeping the description",
            apply=lambda _text: rewritten,
        )
    rewritten = remove_tag(block, tag_index, remove_empty_block=True)
    return TagFix(
        description=f"Remove @{tag.name}",
        apply=lambda _text: rewritten,
    )


def emit_decision(
    decision: Decision,
    *,
    block: TagBlock,
    tag_index: int,
    reporter: Reporter,
) -> Report | None:
    if decision.kind is DecisionKind.SKIP:
        return None
    tag = block.tags[tag_index]
    issue = decision.issue
    if issue is None:
        never("reported decision without an issue kind", tag=tag.name)
    fix: TagFix | None = None
    if decision.kind is DecisionKind.REPORT_AND_REPLACE:
        if not decision.preferred_name:
            never("replacement decision without a preferred name", tag=tag.name)
        fix = preferred_name_fix(tag.name, decision.preferred_name)
    elif decision.kind is DecisionKind.REPORT_ONLY:
        if issue is IssueKind.TYPED_REDUNDANT:
            fix = typed_removal_fix(block, tag_index)
    else:
        never("unknown decision kind", kind=str(decision.kind))
    report = Report(
        issue=issue,
        message=decision.message,
        tag_index=tag_index,
        span=tag.span,
        fix=fix,
    )
    reporter.report(report)
    return report
