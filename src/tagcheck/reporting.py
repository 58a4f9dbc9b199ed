from __future__ import annotations

from dataclasses import asdict, dataclass, field
import json
import re
from typing import TYPE_CHECKING, Protocol

from tagcheck.model import IssueKind, SourceSpan, TextEdit
from tagcheck.schema import LintEntryDTO, TextEditDTO

if TYPE_CHECKING:
    from tagcheck.rewrite import TagFix

_LINT_RE = re.compile(r"^(?P<path>.+?):(?P<line>\d+):(?P<col>\d+):\s*(?P<rest>.*)$")


@dataclass(frozen=True)
class Report:
    issue: IssueKind
    message: str
    tag_index: int | None = None
    span: SourceSpan | None = None
    fix: TagFix | None = None


class Reporter(Protocol):
    def report(self, report: Report) -> None: ...

    def report_settings(self, message: str) -> None: ...


@dataclass
class CollectingReporter:
    """Reporter sink that keeps everything it receives, in order."""

    reports: list[Report] = field(default_factory=list)
    settings_messages: list[str] = field(default_factory=list)

    def report(self, report: Report) -> None:
        self.reports.append(report)

    def report_settings(self, message: str) -> None:
        self.settings_messages.append(message)

    @property
    def messages(self) -> list[str]:
        return [report.message for report in self.reports]

    def lint_lines(self, path: str) -> list[str]:
        lines = [
            f"{path}:1:1: {IssueKind.SETTINGS.value} {message}"
            for message in self.settings_messages
        ]
        for report in self.reports:
            line, col = report.span.start if report.span is not None else (1, 1)
            lines.append(f"{path}:{line}:{col}: {report.issue.value} {report.message}")
        return lines

    def lint_entries(self, path: str) -> list[dict[str, object]]:
        entries: list[dict[str, object]] = []
        for message in self.settings_messages:
            entries.append(
                LintEntryDTO(
                    path=path,
                    line=1,
                    col=1,
                    code=IssueKind.SETTINGS.value,
                    message=message,
                    severity="error",
                ).model_dump()
            )
        for report in self.reports:
            line, col = report.span.start if report.span is not None else (1, 1)
            entries.append(
                LintEntryDTO(
                    path=path,
                    line=line,
                    col=col,
                    code=report.issue.value,
                    message=report.message,
                    fixable=report.fix is not None,
                ).model_dump()
            )
        return entries

    def fixed_text(self, text: str) -> str | None:
        """Apply the first available fix; None when nothing is fixable.

        Each fix rewrites the whole block, so a host applies one per pass and
        re-checks the result.
        """
        for report in self.reports:
            if report.fix is not None:
                return report.fix.apply(text)
        return None


def parse_lint_line(line: str) -> dict[str, object] | None:
    match = _LINT_RE.match(line.strip())
    if not match:
        return None
    rest = match.group("rest").strip()
    if not rest:
        return None
    code, _, message = rest.partition(" ")
    return {
        "path": match.group("path"),
        "line": int(match.group("line")),
        "col": int(match.group("col")),
        "code": code,
        "message": message,
        "severity": "warning",
    }


def render_lint_jsonl(entries: list[dict[str, object]]) -> str:
    payload = "\n".join(json.dumps(entry, sort_keys=True) for entry in entries)
    return payload + "\n" if payload else ""


def text_edit_payload(edit: TextEdit) -> dict[str, object]:
    return TextEditDTO.model_validate(asdict(edit)).model_dump()
