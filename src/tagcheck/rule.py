"""Reports invalid block tag names.

Each tag is checked in a fixed order: the JSX exemption first, then typed
redundancy (when typed mode is on), then allow-list membership and the
preferred-name map. The first check that settles a tag ends processing of
that tag.
"""

from __future__ import annotations

from dataclasses import dataclass

from tagcheck.invariants import never
from tagcheck.model import SKIP, Decision, DecisionKind, IssueKind, NamingPolicy, SyntaxNode, Tag, TagBlock, TypedModeConfig
from tagcheck.policy import PolicyResolver, ResolutionKind, build_naming_policy
from tagcheck.reporting import Report, Reporter
from tagcheck.rewrite import emit_decision
from tagcheck.schema import RuleOptions, TagCheckSettings
from tagcheck.typed import classify_typed_redundancy


@dataclass(frozen=True)
class CheckContext:
    node: SyntaxNode | None = None
    filename: str = ""


class TagNameRule:
    def __init__(self, policy: NamingPolicy, typed: TypedModeConfig) -> None:
        self.resolver = PolicyResolver(policy)
        self.typed = typed

    @classmethod
    def from_config(
        cls,
        options: RuleOptions,
        settings: TagCheckSettings,
        reporter: Reporter,
    ) -> TagNameRule:
        policy = build_naming_policy(
            options,
            settings,
            on_settings_error=reporter.report_settings,
        )
        return cls(policy, TypedModeConfig(enabled=options.typed))

    def decide(self, tag: Tag, context: CheckContext) -> Decision:
        name = tag.name
        if self.resolver.is_exempt(name):
            return SKIP
        if self.typed.enabled:
            redundancy = classify_typed_redundancy(
                tag, node=context.node, filename=context.filename
            )
            if redundancy is not None:
                return Decision(
                    kind=DecisionKind.REPORT_ONLY,
                    issue=IssueKind.TYPED_REDUNDANT,
                    message=redundancy.message,
                )
        resolution = self.resolver.resolve(name)
        if resolution.kind in (ResolutionKind.EXEMPT, ResolutionKind.VALID):
            return SKIP
        if resolution.kind is ResolutionKind.INVALID:
            return Decision(
                kind=DecisionKind.REPORT_ONLY,
                issue=IssueKind.UNKNOWN_TAG,
                message=f'Invalid JSDoc tag name "{name}".',
            )
        if resolution.kind is ResolutionKind.BLOCKED:
            return Decision(
                kind=DecisionKind.REPORT_ONLY,
                issue=IssueKind.BLOCKED_TAG,
                message=resolution.message or f"Blacklisted tag found (`@{name}`)",
            )
        if resolution.kind is ResolutionKind.PREFERRED:
            preferred = resolution.preferred_name or never(
                "preferred resolution without a name", tag=name
            )
            return Decision(
                kind=DecisionKind.REPORT_AND_REPLACE,
                issue=IssueKind.PREFERRED_NAME,
                message=resolution.message
                or (
                    f'Invalid JSDoc tag (preference). Replace "{name}" JSDoc tag '
                    f'with "{preferred}".'
                ),
                preferred_name=preferred,
            )
        never("unknown resolution kind", kind=str(resolution.kind))

    def check(
        self,
        block: TagBlock,
        context: CheckContext,
        reporter: Reporter,
    ) -> list[Report]:
        reports: list[Report] = []
        for tag_index, tag in enumerate(block.tags):
            if not tag.name:
                continue
            report = emit_decision(
                self.decide(tag, context),
                block=block,
                tag_index=tag_index,
                reporter=reporter,
            )
            if report is not None:
                reports.append(report)
        return reports


def check_tag_names(
    block: TagBlock,
    *,
    options: RuleOptions,
    settings: TagCheckSettings,
    reporter: Reporter,
    node: SyntaxNode | None = None,
    filename: str = "",
) -> list[Report]:
    """Check one block with a policy built for this call.

    The naming policy is rebuilt every time, so a malformed
    ``tagNamePreference`` is reported to ``reporter`` once per call. Hosts
    checking many comments in a file should build the rule once with
    ``TagNameRule.from_config`` and call ``check`` for each block.
    """
    rule = TagNameRule.from_config(options, settings, reporter)
    return rule.check(block, CheckContext(node=node, filename=filename), reporter)
