"""Merge the naming-rule sources into a single per-tag resolution.

Four sources feed a tag-name decision: names the user explicitly allows,
the preferred-name map, structured tags validated elsewhere, and the JSX
pragma tags. The configured mode adds its built-in vocabulary, whose
synonyms are steered to their canonical names when no preference applies.
Raw preference values are resolved once, when the policy is built, into
``NoReplacement`` / ``Rename`` / ``RenameWithMessage``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, Mapping, TypeAlias

from tagcheck.model import NamingPolicy, NoReplacement, Preference, Rename, RenameWithMessage
from tagcheck.schema import RuleOptions, TagCheckSettings
from tagcheck.tag_names import JSX_TAG_NAMES, synonyms_for_mode, tag_names_for_mode

INVALID_PREFERENCE_MESSAGE = (
    "Invalid `tagNamePreference` setting. "
    "Values must be falsy, a string, or an object."
)

# Preference keys may be written as "tag <name>".
TAG_KEY_PREFIX = "tag "

RawPreference: TypeAlias = str | int | float | bool | None | list[object] | dict[str, object]
SettingsSink = Callable[[str], None]


class ResolutionKind(StrEnum):
    EXEMPT = "exempt"
    VALID = "valid"
    PREFERRED = "preferred"
    BLOCKED = "blocked"
    INVALID = "invalid"


@dataclass(frozen=True)
class Resolution:
    kind: ResolutionKind
    preferred_name: str | None = None
    message: str | None = None


def _message_or_none(value: object) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def resolve_preference(raw: RawPreference) -> Preference | None:
    """Return the typed preference for a raw value, or None when it is malformed."""
    if isinstance(raw, str):
        return Rename(raw) if raw else NoReplacement()
    if isinstance(raw, dict):
        replacement = raw.get("replacement")
        message = _message_or_none(raw.get("message"))
        if not replacement:
            return NoReplacement(message)
        if not isinstance(replacement, str):
            return None
        if message is None:
            return Rename(replacement)
        return RenameWithMessage(replacement, message)
    if raw is None or raw is False:
        return NoReplacement()
    if isinstance(raw, (int, float)) and not isinstance(raw, bool) and raw == 0:
        return NoReplacement()
    return None


def _preference_keys(raw_preferences: Mapping[str, RawPreference]) -> list[tuple[str, RawPreference]]:
    # "tag <name>" keys are applied last so they win over a bare "<name>".
    bare = [(key, raw) for key, raw in raw_preferences.items() if not key.startswith(TAG_KEY_PREFIX)]
    prefixed = [
        (key[len(TAG_KEY_PREFIX):], raw)
        for key, raw in raw_preferences.items()
        if key.startswith(TAG_KEY_PREFIX)
    ]
    return bare + prefixed


def build_naming_policy(
    options: RuleOptions,
    settings: TagCheckSettings,
    *,
    on_settings_error: SettingsSink | None = None,
) -> NamingPolicy:
    preferences: dict[str, Preference] = {}
    names: set[str] = set()
    malformed = False
    for name, raw in _preference_keys(settings.tag_name_preference):
        names.add(name)
        preference = resolve_preference(raw)
        if preference is None:
            malformed = True
            preferences.pop(name, None)
            continue
        preferences[name] = preference
    if malformed and on_settings_error is not None:
        on_settings_error(INVALID_PREFERENCE_MESSAGE)
    return NamingPolicy(
        allowed_extra=frozenset(options.defined_tags),
        preferences=preferences,
        non_preferred_names=frozenset(names),
        structured_tag_names=frozenset(settings.structured_tags),
        builtin_tag_names=tag_names_for_mode(settings.mode),
        builtin_synonyms=synonyms_for_mode(settings.mode),
        jsx_exempt=options.jsx_tags,
    )


def _replacement_names(preferences: Mapping[str, Preference]) -> frozenset[str]:
    names: set[str] = set()
    for preference in preferences.values():
        if isinstance(preference, (Rename, RenameWithMessage)) and preference.name:
            names.add(preference.name)
    return frozenset(names)


class PolicyResolver:
    def __init__(self, policy: NamingPolicy) -> None:
        self.policy = policy
        self._replacements = _replacement_names(policy.preferences)
        self._allowed = frozenset(
            set(policy.builtin_tag_names)
            | set(policy.allowed_extra)
            | set(policy.non_preferred_names)
            | self._replacements
            | set(policy.structured_tag_names)
        )

    @property
    def allowed_names(self) -> frozenset[str]:
        return self._allowed

    def is_exempt(self, name: str) -> bool:
        return self.policy.jsx_exempt and name in JSX_TAG_NAMES

    def resolve(self, name: str) -> Resolution:
        if self.is_exempt(name):
            return Resolution(ResolutionKind.EXEMPT)
        if name not in self._allowed:
            return Resolution(ResolutionKind.INVALID)
        if name in self._replacements:
            # A configured target is never steered elsewhere.
            return Resolution(ResolutionKind.VALID)
        preference = self.policy.preferences.get(name)
        if preference is None:
            canonical = self.policy.builtin_synonyms.get(name)
            if canonical is None or canonical == name:
                return Resolution(ResolutionKind.VALID)
            return Resolution(ResolutionKind.PREFERRED, preferred_name=canonical)
        if isinstance(preference, NoReplacement):
            return Resolution(
                ResolutionKind.BLOCKED,
                message=preference.message or f"Blacklisted tag found (`@{name}`)",
            )
        if preference.name == name:
            # Self-mapping is a no-op.
            return Resolution(ResolutionKind.VALID)
        message = preference.message if isinstance(preference, RenameWithMessage) else None
        return Resolution(
            ResolutionKind.PREFERRED,
            preferred_name=preference.name,
            message=message,
        )
