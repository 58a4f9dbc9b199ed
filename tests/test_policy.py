from __future__ import annotations

import pytest

from tagcheck.model import NoReplacement, Rename, RenameWithMessage
from tagcheck.policy import (
    INVALID_PREFERENCE_MESSAGE,
    PolicyResolver,
    ResolutionKind,
    build_naming_policy,
    resolve_preference,
)
from tagcheck.schema import RuleOptions, TagCheckSettings


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("param", Rename("param")),
        ("", NoReplacement()),
        (False, NoReplacement()),
        (None, NoReplacement()),
        (0, NoReplacement()),
        ({}, NoReplacement()),
        ({"replacement": "returns"}, Rename("returns")),
        ({"replacement": "returns", "message": "Use returns"}, RenameWithMessage("returns", "Use returns")),
        ({"replacement": False, "message": "Not here"}, NoReplacement("Not here")),
        ({"message": "Gone"}, NoReplacement("Gone")),
    ],
)
def test_resolve_preference_variants(raw, expected) -> None:
    assert resolve_preference(raw) == expected


@pytest.mark.parametrize("raw", [True, 5, 1.5, ["param"], {"replacement": 3}])
def test_resolve_preference_rejects_malformed_values(raw) -> None:
    assert resolve_preference(raw) is None


def _resolver(
    *,
    defined: list[str] | None = None,
    preference: dict[str, object] | None = None,
    structured: dict[str, object] | None = None,
    jsx: bool = False,
    mode: str = "typescript",
) -> PolicyResolver:
    options = RuleOptions(definedTags=defined or [], jsxTags=jsx)
    settings = TagCheckSettings(
        mode=mode,
        tagNamePreference=preference or {},
        structuredTags=structured or {},
    )
    return PolicyResolver(build_naming_policy(options, settings))


def test_builtin_and_defined_names_are_valid() -> None:
    resolver = _resolver(defined=["customTag"])
    assert resolver.resolve("param").kind is ResolutionKind.VALID
    assert resolver.resolve("customTag").kind is ResolutionKind.VALID
    assert resolver.resolve("notATag").kind is ResolutionKind.INVALID


@pytest.mark.parametrize(
    ("mode", "name", "canonical"),
    [
        ("typescript", "arg", "param"),
        ("typescript", "argument", "param"),
        ("jsdoc", "return", "returns"),
        ("closure", "constructor", "class"),
        ("permissive", "virtual", "abstract"),
        ("jsdoc", "desc", "description"),
    ],
)
def test_mode_synonyms_prefer_canonical_name(mode: str, name: str, canonical: str) -> None:
    resolution = _resolver(mode=mode).resolve(name)
    assert resolution.kind is ResolutionKind.PREFERRED
    assert resolution.preferred_name == canonical
    assert resolution.message is None


def test_canonical_names_never_steered() -> None:
    resolver = _resolver(mode="permissive")
    for name in ("param", "returns", "class", "abstract", "template", "suppress"):
        assert resolver.resolve(name).kind is ResolutionKind.VALID


def test_tag_prefixed_keys_are_looked_up_by_bare_name() -> None:
    resolver = _resolver(preference={"tag foo": "bar", "tag constructor": "class"})
    foo = resolver.resolve("foo")
    assert foo.kind is ResolutionKind.PREFERRED
    assert foo.preferred_name == "bar"
    assert resolver.resolve("bar").kind is ResolutionKind.VALID
    assert resolver.resolve("constructor").preferred_name == "class"
    assert resolver.resolve("tag foo").kind is ResolutionKind.INVALID


def test_tag_prefixed_key_wins_over_bare_key() -> None:
    resolver = _resolver(preference={"tag todo": False, "todo": "note"})
    assert resolver.resolve("todo").kind is ResolutionKind.BLOCKED
    resolver = _resolver(preference={"todo": False, "tag todo": "note"})
    assert resolver.resolve("todo").preferred_name == "note"


def test_configured_replacement_stays_valid_over_synonym() -> None:
    resolver = _resolver(preference={"returns": "return"})
    assert resolver.resolve("return").kind is ResolutionKind.VALID
    returns = resolver.resolve("returns")
    assert returns.kind is ResolutionKind.PREFERRED
    assert returns.preferred_name == "return"


def test_explicit_preference_overrides_synonym_target() -> None:
    resolver = _resolver(preference={"arg": "argument"})
    assert resolver.resolve("arg").preferred_name == "argument"
    assert resolver.resolve("argument").kind is ResolutionKind.VALID


def test_mode_vocabulary_changes_allowed_names() -> None:
    assert _resolver(mode="jsdoc").resolve("template").kind is ResolutionKind.INVALID
    assert _resolver(mode="typescript").resolve("template").kind is ResolutionKind.VALID
    assert _resolver(mode="closure").resolve("suppress").kind is ResolutionKind.VALID
    assert _resolver(mode="typescript").resolve("suppress").kind is ResolutionKind.INVALID


def test_structured_and_replacement_names_join_the_allow_list() -> None:
    resolver = _resolver(
        preference={"customOld": "customNew"},
        structured={"widget": {"required": ["name"]}},
    )
    assert resolver.resolve("widget").kind is ResolutionKind.VALID
    assert resolver.resolve("customNew").kind is ResolutionKind.VALID
    resolution = resolver.resolve("customOld")
    assert resolution.kind is ResolutionKind.PREFERRED
    assert resolution.preferred_name == "customNew"
    assert resolution.message is None


def test_preference_with_custom_message() -> None:
    resolver = _resolver(
        preference={"return": {"replacement": "returns", "message": "Prefer returns."}}
    )
    resolution = resolver.resolve("return")
    assert resolution.kind is ResolutionKind.PREFERRED
    assert resolution.preferred_name == "returns"
    assert resolution.message == "Prefer returns."


def test_blocked_tags_carry_default_or_custom_message() -> None:
    resolver = _resolver(
        preference={"todo": False, "ignore": {"message": "Do not ignore."}}
    )
    todo = resolver.resolve("todo")
    assert todo.kind is ResolutionKind.BLOCKED
    assert todo.message == "Blacklisted tag found (`@todo`)"
    ignore = resolver.resolve("ignore")
    assert ignore.kind is ResolutionKind.BLOCKED
    assert ignore.message == "Do not ignore."


def test_self_mapping_is_valid_as_is() -> None:
    resolver = _resolver(preference={"param": "param"})
    assert resolver.resolve("param").kind is ResolutionKind.VALID


def test_jsx_exemption_requires_option() -> None:
    assert _resolver(jsx=True).resolve("jsxRuntime").kind is ResolutionKind.EXEMPT
    assert _resolver(jsx=True).is_exempt("jsx")
    assert _resolver(jsx=False).resolve("jsxRuntime").kind is ResolutionKind.INVALID
    assert not _resolver(jsx=True).is_exempt("param")


def test_malformed_preferences_reported_once_and_kept_allowed() -> None:
    messages: list[str] = []
    settings = TagCheckSettings(tagNamePreference={"oddOne": 5, "oddTwo": True, "arg": "param"})
    policy = build_naming_policy(
        RuleOptions(), settings, on_settings_error=messages.append
    )
    assert messages == [INVALID_PREFERENCE_MESSAGE]
    resolver = PolicyResolver(policy)
    assert resolver.resolve("oddOne").kind is ResolutionKind.VALID
    assert resolver.resolve("arg").kind is ResolutionKind.PREFERRED
    assert "oddTwo" in resolver.allowed_names
