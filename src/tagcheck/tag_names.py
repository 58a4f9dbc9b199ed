"""Fixed tag-name sets shared by every check."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# https://babeljs.io/docs/en/babel-plugin-transform-react-jsx/
JSX_TAG_NAMES = frozenset(
    {
        "jsx",
        "jsxFrag",
        "jsxImportSource",
        "jsxRuntime",
    }
)

TYPED_TAGS_ALWAYS_UNNECESSARY = frozenset(
    {
        "augments",
        "callback",
        "class",
        "enum",
        "implements",
        "private",
        "property",
        "protected",
        "public",
        "readonly",
        "this",
        "type",
        "typedef",
    }
)

TYPED_TAGS_UNNECESSARY_OUTSIDE_DECLARE = frozenset(
    {
        "abstract",
        "access",
        "class",
        "constant",
        "constructs",
        "default",
        "enum",
        "export",
        "exports",
        "function",
        "global",
        "inherits",
        "instance",
        "interface",
        "member",
        "memberof",
        "memberOf",
        "method",
        "mixes",
        "mixin",
        "module",
        "name",
        "namespace",
        "override",
        "property",
        "requires",
        "static",
        "this",
    }
)

# canonical name -> synonyms
_JSDOC_TAGS: dict[str, tuple[str, ...]] = {
    "abstract": ("virtual",),
    "access": (),
    "alias": (),
    "async": (),
    "augments": ("extends",),
    "author": (),
    "borrows": (),
    "callback": (),
    "class": ("constructor",),
    "classdesc": (),
    "constant": ("const",),
    "constructs": (),
    "copyright": (),
    "default": ("defaultvalue",),
    "deprecated": (),
    "description": ("desc",),
    "enum": (),
    "event": (),
    "example": (),
    "exports": (),
    "external": ("host",),
    "file": ("fileoverview", "overview"),
    "fires": ("emits",),
    "function": ("func", "method"),
    "generator": (),
    "global": (),
    "hideconstructor": (),
    "ignore": (),
    "implements": (),
    "inheritdoc": (),
    "inheritDoc": (),
    "inner": (),
    "instance": (),
    "interface": (),
    "kind": (),
    "lends": (),
    "license": (),
    "listens": (),
    "member": ("var",),
    "memberof": (),
    "memberof!": (),
    "mixes": (),
    "mixin": (),
    "module": (),
    "name": (),
    "namespace": (),
    "override": (),
    "package": (),
    "param": ("arg", "argument"),
    "private": (),
    "property": ("prop",),
    "protected": (),
    "public": (),
    "readonly": (),
    "requires": (),
    "returns": ("return",),
    "see": (),
    "since": (),
    "static": (),
    "summary": (),
    "this": (),
    "throws": ("exception",),
    "todo": (),
    "tutorial": (),
    "type": (),
    "typedef": (),
    "variation": (),
    "version": (),
    "yields": ("yield",),
}

_TYPESCRIPT_ONLY_TAGS: dict[str, tuple[str, ...]] = {
    "import": (),
    "internal": (),
    "overload": (),
    "satisfies": (),
    "template": (),
}

_CLOSURE_ONLY_TAGS: dict[str, tuple[str, ...]] = {
    "define": (),
    "dict": (),
    "export": (),
    "externs": (),
    "final": (),
    "implicitCast": (),
    "modifies": (),
    "noalias": (),
    "nocollapse": (),
    "nocompile": (),
    "noinline": (),
    "nosideeffects": (),
    "polymer": (),
    "polymerBehavior": (),
    "preserve": (),
    "record": (),
    "struct": (),
    "suppress": (),
    "template": (),
    "unrestricted": (),
}


def _flatten(*tables: Mapping[str, tuple[str, ...]]) -> frozenset[str]:
    names: set[str] = set()
    for table in tables:
        for canonical, synonyms in table.items():
            names.add(canonical)
            names.update(synonyms)
    return frozenset(names)


MODE_TAG_NAMES: Mapping[str, frozenset[str]] = MappingProxyType(
    {
        "jsdoc": _flatten(_JSDOC_TAGS),
        "typescript": _flatten(_JSDOC_TAGS, _TYPESCRIPT_ONLY_TAGS),
        "closure": _flatten(_JSDOC_TAGS, _CLOSURE_ONLY_TAGS),
        "permissive": _flatten(_JSDOC_TAGS, _TYPESCRIPT_ONLY_TAGS, _CLOSURE_ONLY_TAGS),
    }
)


def _synonyms(*tables: Mapping[str, tuple[str, ...]]) -> Mapping[str, str]:
    canonical_by_synonym: dict[str, str] = {}
    for table in tables:
        for canonical, synonyms in table.items():
            for synonym in synonyms:
                canonical_by_synonym[synonym] = canonical
    return MappingProxyType(canonical_by_synonym)


# synonym -> canonical name
MODE_SYNONYMS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "jsdoc": _synonyms(_JSDOC_TAGS),
        "typescript": _synonyms(_JSDOC_TAGS, _TYPESCRIPT_ONLY_TAGS),
        "closure": _synonyms(_JSDOC_TAGS, _CLOSURE_ONLY_TAGS),
        "permissive": _synonyms(_JSDOC_TAGS, _TYPESCRIPT_ONLY_TAGS, _CLOSURE_ONLY_TAGS),
    }
)

DEFAULT_MODE = "typescript"


def tag_names_for_mode(mode: str) -> frozenset[str]:
    return MODE_TAG_NAMES.get(mode, MODE_TAG_NAMES[DEFAULT_MODE])


def synonyms_for_mode(mode: str) -> Mapping[str, str]:
    return MODE_SYNONYMS.get(mode, MODE_SYNONYMS[DEFAULT_MODE])
