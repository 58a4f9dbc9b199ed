"""Tagcheck package root."""

from tagcheck.exceptions import InvalidOptionsError, NeverRaise, NeverThrown, TagCheckError
from tagcheck.invariants import never
from tagcheck.rule import TagNameRule, check_tag_names

__all__ = [
    "__version__",
    "InvalidOptionsError",
    "NeverRaise",
    "NeverThrown",
    "TagCheckError",
    "TagNameRule",
    "check_tag_names",
    "never",
]

__version__ = "0.1.0"
