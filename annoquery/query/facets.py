"""Faceted filters for locally loaded annotations.

`generate_faceted_filter` turns a query into a fixed record of facets, each a
list of terms plus the boolean operator used to combine them when filtering.
Terms without a facet of their own land in "any".
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Literal, Mapping, Union

from .duration import parse_since
from .tokenizer import tokenize

log = logging.getLogger(__name__)

Operator = Literal["and", "or"]
Term = Union[str, int]

# Facet name -> operator. Also fixes the key order of the result.
FACET_OPERATORS: dict[str, Operator] = {
    "any": "and",
    "quote": "and",
    "since": "and",
    "tag": "and",
    "text": "and",
    "uri": "or",
    "user": "or",
}

# Fields with a facet of their own. Unlike the backend field set this has no
# "group": group terms are filtered as free text.
_VALUE_FACETS = frozenset({"quote", "tag", "text", "uri", "user"})


@dataclass(frozen=True)
class Facet:
    operator: Operator
    terms: list[Term] = field(default_factory=list)

    def __getitem__(self, key: str) -> Any:
        if key not in ("operator", "terms"):
            raise KeyError(key)
        return getattr(self, key)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class FocusFilter:
    """Filter terms supplied by the caller rather than typed in the query."""

    user: str | None = None


def _focus_user(focus: FocusFilter | Mapping[str, str] | None) -> str | None:
    if focus is None:
        return None
    if isinstance(focus, Mapping):
        return focus.get("user")
    return focus.user


def generate_faceted_filter(
    search_text: str, focus: FocusFilter | Mapping[str, str] | None = None
) -> dict[str, Facet]:
    terms: dict[str, list[Term]] = {name: [] for name in FACET_OPERATORS}
    user = _focus_user(focus)
    if user:
        terms["user"].append(user)

    for token in tokenize(search_text):
        # Raw slicing, not split_term(): a token without a colon yields the
        # token minus its last character as its filter.
        filter_ = token[: token.find(":")]
        value = token[len(filter_) + 1:]

        if filter_ in _VALUE_FACETS:
            terms[filter_].append(value)
        elif filter_ == "since":
            seconds = parse_since(value)
            if seconds is None:
                log.debug("since_term_dropped", extra={"term": token, "field": filter_})
                continue
            terms["since"].append(seconds)
        else:
            terms["any"].append(token)

    return {name: Facet(operator=op, terms=terms[name]) for name, op in FACET_OPERATORS.items()}


def facets_to_dict(facets: dict[str, Facet]) -> dict[str, dict[str, Any]]:
    return {name: facet.to_dict() for name, facet in facets.items()}
