from __future__ import annotations

from .tokenizer import split_term, tokenize

# Query field name -> backend search API parameter
_BACKEND_FIELDS = {"tag": "tags"}


def to_object(search_text: str) -> dict[str, list[str]]:
    """Parse a search query into a map of backend search field to values.

    Terms without a recognized field prefix are collected under "any".
    """
    obj: dict[str, list[str]] = {}
    for term in tokenize(search_text):
        field, data = split_term(term)
        if not field:
            field, data = "any", term
        obj.setdefault(_BACKEND_FIELDS.get(field, field), []).append(data)
    return obj
