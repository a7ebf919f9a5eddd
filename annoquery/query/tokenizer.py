from __future__ import annotations

import re
from typing import Iterator

# Field prefixes understood by the backend search API
FIELDS = frozenset({"group", "quote", "since", "tag", "text", "uri", "user"})

_QUOTES = ('"', "'")

# Same character set as ECMAScript \s
_SPACE_RE = re.compile("[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]")


def split_term(term: str) -> tuple[str | None, str]:
    """Split a search term into (field, data).

    'user:johndoe' -> ('user', 'johndoe')
    'example:text' -> (None, 'example:text')
    """
    idx = term.find(":")
    if idx <= 0:
        return None, term

    field = term[:idx]
    if field not in FIELDS:
        return None, term
    return field, term[idx + 1:]


def remove_surrounding_quotes(text: str) -> str:
    """Strip one pair of quotes, only when first and last characters match.

    'foo' -> foo, "bar" -> bar, 'foo" -> 'foo"
    """
    if len(text) >= 2 and text[0] in _QUOTES and text[0] == text[-1]:
        return text[1:-1]
    return text


def _iter_runs(text: str) -> Iterator[str]:
    # A run is barewords and quoted spans glued together without whitespace,
    # e.g. tag:"a b" is a single run. An unterminated quote ends the run and
    # is skipped.
    n = len(text)
    pos = 0
    while pos < n:
        start = pos
        while pos < n:
            ch = text[pos]
            if ch in _QUOTES:
                close = text.find(ch, pos + 1)
                if close == -1:
                    break
                pos = close + 1
            elif _SPACE_RE.match(ch):
                break
            else:
                pos += 1
        if pos > start:
            yield text[start:pos]
        else:
            pos += 1


def tokenize(search_text: str) -> list[str]:
    """Split a search query into non-empty tokens.

    Text outside quotes is split on whitespace; single or double quoted spans
    are kept whole with the surrounding quotes removed. Quotes around a field
    value are removed too: `tag:"foo bar"` -> `tag:foo bar`.
    """
    tokens: list[str] = []
    for run in _iter_runs(search_text):
        token = remove_surrounding_quotes(run)
        if not token:
            continue
        field, data = split_term(token)
        if field:
            token = field + ":" + remove_surrounding_quotes(data)
        tokens.append(token)
    return tokens
