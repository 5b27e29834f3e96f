"""Grammar for resource-reference tokens: ``getRes`` ``(`` digit+ ``)``.

Matching is left-to-right and non-overlapping. After a match, scanning
resumes past the closing parenthesis; after a failed attempt at a
position, it resumes one character later.
"""

from __future__ import annotations

from getres_lens.models import TokenSpan

TOKEN_NAME = "getRes"
TOKEN_OPEN = TOKEN_NAME + "("
TOKEN_CLOSE = ")"

_DIGITS = frozenset("0123456789")


def _match_at(line: str, pos: int) -> TokenSpan | None:
    if not line.startswith(TOKEN_OPEN, pos):
        return None
    start = pos + len(TOKEN_OPEN)
    end = start
    while end < len(line) and line[end] in _DIGITS:
        end += 1
    if end == start or not line.startswith(TOKEN_CLOSE, end):
        return None
    return TokenSpan(
        resource_id=line[start:end],
        start=start,
        end=end,
        token_start=pos,
        token_end=end + len(TOKEN_CLOSE),
    )


def find_tokens(line: str) -> list[TokenSpan]:
    spans: list[TokenSpan] = []
    pos = line.find(TOKEN_OPEN)
    while pos != -1:
        span = _match_at(line, pos)
        if span is not None:
            spans.append(span)
            pos = line.find(TOKEN_OPEN, span.token_end)
        else:
            pos = line.find(TOKEN_OPEN, pos + 1)
    return spans


def ends_with_token_open(prefix: str) -> bool:
    return prefix.endswith(TOKEN_OPEN)
