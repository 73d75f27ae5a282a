from __future__ import annotations

import re
from typing import FrozenSet, Iterable, List, Optional, Set

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")


def tokenize(line: str) -> List[str]:
    """
    Splits a line on runs of whitespace, dropping empty tokens.
    """
    return line.split()


def split_lines(text: str) -> List[str]:
    """
    Splits text on line feeds only.

    Other characters ``str.splitlines`` treats as breaks (vertical tab,
    form feed, U+2028, ...) stay inside their line. A trailing newline does
    not produce an extra empty line.
    """
    if not text:
        return []
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_characteristics(text: Optional[str]) -> Set[str]:
    """
    Turns a whitespace-delimited characteristic list into a set.
    """
    if not text:
        return set()
    return set(tokenize(text))


def label_set(labels: Optional[Iterable[str]]) -> FrozenSet[str]:
    """
    Collapses an iterable of characteristic labels into a frozenset.

    A bare string is rejected rather than split into characters.
    """
    if labels is None:
        return frozenset()
    if isinstance(labels, str):
        raise TypeError(
            f"expected an iterable of characteristic labels, got str {labels!r}"
        )
    return frozenset(labels)


def parse_int(token: str) -> Optional[int]:
    # ASCII digits with an optional sign; no underscores or other digit scripts.
    if not _INT_TOKEN.fullmatch(token):
        return None
    return int(token)
