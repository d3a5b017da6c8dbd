"""
doc_parser/structurer.py - podział komentarza na first sentence, body i tagi.

parse(text) -> Doc

Algorytm (na tokenach z tokenizer.tokenize):
  1. Tokeny dzielimy na linie (granicą jest token LineBreak; tag inline
     obejmujący łamanie linii pozostaje w jednej linii).
  2. Pierwsza linia zaczynająca się od "@name" (po opcjonalnych spacjach)
     otwiera sekcję tagów blokowych. Wszystko przed nią to tekst opisowy.
  3. Tekst opisowy do pierwszej pustej linii -> first_sentence,
     reszta (bez pustych linii na brzegach) -> body.
  4. Sekcja tagów: każdy tag obejmuje swoją linię i linie kontynuacji
     aż do następnej linii "@name" lub końca tekstu.

"@" w środku linii nie jest granicą tagu blokowego; "@" bez nazwy
zostaje zwykłym tekstem.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from doc_model.doc import Doc, Sentence
from doc_model.tags import Tag, make_tag
from doc_model.tokens import LineBreak, Text, Token

from .tokenizer import tokenize

# Linia tagu blokowego: opcjonalne wcięcie, "@" i znak nazwy (litera, cyfra, _ - .)
_BLOCK_TAG_START_RE = re.compile(r"^[ \t]*@[\w.-]")

# Nazwa i wartość tagu blokowego (wartość może obejmować wiele linii)
_BLOCK_TAG_RE = re.compile(r"^[ \t]*@([\w.-][^\s{}]*)(.*)$", re.DOTALL)


@dataclass(slots=True)
class _Line:
    """Zakres tokenów jednej linii: [start, end); end wskazuje LineBreak."""
    start: int
    end: int


def parse(text: str) -> Doc:
    tokens = tokenize(text)
    lines = _split_lines(tokens)

    block_at = next(
        (i for i, line in enumerate(lines) if _is_block_tag_line(tokens, line)),
        len(lines),
    )

    first_sentence, body = _split_description(tokens, lines[:block_at])
    block_tags = _parse_block_tags(tokens, lines[block_at:])

    return Doc(
        first_sentence=first_sentence,
        body=body,
        block_tags=tuple(block_tags),
    )


# ---------------------------------------------------------------------------
# Linie
# ---------------------------------------------------------------------------

def _split_lines(tokens: list[Token]) -> list[_Line]:
    lines: list[_Line] = []
    start = 0
    for i, token in enumerate(tokens):
        if isinstance(token, LineBreak):
            lines.append(_Line(start, i))
            start = i + 1
    lines.append(_Line(start, len(tokens)))
    return lines


def _is_blank(tokens: list[Token], line: _Line) -> bool:
    for token in tokens[line.start:line.end]:
        match token:
            case Text(value=value) if not value.strip():
                continue
            case _:
                return False
    return True


def _is_block_tag_line(tokens: list[Token], line: _Line) -> bool:
    if line.start == line.end:
        return False
    match tokens[line.start]:
        case Text(value=value):
            return _BLOCK_TAG_START_RE.match(value) is not None
        case _:
            return False


def _trim_blank(tokens: list[Token], lines: list[_Line]) -> list[_Line]:
    """Obcina puste linie z początku i końca listy."""
    lo, hi = 0, len(lines)
    while lo < hi and _is_blank(tokens, lines[lo]):
        lo += 1
    while hi > lo and _is_blank(tokens, lines[hi - 1]):
        hi -= 1
    return lines[lo:hi]


def _span(tokens: list[Token], lines: list[_Line]) -> tuple[Token, ...]:
    """Tokeny od początku pierwszej do końca ostatniej linii (z łamaniami)."""
    if not lines:
        return ()
    return tuple(tokens[lines[0].start:lines[-1].end])


# ---------------------------------------------------------------------------
# Tekst opisowy
# ---------------------------------------------------------------------------

def _split_description(
    tokens: list[Token],
    lines: list[_Line],
) -> tuple[Sentence, Sentence | None]:
    blank_at = next(
        (i for i, line in enumerate(lines) if _is_blank(tokens, line)),
        None,
    )

    if blank_at is None:
        return Sentence(_span(tokens, lines)), None

    first = Sentence(_span(tokens, lines[:blank_at]))
    rest = _trim_blank(tokens, lines[blank_at:])
    if not rest:
        return first, None
    return first, Sentence(_span(tokens, rest))


# ---------------------------------------------------------------------------
# Tagi blokowe
# ---------------------------------------------------------------------------

def _parse_block_tags(tokens: list[Token], lines: list[_Line]) -> list[Tag]:
    groups: list[list[_Line]] = []
    for line in lines:
        if _is_block_tag_line(tokens, line):
            groups.append([line])
        elif groups:
            groups[-1].append(line)

    tags: list[Tag] = []
    for group in groups:
        # linia tagu nie jest pusta, więc obcinamy tylko końcowe puste linie
        group = _trim_blank(tokens, group)
        raw = "".join(t.value for t in _span(tokens, group))
        m = _BLOCK_TAG_RE.match(raw)
        if m is None:
            continue
        name, value = m.group(1), m.group(2).lstrip()
        tags.append(make_tag(name, value, block=True, tokens=tuple(tokenize(value))))
    return tags
