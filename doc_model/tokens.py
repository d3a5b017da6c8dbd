"""
doc_model/tokens.py - tokeny komentarza dokumentacyjnego.

Zamknięta suma wariantów:
  Text       - ciągły fragment tekstu (bez łamań linii i tagów inline)
  LineBreak  - pojedyncze łamanie linii ("\\n" lub "\\r\\n")
  InlineTag  - cały zakres {@name value} wraz z rozpoznanym tagiem

Sklejenie wartości `value` wszystkich tokenów odtwarza tekst źródłowy
(tokenizacja bezstratna).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import ClassVar

from .tags import Tag


class TokenKind(StrEnum):
    """Rodzaj tokenu."""
    TEXT       = "text"
    LINE_BREAK = "line_break"
    INLINE_TAG = "inline_tag"


class _TokenBase:
    __slots__ = ()

    kind: ClassVar[TokenKind]

    def is_text(self) -> bool:
        return self.kind is TokenKind.TEXT

    def is_line_break(self) -> bool:
        return self.kind is TokenKind.LINE_BREAK

    def is_inline_tag(self) -> bool:
        return self.kind is TokenKind.INLINE_TAG


@dataclass(frozen=True, slots=True)
class Text(_TokenBase):
    value: str

    kind: ClassVar[TokenKind] = TokenKind.TEXT


@dataclass(frozen=True, slots=True)
class LineBreak(_TokenBase):
    value: str = "\n"

    kind: ClassVar[TokenKind] = TokenKind.LINE_BREAK


@dataclass(frozen=True, slots=True)
class InlineTag(_TokenBase):
    """
    Tag inline: value to dosłowny zakres od '{' do '}' włącznie,
    tag to sparsowana para nazwa/wartość (Tag albo Link).
    """
    value: str
    tag: Tag

    kind: ClassVar[TokenKind] = TokenKind.INLINE_TAG

    def with_tag(self, tag: Tag) -> InlineTag:
        """Kopia tokenu z podmienionym tagiem (np. po rozwiązaniu linku)."""
        return replace(self, tag=tag)


# Token w kolejności dokumentu.
type Token = Text | LineBreak | InlineTag
