"""
doc_model/doc.py - ustrukturyzowany komentarz dokumentacyjny.

Sentence - ciągły fragment prozy (sekwencja tokenów) z wartością tekstową.
Doc      - first_sentence + opcjonalne body + tagi blokowe w kolejności źródła.

Doc jest niemutowalny; rozwiązanie linków zwraca nową instancję
(link_resolver.LinkResolver.resolve_doc).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .tags import Link, Tag
from .tokens import InlineTag, Token


@dataclass(frozen=True, slots=True)
class Sentence:
    tokens: tuple[Token, ...] = ()

    @property
    def value(self) -> str:
        """Surowy tekst fragmentu (sklejone wartości tokenów)."""
        return "".join(t.value for t in self.tokens)

    def inline_tags(self) -> list[Tag]:
        return [t.tag for t in self.tokens if isinstance(t, InlineTag)]

    def links(self) -> list[Link]:
        return [tag for tag in self.inline_tags() if isinstance(tag, Link)]

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Doc:
    """
    Komentarz rozbity na części.

    - first_sentence: tekst przed pierwszą pustą linią lub tagiem blokowym
                      (zawsze obecny, może być pusty)
    - body:           tekst po pustej linii, przed tagami blokowymi;
                      None gdy brak takiej kontynuacji
    - block_tags:     tagi @name value w kolejności źródła (nazwy mogą się
                      powtarzać)
    """
    first_sentence: Sentence
    body: Sentence | None = None
    block_tags: tuple[Tag, ...] = ()

    @classmethod
    def create(cls, text: str) -> Doc:
        """Parsuje surowy tekst komentarza (zob. doc_parser.parse)."""
        from doc_parser.structurer import parse
        return parse(text)

    @property
    def tokens(self) -> tuple[Token, ...]:
        """Tokeny prozy: najpierw first_sentence, potem body."""
        if self.body is None:
            return self.first_sentence.tokens
        return self.first_sentence.tokens + self.body.tokens

    def block_tags_named(self, name: str) -> list[Tag]:
        return [t for t in self.block_tags if t.name == name]

    def iter_links(self) -> Iterator[Link]:
        """
        Wszystkie linki: inline w prozie, następnie dla każdego tagu blokowego
        on sam (@see) i linki inline z jego wartości.
        """
        for token in self.tokens:
            if isinstance(token, InlineTag) and isinstance(token.tag, Link):
                yield token.tag
        for tag in self.block_tags:
            if isinstance(tag, Link):
                yield tag
            yield from tag.inline_links()

    def links(self) -> list[Link]:
        return list(self.iter_links())
