"""
doc_model/tags.py - tagi dokumentacji: @name value.

Tag   - para nazwa/wartość; równość strukturalna (name, value);
        tokens - wartość tagu blokowego podzielona na tokeny (tagi inline
                 w opisie @param, @return itp.), poza porównaniem
Link  - wariant tagu wskazujący element programu:
          target  - surowy tekst celu (np. "#method(String,int)")
          label   - reszta wartości po celu, dosłownie (z wiodącymi spacjami)
          element - rozwiązany element modelu (None przed rozwiązaniem)

make_tag(name, value, block) wybiera wariant na podstawie nazwy tagu.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from type_model.elements import ResolvedElement

    from .tokens import Token

# Tagi inline traktowane jako odnośniki
LINK_TAG_NAMES: frozenset[str] = frozenset({"link", "linkplain"})

# Tag blokowy @see jest odnośnikiem, o ile nie jest cytatem ani kotwicą HTML
SEE_TAG_NAME = "see"


@dataclass(frozen=True, slots=True)
class Tag:
    """Tag @name value. Wartość przechowywana dosłownie, bez przycinania."""
    name: str
    value: str
    tokens: tuple[Token, ...] = field(default=(), compare=False, repr=False)

    @property
    def is_link(self) -> bool:
        return False

    def inline_links(self) -> list[Link]:
        """Linki inline zagnieżdżone w wartości tagu blokowego."""
        return [
            t.tag for t in self.tokens
            if t.is_inline_tag() and isinstance(t.tag, Link)
        ]

    def with_tokens(self, tokens: tuple[Token, ...]) -> Tag:
        return replace(self, tokens=tokens)


@dataclass(frozen=True, slots=True)
class Link(Tag):
    target: str = ""
    label: str = ""
    element: ResolvedElement | None = field(default=None, compare=False)

    @classmethod
    def of(cls, name: str, value: str) -> Link:
        """Buduje Link z wartości tagu, dzieląc ją na cel i etykietę."""
        target, label = split_target(value)
        return cls(name=name, value=value, target=target, label=label)

    @property
    def is_link(self) -> bool:
        return True

    @property
    def is_resolved(self) -> bool:
        return self.element is not None

    def with_element(self, element: ResolvedElement) -> Link:
        return replace(self, element=element)


def split_target(value: str) -> tuple[str, str]:
    """
    Dzieli wartość tagu linku na (cel, etykieta).

    Cel zaczyna się po wiodących białych znakach. Nawiasy listy parametrów
    mogą zawierać spacje ("method(String, int)"); granicą celu jest pierwszy
    biały znak po zamykającym ')' (lub po nazwie, gdy nawiasu brak).
    Etykieta to cała reszta wartości, bez przycinania. Niedomknięty nawias
    zostawia całą resztę w celu - błąd zgłosi dopiero resolver.
    """
    n = len(value)
    i = 0
    while i < n and value[i].isspace():
        i += 1
    start = i

    while i < n and not value[i].isspace() and value[i] != "(":
        i += 1

    if i < n and value[i] == "(":
        depth = 0
        while i < n:
            c = value[i]
            i += 1
            if c == "(":
                depth += 1
            elif c == ")":
                depth -= 1
                if depth == 0:
                    break
        if depth != 0:
            return value[start:], ""
        while i < n and not value[i].isspace():
            i += 1

    return value[start:i], value[i:]


def _is_reference(value: str) -> bool:
    text = value.strip()
    return bool(text) and not text.startswith(('"', "<"))


def make_tag(
    name: str,
    value: str,
    block: bool = False,
    tokens: tuple[Token, ...] = (),
) -> Tag:
    """
    Zwraca Link dla tagów odnośników, w pozostałych przypadkach zwykły Tag.

      inline: {@link ...}, {@linkplain ...}
      blok:   @see ... (tylko gdy wartość jest referencją do elementu)

    `tokens` to wartość tagu blokowego po tokenizacji (tagi inline nie
    zagnieżdżają się, więc dla tagów inline zostaje puste).
    """
    if not block and name in LINK_TAG_NAMES:
        return Link.of(name, value)
    if block and name == SEE_TAG_NAME and _is_reference(value):
        return replace(Link.of(name, value), tokens=tokens)
    return Tag(name, value, tokens)
