"""
type_model/elements.py - elementy programu, na które wskazują linki.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ElementKind(StrEnum):
    """Rodzaj rozwiązanego elementu."""
    METHOD = "method"
    TYPE   = "type"


@dataclass(frozen=True, slots=True)
class ResolvedElement:
    """
    Wynik rozwiązania celu linku.

    - kind:      METHOD | TYPE
    - signature: kanoniczna postać, np. "method(java.lang.String,int)"
                 dla metody lub "io.vertx.core.Vertx" dla typu
    - owner:     pełna nazwa typu deklarującego (dla typu: on sam)
    """
    kind: ElementKind
    signature: str
    owner: str

    @property
    def qualified_signature(self) -> str:
        """Np. "io.vertx.core.Vertx#close()"; dla typu równa signature."""
        if self.kind is ElementKind.TYPE:
            return self.signature
        return f"{self.owner}#{self.signature}"

    def __str__(self) -> str:
        return self.signature
