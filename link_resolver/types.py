"""
link_resolver/types.py - kody błędów, wyjątek i raport przebiegu generacji.

LinkResolutionError - cel linku nie istnieje, jest niejednoznaczny lub
    ma niepoprawną składnię; niesie surowy cel i element-właściciela.
ElementError        - błąd przypisany do dokumentowanego elementu.
GenerationReport    - wynik przebiegu: docs, errors, is_valid.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from doc_model import Doc


class ResolutionErrorCode(StrEnum):
    """Stałe kody błędów rozwiązywania linków."""
    NOT_FOUND    = "E_LINK_NOT_FOUND"
    AMBIGUOUS    = "E_LINK_AMBIGUOUS"
    MALFORMED    = "E_LINK_MALFORMED"
    TYPE_UNKNOWN = "E_TYPE_UNKNOWN"


class LinkResolutionError(Exception):
    """
    Nie udało się rozwiązać celu linku.

    - code:       ResolutionErrorCode
    - raw_target: dosłowny tekst odnośnika z komentarza
    - owner:      identyfikator elementu, którego komentarz zawiera link
    - candidates: sygnatury kandydatów (dla AMBIGUOUS)
    """

    def __init__(
        self,
        code: ResolutionErrorCode,
        raw_target: str,
        owner: str,
        reason: str,
        candidates: tuple[str, ...] = (),
    ) -> None:
        self.code = code
        self.raw_target = raw_target
        self.owner = owner
        self.reason = reason
        self.candidates = candidates
        super().__init__(
            f"{owner}: nie można rozwiązać linku '{raw_target.strip()}' ({reason})"
        )


@dataclass(slots=True)
class ElementError:
    """
    Błąd dokumentacji pojedynczego elementu.

    - element:    identyfikator elementu, np. "io.vertx.Foo#bar(int)"
    - code:       ResolutionErrorCode
    - raw_target: dosłowny tekst odnośnika
    - message:    czytelny opis błędu
    - candidates: sygnatury kandydatów (dla AMBIGUOUS)
    """
    element: str
    code: ResolutionErrorCode
    raw_target: str
    message: str
    candidates: list[str] = field(default_factory=list)

    @classmethod
    def from_exception(cls, exc: LinkResolutionError) -> ElementError:
        return cls(
            element=exc.owner,
            code=exc.code,
            raw_target=exc.raw_target,
            message=str(exc),
            candidates=list(exc.candidates),
        )


@dataclass(slots=True)
class GenerationReport:
    """
    Wynik przebiegu generacji dokumentacji.

    - docs:   element -> Doc z rozwiązanymi linkami (tylko elementy bez błędów)
    - errors: błędy elementów, które nie przeszły
    """
    docs: dict[str, Doc] = field(default_factory=dict)
    errors: list[ElementError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def failed_elements(self) -> list[str]:
        return list(dict.fromkeys(e.element for e in self.errors))
