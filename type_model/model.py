"""
type_model/model.py - migawka modelu programu (typy, metody, komentarze).

TypeModel buduje słowniki:
  _by_name:   pełna nazwa typu  -> TypeInfo
  _by_simple: prosta nazwa typu -> list[TypeInfo]

Model jest wypełniany raz, przed konstrukcją jakiegokolwiek Doc, i dalej
tylko czytany (bezpieczny do równoległych odczytów).

Format JSON (zob. schema.TYPE_MODEL_SCHEMA):
    {
        "types": [
            {
                "name":    "io.vertx.core.Vertx",
                "kind":    "interface",
                "comment": "Punkt wejścia ...",
                "methods": [
                    {"name": "close", "params": [], "comment": "..."},
                    {"name": "deployVerticle",
                     "params": ["java.lang.String", "int"]}
                ]
            }
        ]
    }
"""

from __future__ import annotations

import json
import pathlib
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import jsonschema
from jsonschema.exceptions import best_match

from .erasure import erase
from .schema import TYPE_MODEL_SCHEMA

if TYPE_CHECKING:
    from .context import TypeScope


class ModelLoadError(ValueError):
    """Plik modelu nie spełnia schematu TYPE_MODEL_SCHEMA."""

    def __init__(self, message: str, path: str = "/") -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


# ---------------------------------------------------------------------------
# Elementy modelu
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class MethodInfo:
    """
    Metoda typu.

    - name:        prosta nazwa metody
    - param_types: pełne nazwy typów parametrów, w kolejności deklaracji
    - comment:     surowy tekst komentarza (None gdy brak)
    """
    name: str
    param_types: tuple[str, ...] = ()
    comment: str | None = None

    @property
    def signature(self) -> str:
        """Kanoniczna sygnatura: nazwa i typy parametrów po erasure."""
        return f"{self.name}({','.join(erase(p) for p in self.param_types)})"

    def __str__(self) -> str:
        return self.signature


@dataclass(frozen=True, slots=True)
class TypeInfo:
    qualified_name: str
    kind: str = "class"
    methods: tuple[MethodInfo, ...] = ()
    comment: str | None = None

    @property
    def simple_name(self) -> str:
        return self.qualified_name.rsplit(".", 1)[-1]

    @property
    def package(self) -> str:
        head, _, _ = self.qualified_name.rpartition(".")
        return head

    def methods_named(self, name: str) -> list[MethodInfo]:
        """Zbiór przeciążeń o danej nazwie, w kolejności deklaracji."""
        return [m for m in self.methods if m.name == name]


# ---------------------------------------------------------------------------
# TypeModel
# ---------------------------------------------------------------------------

class TypeModel:
    """
    Indeks typów modelu do wyszukiwania przez resolver linków.

    Pełne nazwy typów są unikalne (ModelLoadError przy powtórzeniu).
    """

    def __init__(self, types: list[TypeInfo] | tuple[TypeInfo, ...] = ()) -> None:
        self._by_name: dict[str, TypeInfo] = {}
        self._by_simple: dict[str, list[TypeInfo]] = {}
        for i, t in enumerate(types):
            if t.qualified_name in self._by_name:
                raise ModelLoadError(
                    f"typ '{t.qualified_name}' zdefiniowany wielokrotnie",
                    f"/types/{i}/name",
                )
            self._by_name[t.qualified_name] = t
            self._by_simple.setdefault(t.simple_name, []).append(t)

    def __iter__(self):
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)

    def __contains__(self, qualified_name: object) -> bool:
        return qualified_name in self._by_name

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup_type(self, qualified_name: str) -> TypeInfo | None:
        """Szuka typu po pełnej nazwie."""
        return self._by_name.get(qualified_name)

    def types_named(self, simple_name: str) -> list[TypeInfo]:
        """Wszystkie typy o danej prostej nazwie."""
        return list(self._by_simple.get(simple_name, []))

    def context(self, qualified_name: str) -> TypeScope:
        """Widok TypeContext dla typu dokumentowanego (KeyError gdy brak)."""
        from .context import TypeScope
        enclosing = self._by_name.get(qualified_name)
        if enclosing is None:
            raise KeyError(qualified_name)
        return TypeScope(self, enclosing)

    # ------------------------------------------------------------------
    # Konstruktory fabryczne
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TypeModel":
        """Buduje model ze słownika zgodnego z TYPE_MODEL_SCHEMA."""
        _validate(data)
        return cls([_build_type(t) for t in data.get("types", [])])

    @classmethod
    def from_file(cls, path: str | pathlib.Path) -> "TypeModel":
        """Ładuje model z pliku JSON."""
        try:
            data = json.loads(pathlib.Path(path).read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ModelLoadError(f"niepoprawny JSON: {exc}") from exc
        return cls.from_dict(data)


def _validate(data: dict[str, Any]) -> None:
    """Zgłasza ModelLoadError dla pierwszego naruszenia schematu."""
    validator = jsonschema.Draft202012Validator(TYPE_MODEL_SCHEMA)
    e = best_match(validator.iter_errors(data))
    if e is None:
        return
    path = (
        "/" + "/".join(str(p) for p in e.absolute_path)
        if e.absolute_path
        else "/"
    )
    raise ModelLoadError(e.message, path)


def _build_type(t: dict[str, Any]) -> TypeInfo:
    methods = tuple(
        MethodInfo(
            name=m["name"],
            param_types=tuple(m.get("params", [])),
            comment=m.get("comment"),
        )
        for m in t.get("methods", [])
    )
    return TypeInfo(
        qualified_name=t["name"],
        kind=t.get("kind", "class"),
        methods=methods,
        comment=t.get("comment"),
    )
