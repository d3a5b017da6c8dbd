"""
type_model/context.py - widok modelu z perspektywy dokumentowanego typu.

TypeContext - interfejs, o który pyta resolver linków:
  type_name               pełna nazwa typu otaczającego komentarz
  find_types(name)        kandydaci dla nazwy typu (pełnej lub prostej)
  methods_of(type, name)  przeciążenia metody `name` w danym typie

TypeScope - implementacja nad TypeModel (tylko odczyt).
"""

from __future__ import annotations

from typing import Protocol, Sequence

from .model import MethodInfo, TypeInfo, TypeModel


class TypeContext(Protocol):
    @property
    def type_name(self) -> str: ...

    def find_types(self, name: str) -> Sequence[TypeInfo]: ...

    def methods_of(self, type_name: str, name: str) -> Sequence[MethodInfo]: ...


class TypeScope:
    """
    TypeContext dla typu `enclosing` w modelu `model`.

    Kolejność rozwiązywania nazwy typu:
      1. pełna nazwa w modelu
      2. nazwa względem pakietu typu otaczającego
      3. prosta nazwa typu otaczającego (ten sam typ)
      4. wszystkie typy modelu o tej prostej nazwie (może być ich wiele)
    """

    def __init__(self, model: TypeModel, enclosing: TypeInfo) -> None:
        self._model = model
        self._enclosing = enclosing

    @property
    def type_name(self) -> str:
        return self._enclosing.qualified_name

    @property
    def enclosing(self) -> TypeInfo:
        return self._enclosing

    def find_types(self, name: str) -> list[TypeInfo]:
        exact = self._model.lookup_type(name)
        if exact is not None:
            return [exact]

        package = self._enclosing.package
        if package:
            relative = self._model.lookup_type(f"{package}.{name}")
            if relative is not None:
                return [relative]

        if "." in name:
            return []
        if name == self._enclosing.simple_name:
            return [self._enclosing]
        return self._model.types_named(name)

    def methods_of(self, type_name: str, name: str) -> list[MethodInfo]:
        t = self._model.lookup_type(type_name)
        if t is None:
            return []
        return t.methods_named(name)

    def __repr__(self) -> str:
        return f"TypeScope({self.type_name!r})"
