"""
type_model/property_kind.py - rodzaj właściwości obiektu danych.

property_kind_vars() zwraca za każdym razem nowy słownik
{"PROP_VALUE": PropertyKind.VALUE, ...}, wygodny w szablonach i testach
(prop.kind == PROP_VALUE zamiast porównywania nazw).
"""

from __future__ import annotations

from enum import StrEnum


class PropertyKind(StrEnum):
    VALUE    = "VALUE"     # pojedyncza wartość: setter i opcjonalnie getter
    LIST     = "LIST"      # lista: setter i opcjonalnie getter
    LIST_ADD = "LIST_ADD"  # lista: metoda add i opcjonalnie getter
    MAP      = "MAP"       # mapa: setter i opcjonalnie getter

    def is_list(self) -> bool:
        return self in (PropertyKind.LIST, PropertyKind.LIST_ADD)

    def is_map(self) -> bool:
        return self is PropertyKind.MAP

    def is_value(self) -> bool:
        return self is PropertyKind.VALUE

    def is_adder(self) -> bool:
        return self is PropertyKind.LIST_ADD


def property_kind_vars() -> dict[str, PropertyKind]:
    return {f"PROP_{kind.name}": kind for kind in PropertyKind}
