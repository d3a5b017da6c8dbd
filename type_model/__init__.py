"""
type_model - migawka modelu programu, względem której rozwiązywane są linki.

Interfejs publiczny:
    TypeModel      - indeks typów (from_file / from_dict)
    TypeInfo, MethodInfo
    TypeContext    - interfejs widoku typu dokumentowanego
    TypeScope      - implementacja TypeContext nad TypeModel
    ElementKind, ResolvedElement
    PropertyKind, property_kind_vars

Typowe użycie:
    from type_model import TypeModel

    model   = TypeModel.from_file("model.json")
    context = model.context("io.vertx.core.Vertx")
"""

from .elements import ElementKind, ResolvedElement
from .erasure import erase, same_erasure, split_params
from .model import ModelLoadError, MethodInfo, TypeInfo, TypeModel
from .context import TypeContext, TypeScope
from .property_kind import PropertyKind, property_kind_vars
from .schema import TYPE_MODEL_SCHEMA

__all__ = [
    "ElementKind",
    "ResolvedElement",
    "erase",
    "same_erasure",
    "split_params",
    "ModelLoadError",
    "MethodInfo",
    "TypeInfo",
    "TypeModel",
    "TypeContext",
    "TypeScope",
    "PropertyKind",
    "property_kind_vars",
    "TYPE_MODEL_SCHEMA",
]
