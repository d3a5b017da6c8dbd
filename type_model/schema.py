"""type_model/schema.py - JSON Schema pliku modelu programu."""

from __future__ import annotations

_QUALIFIED_NAME = r"^[A-Za-z_$][\w$]*(\.[A-Za-z_$][\w$]*)*$"
_IDENTIFIER     = r"^[A-Za-z_$][\w$]*$"

TYPE_MODEL_SCHEMA: dict = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["types"],
    "properties": {
        "types": {
            "type": "array",
            "items": {"$ref": "#/$defs/Type"},
        },
    },
    "$defs": {
        "Type": {
            "type": "object",
            "required": ["name"],
            "additionalProperties": False,
            "properties": {
                "name":    {"type": "string", "pattern": _QUALIFIED_NAME},
                "kind":    {"enum": ["class", "interface", "enum", "annotation", "record"]},
                "comment": {"type": ["string", "null"]},
                "methods": {
                    "type": "array",
                    "items": {"$ref": "#/$defs/Method"},
                },
            },
        },
        "Method": {
            "type": "object",
            "required": ["name"],
            "additionalProperties": False,
            "properties": {
                "name":    {"type": "string", "pattern": _IDENTIFIER},
                "params":  {"type": "array", "items": {"type": "string", "minLength": 1}},
                "comment": {"type": ["string", "null"]},
            },
        },
    },
}
