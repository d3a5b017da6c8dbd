"""
type_model/erasure.py - porównywanie typów parametrów na poziomie erasure.

erase("java.util.List<java.lang.String>") -> "java.util.List"
erase("String ...")                       -> "String[]"
"""

from __future__ import annotations


def erase(type_name: str) -> str:
    """Usuwa białe znaki i argumenty generyczne; varargs zamienia na tablicę."""
    compact = "".join(type_name.split())
    out: list[str] = []
    depth = 0
    for c in compact:
        if c == "<":
            depth += 1
        elif c == ">":
            depth = max(depth - 1, 0)
        elif depth == 0:
            out.append(c)
    erased = "".join(out)
    if erased.endswith("..."):
        erased = erased[:-3] + "[]"
    return erased


def same_erasure(referenced: str, declared: str) -> bool:
    """
    Czy typ podany w linku odpowiada zadeklarowanemu typowi parametru.

    Nazwa niekwalifikowana (lub częściowo kwalifikowana, np. "Map.Entry")
    pasuje do deklaracji o tym samym sufiksie: "String" ~ "java.lang.String".
    """
    ref  = erase(referenced)
    decl = erase(declared)
    return ref == decl or decl.endswith("." + ref)


def split_params(params: str) -> tuple[str, ...]:
    """Dzieli listę typów po przecinkach poza nawiasami <>."""
    if not params.strip():
        return ()
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for c in params:
        if c == "<":
            depth += 1
        elif c == ">":
            depth -= 1
        if c == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(c)
    parts.append("".join(current).strip())
    return tuple(parts)
