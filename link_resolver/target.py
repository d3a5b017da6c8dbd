"""
link_resolver/target.py - składnia celu linku.

Formy celu:
  name(T1,T2)          metoda typu otaczającego
  #name(T1,T2)         j.w.
  #name                metoda typu otaczającego (jedno przeciążenie)
  pkg.Type#name(T1)    metoda innego typu
  pkg.Type / Type      typ
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from type_model.erasure import split_params

_TYPE_NAME_RE   = re.compile(r"^[A-Za-z_$][\w$]*(\.[A-Za-z_$][\w$]*)*$")
_MEMBER_NAME_RE = re.compile(r"^[A-Za-z_$][\w$]*$")
_PARAM_TYPE_RE  = re.compile(r"^[\w$.<>,?\[\]\s]+$")


class TargetSyntaxError(ValueError):
    """Cel linku nie pasuje do żadnej z obsługiwanych form."""


@dataclass(frozen=True, slots=True)
class TargetRef:
    """
    Rozłożony cel linku.

    - type_name: nazwa typu (None = typ otaczający)
    - member:    nazwa metody (None = odnośnik do typu)
    - params:    typy parametrów (None = bez nawiasów)
    """
    type_name: str | None
    member: str | None = None
    params: tuple[str, ...] | None = None

    @property
    def is_member(self) -> bool:
        return self.member is not None


def parse_target(target: str) -> TargetRef:
    if not target:
        raise TargetSyntaxError("pusty cel")

    params: tuple[str, ...] | None = None
    head = target
    if "(" in target or ")" in target:
        head, _, rest = target.partition("(")
        if not rest.endswith(")") or "(" in rest or rest.count(")") != 1:
            raise TargetSyntaxError("niepoprawna lista parametrów")
        params = split_params(rest[:-1])
        for p in params:
            if not p or not _PARAM_TYPE_RE.match(p):
                raise TargetSyntaxError(f"niepoprawny typ parametru '{p}'")

    if "#" in head:
        type_name, _, member = head.partition("#")
        if type_name and not _TYPE_NAME_RE.match(type_name):
            raise TargetSyntaxError(f"niepoprawna nazwa typu '{type_name}'")
        if not _MEMBER_NAME_RE.match(member):
            raise TargetSyntaxError(f"niepoprawna nazwa metody '{member}'")
        return TargetRef(type_name or None, member, params)

    if params is not None:
        if not _MEMBER_NAME_RE.match(head):
            raise TargetSyntaxError(f"niepoprawna nazwa metody '{head}'")
        return TargetRef(None, head, params)

    if not _TYPE_NAME_RE.match(head):
        raise TargetSyntaxError(f"niepoprawna nazwa typu '{head}'")
    return TargetRef(head)
