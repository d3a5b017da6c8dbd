"""
link_resolver/generation.py - przebieg generacji dokumentacji dla modelu.

generate_docs(model, type_names=None) -> GenerationReport

Dla każdego typu i każdej metody z komentarzem: parse() + rozwiązanie
linków. Element z nierozwiązywalnym linkiem trafia do report.errors
(wszystkie jego błędne linki), a przebieg idzie dalej z kolejnym elementem.
"""

from __future__ import annotations

from typing import Iterable

from doc_parser.structurer import parse
from type_model.model import TypeInfo, TypeModel

from .resolver import LinkResolver
from .types import ElementError, GenerationReport


def element_id(t: TypeInfo, method_signature: str | None = None) -> str:
    """Identyfikator elementu: "pkg.Type" albo "pkg.Type#m(int)"."""
    if method_signature is None:
        return t.qualified_name
    return f"{t.qualified_name}#{method_signature}"


def _documented(t: TypeInfo) -> Iterable[tuple[str, str]]:
    if t.comment is not None:
        yield element_id(t), t.comment
    for m in t.methods:
        if m.comment is not None:
            yield element_id(t, m.signature), m.comment


def generate_docs(
    model: TypeModel,
    type_names: Iterable[str] | None = None,
) -> GenerationReport:
    """
    Buduje Doc dla każdego udokumentowanego elementu modelu.

    Args:
        model:      migawka modelu programu
        type_names: opcjonalnie ograniczenie do wybranych typów
                    (KeyError dla nieznanej nazwy)
    """
    report = GenerationReport()

    if type_names is None:
        types = list(model)
    else:
        types = []
        for name in type_names:
            t = model.lookup_type(name)
            if t is None:
                raise KeyError(name)
            types.append(t)

    for t in types:
        context = model.context(t.qualified_name)
        for element, comment in _documented(t):
            resolver = LinkResolver(context, owner=element)
            doc = parse(comment)
            errors = resolver.check(doc)
            if errors:
                report.errors.extend(ElementError.from_exception(e) for e in errors)
                continue
            report.docs[element] = resolver.resolve_doc(doc)

    return report
