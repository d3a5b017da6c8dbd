"""
link_resolver - rozwiązywanie odnośników {@link ...} / @see w modelu programu.

Interfejs publiczny:
    LinkResolver        - resolver dla komentarzy jednego typu
    resolve             - skrót LinkResolver(context).resolve(raw_target)
    ResolvedLink        - (element, label)
    generate_docs       - przebieg generacji dla całego modelu
    GenerationReport, ElementError, LinkResolutionError, ResolutionErrorCode

Typowe użycie:
    from link_resolver import LinkResolver
    from type_model import TypeModel

    model    = TypeModel.from_file("model.json")
    resolver = LinkResolver(model.context("io.vertx.core.Vertx"))
    link     = resolver.resolve("#close() zamyka instancję")
    print(link.element.kind, link.element, repr(link.label))
"""

from .types import (
    ResolutionErrorCode,
    LinkResolutionError,
    ElementError,
    GenerationReport,
)
from .target import TargetRef, TargetSyntaxError, parse_target
from .resolver import LinkResolver, ResolvedLink, resolve
from .generation import element_id, generate_docs

__all__ = [
    "ResolutionErrorCode",
    "LinkResolutionError",
    "ElementError",
    "GenerationReport",
    "TargetRef",
    "TargetSyntaxError",
    "parse_target",
    "LinkResolver",
    "ResolvedLink",
    "resolve",
    "element_id",
    "generate_docs",
]
