"""
link_resolver/resolver.py - rozwiązywanie celów linków w modelu programu.

LinkResolver(context, owner).resolve(raw_target) -> ResolvedLink

Polityka:
  - dokładnie jeden pasujący element -> sukces
  - brak dopasowania lub więcej niż jedno -> LinkResolutionError
  - odnośnik bez typu ("#m(...)", "m(...)") zawsze dotyczy typu
    otaczającego komentarz (context.type_name)

Przeciążenia rozróżniane są wyłącznie listą typów parametrów
(erasure, pozycyjnie, dokładna arność).
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from doc_model.doc import Doc, Sentence
from doc_model.tags import Link, Tag, split_target
from doc_model.tokens import InlineTag, Token
from type_model.context import TypeContext
from type_model.elements import ElementKind, ResolvedElement
from type_model.erasure import same_erasure
from type_model.model import MethodInfo

from .target import TargetRef, TargetSyntaxError, parse_target
from .types import LinkResolutionError, ResolutionErrorCode


@dataclass(frozen=True, slots=True)
class ResolvedLink:
    """Rozwiązany element i etykieta (dosłownie, z wiodącymi spacjami)."""
    element: ResolvedElement
    label: str


def _params_match(referenced: tuple[str, ...], declared: tuple[str, ...]) -> bool:
    if len(referenced) != len(declared):
        return False
    return all(same_erasure(r, d) for r, d in zip(referenced, declared))


class LinkResolver:
    """
    Resolver linków dla komentarzy jednego typu.

    Użycie:
        context  = model.context("io.vertx.core.Vertx")
        resolver = LinkResolver(context)
        link     = resolver.resolve("#close() zamknij")
        doc      = resolver.resolve_doc(parse(comment))
    """

    def __init__(self, context: TypeContext, owner: str | None = None) -> None:
        self._context = context
        self._owner = owner or context.type_name

    @property
    def owner(self) -> str:
        return self._owner

    # ------------------------------------------------------------------
    # Publiczny interfejs
    # ------------------------------------------------------------------

    def resolve(self, raw_target: str) -> ResolvedLink:
        """
        Rozwiązuje surową wartość tagu linku.

        Raises:
            LinkResolutionError: cel nie istnieje, jest niejednoznaczny
                                 lub ma niepoprawną składnię
        """
        target, label = split_target(raw_target)
        try:
            ref = parse_target(target)
        except TargetSyntaxError as exc:
            raise self._error(ResolutionErrorCode.MALFORMED, raw_target, str(exc)) from exc

        if ref.is_member:
            element = self._resolve_member(ref, raw_target)
        else:
            element = self._resolve_type(ref.type_name or "", raw_target)
        return ResolvedLink(element, label)

    def resolve_link(self, link: Link) -> Link:
        """Kopia linku z ustawionym elementem docelowym."""
        return link.with_element(self.resolve(link.value).element)

    def resolve_doc(self, doc: Doc) -> Doc:
        """
        Zwraca nowy Doc, w którym wszystkie linki (inline, blokowe oraz inline
        w wartościach tagów blokowych) są rozwiązane. Pierwszy
        nierozwiązywalny link przerywa przetwarzanie.
        """
        body = self._resolve_sentence(doc.body) if doc.body is not None else None
        return replace(
            doc,
            first_sentence=self._resolve_sentence(doc.first_sentence),
            body=body,
            block_tags=tuple(self._resolve_block_tag(t) for t in doc.block_tags),
        )

    def check(self, doc: Doc) -> list[LinkResolutionError]:
        """Zbiera błędy wszystkich linków dokumentu (bez przerywania)."""
        errors: list[LinkResolutionError] = []
        for link in doc.iter_links():
            try:
                self.resolve(link.value)
            except LinkResolutionError as exc:
                errors.append(exc)
        return errors

    # ------------------------------------------------------------------
    # Typy
    # ------------------------------------------------------------------

    def _resolve_type(self, name: str, raw_target: str) -> ResolvedElement:
        candidates = list(self._context.find_types(name))
        if not candidates:
            raise self._error(
                ResolutionErrorCode.NOT_FOUND, raw_target, f"typ '{name}' nie istnieje",
            )
        if len(candidates) > 1:
            raise self._error(
                ResolutionErrorCode.AMBIGUOUS,
                raw_target,
                f"nazwa '{name}' pasuje do {len(candidates)} typów",
                tuple(t.qualified_name for t in candidates),
            )
        t = candidates[0]
        return ResolvedElement(ElementKind.TYPE, t.qualified_name, t.qualified_name)

    # ------------------------------------------------------------------
    # Metody
    # ------------------------------------------------------------------

    def _resolve_member(self, ref: TargetRef, raw_target: str) -> ResolvedElement:
        type_name = self._context.type_name
        if ref.type_name is not None:
            types = list(self._context.find_types(ref.type_name))
            if len(types) != 1:
                raise self._error(
                    ResolutionErrorCode.TYPE_UNKNOWN,
                    raw_target,
                    f"typ '{ref.type_name}' nie istnieje lub jest niejednoznaczny",
                    tuple(t.qualified_name for t in types),
                )
            type_name = types[0].qualified_name

        overloads = list(self._context.methods_of(type_name, ref.member or ""))
        if ref.params is None:
            matches = overloads
        else:
            matches = [m for m in overloads if _params_match(ref.params, m.param_types)]

        if not matches:
            raise self._error(
                ResolutionErrorCode.NOT_FOUND,
                raw_target,
                f"brak metody pasującej do '{_describe(ref)}' w {type_name}",
                tuple(m.signature for m in overloads),
            )
        if len(matches) > 1:
            raise self._error(
                ResolutionErrorCode.AMBIGUOUS,
                raw_target,
                f"'{_describe(ref)}' pasuje do {len(matches)} przeciążeń w {type_name}",
                tuple(m.signature for m in matches),
            )
        return _method_element(type_name, matches[0])

    # ------------------------------------------------------------------
    # Pomocnicze
    # ------------------------------------------------------------------

    def _resolve_tokens(self, tokens: tuple[Token, ...]) -> tuple[Token, ...]:
        out: list[Token] = []
        for token in tokens:
            match token:
                case InlineTag(tag=Link() as link):
                    out.append(token.with_tag(self.resolve_link(link)))
                case _:
                    out.append(token)
        return tuple(out)

    def _resolve_sentence(self, sentence: Sentence) -> Sentence:
        return Sentence(self._resolve_tokens(sentence.tokens))

    def _resolve_block_tag(self, tag: Tag) -> Tag:
        if isinstance(tag, Link):
            tag = self.resolve_link(tag)
        if not tag.tokens:
            return tag
        return tag.with_tokens(self._resolve_tokens(tag.tokens))

    def _error(
        self,
        code: ResolutionErrorCode,
        raw_target: str,
        reason: str,
        candidates: tuple[str, ...] = (),
    ) -> LinkResolutionError:
        return LinkResolutionError(code, raw_target, self._owner, reason, candidates)


def _method_element(type_name: str, method: MethodInfo) -> ResolvedElement:
    return ResolvedElement(ElementKind.METHOD, method.signature, type_name)


def _describe(ref: TargetRef) -> str:
    if ref.params is None:
        return ref.member or ""
    return f"{ref.member}({','.join(ref.params)})"


def resolve(raw_target: str, context: TypeContext) -> ResolvedLink:
    """Skrót: LinkResolver(context).resolve(raw_target)."""
    return LinkResolver(context).resolve(raw_target)
