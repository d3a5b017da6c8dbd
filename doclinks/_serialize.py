"""Serializacja tokenów, tagów i Doc do słowników JSON (wyjście --json-output)."""

from __future__ import annotations

from typing import Any

from doc_model import Doc, InlineTag, Link, Sentence, Tag, Token


def tag_to_dict(tag: Tag) -> dict[str, Any]:
    out: dict[str, Any] = {"name": tag.name, "value": tag.value}
    if isinstance(tag, Link):
        out["target"] = tag.target
        out["label"] = tag.label
        if tag.element is not None:
            out["element"] = {
                "kind": str(tag.element.kind),
                "signature": tag.element.signature,
                "owner": tag.element.owner,
            }
    return out


def token_to_dict(token: Token) -> dict[str, Any]:
    out: dict[str, Any] = {"kind": str(token.kind), "value": token.value}
    if isinstance(token, InlineTag):
        out["tag"] = tag_to_dict(token.tag)
    return out


def sentence_to_dict(sentence: Sentence | None) -> dict[str, Any] | None:
    if sentence is None:
        return None
    return {
        "value": sentence.value,
        "tokens": [token_to_dict(t) for t in sentence.tokens],
    }


def doc_to_dict(doc: Doc) -> dict[str, Any]:
    return {
        "first_sentence": sentence_to_dict(doc.first_sentence),
        "body": sentence_to_dict(doc.body),
        "block_tags": [tag_to_dict(t) for t in doc.block_tags],
    }
