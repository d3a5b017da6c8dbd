"""
doc_model - struktury danych komentarzy dokumentacyjnych.

Użycie:
  from doc_model import Doc, Sentence, Tag, Link, Text, LineBreak, InlineTag

Moduły:
  tags   - Tag, Link, make_tag, split_target
  tokens - TokenKind, Text, LineBreak, InlineTag, Token
  doc    - Sentence, Doc
"""

from .tags import (
    LINK_TAG_NAMES,
    SEE_TAG_NAME,
    Tag,
    Link,
    make_tag,
    split_target,
)
from .tokens import (
    TokenKind,
    Text,
    LineBreak,
    InlineTag,
    Token,
)
from .doc import (
    Sentence,
    Doc,
)

__all__ = [
    # tags
    "LINK_TAG_NAMES",
    "SEE_TAG_NAME",
    "Tag",
    "Link",
    "make_tag",
    "split_target",
    # tokens
    "TokenKind",
    "Text",
    "LineBreak",
    "InlineTag",
    "Token",
    # doc
    "Sentence",
    "Doc",
]
