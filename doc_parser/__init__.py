"""
doc_parser - tokenizacja i strukturyzacja komentarzy dokumentacyjnych.

Interfejs publiczny:
    tokenize(text) -> list[Token]   bezstratny podział na tokeny
    parse(text)    -> Doc           first sentence / body / tagi blokowe

Typowe użycie:
    from doc_parser import parse

    doc = parse("Pierwsze zdanie.\\n\\nTreść.\\n@since 1.0")
    print(doc.first_sentence.value, doc.block_tags)
"""

from .tokenizer import tokenize
from .structurer import parse

__all__ = [
    "tokenize",
    "parse",
]
