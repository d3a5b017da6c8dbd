"""
doc_parser/tokenizer.py - podział surowego komentarza na tokeny.

tokenize(text) -> list[Token]

Gramatyka (jedno przejście, bez zagnieżdżania tagów inline):
  - "\\n" (lub "\\r\\n") poza tagiem inline      -> LineBreak
  - "{@" ... pierwszy nieeskejpowany "}"        -> InlineTag (także przez
                                                  łamania linii)
  - każdy inny ciąg znaków do "{@" / łamania    -> Text

Tokenizer nigdy nie zgłasza błędu: niedomknięte "{@..." oraz "{@}" bez
nazwy zostają zwykłym tekstem.
"""

from __future__ import annotations

from doc_model.tags import make_tag
from doc_model.tokens import InlineTag, LineBreak, Text, Token

_INLINE_OPEN  = "{@"
_INLINE_CLOSE = "}"
_ESCAPE       = "\\"


def tokenize(text: str) -> list[Token]:
    tokens: list[Token] = []
    n = len(text)
    i = 0
    run_start = 0  # początek bieżącego fragmentu Text
    close_at = -1     # ostatni znaleziony "}"; obowiązuje każde "{@" przed nim
    unclosed = False  # brak "}" do końca tekstu: dalsze "{@" to literały

    def flush(end: int) -> None:
        if end > run_start:
            tokens.append(Text(text[run_start:end]))

    while i < n:
        c = text[i]
        if c == "\n" or c == "\r":
            flush(i)
            brk = "\r\n" if text.startswith("\r\n", i) else c
            tokens.append(LineBreak(brk))
            i += len(brk)
            run_start = i
        elif not unclosed and text.startswith(_INLINE_OPEN, i):
            if close_at < i:
                close_at = _find_close(text, i + len(_INLINE_OPEN))
                unclosed = close_at < 0
            token = _read_inline_tag(text, i, close_at)
            if token is None:
                # fallback: "{" zostaje literałem, skanujemy dalej
                i += 1
                continue
            flush(i)
            tokens.append(token)
            i += len(token.value)
            run_start = i
        else:
            i += 1

    flush(n)
    return tokens


def _read_inline_tag(text: str, start: int, end: int) -> InlineTag | None:
    """Tag inline z zakresu [start, end] (od "{@" do zamykającego "}")."""
    name_start = start + len(_INLINE_OPEN)
    if end <= name_start or text[name_start].isspace():
        return None

    name_end = name_start
    while name_end < end and not text[name_end].isspace():
        name_end += 1

    # wartość dosłownie: wiodące spacje i łamania linii zostają
    name  = text[name_start:name_end]
    value = text[name_end:end]
    return InlineTag(text[start:end + 1], make_tag(name, value))


def _find_close(text: str, pos: int) -> int:
    """Indeks pierwszego nieeskejpowanego '}' od pozycji `pos` albo -1."""
    n = len(text)
    while pos < n:
        c = text[pos]
        if c == _ESCAPE:
            pos += 2
            continue
        if c == _INLINE_CLOSE:
            return pos
        pos += 1
    return -1
