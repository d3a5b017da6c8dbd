"""Komenda: doclinks tokenize - podział komentarza na tokeny."""

from __future__ import annotations

import argparse
import json

from rich import box
from rich.table import Table

from doc_model import InlineTag, LineBreak, Link, Text
from doc_parser import tokenize
from doclinks._config import make_console
from doclinks._input import add_input_arguments, read_comment
from doclinks._serialize import token_to_dict

KIND_STYLE: dict[str, str] = {
    "text":       "white",
    "line_break": "dim",
    "inline_tag": "cyan",
}


def run(args: argparse.Namespace) -> None:
    console = make_console()
    text = read_comment(args)
    tokens = tokenize(text)

    if args.json_output:
        print(json.dumps([token_to_dict(t) for t in tokens], ensure_ascii=False, indent=2))
        return

    if not tokens:
        console.print("[dim](brak tokenów)[/dim]")
        return

    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("#",         style="dim", justify="right")
    table.add_column("Rodzaj",    no_wrap=True)
    table.add_column("Wartość")
    table.add_column("Tag",       style="yellow", no_wrap=True)
    table.add_column("Wartość tagu")

    for i, token in enumerate(tokens):
        style = KIND_STYLE[token.kind]
        match token:
            case Text() | LineBreak():
                tag_name, tag_value = "", ""
            case InlineTag(tag=tag):
                tag_name = f"{tag.name} (link)" if isinstance(tag, Link) else tag.name
                tag_value = repr(tag.value)
        table.add_row(
            str(i),
            f"[{style}]{token.kind}[/{style}]",
            repr(token.value),
            tag_name,
            tag_value,
        )

    console.print(table)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "tokenize",
        help="Dzieli komentarz na tokeny (tekst, łamanie linii, tag inline).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""\
Dzieli surowy komentarz na tokeny: Text, LineBreak, InlineTag.
Sklejenie wartości tokenów odtwarza tekst wejściowy.

Przykłady:
  doclinks tokenize -e 'abc{@def}\\nghi{@jkl mno}\\n'
  doclinks tokenize --file komentarz.txt --json-output
        """,
    )
    add_input_arguments(p)
    p.set_defaults(func=run)
