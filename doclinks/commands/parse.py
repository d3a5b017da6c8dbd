"""Komenda: doclinks parse - first sentence, body i tagi blokowe komentarza."""

from __future__ import annotations

import argparse
import json

from rich import box
from rich.table import Table

from doc_model import Link
from doc_parser import parse
from doclinks._config import make_console
from doclinks._input import add_input_arguments, read_comment
from doclinks._serialize import doc_to_dict


def run(args: argparse.Namespace) -> None:
    console = make_console()
    doc = parse(read_comment(args))

    if args.json_output:
        print(json.dumps(doc_to_dict(doc), ensure_ascii=False, indent=2))
        return

    console.print(f"[bold]First sentence:[/bold] {doc.first_sentence.value!r}")
    if doc.body is None:
        console.print("[bold]Body:[/bold] [dim](brak)[/dim]")
    else:
        console.print(f"[bold]Body:[/bold] {doc.body.value!r}")

    if not doc.block_tags:
        console.print("[dim]Brak tagów blokowych.[/dim]")
        return

    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Tag",     style="yellow", no_wrap=True)
    table.add_column("Wartość")
    table.add_column("Cel",     style="cyan")
    table.add_column("Etykieta", style="dim")

    for tag in doc.block_tags:
        if isinstance(tag, Link):
            table.add_row(tag.name, repr(tag.value), tag.target, repr(tag.label))
        else:
            table.add_row(tag.name, repr(tag.value), "", "")

    console.print(table)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "parse",
        help="Dzieli komentarz na first sentence, body i tagi blokowe.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""\
Strukturyzuje komentarz:
  first sentence  tekst do pierwszej pustej linii lub tagu blokowego
  body            tekst po pustej linii, przed tagami blokowymi
  tagi blokowe    linie "@name value" wraz z liniami kontynuacji

Przykłady:
  doclinks parse -e 'Pierwsze.\\n\\nTreść.\\n@param x wartość'
  doclinks parse --file komentarz.txt --json-output
        """,
    )
    add_input_arguments(p)
    p.set_defaults(func=run)
