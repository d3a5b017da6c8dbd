"""Komenda: doclinks property-kinds - listuje rodzaje właściwości obiektów danych."""

from __future__ import annotations

import argparse

from rich import box
from rich.table import Table

from doclinks._config import make_console
from type_model import property_kind_vars


def _flag(value: bool) -> str:
    return "[green]tak[/green]" if value else "[dim]-[/dim]"


def run(args: argparse.Namespace) -> None:
    console = make_console()
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Zmienna", style="cyan", no_wrap=True)
    table.add_column("Rodzaj",  no_wrap=True)
    table.add_column("Lista",   justify="center")
    table.add_column("Mapa",    justify="center")
    table.add_column("Wartość", justify="center")
    table.add_column("Adder",   justify="center")

    for var, kind in property_kind_vars().items():
        table.add_row(
            var,
            kind.name,
            _flag(kind.is_list()),
            _flag(kind.is_map()),
            _flag(kind.is_value()),
            _flag(kind.is_adder()),
        )

    console.print(table)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "property-kinds",
        help="Listuje rodzaje właściwości (PROP_VALUE, PROP_LIST, ...).",
    )
    p.set_defaults(func=run)
