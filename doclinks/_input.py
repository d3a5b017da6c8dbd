"""Wspólne wczytywanie tekstu komentarza dla komend tokenize / parse."""

from __future__ import annotations

import argparse
import pathlib
import sys

from rich.console import Console

err_console = Console(stderr=True)


def read_comment(args: argparse.Namespace) -> str:
    """Tekst z --file, z argumentu TEXT albo ze stdin ("-")."""
    if args.file:
        path = pathlib.Path(args.file)
        if not path.exists():
            err_console.print(f"[red]Brak pliku:[/red] {path}")
            raise SystemExit(1)
        return path.read_text(encoding="utf-8")

    if args.text is None:
        err_console.print("[red]Podaj TEXT albo --file.[/red]")
        raise SystemExit(1)

    if args.text == "-":
        return sys.stdin.read()

    text = args.text
    if args.escapes:
        text = text.replace("\\n", "\n").replace("\\t", "\t")
    return text


def add_input_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "text",
        nargs="?",
        default=None,
        metavar="TEXT",
        help='Tekst komentarza ("-" = stdin).',
    )
    p.add_argument(
        "--file", "-f",
        default=None,
        metavar="PLIK",
        help="Plik z tekstem komentarza (zamiast TEXT).",
    )
    p.add_argument(
        "--escapes", "-e",
        action="store_true",
        help="Interpretuj \\n i \\t w argumencie TEXT.",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz wynik jako JSON na stdout.",
    )
