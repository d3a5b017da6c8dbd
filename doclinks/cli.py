"""
doclinks - narzędzie CLI do dokumentacji z komentarzy.

Użycie:
  doclinks <komenda> [opcje]

Komendy:
  tokenize        Dzieli komentarz na tokeny (tekst, łamanie linii, tag inline).
  parse           Dzieli komentarz na first sentence, body i tagi blokowe.
  resolve         Rozwiązuje linki w komentarzach modelu programu (JSON).
  property-kinds  Listuje rodzaje właściwości obiektów danych.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 - wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from doclinks.commands import tokenize as cmd_tokenize
from doclinks.commands import parse as cmd_parse
from doclinks.commands import resolve as cmd_resolve
from doclinks.commands import property_kinds as cmd_property_kinds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="doclinks",
        description="doclinks - dokumentacja z komentarzy i rozwiązywanie linków.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="doclinks 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_tokenize.add_parser(subparsers)
    cmd_parse.add_parser(subparsers)
    cmd_resolve.add_parser(subparsers)
    cmd_property_kinds.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
