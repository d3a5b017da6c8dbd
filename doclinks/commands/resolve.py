"""Komenda: doclinks resolve - rozwiązuje linki w komentarzach modelu programu."""

from __future__ import annotations

import argparse
import dataclasses
import json
import pathlib
import sys

from rich import box
from rich.console import Console
from rich.table import Table

from doc_model import Doc
from doclinks._config import load_settings, make_console
from doclinks._serialize import doc_to_dict, tag_to_dict
from link_resolver import GenerationReport, generate_docs
from type_model import ModelLoadError, TypeModel

KIND_STYLE: dict[str, str] = {
    "method": "green",
    "type":   "cyan",
}


def _print_links(console: Console, docs: dict[str, Doc]) -> None:
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Element",  style="bold", no_wrap=True)
    table.add_column("Tag",      style="yellow", no_wrap=True)
    table.add_column("Rodzaj",   no_wrap=True)
    table.add_column("Cel")
    table.add_column("Etykieta", style="dim")

    rows = 0
    for element, doc in docs.items():
        for link in doc.iter_links():
            if link.element is None:
                continue
            style = KIND_STYLE.get(link.element.kind, "white")
            table.add_row(
                element,
                link.name,
                f"[{style}]{link.element.kind}[/{style}]",
                link.element.qualified_signature,
                repr(link.label),
            )
            rows += 1

    if rows:
        console.print(table)
    else:
        console.print("[dim]Brak linków w komentarzach.[/dim]")


def _print_errors(console: Console, report: GenerationReport) -> None:
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Kod",        style="yellow", no_wrap=True)
    table.add_column("Element",    style="cyan", no_wrap=True)
    table.add_column("Odnośnik",   no_wrap=True)
    table.add_column("Komunikat")
    table.add_column("Kandydaci",  style="dim")

    for e in report.errors:
        table.add_row(
            e.code,
            e.element,
            e.raw_target.strip(),
            e.message,
            "\n".join(e.candidates),
        )

    console.print(table)


def _report_to_dict(report: GenerationReport) -> dict:
    return {
        "is_valid": report.is_valid,
        "docs": {
            element: {
                **doc_to_dict(doc),
                "links": [tag_to_dict(link) for link in doc.iter_links()],
            }
            for element, doc in report.docs.items()
        },
        "errors": [dataclasses.asdict(e) for e in report.errors],
    }


def run(args: argparse.Namespace) -> None:
    settings = load_settings()
    console = make_console(settings)

    # --- Model -----------------------------------------------------------
    model_arg = args.model or settings.model_path
    if model_arg is None:
        console.print(
            "[red]Brak pliku modelu:[/red] podaj MODEL albo ustaw DOCLINKS_MODEL."
        )
        raise SystemExit(1)

    model_path = pathlib.Path(model_arg)
    if not model_path.exists():
        console.print(f"[red]Brak pliku modelu:[/red] {model_path}")
        raise SystemExit(1)

    try:
        model = TypeModel.from_file(model_path)
    except ModelLoadError as exc:
        console.print(f"[red]Niepoprawny model:[/red] {exc}")
        raise SystemExit(1)

    print(f"Wczytano {len(model)} typ(ów) z {model_path.name}.", file=sys.stderr)

    # --- Generacja -------------------------------------------------------
    try:
        report = generate_docs(model, args.type or None)
    except KeyError as exc:
        console.print(f"[red]Nieznany typ:[/red] {exc.args[0]}")
        raise SystemExit(1)

    if args.json_output:
        print(json.dumps(_report_to_dict(report), ensure_ascii=False, indent=2))
    else:
        _print_links(console, report.docs)
        if report.is_valid:
            console.print(
                f"[green]OK[/green]  {len(report.docs)} element(ów), "
                f"wszystkie linki rozwiązane."
            )
        else:
            console.print(
                f"[red]BŁĄD[/red]  {len(report.failed_elements)} element(ów) "
                f"z nierozwiązanymi linkami ({len(report.errors)} link(ów))."
            )
            _print_errors(console, report)

    if not report.is_valid:
        sys.exit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "resolve",
        help="Rozwiązuje linki {@link} / @see w komentarzach modelu (JSON).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""\
Parsuje komentarz każdego typu i metody z modelu i rozwiązuje linki:

  #m(T1,T2) / m(T1,T2)   metoda typu otaczającego (przeciążenia po typach)
  pkg.Type#m(T1)         metoda innego typu
  pkg.Type / Type        typ

Element z nierozwiązywalnym linkiem jest raportowany jako błąd,
pozostałe elementy są przetwarzane dalej. Kod wyjścia 1 gdy są błędy.

Domyślny model: zmienna DOCLINKS_MODEL (także z pliku .env).

Przykłady:
  doclinks resolve model.json
  doclinks resolve model.json --type io.vertx.core.Vertx
  doclinks resolve model.json --json-output
        """,
    )
    p.add_argument(
        "model",
        nargs="?",
        default=None,
        metavar="PLIK_MODELU",
        help="Plik JSON z modelem programu (typy, metody, komentarze).",
    )
    p.add_argument(
        "--type", "-t",
        action="append",
        default=[],
        metavar="TYP",
        help="Ogranicz do typu o pełnej nazwie (można podać wielokrotnie).",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz raport jako JSON na stdout.",
    )
    p.set_defaults(func=run)
