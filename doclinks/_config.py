"""
Konfiguracja CLI przez zmienne środowiskowe.

Zmienne:
  DOCLINKS_MODEL          domyślny plik JSON modelu dla `doclinks resolve`
  DOCLINKS_CONSOLE_WIDTH  szerokość konsoli rich (domyślnie 160)

Opcjonalnie plik .env w katalogu głównym projektu; zmienne ustawione
w środowisku mają pierwszeństwo.
"""

from __future__ import annotations

import os
import pathlib
import sys
from dataclasses import dataclass

from dotenv import load_dotenv
from rich.console import Console

ROOT = pathlib.Path(__file__).resolve().parent.parent

_ENV_MODEL = "DOCLINKS_MODEL"
_ENV_WIDTH = "DOCLINKS_CONSOLE_WIDTH"
DEFAULT_CONSOLE_WIDTH = 160


@dataclass(frozen=True, slots=True)
class Settings:
    model_path: pathlib.Path | None
    console_width: int


def get_settings(env_file: pathlib.Path | None = None) -> Settings:
    load_dotenv(env_file or ROOT / ".env", override=False)

    model = os.getenv(_ENV_MODEL)
    width = os.getenv(_ENV_WIDTH, "")
    try:
        console_width = int(width) if width else DEFAULT_CONSOLE_WIDTH
    except ValueError:
        raise ValueError(f"{_ENV_WIDTH} musi być liczbą całkowitą, podano '{width}'") from None

    return Settings(
        model_path    = pathlib.Path(model) if model else None,
        console_width = console_width,
    )


def load_settings() -> Settings:
    """
    get_settings() dla komend CLI: niepoprawna szerokość konsoli daje
    ostrzeżenie na stderr i szerokość domyślną zamiast błędu.
    """
    try:
        return get_settings()
    except ValueError as exc:
        print(f"Ostrzeżenie: {exc}; przyjęto {DEFAULT_CONSOLE_WIDTH}.", file=sys.stderr)
        model = os.getenv(_ENV_MODEL)
        return Settings(
            model_path    = pathlib.Path(model) if model else None,
            console_width = DEFAULT_CONSOLE_WIDTH,
        )


def make_console(settings: Settings | None = None) -> Console:
    settings = settings or load_settings()
    return Console(width=settings.console_width)
