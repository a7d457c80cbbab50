"""Command-line entry points for the film, cinema and schedule listings."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .cinemas import CinemaCatalog
from .films import FilmCatalog
from .schedule import Schedule

SEPARATOR = "----------"


def _fail(error: OSError) -> int:
    print(f"error: {error}", file=sys.stderr)
    return 1


def films_main(argv: Optional[Sequence[str]] = None) -> int:
    """List the films, sort them by name, save them and list them again."""
    parser = argparse.ArgumentParser(description="List and sort films.")
    parser.add_argument("source", nargs="?", default="filmes.txt")
    parser.add_argument("target", nargs="?", default="filmes.txt.out")
    args = parser.parse_args(argv)

    films = FilmCatalog()
    try:
        films.load(args.source)
    except OSError as error:
        return _fail(error)
    print(SEPARATOR)
    films.show()
    films.sort()
    try:
        films.save(args.target)
    except OSError as error:
        return _fail(error)
    print(SEPARATOR)
    films.show()
    print(SEPARATOR)
    return 0


def cinemas_main(argv: Optional[Sequence[str]] = None) -> int:
    """List the cinemas, sort them by name, save them and list them again."""
    parser = argparse.ArgumentParser(description="List and sort cinemas.")
    parser.add_argument("source", nargs="?", default="cinemas.txt")
    parser.add_argument("target", nargs="?", default="cinemas.txt.out")
    args = parser.parse_args(argv)

    cinemas = CinemaCatalog()
    try:
        cinemas.load(args.source)
    except OSError as error:
        return _fail(error)
    print(SEPARATOR)
    cinemas.show()
    cinemas.sort()
    try:
        cinemas.save(args.target)
    except OSError as error:
        return _fail(error)
    print(SEPARATOR)
    cinemas.show()
    print(SEPARATOR)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the schedule of every cinema, cinemas sorted by name."""
    parser = argparse.ArgumentParser(description="Show the cinema schedule.")
    parser.add_argument("films", nargs="?", default="filmes.txt")
    parser.add_argument("cinemas", nargs="?", default="cinemas.txt")
    parser.add_argument("schedule", nargs="?", default="programacao.txt")
    args = parser.parse_args(argv)

    films = FilmCatalog()
    cinemas = CinemaCatalog()
    schedule = Schedule()
    try:
        films.load(args.films)
        cinemas.load(args.cinemas)
        cinemas.sort()
        schedule.load(args.schedule, cinemas, films)
    except OSError as error:
        return _fail(error)
    print(SEPARATOR)
    schedule.show()
    print(SEPARATOR)
    return 0


if __name__ == "__main__":
    sys.exit(main())