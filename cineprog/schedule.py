"""Screenings that tie films to cinema rooms, and the per-cinema schedule."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, Optional, TextIO, Union

from .cinemas import Cinema, CinemaCatalog
from .films import Film, FilmCatalog, _records, _to_int

TIME_SIZE = 60
MAX_SCREENINGS = 100

_FIELDS_PER_RECORD = 5

PathLike = Union[str, Path]


class ScreeningType(Enum):
    """How a film is shown."""

    SUBTITLED = 1
    DUBBED = 2
    SUBTITLED_3D = 3
    DUBBED_3D = 4
    NATIONAL = 5

    @property
    def label(self) -> str:
        """The short tag used in listings."""
        return _LABELS[self]


_LABELS = {
    ScreeningType.SUBTITLED: "LEG",
    ScreeningType.DUBBED: "DUB",
    ScreeningType.SUBTITLED_3D: "3D LEG",
    ScreeningType.DUBBED_3D: "3D DUB",
    ScreeningType.NATIONAL: "NAC",
}


@dataclass
class Screening:
    """One showing of a film in a cinema room; unknown references are None."""

    cinema: Optional[Cinema]
    room: int
    film: Optional[Film]
    kind: int
    time: str

    def describe(self) -> Optional[str]:
        """Return the listing line, or None when the screening type is unknown."""
        try:
            kind = ScreeningType(self.kind)
        except ValueError:
            return None
        if self.film is None:
            raise ValueError(f"screening in room {self.room} refers to an unknown film")
        rating = "LIVRE" if self.film.rating == 0 else str(self.film.rating)
        return (
            f"Sala {self.room}: {self.film.name} | {self.time} | {kind.label} "
            f"| [{rating}] | {self.film.style}"
        )


class Schedule:
    """The screenings of every cinema, listed in the cinema catalogue's order."""

    def __init__(
        self,
        cinemas: Optional[CinemaCatalog] = None,
        screenings: Iterable[Screening] = (),
    ) -> None:
        self.cinemas = cinemas if cinemas is not None else CinemaCatalog()
        self._screenings: list[Screening] = list(screenings)[:MAX_SCREENINGS]

    def __len__(self) -> int:
        return len(self._screenings)

    def __iter__(self) -> Iterator[Screening]:
        return iter(self._screenings)

    def load(self, path: PathLike, cinemas: CinemaCatalog, films: FilmCatalog) -> None:
        """Append the screenings stored in `path`, resolving ids against the catalogues."""
        self.cinemas = cinemas
        for cinema_id, room, film_id, kind, time in _records(path, _FIELDS_PER_RECORD):
            if len(self._screenings) >= MAX_SCREENINGS:
                break
            self._screenings.append(
                Screening(
                    cinema=cinemas.by_id(_to_int(cinema_id)),
                    room=_to_int(room),
                    film=films.by_id(_to_int(film_id)),
                    kind=_to_int(kind),
                    time=time[:TIME_SIZE],
                )
            )

    def show(self, out: Optional[TextIO] = None) -> None:
        """Print each cinema's name followed by its screenings."""
        out = out if out is not None else sys.stdout
        for cinema in self.cinemas:
            print(f"{cinema.name}\n", file=out)
            for screening in self._screenings:
                if screening.cinema is cinema:
                    line = screening.describe()
                    if line is not None:
                        print(line, file=out)
            print(file=out)