"""Film records and a catalogue that loads, sorts, shows and saves them."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import Any, Generic, Iterable, Iterator, Optional, Sequence, TextIO, TypeVar, Union

NAME_SIZE = 60
STYLE_SIZE = 60
MAX_FILMS = 100

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

PathLike = Union[str, Path]
_T = TypeVar("_T")


def _to_int(text: str) -> int:
    """Read a leading integer the lenient way; text without one reads as 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _records(path: PathLike, width: int) -> Iterator[list[str]]:
    """Yield complete groups of `width` lines; a trailing partial group is dropped."""
    with open(path, encoding="utf-8") as handle:
        lines = (line.rstrip("\n") for line in handle)
        while True:
            record = list(islice(lines, width))
            if len(record) < width:
                return
            yield record


def _compare_by_name(a: Any, b: Any) -> int:
    return (a.name > b.name) - (a.name < b.name)


class _RecordCatalog(Generic[_T]):
    """A bounded, ordered collection of records stored one field per line.

    Subclasses set `_record_type` (a class with `_WIDTH`, `_from_record`
    and `_fields`) and `_capacity`, and expose the public operations.
    """

    _record_type: Any
    _capacity: int

    def __init__(self, items: Iterable[_T] = ()) -> None:
        self._items: list[_T] = list(items)[: self._capacity]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[_T]:
        return iter(self._items)

    def _load(self, path: PathLike) -> None:
        for record in _records(path, self._record_type._WIDTH):
            if len(self._items) >= self._capacity:
                break
            self._items.append(self._record_type._from_record(record))

    def _save(self, path: PathLike) -> None:
        with open(path, "w", encoding="utf-8") as handle:
            for item in self._items:
                handle.writelines(f"{field}\n" for field in item._fields())

    def _sort(self) -> None:
        self._items.sort(key=lambda item: item.name)

    def _find(self, ident: int) -> Optional[_T]:
        return next((item for item in self._items if item.id == ident), None)

    def _at(self, index: int) -> Optional[_T]:
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def _show(self, out: Optional[TextIO]) -> None:
        out = out if out is not None else sys.stdout
        for item in self._items:
            print(item.describe(), file=out)


@dataclass
class Film:
    """A film with its age rating (0 means suitable for all ages) and genre."""

    id: int
    name: str
    rating: int
    style: str

    _WIDTH = 4

    @classmethod
    def _from_record(cls, record: Sequence[str]) -> "Film":
        film_id, name, rating, style = record
        return cls(_to_int(film_id), name[:NAME_SIZE], _to_int(rating), style[:STYLE_SIZE])

    def _fields(self) -> tuple:
        return (self.id, self.name, self.rating, self.style)

    def describe(self) -> str:
        """Return the one-line listing of the film."""
        rating = "LIVRE" if self.rating == 0 else f"{self.rating} anos"
        return f"{self.name} [{self.id}] - {rating} - {self.style}"


def compare_films(a: Film, b: Film) -> int:
    """Order two films by name: -1, 0 or 1."""
    return _compare_by_name(a, b)


class FilmCatalog(_RecordCatalog[Film]):
    """An ordered collection of at most MAX_FILMS films."""

    _record_type = Film
    _capacity = MAX_FILMS

    def load(self, path: PathLike) -> None:
        """Append the films stored in `path`, stopping once the catalogue is full."""
        self._load(path)

    def save(self, path: PathLike) -> None:
        """Write every film to `path` in the format `load` reads."""
        self._save(path)

    def sort(self) -> None:
        """Sort the films by name."""
        self._sort()

    def by_id(self, film_id: int) -> Optional[Film]:
        """Return the first film with this id, or None."""
        return self._find(film_id)

    def at(self, index: int) -> Optional[Film]:
        """Return the film at `index`, or None when it is out of range."""
        return self._at(index)

    def show(self, out: Optional[TextIO] = None) -> None:
        """Print the listing of every film."""
        self._show(out)