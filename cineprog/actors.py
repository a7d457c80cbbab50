"""Actor records and a catalogue that loads, sorts, shows and saves them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, TextIO

from .films import PathLike, _compare_by_name, _RecordCatalog, _to_int

NAME_SIZE = 60
MAX_ACTORS = 100


@dataclass
class Date:
    """A calendar date; a day of -1 marks an unknown date."""

    day: int
    month: int
    year: int

    def __str__(self) -> str:
        return f"{self.day:02d}/{self.month:02d}/{self.year:02d}"


@dataclass
class Actor:
    """An actor with birth and death dates; a death day of -1 means still alive."""

    id: int
    name: str
    birth: Date
    death: Date

    _WIDTH = 8

    @classmethod
    def _from_record(cls, record: Sequence[str]) -> "Actor":
        actor_id, name, *dates = record
        numbers = [_to_int(value) for value in dates]
        return cls(_to_int(actor_id), name[:NAME_SIZE], Date(*numbers[:3]), Date(*numbers[3:]))

    def _fields(self) -> tuple:
        b, d = self.birth, self.death
        return (self.id, self.name, b.day, b.month, b.year, d.day, d.month, d.year)

    def describe(self) -> str:
        """Return the one-line listing of the actor."""
        dates = f"* {self.birth}"
        if self.death.day != -1:
            dates += f";+ {self.death}"
        return f"[{self.id}] {self.name} ({dates})"


def compare_actors(a: Actor, b: Actor) -> int:
    """Order two actors by name: -1, 0 or 1."""
    return _compare_by_name(a, b)


class ActorCatalog(_RecordCatalog[Actor]):
    """An ordered collection of at most MAX_ACTORS actors."""

    _record_type = Actor
    _capacity = MAX_ACTORS

    def load(self, path: PathLike) -> None:
        """Append the actors stored in `path`, stopping once the catalogue is full."""
        self._load(path)

    def save(self, path: PathLike) -> None:
        """Write every actor to `path` in the format `load` reads."""
        self._save(path)

    def sort(self) -> None:
        """Sort the actors by name."""
        self._sort()

    def by_id(self, actor_id: int) -> Optional[Actor]:
        """Return the first actor with this id, or None."""
        return self._find(actor_id)

    def at(self, index: int) -> Optional[Actor]:
        """Return the actor at `index`, or None when it is out of range."""
        return self._at(index)

    def show(self, out: Optional[TextIO] = None) -> None:
        """Print the listing of every actor."""
        self._show(out)