"""Cinema records and a catalogue that loads, sorts, shows and saves them."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Optional, Sequence, TextIO

from .films import PathLike, _compare_by_name, _RecordCatalog, _to_int

NAME_SIZE = 60
POSTAL_CODE_SIZE = 10
STATE_SIZE = 3
CITY_SIZE = 40
STREET_SIZE = 60
COMPLEMENT_SIZE = 40
DISTRICT_SIZE = 40
MAX_CINEMAS = 50

# Maximum width of each text field, in record order; None marks a number.
_FIELD_SIZES = (
    None, NAME_SIZE, STREET_SIZE, None, COMPLEMENT_SIZE,
    DISTRICT_SIZE, POSTAL_CODE_SIZE, CITY_SIZE, STATE_SIZE, None,
)


@dataclass
class Cinema:
    """A cinema with its address; a street number of -1 means there is none."""

    id: int
    name: str
    street: str
    number: int
    complement: str
    district: str
    postal_code: str
    city: str
    state: str
    rooms: int

    _WIDTH = len(_FIELD_SIZES)

    @classmethod
    def _from_record(cls, record: Sequence[str]) -> "Cinema":
        return cls(*(
            _to_int(value) if size is None else value[:size]
            for value, size in zip(record, _FIELD_SIZES)
        ))

    def _fields(self) -> tuple:
        return astuple(self)

    def describe(self) -> str:
        """Return the three-line listing of the cinema."""
        street = self.street if self.number == -1 else f"{self.street}, {self.number}"
        parts = [street]
        if self.complement:
            parts.append(self.complement)
        parts += [f"Bairro {self.district}", f"CEP {self.postal_code}", self.city, self.state]
        return "\n".join(
            [f"{self.name} [{self.id}]", " - ".join(parts), f"Cinema(s): {self.rooms}"]
        )


def compare_cinemas(a: Cinema, b: Cinema) -> int:
    """Order two cinemas by name: -1, 0 or 1."""
    return _compare_by_name(a, b)


class CinemaCatalog(_RecordCatalog[Cinema]):
    """An ordered collection of at most MAX_CINEMAS cinemas."""

    _record_type = Cinema
    _capacity = MAX_CINEMAS

    def load(self, path: PathLike) -> None:
        """Append the cinemas stored in `path`, stopping once the catalogue is full."""
        self._load(path)

    def save(self, path: PathLike) -> None:
        """Write every cinema to `path` in the format `load` reads."""
        self._save(path)

    def sort(self) -> None:
        """Sort the cinemas by name."""
        self._sort()

    def by_id(self, cinema_id: int) -> Optional[Cinema]:
        """Return the first cinema with this id, or None."""
        return self._find(cinema_id)

    def at(self, index: int) -> Optional[Cinema]:
        """Return the cinema at `index`, or None when it is out of range."""
        return self._at(index)

    def show(self, out: Optional[TextIO] = None) -> None:
        """Print the listing of every cinema."""
        self._show(out)