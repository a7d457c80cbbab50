# cineprog

Keep catalogues of films, cinemas and actors in plain text files. You can
sort them by name, save them back and print a schedule of screenings for
each cinema.

## Installation

```
pip install .
```

## Commands

Each command takes optional file names as arguments. When you leave them
out, the names below are used, taken from the current directory.

* `cineprog-films [SOURCE [TARGET]]` reads films from `SOURCE` (default
  `filmes.txt`) and prints them. It then sorts them by title, writes them
  to `TARGET` (default `filmes.txt.out`) and prints them again. Each
  listing is framed by `----------` lines.
* `cineprog-cinemas [SOURCE [TARGET]]` does the same with cinemas. The
  defaults are `cinemas.txt` and `cinemas.txt.out`.
* `cineprog [FILMS [CINEMAS [SCHEDULE]]]` reads films, cinemas and
  screenings. The defaults are `filmes.txt`, `cinemas.txt` and
  `programacao.txt`. It sorts the cinemas by name and prints, for each
  cinema, its name, a blank line, its screenings and another blank line.

If a file cannot be opened or written, a command prints `error: ...` on
standard error and exits with status 1.

## File formats

Each file is UTF-8 text with one field per line, and records follow one
another with no separators. An incomplete record at the end of a file is
ignored. Numeric fields are read by their leading integer, so a line
without one counts as `0`. Text fields longer than their limit are cut
short.

**Films.** Each film takes four lines:

1. id
2. title (up to 60 characters)
3. age rating (`0` is shown as `LIVRE`)
4. genre (up to 60 characters)

```
1
Besouro Azul
14
Ação
```

Listed as `Besouro Azul [1] - 14 anos - Ação`.

**Cinemas.** Each cinema takes ten lines:

1. id
2. name (up to 60 characters)
3. street (up to 60)
4. street number (`-1` when there is none)
5. address complement (up to 40, may be empty)
6. district (up to 40)
7. postcode (up to 10)
8. city (up to 40)
9. state (up to 3)
10. number of rooms

**Actors.** Each actor takes eight lines: id, name (up to 60
characters), birth day, month and year, then death day, month and year. A
death day of `-1` means the actor is alive, and the death date is then left
out of the listing.

**Screenings.** Each screening takes five lines:

1. cinema id
2. room number
3. film id
4. screening type
5. show time (up to 60 characters)

The screening types are:

| Value | Type | Tag |
|-------|------|-----|
| 1 | subtitled | `LEG` |
| 2 | dubbed | `DUB` |
| 3 | 3D subtitled | `3D LEG` |
| 4 | 3D dubbed | `3D DUB` |
| 5 | national | `NAC` |

A screening is listed as
`Sala 2: Besouro Azul | 19:30 | DUB | [14] | Ação`, with `[LIVRE]` for a
rating of 0. A screening whose type is not one of these is not listed.
A screening whose cinema id matches no cinema is never listed. One whose
film id matches no film makes `Screening.describe` raise `ValueError`.

## Capacity

A catalogue holds at most 100 films, 50 cinemas or 100 actors, and a
schedule holds at most 100 screenings. Once a catalogue is full, loading
stops and the rest of the file is ignored.

## Library use

```python
import sys

from cineprog.films import FilmCatalog
from cineprog.cinemas import CinemaCatalog
from cineprog.schedule import Schedule

films = FilmCatalog()
films.load("filmes.txt")

cinemas = CinemaCatalog()
cinemas.load("cinemas.txt")
cinemas.sort()

schedule = Schedule()
schedule.load("programacao.txt", cinemas, films)
schedule.show(sys.stdout)
```

`FilmCatalog` (`cineprog.films`), `CinemaCatalog` (`cineprog.cinemas`) and
`ActorCatalog` (`cineprog.actors`) share one interface. Each can be built
from an iterable of records, supports `len()` and iteration, and has these
methods:

* `load(path)` appends the records stored in a file.
* `save(path)` writes the records in the same format.
* `sort()` orders the records by name.
* `by_id(id)` returns the first record with that id, or `None`.
* `at(index)` returns the record at a position, or `None` when it is out of
  range.
* `show(out=None)` prints every record to a text stream, by default
  standard output.

The records are the dataclasses `Film`, `Cinema` and `Actor`. The dates of
an `Actor` are `Date` objects. Each record's `describe()` returns the text
that `show` prints for it. `compare_films`, `compare_cinemas` and
`compare_actors` compare two records by name and return -1, 0 or 1.

`cineprog.schedule` has the `ScreeningType` enum, the `Screening`
dataclass and `Schedule`. `Schedule.load(path, cinemas, films)` resolves
the cinema and film ids against the catalogues given, and `show(out=None)`
lists the screenings in the order of the cinema catalogue.

## Limitations

Actors can only be used from Python; there is no command for them.
Schedules can be loaded and printed but not saved back to a file.