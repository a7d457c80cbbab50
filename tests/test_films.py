import io

import pytest

from cineprog.films import MAX_FILMS, NAME_SIZE, Film, FilmCatalog, compare_films


def _write(path, records):
    path.write_text("".join(f"{i}\n{n}\n{r}\n{s}\n" for i, n, r, s in records), encoding="utf-8")
    return path


def _loaded(*paths):
    catalog = FilmCatalog()
    for path in paths:
        catalog.load(path)
    return catalog


@pytest.fixture
def sample(tmp_path):
    return _write(
        tmp_path / "filmes.txt",
        [(3, "Duna", 14, "Ficção"), (1, "Besouro Azul", 0, "Ação"), (2, "Barbie", 12, "Comédia")],
    )


def test_load_reads_every_record(sample):
    catalog = _loaded(sample)
    assert len(catalog) == 3
    assert catalog.at(0) == Film(3, "Duna", 14, "Ficção")


@pytest.mark.parametrize(
    "rating, expected",
    [(0, "Besouro Azul [1] - LIVRE - Ação"), (14, "Besouro Azul [1] - 14 anos - Ação")],
)
def test_describe(rating, expected):
    assert Film(1, "Besouro Azul", rating, "Ação").describe() == expected


def test_sort_orders_by_name(sample):
    catalog = _loaded(sample)
    catalog.sort()
    assert [film.name for film in catalog] == ["Barbie", "Besouro Azul", "Duna"]


def test_save_and_load_round_trip(sample, tmp_path):
    catalog = _loaded(sample)
    out = tmp_path / "filmes.txt.out"
    catalog.save(out)
    assert list(_loaded(out)) == list(catalog)
    assert out.read_text(encoding="utf-8") == sample.read_text(encoding="utf-8")


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        FilmCatalog().load(tmp_path / "absent.txt")


def test_incomplete_trailing_record_is_dropped(tmp_path):
    path = tmp_path / "f.txt"
    path.write_text("1\nA\n0\nX\n2\nB\n", encoding="utf-8")
    assert len(_loaded(path)) == 1


def test_load_stops_at_capacity(tmp_path):
    path = _write(tmp_path / "f.txt", [(i, f"F{i}", 0, "S") for i in range(MAX_FILMS + 5)])
    assert len(_loaded(path)) == MAX_FILMS


def test_load_appends_to_existing(sample):
    assert len(_loaded(sample, sample)) == 6


def test_long_name_is_truncated(tmp_path):
    path = _write(tmp_path / "f.txt", [(1, "x" * (NAME_SIZE + 10), 0, "S")])
    assert _loaded(path).at(0).name == "x" * NAME_SIZE


def test_lenient_integers(tmp_path):
    path = tmp_path / "f.txt"
    path.write_text(" 7abc\nA\nxyz\nS\n", encoding="utf-8")
    film = _loaded(path).at(0)
    assert (film.id, film.rating) == (7, 0)


def test_lookup(sample):
    catalog = _loaded(sample)
    assert catalog.by_id(2).name == "Barbie"
    assert catalog.by_id(99) is None
    assert catalog.at(-1) is None
    assert catalog.at(3) is None


@pytest.mark.parametrize(
    "first, second, expected",
    [("A", "B", -1), ("B", "A", 1), ("A", "A", 0)],
)
def test_compare_films(first, second, expected):
    assert compare_films(Film(1, first, 0, "S"), Film(2, second, 5, "T")) == expected


def test_show_writes_each_film(sample):
    out = io.StringIO()
    _loaded(sample).show(out)
    assert out.getvalue().splitlines() == [
        "Duna [3] - 14 anos - Ficção",
        "Besouro Azul [1] - LIVRE - Ação",
        "Barbie [2] - 12 anos - Comédia",
    ]