import pytest

from cineprog.cinemas import CinemaCatalog
from cineprog.cli import cinemas_main, films_main, main
from cineprog.films import FilmCatalog

SEP = "----------"


def _write(path, records):
    path.write_text("".join(f"{field}\n" for rec in records for field in rec), encoding="utf-8")
    return path


@pytest.fixture
def films_file(tmp_path):
    return _write(tmp_path / "filmes.txt", [(1, "Zorro", 14, "Ação"), (2, "Amelie", 0, "Comédia")])


@pytest.fixture
def cinemas_file(tmp_path):
    return _write(
        tmp_path / "cinemas.txt",
        [
            (5, "Sul", "Av. B", -1, "", "Centro", "90000-000", "Cidade", "RS", 2),
            (6, "Norte", "Rua A", 12, "Loja 3", "Bairro", "90000-001", "Cidade", "RS", 4),
        ],
    )


@pytest.fixture
def schedule_file(tmp_path):
    return _write(tmp_path / "programacao.txt", [(5, 1, 1, 1, "14:00"), (6, 2, 2, 2, "16:00")])


def test_films_main_lists_sorts_and_saves(tmp_path, films_file, capsys):
    target = tmp_path / "out.txt"
    assert films_main([str(films_file), str(target)]) == 0
    lines = capsys.readouterr().out.splitlines()
    original = FilmCatalog()
    original.load(films_file)
    first, second = list(original)
    assert lines == [SEP, first.describe(), second.describe(), SEP,
                     second.describe(), first.describe(), SEP]
    saved = FilmCatalog()
    saved.load(target)
    assert [f.name for f in saved] == ["Amelie", "Zorro"]


def test_films_main_missing_input(tmp_path, capsys):
    assert films_main([str(tmp_path / "absent.txt"), str(tmp_path / "o")]) == 1
    assert capsys.readouterr().out == ""


def test_films_main_default_paths(tmp_path, films_file, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert films_main([]) == 0
    assert (tmp_path / "filmes.txt.out").exists()
    assert capsys.readouterr().out.startswith(SEP)


def test_cinemas_main_lists_sorts_and_saves(tmp_path, cinemas_file, capsys):
    target = tmp_path / "out.txt"
    assert cinemas_main([str(cinemas_file), str(target)]) == 0
    out = capsys.readouterr().out
    parts = out.split(SEP + "\n")
    assert parts[0] == "" and parts[-1] == ""
    assert parts[1].index("Sul [5]") < parts[1].index("Norte [6]")
    assert parts[2].index("Norte [6]") < parts[2].index("Sul [5]")
    saved = CinemaCatalog()
    saved.load(target)
    assert [c.id for c in saved] == [6, 5]


def test_cinemas_main_missing_input(tmp_path):
    assert cinemas_main([str(tmp_path / "absent.txt"), str(tmp_path / "o")]) == 1


def test_main_prints_schedule(films_file, cinemas_file, schedule_file, capsys):
    assert main([str(films_file), str(cinemas_file), str(schedule_file)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == SEP and lines[-1] == SEP
    assert lines[1] == "Norte"
    assert lines[3].startswith("Sala 2: Amelie | 16:00 | DUB | [LIVRE]")
    assert lines[5] == "Sul"
    assert "| LEG | [14] |" in lines[7]


def test_main_missing_schedule(tmp_path, films_file, cinemas_file, capsys):
    assert main([str(films_file), str(cinemas_file), str(tmp_path / "absent.txt")]) == 1
    assert capsys.readouterr().out == ""