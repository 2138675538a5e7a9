import random

import pytest

from dsakit.datagen import (
    DataKind,
    generate,
    main,
    nearly_sorted_data,
    random_data,
    reverse_data,
    sorted_data,
    write_data,
)


def test_sorted_and_reverse():
    assert sorted_data(6) == list(range(6))
    assert reverse_data(6) == list(reversed(range(6)))
    assert sorted_data(0) == [] and reverse_data(0) == []


def test_random_data_range_and_determinism():
    values = random_data(50, random.Random(7))
    assert len(values) == 50
    assert all(0 <= v < 50 for v in values)
    assert values == random_data(50, random.Random(7))


def test_nearly_sorted_is_permutation():
    values = nearly_sorted_data(100, random.Random(3))
    assert sorted(values) == list(range(100))
    misplaced = sum(1 for i, v in enumerate(values) if i != v)
    assert misplaced <= 20


def test_nearly_sorted_empty():
    assert nearly_sorted_data(0, random.Random(1)) == []


def test_data_kind_values():
    assert DataKind(0) is DataKind.RANDOM
    assert DataKind(3) is DataKind.NEARLY_SORTED


def test_generate_dispatch():
    assert generate(DataKind.SORTED, 4) == sorted_data(4)
    assert generate(2, 4) == reverse_data(4)
    assert generate(0, 30, random.Random(5)) == random_data(30, random.Random(5))
    assert generate(3, 30, random.Random(5)) == nearly_sorted_data(30, random.Random(5))


def test_generate_unknown_kind():
    with pytest.raises(ValueError):
        generate(9, 4)


def test_write_data_format(tmp_path):
    path = tmp_path / "data.txt"
    write_data(path, [0, 1, 2])
    assert path.read_text(encoding="utf-8") == "0 1 2 "


def test_write_data_round_trip(tmp_path):
    path = tmp_path / "data.txt"
    values = random_data(40, random.Random(11))
    write_data(path, values)
    assert [int(t) for t in path.read_text(encoding="utf-8").split()] == values


def test_main_writes_file(tmp_path, capsys):
    path = tmp_path / "out.txt"
    status = main(["2", "--size", "5", "--output", str(path)])
    assert status == 0
    assert [int(t) for t in path.read_text(encoding="utf-8").split()] == reverse_data(5)
    assert f"Da luu du lieu vao {path}" in capsys.readouterr().out


def test_main_prompts_for_kind(tmp_path, monkeypatch):
    path = tmp_path / "out.txt"
    monkeypatch.setattr("builtins.input", lambda prompt="": "1")
    assert main(["--size", "4", "--output", str(path)]) == 0
    assert path.read_text(encoding="utf-8") == "0 1 2 3 "


@pytest.mark.parametrize("kind", ["7", "abc"])
def test_main_rejects_bad_kind(tmp_path, capsys, kind):
    path = tmp_path / "out.txt"
    assert main([kind, "--size", "3", "--output", str(path)]) == 1
    assert "Loai du lieu khong hop le!" in capsys.readouterr().out
    assert not path.exists()


def test_main_unwritable_output(tmp_path, capsys):
    target = tmp_path / "missing" / "out.txt"
    assert main(["1", "--size", "3", "--output", str(target)]) == 1
    assert "Khong the mo file" in capsys.readouterr().err