import pytest

from dsakit.sort_cli import main, read_numbers, write_numbers


def test_write_format(tmp_path):
    path = tmp_path / "out.txt"
    write_numbers(path, [3, 1, 2])
    assert path.read_text(encoding="utf-8") == "3 1 2 "


def test_round_trip(tmp_path):
    path = tmp_path / "data.txt"
    values = [10, -4, 0, 7, 7, 123456]
    write_numbers(path, values)
    assert read_numbers(path) == values


def test_read_stops_at_non_integer(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("4 5\n6 x 7 8", encoding="utf-8")
    assert read_numbers(path) == [4, 5, 6]


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        read_numbers(tmp_path / "missing.txt")


@pytest.mark.parametrize("algorithm", ["quick-sort", "merge-sort", "radix-sort", "flash-sort"])
def test_main_sorts_file(tmp_path, capsys, algorithm):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    values = [9, 3, 7, 1, 3, 0, 12]
    write_numbers(source, values)
    status = main(["-a", algorithm, "-i", str(source), "-o", str(target)])
    assert status == 0
    assert read_numbers(target) == sorted(values)
    assert "Da sap xep xong" in capsys.readouterr().out


def test_main_options_in_any_order(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    write_numbers(source, [2, 1])
    assert main(["-o", str(target), "-i", str(source), "-a", "heap-sort"]) == 0
    assert read_numbers(target) == [1, 2]


def test_main_too_few_arguments(capsys):
    assert main(["-a", "quick-sort"]) == 1
    assert "Cach su dung" in capsys.readouterr().err


def test_main_invalid_parameter(tmp_path, capsys):
    args = ["-a", "quick-sort", "-x", "in.txt", "-o", str(tmp_path / "o.txt")]
    assert main(args) == 1
    assert "Tham so khong hop le: -x" in capsys.readouterr().err


def test_main_unknown_algorithm(tmp_path, capsys):
    source = tmp_path / "in.txt"
    write_numbers(source, [2, 1])
    target = tmp_path / "out.txt"
    assert main(["-a", "bogo-sort", "-i", str(source), "-o", str(target)]) == 1
    assert "Thuat toan khong hop le!" in capsys.readouterr().err
    assert not target.exists()


def test_main_empty_input(tmp_path, capsys):
    source = tmp_path / "in.txt"
    source.write_text("", encoding="utf-8")
    assert main(["-a", "quick-sort", "-i", str(source), "-o", str(tmp_path / "o.txt")]) == 1
    assert "File input rong!" in capsys.readouterr().err


def test_main_missing_input(tmp_path, capsys):
    missing = tmp_path / "nope.txt"
    assert main(["-a", "quick-sort", "-i", str(missing), "-o", str(tmp_path / "o.txt")]) == 1
    assert "Khong the mo file" in capsys.readouterr().err


def test_main_negative_with_counting_sort(tmp_path):
    source = tmp_path / "in.txt"
    write_numbers(source, [3, -2, 1])
    target = tmp_path / "out.txt"
    assert main(["-a", "counting-sort", "-i", str(source), "-o", str(target)]) == 1
    assert not target.exists()