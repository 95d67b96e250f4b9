import pytest

from convexhull.cli import main, read_points, write_hull
from convexhull.geom import Point

SQUARE = [Point(1, 1), Point(2, 2), Point(0, 2), Point(0, 0), Point(2, 0)]
SQUARE_HULL = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]


def _write_input(path, points):
    lines = [str(len(points))] + [f"{p.x} {p.y}" for p in points]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_write_hull_format(tmp_path):
    out = tmp_path / "hull.txt"
    write_hull(out, [Point(1, 2), Point(-3.5, 0.25)])
    assert out.read_text(encoding="utf-8") == "2\n1.000000 2.000000\n-3.500000 0.250000\n"


def test_write_then_read_round_trip(tmp_path):
    out = tmp_path / "points.txt"
    pts = [Point(0.5, -1.25), Point(10, 20), Point(-3, 4)]
    write_hull(out, pts)
    assert read_points(out) == pts


def test_read_ignores_extra_tokens(tmp_path):
    src = tmp_path / "in.txt"
    src.write_text("2\n1 2\n3 4\n5 6\n", encoding="utf-8")
    assert read_points(src) == [Point(1, 2), Point(3, 4)]


@pytest.mark.parametrize("content", ["", "abc\n", "3\n1 2\n3 4\n", "1\n1 x\n", "-1\n"])
def test_read_malformed_raises(tmp_path, content):
    src = tmp_path / "bad.txt"
    src.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        read_points(src)


@pytest.mark.parametrize("algorithm", ["slow", "fast"])
def test_main_with_arguments(tmp_path, algorithm, capsys):
    src = tmp_path / "in.txt"
    _write_input(src, SQUARE)
    prefix = tmp_path / "result"
    assert main([str(src), str(prefix), "--algorithm", algorithm]) == 0
    assert read_points(tmp_path / f"result-{algorithm}.txt") == SQUARE_HULL
    assert "Execution completed in" in capsys.readouterr().out


def test_main_missing_file_returns_error(tmp_path):
    assert main([str(tmp_path / "missing.txt"), str(tmp_path / "out")]) == 1
    assert not (tmp_path / "out-fast.txt").exists()


def test_main_too_few_points_returns_error(tmp_path):
    src = tmp_path / "in.txt"
    _write_input(src, [Point(0, 0), Point(1, 1)])
    assert main([str(src), str(tmp_path / "out")]) == 1


def test_main_interactive_retries_missing_file(tmp_path, monkeypatch, capsys):
    src = tmp_path / "in.txt"
    _write_input(src, SQUARE)
    answers = iter([str(tmp_path / "nope.txt"), "", str(src), str(tmp_path / "hull")])
    monkeypatch.setattr("builtins.input", lambda *args: next(answers))
    assert main(["--algorithm", "slow"]) == 0
    assert read_points(tmp_path / "hull-slow.txt") == SQUARE_HULL
    captured = capsys.readouterr()
    assert "Error! File Not Found" in captured.err
    assert "Please enter output filename prefix:" in captured.out