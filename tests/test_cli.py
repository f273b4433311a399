import pytest

from norcina.cli import main
from norcina.cube import Cube
from norcina.moves import parse_alg

SOLUTION_PREFIX = "Solution is "
SCRAMBLE_PREFIX = "Therefore, scramble is "


def _extract(output, prefix):
    for line in output.splitlines():
        if line.startswith(prefix):
            return line[len(prefix):].removesuffix(".")
    raise AssertionError(f"no line starting with {prefix!r}")


@pytest.mark.parametrize("method", ["manhattan", "kociemba"])
def test_solution_solves_the_scramble(capsys, method):
    assert main(["--scramble", "R U", "--method", method]) == 0
    out = capsys.readouterr().out
    cube = Cube.SOLVED.mov(parse_alg("R U"))
    solution = parse_alg(_extract(out, SOLUTION_PREFIX))
    assert cube.mov(solution).is_solved()
    reverse = parse_alg(_extract(out, SCRAMBLE_PREFIX))
    assert Cube.SOLVED.mov(reverse) == cube


def test_single_move_solution(capsys):
    main(["--scramble", "R", "--method", "manhattan"])
    out = capsys.readouterr().out
    assert _extract(out, SOLUTION_PREFIX).strip() == "R'"
    assert _extract(out, SCRAMBLE_PREFIX).strip() == "R"


def test_solved_cube_has_empty_solution(capsys):
    main(["--scramble", "", "--method", "manhattan"])
    out = capsys.readouterr().out
    assert _extract(out, SOLUTION_PREFIX) == ""


def test_cube_is_drawn(capsys):
    main(["--scramble", "R", "--method", "manhattan"])
    out = capsys.readouterr().out
    assert out.count("██") == 54


def test_unknown_move_is_an_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--scramble", "R X"])
    assert excinfo.value.code == 2
    assert "unknown move" in capsys.readouterr().err


def test_unknown_method_is_an_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["--method", "guess"])
    assert excinfo.value.code == 2