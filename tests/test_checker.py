import io

import pytest

from pushswap.checker import (
    main,
    read_instructions,
    run_checker,
    validate_instructions,
)
from pushswap.parsing import InputError
from pushswap.sorter import solve
from pushswap.stacks import Operation


def _lines(operations):
    return [f"{operation.value}\n" for operation in operations]


def test_read_instructions_keeps_newlines():
    assert read_instructions(io.StringIO("sa\npb\n")) == ["sa\n", "pb\n"]


def test_read_instructions_last_line_without_newline():
    assert read_instructions(io.StringIO("sa\nra")) == ["sa\n", "ra"]


def test_read_instructions_empty_stream():
    assert read_instructions(io.StringIO("")) == []


def test_validate_instructions_all_names():
    names = ["sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"]
    result = validate_instructions([f"{name}\n" for name in names])
    assert [operation.value for operation in result] == names


@pytest.mark.parametrize("line", ["sa", "\n", "SA\n", "sa \n", "rrx\n", "sa\nsb\n"])
def test_validate_instructions_rejects_bad_lines(line):
    with pytest.raises(InputError):
        validate_instructions([line])


def test_run_checker_sorting_instructions():
    assert run_checker([2, 1, 3], ["sa\n"]) == ("OK", 0)


def test_run_checker_wrong_instructions():
    assert run_checker([2, 1, 3], ["ra\n"]) == ("KO", 0)


def test_run_checker_no_instructions():
    assert run_checker([2, 1, 3], []) == ("KO", 1)
    assert run_checker([1, 2, 3], []) == ("OK", 0)


def test_run_checker_stack_b_not_empty():
    assert run_checker([1, 2, 3], ["pb\n"]) == ("KO", 0)


def test_run_checker_ignores_impossible_operations():
    assert run_checker([1], ["sa\n", "ra\n", "rrr\n", "pa\n"]) == ("OK", 0)


def test_run_checker_rejects_bad_line():
    with pytest.raises(InputError):
        run_checker([2, 1], ["sa\n", "swap\n"])


@pytest.mark.parametrize(
    "values",
    [[2, 1], [3, 1, 2], [4, 2, 1, 3], [5, 3, 1, 4, 2], list(range(30, 0, -1))],
)
def test_run_checker_accepts_solver_output(values):
    assert run_checker(values, _lines(solve(values))) == ("OK", 0)


def test_main_prints_ok(capsys):
    stdin = io.StringIO("".join(_lines(solve([3, 1, 2]))))
    assert main(["3 1", "2"], stdin) == 0
    assert capsys.readouterr().out == "OK\n"


def test_main_prints_ko(capsys):
    assert main(["3", "1", "2"], io.StringIO("pb\n")) == 0
    assert capsys.readouterr().out == "KO\n"


def test_main_invalid_numbers(capsys):
    assert main(["1", "x"], io.StringIO("sa\n")) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_duplicate_numbers(capsys):
    assert main(["1 2 1"], io.StringIO("")) == 1
    assert capsys.readouterr().err == "Error\n"


def test_main_invalid_instruction(capsys):
    assert main(["2", "1"], io.StringIO("sa\nnope\n")) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_without_arguments(capsys):
    assert main([], io.StringIO("sa\n")) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_main_unsorted_without_instructions(capsys):
    assert main(["2", "1"], io.StringIO("")) == 1
    assert capsys.readouterr().out == "KO\n"