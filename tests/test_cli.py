import pytest

from surveycalc.basic import Operation, angle_notice, render
from surveycalc.cli import build_parser, main
from surveycalc.geodesy import Bearing, direct, format_direct, inverse


def test_basic_plus(capsys):
    assert main(["basic", "plus", "1.25", "2.5"]) == 0
    out = capsys.readouterr().out
    assert out == render(Operation.PLUS, 1.25, 2.5) + "\n"


def test_basic_division_by_zero(capsys):
    assert main(["basic", "div", "3", "0"]) == 1
    captured = capsys.readouterr()
    assert "Второе число равно нулю!" in captured.err
    assert captured.out == ""


def test_basic_tan_undefined_with_negative_angle(capsys):
    assert main(["basic", "tan", "-90"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "Не существует\n"
    assert angle_notice(-90.0) in captured.err


def test_basic_sin_notice(capsys):
    assert main(["basic", "sin", "400"]) == 0
    captured = capsys.readouterr()
    assert angle_notice(400.0) in captured.err
    assert captured.out == render(Operation.SIN, 400.0) + "\n"


def test_basic_arcsin_domain_error(capsys):
    assert main(["basic", "arcsin", "2"]) == 1
    assert "Аргумент вне области определения" in capsys.readouterr().err


def test_basic_second_operand_defaults_to_zero(capsys):
    assert main(["basic", "minus", "4.5"]) == 0
    assert capsys.readouterr().out == render(Operation.MINUS, 4.5, 0.0) + "\n"


def test_single_operand_rejects_second():
    with pytest.raises(SystemExit) as info:
        main(["basic", "sin", "30", "5"])
    assert info.value.code == 2


def test_unknown_operation_rejected():
    with pytest.raises(SystemExit) as info:
        main(["basic", "pow", "2", "3"])
    assert info.value.code == 2


def test_command_required():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


def test_direct_command(capsys):
    assert main(["direct", "1", "2", "100", "30", "15", "10"]) == 0
    expected = format_direct(*direct(1.0, 2.0, 100.0, Bearing(30.0, 15.0, 10.0)))
    assert capsys.readouterr().out == expected + "\n"


def test_inverse_command(capsys):
    assert main(["inverse", "0", "0", "3", "-4"]) == 0
    expected = inverse(0.0, 0.0, 3.0, -4.0).describe()
    assert capsys.readouterr().out == expected + "\n"


def test_parser_reads_inverse_coordinates():
    args = build_parser().parse_args(["inverse", "0", "1.5", "3", "4"])
    assert (args.xa, args.ya, args.xb, args.yb) == (0.0, 1.5, 3.0, 4.0)


def test_parser_direct_defaults():
    args = build_parser().parse_args(["direct", "0", "0", "10", "45"])
    assert (args.minutes, args.seconds) == (0.0, 0.0)