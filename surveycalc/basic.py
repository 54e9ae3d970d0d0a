"""Arithmetic and trigonometric operations of the basic calculator."""

from __future__ import annotations

import enum
import math

UNDEFINED_TEXT = "Не существует"
DIVISION_BY_ZERO_MESSAGE = "Второе число равно нулю!"
DOMAIN_MESSAGE = "Аргумент вне области определения"
ABOVE_FULL_TURN_NOTICE = "Угол более 360 градусов\nБудет использован эквивалентный угол"
BELOW_ZERO_NOTICE = "Угол менее 360 градусов\nБудет использован эквивалентный угол"

_ANGLE_EPSILON = 1e-6
_TAN_EPSILON = 1e-10


class CalculationError(ValueError):
    """Raised when an operation cannot be carried out on its arguments."""


class UndefinedResult(CalculationError):
    """Raised when a trigonometric function has no value at the given angle."""

    def __init__(self, message: str = UNDEFINED_TEXT) -> None:
        super().__init__(message)


class Operation(enum.Enum):
    """Operations offered by the calculator."""

    PLUS = "plus"
    MINUS = "minus"
    MULTIPLY = "mult"
    DIVIDE = "div"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    COTAN = "ctan"
    ARCSIN = "arcsin"
    ARCCOS = "arccos"
    ARCTAN = "arctan"
    ARCCOTAN = "arcctan"

    def operand_count(self) -> int:
        """Number of operands the operation reads."""
        return 2 if self in _BINARY else 1

    def takes_degrees(self) -> bool:
        """Whether the operand is an angle in degrees."""
        return self in _DEGREE_INPUT


_BINARY = frozenset({Operation.PLUS, Operation.MINUS, Operation.MULTIPLY, Operation.DIVIDE})
_DEGREE_INPUT = frozenset({Operation.SIN, Operation.COS, Operation.TAN, Operation.COTAN})


def _to_radians(degrees: float) -> float:
    return degrees * math.pi / 180


def _tan(degrees: float) -> float:
    if abs(math.fmod(abs(degrees), 180) - 90) < _ANGLE_EPSILON:
        raise UndefinedResult()
    result = math.tan(_to_radians(degrees))
    if not math.isfinite(result):
        raise UndefinedResult()
    return result


def _cotan(degrees: float) -> float:
    rest = math.fmod(abs(degrees), 180)
    if abs(rest) < _ANGLE_EPSILON or abs(rest - 180) < _ANGLE_EPSILON:
        raise UndefinedResult()
    tangent = math.tan(_to_radians(degrees))
    if abs(tangent) < _TAN_EPSILON or not math.isfinite(tangent):
        raise UndefinedResult()
    return 1 / tangent


def _checked_unit(value: float) -> float:
    if abs(value) > 1:
        raise CalculationError(DOMAIN_MESSAGE)
    return value


def _evaluate(operation: Operation, first: float, second: float) -> float:
    match operation:
        case Operation.PLUS:
            return first + second
        case Operation.MINUS:
            return first - second
        case Operation.MULTIPLY:
            return first * second
        case Operation.DIVIDE:
            if second == 0:
                raise CalculationError(DIVISION_BY_ZERO_MESSAGE)
            return first / second
        case Operation.SIN:
            return math.sin(_to_radians(first))
        case Operation.COS:
            return math.cos(_to_radians(first))
        case Operation.TAN:
            return _tan(first)
        case Operation.COTAN:
            return _cotan(first)
        case Operation.ARCSIN:
            return math.asin(_checked_unit(first))
        case Operation.ARCCOS:
            return math.acos(_checked_unit(first))
        case Operation.ARCTAN:
            return math.atan(first)
        case Operation.ARCCOTAN:
            return math.pi / 2 - math.atan(first)
    raise CalculationError(f"unknown operation: {operation!r}")


def calculate(operation: Operation, first: float, second: float = 0.0) -> float:
    """Apply the operation; angles are in degrees, inverse functions give radians."""
    try:
        return _evaluate(operation, first, second)
    except CalculationError:
        raise
    except ValueError:
        if operation in (Operation.TAN, Operation.COTAN):
            raise UndefinedResult() from None
        raise CalculationError(DOMAIN_MESSAGE) from None


def angle_notice(degrees: float) -> str | None:
    """Notice shown when an angle lies outside 0..360 degrees, else None."""
    if degrees > 360:
        return ABOVE_FULL_TURN_NOTICE
    if degrees < 0:
        return BELOW_ZERO_NOTICE
    return None


def format_number(value: float) -> str:
    """Format a result with four decimal places."""
    return f"{value:.4f}"


def render(operation: Operation, first: float, second: float = 0.0) -> str:
    """Result text as displayed; undefined values read as a fixed phrase."""
    try:
        return format_number(calculate(operation, first, second))
    except UndefinedResult:
        return UNDEFINED_TEXT