# surveycalc

surveycalc is a small calculator that does two kinds of work.

* **Basic calculations.** It adds, subtracts, multiplies and divides. It also finds sin, cos, tan and cot of an angle given in degrees. It also finds arcsin, arccos, arctan and arccot, and gives their results in radians.
* **Geodetic problems** on a flat coordinate grid:
  * The *direct* problem starts from a point, a distance and a bearing given in degrees, minutes and seconds. It returns the coordinates of the end point.
  * The *inverse* problem takes two points. It returns the distance between them and the bearing from the first point to the second.

Numbers in the results are shown with four decimal places. The fixed result texts are in Russian. For example, an undefined value reads `Не существует`.

## Installation

```
pip install .
```

## Command line

```
surveycalc basic <operation> <first> [<second>]
surveycalc direct <xa> <ya> <distance> <degrees> [<minutes> [<seconds>]]
surveycalc inverse <xa> <ya> <xb> <yb>
```

For `basic`, the `<operation>` is one of the following:

* `plus`, `minus`, `mult` and `div` take two operands. If you leave out the second one, it counts as 0.
* `sin`, `cos`, `tan` and `ctan` take one operand, an angle in degrees.
* `arcsin`, `arccos`, `arctan` and `arcctan` take one operand.

If you give a second operand to an operation that takes only one, the command reports a usage error. If the angle for `sin`, `cos`, `tan` or `ctan` is above 360 or below 0, a notice goes to standard error and the calculation still runs. If the calculation fails, for example on division by zero or arcsin of a value outside [-1, 1], the command prints `Error: <message>` to standard error and exits with status 1.

Examples:

```
$ surveycalc basic sin 30
0.5000
$ surveycalc basic tan 90
Не существует
$ surveycalc direct 0 0 100 45
X: 70.7107 | Y: 70.7107
$ surveycalc inverse 0 0 10 10
Расстояние: 14.1421| Угол: 45'0''0
```

Run `surveycalc --help` or `surveycalc <command> --help` to see every option.

## Library use

```python
from surveycalc.basic import Operation, calculate, render, angle_notice
from surveycalc.basic import CalculationError, UndefinedResult
from surveycalc.geodesy import Bearing, direct, inverse, format_direct

render(Operation.SIN, 30)            # "0.5000"
calculate(Operation.PLUS, 1.5, 2)    # 3.5
render(Operation.TAN, 90)            # "Не существует"

x, y = direct(0, 0, 100, Bearing(45, 0, 0))
print(format_direct(x, y))           # X: 70.7107 | Y: 70.7107

result = inverse(0, 0, 10, 10)
result.distance                      # 14.142...
result.bearing                       # Bearing(degrees=45, minutes=0, seconds=0)
print(result.describe())
```

* `calculate(operation, first, second=0.0)` returns a float.
  * If tan or cot has no value at the angle given, it raises `UndefinedResult`.
  * If the input is invalid, it raises `CalculationError`. This covers division by zero and arcsin or arccos of a value outside [-1, 1].
  * `UndefinedResult` is a subclass of `CalculationError`, and `CalculationError` is a subclass of `ValueError`.
* `render` formats the result of `calculate` to four decimal places.
  * When the result is undefined, it returns `Не существует`.
  * It lets every other `CalculationError` pass through.
* `Operation.operand_count()` gives how many operands an operation reads. `Operation.takes_degrees()` tells whether the operand is an angle in degrees.
* `angle_notice(degrees)` returns a notice text when the angle is above 360 or below 0. Otherwise it returns `None`.
* `format_number(value)` formats a float with four decimal places.
* `Bearing.to_radians()` converts degrees, minutes and seconds to radians.
* `Bearing.from_degrees(degrees)` splits decimal degrees into whole degrees, minutes and seconds.
  * A negative angle is first brought up by 360.
  * Minutes are rounded to the nearest whole number, and seconds come from what remains.
  * Seconds that come out negative are set to 0.
  * Carries past 60 move into the next unit.

## What it does not do

surveycalc has no graphical interface and no dialog windows. All of its work is done through the `surveycalc` command or by calling the modules from Python. It has no storage, and it keeps no history of calculations.