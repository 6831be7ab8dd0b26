"""Sample the height of a projectile over time.

The height in meters after x seconds, with a launch speed of 20 m/s and
gravity rounded to 10 m/s^2, is ``20 * x - 5 * x ^ 2``.
"""

import termplot as tp

equation = tp.Equation("20 * x - 5 * x ^ 2")

if __name__ == "__main__":
    print(equation)
    print("Height after 1.5 s:", equation.evaluate(1.5))

    result = tp.PlotRequest(equation=equation.equation_string, to="4", step="0.5").evaluate()
    for x, y in result.points.items():
        print(f"  t = {x:>4} s  h = {y:>6} m")

    tp.export_to_toml(result, "projectile.toml")
