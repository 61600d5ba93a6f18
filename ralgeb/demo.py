from . import Circle, Line, Matrix, Point, combinatorics
from .errors import RalgebError


def run():
    line = Line(Point.origin(), Point(1.0, 1.0))
    print(f"Line {line}: length={line.length()} slope={line.slope()} theta={line.theta()}")

    circle = Circle(1.0, Point.origin())
    print(f"Circle r=1 at {circle.centre}: circumference={circle.circumference()} area={circle.area()}")

    print(f"3! = {combinatorics.factorial(3)}, P(3,2) = {combinatorics.permutation(3, 2)}, C(4,3) = {combinatorics.combinations(4, 3)}")

    identity = Matrix.identity(3, 3)
    m = Matrix.new(3, 2).replace_row(0, [1.0, 2.0])
    print(f"I x M = {(identity @ m).to_list()}")
    print(f"4 * I principal = {identity.scalar_mat_mul(4.0).get_principal()}")
    print(f"transpose(M) = {m.transpose().to_list()}")

    try:
        identity @ Matrix.new(2, 2)
    except RalgebError as exc:
        print(f"3x3 x 2x2 rejected: {exc}")

    print(f"identity(2, 3) -> {Matrix.identity(2, 3)}")


if __name__ == "__main__":
    run()
