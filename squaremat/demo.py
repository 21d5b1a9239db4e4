"""Command that walks through the matrix operations and prints each result."""

from __future__ import annotations

import argparse
import sys

from squaremat.matrix import SquareMat


def _diagonal(*values: float) -> SquareMat:
    mat = SquareMat(len(values))
    for index, value in enumerate(values):
        mat[index][index] = value
    return mat


def _show(title: str, mat: SquareMat) -> None:
    print(f"{title}:")
    print(mat, end="")


def _run() -> None:
    mat1 = _diagonal(7.5, -2.3, 9.9)
    _show("Matrix mat1", mat1)

    mat2 = _diagonal(1.0, 2.0, 3.0)

    _show("Sum of mat1 + mat2", mat1 + mat2)
    _show("Negated mat1", -mat1)
    _show("Difference mat1 - mat2", mat1 - mat2)
    _show("mat1 * 2.0", mat1 * 2.0)
    _show("2.0 * mat1", 2.0 * mat1)
    _show("Product of mat1 * mat2", mat1 * mat2)
    _show("Element-wise multiplication mat1 % mat2", mat1 % mat2)
    _show("mat1 % 3", mat1 % 3)
    _show("mat1 / 2.0", mat1 / 2.0)
    _show("mat1 ^ 2", mat1 ** 2)

    _show("Before ++mat1", mat1)
    mat1.increment()
    _show("After ++mat1", mat1)
    mat1.decrement()
    _show("After mat1--", mat1)

    _show("Transposed mat1", ~mat1)
    print(f"Determinant of mat1: {mat1.determinant():g}")

    print(f"mat1 == mat2: {int(mat1 == mat2)}")
    print(f"mat1 != mat2: {int(mat1 != mat2)}")
    print(f"mat1 > mat2: {int(mat1 > mat2)}")

    mat1 += mat2
    _show("mat1 after += mat2", mat1)
    mat1 *= 2.0
    _show("mat1 after *= 2.0", mat1)
    mat1 %= 3
    _show("mat1 after %= 3", mat1)


def main(argv: list[str] | None = None) -> int:
    """Print a tour of the matrix operations; errors go to stderr."""
    parser = argparse.ArgumentParser(
        description="Demonstrate square matrix operations."
    )
    parser.parse_args(argv)
    try:
        _run()
    except (ValueError, ZeroDivisionError, IndexError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())