# squaremat

`squaremat` provides `SquareMat`, an N×N matrix of floats. It supports the usual
arithmetic operators and a few less common ones. It has no dependencies outside
the standard library.

## Installation

```
pip install .
```

To install it with the test dependencies:

```
pip install .[test]
```

## Usage

```python
from squaremat.matrix import SquareMat

a = SquareMat(3)          # 3x3, all zeros
a[0][0] = 7.5
a[1][1] = -2.3
a[2][2] = 9.9

b = SquareMat(3)
b[0][0], b[1][1], b[2][2] = 1.0, 2.0, 3.0

print(a.size, len(a))     # 3 3
c = a.copy()              # independent copy

print(a + b)              # element-wise sum
print(a - b)              # element-wise difference
print(-a)                 # negation (zeros stay 0.0, never -0.0)
print(a * 2.0, 2.0 * a)   # scalar scaling
print(a * b)              # matrix product
print(a % b)              # element-wise product
print(a % 3)              # element-wise math.fmod (sign follows the dividend)
print(a / 2.0)            # scalar division
print(a ** 2)             # non-negative integer power; a ** 0 is the identity
print(~a)                 # transpose, same as a.transpose()
print(a.determinant())    # determinant by cofactor expansion along the first row
print(a.total())          # sum of all elements

a.increment()             # add 1 to every element in place, returns a
a.decrement()             # subtract 1 from every element in place, returns a

a += b
a -= b
a *= 2.0                  # scalar; with a matrix, *= is element-wise
a /= 2.0
a %= 3                    # with a matrix, %= is element-wise product
```

Indexing is two-level: `a[i]` returns a view of row `i`, and `a[i][j]` reads or
writes a single element. Values written are stored as floats.

A matrix prints as one line per row, in the form `[ 1 0 0 ]`, each value
formatted with `g`.

Matrices compare by the **sum of their elements** (`a.total()`). This applies
to `==`, `!=`, `<`, `>`, `<=` and `>=`. Two matrices with different contents
but the same sum are therefore equal. Matrices are not hashable.

### Errors

- `SquareMat(n)` with `n <= 0` raises `ValueError`; a non-integer `n` raises `TypeError`.
- A row or column index outside `0..n-1` raises `IndexError`; a non-integer index raises `TypeError`.
- `+`, `-`, `*` (matrix) and `%` (matrix) on matrices of different sizes raise `ValueError`.
- `% 0` and `/ 0.0` raise `ZeroDivisionError`.
- A negative power raises `ValueError`; a non-integer power raises `TypeError`.

## Demo

```
squaremat-demo
```

This command runs through every operator on a pair of 3×3 diagonal matrices and
prints each result to standard output. It takes no options besides `--help`.
If an operation fails, the error is printed to standard error as
`Error: <message>` and the command still exits with status 0.