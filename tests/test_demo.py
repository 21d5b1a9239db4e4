from squaremat.demo import main
from squaremat.matrix import SquareMat


def _diag(*values):
    mat = SquareMat(len(values))
    for i, value in enumerate(values):
        mat[i][i] = value
    return mat


def _run(capsys):
    code = main([])
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_exit_code_and_no_errors(capsys):
    code, _, err = _run(capsys)
    assert code == 0
    assert err == ""


def test_first_matrix_printed(capsys):
    _, out, _ = _run(capsys)
    assert out.startswith("Matrix mat1:\n[ 7.5 0 0 ]\n[ 0 -2.3 0 ]\n[ 0 0 9.9 ]\n")


def test_operation_sections_match_package(capsys):
    _, out, _ = _run(capsys)
    mat1 = _diag(7.5, -2.3, 9.9)
    mat2 = _diag(1.0, 2.0, 3.0)
    expected = [
        ("Sum of mat1 + mat2", mat1 + mat2),
        ("Negated mat1", -mat1),
        ("Difference mat1 - mat2", mat1 - mat2),
        ("mat1 * 2.0", mat1 * 2.0),
        ("2.0 * mat1", 2.0 * mat1),
        ("Product of mat1 * mat2", mat1 * mat2),
        ("Element-wise multiplication mat1 % mat2", mat1 % mat2),
        ("mat1 % 3", mat1 % 3),
        ("mat1 / 2.0", mat1 / 2.0),
        ("mat1 ^ 2", mat1 ** 2),
        ("Transposed mat1", ~mat1.copy().increment().decrement()),
    ]
    for title, mat in expected:
        assert f"{title}:\n{mat}" in out


def test_comparisons_and_compound_assignments(capsys):
    _, out, _ = _run(capsys)
    mat1 = _diag(7.5, -2.3, 9.9).increment().decrement()
    mat2 = _diag(1.0, 2.0, 3.0)
    assert f"Determinant of mat1: {mat1.determinant():g}\n" in out
    assert f"mat1 == mat2: {int(mat1 == mat2)}\n" in out
    assert f"mat1 != mat2: {int(mat1 != mat2)}\n" in out
    assert f"mat1 > mat2: {int(mat1 > mat2)}\n" in out
    mat1 += mat2
    assert f"mat1 after += mat2:\n{mat1}" in out
    mat1 *= 2.0
    assert f"mat1 after *= 2.0:\n{mat1}" in out
    mat1 %= 3
    assert out.endswith(f"mat1 after %= 3:\n{mat1}")


def test_increment_sections_in_order(capsys):
    _, out, _ = _run(capsys)
    before = out.index("Before ++mat1:")
    after_inc = out.index("After ++mat1:")
    after_dec = out.index("After mat1--:")
    assert before < after_inc < after_dec
    incremented = _diag(7.5, -2.3, 9.9).increment()
    assert f"After ++mat1:\n{incremented}" in out