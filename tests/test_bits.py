import pytest

from hornetkit.bits import BitMatrix, BitRef, BitRow, Matrix


def test_bitref_set_and_clear():
    words = [0, 0]
    ref = BitRef(words, 1, 1 << 5)
    assert not ref
    ref.set(True)
    assert bool(ref)
    assert words[0] == 0
    ref.set(False)
    assert not ref
    assert words == [0, 0]


def test_bitref_leaves_other_bits():
    words = [0xFFFFFFFF]
    ref = BitRef(words, 0, 1 << 3)
    ref.set(False)
    assert not ref
    assert bool(BitRef(words, 0, 1 << 2))
    assert bool(BitRef(words, 0, 1 << 4))
    ref.set(True)
    assert words[0] == 0xFFFFFFFF


def test_bitrow_crosses_word_boundary():
    words = [0, 0, 0]
    row = BitRow(words, 1)
    row[33] = True
    assert bool(row[33])
    assert words[0] == 0 and words[1] == 0
    assert words[2] == 1 << 1
    row[33] = False
    assert not row[33]


def test_bitrow_negative_index():
    with pytest.raises(IndexError):
        BitRow([0], 0)[-1]


def test_bitmatrix_starts_empty():
    m = BitMatrix(3, 70)
    assert m.nnz() == 0
    assert not any(bool(m[i][j]) for i in range(3) for j in range(70))


def test_bitmatrix_rows_are_independent():
    m = BitMatrix(2, 70)
    m[0][65] = True
    assert bool(m[0][65])
    assert not m[1][65]
    assert not m[1][1]
    assert m.nnz() == 1


def test_bitmatrix_nnz_counts_set_bits():
    m = BitMatrix(4, 40)
    cells = [(0, 0), (1, 39), (2, 31), (3, 32), (3, 0)]
    for i, j in cells:
        m[i][j] = True
    assert m.nnz() == len(cells)
    m[0][0] = True
    assert m.nnz() == len(cells)


def test_bitmatrix_row_reset_and_reset():
    m = BitMatrix(3, 10)
    for i in range(3):
        m[i][i] = True
    m.row_reset(1)
    assert not m[1][1]
    assert bool(m[0][0]) and bool(m[2][2])
    assert m.nnz() == 2
    m.reset()
    assert m.nnz() == 0


def test_bitmatrix_copy_is_independent():
    m = BitMatrix(2, 5)
    m[1][4] = True
    c = m.copy()
    assert bool(c[1][4])
    c[0][0] = True
    assert not m[0][0]
    assert c.nnz() == m.nnz() + 1


def test_bitmatrix_row_out_of_range():
    m = BitMatrix(2, 5)
    with pytest.raises(IndexError):
        m[2]
    with pytest.raises(IndexError):
        m.row_reset(-1)


def test_bitmatrix_render():
    m = BitMatrix(1, 2)
    m[0][0] = True
    assert m.render("m") == "m  (1 x 2)\n\n1 0 \n\nnnz: 1\n\n"


def test_matrix_fill_and_assign():
    m = Matrix(2, 3, fill=7)
    assert m[0] == [7, 7, 7]
    m[1][2] = 9
    assert m[1][2] == 9
    assert m[0][2] == 7


def test_matrix_copy_is_deep():
    m = Matrix(2, 2)
    m[0][0] = 5
    c = m.copy()
    c[0][0] = 6
    assert m[0][0] == 5
    assert c[0][0] == 6
    assert (c.rows, c.cols) == (m.rows, m.cols)


def test_matrix_render():
    m = Matrix(2, 2)
    m[0][0], m[0][1], m[1][0], m[1][1] = 1, 2, 3, 4
    assert m.render() == "1 2 \n3 4 \n\n"


def test_matrix_row_out_of_range():
    with pytest.raises(IndexError):
        Matrix(2, 2)[5]


def test_matrix_negative_dimensions():
    with pytest.raises(ValueError):
        Matrix(-1, 2)
    with pytest.raises(ValueError):
        BitMatrix(1, -2)