import pytest

from structlab.polynomial import Polynomial, Term


def test_empty_polynomial():
    poly = Polynomial()
    assert len(poly) == 0
    assert list(poly) == []


def test_single_term():
    poly = Polynomial([(2.0, 3)])
    assert list(poly) == [Term(2.0, 3)]


def test_terms_sorted_by_exponent():
    poly = Polynomial([(2.0, 3), (3.0, 1), (1.0, 0)])
    assert list(poly) == [Term(1.0, 0), Term(3.0, 1), Term(2.0, 3)]


def test_like_terms_are_combined():
    poly = Polynomial([(2.0, 2), (3.0, 2), (4.0, 2)])
    assert list(poly) == [Term(9.0, 2)]


def test_accepts_term_objects():
    assert Polynomial([Term(2.0, 3)]) == Polynomial([(2.0, 3)])


def test_add_different_exponents():
    first = Polynomial([(2.0, 3), (3.0, 1)])
    second = Polynomial([(4.0, 2), (5.0, 0)])
    expected = Polynomial([(5.0, 0), (3.0, 1), (4.0, 2), (2.0, 3)])
    assert first + second == expected


def test_add_same_exponents_keeps_zero_terms():
    first = Polynomial([(2.0, 3), (3.0, 1)])
    second = Polynomial([(4.0, 3), (-3.0, 1)])
    assert list(first + second) == [Term(0.0, 1), Term(6.0, 3)]


def test_add_empty():
    poly = Polynomial([(2.0, 3), (3.0, 1)])
    assert poly + Polynomial() == poly
    assert Polynomial() + poly == poly


def test_add_leaves_operands_unchanged():
    first = Polynomial([(2.0, 3), (3.0, 1)])
    second = Polynomial([(4.0, 3)])
    first + second
    assert list(first) == [Term(3.0, 1), Term(2.0, 3)]
    assert list(second) == [Term(4.0, 3)]


def test_add_is_commutative():
    first = Polynomial([(9, 0), (6, 1), (8, 9)])
    second = Polynomial([(7, 1), (-8, 9), (3, 14)])
    assert first + second == second + first


def test_add_rejects_other_types():
    with pytest.raises(TypeError):
        Polynomial([(1.0, 0)]) + 1


def test_many_terms():
    poly = Polynomial((float(i + 1), i) for i in range(100))
    terms = list(poly)
    assert len(poly) == 100
    assert terms[0] == Term(1.0, 0)
    assert terms[-1] == Term(100.0, 99)


def test_worked_example():
    first = Polynomial([(9, 0), (6, 1), (8, 9), (3, 14)])
    second = Polynomial([(7, 1), (21, 7), (-8, 9)])
    assert str(first + second) == "9.0x^0+13.0x^1+21.0x^7+0.0x^9+3.0x^14"


def test_str_negative_terms_have_no_plus():
    poly = Polynomial([(7, 1), (21, 7), (-8, 9)])
    assert "+-" not in str(poly)
    assert str(poly).endswith("-8.0x^9")