"""Tests for finite functions, coequalizers and their universal property."""

import pytest

from open_hypergraphs import (
    DomainMismatchError,
    FiniteFunction,
    InconsistentMergeError,
    LengthMismatchError,
    OutOfRangeError,
    SemifiniteFunction,
    VecArray,
    coequalizer_universal,
)


def ff(table, target):
    return FiniteFunction(VecArray(table), target)


class TestFiniteFunction:
    """Tests for construction and the basic constructors."""

    def test_source_and_target(self):
        f = ff([0, 2, 1], 3)
        assert f.source == 3
        assert f.target == 3
        assert len(f) == 3

    def test_entry_out_of_range_raises(self):
        with pytest.raises(OutOfRangeError, match="out of range for target 2"):
            ff([0, 2], 2)

    def test_negative_target_raises(self):
        with pytest.raises(OutOfRangeError):
            ff([], -1)

    def test_negative_entry_raises(self):
        with pytest.raises(OutOfRangeError, match="entry -1 is negative"):
            ff([-1], 2)
        with pytest.raises(IndexError):
            ff([0, -3, 1], 4)

    def test_identity(self):
        assert FiniteFunction.identity(3) == ff([0, 1, 2], 3)

    def test_initial(self):
        f = FiniteFunction.initial(4)
        assert f.source == 0
        assert f.target == 4

    def test_constant(self):
        assert FiniteFunction.constant(3, 1, 5) == ff([1, 1, 1], 5)

    def test_constant_empty_source(self):
        f = FiniteFunction.constant(0, 1, 1)
        assert f.source == 0


class TestComposition:
    """Tests for compose, tensor and coproduct."""

    def test_compose(self):
        f = ff([0, 1, 1], 2)
        g = ff([3, 0], 4)
        assert f >> g == ff([3, 0, 0], 4)

    def test_compose_with_identity(self):
        f = ff([2, 0], 3)
        assert FiniteFunction.identity(2) >> f == f
        assert f >> FiniteFunction.identity(3) == f

    def test_compose_domain_mismatch(self):
        with pytest.raises(DomainMismatchError):
            ff([0], 2) >> ff([0, 0, 0], 1)

    def test_tensor(self):
        f = ff([1, 0], 2)
        g = ff([2], 3)
        assert f @ g == ff([1, 0, 4], 5)

    def test_coproduct(self):
        f = ff([1], 3)
        g = ff([0, 2], 3)
        assert f + g == ff([1, 0, 2], 3)

    def test_coproduct_target_mismatch(self):
        with pytest.raises(DomainMismatchError):
            ff([1], 3) + ff([0], 2)


class TestCoequalizer:
    """Tests for FiniteFunction.coequalizer."""

    def test_no_pairs_is_identity(self):
        s = FiniteFunction.initial(4)
        q = s.coequalizer(FiniteFunction.initial(4))
        assert q == FiniteFunction.identity(4)

    def test_two_components(self):
        s = ff([0, 2], 4)
        t = ff([1, 3], 4)
        q = s.coequalizer(t)
        assert q == ff([0, 0, 1, 1], 2)
        assert s >> q == t >> q

    def test_first_occurrence_order(self):
        s = ff([4], 5)
        t = ff([1], 5)
        q = s.coequalizer(t)
        assert q == ff([0, 1, 2, 3, 1], 4)

    def test_transitive_chain(self):
        s = ff([3, 2, 1], 5)
        t = ff([2, 1, 0], 5)
        q = s.coequalizer(t)
        assert q == ff([0, 0, 0, 0, 1], 2)

    def test_not_parallel_raises(self):
        with pytest.raises(DomainMismatchError, match="parallel"):
            ff([0], 2).coequalizer(ff([0], 3))


class TestCoequalizerUniversal:
    """Tests for coequalizer_universal."""

    def test_merges_equal_values(self):
        q = ff([0, 0, 1, 1], 2)
        assert coequalizer_universal(q, VecArray(["a", "a", "b", "b"])) == VecArray(["a", "b"])

    def test_inconsistent_values_raise(self):
        q = ff([0, 0, 1], 2)
        with pytest.raises(InconsistentMergeError, match="'x'"):
            coequalizer_universal(q, VecArray(["a", "x", "b"]))

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError):
            coequalizer_universal(ff([0, 0], 1), VecArray(["a"]))

    def test_not_surjective(self):
        with pytest.raises(DomainMismatchError, match="surjective"):
            coequalizer_universal(ff([0], 2), VecArray(["a"]))

    def test_plain_sequence_input(self):
        assert coequalizer_universal(ff([1, 0], 2), ["x", "y"]) == VecArray(["y", "x"])


class TestSemifiniteFunction:
    def test_len(self):
        assert len(SemifiniteFunction(VecArray(["a", "b"]))) == 2
