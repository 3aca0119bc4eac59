"""
Unit tests for the digit-pair classifier.

Run: pytest tests/unit/test_classifier.py -v
"""

import pytest

from sempoa.core.classifier import build_matrix, classify, first_digits_with, friends_of
from sempoa.core.constants import Operation, Technique


class TestMatrix:
    """Test the precomputed technique tables."""

    @pytest.mark.parametrize("operation", [Operation.ADDITION, Operation.SUBTRACTION])
    def test_every_pair_has_exactly_one_technique(self, operation):
        """The table is a total 10x10 grid of Technique values."""
        matrix = build_matrix()[operation]
        assert len(matrix) == 10
        for row in matrix:
            assert len(row) == 10
            assert all(isinstance(technique, Technique) for technique in row)

    def test_matrix_is_built_once(self):
        """Repeated calls return the same table."""
        assert build_matrix() is build_matrix()

    def test_addition_category_counts(self):
        """45 big-friend pairs (sum >= 10), 10 small-friend pairs, rest direct."""
        cells = [technique for row in build_matrix()[Operation.ADDITION] for technique in row]
        assert cells.count(Technique.BIG_FRIEND) == 45
        assert cells.count(Technique.SMALL_FRIEND) == 10
        assert cells.count(Technique.NONE) == 45

    @pytest.mark.parametrize("operation", [Operation.ADDITION, Operation.SUBTRACTION])
    def test_family_is_never_produced(self, operation):
        """Big friend takes precedence over every family pair."""
        cells = [technique for row in build_matrix()[operation] for technique in row]
        assert Technique.FAMILY not in cells


class TestClassify:
    """Test single-pair classification."""

    # ========================================
    # Addition
    # ========================================

    def test_addition_crossing_ten_is_big_friend(self):
        assert classify(Operation.ADDITION, 7, 3) == Technique.BIG_FRIEND
        assert classify(Operation.ADDITION, 9, 9) == Technique.BIG_FRIEND

    def test_addition_crossing_five_is_small_friend(self):
        assert classify(Operation.ADDITION, 3, 4) == Technique.SMALL_FRIEND
        assert classify(Operation.ADDITION, 4, 1) == Technique.SMALL_FRIEND

    def test_addition_direct(self):
        assert classify(Operation.ADDITION, 0, 0) == Technique.NONE
        assert classify(Operation.ADDITION, 2, 2) == Technique.NONE
        assert classify(Operation.ADDITION, 5, 4) == Technique.NONE
        assert classify(Operation.ADDITION, 3, 6) == Technique.NONE

    def test_addition_accepts_string_operation(self):
        assert classify("addition", 7, 3) == Technique.BIG_FRIEND

    # ========================================
    # Subtraction
    # ========================================

    def test_subtraction_borrow_is_big_friend(self):
        assert classify(Operation.SUBTRACTION, 5, 6) == Technique.BIG_FRIEND
        assert classify(Operation.SUBTRACTION, 0, 1) == Technique.BIG_FRIEND

    def test_subtraction_crossing_five_is_small_friend(self):
        assert classify(Operation.SUBTRACTION, 6, 2) == Technique.SMALL_FRIEND
        assert classify(Operation.SUBTRACTION, 8, 4) == Technique.SMALL_FRIEND

    def test_subtraction_direct(self):
        assert classify(Operation.SUBTRACTION, 0, 0) == Technique.NONE
        assert classify(Operation.SUBTRACTION, 9, 4) == Technique.NONE
        assert classify(Operation.SUBTRACTION, 6, 6) == Technique.NONE

    # ========================================
    # Invalid input
    # ========================================

    @pytest.mark.parametrize("a,b", [(-1, 0), (0, 10), (12, 3)])
    def test_rejects_non_digits(self, a, b):
        with pytest.raises(ValueError):
            classify(Operation.ADDITION, a, b)

    def test_rejects_mixed(self):
        with pytest.raises(ValueError):
            classify(Operation.MIXED, 1, 2)

    def test_rejects_unknown_operation(self):
        with pytest.raises(ValueError):
            classify("multiplication", 1, 2)


class TestFriendLookups:
    """Test partner and first-operand lookups."""

    def test_small_friends_of_three_for_addition(self):
        assert friends_of(3, Operation.ADDITION, Technique.SMALL_FRIEND) == [2, 3, 4]

    def test_big_friends_of_seven_for_addition(self):
        assert friends_of(7, Operation.ADDITION, Technique.BIG_FRIEND) == [3, 4, 5, 6, 7, 8, 9]

    def test_direct_partners_of_three_for_addition(self):
        assert friends_of(3, Operation.ADDITION, Technique.NONE) == [0, 1, 5, 6]

    def test_big_friends_of_five_for_subtraction(self):
        assert friends_of(5, Operation.SUBTRACTION, Technique.BIG_FRIEND) == [6, 7, 8, 9]

    def test_small_friends_of_six_for_subtraction(self):
        assert friends_of(6, Operation.SUBTRACTION, "smallFriend") == [2, 3, 4]

    def test_family_lookup_is_empty(self):
        assert friends_of(4, Operation.ADDITION, Technique.FAMILY) == []

    def test_first_digits_with_small_friend_addition(self):
        assert first_digits_with(Operation.ADDITION, Technique.SMALL_FRIEND) == [1, 2, 3, 4]

    def test_first_digits_with_small_friend_subtraction(self):
        assert first_digits_with(Operation.SUBTRACTION, Technique.SMALL_FRIEND) == [5, 6, 7, 8]

    def test_first_digits_with_big_friend_subtraction(self):
        assert first_digits_with(Operation.SUBTRACTION, Technique.BIG_FRIEND) == list(range(9))

    def test_lookup_matches_classify(self):
        """Every partner returned classifies as the requested technique."""
        for digit in range(10):
            for technique in Technique:
                for partner in friends_of(digit, Operation.SUBTRACTION, technique):
                    assert classify(Operation.SUBTRACTION, digit, partner) == technique
