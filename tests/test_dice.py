"""Unit tests for dice parsing, sums and win probabilities."""

import pytest

from dicegame.errors import ConfigurationError
from dicegame.models.dice import Dice
from dicegame.services.dice_service import dice_sum, parse_dice, validate_dice_arguments
from dicegame.services.probability_service import calculate_win_probabilities, render_help_table

CLASSIC = ["2,2,4,4,9,9", "1,1,6,6,8,8", "3,3,5,5,7,7"]


class TestDiceSum:
    """Test dice evaluation."""

    def test_sum(self):
        assert dice_sum([2, 3, 4]) == 9

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            dice_sum([])

    def test_dice_total(self):
        assert Dice((1, 1, 6, 6, 8, 8)).total == 30

    def test_dice_without_faces_rejected(self):
        with pytest.raises(ValueError):
            Dice(())


class TestValidateDiceArguments:
    """Test command line dice validation."""

    def test_valid_arguments(self):
        """Test three well-formed dice are parsed in order."""
        dice = validate_dice_arguments(CLASSIC)
        assert [d.label for d in dice] == CLASSIC
        assert dice[0].faces == (2, 2, 4, 4, 9, 9)

    def test_too_few_dice(self):
        """Test fewer than three dice is a configuration error."""
        with pytest.raises(ConfigurationError, match="at least 3"):
            validate_dice_arguments(CLASSIC[:2])

    def test_no_dice(self):
        with pytest.raises(ConfigurationError):
            validate_dice_arguments([])

    @pytest.mark.parametrize("bad", ["1,2,", ",1", "1,,2", "a,b", "1.5,2", "-1,2", "1 2", "", "1,2\n"])
    def test_malformed_dice(self, bad):
        """Test anything but comma-separated non-negative integers is rejected."""
        with pytest.raises(ConfigurationError, match="comma-separated integers"):
            validate_dice_arguments(["1,2,3", "4,5,6", bad])

    def test_single_face_dice(self):
        """Test a single-number definition is a valid dice."""
        assert parse_dice("7").faces == (7,)

    def test_zero_faces_allowed(self):
        assert parse_dice("0,0,0").total == 0


class TestWinProbabilities:
    """Test the sum-based win-probability estimator."""

    def test_equal_sums_are_all_ties(self):
        """Test dice with equal sums all get 0%, ties are not wins."""
        probabilities = calculate_win_probabilities(validate_dice_arguments(CLASSIC))
        assert [p.percent for p in probabilities] == [0.0, 0.0, 0.0]
        assert all(p.total_comparisons == 2 for p in probabilities)
        assert all(p.wins == 0 for p in probabilities)

    def test_distinct_sums(self):
        """Test the largest sum wins everything and the smallest nothing."""
        dice = [Dice((10,)), Dice((20,)), Dice((30,)), Dice((40,))]
        probabilities = calculate_win_probabilities(dice)
        assert probabilities[3].percent == 100.0
        assert probabilities[0].percent == 0.0
        assert probabilities[1].wins == 1
        assert probabilities[2].wins == 2

    def test_tie_stays_in_denominator(self):
        """Test one tie and one win give 50%, not 75%."""
        dice = [Dice((5,)), Dice((5,)), Dice((1,))]
        probabilities = calculate_win_probabilities(dice)
        assert probabilities[0].wins == 1
        assert probabilities[0].total_comparisons == 2
        assert probabilities[0].percent == 50.0

    def test_single_dice(self):
        assert calculate_win_probabilities([Dice((1,))])[0].percent == 0.0

    def test_order_preserved(self):
        dice = [Dice((3,)), Dice((1,)), Dice((2,))]
        assert [p.dice for p in calculate_win_probabilities(dice)] == dice


class TestHelpTable:
    """Test help table rendering."""

    def test_table_lists_every_dice(self):
        dice = validate_dice_arguments(["1,2", "3,4", "5,6"])
        table = render_help_table(dice)
        for d in dice:
            assert d.label in table
        assert "100.00%" in table
        assert "0.00%" in table
        assert "Win probabilities" in table

    def test_table_format(self):
        """Test the tabulate format can be chosen."""
        table = render_help_table(validate_dice_arguments(CLASSIC), tablefmt="grid")
        assert "+---" in table
