from __future__ import annotations

import pytest

from gridminimax import ConfigurationError, depth_budget, depth_budget_for_width


def test_small_board_is_searched_exhaustively():
    assert depth_budget_for_width(3) == 9
    assert depth_budget(4) == 4


def test_larger_boards_are_cut_off():
    # 16 * 15 * 14 * 13 * 12 = 524160, times 11 exceeds a million
    assert depth_budget_for_width(4) == 5
    # 25 * 24 * 23 * 22 = 303600, times 21 exceeds a million
    assert depth_budget_for_width(5) == 4


def test_budget_follows_the_cap():
    assert depth_budget(16, iteration_cap=240) == 2
    assert depth_budget(16, iteration_cap=239) == 1
    assert depth_budget(2, iteration_cap=1) == 0
    assert depth_budget(1, iteration_cap=1) == 1
    assert depth_budget(0) == 0


def test_budget_non_increasing_with_width():
    budgets = [depth_budget_for_width(width) for width in range(3, 10)]
    assert budgets == sorted(budgets, reverse=True)


def test_budget_non_decreasing_with_cap():
    for width in (3, 4, 6):
        budgets = [depth_budget_for_width(width, 10 ** power) for power in range(0, 9)]
        assert budgets == sorted(budgets)


def test_invalid_configuration_fails_fast():
    with pytest.raises(ConfigurationError):
        depth_budget(9, iteration_cap=0)
    with pytest.raises(ConfigurationError):
        depth_budget(-1)
