import pytest

from skilltracker.core.validation import (
    parse_int,
    validate_count,
    validate_log_date,
    validate_skill_name,
    validate_skill_selection,
    validate_weekly_goal,
)


@pytest.mark.parametrize(
    "raw, expected",
    [(3, 3), ("3", 3), (" 12x", 12), ("-2", -2), (4.9, 4), ("abc", None), ("", None), (None, None), (True, None)],
)
def test_parse_int(raw, expected):
    assert parse_int(raw) == expected


def test_skill_name_is_trimmed():
    assert validate_skill_name("  Piano ") == "Piano"
    for bad in ("", "   ", None):
        with pytest.raises(ValueError, match="Skill name is required"):
            validate_skill_name(bad)


def test_weekly_goal_bounds():
    assert validate_weekly_goal(1) == 1
    assert validate_weekly_goal("50") == 50
    with pytest.raises(ValueError, match="at least 1"):
        validate_weekly_goal(0)
    with pytest.raises(ValueError, match="at least 1"):
        validate_weekly_goal("many")
    with pytest.raises(ValueError, match="cannot exceed 50"):
        validate_weekly_goal(51)


def test_count_must_be_positive():
    assert validate_count("2") == 2
    for bad in (0, -1, "none", None):
        with pytest.raises(ValueError, match="Count must be at least 1"):
            validate_count(bad)


def test_skill_selection_required():
    assert validate_skill_selection(" abc ") == "abc"
    with pytest.raises(ValueError, match="Please select a skill"):
        validate_skill_selection("")


def test_log_date_is_canonical():
    assert validate_log_date("2025-1-6") == "2025-01-06"
    with pytest.raises(ValueError, match="YYYY-MM-DD"):
        validate_log_date(20250106)
