import pytest

from clubpairing.pairing.stage_names import stage_name


@pytest.mark.parametrize(
    "count, expected",
    [
        (2, "Final"),
        (4, "Semi-Finals"),
        (8, "Quarter-Finals"),
        (3, "Round of 3"),
        (6, "Round of 6"),
        (16, "Round of 16"),
    ],
)
def test_named_stages(count, expected):
    assert stage_name(1, count) == expected


def test_large_fields_fall_back_to_stage_number():
    assert stage_name(1, 17) == "Stage 1"
    assert stage_name(2, 32) == "Stage 2"


def test_name_depends_only_on_participants_for_small_fields():
    assert stage_name(1, 4) == stage_name(5, 4)
