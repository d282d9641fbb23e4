from monoopoly import config
from monoopoly.config import board_field_count


def test_standard_board_has_twenty_four_fields():
    assert board_field_count(9, 5) == 24


def test_corner_only_board():
    assert board_field_count(2, 2) == 4


def test_number_of_fields_matches_board_dimensions():
    assert config.NUMBER_OF_FIELDS == board_field_count(
        config.BOARD_WIDTH, config.BOARD_HEIGHT
    )


def test_field_count_is_symmetric_in_width_and_height():
    assert board_field_count(7, 4) == board_field_count(4, 7)


def test_growing_width_by_one_adds_two_fields():
    assert board_field_count(6, 5) - board_field_count(5, 5) == 2