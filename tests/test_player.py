from monoopoly.config import NUMBER_OF_FIELDS, STARTING_MONEY
from monoopoly.player import Player


def test_new_player_starts_with_money_at_start():
    player = Player(0, "Alice")
    assert player.balance == STARTING_MONEY
    assert player.current_field_index == 0
    assert player.name == "Alice"
    assert player.is_resigned is False


def test_move_by_returns_new_position():
    player = Player(1, "Bob")
    assert player.move_by(5) == 5
    assert player.current_field_index == 5


def test_move_wraps_around_board():
    player = Player(0, "Alice")
    player.move_by(NUMBER_OF_FIELDS - 1)
    assert player.move_by(4) == 3


def test_negative_position_clamps_to_zero():
    player = Player(0, "Alice")
    player.current_field_index = -4
    assert player.current_field_index == 0


def test_position_always_on_board():
    player = Player(0, "Alice")
    for steps in range(1, 100, 7):
        assert 0 <= player.move_by(steps) < NUMBER_OF_FIELDS


def test_negative_balance_clamps_to_zero():
    player = Player(0, "Alice")
    player.balance = -100
    assert player.balance == 0


def test_balance_can_be_set():
    player = Player(0, "Alice")
    player.balance = STARTING_MONEY - 200
    assert player.balance == STARTING_MONEY - 200