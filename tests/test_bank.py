from monoopoly.bank import Bank
from monoopoly.config import STARTING_MONEY
from monoopoly.fields import PropertyField
from monoopoly.player import Player


def _property(price):
    return PropertyField(3, "Oriental", "LightBlue", price, 6, 50, 250)


def test_successful_purchase():
    player = Player(0, "Alice")
    prop = _property(100)
    assert Bank().buy_property(prop, player) is True
    assert prop.owner is player
    assert player.balance == STARTING_MONEY - 100


def test_purchase_with_exact_balance_leaves_zero():
    player = Player(0, "Alice")
    prop = _property(STARTING_MONEY)
    assert Bank().buy_property(prop, player) is True
    assert player.balance == 0


def test_insufficient_funds_changes_nothing():
    player = Player(1, "Bob")
    prop = _property(STARTING_MONEY + 1)
    assert Bank().buy_property(prop, player) is False
    assert prop.owner is None
    assert player.balance == STARTING_MONEY