"""The bank that sells properties to players."""


class Bank:
    """Handles purchases between players and the bank."""

    def buy_property(self, property_field, player) -> bool:
        """Sell a property to a player who can afford it.

        Returns True if the purchase happened, False if the player lacks money.
        """
        if player.balance < property_field.price:
            return False
        property_field.owner = player
        player.balance -= property_field.price
        return True