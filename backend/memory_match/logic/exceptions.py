"""Typed domain exceptions for game rule violations.

Routine selection noise (clicking a matched card, a third card while a pair
is pending) is never raised: the session ignores it. These exceptions cover
programming and configuration errors only.
"""


class GameRuleError(Exception):
    """Base exception for game rule violations."""


class UnknownPowerUpError(GameRuleError):
    """Power-up name does not map to any known power-up kind."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown power-up: {name!r}")


class UnsupportedSettingsError(GameRuleError):
    """Game rules or theme tables contain values the engine cannot honour."""


class UnknownCardError(GameRuleError):
    """Card id is not part of the current deck."""

    def __init__(self, card_id: str) -> None:
        self.card_id = card_id
        super().__init__(f"unknown card: {card_id!r}")


class NotPendingPairError(GameRuleError):
    """The two cards are not the selection waiting to be resolved."""

    def __init__(self, id_a: str, id_b: str) -> None:
        self.card_ids = (id_a, id_b)
        super().__init__(f"cards {id_a!r} and {id_b!r} are not the pending pair")
