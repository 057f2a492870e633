"""Lottery results and their prize values."""

import random

_LEFT_CHARSET = "123456789W"
_MIDDLE_CHARSET = "123456789I"
_RIGHT_CHARSET = "123456789N"

_REWARD_VALUES = {
    "111": 100,
    "222": 200,
    "333": 300,
    "444": 400,
    "555": 500,
    "666": 600,
    "777": 700,
    "888": 800,
    "999": 900,
    "WIN": 9999,
}

_PRIZE_TABLE = {
    "111": 100,
    "222": 100,
    "333": 100,
    "444": 100,
    "555": 100,
    "666": 100,
    "777": 200,
    "888": 200,
    "999": 300,
    "WIN": 1000,
}


class RewardSystem:
    """Draws three-character lottery results and prices them."""

    def __init__(self, rng=None):
        self._rng = rng if rng is not None else random.Random()
        self._reward_values: dict[str, int] = {}

    def init(self) -> None:
        """Load the reward table used by reward_value."""
        self._reward_values = dict(_REWARD_VALUES)

    def _pick(self, charset: str) -> str:
        return self._rng.choice(charset)

    def left_char(self) -> str:
        return self._pick(_LEFT_CHARSET)

    def middle_char(self) -> str:
        return self._pick(_MIDDLE_CHARSET)

    def right_char(self) -> str:
        return self._pick(_RIGHT_CHARSET)

    def generate_result(self) -> str:
        """Return a result such as "3I9"."""
        return self.left_char() + self.middle_char() + self.right_char()

    def reward_value(self, result: str) -> int:
        """Points for a result from the loaded table; 0 if absent or not loaded."""
        return self._reward_values.get(result, 0)

    def reward_for_result(self, result: str) -> int:
        """Points for a result from the fixed prize table; 0 for no prize."""
        return _PRIZE_TABLE.get(result, 0)