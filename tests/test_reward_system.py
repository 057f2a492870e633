import random

import pytest

from pachinko.reward_system import RewardSystem


def test_generated_result_uses_each_charset():
    system = RewardSystem(random.Random(3))
    for _ in range(100):
        result = system.generate_result()
        assert len(result) == 3
        assert result[0] in "123456789W"
        assert result[1] in "123456789I"
        assert result[2] in "123456789N"


def test_single_chars_come_from_their_charsets():
    system = RewardSystem(random.Random(9))
    assert system.left_char() in "123456789W"
    assert system.middle_char() in "123456789I"
    assert system.right_char() in "123456789N"


def test_every_left_char_eventually_appears():
    system = RewardSystem(random.Random(11))
    seen = {system.left_char() for _ in range(1000)}
    assert seen == set("123456789W")


def test_same_seed_gives_same_results():
    first = RewardSystem(random.Random(5))
    second = RewardSystem(random.Random(5))
    assert [first.generate_result() for _ in range(20)] == [
        second.generate_result() for _ in range(20)
    ]


def test_reward_value_is_zero_before_init():
    system = RewardSystem()
    assert system.reward_value("111") == 0
    assert system.reward_value("WIN") == 0


@pytest.mark.parametrize(
    "result, value",
    [("111", 100), ("555", 500), ("999", 900), ("WIN", 9999), ("3I9", 0), ("", 0)],
)
def test_reward_value_after_init(result, value):
    system = RewardSystem()
    system.init()
    assert system.reward_value(result) == value


def test_init_is_idempotent():
    system = RewardSystem()
    system.init()
    system.init()
    assert system.reward_value("777") == 700


@pytest.mark.parametrize(
    "result, value",
    [
        ("111", 100),
        ("222", 100),
        ("666", 100),
        ("777", 200),
        ("888", 200),
        ("999", 300),
        ("WIN", 1000),
        ("3I9", 0),
    ],
)
def test_reward_for_result(result, value):
    assert RewardSystem().reward_for_result(result) == value