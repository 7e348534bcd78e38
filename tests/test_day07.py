import pytest

from aocdays.day07 import card_strength, hand_type, main, total_winnings

EXAMPLE = [
    "32T3K 765",
    "T55J5 684",
    "KK677 28",
    "KTJJT 220",
    "QQQJA 483",
]


@pytest.mark.parametrize("jokers, expected", [(False, 6440), (True, 5905)])
def test_total_winnings_example(jokers, expected):
    assert total_winnings(EXAMPLE, jokers=jokers) == expected
    assert total_winnings(list(reversed(EXAMPLE)), jokers=jokers) == expected


@pytest.mark.parametrize("lines, expected", [(["AKQJT 37"], 37), ([], 0)])
def test_small_inputs(lines, expected):
    assert total_winnings(lines) == expected


def test_hand_types_are_ordered_strongest_first():
    ranks = [
        hand_type(hand)
        for hand in ["AAAAA", "AAAAK", "AAAKK", "AAAKQ", "AAKKQ", "AAKQJ", "AKQJT"]
    ]
    assert ranks == sorted(ranks)
    assert len(set(ranks)) == len(ranks)


@pytest.mark.parametrize(
    "hand, jokers, same_as",
    [
        ("QJJQ2", True, "QQQQ2"),
        ("KTJJT", True, "KTTTT"),
        ("JJJJJ", True, "AAAAA"),
        ("QJJQ2", False, "QKKQ2"),
    ],
)
def test_joker_handling(hand, jokers, same_as):
    assert hand_type(hand, jokers=jokers) == hand_type(same_as)


@pytest.mark.parametrize(
    "card, jokers, expected",
    [("A", False, 1), ("T", False, 5), ("J", False, 4), ("J", True, 14)],
)
def test_card_strength_values(card, jokers, expected):
    assert card_strength(card, jokers=jokers) == expected


def test_digit_cards_rank_below_faces_and_in_order():
    strengths = [card_strength(card) for card in "T98765432"]
    assert strengths == sorted(strengths)
    assert card_strength("J", jokers=True) > card_strength("2")


@pytest.mark.parametrize("line", ["AAAA 5", "AAAAA", "AAAAA x"])
def test_malformed_lines_raise(line):
    with pytest.raises(ValueError):
        total_winnings([line])


@pytest.mark.parametrize("part, expected", [("1", 6440), ("2", 5905)])
def test_main_prints_result(tmp_path, capsys, part, expected):
    hands = tmp_path / "hands.txt"
    hands.write_text("\n".join(EXAMPLE))
    assert main([str(hands), "--part", part]) == 0
    assert f"Results: {expected}" in capsys.readouterr().out