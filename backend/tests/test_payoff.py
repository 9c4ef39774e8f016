import pytest

from dilemma.services.games import Choice, payoff

C, D = Choice.COOPERATE, Choice.DEFECT


@pytest.mark.parametrize('first, second, expected', [
    (C, C, (3, 3)),
    (C, D, (0, 5)),
    (D, C, (5, 0)),
    (D, D, (1, 1)),
])
def test_payoff_matrix(first, second, expected):
    assert payoff(first, second) == expected


def test_payoff_bounds():
    for first in Choice:
        for second in Choice:
            pts1, pts2 = payoff(first, second)
            assert pts1 in (0, 1, 3, 5)
            assert pts2 in (0, 1, 3, 5)
            assert pts1 + pts2 <= 6


@pytest.mark.parametrize('raw, expected', [
    ('C', C),
    ('d', D),
    (' D ', D),
    ('cooperate', C),
    ('Defect', D),
    (C, C),
])
def test_parse_accepts_wire_symbols_and_names(raw, expected):
    assert Choice.parse(raw) is expected


@pytest.mark.parametrize('raw', [None, '', 'X', 'CD', 1, ['C'], {'choice': 'C'}])
def test_parse_rejects_everything_else(raw):
    assert Choice.parse(raw) is None
