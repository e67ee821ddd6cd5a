import io
import random
import sys
from collections import Counter

import pytest

from first2shed.card import Card
from first2shed.cli import main
from first2shed.game import INITIAL_HAND_SIZE


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out


def _hands(out):
    result = []
    for line in out.splitlines():
        if line.startswith("Player ID "):
            head, _, cards = line.partition(" hand:")
            player_id = int(head[len("Player ID "):])
            result.append((player_id, cards.split()))
    return result


def _last_cards(out):
    prefix = "Last played card: "
    return [line[len(prefix):] for line in out.splitlines() if line.startswith(prefix)]


def test_initial_deal_shows_full_hand(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "")
    assert code == 0
    hands = _hands(out)
    assert len(hands) == 1
    player_id, cards = hands[0]
    assert player_id in (0, 1)
    assert len(cards) == INITIAL_HAND_SIZE
    assert all(str(Card.from_code(c)) == c for c in cards)


def test_initial_card_matches_last_played(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "")
    initial = [l for l in out.splitlines() if l.startswith("Initial card: ")]
    assert len(initial) == 1
    assert initial[0][len("Initial card: "):] == _last_cards(out)[0]
    assert "1. Draw card" in out
    assert "3. Choose Color" in out


def test_draw_adds_one_card_to_same_player(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "1\n")
    hands = _hands(out)
    assert len(hands) == 2
    (id_before, before), (id_after, after) = hands
    assert id_before == id_after
    assert len(after) == len(before) + 1
    assert not Counter(before) - Counter(after)


def test_draw_then_pass_moves_turn(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "1\n2\n")
    hands = _hands(out)
    assert len(hands) == 3
    assert {hands[0][0], hands[2][0]} == {0, 1}


def test_pass_without_drawing_is_ignored(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "2\n")
    hands = _hands(out)
    assert hands[1] == hands[0]


def test_unknown_card_code_is_ignored(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "ZZ\n")
    hands = _hands(out)
    assert hands[1] == hands[0]
    lasts = _last_cards(out)
    assert lasts[1] == lasts[0]


def test_empty_line_is_ignored(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "\n")
    hands = _hands(out)
    assert len(hands) == 2
    assert hands[1] == hands[0]


def test_invalid_color_letter_reports_error(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "3\nQ\n")
    assert "invalid color" in out
    hands = _hands(out)
    assert hands[1] == hands[0]


def test_empty_color_reports_invalid_code(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "3\n\n")
    assert "invalid card code" in out


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert "first2shed" in capsys.readouterr().out