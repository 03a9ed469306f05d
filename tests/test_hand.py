"""Tests for hand.py and meld.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from mahc.core.errors import (
    InvalidGroup, InvalidSuit, InvalidTileCount, MissingWinningTile,
)
from mahc.core.hand import Hand
from mahc.core.meld import Meld, MeldKind, parse_meld
from mahc.core.tile import Tile


class TestMeld:
    def test_sequence(self):
        meld = parse_meld("789s")
        assert meld.kind == MeldKind.SEQUENCE
        assert meld.tile_index34 == 24
        assert not meld.is_open

    def test_open_sequence(self):
        meld = parse_meld("234po")
        assert meld.kind == MeldKind.SEQUENCE
        assert meld.is_open
        assert meld.name == "234po"

    def test_triplet_and_quad(self):
        assert parse_meld("SSSw").kind == MeldKind.TRIPLET
        assert parse_meld("EEEEwo").kind == MeldKind.QUAD
        assert parse_meld("rrrrd").is_kan
        assert parse_meld("111m").is_set

    def test_pair(self):
        meld = parse_meld("SSw")
        assert meld.kind == MeldKind.PAIR
        assert meld.tiles[0].index34 == 28

    def test_sequence_not_in_order(self):
        with pytest.raises(InvalidGroup):
            parse_meld("135m")

    def test_honor_sequence_is_invalid(self):
        with pytest.raises(InvalidGroup):
            parse_meld("ESWw")

    def test_wrapping_sequence_is_invalid(self):
        with pytest.raises(InvalidGroup):
            parse_meld("891m")

    def test_size(self):
        with pytest.raises(InvalidGroup):
            parse_meld("SSSSSw")
        with pytest.raises(InvalidGroup):
            parse_meld("Sw")

    def test_open_pair_is_invalid(self):
        with pytest.raises(InvalidGroup):
            parse_meld("11po")

    def test_yaochu(self):
        assert parse_meld("123m").has_yaochu
        assert not parse_meld("234m").has_yaochu
        assert Meld.triplet(27).has_yaochu

    def test_equality_ignores_red(self):
        assert parse_meld("406m") == parse_meld("456m")


class TestHand:
    def test_from_notation(self):
        hand = Hand.from_notation(["rrrd", "EEEw", "234p", "234p", "11p"], "1p")
        assert len(hand.closed_tiles) == 14
        assert hand.melds == []
        assert hand.is_menzen
        assert hand.win_tile == Tile(9)

    def test_open_melds_are_fixed(self):
        hand = Hand.from_notation(["555po", "234m", "11s", "rrrdo", "789m"], "7m")
        assert len(hand.melds) == 2
        assert all(m.is_open for m in hand.melds)
        assert len(hand.closed_tiles) == 8
        assert not hand.is_menzen

    def test_closed_quad_is_fixed(self):
        hand = Hand.from_notation(["444m", "789p", "555so", "rrrrd", "11s"], "1s")
        assert len(hand.melds) == 2
        assert hand.has_kan
        assert hand.is_menzen is False  # 555so is open
        assert len(hand.all_tiles) == 15

    def test_thirteen_tiles_adds_win_tile(self):
        hand = Hand.from_notation(["rrrd", "EEEw", "234p", "234p", "1p"], "1p")
        assert len(hand.closed_tiles) == 14
        assert hand.to_34_array()[9] == 2

    def test_long_closed_token(self):
        hand = Hand.from_notation(["rrrd", "EEEw", "23423411p"], "1p")
        assert len(hand.closed_tiles) == 14

    def test_hand_too_small(self):
        with pytest.raises(InvalidTileCount):
            Hand.from_notation(["SSSw"], "3s")

    def test_hand_too_big(self):
        with pytest.raises(InvalidTileCount):
            Hand.from_notation(["SSSw", "111m", "222m", "333m", "444m", "55m"], "5m")

    def test_five_copies(self):
        with pytest.raises(InvalidTileCount):
            Hand.from_notation(["11111m", "234m", "567m", "99m"], "9m")

    def test_win_tile_missing(self):
        with pytest.raises(MissingWinningTile):
            Hand.from_notation(["SSSw", "NNw", "111m", "222m", "333m"], "3s")

    def test_invalid_suit(self):
        with pytest.raises(InvalidSuit):
            Hand.from_notation(["hhho", "SSSw", "111m", "222m", "33m"], "3m")

    def test_open_group_must_be_meld(self):
        with pytest.raises(InvalidGroup):
            Hand.from_notation(["135mo", "SSSw", "111m", "222m", "33m"], "3m")
