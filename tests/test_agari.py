"""Tests for agari.py - win detection and decomposition"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from collections import Counter

from mahc.core.hand import Hand
from mahc.core.meld import Meld
from mahc.core.tile import make_tiles_from_string, tiles_to_34_array
from mahc.rules.agari import (
    HandShape, Wait, is_chiitoi_agari, is_kokushi_agari,
    decompose_standard, decompose_hand, classify_wait,
)


def make_34(tiles_str):
    """Helper: create 34 array from group notation like '111222333m 99p'."""
    return tiles_to_34_array(make_tiles_from_string(tiles_str))


class TestStandardAgari:
    def test_basic(self):
        assert decompose_standard(make_34("123m 456p 789s EEEw 55s"))

    def test_not_agari(self):
        assert decompose_standard(make_34("123m 456m 789m 135p 11s")) == []

    def test_wrong_count(self):
        assert decompose_standard(make_34("123m 456p 789s EEEw")) == []

    def test_only_pair_left(self):
        # Four declared melds leave just the head
        assert decompose_standard(make_34("99p"))


class TestDecomposeStandard:
    def test_triplets_or_sequences(self):
        results = decompose_standard(make_34("111222333m 99p"))
        assert set(results) == {
            (17, (('koutsu', 0), ('koutsu', 1), ('koutsu', 2))),
            (17, (('shuntsu', 0), ('shuntsu', 0), ('shuntsu', 0))),
        }

    def test_no_duplicates(self):
        results = decompose_standard(make_34("223344m 556677p 99s"))
        assert len(results) == len(set(results))
        assert results == [(26, (('shuntsu', 1), ('shuntsu', 1),
                                 ('shuntsu', 13), ('shuntsu', 13)))]

    def test_honors_never_sequence(self):
        assert decompose_standard(make_34("ESWw 123m 456m 789m Nw")) == []


class TestChiitoiKokushi:
    def test_chiitoi(self):
        assert is_chiitoi_agari(make_34("11m 33m 55p 77p 99s EEw rrd"))

    def test_chiitoi_needs_distinct_pairs(self):
        assert not is_chiitoi_agari(make_34("1111m 55p 77p 99s EEw rrd"))

    def test_kokushi(self):
        assert is_kokushi_agari(make_34("119m 19p 19s ESWNw wgrd"))

    def test_kokushi_needs_pair(self):
        assert not is_kokushi_agari(make_34("129m 19p 19s ESWNw wgrd"))


class TestClassifyWait:
    def test_ryanmen(self):
        assert classify_wait(Meld.sequence(1), 1) == Wait.RYANMEN  # 34 on 2
        assert classify_wait(Meld.sequence(1), 3) == Wait.RYANMEN  # 23 on 4
        assert classify_wait(Meld.sequence(0), 0) == Wait.RYANMEN  # 23 on 1

    def test_kanchan(self):
        assert classify_wait(Meld.sequence(1), 2) == Wait.KANCHAN

    def test_penchan(self):
        assert classify_wait(Meld.sequence(0), 2) == Wait.PENCHAN   # 12 on 3
        assert classify_wait(Meld.sequence(24), 24) == Wait.PENCHAN  # 89s on 7s

    def test_sets(self):
        assert classify_wait(Meld.triplet(27), 27) == Wait.SHANPON
        assert classify_wait(Meld.pair(27), 27) == Wait.TANKI


class TestDecomposeHand:
    def test_one_reading_per_winning_meld(self):
        hand = Hand.from_notation(["111222333m", "789s", "99p"], "3m")
        decompositions = decompose_hand(hand)
        waits = sorted(d.wait.value for d in decompositions)
        assert waits == ["penchan", "shanpon"]

    def test_covers_every_tile(self):
        hand = Hand.from_notation(["rrrd", "EEEw", "234p", "234p", "11p"], "1p")
        expected = Counter(t.index34 for t in hand.all_tiles)
        decompositions = decompose_hand(hand)
        assert len(decompositions) >= 2
        for d in decompositions:
            used = Counter(t.index34 for g in d.groups for t in g.tiles)
            assert used == expected

    def test_tanki_and_ryanmen_readings(self):
        hand = Hand.from_notation(["rrrd", "EEEw", "234p", "234p", "11p"], "1p")
        waits = {d.wait for d in decompose_hand(hand)}
        assert waits == {Wait.TANKI, Wait.RYANMEN}

    def test_fixed_melds_kept(self):
        hand = Hand.from_notation(["555po", "234m", "11s", "rrrdo", "789m"], "7m")
        decompositions = decompose_hand(hand)
        assert len(decompositions) == 1
        d = decompositions[0]
        assert not d.is_menzen
        assert d.wait == Wait.PENCHAN
        assert d.win_meld.tile_index34 == 6

    def test_not_winning(self):
        hand = Hand.from_notation(["123m", "456m", "789m", "135p", "11s"], "1s")
        assert decompose_hand(hand) == []

    def test_chiitoi(self):
        hand = Hand.from_notation(["11m", "33m", "55p", "77p", "99s", "EEw", "rrd"], "rd")
        decompositions = decompose_hand(hand)
        assert [d.shape for d in decompositions] == [HandShape.CHIITOI]
        assert decompositions[0].win_meld.tile_index34 == 33

    def test_kokushi(self):
        hand = Hand.from_notation(["119m", "19p", "19s", "ESWNw", "wgrd"], "1m")
        decompositions = decompose_hand(hand)
        assert [d.shape for d in decompositions] == [HandShape.KOKUSHI]
        assert decompositions[0].pair.tile_index34 == 0

    def test_red_five_kept_in_melds(self):
        hand = Hand.from_notation(["234m", "406p", "678s", "345s", "22p"], "2p")
        decompositions = decompose_hand(hand)
        assert decompositions
        for d in decompositions:
            names = [g.name for g in d.groups]
            assert "406p" in names
            assert sum(t.is_red for g in d.groups for t in g.tiles) == 1

    def test_red_five_kept_in_chiitoi(self):
        hand = Hand.from_notation(["11m", "33m", "50p", "77p", "99s", "EEw", "rrd"], "rd")
        pairs = [m.name for m in decompose_hand(hand)[0].melds]
        assert "50p" in pairs

    def test_ron_triplet_counts_as_open(self):
        hand = Hand.from_notation(["222m", "444p", "666s", "789s", "11m"], "6s")
        d = decompose_hand(hand)[0]
        assert d.wait == Wait.SHANPON
        assert d.concealed_set_count(is_tsumo=False) == 2
        assert d.concealed_set_count(is_tsumo=True) == 3
