"""Tests for tile.py"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from mahc.core.errors import InvalidSuit, InvalidTileToken
from mahc.core.tile import (
    Tile, TileSuit, tiles_to_34_array, YAOCHU_INDICES,
    next_tile_index, make_tiles_from_string, parse_group, parse_tile,
)


class TestTileBasic:
    def test_suit_assignment(self):
        assert Tile(0).suit == TileSuit.MAN
        assert Tile(0).number == 1
        assert Tile(9).suit == TileSuit.PIN
        assert Tile(18).suit == TileSuit.SOU
        assert Tile(18).number == 1
        assert Tile(27).suit == TileSuit.WIND
        assert Tile(27).number == 1
        assert Tile(31).suit == TileSuit.DRAGON

    def test_yaochu(self):
        assert Tile(0).is_yaochu      # 1m
        assert Tile(8).is_yaochu      # 9m
        assert not Tile(4).is_yaochu  # 5m
        assert Tile(27).is_yaochu     # East wind

    def test_terminal(self):
        assert Tile(0).is_terminal
        assert Tile(8).is_terminal
        assert not Tile(1).is_terminal
        assert not Tile(27).is_terminal  # honor, not terminal

    def test_red_is_not_identity(self):
        assert Tile(4, is_red=True) == Tile(4)
        assert hash(Tile(4, is_red=True)) == hash(Tile(4))
        assert Tile(4) < Tile(4, is_red=True)

    def test_rejects_malformed(self):
        with pytest.raises(InvalidTileToken):
            Tile(34)
        with pytest.raises(InvalidTileToken):
            Tile(-1)
        with pytest.raises(InvalidTileToken):
            Tile(3, is_red=True)  # only fives can be red

    def test_sorting(self):
        tiles = sorted([Tile(33), Tile(0), Tile(18), Tile(9)])
        assert [t.index34 for t in tiles] == [0, 9, 18, 33]

    def test_yaochu_indices(self):
        assert len(YAOCHU_INDICES) == 13


class TestParse:
    def test_number_group(self):
        tiles, is_open = parse_group("234p")
        assert [t.index34 for t in tiles] == [10, 11, 12]
        assert not is_open

    def test_open_group(self):
        tiles, is_open = parse_group("234po")
        assert is_open
        assert len(tiles) == 3

    def test_honors(self):
        tiles, _ = parse_group("EEEw")
        assert all(t.index34 == 27 for t in tiles)
        assert parse_tile("Nw").index34 == 30
        assert parse_tile("wd").index34 == 31
        assert parse_tile("gd").index34 == 32
        assert parse_tile("rd").index34 == 33

    def test_red_five(self):
        tile = parse_tile("0s")
        assert tile.index34 == 22
        assert tile.is_red
        assert tile.name == "0s"

    def test_invalid_suit(self):
        with pytest.raises(InvalidSuit):
            parse_group("hhho")
        with pytest.raises(InvalidSuit):
            parse_group("123x")

    def test_invalid_rank(self):
        with pytest.raises(InvalidTileToken):
            parse_group("Esm")
        with pytest.raises(InvalidTileToken):
            parse_group("1w")
        with pytest.raises(InvalidTileToken):
            parse_group("xd")

    def test_too_short(self):
        with pytest.raises(InvalidTileToken):
            parse_group("m")
        with pytest.raises(InvalidTileToken):
            parse_group("")

    def test_parse_tile_rejects_groups(self):
        with pytest.raises(InvalidTileToken):
            parse_tile("11p")

    def test_make_tiles_from_string(self):
        tiles = make_tiles_from_string("123m 456po rrd")
        assert len(tiles) == 8
        arr = tiles_to_34_array(tiles)
        assert arr[0] == 1 and arr[13] == 1 and arr[33] == 2


class TestDoraIndicator:
    def test_number_wrap(self):
        assert next_tile_index(0) == 1    # 1m -> 2m
        assert next_tile_index(8) == 0    # 9m -> 1m
        assert next_tile_index(17) == 9   # 9p -> 1p
        assert next_tile_index(26) == 18  # 9s -> 1s

    def test_wind_cycle(self):
        assert next_tile_index(27) == 28
        assert next_tile_index(30) == 27  # North -> East

    def test_dragon_cycle(self):
        assert next_tile_index(31) == 32
        assert next_tile_index(33) == 31  # chun -> haku

    def test_names(self):
        assert Tile(0).name == "1m"
        assert Tile(27).name == "Ew"
        assert Tile(33).name == "rd"
        assert Tile(13, is_red=True).name == "0p"
