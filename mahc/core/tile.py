"""Tile definition (34 encoding) with red five support and group notation parsing."""

from enum import IntEnum
from typing import List, Tuple

from .errors import InvalidSuit, InvalidTileToken


class TileSuit(IntEnum):
    MAN = 0   # 万子
    PIN = 1   # 筒子
    SOU = 2   # 索子
    WIND = 3  # 风牌
    DRAGON = 4  # 三元牌


# Yaochu (terminal + honor) tile indices in 34 encoding
YAOCHU_INDICES = [0, 8, 9, 17, 18, 26, 27, 28, 29, 30, 31, 32, 33]
TERMINAL_INDICES = [0, 8, 9, 17, 18, 26]
WIND_INDICES = [27, 28, 29, 30]
DRAGON_INDICES = [31, 32, 33]

# Tile names in input notation, 34 encoding order
TILE_NAMES_34 = [
    "1m", "2m", "3m", "4m", "5m", "6m", "7m", "8m", "9m",
    "1p", "2p", "3p", "4p", "5p", "6p", "7p", "8p", "9p",
    "1s", "2s", "3s", "4s", "5s", "6s", "7s", "8s", "9s",
    "Ew", "Sw", "Ww", "Nw", "wd", "gd", "rd",
]

TILE_KANJI_34 = TILE_NAMES_34[:27] + ["東", "南", "西", "北", "白", "發", "中"]

SUIT_CHARS = {'m': TileSuit.MAN, 'p': TileSuit.PIN, 's': TileSuit.SOU,
              'w': TileSuit.WIND, 'd': TileSuit.DRAGON}
HONOR_RANKS = {
    TileSuit.WIND: "ESWN",
    TileSuit.DRAGON: "wgr",
}

OPEN_MARKER = 'o'


class Tile:
    """Immutable tile value. Identity is the 34 index; red is a scoring attribute."""
    __slots__ = ('_index34', '_is_red')

    def __init__(self, index34: int, is_red: bool = False):
        if not isinstance(index34, int) or not (0 <= index34 < 34):
            raise InvalidTileToken(f"index34 must be 0..33, got {index34!r}")
        if is_red and index34 not in (4, 13, 22):
            raise InvalidTileToken(f"only fives can be red, got {TILE_NAMES_34[index34]}")
        self._index34 = index34
        self._is_red = is_red

    @property
    def index34(self) -> int:
        return self._index34

    @property
    def suit(self) -> TileSuit:
        if self._index34 < 27:
            return TileSuit(self._index34 // 9)
        if self._index34 < 31:
            return TileSuit.WIND
        return TileSuit.DRAGON

    @property
    def number(self) -> int:
        """Rank within the suit: 1-9 for numbers, 1-4 for winds (東南西北), 1-3 for dragons (白發中)."""
        if self._index34 < 27:
            return self._index34 % 9 + 1
        if self._index34 < 31:
            return self._index34 - 27 + 1
        return self._index34 - 31 + 1

    @property
    def is_red(self) -> bool:
        return self._is_red

    @property
    def is_honor(self) -> bool:
        return self._index34 >= 27

    @property
    def is_terminal(self) -> bool:
        return self._index34 in TERMINAL_INDICES

    @property
    def is_yaochu(self) -> bool:
        return self._index34 in YAOCHU_INDICES

    @property
    def is_simple(self) -> bool:
        return not self.is_yaochu

    @property
    def name(self) -> str:
        if self._is_red:
            return f"0{TILE_NAMES_34[self._index34][1]}"
        return TILE_NAMES_34[self._index34]

    def __repr__(self):
        return f"Tile({self.name})"

    def __eq__(self, other):
        if isinstance(other, Tile):
            return self._index34 == other._index34
        return NotImplemented

    def __hash__(self):
        return self._index34

    def __lt__(self, other):
        if isinstance(other, Tile):
            if self._index34 != other._index34:
                return self._index34 < other._index34
            return self._is_red < other._is_red
        return NotImplemented


def tiles_to_34_array(tiles: List[Tile]) -> List[int]:
    """Convert list of tiles to 34-length count array."""
    arr = [0] * 34
    for t in tiles:
        arr[t.index34] += 1
    return arr


def next_tile_index(index34: int) -> int:
    """Get the dora tile index pointed to by an indicator.

    For number tiles: wraps 9->1
    For wind: 東→南→西→北→東
    For dragon: 白→發→中→白
    """
    if index34 < 27:
        suit_start = index34 - index34 % 9
        return suit_start + (index34 - suit_start + 1) % 9
    elif index34 < 31:
        return 27 + (index34 - 27 + 1) % 4
    else:
        return 31 + (index34 - 31 + 1) % 3


def _rank_to_index(rank: str, suit: TileSuit, token: str) -> Tuple[int, bool]:
    if suit in HONOR_RANKS:
        pos = HONOR_RANKS[suit].find(rank)
        if pos < 0:
            raise InvalidTileToken(token)
        base = 27 if suit == TileSuit.WIND else 31
        return base + pos, False
    if not rank.isdigit():
        raise InvalidTileToken(token)
    n = int(rank)
    if n == 0:
        # Red five
        return suit * 9 + 4, True
    return suit * 9 + n - 1, False


def parse_group(token: str) -> Tuple[List[Tile], bool]:
    """Parse a group token like '234p', 'rrrd', 'EEEEwo' or '0m'.

    Returns the tiles and whether the group was marked open.
    """
    body = token.strip()
    is_open = False
    if len(body) > 2 and body.endswith(OPEN_MARKER):
        is_open = True
        body = body[:-1]
    if len(body) < 2:
        raise InvalidTileToken(token)

    suit_char = body[-1]
    if suit_char not in SUIT_CHARS:
        raise InvalidSuit(token)
    suit = SUIT_CHARS[suit_char]

    tiles = []
    for rank in body[:-1]:
        index34, is_red = _rank_to_index(rank, suit, token)
        tiles.append(Tile(index34, is_red))
    return tiles, is_open


def parse_tile(token: str) -> Tile:
    """Parse a single tile token like '1p', 'Ew' or 'rd'."""
    tiles, is_open = parse_group(token)
    if len(tiles) != 1 or is_open:
        raise InvalidTileToken(token)
    return tiles[0]


def make_tiles_from_string(s: str) -> List[Tile]:
    """Parse whitespace separated group tokens into a flat tile list, ignoring open marks."""
    tiles = []
    for token in s.split():
        group, _ = parse_group(token)
        tiles.extend(group)
    return tiles
