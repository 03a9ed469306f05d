"""Hand input - concealed tiles, fixed (declared) melds and the winning tile."""

from typing import Iterable, List

from .errors import InvalidTileCount, MissingWinningTile
from .meld import Meld
from .tile import Tile, tiles_to_34_array, parse_group, parse_tile


class Hand:
    """A completed hand as supplied by the caller.

    Attributes:
        closed_tiles: Concealed tiles still to be partitioned (winning tile included)
        melds: Declared melds kept as-is: called melds and concealed quads
        win_tile: The tile that completed the hand
    """

    def __init__(self, closed_tiles: List[Tile], melds: List[Meld], win_tile: Tile):
        self.closed_tiles: List[Tile] = sorted(closed_tiles)
        self.melds: List[Meld] = list(melds)
        self.win_tile: Tile = win_tile
        self._validate()

    @classmethod
    def from_notation(cls, tokens: Iterable[str], win: str) -> 'Hand':
        """Build a hand from group tokens such as ['rrrd', '234po', '11p'].

        Open tokens and four-of-a-kind tokens become fixed melds; every other
        closed token is flattened into the concealed tiles.
        """
        closed: List[Tile] = []
        melds: List[Meld] = []
        for token in tokens:
            tiles, is_open = parse_group(token)
            if is_open or _is_quad(tiles):
                melds.append(Meld.from_tiles(tiles, is_open))
            else:
                closed.extend(tiles)
        win_tile = parse_tile(win)

        effective = len(closed) + 3 * len(melds)
        if effective == 13:
            closed.append(win_tile)
        return cls(closed, melds, win_tile)

    def _validate(self):
        effective = len(self.closed_tiles) + 3 * len(self.melds)
        if effective != 14:
            raise InvalidTileCount(f"expected 13 or 14 tiles, got {effective}")
        counts = tiles_to_34_array(self.all_tiles)
        for index34, count in enumerate(counts):
            if count > 4:
                raise InvalidTileCount(f"{count} copies of {Tile(index34).name}")
        if self.win_tile not in self.closed_tiles:
            raise MissingWinningTile(self.win_tile.name)

    def to_34_array(self) -> List[int]:
        """Convert concealed tiles to 34-length count array."""
        return tiles_to_34_array(self.closed_tiles)

    @property
    def all_tiles(self) -> List[Tile]:
        tiles = list(self.closed_tiles)
        for meld in self.melds:
            tiles.extend(meld.tiles)
        return tiles

    @property
    def is_menzen(self) -> bool:
        """Whether hand is fully closed (門前)."""
        return all(not m.is_open for m in self.melds)

    @property
    def has_kan(self) -> bool:
        return any(m.is_kan for m in self.melds)

    def __repr__(self):
        melds = " ".join(m.name for m in self.melds)
        closed = "".join(t.name for t in self.closed_tiles)
        return f"Hand({closed} {melds} win={self.win_tile.name})"


def _is_quad(tiles: List[Tile]) -> bool:
    return len(tiles) == 4 and all(t == tiles[0] for t in tiles)


