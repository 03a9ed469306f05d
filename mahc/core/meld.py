"""Meld (面子) data structures: sequence, triplet, quad and pair."""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple

from .errors import InvalidGroup
from .tile import Tile, parse_group


class MeldKind(Enum):
    SEQUENCE = "sequence"  # 顺子
    TRIPLET = "triplet"    # 刻子
    QUAD = "quad"          # 杠子
    PAIR = "pair"          # 雀头


@dataclass(frozen=True)
class Meld:
    """A frozen meld.

    Attributes:
        kind: Shape of the meld
        tiles: All tiles in the meld, sorted
        is_open: Whether the meld was called from another player
    """
    kind: MeldKind
    tiles: Tuple[Tile, ...]
    is_open: bool = False

    @classmethod
    def from_tiles(cls, tiles: Sequence[Tile], is_open: bool = False) -> 'Meld':
        """Classify a group of tiles. Raises InvalidGroup if they form no meld."""
        ordered = tuple(sorted(tiles))
        kind = classify(ordered)
        if kind is None:
            names = "".join(t.name for t in ordered)
            raise InvalidGroup(names)
        if kind == MeldKind.PAIR and is_open:
            raise InvalidGroup("a pair cannot be called")
        return cls(kind, ordered, is_open)

    @classmethod
    def sequence(cls, start_34: int, is_open: bool = False) -> 'Meld':
        return cls(MeldKind.SEQUENCE,
                   (Tile(start_34), Tile(start_34 + 1), Tile(start_34 + 2)), is_open)

    @classmethod
    def triplet(cls, index34: int, is_open: bool = False) -> 'Meld':
        return cls(MeldKind.TRIPLET, (Tile(index34),) * 3, is_open)

    @classmethod
    def pair(cls, index34: int) -> 'Meld':
        return cls(MeldKind.PAIR, (Tile(index34),) * 2)

    @property
    def tile_index34(self) -> int:
        """The 34 index of the meld's lowest tile (for triplets/quads, the tile type)."""
        return self.tiles[0].index34

    @property
    def is_sequence(self) -> bool:
        return self.kind == MeldKind.SEQUENCE

    @property
    def is_kan(self) -> bool:
        return self.kind == MeldKind.QUAD

    @property
    def is_pair(self) -> bool:
        return self.kind == MeldKind.PAIR

    @property
    def is_set(self) -> bool:
        """Triplet or quad (刻子/杠子)."""
        return self.kind in (MeldKind.TRIPLET, MeldKind.QUAD)

    @property
    def has_yaochu(self) -> bool:
        """Whether any tile of the meld is a terminal or honor."""
        return any(t.is_yaochu for t in self.tiles)

    def contains(self, index34: int) -> bool:
        return any(t.index34 == index34 for t in self.tiles)

    @property
    def name(self) -> str:
        text = "".join(t.name[0] for t in self.tiles) + self.tiles[0].name[1]
        return text + "o" if self.is_open else text

    def __str__(self):
        return self.name


def classify(tiles: Sequence[Tile]):
    """Return the MeldKind of sorted tiles, or None if they form no meld."""
    idx = [t.index34 for t in tiles]
    if len(idx) < 2 or len(idx) > 4:
        return None
    if all(i == idx[0] for i in idx):
        return {2: MeldKind.PAIR, 3: MeldKind.TRIPLET, 4: MeldKind.QUAD}[len(idx)]
    if (len(idx) == 3 and idx[0] < 27 and idx[0] % 9 <= 6
            and idx[1] == idx[0] + 1 and idx[2] == idx[0] + 2):
        return MeldKind.SEQUENCE
    return None


def parse_meld(token: str) -> Meld:
    """Parse a group token that must form exactly one meld (e.g. '234po')."""
    tiles, is_open = parse_group(token)
    return Meld.from_tiles(tiles, is_open)
