"""Win (和了) detection - standard form, seven pairs, thirteen orphans.

Returns all possible decompositions for a winning hand.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, List, Optional, Tuple

from mahc.core.hand import Hand
from mahc.core.meld import Meld
from mahc.core.tile import Tile, YAOCHU_INDICES

logger = logging.getLogger(__name__)


# A raw decomposition is (head_34, mentsu_list) where mentsu_list is list of (type, index34)
# type: 'shuntsu' (顺子) or 'koutsu' (刻子)
Mentsu = Tuple[str, int]
RawDecomposition = Tuple[int, Tuple[Mentsu, ...]]


class HandShape(Enum):
    STANDARD = "standard"
    CHIITOI = "chiitoi"
    KOKUSHI = "kokushi"


class Wait(Enum):
    RYANMEN = "ryanmen"  # 両面
    KANCHAN = "kanchan"  # 嵌張
    PENCHAN = "penchan"  # 辺張
    SHANPON = "shanpon"  # 双碰
    TANKI = "tanki"      # 単騎


@dataclass(frozen=True)
class Decomposition:
    """One way of reading a winning hand.

    For the standard shape ``melds`` holds the four melds (declared ones
    included) and ``pair`` the head. Seven pairs keeps its pairs in ``melds``
    with no head; thirteen orphans has no melds and its duplicated tile as head.

    ``win_index`` points into ``melds`` at the concealed meld completed by the
    winning tile, or is None when the winning tile completed the pair.
    """
    shape: HandShape
    melds: Tuple[Meld, ...]
    pair: Optional[Meld]
    win_tile: Tile
    win_index: Optional[int]
    wait: Wait

    @property
    def win_meld(self) -> Optional[Meld]:
        if self.win_index is None:
            return self.pair
        return self.melds[self.win_index]

    @property
    def is_menzen(self) -> bool:
        return all(not m.is_open for m in self.melds)

    @property
    def sequences(self) -> List[Meld]:
        return [m for m in self.melds if m.is_sequence]

    @property
    def sets(self) -> List[Meld]:
        """Triplets and quads."""
        return [m for m in self.melds if m.is_set]

    @property
    def groups(self) -> List[Meld]:
        """Melds plus the pair."""
        groups = list(self.melds)
        if self.pair is not None:
            groups.append(self.pair)
        return groups

    def is_concealed(self, index: int, is_tsumo: bool) -> bool:
        """Whether melds[index] counts as concealed.

        A triplet completed by a discard (ron on a shanpon wait) counts as open.
        """
        meld = self.melds[index]
        if meld.is_open:
            return False
        if not is_tsumo and index == self.win_index and meld.is_set:
            return False
        return True

    def concealed_set_count(self, is_tsumo: bool) -> int:
        """Concealed triplets and quads (暗刻/暗槓)."""
        return sum(1 for i, m in enumerate(self.melds)
                   if m.is_set and self.is_concealed(i, is_tsumo))

    def describe(self) -> str:
        text = " ".join(m.name for m in self.melds)
        if self.pair is not None:
            text += f" {self.pair.name}"
        return f"{text.strip()} [{self.wait.value} on {self.win_tile.name}]"


def decompose_standard(tiles_34: List[int]) -> List[RawDecomposition]:
    """Find ALL standard decompositions (mentsu + 1 head) of the concealed tiles.

    Works on 34-array of concealed tiles only (declared melds already
    extracted), so the array holds 14, 11, 8, 5 or 2 tiles.
    """
    total = sum(tiles_34)
    if total % 3 != 2:
        return []

    found: List[RawDecomposition] = []
    _find_all(list(tiles_34), 0, -1, [], found)

    # Canonicalize and drop repeats reached through different paths
    results = []
    seen = set()
    for head, mentsu in found:
        key = (head, tuple(sorted(mentsu)))
        if key not in seen:
            seen.add(key)
            results.append(key)
    return results


def _find_all(tiles: List[int], start: int, head: int,
              current: List[Mentsu], results: List[RawDecomposition]):
    """Consume the lowest remaining tile as a pair, koutsu or shuntsu start."""
    idx = start
    while idx < 34 and tiles[idx] == 0:
        idx += 1

    if idx >= 34:
        if head >= 0:
            results.append((head, tuple(current)))
        return

    # Pair (only once)
    if head < 0 and tiles[idx] >= 2:
        tiles[idx] -= 2
        _find_all(tiles, idx, idx, current, results)
        tiles[idx] += 2

    # Koutsu (triplet)
    if tiles[idx] >= 3:
        tiles[idx] -= 3
        current.append(('koutsu', idx))
        _find_all(tiles, idx, head, current, results)
        current.pop()
        tiles[idx] += 3

    # Shuntsu (sequence) - only for number tiles, not starting on 8 or 9
    if idx < 27 and idx % 9 <= 6:
        if tiles[idx + 1] >= 1 and tiles[idx + 2] >= 1:
            tiles[idx] -= 1
            tiles[idx + 1] -= 1
            tiles[idx + 2] -= 1
            current.append(('shuntsu', idx))
            _find_all(tiles, idx, head, current, results)
            current.pop()
            tiles[idx] += 1
            tiles[idx + 1] += 1
            tiles[idx + 2] += 1


def is_chiitoi_agari(tiles_34: List[int]) -> bool:
    """Check seven pairs (七対子) form. Pairs must be distinct."""
    if sum(tiles_34) != 14:
        return False
    pairs = sum(1 for c in tiles_34 if c == 2)
    return pairs == 7


def is_kokushi_agari(tiles_34: List[int]) -> bool:
    """Check thirteen orphans (国士無双) form."""
    if sum(tiles_34) != 14:
        return False
    has_pair = False
    for idx in YAOCHU_INDICES:
        if tiles_34[idx] == 0:
            return False
        if tiles_34[idx] == 2:
            has_pair = True
    # Must have exactly 14 tiles all yaochu with one pair
    non_yaochu = sum(tiles_34[i] for i in range(34) if i not in YAOCHU_INDICES)
    return has_pair and non_yaochu == 0


def classify_wait(meld: Meld, win_34: int) -> Wait:
    """Wait shape given the meld the winning tile completed."""
    if meld.is_pair:
        return Wait.TANKI
    if meld.is_set:
        return Wait.SHANPON
    start = meld.tile_index34
    if win_34 == start + 1:
        return Wait.KANCHAN
    # 12 waiting on 3, 89 waiting on 7
    if start % 9 == 0 and win_34 == start + 2:
        return Wait.PENCHAN
    if start % 9 == 6 and win_34 == start:
        return Wait.PENCHAN
    return Wait.RYANMEN


def _tile_pool(tiles: List[Tile]) -> Dict[int, List[Tile]]:
    """Concealed tiles grouped by 34 index, so melds keep the actual (red) copies."""
    pool: Dict[int, List[Tile]] = {}
    for tile in tiles:
        pool.setdefault(tile.index34, []).append(tile)
    return pool


def _fill(meld: Meld, pool: Dict[int, List[Tile]]) -> Meld:
    """Swap the meld's placeholder tiles for tiles drawn from the pool."""
    tiles = tuple(sorted(pool[t.index34].pop() for t in meld.tiles))
    return replace(meld, tiles=tiles)


def _mentsu_to_meld(mentsu: Mentsu, pool: Dict[int, List[Tile]]) -> Meld:
    m_type, m_idx = mentsu
    if m_type == 'shuntsu':
        return _fill(Meld.sequence(m_idx), pool)
    return _fill(Meld.triplet(m_idx), pool)


def decompose_hand(hand: Hand) -> List[Decomposition]:
    """Every reading of the hand, one per (partition, winning meld) pair.

    Declared melds are fixed; only the concealed tiles are partitioned. An
    empty result means the tiles do not form a winning hand.
    """
    closed_34 = hand.to_34_array()
    win = hand.win_tile
    results: List[Decomposition] = []

    for head, mentsu_list in decompose_standard(closed_34):
        pool = _tile_pool(hand.closed_tiles)
        closed_melds = [_mentsu_to_meld(m, pool) for m in mentsu_list]
        melds = tuple(hand.melds) + tuple(closed_melds)
        pair = _fill(Meld.pair(head), pool)
        offset = len(hand.melds)

        seen_shapes = set()
        if head == win.index34:
            results.append(Decomposition(HandShape.STANDARD, melds, pair,
                                         win, None, Wait.TANKI))
        for i, meld in enumerate(closed_melds):
            if not meld.contains(win.index34):
                continue
            wait = classify_wait(meld, win.index34)
            # Identical sequences give the same reading
            shape_key = (meld.kind, meld.tile_index34, wait)
            if shape_key in seen_shapes:
                continue
            seen_shapes.add(shape_key)
            results.append(Decomposition(HandShape.STANDARD, melds, pair,
                                         win, offset + i, wait))

    if not hand.melds:
        if is_chiitoi_agari(closed_34):
            pool = _tile_pool(hand.closed_tiles)
            pairs = tuple(_fill(Meld.pair(i), pool)
                          for i, c in enumerate(closed_34) if c == 2)
            results.append(Decomposition(HandShape.CHIITOI, pairs, None,
                                         win, pairs.index(Meld.pair(win.index34)),
                                         Wait.TANKI))
        if is_kokushi_agari(closed_34):
            head = closed_34.index(2)
            results.append(Decomposition(HandShape.KOKUSHI, (), Meld.pair(head),
                                         win, None, Wait.TANKI))

    logger.debug("%r: %d decomposition(s)", hand, len(results))
    return results
