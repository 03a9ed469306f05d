"""Fu (符) calculation for scoring."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from mahc.core.context import WinContext
from mahc.core.tile import DRAGON_INDICES
from mahc.rules.agari import Decomposition, HandShape, Wait
from mahc.rules.config import RuleConfig, DEFAULT_RULES


class Fu(Enum):
    """A single fu contribution: (label, points)."""
    BASE = ("Base points", 20)
    BASE_CHIITOI = ("Base points (chiitoitsu)", 25)
    BASE_KOKUSHI = ("Base points (kokushi)", 30)
    CLOSED_RON = ("Closed ron", 10)
    TSUMO = ("Tsumo", 2)
    NON_SIMPLE_CLOSED_TRIPLET = ("Non-simple closed triplet", 8)
    SIMPLE_CLOSED_TRIPLET = ("Closed triplet", 4)
    NON_SIMPLE_OPEN_TRIPLET = ("Non-simple open triplet", 4)
    SIMPLE_OPEN_TRIPLET = ("Open triplet", 2)
    NON_SIMPLE_CLOSED_KAN = ("Non-simple closed kan", 32)
    SIMPLE_CLOSED_KAN = ("Closed kan", 16)
    NON_SIMPLE_OPEN_KAN = ("Non-simple open kan", 16)
    SIMPLE_OPEN_KAN = ("Open kan", 8)
    YAKUHAI_PAIR = ("Yakuhai pair", 2)
    DOUBLE_WIND_PAIR = ("Double wind pair", 4)
    SINGLE_WAIT = ("Single wait", 2)
    EDGE_WAIT = ("Edge wait", 2)
    CLOSED_WAIT = ("Closed wait", 2)
    OPEN_PINFU = ("Open pinfu", 2)

    def __init__(self, label: str, points: int):
        self.label = label
        self.points = points

    def __str__(self):
        return f"{self.label}: {self.points}"


# (is_kan, is_concealed, is_yaochu) -> Fu
SET_FU = {
    (False, True, True): Fu.NON_SIMPLE_CLOSED_TRIPLET,
    (False, True, False): Fu.SIMPLE_CLOSED_TRIPLET,
    (False, False, True): Fu.NON_SIMPLE_OPEN_TRIPLET,
    (False, False, False): Fu.SIMPLE_OPEN_TRIPLET,
    (True, True, True): Fu.NON_SIMPLE_CLOSED_KAN,
    (True, True, False): Fu.SIMPLE_CLOSED_KAN,
    (True, False, True): Fu.NON_SIMPLE_OPEN_KAN,
    (True, False, False): Fu.SIMPLE_OPEN_KAN,
}

WAIT_FU = {
    Wait.TANKI: Fu.SINGLE_WAIT,
    Wait.PENCHAN: Fu.EDGE_WAIT,
    Wait.KANCHAN: Fu.CLOSED_WAIT,
}


@dataclass
class FuBreakdown:
    """Ordered fu contributions. ``total`` is the raw sum rounded up to ten."""
    items: List[Fu] = field(default_factory=list)

    @property
    def raw(self) -> int:
        return sum(f.points for f in self.items)

    @property
    def total(self) -> int:
        if Fu.BASE_CHIITOI in self.items:
            return 25
        return round_up_10(self.raw)


def calculate_fu(
    decomposition: Decomposition,
    win: WinContext,
    rules: RuleConfig = DEFAULT_RULES,
    is_pinfu: bool = False,
) -> FuBreakdown:
    """Calculate fu (符) for one reading of a hand.

    Args:
        decomposition: The reading being scored (melds, pair, wait)
        win: Win method, winds
        rules: Table rules (double wind pair value)
        is_pinfu: Whether this reading scored pinfu

    Returns:
        FuBreakdown whose total is rounded up to the nearest 10 (chiitoi: 25).
    """
    # Special shapes have fixed fu
    if decomposition.shape == HandShape.CHIITOI:
        return FuBreakdown([Fu.BASE_CHIITOI])
    if decomposition.shape == HandShape.KOKUSHI:
        return FuBreakdown([Fu.BASE_KOKUSHI])

    items = [Fu.BASE]  # 副底
    is_menzen = decomposition.is_menzen

    # Win method fu
    if win.is_tsumo:
        if not is_pinfu:  # Pinfu tsumo is special: 20 fu
            items.append(Fu.TSUMO)
    elif is_menzen:
        items.append(Fu.CLOSED_RON)  # 門前加符

    # Meld fu; a triplet completed by ron counts as open (明刻)
    for i, meld in enumerate(decomposition.melds):
        if not meld.is_set:
            continue
        key = (meld.is_kan,
               decomposition.is_concealed(i, win.is_tsumo),
               meld.tiles[0].is_yaochu)
        items.append(SET_FU[key])

    # Head fu (pair of yakuhai)
    head = decomposition.pair.tile_index34
    seat, prevalent = win.seat_wind.index34, win.round_wind.index34
    if head == seat and head == prevalent:
        if rules.double_wind_pair_fu == 4:
            items.append(Fu.DOUBLE_WIND_PAIR)
        else:
            items.append(Fu.YAKUHAI_PAIR)
    elif head in DRAGON_INDICES or head == seat or head == prevalent:
        items.append(Fu.YAKUHAI_PAIR)

    # Wait type fu: ryanmen and shanpon give nothing
    wait_fu = WAIT_FU.get(decomposition.wait)
    if wait_fu is not None:
        items.append(wait_fu)

    # Open pinfu-like hand: minimum 30 fu
    if not is_menzen and sum(f.points for f in items) == 20:
        items.append(Fu.OPEN_PINFU)

    return FuBreakdown(items)


def round_up_10(fu: int) -> int:
    """Round up to nearest 10."""
    return ((fu + 9) // 10) * 10
