"""Situational information about a win: winds, win method, riichi and dora."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Tuple

from .errors import (
    InvalidContext, InvalidTileToken, DuplicateRiichi, IppatsuWithoutRiichi,
    ChankanTsumo, RinshanWithoutTsumo, RinshanWithoutKan, HaiteiRinshan, HaiteiChankan,
    RinshanIppatsu, DoubleRiichiHaiteiIppatsu, DoubleRiichiHaiteiChankan,
)
from .tile import Tile, next_tile_index


class Wind(IntEnum):
    EAST = 0    # 東
    SOUTH = 1   # 南
    WEST = 2    # 西
    NORTH = 3   # 北

    @property
    def kanji(self) -> str:
        return ['東', '南', '西', '北'][self.value]

    @property
    def index34(self) -> int:
        """34 encoding index for this wind tile."""
        return 27 + self.value

    @classmethod
    def parse(cls, text: str) -> 'Wind':
        """Accept 'e', 'E', 'Ew', 'east' and the like."""
        key = text.strip()[:1].upper()
        if not key or key not in "ESWN":
            raise InvalidTileToken(f"unknown wind {text!r}")
        return cls("ESWN".index(key))


@dataclass(frozen=True)
class WinContext:
    """Everything about a win that the tiles alone do not say.

    Dora tiles are the tiles that score (not their indicators); use
    ``dora_from_indicators`` to convert.
    """
    seat_wind: Wind = Wind.EAST
    round_wind: Wind = Wind.EAST
    is_tsumo: bool = False
    is_riichi: bool = False
    is_double_riichi: bool = False
    is_ippatsu: bool = False
    is_haitei: bool = False  # Last tile from wall (tsumo) or last discard (ron)
    is_rinshan: bool = False
    is_chankan: bool = False
    is_tenhou: bool = False
    is_chiihou: bool = False
    dora_tiles: Tuple[Tile, ...] = field(default_factory=tuple)
    uradora_tiles: Tuple[Tile, ...] = field(default_factory=tuple)
    honba: int = 0

    @property
    def is_dealer(self) -> bool:
        return self.seat_wind == Wind.EAST

    @property
    def any_riichi(self) -> bool:
        return self.is_riichi or self.is_double_riichi

    def validate(self, has_kan: bool, is_menzen: bool):
        """Reject flag combinations that cannot happen in a real win."""
        if self.honba < 0:
            raise InvalidContext("honba cannot be negative")
        if self.is_riichi and self.is_double_riichi:
            raise DuplicateRiichi()
        if self.is_ippatsu and not self.any_riichi:
            raise IppatsuWithoutRiichi()
        if self.is_chankan and self.is_tsumo:
            raise ChankanTsumo()
        if self.is_rinshan and not self.is_tsumo:
            raise RinshanWithoutTsumo()
        if self.is_rinshan and not has_kan:
            raise RinshanWithoutKan()
        if self.is_rinshan and self.is_ippatsu:
            raise RinshanIppatsu()
        if self.is_double_riichi and self.is_ippatsu:
            if self.is_haitei:
                raise DoubleRiichiHaiteiIppatsu()
            if self.is_chankan:
                raise DoubleRiichiHaiteiChankan()
        if self.is_haitei and self.is_rinshan:
            raise HaiteiRinshan()
        if self.is_haitei and self.is_chankan:
            raise HaiteiChankan()
        if self.any_riichi and not is_menzen:
            raise InvalidContext("riichi requires a closed hand")
        if self.is_tenhou or self.is_chiihou:
            if self.is_tenhou and self.is_chiihou:
                raise InvalidContext("tenhou and chiihou are exclusive")
            if not self.is_tsumo or not is_menzen or has_kan:
                raise InvalidContext("first-draw wins need a closed tsumo without kan")
            if self.is_tenhou != self.is_dealer:
                raise InvalidContext("tenhou is the dealer's, chiihou a non-dealer's")


def dora_from_indicators(indicators) -> Tuple[Tile, ...]:
    """Convert dora indicator tiles into the dora tiles they point to."""
    return tuple(Tile(next_tile_index(t.index34)) for t in indicators)
