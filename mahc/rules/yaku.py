"""Yaku (役) detection for Riichi Mahjong.

Each yaku is a member of the ``Yaku`` enumeration with a check function that
takes a HandContext and returns a YakuMatch or None.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Set

from mahc.core.context import WinContext
from mahc.core.tile import YAOCHU_INDICES, TERMINAL_INDICES, DRAGON_INDICES, WIND_INDICES
from mahc.core.errors import UnsupportedYaku
from mahc.rules.agari import Decomposition, HandShape, Wait
from mahc.rules.config import RuleConfig, DEFAULT_RULES

logger = logging.getLogger(__name__)


class Yaku(Enum):
    # 1 han
    RIICHI = "Riichi"
    IPPATSU = "Ippatsu"
    MENZEN_TSUMO = "Menzen Tsumo"
    TANYAO = "Tanyao"
    PINFU = "Pinfu"
    IIPEIKOU = "Iipeikou"
    YAKUHAI_SEAT_WIND = "Yakuhai (seat wind)"
    YAKUHAI_ROUND_WIND = "Yakuhai (prevalent wind)"
    YAKUHAI_HAKU = "Yakuhai (white dragon)"
    YAKUHAI_HATSU = "Yakuhai (green dragon)"
    YAKUHAI_CHUN = "Yakuhai (red dragon)"
    HAITEI = "Haitei Raoyue"
    HOUTEI = "Houtei Raoyui"
    RINSHAN = "Rinshan Kaihou"
    CHANKAN = "Chankan"
    # 2 han
    DOUBLE_RIICHI = "Double Riichi"
    CHANTA = "Chanta"
    ITTSU = "Ittsu"
    SANSHOKU_DOUJUN = "Sanshoku Doujun"
    SANSHOKU_DOUKOU = "Sanshoku Doukou"
    TOITOI = "Toitoi"
    SANANKOU = "Sanankou"
    SANKANTSU = "Sankantsu"
    HONROUTOU = "Honroutou"
    SHOUSANGEN = "Shousangen"
    CHIITOITSU = "Chiitoitsu"
    # 3+ han
    JUNCHAN = "Junchan"
    RYANPEIKOU = "Ryanpeikou"
    HONITSU = "Honitsu"
    CHINITSU = "Chinitsu"
    # Yakuman
    KOKUSHI = "Kokushi Musou"
    SUUANKOU = "Suuankou"
    DAISANGEN = "Daisangen"
    SHOUSUUSHII = "Shousuushii"
    DAISUUSHII = "Daisuushii"
    TSUUIISOU = "Tsuuiisou"
    CHINROUTOU = "Chinroutou"
    RYUUIISOU = "Ryuuiisou"
    CHUUREN = "Chuuren Poutou"
    SUUKANTSU = "Suukantsu"
    TENHOU = "Tenhou"
    CHIIHOU = "Chiihou"
    # Decided by the discard pile at an exhaustive draw, not by a winning hand
    NAGASHI_MANGAN = "Nagashi Mangan"
    # Bonus han, not yaku
    DORA = "Dora"
    URADORA = "Ura Dora"
    AKADORA = "Aka Dora"

    @property
    def kanji(self) -> str:
        return YAKU_KANJI[self]

    @property
    def is_yakuman(self) -> bool:
        return YAKU_HAN[self][0] >= 13

    @property
    def is_dora(self) -> bool:
        return self in DORA_KINDS


YAKU_KANJI = {
    Yaku.RIICHI: "立直", Yaku.IPPATSU: "一発", Yaku.MENZEN_TSUMO: "門前清自摸和",
    Yaku.TANYAO: "断幺九", Yaku.PINFU: "平和", Yaku.IIPEIKOU: "一盃口",
    Yaku.YAKUHAI_SEAT_WIND: "自風牌", Yaku.YAKUHAI_ROUND_WIND: "場風牌",
    Yaku.YAKUHAI_HAKU: "役牌 白", Yaku.YAKUHAI_HATSU: "役牌 發", Yaku.YAKUHAI_CHUN: "役牌 中",
    Yaku.HAITEI: "海底摸月", Yaku.HOUTEI: "河底撈魚", Yaku.RINSHAN: "嶺上開花",
    Yaku.CHANKAN: "搶槓", Yaku.DOUBLE_RIICHI: "両立直", Yaku.CHANTA: "混全帯幺九",
    Yaku.ITTSU: "一気通貫", Yaku.SANSHOKU_DOUJUN: "三色同順", Yaku.SANSHOKU_DOUKOU: "三色同刻",
    Yaku.TOITOI: "対々和", Yaku.SANANKOU: "三暗刻", Yaku.SANKANTSU: "三槓子",
    Yaku.HONROUTOU: "混老頭", Yaku.SHOUSANGEN: "小三元", Yaku.CHIITOITSU: "七対子",
    Yaku.JUNCHAN: "純全帯幺九", Yaku.RYANPEIKOU: "二盃口", Yaku.HONITSU: "混一色",
    Yaku.CHINITSU: "清一色", Yaku.KOKUSHI: "国士無双", Yaku.SUUANKOU: "四暗刻",
    Yaku.DAISANGEN: "大三元", Yaku.SHOUSUUSHII: "小四喜", Yaku.DAISUUSHII: "大四喜",
    Yaku.TSUUIISOU: "字一色", Yaku.CHINROUTOU: "清老頭", Yaku.RYUUIISOU: "緑一色",
    Yaku.CHUUREN: "九蓮宝燈", Yaku.SUUKANTSU: "四槓子", Yaku.TENHOU: "天和",
    Yaku.CHIIHOU: "地和", Yaku.NAGASHI_MANGAN: "流し満貫",
    Yaku.DORA: "ドラ", Yaku.URADORA: "裏ドラ", Yaku.AKADORA: "赤ドラ",
}

# (closed han, open han); None = closed hands only
YAKU_HAN = {
    Yaku.RIICHI: (1, None), Yaku.IPPATSU: (1, None), Yaku.MENZEN_TSUMO: (1, None),
    Yaku.TANYAO: (1, 1), Yaku.PINFU: (1, None), Yaku.IIPEIKOU: (1, None),
    Yaku.YAKUHAI_SEAT_WIND: (1, 1), Yaku.YAKUHAI_ROUND_WIND: (1, 1),
    Yaku.YAKUHAI_HAKU: (1, 1), Yaku.YAKUHAI_HATSU: (1, 1), Yaku.YAKUHAI_CHUN: (1, 1),
    Yaku.HAITEI: (1, 1), Yaku.HOUTEI: (1, 1), Yaku.RINSHAN: (1, 1), Yaku.CHANKAN: (1, 1),
    Yaku.DOUBLE_RIICHI: (2, None), Yaku.CHANTA: (2, 1), Yaku.ITTSU: (2, 1),
    Yaku.SANSHOKU_DOUJUN: (2, 1), Yaku.SANSHOKU_DOUKOU: (2, 2), Yaku.TOITOI: (2, 2),
    Yaku.SANANKOU: (2, 2), Yaku.SANKANTSU: (2, 2), Yaku.HONROUTOU: (2, 2),
    Yaku.SHOUSANGEN: (2, 2), Yaku.CHIITOITSU: (2, None),
    Yaku.JUNCHAN: (3, 2), Yaku.RYANPEIKOU: (3, None), Yaku.HONITSU: (3, 2),
    Yaku.CHINITSU: (6, 5),
    Yaku.KOKUSHI: (13, None), Yaku.SUUANKOU: (13, None), Yaku.DAISANGEN: (13, 13),
    Yaku.SHOUSUUSHII: (13, 13), Yaku.DAISUUSHII: (13, 13), Yaku.TSUUIISOU: (13, 13),
    Yaku.CHINROUTOU: (13, 13), Yaku.RYUUIISOU: (13, 13), Yaku.CHUUREN: (13, None),
    Yaku.SUUKANTSU: (13, 13), Yaku.TENHOU: (13, None), Yaku.CHIIHOU: (13, None),
    Yaku.NAGASHI_MANGAN: (5, 5),
    Yaku.DORA: (1, 1), Yaku.URADORA: (1, 1), Yaku.AKADORA: (1, 1),
}

DORA_KINDS = {Yaku.DORA, Yaku.URADORA, Yaku.AKADORA}

# A matched key removes every matched yaku in its value set
SUPERSEDES: Dict[Yaku, Set[Yaku]] = {
    Yaku.RYANPEIKOU: {Yaku.IIPEIKOU},
    Yaku.JUNCHAN: {Yaku.CHANTA},
    Yaku.CHINITSU: {Yaku.HONITSU},
    Yaku.DOUBLE_RIICHI: {Yaku.RIICHI},
    Yaku.HONROUTOU: {Yaku.CHANTA},
    Yaku.DAISUUSHII: {Yaku.SHOUSUUSHII},
}


@dataclass(frozen=True)
class YakuMatch:
    """A matched yaku (or dora bonus) and the han it is worth in this hand."""
    yaku: Yaku
    han: int

    @property
    def name(self) -> str:
        return self.yaku.value


@dataclass
class HandContext:
    """All information needed to judge yaku for one decomposition."""
    decomposition: Decomposition
    win: WinContext = field(default_factory=WinContext)
    rules: RuleConfig = DEFAULT_RULES
    all_tiles_34: List[int] = field(default_factory=lambda: [0] * 34)
    dora_count: int = 0
    uradora_count: int = 0
    red_dora_count: int = 0

    @property
    def is_menzen(self) -> bool:
        return self.decomposition.is_menzen

    @property
    def is_tsumo(self) -> bool:
        return self.win.is_tsumo

    @property
    def shape(self) -> HandShape:
        return self.decomposition.shape

    @property
    def is_standard(self) -> bool:
        return self.decomposition.shape == HandShape.STANDARD

    @property
    def head_34(self) -> int:
        pair = self.decomposition.pair
        return pair.tile_index34 if pair is not None else -1

    @property
    def seat_wind_34(self) -> int:
        return self.win.seat_wind.index34

    @property
    def round_wind_34(self) -> int:
        return self.win.round_wind.index34

    @property
    def sequence_starts(self) -> List[int]:
        return [m.tile_index34 for m in self.decomposition.sequences]

    @property
    def set_indices(self) -> List[int]:
        return [m.tile_index34 for m in self.decomposition.sets]

    def present(self) -> List[int]:
        """34 indices of every tile kind in the hand."""
        return [i for i in range(34) if self.all_tiles_34[i] > 0]


def _hit(yaku: Yaku, ctx: HandContext) -> Optional[YakuMatch]:
    """Match worth the closed or open han value; None if closed-only and open."""
    closed_han, open_han = YAKU_HAN[yaku]
    han = closed_han if ctx.is_menzen else open_han
    if han is None:
        return None
    return YakuMatch(yaku, han)


# === 1翻 yaku ===

def check_riichi(ctx: HandContext) -> Optional[YakuMatch]:
    if ctx.win.is_riichi:
        return _hit(Yaku.RIICHI, ctx)
    return None

def check_double_riichi(ctx: HandContext) -> Optional[YakuMatch]:
    if ctx.win.is_double_riichi:
        return _hit(Yaku.DOUBLE_RIICHI, ctx)
    return None

def check_ippatsu(ctx: HandContext) -> Optional[YakuMatch]:
    if ctx.win.is_ippatsu and ctx.win.any_riichi:
        return _hit(Yaku.IPPATSU, ctx)
    return None

def check_menzen_tsumo(ctx: HandContext) -> Optional[YakuMatch]:
    if ctx.is_tsumo and ctx.is_menzen:
        return _hit(Yaku.MENZEN_TSUMO, ctx)
    return None

def check_tanyao(ctx: HandContext) -> Optional[YakuMatch]:
    """All simples (断幺九) - no terminals or honors."""
    if not ctx.is_menzen and not ctx.rules.kuitan:
        return None
    for i in ctx.present():
        if i in YAOCHU_INDICES:
            return None
    return _hit(Yaku.TANYAO, ctx)

def check_pinfu(ctx: HandContext) -> Optional[YakuMatch]:
    """Pinfu - all sequences, non-yakuhai head, ryanmen wait, menzen."""
    if not ctx.is_menzen or not ctx.is_standard:
        return None
    if any(not m.is_sequence for m in ctx.decomposition.melds):
        return None
    if _is_yakuhai_index(ctx, ctx.head_34):
        return None
    if ctx.decomposition.wait != Wait.RYANMEN:
        return None
    return _hit(Yaku.PINFU, ctx)


def _identical_sequence_pairs(ctx: HandContext) -> int:
    seen: Dict[int, int] = {}
    for s in ctx.sequence_starts:
        seen[s] = seen.get(s, 0) + 1
    return sum(v // 2 for v in seen.values())


def check_iipeikou(ctx: HandContext) -> Optional[YakuMatch]:
    """One set of identical sequences (一盃口). Menzen only."""
    if ctx.is_standard and _identical_sequence_pairs(ctx) == 1:
        return _hit(Yaku.IIPEIKOU, ctx)
    return None


def check_ryanpeikou(ctx: HandContext) -> Optional[YakuMatch]:
    """Two sets of identical sequences (二盃口). Menzen only."""
    if ctx.is_standard and _identical_sequence_pairs(ctx) >= 2:
        return _hit(Yaku.RYANPEIKOU, ctx)
    return None


def _is_yakuhai_index(ctx: HandContext, index34: int) -> bool:
    return (index34 in DRAGON_INDICES or index34 == ctx.seat_wind_34
            or index34 == ctx.round_wind_34)


def _has_set_of(ctx: HandContext, index34: int) -> bool:
    return ctx.is_standard and index34 in ctx.set_indices


def check_yakuhai_seat_wind(ctx: HandContext) -> Optional[YakuMatch]:
    if _has_set_of(ctx, ctx.seat_wind_34):
        return _hit(Yaku.YAKUHAI_SEAT_WIND, ctx)
    return None

def check_yakuhai_round_wind(ctx: HandContext) -> Optional[YakuMatch]:
    if _has_set_of(ctx, ctx.round_wind_34):
        return _hit(Yaku.YAKUHAI_ROUND_WIND, ctx)
    return None

def check_yakuhai_haku(ctx: HandContext) -> Optional[YakuMatch]:
    if _has_set_of(ctx, 31):
        return _hit(Yaku.YAKUHAI_HAKU, ctx)
    return None

def check_yakuhai_hatsu(ctx: HandContext) -> Optional[YakuMatch]:
    if _has_set_of(ctx, 32):
        return _hit(Yaku.YAKUHAI_HATSU, ctx)
    return None

def check_yakuhai_chun(ctx: HandContext) -> Optional[YakuMatch]:
    if _has_set_of(ctx, 33):
        return _hit(Yaku.YAKUHAI_CHUN, ctx)
    return None


def check_haitei(ctx: HandContext) -> Optional[YakuMatch]:
    if ctx.win.is_haitei and ctx.is_tsumo:
        return _hit(Yaku.HAITEI, ctx)
    return None

def check_houtei(ctx: HandContext) -> Optional[YakuMatch]:
    if ctx.win.is_haitei and not ctx.is_tsumo:
        return _hit(Yaku.HOUTEI, ctx)
    return None

def check_rinshan(ctx: HandContext) -> Optional[YakuMatch]:
    if ctx.win.is_rinshan:
        return _hit(Yaku.RINSHAN, ctx)
    return None

def check_chankan(ctx: HandContext) -> Optional[YakuMatch]:
    if ctx.win.is_chankan:
        return _hit(Yaku.CHANKAN, ctx)
    return None


# === 2翻+ yaku ===

def check_chanta(ctx: HandContext) -> Optional[YakuMatch]:
    """Mixed outside hand (混全帯幺九). Every group holds a terminal or honor."""
    if not ctx.is_standard:
        return None
    groups = ctx.decomposition.groups
    if not all(g.has_yaochu for g in groups):
        return None
    has_honor = any(g.tiles[0].is_honor for g in groups)
    if not has_honor:
        return None  # Would be junchan instead
    if not ctx.decomposition.sequences:
        return None  # Honroutou territory
    return _hit(Yaku.CHANTA, ctx)


def check_junchan(ctx: HandContext) -> Optional[YakuMatch]:
    """Pure outside hand (純全帯幺九). Every group holds a terminal, no honors."""
    if not ctx.is_standard:
        return None
    groups = ctx.decomposition.groups
    if not all(any(t.is_terminal for t in g.tiles) for g in groups):
        return None
    if not ctx.decomposition.sequences:
        return None
    return _hit(Yaku.JUNCHAN, ctx)


def check_ittsu(ctx: HandContext) -> Optional[YakuMatch]:
    """Straight (一気通貫). 123+456+789 of one suit."""
    starts = set(ctx.sequence_starts)
    for suit_start in (0, 9, 18):
        if (suit_start in starts and
            suit_start + 3 in starts and
            suit_start + 6 in starts):
            return _hit(Yaku.ITTSU, ctx)
    return None


def check_sanshoku_doujun(ctx: HandContext) -> Optional[YakuMatch]:
    """Three-colored straight (三色同順). Same sequence in all 3 suits."""
    starts = set(ctx.sequence_starts)
    for s in starts:
        if s < 9 and (s + 9) in starts and (s + 18) in starts:
            return _hit(Yaku.SANSHOKU_DOUJUN, ctx)
    return None


def check_sanshoku_doukou(ctx: HandContext) -> Optional[YakuMatch]:
    """Three-colored triplets (三色同刻). Same triplet in all 3 suits."""
    sets = set(ctx.set_indices)
    for k in sets:
        if k < 9 and (k + 9) in sets and (k + 18) in sets:
            return _hit(Yaku.SANSHOKU_DOUKOU, ctx)
    return None


def check_toitoi(ctx: HandContext) -> Optional[YakuMatch]:
    """All triplets (対々和)."""
    if not ctx.is_standard:
        return None
    if all(m.is_set for m in ctx.decomposition.melds):
        return _hit(Yaku.TOITOI, ctx)
    return None


def check_sanankou(ctx: HandContext) -> Optional[YakuMatch]:
    """Three concealed triplets (三暗刻). Ron on a shanpon wait opens that triplet."""
    if not ctx.is_standard:
        return None
    if ctx.decomposition.concealed_set_count(ctx.is_tsumo) == 3:
        return _hit(Yaku.SANANKOU, ctx)
    return None


def check_sankantsu(ctx: HandContext) -> Optional[YakuMatch]:
    """Three quads (三槓子)."""
    if sum(1 for m in ctx.decomposition.melds if m.is_kan) == 3:
        return _hit(Yaku.SANKANTSU, ctx)
    return None


def check_honroutou(ctx: HandContext) -> Optional[YakuMatch]:
    """All terminals and honors (混老頭)."""
    present = ctx.present()
    if any(i not in YAOCHU_INDICES for i in present):
        return None
    # Must have both terminals and honors
    has_terminal = any(i < 27 for i in present)
    has_honor = any(i >= 27 for i in present)
    if has_terminal and has_honor:
        return _hit(Yaku.HONROUTOU, ctx)
    return None


def check_shousangen(ctx: HandContext) -> Optional[YakuMatch]:
    """Little three dragons (小三元). 2 dragon triplets + dragon pair."""
    if not ctx.is_standard:
        return None
    dragon_sets = sum(1 for i in ctx.set_indices if i in DRAGON_INDICES)
    if dragon_sets == 2 and ctx.head_34 in DRAGON_INDICES:
        return _hit(Yaku.SHOUSANGEN, ctx)
    return None


def check_chiitoitsu(ctx: HandContext) -> Optional[YakuMatch]:
    """Seven pairs (七対子)."""
    if ctx.shape == HandShape.CHIITOI:
        return _hit(Yaku.CHIITOITSU, ctx)
    return None


def _number_suits(ctx: HandContext) -> Set[int]:
    return {i // 9 for i in ctx.present() if i < 27}


def check_honitsu(ctx: HandContext) -> Optional[YakuMatch]:
    """Half flush (混一色). One suit + honors."""
    has_honor = any(i >= 27 for i in ctx.present())
    if len(_number_suits(ctx)) == 1 and has_honor:
        return _hit(Yaku.HONITSU, ctx)
    return None


def check_chinitsu(ctx: HandContext) -> Optional[YakuMatch]:
    """Full flush (清一色). One suit only, no honors."""
    has_honor = any(i >= 27 for i in ctx.present())
    if len(_number_suits(ctx)) == 1 and not has_honor:
        return _hit(Yaku.CHINITSU, ctx)
    return None


# === Yakuman ===

def check_kokushi(ctx: HandContext) -> Optional[YakuMatch]:
    """Thirteen orphans (国士無双)."""
    if ctx.shape == HandShape.KOKUSHI:
        return _hit(Yaku.KOKUSHI, ctx)
    return None


def check_suuankou(ctx: HandContext) -> Optional[YakuMatch]:
    """Four concealed triplets (四暗刻)."""
    if not ctx.is_standard:
        return None
    if ctx.decomposition.concealed_set_count(ctx.is_tsumo) == 4:
        return _hit(Yaku.SUUANKOU, ctx)
    return None


def check_daisangen(ctx: HandContext) -> Optional[YakuMatch]:
    """Big three dragons (大三元)."""
    if not ctx.is_standard:
        return None
    if sum(1 for i in ctx.set_indices if i in DRAGON_INDICES) == 3:
        return _hit(Yaku.DAISANGEN, ctx)
    return None


def check_shousuushii(ctx: HandContext) -> Optional[YakuMatch]:
    """Little four winds (小四喜)."""
    if not ctx.is_standard:
        return None
    wind_sets = sum(1 for i in ctx.set_indices if i in WIND_INDICES)
    if wind_sets == 3 and ctx.head_34 in WIND_INDICES:
        return _hit(Yaku.SHOUSUUSHII, ctx)
    return None


def check_daisuushii(ctx: HandContext) -> Optional[YakuMatch]:
    """Big four winds (大四喜)."""
    if not ctx.is_standard:
        return None
    if sum(1 for i in ctx.set_indices if i in WIND_INDICES) == 4:
        return _hit(Yaku.DAISUUSHII, ctx)
    return None


def check_tsuuiisou(ctx: HandContext) -> Optional[YakuMatch]:
    """All honors (字一色)."""
    if all(i >= 27 for i in ctx.present()):
        return _hit(Yaku.TSUUIISOU, ctx)
    return None


def check_chinroutou(ctx: HandContext) -> Optional[YakuMatch]:
    """All terminals (清老頭)."""
    if all(i in TERMINAL_INDICES for i in ctx.present()):
        return _hit(Yaku.CHINROUTOU, ctx)
    return None


GREEN_INDICES = {19, 20, 21, 23, 25, 32}  # 2s,3s,4s,6s,8s,發


def check_ryuuiisou(ctx: HandContext) -> Optional[YakuMatch]:
    """All green (緑一色). Only 2s,3s,4s,6s,8s + hatsu."""
    if all(i in GREEN_INDICES for i in ctx.present()):
        return _hit(Yaku.RYUUIISOU, ctx)
    return None


def check_chuuren(ctx: HandContext) -> Optional[YakuMatch]:
    """Nine gates (九蓮宝燈). Menzen only, one suit: 1112345678999+1."""
    if not ctx.is_standard or any(m.is_kan for m in ctx.decomposition.melds):
        return None
    suits = _number_suits(ctx)
    if len(suits) != 1 or any(i >= 27 for i in ctx.present()):
        return None
    suit_start = suits.pop() * 9
    # Must have at least: 3,1,1,1,1,1,1,1,3 of 1-9
    required = [3, 1, 1, 1, 1, 1, 1, 1, 3]
    for j in range(9):
        if ctx.all_tiles_34[suit_start + j] < required[j]:
            return None
    return _hit(Yaku.CHUUREN, ctx)


def check_suukantsu(ctx: HandContext) -> Optional[YakuMatch]:
    """Four quads (四槓子)."""
    if sum(1 for m in ctx.decomposition.melds if m.is_kan) == 4:
        return _hit(Yaku.SUUKANTSU, ctx)
    return None


def check_tenhou(ctx: HandContext) -> Optional[YakuMatch]:
    if ctx.win.is_tenhou:
        return _hit(Yaku.TENHOU, ctx)
    return None


def check_chiihou(ctx: HandContext) -> Optional[YakuMatch]:
    if ctx.win.is_chiihou:
        return _hit(Yaku.CHIIHOU, ctx)
    return None


YakuCheck = Callable[[HandContext], Optional[YakuMatch]]

YAKUMAN_CHECKS: Dict[Yaku, YakuCheck] = {
    Yaku.TENHOU: check_tenhou,
    Yaku.CHIIHOU: check_chiihou,
    Yaku.KOKUSHI: check_kokushi,
    Yaku.SUUANKOU: check_suuankou,
    Yaku.DAISANGEN: check_daisangen,
    Yaku.SHOUSUUSHII: check_shousuushii,
    Yaku.DAISUUSHII: check_daisuushii,
    Yaku.TSUUIISOU: check_tsuuiisou,
    Yaku.CHINROUTOU: check_chinroutou,
    Yaku.RYUUIISOU: check_ryuuiisou,
    Yaku.CHUUREN: check_chuuren,
    Yaku.SUUKANTSU: check_suukantsu,
}

YAKU_CHECKS: Dict[Yaku, YakuCheck] = {
    Yaku.RIICHI: check_riichi,
    Yaku.DOUBLE_RIICHI: check_double_riichi,
    Yaku.IPPATSU: check_ippatsu,
    Yaku.MENZEN_TSUMO: check_menzen_tsumo,
    Yaku.TANYAO: check_tanyao,
    Yaku.PINFU: check_pinfu,
    Yaku.IIPEIKOU: check_iipeikou,
    Yaku.RYANPEIKOU: check_ryanpeikou,
    Yaku.YAKUHAI_SEAT_WIND: check_yakuhai_seat_wind,
    Yaku.YAKUHAI_ROUND_WIND: check_yakuhai_round_wind,
    Yaku.YAKUHAI_HAKU: check_yakuhai_haku,
    Yaku.YAKUHAI_HATSU: check_yakuhai_hatsu,
    Yaku.YAKUHAI_CHUN: check_yakuhai_chun,
    Yaku.HAITEI: check_haitei,
    Yaku.HOUTEI: check_houtei,
    Yaku.RINSHAN: check_rinshan,
    Yaku.CHANKAN: check_chankan,
    Yaku.CHANTA: check_chanta,
    Yaku.JUNCHAN: check_junchan,
    Yaku.ITTSU: check_ittsu,
    Yaku.SANSHOKU_DOUJUN: check_sanshoku_doujun,
    Yaku.SANSHOKU_DOUKOU: check_sanshoku_doukou,
    Yaku.TOITOI: check_toitoi,
    Yaku.SANANKOU: check_sanankou,
    Yaku.SANKANTSU: check_sankantsu,
    Yaku.HONROUTOU: check_honroutou,
    Yaku.SHOUSANGEN: check_shousangen,
    Yaku.CHIITOITSU: check_chiitoitsu,
    Yaku.HONITSU: check_honitsu,
    Yaku.CHINITSU: check_chinitsu,
}


def check_yaku(yaku: Yaku, ctx: HandContext) -> Optional[YakuMatch]:
    """Evaluate a single pattern. Raises UnsupportedYaku for patterns a hand cannot show."""
    check = YAKUMAN_CHECKS.get(yaku) or YAKU_CHECKS.get(yaku)
    if check is None:
        raise UnsupportedYaku(yaku.value)
    return check(ctx)


def _apply_exclusions(matches: List[YakuMatch]) -> List[YakuMatch]:
    found = {m.yaku for m in matches}
    removed: Set[Yaku] = set()
    for yaku in found:
        removed |= SUPERSEDES.get(yaku, set())
    return [m for m in matches if m.yaku not in removed]


def detect_all_yaku(ctx: HandContext) -> List[YakuMatch]:
    """Detect all applicable yaku for the given hand context.

    Yakuman replace every ordinary yaku and dora. Otherwise dora bonuses are
    appended after the yaku.
    """
    yakuman = [r for r in (check(ctx) for check in YAKUMAN_CHECKS.values()) if r]
    if yakuman:
        logger.debug("yakuman: %s", ", ".join(m.name for m in yakuman))
        return _apply_exclusions(yakuman)

    results = [r for r in (check(ctx) for check in YAKU_CHECKS.values()) if r]
    results = _apply_exclusions(results)

    # Dora (not real yaku, but counted for scoring)
    if ctx.dora_count > 0:
        results.append(YakuMatch(Yaku.DORA, ctx.dora_count))
    if ctx.uradora_count > 0 and ctx.win.any_riichi:
        results.append(YakuMatch(Yaku.URADORA, ctx.uradora_count))
    if ctx.red_dora_count > 0:
        results.append(YakuMatch(Yaku.AKADORA, ctx.red_dora_count))

    return results


def total_han(yaku_list: List[YakuMatch]) -> int:
    """Sum total han from yaku list."""
    return sum(m.han for m in yaku_list)


def has_yaku(yaku_list: List[YakuMatch]) -> bool:
    """Check if there's at least one real yaku (not just dora)."""
    return any(not m.yaku.is_dora for m in yaku_list)
