"""Score calculation - pick the best reading of a hand and convert han + fu to points."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from mahc.core.context import WinContext
from mahc.core.errors import (
    CalculatorError, NoApplicableYaku, NoFu, NoHan, NoValidDecomposition,
)
from mahc.core.hand import Hand
from mahc.core.tile import tiles_to_34_array
from mahc.rules.agari import Decomposition, decompose_hand
from mahc.rules.config import RuleConfig, DEFAULT_RULES
from mahc.rules.fu import FuBreakdown, calculate_fu
from mahc.rules.yaku import (
    HandContext, Yaku, YakuMatch, detect_all_yaku, has_yaku, total_han,
)

logger = logging.getLogger(__name__)


class LimitHand(Enum):
    MANGAN = ("Mangan", "満貫", 2000)
    HANEMAN = ("Haneman", "跳満", 3000)
    BAIMAN = ("Baiman", "倍満", 4000)
    SANBAIMAN = ("Sanbaiman", "三倍満", 6000)
    YAKUMAN = ("Yakuman", "役満", 8000)

    def __init__(self, label: str, kanji: str, base_points: int):
        self.label = label
        self.kanji = kanji
        self.base_points = base_points


def get_limit_hand(han: int, fu: int, rules: RuleConfig = DEFAULT_RULES) -> Optional[LimitHand]:
    """Limit hand reached by han and fu, or None if the formula applies."""
    if han >= 13:
        return LimitHand.YAKUMAN
    if han >= 11:
        return LimitHand.SANBAIMAN
    if han >= 8:
        return LimitHand.BAIMAN
    if han >= 6:
        return LimitHand.HANEMAN
    if han >= 5:
        return LimitHand.MANGAN
    if fu * (2 ** (2 + han)) >= 2000:
        return LimitHand.MANGAN
    if rules.kiriage_mangan and (han, fu) in ((4, 30), (3, 60)):
        return LimitHand.MANGAN
    return None


def calculate_base_points(han: int, fu: int, rules: RuleConfig = DEFAULT_RULES) -> int:
    """Calculate base points from han and fu."""
    limit = get_limit_hand(han, fu, rules)
    if limit is not None:
        return limit.base_points
    return fu * (2 ** (2 + han))


def round_up_100(points: int) -> int:
    return ((points + 99) // 100) * 100


@dataclass(frozen=True)
class Payment:
    """What the winner collects for one particular win.

    For ron only ``ron`` is set. For tsumo ``dealer_pays`` is the dealer's
    share (0 when the winner is the dealer) and ``non_dealer_pays`` is what each
    non-dealer pays. Honba are included.
    """
    ron: int = 0
    dealer_pays: int = 0
    non_dealer_pays: int = 0
    is_tsumo: bool = False
    is_dealer: bool = False

    @property
    def total(self) -> int:
        if not self.is_tsumo:
            return self.ron
        if self.is_dealer:
            return self.non_dealer_pays * 3
        return self.dealer_pays + self.non_dealer_pays * 2


def calculate_payment(han: int, fu: int, is_dealer: bool, is_tsumo: bool,
                      honba: int = 0, rules: RuleConfig = DEFAULT_RULES) -> Payment:
    """Payment for one win. Every individual payment is rounded up to 100."""
    base_points = calculate_base_points(han, fu, rules)
    honba_bonus_ron = 300 * honba
    honba_bonus_tsumo_each = 100 * honba

    if is_tsumo:
        if is_dealer:
            # Each non-dealer pays base*2
            each_pay = round_up_100(base_points * 2) + honba_bonus_tsumo_each
            return Payment(non_dealer_pays=each_pay, is_tsumo=True, is_dealer=True)
        # Dealer pays base*2, non-dealers pay base*1
        dealer_pay = round_up_100(base_points * 2) + honba_bonus_tsumo_each
        non_dealer_pay = round_up_100(base_points) + honba_bonus_tsumo_each
        return Payment(dealer_pays=dealer_pay, non_dealer_pays=non_dealer_pay,
                       is_tsumo=True, is_dealer=False)

    multiplier = 6 if is_dealer else 4
    ron_pay = round_up_100(base_points * multiplier) + honba_bonus_ron
    return Payment(ron=ron_pay, is_tsumo=False, is_dealer=is_dealer)


@dataclass(frozen=True)
class PaymentTable:
    """All payments for a han/fu value, as a calculator shows them.

    Attributes:
        dealer_ron: Dealer wins by ron
        dealer_tsumo: Dealer wins by tsumo, paid by each non-dealer
        non_dealer_ron: Non-dealer wins by ron
        non_dealer_tsumo_non_dealer: Non-dealer tsumo, paid by each other non-dealer
        non_dealer_tsumo_dealer: Non-dealer tsumo, paid by the dealer
    """
    dealer_ron: int
    dealer_tsumo: int
    non_dealer_ron: int
    non_dealer_tsumo_non_dealer: int
    non_dealer_tsumo_dealer: int

    def as_list(self) -> List[int]:
        return [self.dealer_ron, self.dealer_tsumo, self.non_dealer_ron,
                self.non_dealer_tsumo_non_dealer, self.non_dealer_tsumo_dealer]


def calculate_payment_table(han: int, fu: int, honba: int = 0,
                            rules: RuleConfig = DEFAULT_RULES) -> PaymentTable:
    dealer_ron = calculate_payment(han, fu, True, False, honba, rules)
    dealer_tsumo = calculate_payment(han, fu, True, True, honba, rules)
    non_dealer_ron = calculate_payment(han, fu, False, False, honba, rules)
    non_dealer_tsumo = calculate_payment(han, fu, False, True, honba, rules)
    return PaymentTable(
        dealer_ron=dealer_ron.ron,
        dealer_tsumo=dealer_tsumo.non_dealer_pays,
        non_dealer_ron=non_dealer_ron.ron,
        non_dealer_tsumo_non_dealer=non_dealer_tsumo.non_dealer_pays,
        non_dealer_tsumo_dealer=non_dealer_tsumo.dealer_pays,
    )


def calculate_manual(han: int, fu: int, honba: int = 0,
                     rules: RuleConfig = DEFAULT_RULES) -> PaymentTable:
    """Calculator mode: payments straight from han and fu."""
    if han <= 0:
        raise NoHan()
    if fu <= 0:
        raise NoFu()
    if honba < 0:
        raise CalculatorError("honba cannot be negative")
    return calculate_payment_table(han, fu, honba, rules)


@dataclass
class ScoreResult:
    """Result of score calculation."""
    decomposition: Decomposition
    yaku: List[YakuMatch]
    fu_breakdown: FuBreakdown
    han: int
    fu: int
    base_points: int
    limit: Optional[LimitHand]
    payment: Payment
    payments: PaymentTable
    is_dealer: bool
    is_tsumo: bool
    honba: int

    @property
    def total_points(self) -> int:
        return self.payment.total

    @property
    def is_yakuman(self) -> bool:
        return self.limit == LimitHand.YAKUMAN

    @property
    def rank_name(self) -> str:
        if self.limit is not None:
            return f"{self.limit.label} {self.limit.kanji}"
        return f"{self.han} han {self.fu} fu"


def _count_dora(hand: Hand, win: WinContext) -> Tuple[int, int, int]:
    all_tiles = hand.all_tiles
    all_tiles_34 = tiles_to_34_array(all_tiles)
    dora_count = sum(all_tiles_34[d.index34] for d in win.dora_tiles)
    red_dora_count = sum(1 for t in all_tiles if t.is_red)
    # Ura-dora only for riichi
    uradora_count = 0
    if win.any_riichi:
        uradora_count = sum(all_tiles_34[d.index34] for d in win.uradora_tiles)
    return dora_count, uradora_count, red_dora_count


def evaluate_decomposition(
    decomposition: Decomposition,
    hand: Hand,
    win: WinContext,
    rules: RuleConfig = DEFAULT_RULES,
) -> Optional[ScoreResult]:
    """Score one reading. Returns None if it has no yaku."""
    dora_count, uradora_count, red_dora_count = _count_dora(hand, win)
    ctx = HandContext(
        decomposition=decomposition,
        win=win,
        rules=rules,
        all_tiles_34=tiles_to_34_array(hand.all_tiles),
        dora_count=dora_count,
        uradora_count=uradora_count,
        red_dora_count=red_dora_count,
    )
    yaku_list = detect_all_yaku(ctx)
    if not has_yaku(yaku_list):
        logger.debug("no yaku: %s", decomposition.describe())
        return None

    han_val = total_han(yaku_list)
    # Without kazoe yakuman, ordinary yaku stop at sanbaiman
    points_han = han_val
    if not rules.kazoe_yakuman and not any(m.yaku.is_yakuman for m in yaku_list):
        points_han = min(han_val, 12)
    is_pinfu = any(m.yaku == Yaku.PINFU for m in yaku_list)
    fu_breakdown = calculate_fu(decomposition, win, rules, is_pinfu)
    fu_val = fu_breakdown.total

    return ScoreResult(
        decomposition=decomposition,
        yaku=yaku_list,
        fu_breakdown=fu_breakdown,
        han=han_val,
        fu=fu_val,
        base_points=calculate_base_points(points_han, fu_val, rules),
        limit=get_limit_hand(points_han, fu_val, rules),
        payment=calculate_payment(points_han, fu_val, win.is_dealer, win.is_tsumo,
                                  win.honba, rules),
        payments=calculate_payment_table(points_han, fu_val, win.honba, rules),
        is_dealer=win.is_dealer,
        is_tsumo=win.is_tsumo,
        honba=win.honba,
    )


def _rank(result: ScoreResult) -> Tuple[int, int, int]:
    # Points decide; han then fu only break ties between equal payments
    return (result.total_points, result.han, result.fu)


def calculate_score(hand: Hand, win: WinContext,
                    rules: RuleConfig = DEFAULT_RULES) -> ScoreResult:
    """Calculate the best score for a winning hand.

    Raises:
        InvalidContext: the win flags contradict each other or the hand
        NoValidDecomposition: the tiles do not form a winning shape
        NoApplicableYaku: every reading of the hand lacks a yaku
    """
    win.validate(hand.has_kan, hand.is_menzen)

    decompositions = decompose_hand(hand)
    if not decompositions:
        raise NoValidDecomposition(repr(hand))

    best_result = None
    for decomposition in decompositions:
        result = evaluate_decomposition(decomposition, hand, win, rules)
        if result and (best_result is None or _rank(result) > _rank(best_result)):
            best_result = result

    if best_result is None:
        raise NoApplicableYaku(repr(hand))

    logger.debug("selected %s: %d han %d fu, %d points",
                 best_result.decomposition.describe(), best_result.han,
                 best_result.fu, best_result.total_points)
    return best_result
