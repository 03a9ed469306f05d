#!/usr/bin/env python3
"""Riichi Mahjong hand calculator - Terminal CLI"""

import argparse
import logging
import sys

from rich.console import Console

from mahc.core.context import WinContext, Wind, dora_from_indicators
from mahc.core.errors import HandError
from mahc.core.hand import Hand
from mahc.core.tile import parse_tile
from mahc.log import setup_logging
from mahc.rules.config import RuleConfig
from mahc.rules.scoring import calculate_manual, calculate_score
from mahc.ui.score_layout import format_payment_table, render_error, render_score_result

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mahc",
        description="riichi mahjong calculator tool",
    )
    parser.add_argument("--tiles", nargs="+", metavar="GROUP",
                        help="hand tiles as groups, e.g. rrrd EEEw 234p 234p 11p (suffix o = open)")
    parser.add_argument("-w", "--win", help="winning tile, e.g. 1p")
    parser.add_argument("-d", "--dora", nargs="+", default=[], metavar="TILE",
                        help="dora tiles")
    parser.add_argument("--indicators", action="store_true",
                        help="treat --dora and --ura tiles as indicators")
    parser.add_argument("--ura", nargs="+", default=[], metavar="TILE",
                        help="ura dora tiles (riichi only)")
    parser.add_argument("-s", "--seat", default="e", help="seat wind (default: e)")
    parser.add_argument("-p", "--prev", default="e", help="prevalent wind (default: e)")
    parser.add_argument("-t", "--tsumo", action="store_true", help="is tsumo")
    parser.add_argument("-r", "--riichi", action="store_true", help="is riichi")
    parser.add_argument("--double-riichi", action="store_true", help="is double riichi")
    parser.add_argument("--ippatsu", action="store_true", help="is ippatsu")
    parser.add_argument("--haitei", action="store_true", help="won on the last tile")
    parser.add_argument("--rinshan", action="store_true", help="won on a kan replacement draw")
    parser.add_argument("--chankan", action="store_true", help="robbed a kan")
    parser.add_argument("--tenhou", action="store_true", help="dealer's first draw")
    parser.add_argument("--chiihou", action="store_true", help="non-dealer's first draw")
    parser.add_argument("-b", "--ba", type=int, default=0, help="honba count")
    parser.add_argument("-m", "--manual", type=int, nargs=2, metavar=("HAN", "FU"),
                        help="calculator mode")
    parser.add_argument("--kiriage", action="store_true",
                        help="round 4 han 30 fu and 3 han 60 fu up to mangan")
    parser.add_argument("--no-kuitan", action="store_true", help="no tanyao for open hands")
    parser.add_argument("--no-kazoe", action="store_true",
                        help="cap ordinary yaku at sanbaiman")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def build_rules(args) -> RuleConfig:
    return RuleConfig(
        kuitan=not args.no_kuitan,
        kiriage_mangan=args.kiriage,
        kazoe_yakuman=not args.no_kazoe,
    )


def build_context(args) -> WinContext:
    dora = tuple(parse_tile(t) for t in args.dora)
    ura = tuple(parse_tile(t) for t in args.ura)
    if args.indicators:
        dora = dora_from_indicators(dora)
        ura = dora_from_indicators(ura)
    return WinContext(
        seat_wind=Wind.parse(args.seat),
        round_wind=Wind.parse(args.prev),
        is_tsumo=args.tsumo,
        is_riichi=args.riichi,
        is_double_riichi=args.double_riichi,
        is_ippatsu=args.ippatsu,
        is_haitei=args.haitei,
        is_rinshan=args.rinshan,
        is_chankan=args.chankan,
        is_tenhou=args.tenhou,
        is_chiihou=args.chiihou,
        dora_tiles=dora,
        uradora_tiles=ura,
        honba=args.ba,
    )


def parse_calculator(args) -> str:
    """Calculator mode: han and fu straight to the payment table."""
    han, fu = args.manual
    table = calculate_manual(han, fu, args.ba, build_rules(args))
    return format_payment_table(table)


def parse_hand(args):
    """Hand mode: score the tiles."""
    hand = Hand.from_notation(args.tiles, args.win)
    return calculate_score(hand, build_context(args), build_rules(args))


def run(argv=None, console: Console = None) -> int:
    """Run the CLI. Returns the process exit code."""
    console = console or Console()
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.manual is None and (not args.tiles or not args.win):
        parser.error("either --manual HAN FU or --tiles with --win is required")

    try:
        if args.manual is not None:
            console.print(parse_calculator(args))
        else:
            render_score_result(console, parse_hand(args))
    except HandError as e:
        logger.debug("rejected: %r", e)
        render_error(console, e)
        return 1
    return 0


def main():
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
