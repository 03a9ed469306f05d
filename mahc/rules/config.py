"""Rule variations the scorer understands."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RuleConfig:
    """Table rules that change how a hand is valued.

    Attributes:
        kuitan: Tanyao counts for open hands (喰いタン)
        kiriage_mangan: 4 han 30 fu and 3 han 60 fu are rounded up to mangan (切り上げ満貫)
        kazoe_yakuman: 13+ han from ordinary yaku is yakuman; otherwise capped at sanbaiman
        double_wind_pair_fu: Fu for a pair that is both seat and round wind (2 or 4)
    """
    kuitan: bool = True
    kiriage_mangan: bool = False
    kazoe_yakuman: bool = True
    double_wind_pair_fu: int = 2

    def __post_init__(self):
        if self.double_wind_pair_fu not in (2, 4):
            raise ValueError(f"double_wind_pair_fu must be 2 or 4, got {self.double_wind_pair_fu}")


DEFAULT_RULES = RuleConfig()
