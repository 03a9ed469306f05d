"""Error taxonomy for hand input, context validation and scoring."""


class HandError(ValueError):
    """Base class for every error the calculator reports to the caller."""

    message = "Invalid hand"

    def __init__(self, detail: str = ""):
        self.detail = detail
        text = f"{self.message}: {detail}" if detail else self.message
        super().__init__(text)


# === Input ===

class InvalidTileToken(HandError):
    message = "Invalid tile token"


class InvalidSuit(HandError):
    message = "Invalid suit found"


class InvalidGroup(HandError):
    message = "Invalid group found"


class InvalidTileCount(HandError):
    message = "Invalid tile count"


class MissingWinningTile(HandError):
    message = "Winning tile is not in the concealed hand"


# === Context ===

class InvalidContext(HandError):
    message = "Invalid win context"


class DuplicateRiichi(InvalidContext):
    message = "Cannot riichi and double riichi simultaneously"


class IppatsuWithoutRiichi(InvalidContext):
    message = "Cannot ippatsu without riichi"


class ChankanTsumo(InvalidContext):
    message = "Cannot tsumo and chankan"


class RinshanWithoutTsumo(InvalidContext):
    message = "Cannot rinshan without tsumo"


class RinshanWithoutKan(InvalidContext):
    message = "Cannot rinshan without a kan"


class HaiteiRinshan(InvalidContext):
    message = "Cannot haitei and rinshan simultaneously"


class HaiteiChankan(InvalidContext):
    message = "Cannot haitei and chankan simultaneously"


class RinshanIppatsu(InvalidContext):
    message = "Cannot rinshan and ippatsu"


class DoubleRiichiHaiteiIppatsu(InvalidContext):
    message = "Cannot double riichi, ippatsu and haitei"


class DoubleRiichiHaiteiChankan(InvalidContext):
    message = "Cannot double riichi, ippatsu and chankan"



# === Scoring ===

class NoValidDecomposition(HandError):
    message = "Not a winning hand"


class NoApplicableYaku(HandError):
    message = "Valid shape but no yaku"


class UnsupportedYaku(HandError):
    message = "Yaku cannot be evaluated from a hand"


class CalculatorError(HandError):
    message = "Invalid calculator input"


class NoHan(CalculatorError):
    message = "No han provided"


class NoFu(CalculatorError):
    message = "No fu provided"
