"""Tile display formatting with colors for terminal output."""

from typing import Iterable

from rich.text import Text

from mahc.core.meld import Meld
from mahc.core.tile import Tile, TileSuit, TILE_KANJI_34


# Color schemes
SUIT_COLORS = {
    TileSuit.MAN: "red",
    TileSuit.PIN: "blue",
    TileSuit.SOU: "green",
    TileSuit.WIND: "yellow",
    TileSuit.DRAGON: "yellow",
}


def tile_to_rich_text(tile: Tile, highlight: bool = False) -> Text:
    """Convert a tile to a Rich Text object with appropriate colors."""
    if tile.is_red:
        name = tile.name
        style = "bold red on white"
    else:
        name = TILE_KANJI_34[tile.index34]
        color = SUIT_COLORS[tile.suit]
        style = f"bold {color}"
        if highlight:
            style += " on white"

    return Text(f"[{name}]", style=style)


def tiles_to_rich_text(tiles: Iterable[Tile], separator: str = " ",
                       highlight: Tile = None) -> Text:
    """Convert a list of tiles to Rich Text, optionally highlighting one tile kind once."""
    result = Text()
    pending = highlight
    for i, tile in enumerate(tiles):
        if i > 0:
            result.append(separator)
        lit = pending is not None and tile == pending
        if lit:
            pending = None
        result.append_text(tile_to_rich_text(tile, highlight=lit))
    return result


def meld_to_rich_text(meld: Meld, win_tile: Tile = None) -> Text:
    """A meld as tiles; open melds are dimmed with a trailing marker."""
    text = tiles_to_rich_text(meld.tiles, separator="", highlight=win_tile)
    if meld.is_open:
        text.stylize("dim")
        text.append("o", style="dim")
    return text
