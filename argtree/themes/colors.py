# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color constants and the Rich theme used by Argtree's console output.

`OneColors` holds hex values from the One Dark palette, with `_b` suffixed
variants for bold text. They are plain strings so they can be dropped straight
into Rich markup:

    console.print(f"[{OneColors.DARK_RED}]❌ Unknown command[/]")

`get_argtree_theme()` maps the semantic style names used by the help renderer
(`usage`, `command`, `option`, ...) onto that palette.
"""
from rich.style import Style
from rich.theme import Theme


class OneColors:
    """One Dark palette."""

    BLACK = "#282C34"
    GUTTER_GREY = "#4B5263"
    COMMENT_GREY = "#5C6370"
    WHITE = "#ABB2BF"
    DARK_RED = "#BE5046"
    LIGHT_RED = "#E06C75"
    DARK_YELLOW = "#D19A66"
    LIGHT_YELLOW = "#E5C07B"
    GREEN = "#98C379"
    CYAN = "#56B6C2"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"

    DARK_RED_b = f"bold {DARK_RED}"
    LIGHT_YELLOW_b = f"bold {LIGHT_YELLOW}"
    GREEN_b = f"bold {GREEN}"
    CYAN_b = f"bold {CYAN}"
    BLUE_b = f"bold {BLUE}"
    MAGENTA_b = f"bold {MAGENTA}"


def get_argtree_theme() -> Theme:
    return Theme(
        {
            "usage": Style.parse(OneColors.BLUE_b),
            "command": Style.parse(OneColors.CYAN_b),
            "alias": Style.parse(OneColors.CYAN),
            "option": Style.parse(OneColors.MAGENTA),
            "choice": Style.parse(OneColors.LIGHT_YELLOW),
            "description": Style.parse(OneColors.WHITE),
            "muted": Style.parse(OneColors.COMMENT_GREY),
            "version": Style.parse(OneColors.GREEN_b),
            "error": Style.parse(OneColors.DARK_RED_b),
            "warning": Style.parse(OneColors.LIGHT_YELLOW_b),
        }
    )
