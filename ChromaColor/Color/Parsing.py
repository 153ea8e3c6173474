"""
Parsing of textual color encodings into 8-bit RGB triples.

Three encodings are understood:
    - hex codes: "#rgb", "#rrggbb", "rgb" or "rrggbb", case-insensitive
    - X11/CSS color names, case-insensitive, e.g. "yellowgreen"
    - the CSS function syntax "rgb(r, g, b)" with integer channels

Every failure raises RGBParseError, whose kind says what went wrong.
"""
import re
import string

from matplotlib.colors import CSS4_COLORS

from ChromaColor.Utils.CustomTypes import RGBParseErrorKind

RGBTriple = tuple[int, int, int]

HEX_DIGITS = set(string.hexdigits)

RGB_FUNCTION_PATTERN = re.compile(r"^\s*rgb\s*\(\s*([+-]?\d+)\s*,\s*([+-]?\d+)\s*,\s*([+-]?\d+)\s*\)\s*$",
                                  re.IGNORECASE)


class RGBParseError(ValueError):
    """Raised when a string does not describe a valid RGB color."""

    def __init__(self, kind: RGBParseErrorKind, text: str):
        self.kind = kind
        self.text = text
        super().__init__(f"{kind.name}: cannot parse {text!r} as an RGB color")


def ParseHexCode(hex_code: str) -> RGBTriple:
    """
    Parse a hex code. "#rgb" is shorthand for "#rrggbb" and the leading "#" is optional.

    :param hex_code: the hex string
    :raises RGBParseError: INVALID_HEX_SYNTAX if the length is not 3 or 6 or a character is not hex
    """
    digits = hex_code[1:] if hex_code.startswith("#") else hex_code
    if len(digits) not in (3, 6) or not all(c in HEX_DIGITS for c in digits):
        raise RGBParseError(RGBParseErrorKind.INVALID_HEX_SYNTAX, hex_code)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    r, g, b = (int(digits[i:i + 2], 16) for i in range(0, 6, 2))
    return r, g, b


def ParseColorName(name: str) -> RGBTriple:
    """
    Look up an X11/CSS color name, ignoring case.

    :param name: the color name, e.g. "rebeccapurple"
    :raises RGBParseError: INVALID_X11_NAME if the name is unknown
    """
    code = CSS4_COLORS.get(name.strip().lower())
    if code is None:
        raise RGBParseError(RGBParseErrorKind.INVALID_X11_NAME, name)
    return ParseHexCode(code)


def ParseRGBFunction(text: str) -> RGBTriple:
    """
    Parse the CSS function syntax "rgb(r, g, b)".

    :param text: the function string
    :raises RGBParseError: INVALID_FUNC_SYNTAX if it is not of that form, OUT_OF_RANGE if a channel is
        outside 0-255
    """
    match = RGB_FUNCTION_PATTERN.match(text)
    if match is None:
        raise RGBParseError(RGBParseErrorKind.INVALID_FUNC_SYNTAX, text)
    channels = [int(group) for group in match.groups()]
    if not all(0 <= c <= 255 for c in channels):
        raise RGBParseError(RGBParseErrorKind.OUT_OF_RANGE, text)
    r, g, b = channels
    return r, g, b


def ParseColor(text: str) -> RGBTriple:
    """
    Parse any of the supported encodings, picking the parser from the shape of the text.

    :raises RGBParseError: with the kind of the parser that was tried
    """
    stripped = text.strip()
    if stripped.lower().startswith("rgb"):
        return ParseRGBFunction(stripped)
    if stripped.startswith("#"):
        return ParseHexCode(stripped)
    if stripped.lower() in CSS4_COLORS:
        return ParseColorName(stripped)
    if len(stripped) in (3, 6) and all(c in HEX_DIGITS for c in stripped):
        return ParseHexCode(stripped)
    return ParseColorName(stripped)
