"""Colour theme: HSL to hex conversion and the identicon palette."""

from models import Config


# Lightness correctors per hue bucket (red, yellow, green, cyan, blue,
# magenta, red again) to even out perceived brightness.
CORRECTORS = (0.55, 0.5, 0.5, 0.46, 0.6, 0.55, 0.55)


def dec_to_hex(v: int) -> str:
    if v < 0:
        return "00"
    if v > 255:
        return "ff"
    return f"{v:02x}"


def hue_to_rgb(m1: float, m2: float, h: float) -> str:
    if h < 0:
        h += 6
    elif h > 6:
        h -= 6

    if h < 1:
        rgb = m1 + (m2 - m1) * h
    elif h < 3:
        rgb = m2
    elif h < 4:
        rgb = m1 + (m2 - m1) * (4 - h)
    else:
        rgb = m1
    return dec_to_hex(int(255 * rgb))


def hsl(h: float, s: float, l: float) -> str:
    """Convert HSL (all 0..1) to a ``#rrggbb`` string."""
    if s == 0:
        part = dec_to_hex(int(l * 255))
        return "#" + part * 3

    if l <= 0.5:
        m2 = l * (s + 1)
    else:
        m2 = l + s - l * s
    m1 = l * 2 - m2
    return "#" + hue_to_rgb(m1, m2, h * 6 + 2) + hue_to_rgb(m1, m2, h * 6) + hue_to_rgb(m1, m2, h * 6 - 2)


def corrected_hsl(h: float, s: float, l: float) -> str:
    """Like :func:`hsl`, with lightness adjusted for the hue's perceived brightness."""
    corrector = CORRECTORS[int(h * 6 + 0.5)]
    if l < 0.5:
        l = l * corrector * 2
    else:
        l = corrector + (l - 0.5) * (1 - corrector) * 2
    return hsl(h, s, l)


def color_theme(hue: float, config: Config) -> list[str]:
    """Candidate colours for an icon of the given *hue*.

    Order is fixed and referenced by index elsewhere:
    dark gray, mid colour, light gray, light colour, dark colour.
    """
    return [
        hsl(0, 0, config.grayscale_lightness(0)),
        corrected_hsl(hue, config.saturation, config.color_lightness(0.5)),
        hsl(0, 0, config.grayscale_lightness(1)),
        corrected_hsl(hue, config.saturation, config.color_lightness(1)),
        corrected_hsl(hue, config.saturation, config.color_lightness(0)),
    ]
