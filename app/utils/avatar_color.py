"""
Couleurs d'avatar déterministes dérivées de l'account_id.

Le fond est une teinte pastel stable pour un même identifiant; la couleur du
texte (blanc ou noir) est celle qui offre le meilleur contraste WCAG 2.1.
"""

import math

WHITE = "#ffffff"
BLACK = "#000000"


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def hash_string(s: str) -> int:
    """Hash 32 bits (h * 31 + c) sur les unités UTF-16 de la chaîne, en valeur absolue."""
    h = 0
    data = (s or "").encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        code = data[i] | (data[i + 1] << 8)
        h = _to_int32(h * 31 + code)
    return abs(h)


def hash_to_hsl(h: int) -> tuple[int, int, int]:
    # Saturation 40-60%, luminosité 70-85%: tons pastel lisibles
    return h % 360, 40 + (h % 21), 70 + (h % 16)


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    s_norm = s / 100
    l_norm = l / 100

    c = (1 - abs(2 * l_norm - 1)) * s_norm
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l_norm - c / 2

    if 0 <= h < 60:
        r, g, b = c, x, 0.0
    elif 60 <= h < 120:
        r, g, b = x, c, 0.0
    elif 120 <= h < 180:
        r, g, b = 0.0, c, x
    elif 180 <= h < 240:
        r, g, b = 0.0, x, c
    elif 240 <= h < 300:
        r, g, b = x, 0.0, c
    elif 300 <= h < 360:
        r, g, b = c, 0.0, x
    else:
        r, g, b = 0.0, 0.0, 0.0

    return (
        _round_half_up((r + m) * 255),
        _round_half_up((g + m) * 255),
        _round_half_up((b + m) * 255),
    )


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02x}{g:02x}{b:02x}"


def get_relative_luminance(r: int, g: int, b: int) -> float:
    def _linear(channel: int) -> float:
        srgb = channel / 255
        if srgb <= 0.03928:
            return srgb / 12.92
        return ((srgb + 0.055) / 1.055) ** 2.4

    return 0.2126 * _linear(r) + 0.7152 * _linear(g) + 0.0722 * _linear(b)


def get_contrast_ratio(l1: float, l2: float) -> float:
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def get_text_color(r: int, g: int, b: int) -> str:
    """Blanc ou noir selon le contraste le plus élevé avec le fond (égalité: blanc)."""
    bg_luminance = get_relative_luminance(r, g, b)
    white_contrast = get_contrast_ratio(bg_luminance, 1.0)
    black_contrast = get_contrast_ratio(bg_luminance, 0.0)
    return WHITE if white_contrast >= black_contrast else BLACK


def get_avatar_colors(account_id: str) -> dict:
    """Couleurs d'avatar pour un account_id.

    >>> get_avatar_colors("")
    {'background_color': '#d19494', 'text_color': '#000000'}
    """
    h, s, l = hash_to_hsl(hash_string(account_id))
    r, g, b = hsl_to_rgb(h, s, l)
    return {
        "background_color": rgb_to_hex(r, g, b),
        "text_color": get_text_color(r, g, b),
    }
