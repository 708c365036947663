"""Hex encoding of RGB triples.

The canonical form is six lowercase hex digits with no leading '#'; consumers
add the '#' when they write CSS.
"""


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Encode an RGB triple as 'rrggbb'.

    Channels come from clamped bucket means, so an out-of-range value is a
    programming error and fails loudly.
    """
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise AssertionError(f'channel value out of range: {(r, g, b)}')
    return f'{r:02x}{g:02x}{b:02x}'


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Decode 'rrggbb', '#rrggbb' or the '#rgb' shorthand."""
    h = value.strip().lstrip('#')
    if len(h) == 3:
        h = ''.join(c * 2 for c in h)
    if len(h) != 6:
        raise ValueError(f'not a hex colour: {value!r}')
    try:
        return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))
    except ValueError:
        raise ValueError(f'not a hex colour: {value!r}') from None
