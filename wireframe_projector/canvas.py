#
# PROJECT: wireframe-projector
# MODULE: wireframe_projector/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

class Canvas:
    """
    Monochrome pixel canvas packed into 2x4 terminal cells.

    Pixel (0, 0) is the top-left corner; each cell keeps an 8-bit mask of
    which of its pixels are lit.
    """
    __slots__ = ['w', 'h', 'grid']

    # Braille dot mapping for 2x4 grid
    #  1 4
    #  2 5
    #  3 6
    #  7 8
    # 0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80
    BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]

    def __init__(self, w, h):
        self.w, self.h = w, h
        self.grid = [[0] * (w // 2 + 1) for _ in range(h // 4 + 1)]

    def set_pixel(self, x, y):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return
        # Bit index 0-3: left column rows 0-3; 4-7: right column
        self.grid[y >> 2][x >> 1] |= (1 << ((y & 3) + (x & 1) * 4))

    def rows(self, use_braille=True):
        """Yield one string per terminal row."""
        render = render_cell_braille if use_braille else render_cell_ascii
        for row in self.grid:
            yield ''.join(render(mask) for mask in row)


def render_cell_ascii(mask: int) -> str:
    """Renders a 2x4 cell mask as an ASCII character by pixel density."""
    if not mask:
        return ' '
    density = bin(mask).count('1')
    chars = " .:-=+*#%@"
    return chars[density] if density < len(chars) else '@'


def render_cell_braille(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not mask:
        return ' '
    b = sum(Canvas.BRAILLE_REMAP[i] for i in range(8) if mask & (1 << i))
    return chr(0x2800 + b)
