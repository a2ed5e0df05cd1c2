#
# PROJECT: wireframe-projector
# MODULE: wireframe_projector/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math

from .canvas import Canvas


def clip_line(p1, p2, x_max, y_max):
    """
    Liang-Barsky clip of the segment p1-p2 to [0, x_max] x [0, y_max].

    Returns the clipped (p1, p2), or None when no part of the segment lies
    inside the rectangle.
    """
    x1, y1 = p1
    dx = p2[0] - x1
    dy = p2[1] - y1
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x1), (dx, x_max - x1), (-dy, y1), (dy, y_max - y1)):
        if p == 0:
            if q < 0:
                return None   # parallel to this edge and outside it
            continue
        t = q / p
        if p < 0:
            if t > t1:
                return None
            t0 = max(t0, t)
        else:
            if t < t0:
                return None
            t1 = min(t1, t)
    return (x1 + t0 * dx, y1 + t0 * dy), (x1 + t1 * dx, y1 + t1 * dy)


def draw_line_dda(canvas: Canvas, p1, p2):
    """Draws a line between two (x, y) pixel points with the DDA algorithm."""
    if not all(math.isfinite(c) for c in (*p1, *p2)):
        # Vertices at or behind the camera plane project to inf/nan.
        return
    # Near-plane vertices project millions of pixels away; only step the visible part.
    clipped = clip_line(p1, p2, canvas.w - 1, canvas.h - 1)
    if clipped is None:
        return
    p1, p2 = clipped
    x1, y1 = int(p1[0]), int(p1[1])
    x2, y2 = int(p2[0]), int(p2[1])

    dx = x2 - x1
    dy = y2 - y1
    if dx == 0 and dy == 0:
        canvas.set_pixel(x1, y1)
        return

    step = abs(dx) if abs(dx) > abs(dy) else abs(dy)
    x_inc = dx / step
    y_inc = dy / step

    cx, cy = float(x1), float(y1)
    for _ in range(step + 1):
        canvas.set_pixel(int(cx), int(cy))
        cx += x_inc; cy += y_inc


def draw_polyline(canvas: Canvas, points, offset=(0, 0)):
    """Strokes consecutive segments of a polyline, shifted by offset."""
    ox, oy = offset
    shifted = [(x + ox, y + oy) for x, y in points]
    for a, b in zip(shifted, shifted[1:]):
        draw_line_dda(canvas, a, b)
