#
# PROJECT: wireframe-projector
# MODULE: wireframe_projector/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses
import logging
import math
import time

from .camera import CameraRig
from .canvas import Canvas
from .config import RenderConfig
from .mesh import Mesh
from .projector import Projector
from .rasterizer import draw_polyline
from .renderer import Renderer

logger = logging.getLogger(__name__)

FRAME_INTERVAL = 0.05   # seconds between redraws


def demo_mesh(path=None, normalize=True) -> Mesh:
    """The mesh to show: an STL file, or the tilted unit cube."""
    if path:
        return Mesh.from_stl(path, normalize=normalize)
    quarter = math.pi / 4
    return Mesh.cube().rotate(quarter, quarter, quarter)


class DemoApp:
    """
    Interactive curses front end: keyboard input drives the camera rig, the
    frame loop spins the model and strokes the visible outlines.
    """

    def __init__(self, stdscr, mesh: Mesh, config: RenderConfig):
        self.stdscr = stdscr
        self.mesh = mesh
        self.config = config
        self.running = True

        curses.curs_set(0)
        stdscr.nodelay(True)

        self.camera = CameraRig(config.initial_camera(),
                                move_step=config.move_step,
                                turn_step=config.turn_step)
        self.renderer = None
        self.start_time = time.time()

        self.frame_count = 0
        self.fps = 0
        self.last_fps_time = self.start_time

        self.bindings = {
            ord('w'): self.camera.forward,
            ord('s'): self.camera.back,
            ord('a'): self.camera.left,
            ord('d'): self.camera.right,
            curses.KEY_LEFT: self.camera.turn_left,
            curses.KEY_RIGHT: self.camera.turn_right,
        }

    def handle_input(self):
        key = self.stdscr.getch()
        while key != -1:
            if key == ord('q'):
                self.running = False
            elif key == ord('b'):
                self.config.use_braille = not self.config.use_braille
            elif key in self.bindings:
                self.bindings[key]()
            key = self.stdscr.getch()

    def raster_size(self, tw, th):
        """Square raster edge in pixels for a tw x th cell terminal."""
        if self.config.resolution is not None:
            return self.config.resolution
        return max(1, min((tw - 1) * 2, (th - 2) * 4))

    def ensure_renderer(self, size):
        if self.renderer is None or self.renderer.projector.size != size:
            projector = Projector(size, self.config.fov)
            self.renderer = Renderer(projector, self.config.rotation_period)
            logger.info("raster resized: %r", projector)
        return self.renderer

    def draw_frame(self):
        th, tw = self.stdscr.getmaxyx()
        w = (tw - 1) * 2
        h = (th - 2) * 4
        if w <= 0 or h <= 0:
            return 0

        size = self.raster_size(tw, th)
        renderer = self.ensure_renderer(size)
        outlines = renderer.frame(self.mesh, self.camera.snapshot(),
                                  time.time() - self.start_time)

        canvas = Canvas(w, h)
        # centre the square raster on the terminal
        offset = ((w - size) / 2.0, (h - size) / 2.0)
        for outline in outlines:
            draw_polyline(canvas, outline, offset)

        self.stdscr.erase()
        for row, text in enumerate(canvas.rows(self.config.use_braille)):
            if row + 1 >= th:
                break
            try:
                self.stdscr.addstr(row + 1, 0, text[:tw - 1])
            except curses.error:
                pass
        return len(outlines)

    def draw_hud(self, visible, start):
        th, tw = self.stdscr.getmaxyx()

        self.frame_count += 1
        now = time.time()
        if now - self.last_fps_time >= 1.0:
            self.fps = self.frame_count
            self.frame_count = 0
            self.last_fps_time = now

        ms = (now - start) * 1000
        hdr = (f" F:{len(self.mesh)}"
               f" | VIS:{visible}"
               f" | FPS:{self.fps}"
               f" | {ms:.1f}ms"
               f" | [{'BRA' if self.config.use_braille else 'ASC'}] ")
        try:
            self.stdscr.addstr(0, 0, hdr.center(tw - 1, '='), curses.A_BOLD)
        except curses.error:
            pass

    def run(self):
        while self.running:
            start = time.time()
            self.handle_input()
            visible = self.draw_frame()
            self.draw_hud(visible, start)
            self.stdscr.refresh()

            elapsed = time.time() - start
            if elapsed < FRAME_INTERVAL:
                time.sleep(FRAME_INTERVAL - elapsed)


def main(stdscr, mesh, config):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, mesh, config)
    app.run()
