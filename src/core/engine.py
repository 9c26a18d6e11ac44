"""Core engine loop & orchestration.

Separates concerns:
- Engine: sets up the window, GL state, event translation and main loop.
- Scene: holds the entities and behaviors and their update/draw logic.
- FrameScheduler: fixed per-frame ordering (clock, behaviors, player, redraw).

Uses the legacy fixed-function pipeline with a 2D orthographic projection.
"""

from __future__ import annotations

import logging
from typing import Optional

import pygame

from config import CLEAR_COLOR, FPS, FULLSCREEN, HEIGHT, VSYNC, WIDTH, WINDOW_TITLE
from behaviors import DanceAttribute
from core.clock import Clock
from core.renderer import GLRenderer
from core.scheduler import FrameScheduler
from core.transforms import screen_to_world
from world.player import Direction
from world.playground import PlaygroundScene

logger = logging.getLogger(__name__)

MOVE_KEYS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}

DANCE_KEYS = {
    pygame.K_1: DanceAttribute.SPLIT_ANGLE,
    pygame.K_2: DanceAttribute.DEPTH,
    pygame.K_3: DanceAttribute.LENGTH,
    pygame.K_4: DanceAttribute.RANDOMNESS,
}


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(
        self,
        *,
        width: int = WIDTH,
        height: int = HEIGHT,
        fps: int = FPS,
        seed: Optional[int] = None,
        tree_count: Optional[int] = None,
    ):
        pygame.init()
        pygame.display.gl_set_attribute(pygame.GL_MULTISAMPLEBUFFERS, 1)
        pygame.display.gl_set_attribute(pygame.GL_MULTISAMPLESAMPLES, 4)
        pygame.display.set_caption(WINDOW_TITLE)
        flags = pygame.DOUBLEBUF | pygame.OPENGL
        if FULLSCREEN:
            flags |= pygame.FULLSCREEN
        try:
            # vsync: 1 to enable, 0 to disable
            pygame.display.set_mode((width, height), flags, vsync=(1 if VSYNC else 0))
        except (TypeError, pygame.error):
            # Older pygame builds reject the vsync kwarg, or vsync is
            # unavailable on this driver; retry without it.
            logger.warning("vsync unavailable, falling back to default swap interval")
            pygame.display.set_mode((width, height), flags)
        self.width = width
        self.height = height
        self.fps = fps
        self.frame_limiter = pygame.time.Clock()

        self.renderer = GLRenderer(width, height, CLEAR_COLOR)
        self.renderer.setup()

        scene_kwargs = {"width": width, "height": height}
        if seed is not None:
            scene_kwargs["seed"] = seed
        if tree_count is not None:
            scene_kwargs["tree_count"] = tree_count
        self.scene = PlaygroundScene(**scene_kwargs)

        self.clock = Clock()
        self.scheduler = FrameScheduler(self.clock, self.scene, redraw=self.render)
        logger.info("Engine initialized (%dx%d @ %d fps)", width, height, fps)

    def _to_world(self, pos):
        return screen_to_world(pos[0], pos[1], self.width, self.height)

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key in MOVE_KEYS:
                    self.scene.on_key_down(MOVE_KEYS[event.key])
                elif event.key in DANCE_KEYS:
                    self.scene.toggle_dance(DANCE_KEYS[event.key])
                elif event.key == pygame.K_p:
                    self.scene.toggle_paths()
                elif event.key == pygame.K_r:
                    self.scene.reverse_waves()
            elif event.type == pygame.KEYUP and event.key in MOVE_KEYS:
                self.scene.on_key_up(MOVE_KEYS[event.key])
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.scene.on_click(self._to_world(event.pos))
            elif event.type == pygame.MOUSEMOTION:
                self.scene.on_pointer_move(self._to_world(event.pos))
        return True

    # ------------------------------------------------------------------
    def render(self):  # pragma: no cover - visual
        self.renderer.begin_frame()
        self.scene.draw(self.renderer)
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self):  # pragma: no cover - visual
        running = True
        while running:
            # Without vsync the limiter is the only thing capping the frame rate
            self.frame_limiter.tick(self.fps)
            running = self.handle_events()
            if not running:
                break
            self.scheduler.run_frame()
        logger.info("Shutting down after %d frames", self.clock.frames)
        pygame.quit()
