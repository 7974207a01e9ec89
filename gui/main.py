"""Pygame front-end: a resizable window that redraws the landscape every frame."""
from __future__ import annotations

import argparse
import logging
from typing import Optional, Tuple

import pygame

from config import LandscapeConfig
from render.compositor import render_frame
from render.surfaces import PygameSurface
from terrain.scene import Scene, initialize_from_config, on_resize

logger = logging.getLogger(__name__)


class LandscapeGUI:
    """Window host for one scene.

    Resize events are only queued while events are pumped; the newest
    size is applied in :meth:`apply_pending_resize`, between frames.
    """

    def __init__(self, config: Optional[LandscapeConfig] = None,
                 scene: Optional[Scene] = None) -> None:
        pygame.init()
        self.config = config or LandscapeConfig()
        self.clock = pygame.time.Clock()
        self.fps = self.config.fps

        self.scene = scene or initialize_from_config(self.config)
        self.screen = pygame.display.set_mode(self.scene.viewport, pygame.RESIZABLE)
        pygame.display.set_caption("Landscape")
        self.surface = PygameSurface(self.screen)

        self.pending_size: Optional[Tuple[int, int]] = None
        self.running = True
        self.frames = 0

    def handle_key(self, ev: pygame.event.Event) -> None:
        if ev.key in (pygame.K_ESCAPE, pygame.K_q):
            self.running = False

    def handle_events(self) -> None:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                self.running = False
            elif ev.type == pygame.VIDEORESIZE:
                self.pending_size = (max(1, ev.w), max(1, ev.h))
            elif ev.type == pygame.KEYDOWN:
                self.handle_key(ev)

    def apply_pending_resize(self) -> None:
        if self.pending_size is None:
            return
        size, self.pending_size = self.pending_size, None
        if size == self.scene.viewport:
            return
        self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        self.surface = PygameSurface(self.screen)
        self.scene = on_resize(self.scene, size)
        logger.info("window resized to %dx%d", *size)

    def draw(self) -> None:
        # Edges not covered by geometry show the frontmost layer's color.
        w, h = self.screen.get_size()
        self.surface.fill_rect((0, 0, w, h), self.scene.frontmost_color.to_rgb())
        render_frame(self.scene, self.surface)
        self.frames += 1

    def step(self) -> None:
        """One loop iteration: events, resize, draw."""
        self.handle_events()
        self.apply_pending_resize()
        if self.running:
            self.draw()
            pygame.display.flip()

    def run(self, max_frames: Optional[int] = None) -> None:
        logger.info("starting window loop at %d fps: %s", self.fps, self.scene.summary())
        while self.running:
            self.step()
            if max_frames is not None and self.frames >= max_frames:
                break
            self.clock.tick(self.fps)
        pygame.quit()


def main(argv: Optional[list[str]] = None) -> None:
    from cli import add_scene_args, build_config

    parser = argparse.ArgumentParser(description="Procedural landscape window")
    add_scene_args(parser)
    parser.add_argument("--fps", type=int, default=None)
    args = parser.parse_args(argv)
    cfg = build_config(args).with_overrides(fps=args.fps)
    LandscapeGUI(config=cfg).run()


if __name__ == "__main__":
    main()
