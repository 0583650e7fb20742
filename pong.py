"""
Pong: player paddle (W/S) against a bot paddle.

Usage:
- python pong.py                  # first to 5
- python pong.py --seed 42        # reproducible bot and serves
- python pong.py --max-score 11 --fps 120
"""
import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pygame

from pong_entities import WIDTH, HEIGHT, MAX_SCORE
from pong_scenes import TITLE, build_controller

logger = logging.getLogger(__name__)

FONT_PATH = "assets/Minecraft.ttf"
FPS = 60
BG = (0, 0, 0)

KEYMAP = {
    "up": pygame.K_w,
    "down": pygame.K_s,
    "start": pygame.K_SPACE,
    "quit": pygame.K_q,
}


@dataclass
class Config:
    seed: Optional[int] = None
    max_score: int = MAX_SCORE
    fps: int = FPS
    font_path: str = FONT_PATH

    def __post_init__(self):
        if self.max_score < 1:
            raise ValueError(f"max_score must be at least 1, got {self.max_score}")
        if self.fps < 1:
            raise ValueError(f"fps must be at least 1, got {self.fps}")


class KeyboardInput:
    def __init__(self, keymap=KEYMAP):
        self.keymap = keymap
        self.closed = False
        self.keys = None

    def poll(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.closed = True
        self.keys = pygame.key.get_pressed()

    def is_held(self, action):
        if self.keys is None:
            return False
        return bool(self.keys[self.keymap[action]])

    def close_requested(self):
        return self.closed


def load_font(path, size):
    try:
        return pygame.font.Font(path, size)
    except (OSError, pygame.error) as e:
        logger.warning("Error loading font %s: %s", path, e)
        return None


class PygameRenderer:
    def __init__(self, surface, font_path=FONT_PATH):
        self.surface = surface
        self.font_path = font_path
        self.fonts = {}
        self.font_ok = load_font(font_path, 32) is not None

    def font(self, size):
        if size not in self.fonts:
            font = load_font(self.font_path, size) if self.font_ok else None
            # Default pygame font keeps text readable when the asset is missing
            self.fonts[size] = font or pygame.font.Font(None, size)
        return self.fonts[size]

    def clear(self):
        self.surface.fill(BG)

    def draw_rect(self, rect, color):
        pygame.draw.rect(self.surface, color, rect)

    def draw_circle(self, center, radius, color):
        pygame.draw.circle(self.surface, color, (round(center[0]), round(center[1])), radius)

    def draw_text(self, text, pos, size, color, centered=False):
        surf = self.font(size).render(text, True, color)
        if centered:
            rect = surf.get_rect(center=(round(pos[0]), round(pos[1])))
        else:
            rect = surf.get_rect(topleft=(round(pos[0]), round(pos[1])))
        self.surface.blit(surf, rect)
        return rect

    def present(self):
        pygame.display.flip()


def game(cfg: Config):
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()

    rng = np.random.default_rng(cfg.seed)
    keyboard = KeyboardInput()
    renderer = PygameRenderer(screen, cfg.font_path)
    controller = build_controller(keyboard, rng, max_score=cfg.max_score)

    try:
        while controller.running:
            dt = clock.tick(cfg.fps) / 1000.0
            keyboard.poll()
            controller.update(dt)

            renderer.clear()
            controller.render(renderer)
            renderer.present()
    finally:
        pygame.quit()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Pong against a bot paddle.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the bot and serve directions")
    parser.add_argument("--max-score", type=int, default=MAX_SCORE)
    parser.add_argument("--fps", type=int, default=FPS)
    parser.add_argument("--font", default=FONT_PATH, help="path to a .ttf font")
    parser.add_argument("--verbose", action="store_true", help="log scene transitions")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        cfg = Config(seed=args.seed, max_score=args.max_score, fps=args.fps, font_path=args.font)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 2
    game(cfg)
    return 0


if __name__ == "__main__":
    sys.exit(main())
