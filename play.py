"""
Retro Snake на pygame.

Использование:
    python play.py                 # обычная игра
    python play.py --seed 42       # повторяемая еда
    python play.py --mute          # без звука

Управление: стрелки (или WASD), ESC - выход.
"""
import os
import sys
import logging
import argparse

import numpy as np
import pygame

from config import (WIDTH, HEIGHT, CELL_SIZE, CELL_COUNT, OFFSET, FPS, TITLE,
                    BACKGROUND, SNAKE, FOOD, TEXT_COLOR,
                    UP, DOWN, LEFT, RIGHT,
                    FOOD_TEXTURE, EAT_SOUND, WALL_SOUND,
                    LOG_LEVEL, LOG_FORMAT)
from game import Game, EVENT_EAT, EVENT_WALL
from grid import cell_to_pixel

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_w: UP,
    pygame.K_s: DOWN,
    pygame.K_a: LEFT,
    pygame.K_d: RIGHT,
}


def key_to_direction(key):
    """Клавиша -> направление (или None)"""
    return KEY_DIRECTIONS.get(key)


def load_texture(path):
    """Текстура еды. Нет файла - None (рисуем прямоугольник)"""
    if not os.path.exists(path):
        logger.warning("Texture not found: %s", path)
        return None
    image = pygame.image.load(path).convert_alpha()
    return pygame.transform.smoothscale(image, (CELL_SIZE, CELL_SIZE))


def load_sound(path):
    """Звук. Нет файла - None (молчим)"""
    if not os.path.exists(path):
        logger.warning("Sound not found: %s", path)
        return None
    return pygame.mixer.Sound(path)


class SnakeWindow:
    def __init__(self, seed=None, mute=False):
        pygame.init()

        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont('arial', 20)
        self.title_font = pygame.font.SysFont('arial', 40)

        self.food_texture = load_texture(FOOD_TEXTURE)

        self.sounds = {}
        if not mute:
            self._init_audio()

        self.game = Game(rng=np.random.default_rng(seed), start=self.now())

    def _init_audio(self):
        """Звуки еды и стены"""
        try:
            pygame.mixer.init()
        except pygame.error as e:
            logger.warning("Audio device unavailable, sound disabled: %s", e)
            return
        self.sounds = {
            EVENT_EAT: load_sound(EAT_SOUND),
            EVENT_WALL: load_sound(WALL_SOUND),
        }

    @staticmethod
    def now():
        """Секунды с запуска pygame"""
        return pygame.time.get_ticks() / 1000.0

    def play_sounds(self, events):
        for event in events:
            sound = self.sounds.get(event)
            if sound is not None:
                sound.play()

    def draw(self):
        self.screen.fill(BACKGROUND)

        # Рамка поля
        frame = pygame.Rect(OFFSET - 5, OFFSET - 5,
                            CELL_SIZE * CELL_COUNT + 10, CELL_SIZE * CELL_COUNT + 10)
        pygame.draw.rect(self.screen, SNAKE, frame, 5)

        title = self.title_font.render(TITLE, True, TEXT_COLOR)
        self.screen.blit(title, (OFFSET - 5, 20))

        # Еда
        fx, fy = cell_to_pixel(self.game.food.position)
        if self.food_texture is not None:
            self.screen.blit(self.food_texture, (fx, fy))
        else:
            rect = pygame.Rect(fx, fy, CELL_SIZE, CELL_SIZE)
            pygame.draw.rect(self.screen, FOOD, rect, border_radius=CELL_SIZE // 2)

        # Змейка
        for cell in self.game.snake.body:
            x, y = cell_to_pixel(cell)
            segment = pygame.Rect(x, y, CELL_SIZE, CELL_SIZE)
            pygame.draw.rect(self.screen, SNAKE, segment, border_radius=CELL_SIZE // 4)

        score = self.font.render(f"Score: {self.game.score}", True, TEXT_COLOR)
        self.screen.blit(score, (OFFSET, OFFSET - 40))

        best = self.font.render(f"Best: {self.game.best_score}", True, TEXT_COLOR)
        self.screen.blit(best, (OFFSET + CELL_SIZE * CELL_COUNT - best.get_width(),
                                OFFSET - 40))

        pygame.display.flip()

    def run(self):
        running = True

        while running:
            events = self.game.tick(self.now())
            self.play_sounds(events)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    direction = key_to_direction(event.key)
                    if direction is not None:
                        self.game.steer(direction)

            self.draw()
            self.clock.tick(FPS)

        pygame.quit()
        logger.info("Session: %d games, best %d",
                    self.game.games_played, self.game.best_score)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Retro Snake")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement")
    parser.add_argument("--mute", action="store_true",
                        help="Disable sound")
    default_level = LOG_LEVEL.upper() if LOG_LEVEL.upper() in LOG_LEVELS else "INFO"
    parser.add_argument("--log-level", default=default_level, type=str.upper,
                        choices=LOG_LEVELS,
                        help="Logging level")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    logger.info("Starting the game...")
    try:
        SnakeWindow(seed=args.seed, mute=args.mute).run()
    except pygame.error as e:
        logger.error("Fatal: %s", e)
        pygame.quit()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
