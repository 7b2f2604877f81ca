"""
Логика игры: порядок тика, столкновения, очки, ускорение.

Матрица мира (to_matrix):
  0 = пусто
  1 = тело змейки
  2 = еда
  7 = голова

Порядок update() фиксирован:
  1. змейка делает шаг
  2. еда
  3. стена
  4. хвост
  5. ускорение (всегда, даже на паузе)

После проигрыша running = False: игра стоит, пока игрок не нажмёт
стрелку (steer). Это единственный способ продолжить.
"""
import logging

import numpy as np

from config import CELL_COUNT, GAME_SPEED, SCORE_FOR_FOOD
from clock import GameClock, SpeedRamp
from food import Food, GridFullError
from grid import in_bounds
from snake import Snake

logger = logging.getLogger(__name__)

EVENT_EAT = 'eat'
EVENT_WALL = 'wall'

EMPTY, BODY, FOOD, HEAD = 0, 1, 2, 7


class Game:
    def __init__(self, size=CELL_COUNT, rng=None, initial_interval=GAME_SPEED,
                 start=0.0, snake=None):
        self.size = size
        self.snake = snake if snake is not None else Snake()
        self.food = Food(self.snake.body, size=size, rng=rng)
        self.clock = GameClock(start)
        self.ramp = SpeedRamp(initial_interval, start=start)

        self.running = True
        self.score = 0
        # Разрешён ли поворот в текущем тике (один поворот на тик)
        self.move_allowed = False

        # Статистика сессии (не сохраняется)
        self.games_played = 0
        self.best_score = 0

    @property
    def interval(self):
        """Текущий интервал тика, сек"""
        return self.ramp.interval

    def tick(self, now):
        """
        Вызывается каждый кадр. Возвращает события ('eat', 'wall').
        Логика идёт только если прошёл текущий интервал.
        """
        if self.clock.should_advance(self.ramp.interval, now):
            self.move_allowed = True
            return self.update(now)
        return []

    def update(self, now):
        """Один тик симуляции"""
        events = []
        if self.running:
            self.snake.move()
            self._check_food(now, events)
            self._check_edges(now, events)
            self._check_tail(now, events)
        self.ramp.update(now)
        return events

    def steer(self, direction):
        """
        Поворот от игрока.
        Принимается не чаще раза за тик и не назад. Снимает паузу.
        """
        if not self.move_allowed:
            return False
        if not self.snake.set_direction(direction):
            return False
        self.running = True
        self.move_allowed = False
        return True

    def _check_food(self, now, events):
        if self.snake.head == self.food.position:
            self.snake.grow()
            self.score += SCORE_FOR_FOOD
            logger.debug("Eat: score %d, length %d", self.score, len(self.snake))
            events.append(EVENT_EAT)
            try:
                self.food.respawn(self.snake.body)
            except GridFullError:
                # Змейка заняла всё поле - игра пройдена, начинаем заново
                logger.info("Board filled: score %d", self.score)
                self.game_over(now, events)

    def _check_edges(self, now, events):
        if not in_bounds(self.snake.head, self.size):
            self.game_over(now, events)

    def _check_tail(self, now, events):
        if self.snake.head in self.snake.headless_body():
            self.game_over(now, events)

    def game_over(self, now, events=None):
        """Сброс на месте: змейка, еда, очки, скорость"""
        self.games_played += 1
        self.best_score = max(self.best_score, self.score)
        logger.info("Game over: score %d (best %d, games %d)",
                    self.score, self.best_score, self.games_played)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Board:\n%s", self.print_board())

        self.snake.reset()
        self.food.respawn(self.snake.body)
        self.running = False
        self.score = 0
        self.ramp.reset(now)
        if events is not None:
            events.append(EVENT_WALL)

    def to_matrix(self):
        """Поле как numpy матрица [y, x]"""
        grid = np.zeros((self.size, self.size), dtype=np.int8)
        for x, y in self.snake.headless_body():
            if in_bounds((x, y), self.size):
                grid[y, x] = BODY
        fx, fy = self.food.position
        grid[fy, fx] = FOOD
        hx, hy = self.snake.head
        if in_bounds((hx, hy), self.size):
            grid[hy, hx] = HEAD
        return grid

    def print_board(self):
        """
        Поле строкой (для отладки):
        . = пусто
        F = еда
        T = тело
        H = голова
        """
        symbols = {EMPTY: '.', BODY: 'T', FOOD: 'F', HEAD: 'H'}
        rows = []
        for y, row in enumerate(self.to_matrix()):
            rows.append(f"{y:2d} " + ' '.join(symbols[int(v)] for v in row))
        return '\n'.join(rows)

    def __repr__(self):
        return (
            f"<Game score={self.score}, running={self.running}, "
            f"length={len(self.snake)}, food={self.food.position}, "
            f"interval={self.ramp.interval:.3f}>"
        )
