"""
Время игры: шлюз тиков и ускорение.

Отрисовка идёт с частотой FPS, а логика змейки - только когда прошёл
текущий интервал. Интервал со временем уменьшается (SpeedRamp).
Всё время передаётся явно (now, в секундах), глобальных таймеров нет.
"""
import logging

from config import GAME_SPEED, SPEED_UP_INTERVAL, SPEED_MULTIPLIER

logger = logging.getLogger(__name__)


class GameClock:
    """Шлюз тиков: пропускает не чаще одного раза за interval секунд"""

    def __init__(self, start=0.0):
        self.last_update_time = start

    def should_advance(self, interval, now):
        """True (и запоминает now), если с прошлого тика прошло >= interval"""
        if now - self.last_update_time >= interval:
            self.last_update_time = now
            return True
        return False


class SpeedRamp:
    """Периодическое ускорение игры"""

    def __init__(self, initial_interval=GAME_SPEED,
                 speed_up_interval=SPEED_UP_INTERVAL,
                 multiplier=SPEED_MULTIPLIER,
                 start=0.0):
        self.initial_interval = initial_interval
        self.speed_up_interval = speed_up_interval
        self.multiplier = multiplier
        self.interval = initial_interval
        self.last_speed_up_time = start

    def update(self, now):
        """Ускоряемся, если с прошлого ускорения прошло speed_up_interval"""
        if now - self.last_speed_up_time >= self.speed_up_interval:
            self.interval *= self.multiplier
            self.last_speed_up_time = now
            logger.debug("Speed up: interval %.4fs", self.interval)
            return True
        return False

    def reset(self, now):
        """Сброс скорости (после проигрыша)"""
        self.interval = self.initial_interval
        self.last_speed_up_time = now
