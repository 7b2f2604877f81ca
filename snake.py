"""
Змейка: тело, движение, рост.

Рост отложенный: grow() только ставит флаг, а длина меняется
на следующем move() (хвост в этот раз не убирается).
"""
from collections import deque

from config import INITIAL_SNAKE_BODY, INITIAL_DIRECTION


class Snake:
    def __init__(self, body=INITIAL_SNAKE_BODY, direction=INITIAL_DIRECTION):
        self.initial_body = tuple(body)
        self.initial_direction = direction
        self.body = deque(self.initial_body)  # голова, ..., хвост
        self.direction = direction
        self.add_segment = False

    @property
    def head(self):
        return self.body[0]

    def __len__(self):
        return len(self.body)

    def __contains__(self, cell):
        return cell in self.body

    def headless_body(self):
        """Тело без головы (для проверки столкновения с собой)"""
        return list(self.body)[1:]

    def move(self):
        """Шаг змейки на одну клетку по направлению"""
        hx, hy = self.head
        dx, dy = self.direction
        self.body.appendleft((hx + dx, hy + dy))

        if self.add_segment:
            # Хвост остаётся - змейка стала длиннее на 1
            self.add_segment = False
        else:
            self.body.pop()

    def grow(self):
        """Вырасти на следующем move()"""
        self.add_segment = True

    request_growth = grow

    def set_direction(self, direction):
        """
        Сменить направление.
        Разворот на 180 (в собственную шею) запрещён - возвращает False.
        """
        dx, dy = self.direction
        if tuple(direction) == (-dx, -dy):
            return False
        self.direction = tuple(direction)
        return True

    def reset(self):
        """Начальное тело и направление"""
        self.body = deque(self.initial_body)
        self.direction = self.initial_direction
        self.add_segment = False
