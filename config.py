import os

# Настройки игры
# Поле 25x25, вокруг поля рамка шириной OFFSET
CELL_SIZE = 30    # пикселей на клетку
CELL_COUNT = 25   # клеток по каждой стороне
OFFSET = 75       # отступ поля от края окна

WIDTH = 2 * OFFSET + CELL_SIZE * CELL_COUNT   # 900
HEIGHT = 2 * OFFSET + CELL_SIZE * CELL_COUNT  # 900

TITLE = 'Retro Snake'

# Цвета
GREEN = (173, 204, 96)
DARK_GREEN = (43, 51, 24)

BACKGROUND = GREEN
SNAKE = DARK_GREEN
FOOD = DARK_GREEN
TEXT_COLOR = DARK_GREEN

# Направления
UP = (0, -1)
DOWN = (0, 1)
RIGHT = (1, 0)
LEFT = (-1, 0)

# Начальная змейка (голова первая) и направление
INITIAL_SNAKE_BODY = ((6, 9), (5, 9), (4, 9))
INITIAL_DIRECTION = RIGHT

# Скорость отрисовки
FPS = 60

# Скорость игры: секунд между тиками (меньше = быстрее)
GAME_SPEED = 0.2
SPEED_UP_INTERVAL = 10.0  # каждые 10 секунд
SPEED_MULTIPLIER = 0.9    # интервал * 0.9

# Очки за еду
SCORE_FOR_FOOD = 1

# Ресурсы
ASSETS_DIR = os.environ.get('SNAKE_ASSETS_DIR', '.')
FOOD_TEXTURE = os.path.join(ASSETS_DIR, 'Graphics', 'food.png')
EAT_SOUND = os.path.join(ASSETS_DIR, 'Sounds', 'eat.mp3')
WALL_SOUND = os.path.join(ASSETS_DIR, 'Sounds', 'wall.mp3')

# Логи
LOG_LEVEL = os.environ.get('SNAKE_LOG_LEVEL', 'INFO')
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(message)s'
