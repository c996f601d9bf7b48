import pygame

from fruitsnake.config import CELL_SIZE, FRUITS, GRID, HEIGHT, WIDTH
from fruitsnake.game import Fruit, Phase
from fruitsnake.render import draw_board
from fruitsnake.scheduler import Snapshot


class StubFont:
    def render(self, text, antialias, color):
        return pygame.Surface((1, 1))


def test_board_grid_is_closed_on_every_edge():
    screen = pygame.Surface((WIDTH + 1, HEIGHT + 1))
    snap = Snapshot(
        snake=((5, 5),),
        fruit=Fruit(cell=(0, 0), kind=FRUITS[0]),
        score=0,
        phase=Phase.RUNNING,
        countdown=0,
        celebrating=False,
    )
    draw_board(screen, StubFont(), snap)
    assert tuple(screen.get_at((WIDTH // 2 + CELL_SIZE // 2, HEIGHT)))[:3] == GRID
    assert tuple(screen.get_at((WIDTH, HEIGHT // 2 + CELL_SIZE // 2)))[:3] == GRID
    assert tuple(screen.get_at((WIDTH // 2 + CELL_SIZE // 2, 0)))[:3] == GRID
    assert tuple(screen.get_at((0, HEIGHT // 2 + CELL_SIZE // 2)))[:3] == GRID
