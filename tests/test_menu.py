import pygame
import pytest

from checkers.common import RED, WHITE
from checkers.game import Game
from checkers.menu import Menu
from checkers.settings import Settings


class FakeWindow:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


@pytest.fixture
def menu():
    return Menu("|  Checkers  |", font_path=None)


@pytest.fixture
def screens():
    return Game(), Settings(font_path=None), FakeWindow()


def test_initial_state(menu):
    assert menu.is_visible is True
    assert menu.title.text == "|  Checkers  |"
    assert menu.title.character_size == 150
    assert menu.start.is_visible is True
    assert menu.back.is_visible is False
    assert all(b.highlight_color == RED for b in menu.buttons)


def test_button_positions(menu):
    assert menu.start.position == (1280.0, 940.0)
    assert menu.options.position == (1280.0, 1040.0)
    assert menu.back.position == (100.0, 1340.0)
    assert menu.exit.position == (1280.0, 1140.0)


def test_toggle_visible_swaps_back_button(menu):
    menu.toggle_visible(False)
    assert menu.is_visible is False
    assert menu.start.is_visible is False
    assert menu.back.is_visible is True
    menu.toggle_visible(True)
    assert menu.start.is_visible is True
    assert menu.back.is_visible is False


def test_start_shows_game(menu, screens):
    game, settings, window = screens
    menu.events(menu.start.position, window, game, settings)
    assert menu.is_visible is False
    assert game.is_visible is True
    assert settings.is_visible is False
    assert menu.back.is_visible is True
    assert window.closed is False


def test_settings_shows_settings(menu, screens):
    game, settings, window = screens
    menu.events(menu.options.position, window, game, settings)
    assert menu.is_visible is False
    assert settings.is_visible is True
    assert game.is_visible is False


def test_back_returns_to_menu(menu, screens):
    game, settings, window = screens
    menu.events(menu.start.position, window, game, settings)
    menu.events(menu.back.position, window, game, settings)
    assert menu.is_visible is True
    assert game.is_visible is False
    assert settings.is_visible is False
    assert menu.back.is_visible is False


def test_hidden_buttons_ignore_clicks(menu, screens):
    game, settings, window = screens
    menu.events(menu.back.position, window, game, settings)
    assert menu.is_visible is True
    menu.toggle_visible(False)
    menu.events(menu.exit.position, window, game, settings)
    assert window.closed is False


def test_exit_closes_window(menu, screens):
    game, settings, window = screens
    menu.events(menu.exit.position, window, game, settings)
    assert window.closed is True


def test_highlights(menu):
    menu.highlights(menu.start.position)
    assert menu.start.is_highlighted is True
    assert menu.exit.is_highlighted is False
    assert menu.start.background_outline == RED
    menu.highlights(menu.back.position)
    assert menu.back.is_highlighted is False
    assert menu.start.is_highlighted is False


def test_draw_only_when_visible(menu):
    point = (1200, 940)
    surface = pygame.Surface((2600, 1500))
    menu.draw(surface)
    assert tuple(surface.get_at(point)) == tuple(WHITE)
    hidden = Menu("x", font_path=None)
    hidden.toggle_visible(False)
    blank = pygame.Surface((2600, 1500))
    hidden.draw(blank)
    assert tuple(blank.get_at(point))[:3] == (0, 0, 0)
    assert tuple(blank.get_at((40, 1340))) == tuple(WHITE)