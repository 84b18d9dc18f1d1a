import pygame
import pytest

from checkers.common import RED, TRANSPARENT, WHITE
from checkers.settings import Settings


class FakeWindow:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


@pytest.fixture
def settings():
    return Settings(font_path=None)


def test_starts_hidden(settings):
    assert settings.is_visible is False


def test_layout_from_source(settings):
    assert settings.title.position == (1280.0, 200.0)
    assert settings.title.character_size == 75
    assert settings.backgrounds.position == (1280.0, 400.0)
    assert settings.boards.position == (1280.0, 500.0)
    assert settings.pawns.position == (1280.0, 600.0)
    assert all(b.character_size == 35 for b in settings.buttons)
    assert all(b.highlight_color == RED for b in settings.buttons)


def test_toggle_visible(settings):
    settings.toggle_visible(True)
    assert settings.is_visible is True
    assert settings.title.is_visible is True
    assert all(b.is_visible for b in settings.buttons)
    settings.toggle_visible(False)
    assert settings.is_visible is False
    assert not any(b.is_visible for b in settings.buttons)


def test_highlights_only_when_visible(settings):
    settings.highlights(settings.boards.position)
    assert settings.boards.is_highlighted is False
    settings.toggle_visible(True)
    settings.highlights(settings.boards.position)
    assert settings.boards.is_highlighted is True
    assert settings.boards.background_outline == RED
    assert settings.pawns.is_highlighted is False
    settings.highlights((0.0, 0.0))
    assert settings.boards.is_highlighted is False
    assert settings.boards.background_outline == TRANSPARENT


def test_events_report_clicks_without_closing(settings):
    window = FakeWindow()
    assert settings.events(settings.pawns.position, window) is False
    settings.toggle_visible(True)
    assert settings.events(settings.pawns.position, window) is True
    assert settings.events((0.0, 0.0), window) is False
    assert window.closed is False


def test_draw_only_when_visible(settings):
    surface = pygame.Surface((2600, 1500))
    point = (1280 - 170, 400)
    settings.draw(surface)
    assert tuple(surface.get_at(point))[:3] == (0, 0, 0)
    settings.toggle_visible(True)
    settings.draw(surface)
    assert tuple(surface.get_at(point)) == tuple(WHITE)