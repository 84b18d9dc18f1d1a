from unittest import mock

import pygame
import pytest

from checkers.app import CHECKERS_TITLE, CheckersApp, main
from checkers.common import BLACK, RED

START = (1280.0, 940.0)
OPTIONS = (1280.0, 1040.0)
EXIT = (1280.0, 1140.0)


@pytest.fixture
def app():
    surface = pygame.Surface((2560, 1440))
    return CheckersApp(CHECKERS_TITLE, (2560.0, 1440.0), font_path=None, surface=surface)


def click(position, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=position)


def test_initial_state(app):
    assert app.is_open is True
    assert app.menu.is_visible is True
    assert app.game.is_visible is False
    assert app.settings.is_visible is False
    assert app.window_dimensions == (2560.0, 1440.0)


def test_quit_event_closes(app):
    app.poll_event(pygame.event.Event(pygame.QUIT), (0.0, 0.0))
    assert app.is_open is False


def test_escape_closes(app):
    app.poll_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE), (0.0, 0.0))
    assert app.is_open is False


def test_other_key_keeps_open(app):
    app.poll_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a), (0.0, 0.0))
    assert app.is_open is True


def test_click_start_shows_game(app):
    app.poll_event(click(START), START)
    assert app.menu.is_visible is False
    assert app.game.is_visible is True
    assert app.settings.is_visible is False
    assert app.menu.back.is_visible is True


def test_click_settings_shows_settings(app):
    app.poll_event(click(OPTIONS), OPTIONS)
    assert app.menu.is_visible is False
    assert app.game.is_visible is False
    assert app.settings.is_visible is True


def test_back_returns_to_menu(app):
    app.poll_event(click(START), START)
    back = app.menu.back.background_position
    app.poll_event(click(back), back)
    assert app.menu.is_visible is True
    assert app.game.is_visible is False
    assert app.menu.back.is_visible is False


def test_click_exit_closes(app):
    app.poll_event(click(EXIT), EXIT)
    assert app.is_open is False


def test_right_click_ignored(app):
    app.poll_event(click(EXIT, button=3), EXIT)
    assert app.is_open is True
    assert app.menu.is_visible is True


def test_close(app):
    app.close()
    assert app.is_open is False


def test_poll_highlights(app):
    app.poll_highlights(START)
    assert app.menu.start.is_highlighted is True
    assert app.menu.exit.is_highlighted is False
    app.poll_highlights((0.0, 0.0))
    assert app.menu.start.is_highlighted is False


def test_update_frame_clears_and_draws(app):
    app.surface.fill(RED)
    app.update_frame()
    assert tuple(app.surface.get_at((5, 5))) == tuple(BLACK)
    bounds = app.menu.start.background_bounds
    t = app.menu.start.outline_thickness
    corner = (int(bounds.left + t + 2), int(bounds.top + t + 2))
    assert tuple(app.surface.get_at(corner))[:3] == tuple(app.menu.start.background_color[:3])


def test_run_stops_on_quit(app):
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]), \
            mock.patch("pygame.mouse.get_pos", return_value=(0, 0)):
        app.run()
    assert app.is_open is False


def test_run_exit_button(app):
    with mock.patch("pygame.event.get", return_value=[click(EXIT)]), \
            mock.patch("pygame.mouse.get_pos", return_value=(1280, 1140)):
        app.run()
    assert app.is_open is False
    assert app.menu.exit.is_highlighted is True


def test_main_missing_font(tmp_path, capsys):
    status = main(["--font", str(tmp_path / "missing.ttf")])
    assert status == 1
    assert "failed to load font" in capsys.readouterr().err


def test_main_rejects_unknown_argument():
    with pytest.raises(SystemExit):
        main(["--bogus"])