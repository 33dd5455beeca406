import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from gates_of_eras.config_window import (
    Button,
    ConfigScreen,
    DisplayOption,
    detect_displays,
)
from gates_of_eras.settings import GameConfig, load_config

GREEN = (0, 255, 0, 255)
WHITE = (255, 255, 255, 255)
BACKGROUND = (50, 50, 50, 255)


@pytest.fixture
def displays():
    return [
        DisplayOption(0, "Left", (0, 0, 1920, 1080)),
        DisplayOption(1, "Right", (1920, 0, 1280, 1024)),
    ]


@pytest.fixture
def screen(displays, tmp_path):
    return ConfigScreen(displays, path=tmp_path / "game_config.ini")


@pytest.fixture
def fonts():
    pygame.font.init()
    yield pygame.font.Font(None, 18), pygame.font.Font(None, 42)
    pygame.font.quit()


def test_default_config_matches_launcher_defaults(screen):
    assert screen.config == GameConfig(display_index=0, fullscreen=True, width=1280, height=720)
    assert [b.text for b in screen.buttons] == ["Start Game", "Exit"]


@pytest.mark.parametrize("index", [2, 7, -1])
def test_out_of_range_display_index_is_reset(displays, index):
    screen = ConfigScreen(displays, GameConfig(display_index=index))
    assert screen.config.display_index == 0


def test_valid_display_index_is_kept(displays):
    screen = ConfigScreen(displays, GameConfig(display_index=1))
    assert screen.config.display_index == 1


def test_motion_selects_only_button_under_pointer(screen):
    screen.handle_motion(400, 525)
    assert [b.selected for b in screen.buttons] == [True, False]
    screen.handle_motion(100, 520)
    assert [b.selected for b in screen.buttons] == [False, True]
    screen.handle_motion(10, 10)
    assert not any(b.selected for b in screen.buttons)


def test_motion_hit_test_includes_far_edges(screen):
    screen.handle_motion(500, 550)
    assert screen.start_button.selected


def test_start_click_saves_and_stops(screen):
    screen.handle_motion(400, 525)
    screen.handle_click(400, 525)
    assert screen.saved
    assert not screen.running
    assert load_config(screen.path) == screen.config


def test_exit_click_stops_without_saving(screen):
    screen.handle_motion(100, 520)
    screen.handle_click(100, 520)
    assert not screen.running
    assert not screen.saved
    assert not screen.path.exists()


def test_click_uses_selection_from_last_motion(screen):
    screen.handle_click(400, 525)
    assert screen.running
    assert not screen.saved


def test_click_on_display_box_selects_display(screen):
    screen.handle_click(60, 140)
    assert screen.config.display_index == 1
    screen.handle_click(55, 105)
    assert screen.config.display_index == 0


def test_click_on_fullscreen_box_toggles(screen):
    screen.handle_click(60, 360)
    assert screen.config.fullscreen is False
    screen.handle_click(60, 360)
    assert screen.config.fullscreen is True


def test_click_elsewhere_changes_nothing(screen):
    before = GameConfig(**vars(screen.config))
    screen.handle_click(300, 300)
    assert screen.config == before
    assert screen.running


def test_render_marks_selection_and_fullscreen(screen, fonts):
    surface = pygame.Surface((600, 600))
    screen.render(surface, *fonts)
    assert surface.get_at((60, 110)) == GREEN
    assert surface.get_at((60, 140)) == BACKGROUND
    assert surface.get_at((50, 100)) == WHITE
    assert surface.get_at((60, 360)) == GREEN


def test_render_button_colours_follow_hover(screen, fonts):
    surface = pygame.Surface((600, 600))
    screen.handle_motion(400, 525)
    screen.render(surface, *fonts)
    assert surface.get_at((305, 505)) == (100, 100, 200, 255)
    assert surface.get_at((55, 505)) == (70, 70, 150, 255)


def test_render_without_fonts_still_draws_boxes(screen):
    surface = pygame.Surface((600, 600))
    screen.config.fullscreen = False
    screen.render(surface, None, None)
    assert surface.get_at((60, 360)) == BACKGROUND
    assert surface.get_at((50, 350)) == WHITE


def test_button_defaults_to_unselected():
    button = Button(pygame.Rect(0, 0, 10, 10), "Go")
    assert button.selected is False


def test_detect_displays_indexes_are_sequential():
    try:
        found = detect_displays()
        assert [d.index for d in found] == list(range(len(found)))
        assert all(d.bounds[2] > 0 and d.bounds[3] > 0 for d in found)
    finally:
        pygame.display.quit()