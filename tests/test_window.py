import pytest

from gates_of_eras.window import GameWindow, WindowError, centered_position


@pytest.fixture
def window(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_VIDEO_CENTERED", "1")
    win = GameWindow()
    yield win
    win.close()


def test_centered_position_on_origin_display():
    assert centered_position((0, 0, 1920, 1080), 800, 600) == (560, 240)


def test_centered_position_is_symmetric_with_offset():
    x, y = centered_position((1920, 100, 1280, 1024), 640, 480)
    assert x - 1920 == 1920 + 1280 - (x + 640)
    assert y - 100 == 100 + 1024 - (y + 480)


def test_centered_position_same_size_is_origin():
    assert centered_position((5, 7, 300, 200), 300, 200) == (5, 7)


def test_surface_before_create_raises():
    with pytest.raises(WindowError):
        GameWindow().surface


def test_create_sets_size(window):
    window.create(0, 320, 240, False)
    assert (window.width, window.height) == (320, 240)


def test_invalid_display_raises(window):
    with pytest.raises(WindowError):
        window.create(99, 320, 240, False)


def test_clear_and_test_rect(window):
    window.create(0, 400, 400, False)
    window.draw_test_rect()
    window.present()
    assert tuple(window.surface.get_at((150, 150)))[:3] == (255, 0, 0)
    assert tuple(window.surface.get_at((50, 50)))[:3] == (0, 0, 0)
    window.clear()
    assert tuple(window.surface.get_at((150, 150)))[:3] == (0, 0, 0)


def test_close_releases_surface(window):
    window.create(0, 200, 100, False)
    window.close()
    with pytest.raises(WindowError):
        window.clear()


def test_context_manager_closes(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    with GameWindow() as win:
        win.create(0, 160, 120, False)
        assert win.width == 160
    with pytest.raises(WindowError):
        win.present()