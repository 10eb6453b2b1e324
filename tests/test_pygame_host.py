import pygame
import pytest

from starline.pygame_host import PygameSurface, key_name


@pytest.fixture(scope="module", autouse=True)
def pygame_init():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def host():
    return PygameSurface(pygame.Surface((200, 100)))


class Handle:
    def __init__(self, surface):
        self.surface = surface


def test_viewport_reports_surface_size(host):
    vp = host.viewport()
    assert (vp.width, vp.height) == (200, 100)


def test_fill_rect_paints(host):
    host.fill_rect((10, 10, 5, 5), (0, 255, 0))
    assert host.screen.get_at((12, 12))[:3] == (0, 255, 0)
    assert host.screen.get_at((20, 20))[:3] == (0, 0, 0)


def test_empty_fill_is_skipped(host):
    host.fill_rect((10, 10, 0, 5), (0, 255, 0))
    assert host.screen.get_at((10, 10))[:3] == (0, 0, 0)


def test_resize_clips_drawing(host):
    host.resize(50, 50)
    host.fill_rect((0, 0, 200, 100), (255, 255, 255))
    assert host.screen.get_at((10, 10))[:3] == (255, 255, 255)
    assert host.screen.get_at((150, 80))[:3] == (0, 0, 0)


def test_rotation_is_restored_after_scope(host):
    with host.rotated(30):
        assert host.rotation == 30
        with host.rotated(15):
            assert host.rotation == 45
        assert host.rotation == 30
    assert host.rotation == 0


def test_draw_image_scales_into_rect(host):
    img = pygame.Surface((4, 4))
    img.fill((255, 0, 0))
    host.draw_image(Handle(img), (20, 20, 40, 20))
    assert host.screen.get_at((40, 30))[:3] == (255, 0, 0)
    assert host.screen.get_at((70, 30))[:3] == (0, 0, 0)


def test_draw_image_rotated_about_center(host):
    img = pygame.Surface((40, 4))
    img.fill((255, 0, 0))
    with host.rotated(90):
        host.draw_image(Handle(img), (80, 48, 40, 4))
    assert host.screen.get_at((100, 35))[:3] == (255, 0, 0)
    assert host.screen.get_at((85, 50))[:3] == (0, 0, 0)


def test_stroke_and_shapes(host):
    host.stroke_rect((10, 10, 20, 20), (255, 255, 255), 1)
    assert host.screen.get_at((10, 20))[:3] == (255, 255, 255)
    host.fill_circle((100, 50), 5, (0, 0, 255))
    assert host.screen.get_at((100, 50))[:3] == (0, 0, 255)
    host.fill_polygon([(150, 10), (170, 10), (160, 30)], (255, 0, 0))
    assert host.screen.get_at((160, 15))[:3] == (255, 0, 0)


def test_draw_text_caches_fonts(host):
    host.draw_text("Score: 0", (10, 30), 20, (255, 255, 255))
    host.draw_text("Health: 100", (10, 60), 20.4, (255, 255, 255))
    assert list(host._fonts) == [20]


def test_key_name():
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)
    assert key_name(event) == "space"
    assert key_name(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)) == "a"
