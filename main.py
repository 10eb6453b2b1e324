# Starline
# ===============================================================#
# Controls:
# Move: A/D | Fire: SPACE | Pause: ESC/P | Restart: R
# Sprites are read from ./assets (override with STARLINE_ASSETS)

import logging
import sys

import pygame

from starline import settings
from starline.assets import AssetLoader
from starline.controls import InputRouter
from starline.entities import Asset
from starline.errors import AssetLoadError
from starline.host import FrameScheduler
from starline.logging_config import setup_logging
from starline.pygame_host import PygameSurface, key_name
from starline.session import GameSession, draw_loading_screen

logger = logging.getLogger("starline.main")


def build_session(host, scheduler, sprites):
    enemies = [sprite for name, sprite in sprites.items() if name != "spaceship"]
    return GameSession(host, scheduler, sprites["spaceship"], enemies)


def load_game(host, scheduler, loader, clock):
    """Pump the loader one frame at a time; the session is built by its done callback."""
    handles = {name: loader.request(path) for name, (path, _) in settings.SPRITES.items()}
    games = []

    def on_loaded(done):
        done.result()
        sprites = {name: Asset(handle, settings.SPRITES[name][1]) for name, handle in handles.items()}
        games.append(build_session(host, scheduler, sprites))

    loader.add_done_callback(on_loaded)
    while not games:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return None
        loader.poll()
        if not games:
            draw_loading_screen(host)
            pygame.display.flip()
            clock.tick(settings.FPS)
    return games[0]


def main():
    setup_logging(getattr(logging, settings.LOG_LEVEL, logging.INFO), settings.LOG_FILE)
    pygame.init()
    pygame.display.set_caption("Starline")
    screen = pygame.display.set_mode((settings.WIDTH, settings.HEIGHT), pygame.RESIZABLE)
    clock = pygame.time.Clock()
    host = PygameSurface(screen)
    scheduler = FrameScheduler()

    try:
        game = load_game(host, scheduler, AssetLoader(), clock)
        if game is None:
            pygame.quit()
            return 0
    except AssetLoadError as e:
        logger.error(f"Cannot start: {e}")
        pygame.quit()
        return 1

    router = InputRouter(game)
    running = True
    while running:
        clock.tick(settings.FPS)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                host.screen = pygame.display.get_surface()
            elif event.type == pygame.KEYDOWN:
                router.handle(key_name(event))

        scheduler.dispatch(pygame.time.get_ticks())
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
