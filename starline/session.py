"""
Game session: owns every entity, the score and health counters and the
loading/playing/paused/over state machine, and runs the per-frame cycle.
"""
import logging
import random

from starline import settings
from starline.entities import Laser, Star
from starline.errors import AssetLoadError
from starline.geometry import Vector

logger = logging.getLogger(__name__)


def health_band(health):
    if health > 50: return "good"
    if health > 25: return "warn"
    if health > 0: return "low"
    return "dead"


def health_color(health):
    return settings.HEALTH_COLORS[health_band(health)]


def clamp(v, a, b):
    return max(a, min(b, v))


def draw_overlay(host, viewport, text):
    font_scale = viewport.width / 30
    host.draw_text(text, (viewport.width / 2 - 100, viewport.height / 2), font_scale, settings.WHITE)


def draw_loading_screen(host):
    """Frame shown while images are still decoding."""
    vp = host.viewport()
    host.resize(*vp.canvas_size)
    host.fill_rect((0, 0, *vp.canvas_size), settings.BG_COLOR)
    draw_overlay(host, vp, "Loading")


class GameSession:
    LOADING, PLAYING, PAUSED, OVER = "loading", "playing", "paused", "over"
    OVERLAYS = {OVER: "Game Over", PAUSED: "Paused", LOADING: "Loading"}

    def __init__(self, host, scheduler, spaceship, enemies=(), rng=None):
        self.host = host
        self.scheduler = scheduler
        self.rng = rng or random
        self.spaceship = spaceship
        self.enemies = list(enemies)
        self.state = self.LOADING
        self.lasers = []
        self.score = 0
        self.health = settings.MAX_HEALTH
        self.last_frame_time = None
        self._frame_requested = False

        vp = host.viewport()
        self.stars = [
            Star(self.rng.random() * vp.width, self.rng.random() * vp.height, self.rng)
            for _ in range(settings.STAR_COUNT)
        ]
        self.player_line = vp.height * settings.PLAYER_LINE
        for enemy in self.enemies:
            enemy.position.x = vp.width / 2 - enemy.rect.width / 2

        self.draw_interface(vp)
        self._check_images()
        logger.info("Session ready")
        self.start()

    def _check_images(self):
        sprites = [self.spaceship] + self.enemies
        failed = [s.image for s in sprites if not (s.image.complete and s.image.ok)]
        if failed:
            raise AssetLoadError([getattr(img, "path", repr(img)) for img in failed])

    # -- lifecycle ---------------------------------------------------------

    def start(self):
        self._set_state(self.PLAYING)
        vp = self.host.viewport()
        ship = self.spaceship
        self.player_line = vp.height * settings.PLAYER_LINE
        ship.reset_motion()
        ship.position.y = self.player_line
        ship.position.x = (vp.width - ship.image.width * ship.scale) / 2
        self.lasers = []
        self.score = 0
        self.health = settings.MAX_HEALTH
        self.last_frame_time = None
        self._request_frame()

    def restart(self):
        logger.info(f"Restarting from '{self.state}'")
        # enemies keep their opening spot until the first restart
        for enemy in self.enemies:
            enemy.position = Vector(*settings.ENEMY_PARK)
            enemy.velocity = Vector(0, 0)
        self.start()

    def toggle_pause(self):
        if self.state == self.PAUSED:
            self._set_state(self.PLAYING)
        elif self.state == self.PLAYING:
            self._set_state(self.PAUSED)

    def _set_state(self, state):
        if state != self.state:
            logger.debug(f"State {self.state} -> {state}")
            self.state = state

    # -- commands ----------------------------------------------------------

    def steer(self, direction):
        self.spaceship.velocity.x = direction * settings.MOVE_SPEED

    def fire(self):
        ship = self.spaceship
        self.lasers.append(Laser(ship.position.x + ship.rect.width / 2, ship.position.y))
        self.health -= settings.FIRE_COST
        if settings.FEATURES["CLAMP_HEALTH"]:
            self.health = clamp(self.health, 0, settings.MAX_HEALTH)

    # -- frame cycle -------------------------------------------------------

    def _request_frame(self):
        if not self._frame_requested:
            self._frame_requested = True
            self.scheduler.request(self.draw)

    def _elapsed(self, now_ms):
        elapsed = 0 if self.last_frame_time is None else now_ms - self.last_frame_time
        self.last_frame_time = now_ms
        return elapsed

    def draw(self, now_ms):
        self._frame_requested = False
        elapsed = self._elapsed(now_ms)
        vp = self.host.viewport()
        self.host.resize(*vp.canvas_size)
        self.host.fill_rect((0, 0, *vp.canvas_size), settings.BG_COLOR)

        moving = self.state == self.PLAYING or not settings.FEATURES["FREEZE_WHEN_PAUSED"]

        self.update_player(elapsed, vp, moving)
        self.spaceship.draw(self.host)

        for star in self.stars:
            if moving:
                star.move(elapsed, vp)
            star.draw(self.host)

        survivors = []
        for laser in self.lasers:
            if moving:
                laser.move(elapsed)
            if not laser.off_screen:
                laser.draw(self.host)
                survivors.append(laser)
        self.lasers = survivors

        for enemy in self.enemies:
            if moving:
                enemy.move(elapsed)
            enemy.draw(self.host)

        self.draw_interface(vp)
        self._request_frame()

    def update_player(self, elapsed, vp, moving=True):
        ship = self.spaceship
        if not moving:
            return
        ship.move(elapsed)
        rect = ship.rect
        if rect.left < 0:
            ship.position.x = 0
        if rect.right > vp.width:
            ship.position.x = vp.width - rect.width
        # drag is applied to acceleration, not velocity
        ship.acceleration.x *= settings.PLAYER_DRAG * elapsed
        ship.acceleration.y *= settings.PLAYER_DRAG * elapsed

    def draw_interface(self, vp=None):
        vp = vp or self.host.viewport()
        font_scale = vp.width / 30
        self.host.draw_text(f"Score: {self.score}", (font_scale, font_scale), font_scale, settings.WHITE)
        self.host.draw_text(f"Health: {self.health}", (font_scale, vp.height - font_scale * 2),
                            font_scale, settings.WHITE)
        overlay = self.OVERLAYS.get(self.state)
        if overlay:
            draw_overlay(self.host, vp, overlay)

        bar_x, bar_y = font_scale / 2, vp.height - font_scale * 1.5
        bar_w = vp.width / 3
        self.host.stroke_rect((bar_x, bar_y, bar_w, font_scale), settings.WHITE, 3)
        if health_band(self.health) == "dead" and self.state != self.OVER:
            logger.info(f"Game over, score {self.score}")
            self._set_state(self.OVER)
        self.host.fill_rect((bar_x, bar_y, bar_w * self.health / settings.MAX_HEALTH, font_scale),
                            health_color(self.health))
