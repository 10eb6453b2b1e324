"""
Keyboard routing: discrete key presses become session commands.
"""
import logging

from starline import settings

logger = logging.getLogger(__name__)

KEY_ALIASES = {" ": "space", "esc": "escape"}


def normalize_key(key):
    key = KEY_ALIASES.get(key, key).lower()
    return KEY_ALIASES.get(key, key)


class InputRouter:
    """Maps A/D, SPACE, ESC/P and R onto the current session.

    With the legacy guard on, nothing gets through outside "playing", so a
    paused or finished session cannot be resumed or restarted from the keys.
    """

    def __init__(self, session, legacy_guard=None):
        self.session = session
        if legacy_guard is None:
            legacy_guard = settings.FEATURES["LEGACY_KEY_GUARD"]
        self.legacy_guard = legacy_guard

    def handle(self, key) -> bool:
        """Route one key press. Returns True if it produced a command."""
        key = normalize_key(key)
        session = self.session
        playing = session.state == session.PLAYING
        if self.legacy_guard and not playing:
            return False

        if key in ("escape", "p"):
            session.toggle_pause()
        elif key == "r":
            session.restart()
        elif not playing:
            return False
        elif key == "a":
            session.steer(-1)
        elif key == "d":
            session.steer(1)
        elif key == "space":
            session.fire()
            logger.debug(f"Fired, health {session.health}")
        else:
            return False
        return True
