"""
input_manager.py
----------------
Event-driven input state for the dodge game.

Provides:
- Held-direction intents from KEYDOWN/KEYUP (left, right)
- Pointer drag deltas from mouse drags and touch (finger) drags
- Discrete actions: confirm key, pointer release, system hotkeys

Held state changes between frames and is read at the start of the next
frame. Drag deltas are consumed as soon as the game handles the event.
"""

import pygame

from dodger.core.debug.debug_logger import DebugLogger


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "gameplay": {
        "move_left": [pygame.K_LEFT, pygame.K_a],
        "move_right": [pygame.K_RIGHT, pygame.K_d],
        "confirm": [pygame.K_SPACE],
    },
    "system": {
        "toggle_debug": [pygame.K_F3],
        "toggle_fullscreen": [pygame.K_F11],
        "quit": [pygame.K_ESCAPE],
    },
}

POINTER_RELEASE = "pointer_release"


class InputManager:
    """
    Tracks held keys and pointer drags.

    Usage:
        action = input_manager.handle_event(event)
        if action == "confirm": ...

        if input_manager.action_held("move_left"):
            ...

        dx = input_manager.consume_drag()
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, key_bindings=None, display_manager=None):
        """
        Initialize input system.

        Args:
            key_bindings: Custom key bindings dict (uses DEFAULT_KEY_BINDINGS if None)
            display_manager: Source of the window width for touch coordinates
        """
        DebugLogger.init_entry("InputManager")

        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self.display_manager = display_manager

        self._init_lookup_tables()
        self._keys_down = set()

        # Pointer drag state (window pixels)
        self._drag_x = None
        self._drag_dx = 0.0

        self._validate_bindings()

    def _init_lookup_tables(self):
        """Build key -> action lookups per context."""
        self._gameplay_lookup = {}
        self._action_to_keys = {}
        for action, keys in self.key_bindings.get("gameplay", {}).items():
            self._action_to_keys[action] = tuple(keys)
            for key in keys:
                self._gameplay_lookup[key] = action

        self._system_lookup = {}
        for action, keys in self.key_bindings.get("system", {}).items():
            for key in keys:
                self._system_lookup[key] = action

    def _validate_bindings(self):
        """Warn if system keys overlap with gameplay keys."""
        overlap = set(self._system_lookup) & set(self._gameplay_lookup)
        if overlap:
            DebugLogger.warn(f"Overlapping system keys: {overlap}", category="input")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def handle_event(self, event):
        """
        Update input state from one pygame event.

        Returns:
            str or None: Discrete action triggered by this event
                ("confirm", "pointer_release" or a system action)
        """
        if event.type == pygame.KEYDOWN:
            return self._on_key_down(event.key)

        if event.type == pygame.KEYUP:
            self._keys_down.discard(event.key)
            return None

        if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEMOTION, pygame.MOUSEBUTTONUP):
            # SDL mirrors touches as mouse events; the finger events handle those
            if getattr(event, "touch", False):
                return None
            return self._on_mouse(event)

        if event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION, pygame.FINGERUP):
            return self._on_finger(event)

        if event.type == pygame.WINDOWFOCUSLOST:
            self.reset()

        return None

    def _on_key_down(self, key):
        system_action = self._system_lookup.get(key)
        if system_action:
            DebugLogger.action(f"System key: {system_action}", category="input")
            return system_action

        self._keys_down.add(key)
        action = self._gameplay_lookup.get(key)
        if action == "confirm":
            return action
        return None

    def _on_mouse(self, event):
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._begin_drag(event.pos[0])
        elif event.type == pygame.MOUSEMOTION:
            self._continue_drag(event.pos[0])
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            return self._end_drag()
        return None

    def _on_finger(self, event):
        # Finger coordinates are normalized to [0, 1] of the window
        x = event.x * self._window_width()
        if event.type == pygame.FINGERDOWN:
            self._begin_drag(x)
        elif event.type == pygame.FINGERMOTION:
            self._continue_drag(x)
        else:
            return self._end_drag()
        return None

    # ===========================================================
    # Drag Tracking
    # ===========================================================

    def _begin_drag(self, x):
        self._drag_x = x

    def _continue_drag(self, x):
        if self._drag_x is None:
            return
        self._drag_dx += x - self._drag_x
        self._drag_x = x

    def _end_drag(self):
        self._drag_x = None
        return POINTER_RELEASE

    @property
    def dragging(self) -> bool:
        return self._drag_x is not None

    def consume_drag(self) -> float:
        """Return the horizontal drag distance since the last call, in window pixels."""
        dx = self._drag_dx
        self._drag_dx = 0.0
        return dx

    def _window_width(self):
        if self.display_manager is not None:
            return self.display_manager.get_window_size()[0]
        surface = pygame.display.get_surface()
        if surface is not None:
            return surface.get_width()
        return 0

    # ===========================================================
    # Queries
    # ===========================================================

    def action_held(self, action: str) -> bool:
        """Check if any key bound to action is currently down."""
        return any(key in self._keys_down for key in self._action_to_keys.get(action, ()))

    def held_directions(self):
        """Return (left_held, right_held)."""
        return self.action_held("move_left"), self.action_held("move_right")

    def reset(self):
        """Forget held keys and any drag in progress."""
        self._keys_down.clear()
        self._drag_x = None
        self._drag_dx = 0.0
        DebugLogger.state("Input state reset", category="input")
