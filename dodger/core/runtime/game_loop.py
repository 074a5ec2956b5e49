"""
game_loop.py
------------
Defines the GameLoop class that hosts the simulation in a pygame window.

Responsibilities
----------------
- Initialize pygame and the runtime services (display, input, draw manager)
- Build the simulation with its frame scheduler and score store
- Run the host loop: events → pending frame → render → clock tick
"""

import random
import time

import pygame

from dodger.core.debug.debug_logger import DebugLogger
from dodger.core.runtime.frame_scheduler import FrameScheduler
from dodger.core.runtime.game_config import SimulationConfig
from dodger.core.runtime.game_settings import Debug, Display
from dodger.core.services.display_manager import DisplayManager
from dodger.core.services.input_manager import InputManager
from dodger.graphics.draw_manager import DrawManager
from dodger.scenes.game_scene import DodgeSimulation


class GameLoop:
    """Core runtime controller that owns the pygame main loop."""

    def __init__(self, store, config=None, seed=None, window_size=Display.DEFAULT_WINDOW_SIZE):
        """
        Initialize pygame and all foundational systems.

        Args:
            store: KeyValueStore for the high score
            config: SimulationConfig (defaults if None)
            seed: Optional seed for reproducible obstacle spawning
            window_size: Initial window preset name from Display.WINDOW_SIZES
        """
        DebugLogger.section("Initializing GameLoop")

        self.config = config or SimulationConfig()

        pygame.init()
        pygame.display.set_caption(Display.CAPTION)
        DebugLogger.init_entry("Pygame")

        self.display = DisplayManager(
            int(self.config.surface_width),
            int(self.config.surface_height),
            window_size=window_size,
        )
        self.input_manager = InputManager(display_manager=self.display)
        self.draw_manager = DrawManager()
        self.scheduler = FrameScheduler()

        self.simulation = DodgeSimulation(
            self.scheduler,
            store=store,
            config=self.config,
            draw_manager=self.draw_manager,
            input_manager=self.input_manager,
            display_manager=self.display,
            rng=random.Random(seed),
        )

        self.clock = pygame.time.Clock()
        self.running = True
        self._last_perf_warn_time = 0.0
        DebugLogger.init_sub("Game Clock Initialized", level=1)

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================

    def run(self):
        """Main loop that runs until the window is closed."""
        DebugLogger.section("Game Loop")
        self.simulation.start()

        while self.running:
            self._handle_events()
            if not self.running:
                break

            self.scheduler.run_pending()
            self._draw()
            self.clock.tick(Display.FPS)

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        """Route pygame events to system handlers and the simulation."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                return

            if event.type == pygame.VIDEORESIZE:
                self.display.handle_resize(event.w, event.h)
                continue

            action = self.simulation.handle_event(event)
            self._handle_system_action(action)

    def _handle_system_action(self, action):
        if action == "quit":
            self.running = False
            DebugLogger.action("Quit key pressed")
        elif action == "toggle_fullscreen":
            self.display.toggle_fullscreen()
        elif action == "toggle_debug":
            Debug.HITBOX_VISIBLE = not Debug.HITBOX_VISIBLE
            self.simulation.render()
            DebugLogger.action(f"Hitboxes: {'ON' if Debug.HITBOX_VISIBLE else 'OFF'}")

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        """Render the retained draw queue and scale it to the window."""
        start = time.perf_counter()

        self.draw_manager.render(self.display.get_game_surface())
        self.display.render()

        frame_time_ms = (time.perf_counter() - start) * 1000
        if frame_time_ms > Debug.FRAME_TIME_WARNING:
            now = time.perf_counter()
            if now - self._last_perf_warn_time > 1.0:  # Throttle to 1/sec
                self._last_perf_warn_time = now
                DebugLogger.warn(f"Slow frame: {frame_time_ms:.2f} ms", category="timing")
