"""
game_scene.py
-------------
The dodge simulation: one explicit state object advanced once per frame.

Frame order
-----------
1. Sample held directions and move the player (clamped)
2. Move every obstacle down by its fall speed
3. Test obstacles against the player; a hit ends the game for this frame
4. Remove obstacles below the surface, one point each
5. Maybe spawn one obstacle
6. Queue the frame on the draw manager
7. Request the next frame while running

Collaborators are injected: frame scheduler, key-value store, draw manager,
input manager, display manager and random source. Any of the last four may
be omitted, which is how tests drive the simulation headless.
"""

from dodger.core.debug.debug_logger import DebugLogger
from dodger.core.runtime.game_config import SimulationConfig
from dodger.core.runtime.game_settings import Colors
from dodger.core.services.input_manager import POINTER_RELEASE
from dodger.core.services.score_store import HighScoreTracker
from dodger.entities.player import Player
from dodger.scenes.game_phase import GamePhase
from dodger.systems.collision import CollisionManager
from dodger.systems.spawner import ObstacleSpawner
from dodger.ui.hud import HudRenderer


RESTART_ACTIONS = ("confirm", POINTER_RELEASE)


class DodgeSimulation:
    """Player, obstacle set, score counters and phase for one game instance."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, scheduler, store=None, config=None, draw_manager=None,
                 input_manager=None, display_manager=None, rng=None):
        """
        Args:
            scheduler: FrameScheduler receiving next-frame requests
            store: KeyValueStore holding the high score (None disables persistence)
            config: SimulationConfig (defaults if None)
            draw_manager: Draw surface for the render step (None skips rendering)
            input_manager: Source of held directions and pointer drags
            display_manager: Source of the displayed surface width for drags
            rng: random.Random used for spawning
        """
        self.config = config or SimulationConfig()
        self.scheduler = scheduler
        self.draw_manager = draw_manager
        self.input_manager = input_manager
        self.display_manager = display_manager

        cfg = self.config
        self.player = Player(
            cfg.player_start_x, cfg.player_y,
            cfg.player_width, cfg.player_height,
            cfg.player_speed, cfg.surface_width,
            color=cfg.player_color,
        )
        self.obstacles = []
        self.score = 0
        self.phase = GamePhase.RUNNING
        self.frame = 0

        # Programmatic intents, combined with held keys from the input manager
        self.intents = {"left": False, "right": False}

        self.high_scores = HighScoreTracker(store, cfg.high_score_key)
        self.spawner = ObstacleSpawner(cfg, rng)
        self.collisions = CollisionManager(self.player)
        self.hud = HudRenderer(cfg.surface_width, cfg.surface_height)

        DebugLogger.init_entry("DodgeSimulation")
        DebugLogger.init_sub(f"High score loaded: {self.high_score}")

    @property
    def high_score(self) -> int:
        return self.high_scores.value

    @property
    def running(self) -> bool:
        return self.phase is GamePhase.RUNNING

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def start(self):
        """Draw the opening frame and request the first tick."""
        self.render()
        if self.running:
            self.scheduler.request_frame(self.advance_frame)
        DebugLogger.state("Simulation started", category="game_state")

    def restart(self):
        """Reset score, obstacles and player position, then resume ticking."""
        self.score = 0
        self.obstacles = []
        self.player.move_to(self.config.player_start_x)
        self.phase = GamePhase.RUNNING
        self.render()
        self.scheduler.request_frame(self.advance_frame)
        DebugLogger.state("Restarted → RUNNING", category="game_state")

    # ===========================================================
    # Frame Step
    # ===========================================================

    def advance_frame(self):
        """Advance one frame. Does nothing once the game has ended."""
        if not self.running:
            return

        self.frame += 1

        left, right = self.sample_input()
        self.player.move_held(left, right)

        for obstacle in self.obstacles:
            obstacle.fall()

        hit = self.collisions.first_hit(self.obstacles)
        if hit is not None:
            self._end_game(hit)
        else:
            self._cull_obstacles()
            self._maybe_spawn()

        self.render()

        if self.running:
            self.scheduler.request_frame(self.advance_frame)

    def sample_input(self):
        """Return (left, right) held intents for this frame."""
        left, right = self.intents["left"], self.intents["right"]
        if self.input_manager is not None:
            held_left, held_right = self.input_manager.held_directions()
            left = left or held_left
            right = right or held_right
        return left, right

    def _cull_obstacles(self):
        """Drop obstacles below the surface and score one point for each."""
        height = self.config.surface_height
        remaining = []
        removed = 0
        for obstacle in self.obstacles:
            if obstacle.is_below(height):
                removed += 1
            else:
                remaining.append(obstacle)

        if not removed:
            return

        self.obstacles = remaining
        self.score += removed
        DebugLogger.trace(f"Culled {removed} obstacle(s), score={self.score}", category="entity_cleanup")
        self.high_scores.submit(self.score)

    def _maybe_spawn(self):
        obstacle = self.spawner.maybe_spawn()
        if obstacle is not None:
            self.obstacles.append(obstacle)

    def _end_game(self, obstacle):
        self.phase = GamePhase.ENDED
        self.scheduler.cancel()
        DebugLogger.state(
            f"Collision with {obstacle!r} → ENDED (score={self.score}, high={self.high_score})",
            category="game_state"
        )

    # ===========================================================
    # Input
    # ===========================================================

    def set_intent(self, direction: str, held: bool):
        """Set a held direction ("left" or "right") without a keyboard."""
        if direction not in self.intents:
            raise ValueError(f"Unknown direction: {direction}")
        self.intents[direction] = bool(held)

    def apply_directional_input(self, delta, displayed_width=None):
        """
        Offset the player by a pointer delta, immediately and clamped.

        Args:
            delta: Horizontal distance in displayed pixels
            displayed_width: Width the surface is displayed at; when given,
                delta is rescaled to logical pixels
        """
        if not self.running:
            return

        if displayed_width:
            delta *= self.config.surface_width / displayed_width
        self.player.move_by(delta)

    def handle_event(self, event):
        """
        Route a pygame event through the input manager.

        Pointer drags move the player; confirm or pointer release restarts
        an ended game.

        Returns:
            str or None: The discrete action the event triggered
        """
        if self.input_manager is None:
            return None

        action = self.input_manager.handle_event(event)

        dx = self.input_manager.consume_drag()
        if dx:
            displayed_width = self.display_manager.displayed_width if self.display_manager else None
            self.apply_directional_input(dx, displayed_width)

        if action in RESTART_ACTIONS and not self.running:
            self.restart()

        return action

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self):
        """Queue the current state on the draw manager."""
        dm = self.draw_manager
        if dm is None:
            return

        dm.clear(Colors.BACKGROUND)
        self.player.draw(dm)
        for obstacle in self.obstacles:
            obstacle.draw(dm)
        self.collisions.draw_debug(dm, self.obstacles)

        self.hud.draw_scores(dm, self.score, self.high_score)
        if not self.running:
            self.hud.draw_game_over(dm)
