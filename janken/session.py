"""
Janken Game Session

Composes the game state, difficulty curve, enemy registry and collision
resolver into a single tick-driven simulation.

Usage:
    session = GameSession(KeyboardHandSource(), rng=random.Random(42))
    session.start()

    # Host loop
    while running:
        frame = session.tick(dt)
        renderer.draw(frame)            # FrameSnapshot, read-only
        if frame.phase == Phase.GAME_OVER:
            show_results(frame.score, session.high_score)

Every timer is an accumulation of the ``dt`` values passed to ``tick``, so
a fixed dt sequence plus a fixed seed replays the same session.
"""

import random
from typing import List, Optional

from janken.collision import CollisionResolver
from janken.config import GameRules
from janken.difficulty import DifficultyCurve
from janken.enemies import EnemyRegistry
from janken.game_state import GameState
from janken.high_score import HighScoreStore, InMemoryHighScoreStore
from janken.input.sources.base import PlayerHandSource
from janken.logging import (
    create_sink_for_module,
    emit_record,
    get_logger,
    get_sink,
    register_sink,
)
from janken.models import (
    CollisionResult,
    Enemy,
    FrameSnapshot,
    HandPair,
    Outcome,
    Phase,
)

log = get_logger('session')


class GameSession:
    """
    Tick-driven session orchestrator.

    Responsibilities:
    1. Sample the player's hands once per tick
    2. Move enemies and resolve band collisions
    3. Apply outcomes to score, lives and defeated count
    4. Spawn new enemies on the difficulty curve's cadence
    5. Detect game over and offer the score to the high score store

    The session is the only writer of its GameState. Listeners registered on
    ``session.state`` receive events but must not mutate it.
    """

    def __init__(
        self,
        hand_source: Optional[PlayerHandSource] = None,
        *,
        rules: Optional[GameRules] = None,
        state: Optional[GameState] = None,
        curve: Optional[DifficultyCurve] = None,
        registry: Optional[EnemyRegistry] = None,
        resolver: Optional[CollisionResolver] = None,
        high_scores: Optional[HighScoreStore] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the session.

        Args:
            hand_source: Source sampled when tick() gets no explicit hands
            rules: Game rules (default: GameRules() from config)
            state: Game state (default: built from rules)
            curve: Difficulty curve (default: config table, seeded with rng)
            registry: Enemy registry (default: built from rules)
            resolver: Collision resolver (default: built from rules)
            high_scores: High score store (default: in-memory)
            rng: Random source for the default curve
        """
        self.rules = rules if rules is not None else GameRules()
        self.hand_source = hand_source

        self.state = state if state is not None else GameState(
            initial_lives=self.rules.initial_lives,
            defeats_per_level=self.rules.defeats_per_level,
        )
        self.curve = curve if curve is not None else DifficultyCurve(
            defeats_per_level=self.state.defeats_per_level,
            base_speed=self.rules.enemy_base_speed,
            rng=rng,
        )
        # Displayed level and curve lookups must count the same wins
        if self.curve.defeats_per_level != self.state.defeats_per_level:
            raise ValueError(
                f"Difficulty curve uses {self.curve.defeats_per_level} defeats per level "
                f"but game state uses {self.state.defeats_per_level}"
            )
        self.registry = registry if registry is not None else EnemyRegistry(
            spawn_position=self.rules.spawn_position,
            despawn_position=self.rules.despawn_position,
            preview_position=self.rules.preview_position,
        )
        self.resolver = resolver if resolver is not None else CollisionResolver(
            threshold=self.rules.collision_threshold,
            player_band_position=self.rules.player_band_position,
        )
        self.high_scores = high_scores if high_scores is not None else InMemoryHighScoreStore()

        self.spawn_accumulator = 0.0
        self.ticks = 0
        self.high_score = self.high_scores.get_high_score()
        self.is_new_record = False

        # Hands chosen ahead of time while a preview is shown
        self._pending_hands: Optional[HandPair] = None
        self._last_results: List[CollisionResult] = []
        self._last_spawned: List[Enemy] = []
        self._last_despawned: List[Enemy] = []

    # =========================================================================
    # Phase control
    # =========================================================================

    def start(self) -> None:
        """Begin a new game: reset state and enemies, then enter PLAYING."""
        self.state.reset()
        self.registry.clear()
        self.spawn_accumulator = 0.0
        self.ticks = 0
        self.is_new_record = False
        self.high_score = self.high_scores.get_high_score()
        self._pending_hands = None
        self._clear_frame()

        self.state.set_phase(Phase.PLAYING)
        if self.rules.preview_enabled:
            self._prepare_preview()

        log.info("Game started (lives=%d, high score=%d)", self.state.lives, self.high_score)
        if get_sink('session') is None:
            register_sink('session', create_sink_for_module('session'))
        emit_record('session', {
            'type': 'start',
            'lives': self.state.lives,
            'high_score': self.high_score,
        })

    def return_to_title(self) -> None:
        """Leave the results screen; enemies are discarded."""
        self.registry.clear()
        self._pending_hands = None
        self._clear_frame()
        self.state.set_phase(Phase.TITLE)

    @property
    def phase(self) -> Phase:
        return self.state.phase

    # =========================================================================
    # Simulation
    # =========================================================================

    def tick(self, dt: float, hands: Optional[HandPair] = None) -> FrameSnapshot:
        """
        Advance the simulation by one step.

        Args:
            dt: Elapsed time in seconds
            hands: Player hands for this tick; sampled from the hand source
                when omitted (no hands at all if there is no source)

        Returns:
            FrameSnapshot describing the state after the step

        Raises:
            ValueError: If dt is negative
        """
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")

        self._clear_frame()
        if self.state.phase != Phase.PLAYING:
            return self.snapshot()

        self.ticks += 1
        if hands is None:
            hands = self._sample_hands(dt)

        self._last_despawned = self.registry.advance(dt)

        report = self.resolver.resolve(hands, self.registry.all())
        for result in report.results:
            self._apply(result)
            if self.state.is_game_over:
                break

        self.registry.remove_many(report.matched_ids)

        if self.state.is_game_over:
            self._game_over()
        else:
            self._advance_spawner(dt)

        return self.snapshot()

    def _sample_hands(self, dt: float) -> HandPair:
        if self.hand_source is None:
            return HandPair()
        self.hand_source.update(dt)
        return self.hand_source.snapshot()

    def _apply(self, result: CollisionResult) -> None:
        """Apply one judgement to score, lives and defeated count."""
        self._last_results.append(result)
        log.debug("%s", result)

        if result.outcome == Outcome.WIN:
            level_before = self.state.difficulty_level
            self.state.add_score(self.rules.score_per_win)
            self.state.increment_defeated_count()
            if self.state.difficulty_level != level_before:
                self._on_level_up()
        elif result.outcome == Outcome.LOSE:
            self.state.lose_life(self.rules.life_loss_on_lose)
        else:
            self.state.lose_life(self.rules.life_loss_on_draw)

    def _on_level_up(self) -> None:
        difficulty = self.curve.config_for(self.state.defeated_count)
        log.info("Level up: %d (speed x%.1f, every %.1fs)",
                 difficulty.level, difficulty.speed_multiplier, difficulty.spawn_interval)
        # A pending preview was drawn with the old pattern
        if self._pending_hands is not None:
            self._prepare_preview()

    def _advance_spawner(self, dt: float) -> None:
        self.spawn_accumulator += dt
        difficulty = self.curve.config_for(self.state.defeated_count)
        if self.spawn_accumulator < difficulty.spawn_interval:
            return

        speed = self.curve.speed_for(difficulty)
        hands = self._pending_hands
        if hands is None:
            hands = self.curve.generate_next_hands(difficulty)
        self._pending_hands = None

        preview = self.registry.preview
        for side, hand in hands.items():
            if preview is not None and preview.side == side:
                enemy = self.registry.consume_preview(speed)
                preview = None
            else:
                enemy = self.registry.spawn(hand, side, speed)
            self._last_spawned.append(enemy)
        self.registry.clear_preview()
        self.spawn_accumulator = 0.0

        if self.rules.preview_enabled:
            self._prepare_preview()

    def _prepare_preview(self) -> None:
        """Pick the next hands now and telegraph one of them."""
        difficulty = self.curve.config_for(self.state.defeated_count)
        self._pending_hands = self.curve.generate_next_hands(difficulty)
        side, hand = next(self._pending_hands.items())
        self.registry.set_preview(hand, side)

    def _game_over(self) -> None:
        score = self.state.score
        self.state.set_phase(Phase.GAME_OVER)
        self.registry.clear_preview()
        self._pending_hands = None

        self.is_new_record = self.high_scores.save_high_score(score)
        if self.is_new_record:
            self.high_score = score

        log.info("Game over: score=%d level=%d defeated=%d%s",
                 score, self.state.difficulty_level, self.state.defeated_count,
                 " (new record)" if self.is_new_record else "")
        emit_record('session', {
            'type': 'game_over',
            'score': score,
            'level': self.state.difficulty_level,
            'defeated': self.state.defeated_count,
            'ticks': self.ticks,
            'new_record': self.is_new_record,
        })

    # =========================================================================
    # Renderer snapshot
    # =========================================================================

    def _clear_frame(self) -> None:
        self._last_results = []
        self._last_spawned = []
        self._last_despawned = []

    def snapshot(self) -> FrameSnapshot:
        """Read-only view of the state and enemies after the last tick."""
        return FrameSnapshot(
            phase=self.state.phase,
            score=self.state.score,
            lives=self.state.lives,
            defeated_count=self.state.defeated_count,
            difficulty_level=self.state.difficulty_level,
            enemies=self.registry.all(),
            results=list(self._last_results),
            spawned=list(self._last_spawned),
            despawned=list(self._last_despawned),
        )
