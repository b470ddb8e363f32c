"""A character whose running speed follows a fatigue-driven state machine."""

from .character import ThirdPersonCharacter

RUN_SPEED = 300.0
SPRINT_SPEED = 600.0
WALK_SPEED = 100.0
DEFAULT_MAX_ENERGY = 5.0


class RunningState:
    """A state of a running character; the base reacts to nothing."""

    def __init__(self):
        self.context = None

    def on_enter_state(self, context):
        """Remember the character this state now drives."""
        self.context = context

    def on_tick(self, delta_time):
        """React to the passing of time."""

    def on_acceleration_start(self):
        """React to the acceleration input being pressed."""

    def on_acceleration_end(self):
        """React to the acceleration input being released."""

    def _require_context(self):
        if self.context is None:
            raise RuntimeError(f"{type(self).__name__} has not been entered")
        return self.context

    def _switch_to(self, state_class):
        self._require_context().change_state(state_class())


class RunState(RunningState):
    """Normal running: energy recovers, acceleration starts a sprint."""

    def on_enter_state(self, context):
        super().on_enter_state(context)
        context.movement.max_walk_speed = RUN_SPEED

    def on_tick(self, delta_time):
        context = self._require_context()
        context.energy = min(context.energy + delta_time, context.max_energy)

    def on_acceleration_start(self):
        self._switch_to(SprintState)


class SprintState(RunningState):
    """Sprinting: energy drains; exhaustion forces a walk."""

    def on_enter_state(self, context):
        super().on_enter_state(context)
        context.movement.max_walk_speed = SPRINT_SPEED

    def on_tick(self, delta_time):
        context = self._require_context()
        context.energy -= delta_time
        if context.energy <= 0.0:
            context.energy = 0.0
            self._switch_to(WalkState)

    def on_acceleration_end(self):
        self._switch_to(RunState)


class WalkState(RunningState):
    """Walking while exhausted: energy recovers until running resumes."""

    def on_enter_state(self, context):
        super().on_enter_state(context)
        context.movement.max_walk_speed = WALK_SPEED

    def on_tick(self, delta_time):
        context = self._require_context()
        context.energy += delta_time
        if context.energy >= context.max_energy:
            context.energy = context.max_energy
            self._switch_to(RunState)


class RunningCharacter(ThirdPersonCharacter):
    """Third-person character that runs, sprints and walks depending on energy."""

    def __init__(self, max_energy=DEFAULT_MAX_ENERGY):
        super().__init__()
        self.max_energy = float(max_energy)
        self.energy = self.max_energy
        self.current_state = None

    def change_state(self, state):
        """Make ``state`` current and enter it."""
        self.current_state = state
        state.on_enter_state(self)
        return state

    def begin_play(self):
        """Start in the running state."""
        return self.change_state(RunState())

    def _state(self):
        if self.current_state is None:
            raise RuntimeError("begin_play() must be called first")
        return self.current_state

    def tick(self, delta_time):
        state = self._state()
        position = super().tick(delta_time)
        state.on_tick(delta_time)
        return position

    def start_acceleration(self):
        self._state().on_acceleration_start()

    def stop_acceleration(self):
        self._state().on_acceleration_end()