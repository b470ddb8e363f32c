# behavioral_patterns

This package provides small, engine-free models of game characters. Each model
is built around one behavioural design pattern.

- **Command** (`behavioral_patterns.commands`): `MoveForwardCommand`,
  `MoveBackCommand`, `MoveLeftCommand` and `MoveRightCommand` act on a
  `Receiver`. Undoing a command makes the opposite move. An `Invoker` runs
  commands and keeps their history. `Invoker.undo()` undoes the most recent
  command and returns it. When the history is empty it returns `None`.
- **Observer** (`behavioral_patterns.observer`): a `Subject` keeps a list of
  `Observer` subscribers with no duplicates. `notify(message)` calls
  `update(message)` on each subscriber, in the order they subscribed.
- **Strategy** (`behavioral_patterns.strategy`): `OutputStrategy` is the
  abstract way of emitting a message. `StreamOutput(stream)` prints each
  message as a line to `stream`. With no stream given, it prints to standard
  output.
- **State** (`behavioral_patterns.running`): a `RunningCharacter` moves
  between `RunState` (top speed 300), `SprintState` (600) and `WalkState`
  (100).
  - Energy starts at `max_energy`, which defaults to 5.
  - Energy drains while the character sprints. When it reaches zero, the
    character is forced to walk.
  - Energy recovers while the character runs or walks. A walking character
    runs again once energy is full.
  - `start_acceleration()` turns running into sprinting.
  - `stop_acceleration()` turns sprinting back into running.
  - Call `begin_play()` before `tick()`. Until then, `tick()` raises
    `RuntimeError`.
- **Visitor** (`behavioral_patterns.visitor`): the items `MagicCrystal`,
  `Potion` and `Trap` visit the characters `Elf`, `Monster` and `Wizard`.
  - Each character reacts with its own line, in Russian.
  - The line is recorded in the character's `said` list and returned from
    `accept()`.
  - `Element` is abstract. Instantiating a subclass that does not override
    `accept` raises `TypeError`.

`behavioral_patterns.character` provides the base classes:

- `Character` has `CharacterMovement` settings. `add_movement_input()`
  accumulates input. `tick(delta_time)` moves the character by that input,
  clamped to unit length, at `movement.max_walk_speed`, and returns the new
  position.
- `ThirdPersonCharacter` adds a control rotation and turn and look-up rates.
  `move_forward()` and `move_right()` move relative to the controller's yaw.

## What it does not do

The package has no rendering, no input devices, no game loop and no command
to run. You call the methods yourself and advance time with `tick()`.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Examples

Command:

```python
from behavioral_patterns.commands import Invoker, MoveForwardCommand, Receiver


class Logger(Receiver):
    def __init__(self):
        self.moves = []

    def move_forward(self):
        self.moves.append("forward")

    def move_back(self):
        self.moves.append("back")

    def move_left(self):
        self.moves.append("left")

    def move_right(self):
        self.moves.append("right")


logger = Logger()
invoker = Invoker()
invoker.run_command(MoveForwardCommand(logger))
invoker.undo()
print(logger.moves)  # ['forward', 'back']
```

State:

```python
from behavioral_patterns.running import RunningCharacter, WalkState

runner = RunningCharacter()
runner.begin_play()
runner.start_acceleration()     # now sprinting at 600
runner.tick(5.0)                # energy runs out
print(runner.energy)            # 0.0
print(isinstance(runner.current_state, WalkState))  # True
print(runner.movement.max_walk_speed)               # 100.0
```

Visitor:

```python
from behavioral_patterns.visitor import Elf, Trap

elf = Elf()
print(elf.accept(Trap()))  # Могу перепрыгнуть
```

## Running the tests

```
pytest
```