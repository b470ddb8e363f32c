"""Base characters: movement settings, controller rotation and directional input."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

Vector = tuple[float, float, float]


@dataclass
class Rotator:
    """Rotation in degrees."""

    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0


@dataclass
class CharacterMovement:
    """Movement settings of a character."""

    orient_rotation_to_movement: bool = True
    rotation_rate: Rotator = field(default_factory=lambda: Rotator(0.0, 540.0, 0.0))
    jump_z_velocity: float = 600.0
    air_control: float = 0.2
    max_walk_speed: float = 600.0


@dataclass
class SpringArm:
    """Camera boom that keeps the camera behind the character."""

    target_arm_length: float = 300.0
    use_pawn_control_rotation: bool = True


@dataclass
class Camera:
    """Camera attached to the end of a spring arm."""

    use_pawn_control_rotation: bool = False


class Character:
    """A capsule-shaped character that moves by accumulated input."""

    def __init__(self):
        self.capsule_radius = 42.0
        self.capsule_half_height = 96.0
        # Controller rotation only affects the camera.
        self.use_controller_rotation_pitch = False
        self.use_controller_rotation_yaw = False
        self.use_controller_rotation_roll = False
        self.movement = CharacterMovement()
        self.position: Vector = (0.0, 0.0, 0.0)
        self.pending_input: Vector = (0.0, 0.0, 0.0)

    def add_movement_input(self, direction, value):
        """Add a scaled direction to the input consumed on the next tick."""
        self.pending_input = tuple(
            p + d * value for p, d in zip(self.pending_input, direction)
        )

    def tick(self, delta_time):
        """Move by the pending input, clamped to unit length, at walking speed."""
        length = math.sqrt(sum(c * c for c in self.pending_input))
        scale = 1.0 / length if length > 1.0 else 1.0
        step = self.movement.max_walk_speed * delta_time * scale
        self.position = tuple(
            p + c * step for p, c in zip(self.position, self.pending_input)
        )
        self.pending_input = (0.0, 0.0, 0.0)
        return self.position


class ThirdPersonCharacter(Character):
    """Character with a follow camera, driven by axis input relative to the controller yaw."""

    def __init__(self):
        super().__init__()
        self.base_turn_rate = 45.0
        self.base_look_up_rate = 45.0
        self.camera_boom = SpringArm()
        self.follow_camera = Camera()
        self.control_rotation = Rotator()
        self.possessed = True

    def add_controller_yaw_input(self, value):
        if self.possessed:
            self.control_rotation.yaw += value

    def add_controller_pitch_input(self, value):
        if self.possessed:
            self.control_rotation.pitch += value

    def turn_at_rate(self, rate, delta_seconds):
        """Turn at a normalized rate, where 1.0 is the full base turn rate."""
        self.add_controller_yaw_input(rate * self.base_turn_rate * delta_seconds)

    def look_up_at_rate(self, rate, delta_seconds):
        """Look up or down at a normalized rate."""
        self.add_controller_pitch_input(rate * self.base_look_up_rate * delta_seconds)

    def _yaw_axes(self) -> tuple[Vector, Vector]:
        yaw = math.radians(self.control_rotation.yaw)
        cy, sy = math.cos(yaw), math.sin(yaw)
        return (cy, sy, 0.0), (-sy, cy, 0.0)

    def move_forward(self, value):
        if self.possessed and value != 0.0:
            forward, _ = self._yaw_axes()
            self.add_movement_input(forward, value)

    def move_right(self, value):
        if self.possessed and value != 0.0:
            _, right = self._yaw_axes()
            self.add_movement_input(right, value)