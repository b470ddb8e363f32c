import pytest

from behavioral_patterns.character import Character, ThirdPersonCharacter

ORIGIN = (0.0, 0.0, 0.0)
FORWARD = (1.0, 0.0, 0.0)


def _attr(obj, path):
    for name in path.split("."):
        obj = getattr(obj, name)
    return obj


@pytest.fixture
def character():
    return Character()


@pytest.fixture
def third_person():
    return ThirdPersonCharacter()


@pytest.mark.parametrize(
    "factory, path, expected",
    [
        (Character, "capsule_radius", 42.0),
        (Character, "capsule_half_height", 96.0),
        (Character, "movement.rotation_rate.yaw", 540.0),
        (Character, "movement.jump_z_velocity", 600.0),
        (Character, "movement.air_control", pytest.approx(0.2)),
        (Character, "use_controller_rotation_yaw", False),
        (ThirdPersonCharacter, "base_turn_rate", 45.0),
        (ThirdPersonCharacter, "base_look_up_rate", 45.0),
        (ThirdPersonCharacter, "camera_boom.target_arm_length", 300.0),
        (ThirdPersonCharacter, "camera_boom.use_pawn_control_rotation", True),
        (ThirdPersonCharacter, "follow_camera.use_pawn_control_rotation", False),
    ],
)
def test_defaults_from_source(factory, path, expected):
    assert _attr(factory(), path) == expected


@pytest.mark.parametrize("pushes", [1, 2])
def test_tick_clamps_and_consumes_pending_input(character, pushes):
    for _ in range(pushes):
        character.add_movement_input(FORWARD, 1.0)
    speed = character.movement.max_walk_speed
    for _ in range(2):
        character.tick(1.0)
        assert character.position[0] == pytest.approx(speed)
        assert character.pending_input == ORIGIN


def test_turn_at_rate_scales_by_base_rate(third_person):
    third_person.turn_at_rate(1.0, 1.0)
    assert third_person.control_rotation.yaw == pytest.approx(third_person.base_turn_rate)
    third_person.look_up_at_rate(-1.0, 1.0)
    assert third_person.control_rotation.pitch == pytest.approx(
        -third_person.base_look_up_rate
    )


def test_move_forward_and_right_follow_yaw(third_person):
    third_person.move_forward(1.0)
    assert third_person.pending_input == pytest.approx(FORWARD)
    third_person.tick(0.0)
    third_person.control_rotation.yaw = 90.0
    third_person.move_right(1.0)
    assert third_person.pending_input == pytest.approx((-1.0, 0.0, 0.0), abs=1e-9)


def test_zero_value_or_unpossessed_adds_nothing(third_person):
    third_person.move_forward(0.0)
    assert third_person.pending_input == ORIGIN
    third_person.possessed = False
    third_person.move_right(1.0)
    third_person.add_controller_yaw_input(10.0)
    assert third_person.pending_input == ORIGIN
    assert third_person.control_rotation.yaw == 0.0