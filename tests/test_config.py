import pytest

from src.slither.config import Config, derive_skip_window, SELF_COLLISION_SKIP
from src.slither.main import parse_args


def test_defaults_validate():
    cfg = Config().validate()
    assert cfg.growth_batch == 8
    assert cfg.self_collision_skip == 16
    assert cfg.boost_factor == 2.0


@pytest.mark.parametrize("kwargs", [
    {"fps": 0},
    {"speed": -1},
    {"boost_factor": 0.5},
    {"growth_batch": -1},
    {"self_collision_skip": -1},
    {"food_x": (10, 10)},
])
def test_validate_rejects(kwargs):
    with pytest.raises(ValueError):
        Config(**kwargs).validate()


def test_derived_skip_window_fits_default():
    # 400 px/s at 60 fps: 16 ms frames, 80 px of path / 6.4 px per frame
    assert derive_skip_window(40, 400, 60) == 12
    assert derive_skip_window(40, 400, 60) <= SELF_COLLISION_SKIP
    assert Config().min_skip == 12


def test_derived_skip_window_grows_with_fps():
    assert derive_skip_window(40, 400, 120) > derive_skip_window(40, 400, 60)


def test_derived_skip_window_uses_whole_milliseconds():
    # 1000 // 60 = 16 ms, shorter than 1000 / 60, so one more segment is skipped
    assert derive_skip_window(40, 400, 60) == derive_skip_window(40, 400, 62)
    # 50 fps: 20 ms frames, 8 px per frame, 80 / 8 = 10 frames of path
    assert derive_skip_window(40, 400, 50) == 9


def test_derived_skip_window_rejects_bad_geometry():
    with pytest.raises(ValueError):
        derive_skip_window(0, 400, 60)


def test_parse_args():
    cfg = parse_args(["--seed", "5", "--growth", "3", "--skip", "20", "--event-boost"])
    assert cfg.seed == 5
    assert cfg.growth_batch == 3
    assert cfg.self_collision_skip == 20
    assert cfg.boost_from_key_state is False
    assert parse_args([]).boost_from_key_state is True
