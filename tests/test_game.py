import numpy as np
import pytest

from chaosgame.game import ChaosGame, GameState
from chaosgame.orbit import iterate_affine, iterate_julia
from chaosgame.transforms import pack_transforms
from chaosgame.vectors import Vector2D


def make_game(description, seed=42, batch_size=10_000):
    return ChaosGame(description, 100, 80, seed=seed, batch_size=batch_size)


def inside(point, description):
    return (
        description.min_coords.x0 <= point.x0 <= description.max_coords.x0
        and description.min_coords.x1 <= point.x1 <= description.max_coords.x1
    )


class TestOrbitKernels:

    def test_affine_kernel_follows_transforms(self, barnsley_description):
        transforms = barnsley_description.transforms
        choices = np.array([1, 1, 2, 0, 3, 1, 2, 2], dtype=np.int64)
        matrices, vectors = pack_transforms(transforms)

        points = iterate_affine(matrices, vectors, choices, 0.0, 5.0)

        point = Vector2D(0.0, 5.0)
        for k, i in enumerate(choices):
            point = transforms[i].transform(point)
            assert points[k].tolist() == pytest.approx([point.x0, point.x1])

    def test_julia_kernel_follows_transforms(self, julia_description):
        transforms = julia_description.transforms
        choices = np.array([0, 1, 1, 0, 0, 1], dtype=np.int64)
        constants, signs = pack_transforms(transforms)

        points = iterate_julia(constants, signs, choices, 0.3, -0.2)

        point = Vector2D(0.3, -0.2)
        for k, i in enumerate(choices):
            point = transforms[i].transform(point)
            assert points[k].tolist() == pytest.approx([point.x0, point.x1])

    def test_no_steps(self, sierpinski_description):
        matrices, vectors = pack_transforms(sierpinski_description.transforms)
        points = iterate_affine(matrices, vectors, np.empty(0, dtype=np.int64), 0.5, 0.5)
        assert points.shape == (0, 2)


class TestNewGame:

    def test_initial_state(self, sierpinski_description):
        game = make_game(sierpinski_description)
        assert game.state is GameState.IDLE
        assert game.current_point == Vector2D(0.5, 0.5)
        assert game.canvas.shape == (80, 100)
        assert not game.current_canvas_snapshot().any()

    def test_new_game_replaces_canvas_and_point(self, sierpinski_description, julia_description):
        game = make_game(sierpinski_description)
        game.run_iterations(1000)

        game.new_game(julia_description, (40, 30))

        assert game.description is julia_description
        assert game.canvas.shape == (30, 40)
        assert game.current_point == Vector2D(0.0, 0.0)
        assert not game.current_canvas_snapshot().any()

    def test_reset_current_point(self, barnsley_description):
        game = make_game(barnsley_description)
        game.run_iterations(10)
        game.reset_current_point()
        assert game.current_point == barnsley_description.center

    def test_clear_canvas(self, sierpinski_description):
        game = make_game(sierpinski_description)
        game.run_iterations(500)
        game.clear_canvas()
        snapshot = game.current_canvas_snapshot()
        assert not snapshot.any()
        assert snapshot.shape == (80, 100)


class TestIteration:

    def test_step_plots_one_point(self, sierpinski_description):
        game = make_game(sierpinski_description)
        for _ in range(100):
            game.step()
            assert inside(game.current_point, sierpinski_description)
        assert game.current_canvas_snapshot().sum() == 100

    def test_every_sierpinski_point_lands_on_canvas(self, sierpinski_description):
        game = make_game(sierpinski_description)
        game.run_iterations(25_000)
        assert game.current_canvas_snapshot().sum() == 25_000
        assert inside(game.current_point, sierpinski_description)

    def test_julia_orbit_draws(self, julia_description):
        game = make_game(julia_description)
        game.run_iterations(5000)
        assert game.current_canvas_snapshot().sum() > 0
        assert game.state is GameState.IDLE

    def test_same_seed_same_canvas(self, barnsley_description):
        first = make_game(barnsley_description, seed=7)
        second = make_game(barnsley_description, seed=7)
        first.run_iterations(20_000)
        second.run_iterations(20_000)
        np.testing.assert_array_equal(first.current_canvas_snapshot(), second.current_canvas_snapshot())
        assert first.current_point == second.current_point

    def test_orbit_continues_across_runs(self, sierpinski_description):
        game = make_game(sierpinski_description)
        game.run_iterations(100)
        point = game.current_point
        game.request_steps(1)
        game.run_steps()
        assert game.current_point != point

    def test_snapshot_is_a_copy(self, sierpinski_description):
        game = make_game(sierpinski_description)
        game.run_iterations(100)
        snapshot = game.current_canvas_snapshot()
        snapshot[:] = 0
        assert game.current_canvas_snapshot().sum() == 100


class TestResumableRun:

    def test_run_steps_in_batches(self, sierpinski_description):
        game = make_game(sierpinski_description, batch_size=10_000)
        game.request_steps(25_000)
        assert game.state is GameState.RUNNING

        assert game.run_steps() is True
        assert game.remaining_steps == 15_000
        assert game.run_steps() is True
        assert game.run_steps() is False
        assert game.remaining_steps == 0
        assert game.state is GameState.IDLE
        assert game.current_canvas_snapshot().sum() == 25_000

    def test_run_steps_with_explicit_count(self, sierpinski_description):
        game = make_game(sierpinski_description)
        game.request_steps(10)
        assert game.run_steps(3) is True
        assert game.remaining_steps == 7
        assert game.run_steps(100) is False
        assert game.current_canvas_snapshot().sum() == 10

    def test_run_steps_without_request_does_nothing(self, sierpinski_description):
        game = make_game(sierpinski_description)
        assert game.run_steps() is False
        assert not game.current_canvas_snapshot().any()

    def test_request_zero_steps(self, sierpinski_description):
        game = make_game(sierpinski_description)
        game.request_steps(0)
        assert game.state is GameState.IDLE
        assert game.run_steps() is False

    def test_negative_steps_are_rejected(self, sierpinski_description):
        game = make_game(sierpinski_description)
        with pytest.raises(ValueError):
            game.request_steps(-1)

    @pytest.mark.parametrize("steps", [0, -5])
    def test_non_positive_batch_is_rejected(self, sierpinski_description, steps):
        game = make_game(sierpinski_description)
        game.request_steps(10)
        with pytest.raises(ValueError):
            game.run_steps(steps)
        assert game.remaining_steps == 10
        assert game.state is GameState.RUNNING
        assert not game.current_canvas_snapshot().any()

    def test_stop_keeps_partial_progress(self, sierpinski_description):
        game = make_game(sierpinski_description, batch_size=1000)
        game.request_steps(5000)
        game.run_steps()
        game.run_steps()

        game.stop()

        assert game.state is GameState.STOPPED
        assert game.remaining_steps == 0
        assert game.run_steps() is False
        assert game.current_canvas_snapshot().sum() == 2000
