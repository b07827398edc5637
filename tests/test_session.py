"""
Session lifecycle and simulation step tests.

The world is 600x400: the player bounces when y > 388 and the trajectory is
y = 0.1 * t^2 + 120.
"""

import pytest

from conftest import RecordingAudio, StubRandom
from entities import make_enemy
from layout import World
from scheduler import FixedTickDriver
from score import MemoryStore
from session import Session

GREEN = (0, 220, 0, 230)


def playing_alone(session):
    """Started session with no enemies and no leftover particles."""
    session.start()
    session.enemies = []
    session.particles.clear()
    return session


class TestStart:
    def test_fresh_session(self, session):
        assert session.start()
        assert session.playing
        assert session.score == 0
        assert len(session.enemies) == 2
        assert session.player is not None
        assert len(session.particles) == 0
        assert len(session.notifications) == 0
        assert session.t == 0
        assert session.direction == 1

    def test_spawn_positions(self, session):
        session.start()
        assert (session.player.x, session.player.y) == (450, 0)
        assert session.player.size == 12
        assert session.player.speed == 4
        top, bottom = session.enemies
        assert (top.x, top.y, top.speed) == (0, 180, 2.5)
        assert (bottom.x, bottom.y, bottom.speed) == (0, 386, 2.0)
        assert top.size == bottom.size == 7

    def test_start_while_playing_is_ignored(self, session):
        session.start()
        session.player.pos.x = 123
        assert not session.start()
        assert session.player.x == 123

    def test_start_plays_cues(self, session, audio):
        session.start()
        assert ("stop", "intro") in audio.calls
        assert ("seek", "background", 1.0) in audio.calls
        assert audio.played("start")
        assert audio.played("background")

    def test_restart_clears_previous_game(self, session):
        session.start()
        session.tracker.score = 7
        session.emit(GREEN, 0, 0, 3, 3, 10)
        session.notifications.notify("10", 0, 0)
        session.stop()
        assert session.start()
        assert session.score == 0
        assert len(session.particles) == 0
        assert len(session.notifications) == 0
        assert len(session.enemies) == 2

    def test_first_step_bounces_enemies_off_left_wall(self, session):
        session.start()
        session.step()
        assert all(e.going_right for e in session.enemies)
        assert len(session.particles) == 30
        assert [e.speed for e in session.enemies] == [2.5, 2.0]


class TestPlayer:
    def test_follows_trajectory(self, session):
        playing_alone(session)
        session.step()
        assert session.t == 2
        assert session.player.y == pytest.approx(120.4)

    def test_bounce_flips_direction_and_scores(self, session, audio):
        playing_alone(session)
        session.t = 52
        session.player.pos.y = 389
        session.step()
        assert session.direction == -1
        assert session.score == 1
        assert session.t == 50
        assert session.player.y == pytest.approx(370.0)
        assert len(session.particles) == 15
        assert audio.played("bounce")
        assert len(session.notifications) == 0

    def test_no_bounce_at_exact_floor(self, session):
        playing_alone(session)
        session.player.pos.y = 388
        session.step()
        assert session.direction == 1
        assert session.score == 0

    def test_one_flip_per_frame_and_one_point_per_flip(self, session):
        playing_alone(session)
        flips = 0
        last_direction = session.direction
        last_score = session.score
        for _ in range(600):
            session.step()
            if session.direction != last_direction:
                flips += 1
            assert session.score - last_score in (0, 1)
            last_direction = session.direction
            last_score = session.score
        assert flips == session.score
        assert session.score > 5

    def test_player_stays_between_floor_and_apex(self, session):
        playing_alone(session)
        for _ in range(400):
            session.step()
            assert 120 <= session.player.y <= 400

    def test_milestone(self, session, audio):
        playing_alone(session)
        session.tracker.score = 9
        session.player.pos.y = 389
        session.step()
        assert session.score == 10
        assert len(session.notifications) == 1
        n = session.notifications.notifications[0]
        assert n.text == "10"
        assert n.pos.y == pytest.approx(389 - 70)
        assert n.scale == 4.0
        assert n.rgb == (0, 220, 220)
        # 15 for the bounce plus `score` for the milestone burst
        assert len(session.particles) == 25
        assert sum(1 for p in session.particles if p.size == 5) == 10
        assert audio.played("ping")

    def test_non_milestone_has_no_notification(self, session, audio):
        playing_alone(session)
        session.tracker.score = 10
        session.player.pos.y = 389
        session.step()
        assert session.score == 11
        assert len(session.notifications) == 0
        assert not audio.played("ping")

    def test_move_past_right_bound_is_rejected(self, session):
        playing_alone(session)
        session.player.pos.x = 588
        session.player.going_right = True
        session.step()
        assert session.player.x == 588

    def test_move_past_left_bound_is_rejected(self, session):
        playing_alone(session)
        session.player.pos.x = 14
        session.player.going_left = True
        session.step()
        assert session.player.x == 14

    def test_move_within_bounds(self, session):
        playing_alone(session)
        session.player.pos.x = 300
        session.player.going_left = True
        session.step()
        assert session.player.x == 296

    def test_both_intents_cancel(self, session):
        playing_alone(session)
        session.player.pos.x = 300
        session.player.going_left = True
        session.player.going_right = True
        session.step()
        assert session.player.x == 300


class TestEnemies:
    def test_right_wall_bounce(self, session):
        playing_alone(session)
        enemy = make_enemy(600 - 7, 50, 7, 2.0, GREEN)
        enemy.going_right = True
        session.enemies = [enemy]
        session.step()
        assert not enemy.going_right
        assert enemy.speed == pytest.approx(2.3)
        assert len(session.particles) == 15

    def test_left_wall_bounce_keeps_speed(self, session):
        playing_alone(session)
        enemy = make_enemy(7, 50, 7, 2.0, GREEN)
        session.enemies = [enemy]
        session.step()
        assert enemy.going_right
        assert enemy.speed == 2.0
        assert enemy.x == 5
        assert len(session.particles) == 15

    def test_patrol_moves_by_speed(self, session):
        playing_alone(session)
        enemy = make_enemy(100, 50, 7, 2.5, GREEN)
        enemy.going_right = True
        session.enemies = [enemy]
        session.step()
        assert enemy.x == 102.5
        assert len(session.particles) == 0

    def test_speed_never_decreases(self, session):
        playing_alone(session)
        # y=50 keeps the enemy out of the player's vertical range.
        enemy = make_enemy(300, 50, 7, 2.0, GREEN)
        session.enemies = [enemy]
        speeds = [enemy.speed]
        for _ in range(2000):
            session.step()
            speeds.append(enemy.speed)
        assert session.playing
        assert all(b >= a for a, b in zip(speeds, speeds[1:]))
        assert speeds[-1] > 2.0


class TestCollision:
    def _setup(self, session):
        playing_alone(session)
        session.player.pos.x = 300
        session.player.pos.y = 200
        # After one step the player sits at (300, 120.4).
        near = make_enemy(305, 120.4, 7, 2.0, GREEN)
        far = make_enemy(100, 300, 7, 2.0, GREEN)
        far.going_right = True
        session.enemies = [far, near]
        return near, far

    def test_hit_ends_game(self, session, audio):
        near, far = self._setup(session)
        hit = session.find_intersections()
        assert hit is None
        session.step()
        assert not session.playing
        assert session.enemies == [far]
        assert not near.alive
        assert sum(1 for p in session.particles if p.size == 6) == 60
        assert sum(1 for p in session.particles if p.size == 3) == 30
        assert audio.played("dead")
        assert ("stop", "background") in audio.calls

    def test_world_freezes_after_hit_but_particles_run(self, session):
        near, far = self._setup(session)
        session.particles.rng = StubRandom(0.75)
        session.step()
        px, py = session.player.x, session.player.y
        fx = far.x
        first = session.particles.particles[0]
        before = (first.pos.x, first.pos.y)
        session.step()
        assert (session.player.x, session.player.y) == (px, py)
        assert far.x == fx
        assert (first.pos.x, first.pos.y) != before

    def test_highscore_updated_when_beaten(self, world, audio):
        store = MemoryStore({"highscore": 3})
        session = Session(world=world, audio=audio, store=store, rng=StubRandom(0.5))
        assert session.highscore == 3
        self._setup(session)
        session.tracker.score = 5
        session.step()
        assert session.highscore == 5
        assert store.get("highscore") == 5

    def test_highscore_kept_when_not_beaten(self, world, audio):
        store = MemoryStore({"highscore": 10})
        session = Session(world=world, audio=audio, store=store, rng=StubRandom(0.5))
        self._setup(session)
        session.tracker.score = 5
        session.step()
        assert session.highscore == 10
        assert store.get("highscore") == 10
        assert session.score == 5


class TestStop:
    def test_external_stop(self, session, audio):
        session.start()
        session.tracker.score = 4
        assert session.stop() == 4
        assert not session.playing
        assert session.games_played == 1
        assert audio.played("intro")
        # Entities stay until the next start.
        assert len(session.enemies) == 2
        assert session.player is not None

    def test_stop_when_idle_is_noop(self, session):
        session.stop()
        assert session.games_played == 0

    def test_absent_highscore_initialised_to_zero(self, world):
        store = MemoryStore()
        Session(world=world, store=store)
        assert store.get("highscore") == 0

    def test_idle_step_only_moves_particles(self, session):
        session.emit(GREEN, 0, 0, 3, 3, 5)
        session.step()
        assert session.player is None
        assert len(session.particles) == 5


class TestDriver:
    def test_fixed_ticks_drive_session(self, session):
        playing_alone(session)
        driver = FixedTickDriver(lambda dt: session.step())
        driver.run(10)
        assert driver.frames == 10
        assert session.t == 20

    def test_deterministic_with_same_seed(self):
        import random

        results = []
        for _ in range(2):
            s = Session(world=World(600, 400), audio=RecordingAudio(), rng=random.Random(7))
            s.start()
            for _ in range(300):
                s.step()
            results.append((s.score, s.playing, len(s.particles), [e.x for e in s.enemies]))
        assert results[0] == results[1]
