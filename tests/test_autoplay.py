"""Tests for the scripted autoplay session and its text front end."""

import random

from auraball.autoplay import pick_miss_point, play_session
from auraball.cli import main
from auraball.engine import Ball, GameConfig, GameState


def collect(**kwargs):
    return list(play_session(**kwargs))


class TestPlaySession:
    def test_perfect_bot_wins_without_penalty(self):
        events = collect(seed=3, accuracy=100, click_every=10)
        names = [e for e, _ in events]
        assert names == ["start", "hit", "hit", "hit", "hit", "win"]
        assert events[-1][1]["score"] == 1000
        assert events[-1][1]["clicks"] == 4
        assert events[-1][1]["frame"] == 40

    def test_hopeless_bot_times_out(self):
        events = collect(seed=3, accuracy=0, click_every=10, max_frames=100)
        names = [e for e, _ in events]
        assert names == ["start"] + ["miss"] * 10 + ["timeout"]
        end = events[-1][1]
        assert end["score"] == 1000 - 10 * 25
        assert end["balls_left"] == 4

    def test_same_seed_same_session(self):
        assert collect(seed=11, accuracy=60) == collect(seed=11, accuracy=60)

    def test_score_only_goes_down(self):
        last = 1000
        for event, data in play_session(seed=5, accuracy=50):
            if event in ("hit", "miss"):
                assert data["score"] <= last
                if event == "miss":
                    assert data["score"] == last - 25
                last = data["score"]

    def test_no_balls_is_an_instant_win(self):
        events = collect(cfg=GameConfig(num_balls=0), seed=1)
        assert [e for e, _ in events] == ["start", "win"]

    def test_miss_point_avoids_balls(self):
        cfg = GameConfig()
        state = GameState(config=cfg, balls=[Ball(250, 250, 2, 2)])
        rng = random.Random(0)
        for _ in range(100):
            px, py = pick_miss_point(state, rng)
            assert not state.balls[0].contains(px, py)

    def test_miss_point_falls_back_off_canvas(self):
        cfg = GameConfig(width=10, height=10)
        # One ball covering the whole tiny canvas
        state = GameState(config=cfg, balls=[Ball(5, 5, 0, 0, diameter=100)])
        px, py = pick_miss_point(state, random.Random(0))
        assert px < 0 and py < 0


class TestCli:
    def test_prints_winning_game(self, capsys):
        rc = main(["--seed", "2", "--accuracy", "100", "--click-every", "5"])
        out = capsys.readouterr().out
        assert rc == 0
        assert out.startswith("Start of play - 4 balls - score 1000")
        assert out.count("Good job!") == 4
        assert "Final Score: 1000" in out

    def test_prints_misses_and_timeout(self, capsys):
        rc = main(["--seed", "2", "--accuracy", "0", "--click-every", "5", "--max-frames", "10"])
        out = capsys.readouterr().out
        assert rc == 0
        assert out.count("Gotcha!") == 2
        assert "Out of time after 10 frames. Score: 950, balls left: 4" in out

    def test_ball_count_flag(self, capsys):
        main(["--seed", "2", "--balls", "2", "--accuracy", "100"])
        out = capsys.readouterr().out
        assert "2 balls" in out
        assert out.count("Good job!") == 2

    def test_rejects_bad_accuracy(self, capsys):
        assert main(["--accuracy", "150"]) == 2
        assert "Invalid input" in capsys.readouterr().out

    def test_rejects_zero_balls(self, capsys):
        assert main(["--balls", "0"]) == 2

    def test_rejects_zero_click_interval(self, capsys):
        assert main(["--click-every", "0"]) == 2
