"""
Window startup error handling, with the window class replaced by a stub.
"""

import logging

import pytest

try:
    import pyglet

    import game
except Exception as e:  # no windowing libraries on this machine
    pytest.skip(f"pyglet window backend unavailable: {e}", allow_module_level=True)


def _failing_window(exc):
    def factory(**kwargs):
        raise exc

    return factory


class TestCreateGame:
    def test_missing_gl_config_is_wrapped(self, monkeypatch):
        monkeypatch.setattr(game, "Game", _failing_window(pyglet.window.NoSuchConfigException("no config")))
        with pytest.raises(game.UnsupportedSurfaceError) as info:
            game.create_game()
        assert isinstance(info.value.__cause__, pyglet.window.NoSuchConfigException)

    def test_context_failure_is_wrapped(self, monkeypatch):
        monkeypatch.setattr(game, "Game", _failing_window(pyglet.gl.ContextException("no context")))
        with pytest.raises(game.UnsupportedSurfaceError, match="no context"):
            game.create_game()

    def test_other_errors_propagate(self, monkeypatch):
        monkeypatch.setattr(game, "Game", _failing_window(RuntimeError("boom")))
        with pytest.raises(RuntimeError, match="boom"):
            game.create_game()


class TestMain:
    def test_unsupported_surface_is_logged_and_reported(self, monkeypatch, capsys, caplog):
        monkeypatch.setattr(game, "Game", _failing_window(pyglet.gl.ContextException("no context")))
        with caplog.at_level(logging.ERROR, logger="game"):
            game.main()
        assert game.SURFACE_NOTICE in capsys.readouterr().out
        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert "no context" in errors[0].getMessage()
