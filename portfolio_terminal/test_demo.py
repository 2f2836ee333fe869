"""
Tests for the interactive demo loop.

Run with:  python -m pytest portfolio_terminal/test_demo.py -v
"""

import builtins

import yaml

from portfolio_terminal import demo
from portfolio_terminal.dispatcher import CommandDefinition, CommandDispatcher
from portfolio_terminal.session import TerminalSession


def feed_input(monkeypatch, lines):
    remaining = iter(lines)

    def fake_input(prompt=""):
        line = next(remaining, EOFError())
        if isinstance(line, BaseException):
            raise line
        return line
    monkeypatch.setattr(builtins, "input", fake_input)


def test_demo_session(tmp_path, monkeypatch, capsys):
    config = tmp_path / "demo.yaml"
    config.write_text(yaml.safe_dump({
        "console": {"quiet": True},
        "profile": {"name": "Demo Person", "skills": ["Python", "Go"]},
    }), encoding='utf-8')
    feed_input(monkeypatch, ["/skills go", "", "hello", "/nope", "/quit"])

    assert demo.main(["-c", str(config)]) == 0

    out = capsys.readouterr().out
    assert "Demo Person" in out
    assert "Skills: Go" in out
    assert "[chat] Chat is not available here" in out
    assert "Unknown command: /nope" in out
    assert "bye!" in out


def test_demo_stops_on_eof(tmp_path, monkeypatch, capsys):
    feed_input(monkeypatch, [])
    monkeypatch.chdir(tmp_path)
    assert demo.main(["-q"]) == 0
    assert "bye!" in capsys.readouterr().out


def test_demo_invalid_config(tmp_path, capsys):
    config = tmp_path / "bad.yaml"
    config.write_text(yaml.safe_dump({"terminal": {"prompt": ""}}), encoding='utf-8')
    assert demo.main(["-c", str(config)]) == 1


def test_demo_ctrl_c_at_prompt(tmp_path, monkeypatch, capsys):
    feed_input(monkeypatch, ["/about", KeyboardInterrupt(), "/about"])
    monkeypatch.chdir(tmp_path)
    assert demo.main(["-q"]) == 0
    out = capsys.readouterr().out
    assert out.rstrip().endswith("bye!")
    assert out.count("Anonymous Developer") == 2  # banner plus the one /about


def test_ctrl_c_during_command(monkeypatch, capsys):
    def interrupted(args):
        raise KeyboardInterrupt

    dispatcher = CommandDispatcher()
    dispatcher.register(CommandDefinition("slow", "", "/slow", interrupted))
    feed_input(monkeypatch, ["/slow", "/slow"])

    demo.run(TerminalSession(dispatcher), "> ")
    assert capsys.readouterr().out == "\nbye!\n"
