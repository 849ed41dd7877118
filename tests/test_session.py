from pathlib import Path

import pytest
from asciicanvas.canvas import Canvas
from asciicanvas.commands import Create, Line
from asciicanvas.config import DrawConfig
from asciicanvas.main import load_script, run
from asciicanvas.result import Err, Ok
from asciicanvas.session import DrawSession

SAMPLE = [
    "C 20 4",
    "L 1 2 6 2",
    "L 6 3 6 4",
    "R 14 1 18 3",
    "B 10 3 o",
]

SAMPLE_RESULT = "\n".join(
    [
        "----------------------",
        "|oooooooooooooXXXXXoo|",
        "|XXXXXXoooooooX   Xoo|",
        "|     XoooooooXXXXXoo|",
        "|     Xoooooooooooooo|",
        "----------------------",
    ]
)


def test_sample_script():
    session = DrawSession()
    outputs = session.run_script(SAMPLE)

    assert len(outputs) == 5
    assert outputs[0].splitlines()[1] == "|" + " " * 20 + "|"
    assert outputs[-1] == SAMPLE_RESULT


def test_apply_keeps_canvas_on_error():
    session = DrawSession()
    session.apply(Create(3, 3))
    before = session.canvas

    result = session.apply(Line(1, 1, 13, 1))

    assert isinstance(result, Err)
    assert session.canvas is before


def test_apply_ignores_empty_canvas():
    session = DrawSession()
    session.apply(Create(3, 3))
    before = session.canvas

    result = session.apply("not a command")  # type: ignore[arg-type]

    assert result == Ok(Canvas.empty())
    assert session.canvas is before


def test_execute_reports_errors():
    session = DrawSession()
    assert session.execute("L 1 1 3 1") == "No Canvas presented to draw line on."
    assert session.canvas is None

    session.execute("C 3 3")
    assert session.execute("L 1 1 3 3") == "Diagonal lines not supported."
    assert session.execute("X 1") == "Unknown command 'X'"


def test_quit_stops_script():
    session = DrawSession()
    outputs = session.run_script(["C 3 3", "", "Q", "L 1 1 3 1"])

    assert session.finished
    assert len(outputs) == 2
    assert outputs[1] == ""
    assert session.canvas == Canvas.from_rows(["-----", "|   |", "|   |", "|   |", "-----"])


def test_load_script_list(tmp_path: Path):
    script = tmp_path / "draw.yaml"
    script.write_text("- C 3 3\n- L 1 1 3 1\n")
    assert load_script(script) == ["C 3 3", "L 1 1 3 1"]


def test_load_script_mapping(tmp_path: Path):
    script = tmp_path / "draw.yaml"
    script.write_text("commands:\n  - C 3 3\n  - B 1 1 o\n")
    assert load_script(script) == ["C 3 3", "B 1 1 o"]


def test_load_script_rejects_bad_content(tmp_path: Path):
    script = tmp_path / "draw.yaml"
    script.write_text("width: 3\n")
    with pytest.raises(ValueError):
        load_script(script)


def test_run_script_only(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    script = tmp_path / "draw.yaml"
    script.write_text("\n".join(f"- {c}" for c in SAMPLE) + "\n")

    session = run(DrawConfig(script=script, interactive=False))

    assert session.canvas is not None
    assert capsys.readouterr().out.rstrip("\n").endswith(SAMPLE_RESULT)


def test_run_interactive(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    lines = iter(["C 3 3", "R 1 1 3 3", "Q", "C 9 9"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))

    session = run(DrawConfig())

    assert session.finished
    assert capsys.readouterr().out.rstrip("\n").endswith("|XXX|\n|X X|\n|XXX|\n-----")


def test_run_interactive_end_of_input(monkeypatch: pytest.MonkeyPatch):
    def eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)
    session = run(DrawConfig())

    assert not session.finished
    assert session.canvas is None
