import os
import sys
from pathlib import Path

import pytest

from rustlings.exercise import (
    CompiledExercise,
    ContextLine,
    Exercise,
    ExerciseError,
    Mode,
    State,
    clean,
    load_exercises,
    temp_file,
)

FAKE_RUSTC = '''import pathlib
import sys

args = sys.argv[1:]
out = pathlib.Path(args[args.index("-o") + 1])
source = pathlib.Path(next(a for a in args if a.endswith(".rs"))).read_text()
if "COMPILE_ERROR" in source:
    sys.stderr.write("error: expected pattern\\n")
    sys.exit(1)
code = 1 if "RUN_ERROR" in source else 0
out.write_text(f"#!/bin/sh\\necho \\"stdout $*\\"\\necho stderr-line >&2\\nexit {code}\\n")
out.chmod(0o755)
'''

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {}\n"
FINISHED = "// fake_exercise\n\nfn main() {}\n"


@pytest.fixture
def work(tmp_path, monkeypatch):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    rustc = bin_dir / "rustc"
    rustc.write_text(f"#!{sys.executable}\n{FAKE_RUSTC}")
    rustc.chmod(0o755)
    cargo = bin_dir / "cargo"
    cargo.write_text("#!/bin/sh\nexit 0\n")
    cargo.chmod(0o755)
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    directory = tmp_path / "work"
    directory.mkdir()
    monkeypatch.chdir(directory)
    monkeypatch.setenv("NO_EMOJI", "1")
    return directory


def make(work, name, body, mode=Mode.COMPILE):
    (work / f"{name}.rs").write_text(body)
    return Exercise(name=name, path=Path(f"{name}.rs"), mode=mode, hint="")


def test_temp_file_is_unique_to_process():
    name = temp_file()
    assert name.startswith("./temp_")
    assert str(os.getpid()) in name
    assert name == temp_file()


def test_clean_removes_temp_file(work):
    Path(temp_file()).write_text("")
    clean()
    assert not Path(temp_file()).exists()
    clean()
    assert not Path(temp_file()).exists()


def test_pending_state(work):
    exercise = make(work, "pending_exercise", PENDING)
    expected = (
        ContextLine("// fake_exercise", 1, False),
        ContextLine("", 2, False),
        ContextLine("// I AM NOT DONE", 3, True),
        ContextLine("", 4, False),
        ContextLine("fn main() {", 5, False),
    )
    state = exercise.state()
    assert state == State(expected)
    assert not state.done
    assert not exercise.looks_done()


def test_finished_exercise(work):
    exercise = make(work, "finished_exercise", FINISHED)
    assert exercise.state() == State()
    assert exercise.state().done
    assert exercise.looks_done()


def test_marker_on_first_line_has_no_lines_before(work):
    exercise = make(work, "top", "/// I AM NOT DONE\nfn a() {}\nfn b() {}\nfn c() {}\n")
    context = exercise.state().context
    assert [line.number for line in context] == [1, 2, 3]
    assert context[0].important


def test_indented_marker_is_found(work):
    exercise = make(work, "indent", "fn main() {\n    //I   AM NOT  DONE\n}\n")
    important = [line for line in exercise.state().context if line.important]
    assert [line.number for line in important] == [2]


def test_from_dict_and_str():
    exercise = Exercise.from_dict(
        {"name": "quiz1", "path": "exercises/quiz1.rs", "mode": "test", "hint": "Hello!"}
    )
    assert exercise.mode is Mode.TEST
    assert exercise.hint == "Hello!"
    assert str(exercise) == "exercises/quiz1.rs"


def test_from_dict_rejects_bad_mode():
    with pytest.raises(ValueError):
        Exercise.from_dict({"name": "x", "path": "x.rs", "mode": "bogus", "hint": ""})


def test_from_dict_rejects_missing_field():
    with pytest.raises(ValueError):
        Exercise.from_dict({"name": "x", "path": "x.rs", "mode": "test"})


def test_load_exercises(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text(
        '[[exercises]]\nname = "a"\npath = "a.rs"\nmode = "compile"\nhint = ""\n\n'
        '[[exercises]]\nname = "b"\npath = "b.rs"\nmode = "clippy"\nhint = "Hello!"\n'
    )
    exercises = load_exercises(info)
    assert [e.name for e in exercises] == ["a", "b"]
    assert [e.mode for e in exercises] == [Mode.COMPILE, Mode.CLIPPY]


def test_load_exercises_requires_list(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text('title = "nothing"\n')
    with pytest.raises(ValueError):
        load_exercises(info)


def test_clean_after_close(work):
    exercise = make(work, "example", PENDING)
    compiled = exercise.compile()
    assert Path(temp_file()).exists()
    compiled.close()
    assert not Path(temp_file()).exists()


def test_context_manager_cleans(work):
    exercise = make(work, "example", FINISHED)
    with exercise.compile() as compiled:
        assert isinstance(compiled, CompiledExercise)
        output = compiled.run()
    assert output.stdout.startswith("stdout")
    assert not Path(temp_file()).exists()


def test_exercise_with_output(work):
    exercise = make(work, "exercise_with_output", "#[test]\nfn t() {}\n", Mode.TEST)
    with exercise.compile() as compiled:
        output = compiled.run()
    assert "--show-output" in output.stdout
    assert "stderr-line" in output.stderr


def test_compile_failure_raises_with_output(work):
    exercise = make(work, "broken", "COMPILE_ERROR\n")
    with pytest.raises(ExerciseError) as excinfo:
        exercise.compile()
    assert "expected pattern" in excinfo.value.output.stderr
    assert not Path(temp_file()).exists()


def test_run_failure_raises_with_output(work):
    exercise = make(work, "crashes", "RUN_ERROR\n")
    with exercise.compile() as compiled:
        with pytest.raises(ExerciseError) as excinfo:
            compiled.run()
    assert excinfo.value.output.stdout.startswith("stdout")


def test_clippy_writes_cargo_manifest(work):
    (work / "exercises" / "clippy").mkdir(parents=True)
    exercise = make(work, "clippy1", FINISHED, Mode.CLIPPY)
    with exercise.compile():
        manifest = (work / "exercises" / "clippy" / "Cargo.toml").read_text()
    assert 'name = "clippy1"' in manifest
    assert 'path = "clippy1.rs"' in manifest