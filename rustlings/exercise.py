"""Exercises: metadata, completion state, compilation and running."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """A temporary binary name unique to this process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def clean() -> None:
    """Remove the temporary binary, if there is one."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(enum.Enum):
    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state: done when there is no pending context."""

    context: tuple[ContextLine, ...] = ()

    @property
    def done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    stdout: str
    stderr: str


class ExerciseError(Exception):
    """Compiling or running an exercise failed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr or output.stdout)
        self.output = output


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _capture(args: list[str]) -> subprocess.CompletedProcess[bytes]:
    return subprocess.run(
        args, stdin=subprocess.DEVNULL, capture_output=True, check=False
    )


def _output_of(result: subprocess.CompletedProcess[bytes]) -> ExerciseOutput:
    return ExerciseOutput(_decode(result.stdout), _decode(result.stderr))


def _source_lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _text_field(data: Mapping[str, Any], key: str) -> str:
    try:
        value = data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r} in exercise entry") from None
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


@dataclass
class Exercise:
    name: str
    path: Path
    mode: Mode
    hint: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Exercise:
        return cls(
            name=_text_field(data, "name"),
            path=Path(_text_field(data, "path")),
            mode=Mode(_text_field(data, "mode")),
            hint=_text_field(data, "hint"),
        )

    def _clippy(self) -> subprocess.CompletedProcess[bytes]:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2018"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml, encoding="utf-8")
        except OSError as err:
            if "NO_EMOJI" in os.environ:
                message = "Failed to write Clippy Cargo.toml file."
            else:
                message = "Failed to write 📎 Clippy 📎 Cargo.toml file."
            raise OSError(message) from err
        # Build an executable as well so the exercise can be run; a failure
        # here shows up again when clippy compiles the same code.
        _capture(["rustc", str(self.path), "-o", temp_file(), *RUSTC_COLOR_ARGS])
        # A clean build is needed for clippy to report every lint.
        _capture(
            ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS]
        )
        return _capture(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
            ]
        )

    def compile(self) -> CompiledExercise:
        """Compile the exercise; raise ExerciseError with the compiler output on failure."""
        source = str(self.path)
        match self.mode:
            case Mode.COMPILE:
                result = _capture(["rustc", source, "-o", temp_file(), *RUSTC_COLOR_ARGS])
            case Mode.TEST:
                result = _capture(
                    ["rustc", "--test", source, "-o", temp_file(), *RUSTC_COLOR_ARGS]
                )
            case Mode.CLIPPY:
                result = self._clippy()
        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise ExerciseError(_output_of(result))

    def _run(self) -> ExerciseOutput:
        args = [temp_file()]
        if self.mode is Mode.TEST:
            args.append("--show-output")
        result = _capture(args)
        output = _output_of(result)
        if result.returncode != 0:
            raise ExerciseError(output)
        return output

    def state(self) -> State:
        """Done, or pending with the lines around the first I AM NOT DONE marker."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()
        lines = _source_lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)), None
        )
        if matched is None:
            raise RuntimeError("This should not happen at all")
        first = max(matched - CONTEXT, 0)
        last = matched + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == matched)
                for i, line in enumerate(lines)
                if first <= i <= last
            )
        )

    def looks_done(self) -> bool:
        """Whether the marker comment has been removed; not proof of a solution."""
        return self.state().done

    def __str__(self) -> str:
        return str(self.path)


class CompiledExercise:
    """A compiled exercise whose temporary binary is removed on close."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        """Run the binary; raise ExerciseError with its output if it fails."""
        return self.exercise._run()

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def load_exercises(path: str | os.PathLike[str] = "info.toml") -> list[Exercise]:
    """Read the exercise list from an info.toml file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    entries = data.get("exercises")
    if not isinstance(entries, list):
        raise ValueError("missing field 'exercises'")
    return [Exercise.from_dict(entry) for entry in entries]