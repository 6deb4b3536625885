"""Verify exercises in order, stopping at the first that does not pass."""

from __future__ import annotations

import enum
from typing import Iterable

from rustlings.exercise import CompiledExercise, Exercise, ExerciseError, Mode
from rustlings.ui import Spinner, emoji_enabled, styled, success, warn


class RunMode(enum.Enum):
    INTERACTIVE = enum.auto()
    NON_INTERACTIVE = enum.auto()


class VerificationError(Exception):
    """An exercise failed to compile, run, test, or is not marked done."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} did not pass")
        self.exercise = exercise


def verify(exercises: Iterable[Exercise], verbose: bool = False) -> None:
    """Check each exercise; raise VerificationError for the first that fails."""
    for exercise in exercises:
        match exercise.mode:
            case Mode.TEST:
                passed = _compile_and_test(exercise, RunMode.INTERACTIVE, verbose)
            case Mode.COMPILE:
                passed = _compile_and_run_interactively(exercise)
            case Mode.CLIPPY:
                passed = _compile_only(exercise)
        if not passed:
            raise VerificationError(exercise)


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run the test harness of an exercise without prompting."""
    _compile_and_test(exercise, RunMode.NON_INTERACTIVE, verbose)


test.__test__ = False  # type: ignore[attr-defined]


def _compile(exercise: Exercise, spinner: Spinner) -> CompiledExercise:
    try:
        return exercise.compile()
    except ExerciseError as err:
        spinner.finish_and_clear()
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(err.output.stderr)
        raise VerificationError(exercise) from err


def _compile_only(exercise: Exercise) -> bool:
    with Spinner(f"Compiling {exercise}...") as spinner:
        _compile(exercise, spinner).close()
    success(f"Successfully compiled {exercise}!")
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with Spinner(f"Compiling {exercise}...") as spinner, _compile(
        exercise, spinner
    ) as compiled:
        spinner.set_message(f"Running {exercise}...")
        try:
            output = compiled.run()
        except ExerciseError as err:
            spinner.finish_and_clear()
            warn(f"Ran {exercise} with errors")
            print(err.output.stdout)
            print(err.output.stderr)
            raise VerificationError(exercise) from err
        spinner.finish_and_clear()
        success(f"Successfully ran {exercise}!")
        return prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, run_mode: RunMode, verbose: bool) -> bool:
    with Spinner(f"Testing {exercise}...") as spinner, _compile(
        exercise, spinner
    ) as compiled:
        try:
            output = compiled.run()
        except ExerciseError as err:
            spinner.finish_and_clear()
            warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
            print(err.output.stdout)
            raise VerificationError(exercise) from err
        spinner.finish_and_clear()
        if verbose:
            print(output.stdout)
        success(f"Successfully tested {exercise}")
        if run_mode is RunMode.INTERACTIVE:
            return prompt_for_completion(exercise, None)
        return True


def _separator() -> str:
    return styled("=" * 20, "bold")


def prompt_for_completion(exercise: Exercise, prompt_output: str | None) -> bool:
    """Return True if the exercise is done; otherwise show where to finish it."""
    state = exercise.state()
    if state.done:
        return True

    no_emoji = not emoji_enabled()
    match exercise.mode:
        case Mode.COMPILE:
            success_msg = "The code is compiling!"
        case Mode.TEST:
            success_msg = "The code is compiling, and the tests pass!"
        case Mode.CLIPPY:
            success_msg = (
                "The code is compiling, and Clippy is happy!"
                if no_emoji
                else "The code is compiling, and 📎 Clippy 📎 is happy!"
            )

    print()
    if no_emoji:
        print(f"~*~ {success_msg} ~*~")
    else:
        print(f"🎉 🎉  {success_msg} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        print(_separator())
        print(prompt_output)
        print(_separator())
        print()

    print("You can keep working on this exercise,")
    print(
        "or jump into the next one by removing the "
        f"{styled('`I AM NOT DONE`', 'bold')} comment:"
    )
    print()
    for context_line in state.context:
        line = styled(context_line.line, "bold") if context_line.important else context_line.line
        number = styled(f"{context_line.number:>2}", "blue", "bold")
        print(f"{number} {styled('|', 'blue')}  {line}")

    return False