"""Run a single exercise without asking the learner to mark it done."""

from __future__ import annotations

from rustlings.exercise import Exercise, ExerciseError, Mode
from rustlings.ui import Spinner, success, warn
from rustlings.verify import VerificationError, test


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run (or test) an exercise; raise VerificationError on failure."""
    if exercise.mode is Mode.TEST:
        test(exercise, verbose)
    else:
        _compile_and_run(exercise)


def _compile_and_run(exercise: Exercise) -> None:
    with Spinner(f"Compiling {exercise}...") as spinner:
        try:
            compiled = exercise.compile()
        except ExerciseError as err:
            spinner.finish_and_clear()
            warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
            print(err.output.stderr)
            raise VerificationError(exercise) from err

        with compiled:
            spinner.set_message(f"Running {exercise}...")
            try:
                output = compiled.run()
            except ExerciseError as err:
                spinner.finish_and_clear()
                print(err.output.stdout)
                print(err.output.stderr)
                warn(f"Ran {exercise} with errors")
                raise VerificationError(exercise) from err

    print(output.stdout)
    success(f"Successfully ran {exercise}")