# rustlings

A collection of small exercises and a command-line companion that checks
them for you. Each exercise is a source file listed in an `info.toml`
file; the `rustlings` command compiles it with `rustc` (or lints it with
`cargo clippy`), runs it or its tests, and tells you what to look at next.

An exercise counts as pending while it still contains an `I AM NOT DONE`
comment. Once it compiles and passes, remove that comment to move on.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

`rustc` must be on your `PATH`, and the command must be run from the
directory that holds `info.toml` and the `exercises/` folder. Otherwise it
exits with status 1 and tells you why.

## Usage

Run with no subcommand to see the welcome banner followed by the contents
of `default_out.txt` from the current directory:

```
rustlings
```

Check every exercise in the order of `info.toml`, stopping at the first one
that fails or is not marked as done (exit status 1 in that case):

```
rustlings verify
```

Keep checking while you edit. Changes to `.rs` files under `exercises/` are
collected until things have been quiet for two seconds, then the changed
exercise and every pending one are checked again. Type `hint` for the hint
of the exercise that last failed, or `clear` to clear the screen:

```
rustlings watch
```

Run or test a single exercise, or the first one not yet done:

```
rustlings run variables1
rustlings run next
```

Show the hint for an exercise:

```
rustlings hint variables1
```

List exercises with their status, followed by a progress line:

```
rustlings list
rustlings list --unsolved
rustlings list --solved
rustlings list --names
rustlings list --paths
rustlings list --filter vec,hashmap
```

`--filter` takes comma-separated, case-folded patterns matched against the
exercise name or path.

Global options go before the subcommand:

- `--nocapture` shows the output of test exercises, e.g.
  `rustlings --nocapture run tests1`.
- `-v`, `--version` prints the version.

Set the `NO_EMOJI` environment variable to get plain-text status markers.
Colours are used when standard output is a terminal; `CLICOLOR=0` turns
them off and `CLICOLOR_FORCE=1` forces them on.

## Library

The command is built from a few modules that can also be used directly:

- `rustlings.exercise`: `Exercise`, `Mode`, `State`, `ContextLine`,
  `load_exercises()`; `Exercise.compile()` returns a `CompiledExercise`
  (a context manager that removes the temporary binary) or raises
  `ExerciseError`.
- `rustlings.verify`: `verify()` raises `VerificationError` for the first
  exercise that does not pass.
- `rustlings.run`: `run()` runs or tests one exercise without prompting.
- `rustlings.cli`: `main()`, `list_exercises()`, `find_exercise()`.

## Lessons

The `rustlings.lessons` package holds worked solutions to many of the
exercises as ordinary functions and classes, grouped by topic: `quizzes`,
`functions`, `conditionals`, `enums`, `generics`, `errors`, `containers`,
`traits`, `iterators`, `cons_list`, `concurrency`, `options`, `strings`,
`primitives`, `variables`, `move_semantics`, `macros` and `clippy`.

```python
from rustlings.lessons.quizzes import calculate_apple_price
from rustlings.lessons.errors import parse_pos_nonzero

calculate_apple_price(65)      # 65
parse_pos_nonzero("42")        # PositiveNonzeroInteger(value=42)
```

There are no lesson modules for the conversions, structs or modules topics.