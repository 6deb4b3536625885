"""Command line interface: list, run, hint, verify and watch exercises."""

from __future__ import annotations

import argparse
import itertools
import os
import queue
import subprocess
import sys
import threading
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from rustlings.exercise import Exercise, load_exercises
from rustlings.run import run
from rustlings.ui import emoji_enabled
from rustlings.verify import VerificationError, verify

VERSION = "4.5.0"
WATCH_DEBOUNCE = 2.0

_WELCOME = (
    r"       welcome to...                      ",
    r"                 _   _ _                  ",
    r"  _ __ _   _ ___| |_| (_)_ __   __ _ ___  ",
    r" | '__| | | / __| __| | | '_ \ / _` / __| ",
    r" | |  | |_| \__ \ |_| | | | | | (_| \__ \ ",
    r" |_|   \__,_|___/\__|_|_|_| |_|\__, |___/ ",
    r"                               |___/      ",
)

_FINISH_ART = (
    "+----------------------------------------------------+",
    "|          You made it to the Fe-nish line!          |",
    "+--------------------------  ------------------------+",
    "                          \\/                         ",
    "     ▒▒          ▒▒▒▒▒▒▒▒      ▒▒▒▒▒▒▒▒          ▒▒   ",
    "   ▒▒▒▒  ▒▒    ▒▒        ▒▒  ▒▒        ▒▒    ▒▒  ▒▒▒▒ ",
    "   ▒▒▒▒  ▒▒  ▒▒            ▒▒            ▒▒  ▒▒  ▒▒▒▒ ",
    " ░░▒▒▒▒░░▒▒  ▒▒            ▒▒            ▒▒  ▒▒░░▒▒▒▒ ",
    "   ▓▓▓▓▓▓▓▓  ▓▓      ▓▓██  ▓▓  ▓▓██      ▓▓  ▓▓▓▓▓▓▓▓ ",
    "     ▒▒▒▒    ▒▒      ████  ▒▒  ████      ▒▒░░  ▒▒▒▒   ",
    "       ▒▒  ▒▒▒▒▒▒        ▒▒▒▒▒▒        ▒▒▒▒▒▒  ▒▒     ",
    "         ▒▒▒▒▒▒▒▒▒▒▓▓▓▓▓▓▒▒▒▒▒▒▒▒▓▓▒▒▓▓▒▒▒▒▒▒▒▒       ",
    "           ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒         ",
    "             ▒▒▒▒▒▒▒▒▒▒██▒▒▒▒▒▒██▒▒▒▒▒▒▒▒▒▒           ",
    "           ▒▒  ▒▒▒▒▒▒▒▒▒▒██████▒▒▒▒▒▒▒▒▒▒  ▒▒         ",
    "         ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒       ",
    "       ▒▒    ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒    ▒▒     ",
    "       ▒▒  ▒▒    ▒▒                  ▒▒    ▒▒  ▒▒     ",
    "           ▒▒  ▒▒                      ▒▒  ▒▒         ",
)


class ExerciseNotFound(LookupError):
    """No exercise matches the requested name."""


class _Parser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="rustlings",
        description="Rustlings is a collection of small exercises to get you "
        "used to writing and reading Rust code",
    )
    parser.add_argument(
        "--nocapture", action="store_true", help="show outputs from the test exercises"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="show the executable version"
    )
    commands = parser.add_subparsers(dest="command")
    commands.add_parser(
        "verify", help="Verifies all exercises according to the recommended order"
    )
    commands.add_parser("watch", help="Reruns `verify` when files were edited")
    run_parser = commands.add_parser("run", help="Runs/Tests a single exercise")
    run_parser.add_argument("name", help="the name of the exercise")
    hint_parser = commands.add_parser("hint", help="Returns a hint for the given exercise")
    hint_parser.add_argument("name", help="the name of the exercise")
    list_parser = commands.add_parser(
        "list", help="Lists the exercises available in Rustlings"
    )
    list_parser.add_argument(
        "-p", "--paths", action="store_true", help="show only the paths of the exercises"
    )
    list_parser.add_argument(
        "-n", "--names", action="store_true", help="show only the names of the exercises"
    )
    list_parser.add_argument(
        "-f",
        "--filter",
        default=None,
        help="provide a string to match exercise names; "
        "comma separated patterns are acceptable",
    )
    list_parser.add_argument(
        "-u", "--unsolved", action="store_true", help="display only exercises not yet solved"
    )
    list_parser.add_argument(
        "-s", "--solved", action="store_true", help="display only exercises that have been solved"
    )
    return parser


def find_exercise(name: str, exercises: Iterable[Exercise]) -> Exercise:
    """The named exercise, or the first unfinished one for ``next``."""
    if name == "next":
        found = next((e for e in exercises if not e.looks_done()), None)
        if found is None:
            raise ExerciseNotFound(
                "🎉 Congratulations! You have done all the exercises!\n"
                "🔚 There are no more exercises to do next!"
            )
        return found
    found = next((e for e in exercises if e.name == name), None)
    if found is None:
        raise ExerciseNotFound(f"No exercise found for '{name}'!")
    return found


def list_exercises(
    exercises: Iterable[Exercise],
    paths: bool = False,
    names: bool = False,
    filters: str | None = None,
    unsolved: bool = False,
    solved: bool = False,
) -> Iterator[str]:
    """Yield the lines of the exercise listing, ending with the progress line."""
    exercises = list(exercises)
    if not paths and not names:
        yield f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}"
    patterns = [p for p in (filters or "").lower().split(",") if p.strip()]
    done = 0
    for exercise in exercises:
        fname = str(exercise.path)
        matches = filters is None or any(
            pattern in exercise.name or pattern in fname for pattern in patterns
        )
        finished = exercise.looks_done()
        if finished:
            done += 1
        wanted = (
            (finished and solved)
            or (not finished and unsolved)
            or (not solved and not unsolved)
        )
        if wanted and matches:
            if paths:
                yield fname
            elif names:
                yield exercise.name
            else:
                status = "Done" if finished else "Pending"
                yield f"{exercise.name:<17}\t{fname:<46}\t{status:<7}"
    total = len(exercises)
    percentage = f"{done / total * 100:.2f}" if total else "NaN"
    yield f"Progress: You completed {done} / {total} exercises ({percentage} %)."


def rustc_exists() -> bool:
    """Whether ``rustc --version`` can be run successfully."""
    try:
        result = subprocess.run(
            ["rustc", "--version"], stdout=subprocess.DEVNULL, check=False
        )
    except OSError:
        return False
    return result.returncode == 0


def _clear_screen() -> None:
    print("\x1bc")


class _Hint:
    """The hint of the last failed exercise, shared with the watch shell."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._text: str | None = None

    def set(self, text: str) -> None:
        with self._lock:
            self._text = text

    def get(self) -> str | None:
        with self._lock:
            return self._text


def _spawn_watch_shell(hint: _Hint) -> None:
    print(
        "Type 'hint' or open the corresponding README.md file to get help "
        "or type 'clear' to clear the screen."
    )

    def shell() -> None:
        while True:
            try:
                raw = sys.stdin.readline()
            except (OSError, ValueError) as error:
                print(f"error reading command: {error}")
                return
            if raw == "":
                return
            command = raw.strip()
            if command == "hint":
                text = hint.get()
                if text is not None:
                    print(text)
            elif command == "clear":
                print("\x1b[2J\x1b[1;1H")
            else:
                print(f"unknown command: {command}")

    threading.Thread(target=shell, daemon=True).start()


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, events: queue.Queue[Path]) -> None:
        super().__init__()
        self._events = events

    def _push(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._events.put(Path(os.fsdecode(event.src_path)))

    def on_created(self, event: FileSystemEvent) -> None:
        self._push(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._push(event)


def _debounced(events: queue.Queue[Path]) -> Iterator[Path]:
    """Yield changed paths once the stream of changes has been quiet for a while."""
    while True:
        batch = {events.get(): None}
        while True:
            try:
                batch[events.get(timeout=WATCH_DEBOUNCE)] = None
            except queue.Empty:
                break
        yield from batch


def _path_ends_with(full: Path, suffix: Path) -> bool:
    tail = Path(suffix).parts
    return len(tail) <= len(full.parts) and full.parts[len(full.parts) - len(tail):] == tail


def watch(exercises: Iterable[Exercise], verbose: bool = False) -> None:
    """Verify exercises, then re-verify on every change until all pass."""
    exercises = list(exercises)
    events: queue.Queue[Path] = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeHandler(events), "./exercises", recursive=True)
    observer.start()
    try:
        _clear_screen()
        hint = _Hint()
        try:
            verify(exercises, verbose)
            return
        except VerificationError as err:
            hint.set(err.exercise.hint)
        _spawn_watch_shell(hint)
        for path in _debounced(events):
            if path.suffix != ".rs" or not path.exists():
                continue
            filepath = path.resolve()
            pending = itertools.chain(
                itertools.dropwhile(
                    lambda e: not _path_ends_with(filepath, e.path), exercises
                ),
                (
                    e
                    for e in exercises
                    if not e.looks_done() and not _path_ends_with(filepath, e.path)
                ),
            )
            _clear_screen()
            try:
                verify(pending, verbose)
                return
            except VerificationError as err:
                hint.set(err.exercise.hint)
    finally:
        observer.stop()
        observer.join()


def _print_welcome() -> None:
    print()
    for line in _WELCOME:
        print(line)
    print()


def _print_finish() -> None:
    emoji = "🎉" if emoji_enabled() else "★"
    print(f"{emoji} All exercises completed! {emoji}")
    print()
    for line in _FINISH_ART:
        print(line)
    print()
    print("We hope you enjoyed learning about the various aspects of Rust!")
    print("If you noticed any issues, please don't hesitate to report them to our repo.")
    print("You can also contribute your own exercises to help the greater community!")
    print()
    print("Before reporting an issue or contributing, please read our guidelines")
    print("in CONTRIBUTING.md.")


def _write_listing(lines: Iterable[str]) -> int:
    try:
        for line in lines:
            sys.stdout.write(f"{line}\n")
        sys.stdout.flush()
    except BrokenPipeError:
        return 0
    except OSError:
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    try:
        args = build_parser().parse_args(argv)
    except SystemExit as exit_:
        code = exit_.code
        if code is None:
            return 0
        return code if isinstance(code, int) else 1

    if args.version:
        print(f"v{VERSION}")
        return 0

    if args.command is None:
        _print_welcome()

    if not Path("info.toml").exists():
        print(f"{sys.argv[0]} must be run from the rustlings directory")
        print("Try `cd rustlings/`!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises("info.toml")
    verbose = args.nocapture

    if args.command is None:
        print(Path("default_out.txt").read_text(encoding="utf-8"))
        return 0

    match args.command:
        case "list":
            return _write_listing(
                list_exercises(
                    exercises,
                    paths=args.paths,
                    names=args.names,
                    filters=args.filter,
                    unsolved=args.unsolved,
                    solved=args.solved,
                )
            )
        case "run" | "hint":
            try:
                exercise = find_exercise(args.name, exercises)
            except ExerciseNotFound as err:
                print(err)
                return 1
            if args.command == "hint":
                print(exercise.hint)
                return 0
            try:
                run(exercise, verbose)
            except VerificationError:
                return 1
            return 0
        case "verify":
            try:
                verify(exercises, verbose)
            except VerificationError:
                return 1
            return 0
        case "watch":
            try:
                watch(exercises, verbose)
            except OSError as err:
                print(f"Error: Could not watch your progress. Error message was {err!r}.")
                print(
                    "Most likely you've run out of disk space or your "
                    "'inotify limit' has been reached."
                )
                return 1
            _print_finish()
            return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())