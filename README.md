# rustdrill

Helpers for working through a set of small Rust exercises, plus worked Python
answers to many of those exercises.

The package has three parts:

- `rustdrill.ui`: the coloured warning and success lines shown to a learner.
- `rustdrill.project`: building and writing the `rust-project.json` file that
  lets rust-analyzer treat every exercise file as its own crate.
- `rustdrill.drills`: Python functions and classes that solve the exercises.

## Requirements

- Python 3.11 or newer
- `rustc` on your `PATH` if you call `RustAnalyzerProject.get_sysroot_src()`
  without `RUST_SRC_PATH` set

## Installing

```
pip install .
```

## Terminal messages

```python
from rustdrill.ui import warn, success, bold, paint

warn("Compiling of exercises/if/if1.rs failed!")    # red line, printed and returned
success("Successfully ran exercises/if/if1.rs!")    # green line, printed and returned
print(bold("`I AM NOT DONE`"))
print(paint("12", "blue", bold=True))               # colours: red, green, yellow, blue
```

`warn` starts its line with `⚠️`, `success` with `✅`. With `NO_EMOJI` set in
the environment they use `!` and `✓` instead.

ANSI colours are used when standard output is a terminal. `CLICOLOR_FORCE` set
to anything but `0` turns them on regardless; `CLICOLOR=0` turns them off.

## rust-analyzer project file

```python
from rustdrill.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()                 # RUST_SRC_PATH, or asks `rustc --print sysroot`
project.exercises_to_json("./exercises")  # one Crate per .rs file found below the folder
project.write_to_disk("./rust-project.json")
```

Each `Crate` has the file as `root_module`, edition `2021`, no dependencies and
the `test` cfg, so that rust-analyzer also works inside `#[test]` blocks.
`to_json()` returns the compact JSON text that `write_to_disk` writes.

## Worked answers

Everything below lives in `rustdrill.drills`:

- `quizzes`: `calculate_price_of_apples`, a `transformer` driven by `Command`
  values (`Command.uppercase()`, `Command.trim()`, `Command.append(n)`), and a
  `ReportCard` taking numeric or letter grades.
- `basics`: `bigger`, `foo_if_fizz`, `animal_habitat`, `sale_price`, `is_even`,
  `square`, `vec_loop`, `vec_map`, `trim_me`, `compose_me`, `replace_me`.
- `traits`: `append_bar` for strings and lists, the `Licensed` base with
  `SomeSoftware` and `OtherSoftware`, and `compare_license_types`.
- `errors`: `generate_nametag_text`, `total_cost`, `buy`,
  `PositiveNonzeroInteger` (raises `CreationError`) and `parse_pos_nonzero`
  (raises `ParsePosNonzeroError` carrying the underlying cause).
- `baskets`: `Fruit`, `new_fruit_basket`, `fill_fruit_basket`, and
  `build_scores_table`, which returns a `Team` per team name.
- `values`: `maybe_icecream`, a generic `Wrapper`, and a `Cons` list with
  `create_empty_list` and `create_non_empty_list`.
- `iterators`: `capitalize_first`, `capitalize_words_vector`,
  `capitalize_words_string`, `divide` (raises `NotDivisibleError` or
  `DivideByZeroError`, both `DivisionError`), `result_with_list`,
  `list_of_results`, `factorial`, `Progress` and the four counting functions.
- `records`: `Package`, the message classes `ChangeColor`, `Echo`, `Move` and
  `Quit` processed by `MachineState.process`, `Point`, and `Rectangle`.
- `threads`: `run_timed_workers`, `run_jobs` with a locked `JobStatus`, and
  `send_queue` / `receive_all` for a `Queue` split over two sender threads.

## What this package does not do

There is no command-line program. The package does not compile, run or test
exercise files, does not track which exercises are done, has no watch mode,
hints, listing or reset, and does not read an exercise list. It also has no
worked answers for the conversions exercises.

## Running the tests

```
pip install .[test]
pytest
```