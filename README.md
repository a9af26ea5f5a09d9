# rustlings

Support code for a collection of small Rust exercises. The package has three parts:

- `rustlings.ui`: terminal styling and the warning and success lines shown to a learner.
- `rustlings.project`: writes `rust-project.json` so that rust-analyzer can read the exercises.
- `rustlings.solutions`: worked Python versions of many of the exercises.

## Installing

```
pip install .
```

The package needs nothing beyond the standard library.

## Terminal output

`rustlings.ui` has `bold`, `red`, `green` and `blue`. Each one wraps a value in ANSI
escape codes. `warn(message)` prints a red warning line and returns it.
`success(message)` prints a green success line and returns it. If the environment
variable `NO_EMOJI` is set, `no_emoji()` returns true and these lines use `!` and `✓`
where they would otherwise use emoji.

```python
from rustlings.ui import success, warn

warn("Compiling of exercises/intro/intro2.rs failed!")
success("Successfully ran exercises/intro/intro1.rs!")
```

## rust-analyzer project file

`RustAnalyzerProject` holds a `sysroot_src` string and a list of `Crate` entries.

- `get_sysroot_src()` takes `RUST_SRC_PATH` from the environment when it is set.
  Otherwise it asks `rustc --print sysroot` and appends `lib/rustlib/src/rust/library`
  to the result. This needs `rustc` on your `PATH`.
- `exercises_to_json(root="./exercises")` adds one crate for every `.rs` file under
  `root`.
- `add_path(path)` adds a single file.
- `write_to_disk(path="./rust-project.json")` writes compact JSON.

Each crate uses edition 2021, has no dependencies and sets the `test` cfg, so
rust-analyzer also works inside `#[test]` blocks.

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json()
project.write_to_disk()
```

## Reference solutions

`rustlings.solutions` has these modules:

- `errors`
- `enums`
- `generics`
- `control_flow`
- `options`
- `hashmaps`
- `iterators`
- `quizzes`
- `smart_pointers`
- `strings`
- `structs`
- `traits`
- `vecs`

An example:

```python
from rustlings.solutions.quizzes import calculate_price_of_apples
from rustlings.solutions.iterators import factorial

calculate_price_of_apples(41)  # 41
factorial(4)                   # 24
```

## What this package does not do

This package does not provide any of the following:

- A `rustlings` command.
- Any way to compile, run or test exercises.
- A watch mode.
- Hints.
- Progress tracking.
- Detection of the `I AM NOT DONE` marker.

It has no solutions for the conversion or thread exercises.

## Running the tests

```
pip install .[test]
pytest
```