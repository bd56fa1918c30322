# dckit

A small library of building blocks for Python programs.

- `dckit.option`: `Option` holds a value or nothing. `some()` and `none()` build one. `value()`, `unwrap()`, `value_or()`, `unwrap_or()`, `match()`, `contains()` and `clone()` work on it. `value()` and `unwrap()` raise `OptionError` when the option is empty. `IntrusiveOption` treats one reserved value as "nothing".
- `dckit.result`: `Result` is built from `Ok` or `Err`, or with `make_ok()` and `make_err()`. It offers `is_ok()`, `is_err()`, `ok()`, `err()`, `unwrap()`, `unwrap_or()`, `unwrap_err()`, `unwrap_err_or()`, `map()`, `map_err()`, `match()`, `contains()`, `contains_err()` and `clone()`. Taking the wrong side raises `UnwrapError`.
- `dckit.fmt`: brace-style formatting.
  - `format_strict()` returns a `Result` that holds the text, or a `FormatErr` that carries a `FormatErrKind` and a position.
  - `format()` raises `ValueError` when formatting fails.
  - `error_message()` and `describe_error()` turn a `FormatErr` into text.
  - `int_to_string()` writes an integer using a `Presentation`: decimal, hex or binary.
  - `raw_print()` writes text to a stream.
- `dckit.utf`: `encode()` turns a code point into its UTF-8 bytes. `decode()` reads one code point at an offset and returns `(code_point, size)`. `validate()` returns the size of the encoded code point as an `Option`.
- `dckit.file`: `File` opens a file in binary mode, with a `FileMode` of read, write or append. It can be used as a context manager.
  - Methods: `read()` (UTF-8 text), `load()` (bytes), `write()`, `size()` and `close()`.
  - Static methods: `File.remove()`, `File.rename()` and `File.file_exists()`.
  - Failures raise `FileError`, whose `result` is a `FileResult`. `result_to_string()` describes a `FileResult`.
- `dckit.mathutil`: `clamp`, `inside`, `map_range`, `u_safe_subtract`, `set_bit`, `set_bits`, `log2`, `hash32_fnv1a` and `hash64_fnv1a`.
- `dckit.callstack`: `build_callstack()` returns a `Callstack` of the caller's frames. It stops after a function named `main`. `print_callstack()` writes the call stack to a stream.
- `dckit.log`: `Logger` queues `Payload`s and passes them to named sinks on a background thread.
  - Sinks: `ConsoleSink` and `ColoredConsoleSink`.
  - Levels: `Level`.
  - Colours: `Color`, applied with `paint()`.
  - Helpers: `get_global_logger()`, `init()`, `deinit()`, `set_level()`, `make_payload()` and `format_timestamp()`.

## Installation

```
pip install dckit
```

## Examples

```python
from dckit.result import make_ok
from dckit.fmt import format_strict

res = make_ok(10).map(lambda v: v * 2)
assert res.unwrap() == 20

out = format_strict("hello {:.2f}", 13.37)
assert out.value() == "hello 13.37"
```

Logging:

```python
from dckit import log

logger = log.get_global_logger()
log.init(logger)
logger.log(log.Level.INFO, "Hello from {}!", "dckit")
log.deinit(1_000_000, logger)
```

## What it does not do

dckit is a library only. It installs no command-line programs. It has no assertion helpers and no test registry or test runner of its own. Use pytest or `assert` for those.