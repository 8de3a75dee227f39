# codewriter

`codewriter` provides small writers for code generators. Text goes in through
a printf-style `write(fmt, *args)` call and ends up in a file, on standard
output, or in an in-memory string.

Everything lives in the module `codewriter.writer`.

## Installation

```
pip install codewriter
```

## Usage

### Writing to a string

```python
from codewriter.writer import get_string_writer

writer = get_string_writer()
writer.write("package %s;\n", "android.test")
writer.write("public interface %s {}\n", "IExample")
writer.close()
print(writer.getvalue())
```

`StringCodeWriter.getvalue()` returns everything written so far. Closing a
string writer releases nothing; the collected text stays available.

### Writing to a file

```python
from codewriter.writer import get_file_writer

with get_file_writer("out/IExample.java") as writer:
    writer.write("// generated\n")
    writer.write("static final int COUNT = %d;\n", 3)
```

`get_file_writer` opens the file in binary mode and encodes text as UTF-8, so
the bytes written are the same on every platform, with no line-ending
conversion. Pass `"-"` as the file name to write to standard output; standard
output is flushed on close but never closed by the writer.

If the file cannot be opened, `get_file_writer` raises `OSError` with the
message `unable to open <file> for write`.

## API

- `CodeWriter` is the abstract base class. It declares `write(fmt, *args)` and
  `close()`, and works as a context manager that calls `close()` on exit. If
  the `with` block is already leaving because of an exception, an `OSError`
  from `close()` is dropped so the original exception is the one you see.
- `StringCodeWriter()` collects output in memory; `getvalue()` returns it.
- `FileCodeWriter(stream, close_on_exit)` wraps an open stream, text or
  binary. Text sent to a binary stream is encoded as UTF-8. On `close()` the
  stream is closed if `close_on_exit` is true and flushed otherwise. `close()`
  raises `OSError` if any earlier write or the close itself failed; calling it
  again after a failure raises again. Writing after `close()` raises
  `ValueError`.
- `get_file_writer(output_file)` returns a `FileCodeWriter` for a path, or for
  standard output when the path is `"-"`.
- `get_string_writer()` returns a new `StringCodeWriter`.

### Formatting

`write` always formats with the `%` operator, even when no arguments are
given. A literal percent sign must therefore be written as `%%`:

```python
writer.write("100%% done\n")   # writes "100% done\n"
```

A format that does not match its arguments raises the usual `TypeError` or
`ValueError` from `%`.