# stdplus

Small utilities for low-level systems code. The package has no dependencies
beyond the standard library.

## Modules

- `stdplus.exception`: the errors `Incomplete`, `WouldBlock` and `Eof`. All
  three are subclasses of `OSError`. The module also has two wrappers:
  - `ignore(func)` catches exceptions, prints a line naming where `ignore` was
    called to stderr, and returns `None`.
  - `ignore_quiet(func)` catches exceptions silently and returns `None`.
- `stdplus.handle`: `Managed(value, drop, *args)` owns a value and calls
  `drop(value, *args)` in these cases:
  - when the value is replaced with `reset`;
  - on `close`;
  - at the end of a `with` block;
  - when the handle is collected.

  `release` and `maybe_release` give the value up without dropping it.
  `Copyable(value, drop, ref, *args)` also supports `copy()` and `assign(other)`.
  Each copy holds a new value made by `ref(value, *args)`.
- `stdplus.raw`: reads fixed layouts out of byte buffers using `struct`
  formats. It has these functions:
  - `copy_from` and `copy_from_strict` unpack values from a buffer.
  - `ref_from` and `ref_from_strict` return memoryviews that share the
    buffer's memory.
  - `extract` and `extract_ref` return a result together with the remaining
    bytes.
  - `as_view` reinterprets a buffer as typed elements.
  - `equal` compares two equal-sized buffers byte for byte.

  A buffer that is too short raises `Incomplete`. The strict variants also
  raise it when the buffer is longer than the layout.
- `stdplus.zstring`: `ZString` is a string that ends at its first nul.
  - It can be built from a `bytearray`, which is used in place and must hold a
    terminator.
  - It can also be built from a `str` or `bytes` that contains no nul.
  - It supports comparison, hashing, indexing and `suffix`.
  - `find_term(text, minimum, maximum)` locates a terminator within a range.
- `stdplus.fd_ops`: whole-buffer and aligned transfers over any object with
  `read`, `recv`, `write`, `send` or `sendto` methods. The functions are
  `read_exact`, `recv_exact`, `write_exact`, `send_exact`, `sendto_exact`,
  `read_aligned`, `recv_aligned`, `write_aligned`, `send_aligned`, `read_all`,
  `read_all_fixed` and `verify_exact`.
  - A read that returns empty means the call would block.
  - End of stream is signalled by raising `Eof`.
- `stdplus.line`: `LineReader(fd).read_line()` returns the next line without
  its newline.
  - It returns `None` when no complete line is available without blocking.
  - At end of stream it returns the remaining text once. After that it raises
    `Eof`.
- `stdplus.managed_fd`:
  - `ManagedFd` owns an integer descriptor. It marks the descriptor
    close-on-exec and closes it on `close` or at the end of a `with` block.
  - `MMap(fd, window_size, prot, flags, offset)` maps part of a descriptor,
    using the `mmap.PROT_*` and `mmap.MAP_*` values.
- `stdplus.subnet`: `Subnet4`, `Subnet6` and `SubnetAny`. Each one has
  `network()`, `contains()`, `from_str()` and `str()`. The module also has
  these helpers: `addr32_mask`, `addr_to_subnet`, `pfx_to_mask` and
  `mask_to_pfx`.
- `stdplus.tmpdir`: `suite_tmp_dir(suite_name)` gives `$TMPDIR/<suite>-<pid>`,
  with `/tmp` as the default. `TestWithTmp` handles the temporary directories
  for a test run:
  - `TestWithTmp.set_up_suite` creates the suite's directory.
  - `TestWithTmp(suite, case)` creates a directory for one test case inside
    it.
  - `close` and `tear_down_suite` remove those directories.

## Installing

```
pip install .
```

To include the test dependencies:

```
pip install .[test]
```

## Examples

```python
from stdplus.subnet import Subnet4

net = Subnet4.from_str("192.168.1.7/24")
print(net.network())                  # 192.168.1.0
print(net.contains("192.168.1.200"))  # True
print(net)                            # 192.168.1.7/24
```

```python
from stdplus.handle import Managed

closed = []
with Managed(3, closed.append) as h:
    print(h.value())  # 3
print(closed)         # [3]
```

```python
from stdplus.raw import extract

value, rest = extract(">i", b"\x00\x00\x00\x2a rest")
print(value)         # 42
print(bytes(rest))   # b' rest'
```

## What it does not do

- It does not open files, sockets or other descriptors. The I/O helpers work on
  objects you supply.
- There is no event loop or asynchronous completion queue.
- There is no command-line program.

## Running the tests

```
pytest
```