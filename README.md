# ftkit

Small utilities that keep the behaviour of the classic C string and memory
routines while using plain Python types. The package also has a line reader
for file descriptors, a singly linked list and data types for a ray-traced
scene.

## Modules

- `ftkit.chars`: character classes (`is_space`, `is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`) and case conversion (`to_lower`,
  `to_upper`). Each accepts a one-character string or an integer code.
  It also has lenient number parsing: `atoi` wraps around like a 32-bit signed
  integer, `atoi_exit` reduces the value to 0-255, `atof` reads a decimal
  number without an exponent, and `itoa` gives the decimal text of an integer.
- `ftkit.compare`: `strcmp` and `strncmp` return the difference of the first
  differing unsigned bytes. `strlcpy` and `strlcat` return a `BoundedCopy`
  named tuple `(text, length)`. `length` is the length the call tried to
  create, so a `text` shorter than that means the result was truncated.
- `ftkit.strings`: `split` drops empty words. The module also has `strtrim`,
  `substr`, `strjoin` and `strnstr`. `strchr` and `strrchr` return the rest of
  the string from the match, or `None`. `strmapi` builds a new string and
  `striteri` changes a mutable sequence of characters in place.
- `ftkit.memory`: helpers for `bytearray` and `memoryview` buffers: `memset`,
  `bzero`, `calloc`, `memcpy`, `memmove`, `memchr` and `memcmp`. `memchr`
  returns an index or `None`. A length larger than a buffer raises
  `ValueError`.
- `ftkit.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`,
  `putstr_stderr` and `putchar_stderr` write to a file descriptor with
  `os.write`.
- `ftkit.linked_list`: `LinkedList` of `Node`s. It has `push_front`,
  `push_back`, `last`, `clear`, `for_each` and `map`, and supports `len()`
  and iteration.
- `ftkit.line_reader`: `LineReader(fd, buffer_size=42)` reads a file
  descriptor one line at a time and returns `bytes`. Each line keeps its
  trailing newline. `readline()` returns `None` at the end, and the reader
  can also be iterated.
- `ftkit.scene`: dataclasses for a ray-traced scene: `Vec3`, `Colour`,
  `Camera`, `Light`, `Ray`, `Hit`, `SceneObject` and `Scene`. It also has the
  `ObjectType` and `Key` enums and the `WIDTH` and `HEIGHT` constants.
  `Vec3.invalid()` and `Colour.invalid()` give marker values, which
  `is_valid()` detects.

## Installation

```
pip install .
```

## Examples

```python
from ftkit.chars import atoi, atof, itoa
from ftkit.compare import strlcpy
from ftkit.strings import split, strtrim

atoi("      +123ni56")      # 123
atof("-1.25abc")            # -1.25
itoa(-236)                  # "-236"
split("sp 0,0,20 12", " ")  # ["sp", "0,0,20", "12"]
strtrim("  3jkj3kkk!!  3 ", " 3")  # "jkj3kkk!!"
strlcpy("", "Hello world!", 6)     # BoundedCopy(text='Hello', length=12)
```

Reading a file line by line:

```python
import os
from ftkit.line_reader import LineReader

fd = os.open("scene.rt", os.O_RDONLY)
try:
    for line in LineReader(fd):
        print(line.decode(), end="")
finally:
    os.close(fd)
```

A linked list:

```python
from ftkit.linked_list import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
doubled = items.map(lambda x: x * 2, None)
list(doubled)   # [0, 2, 4, 6]
len(doubled)    # 4
```

## What the package does not do

`ftkit.scene` only holds data. The package does not read scene files, trace
rays or draw images, and it has no window or keyboard handling. The `Key`
codes are there only as named values.

## Running the tests

```
pip install .[test]
pytest
```