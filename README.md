# easyfunc

Small helpers for everyday string and value handling. They behave like the
well-known built-ins of scripting languages. They need nothing outside the
standard library.

## Installation

```
pip install easyfunc
```

## Modules

### `easyfunc.chars`

- `ascii_char(code)` returns the ASCII character for `code`. A negative code
  has 256 added before it is reduced modulo 256. The result is an empty
  string for 0 and for any code above 127.
- `first_code(text)` returns the code point of the first character of
  `text`. It returns 0 for an empty string.

### `easyfunc.hashing`

- `crc32(text)` returns the IEEE CRC-32 checksum as an unsigned integer.
- `md5(text)` returns the MD5 digest as a lower-case hex string.

Both functions accept `str`, which is encoded as UTF-8, or `bytes`.

### `easyfunc.trimming`

- `trim(text, [chars])`, `ltrim(text, [chars])` and `rtrim(text, [chars])`
  strip characters from both ends, from the start or from the end.
- `common_trim(trim_type, text, [chars])` does the same. Which ends it strips
  is chosen by `TrimType.DEFAULT` (both), `TrimType.LEFT` or
  `TrimType.RIGHT`.

If no cut set is given, the functions strip space, `\n`, `\r`, `\t`, `\v`,
NUL and the digit `"0"`. An empty cut set strips nothing.

### `easyfunc.padding`

- `str_pad(text, pad_length, pad_string, pad_type)` pads `text` to
  `pad_length` characters with repetitions of `pad_string`. Use
  `PadType.LEFT`, `PadType.RIGHT` or `PadType.BOTH`. With `BOTH`, the right
  side gets the extra character when the padding is odd. An unknown pad type
  leaves the text unchanged. An empty `pad_string` raises `ValueError` when
  padding is needed.
- `str_repeat(text, multiplier)` repeats `text`. It returns an empty string
  when `multiplier` is zero or less.
- `chunk_split(body, chunk_length, end)` splits `body` into chunks and puts
  `end` after each one. A length of 0 means 76, and an empty `end` means
  `"\r\n"`. A negative length raises `ValueError`.

### `easyfunc.compare`

- `strcasecmp(string1, string2)` returns 0 when the strings are equal
  ignoring case, and 1 otherwise.
- `strncmp(str1, str2, length)` compares at most `length` leading characters
  and returns -1, 0 or 1. A negative `length` raises `ValueError`.

### `easyfunc.search`

- `strstr(haystack, needle, before_needle)` returns the part of `haystack`
  from the first `needle` onwards. When `before_needle` is true it returns
  the part before `needle` instead. It returns `""` when `needle` is empty
  or not found.
- `strchr(haystack, needle, before_needle)` works like `strstr`. It also
  returns `""` when `haystack` is empty.
- `strrchr(char, haystack)` returns `haystack` from the last occurrence of
  `char`, or `""` when `char` does not occur. `char` must be a single
  character, otherwise `ValueError` is raised.
- `strpos(haystack, needle, offset)` returns the position of `needle`, or -1
  when it is not found. A positive `offset` starts the search at that
  position. An offset past the end of `haystack` raises `ValueError`.
- `strpbrk(haystack, char_list)` returns `haystack` from the first
  occurrence of `char_list`. It returns `None` when `char_list` is empty or
  not found.
- `strcspn(text, chars, offset, length)` takes the slice of `text` given by
  `offset` and `length`, where negative values count from the end. It
  returns the length of the leading part of that slice that holds none of
  `chars`.

### `easyfunc.transform`

- `strrev(text)` reverses a string.
- `ucwords(text)` upper-cases the first letter of every word. A word starts
  at the beginning of the text, or after any ASCII character that is not a
  letter, a digit or `_`.

### `easyfunc.variables`

- `boolval(value)` is false for `""` and the integer `0`, and true for
  everything else. It raises `TypeError` for `None`.
- `is_int(value)` is true for integers. It is false for booleans.
- `is_array(value)` is true for lists, tuples, mappings and other sequences.
  It is false for strings and bytes.
- `debug_zval_dump(*values)` prints the `repr` of each value on a line of
  its own.

## Examples

```python
from easyfunc.hashing import md5
from easyfunc.padding import PadType, chunk_split, str_pad
from easyfunc.search import strpbrk, strpos, strstr
from easyfunc.transform import ucwords
from easyfunc.trimming import trim

str_pad("str_pad()", 20, "-+", PadType.BOTH)   # '-+-+-str_pad()-+-+-+'
chunk_split("abc", 1, "-")                     # 'a-b-c-'
strpos("test string string", "string", 8)      # 12
strstr("a@example.com", "@", True)             # 'a'
strpbrk("This is a Simple text", "a")          # 'a Simple text'
trim(" 12 3 ")                                 # '12 3'
ucwords("testing ucwords")                     # 'Testing Ucwords'
md5("apple")                                   # '1f3870be274f6c49b3e31a0c6728957f'
```

## What it does not do

easyfunc is a library only. It has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```