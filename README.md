# drillbox

A collection of small, self-contained building blocks: a binary pattern
search tool, container types and iteration helpers. It needs nothing beyond
the standard library.

## Installation

```
pip install .
pip install ".[test]"   # with the test dependencies
```

## Binary grep

`drillbox-bgrep` looks for a byte pattern in files or, recursively, in
directories. A pattern is written as hex bytes separated by single spaces.
`??` matches any byte.

```
drillbox-bgrep "76 42 e7 ?? df" data.bin some/dir
drillbox-bgrep --matches 4 --offset 5 "04" pat.bin
drillbox-bgrep --algo boyer-moore "00 00 00" zero.bin
```

Options:

- `--matches N`: stop after `N` matches per file (unbounded by default).
- `--offset N`: start searching at byte `N` of each file (0 by default).
- `--algo brute|boyer-moore`: search strategy for patterns without `??`
  (`brute` by default). With `brute`, matches do not overlap; with
  `boyer-moore`, the search resumes one byte after each match.

Every match is printed as `path:offset:hex bytes`. Unreadable files are
reported on standard error as `Fail: ...`; an invalid pattern makes the
command exit with status 1.

From Python:

```python
from drillbox.bgrep import GrepOptions, grep, parse_byte_pattern

pattern = parse_byte_pattern("86 d1 ?? 90")
for match in grep("some/dir", pattern, GrepOptions(max_matches=10)):
    print(match.path, match.offset, match.data.hex(" "))
```

`grep` also accepts the textual pattern directly and raises `PatternError`
when it cannot be parsed. `grep_file` and `grep_directory` search a single
file or a tree; `format_match` renders a `Match` as the command prints it,
and `to_plain` turns a pattern into bytes with zero for every wildcard.
All search functions take an optional `on_error` callable that receives a
message for every file that cannot be read.

## Containers

- `drillbox.deque.Deque`: a double-ended queue stored in fixed-size blocks,
  with `append`, `appendleft`, `pop`, `popleft`, `clear`, `swap`, `copy`,
  indexing and iteration.
- `drillbox.hashmap.HashMap`: a mutable mapping using open addressing with
  linear probing and backward-shift deletion. It takes an optional `hasher`,
  initial `capacity` and `default_factory`; `insert`, `erase`, `get`,
  `rehash` and `clear` are available, and `bucket(key)` returns the slot a
  key lives in, or -1.
- `drillbox.lru_cache.LruCache`: a fixed-capacity cache with `get` (None for
  a missing key) and `set`, evicting the least recently used entry.
- `drillbox.cow_vector.CowVector`: a list of strings whose `copy()` shares
  storage until one of the copies is changed; `ref_count()` tells how many
  vectors share it.
- `drillbox.clever_set.CleverSet`: a set that stores items by hash when
  their type defines hashing and comparison, in sorted order when it only
  defines ordering, and by identity otherwise.
- `drillbox.intrusive_list.IntrusiveList` and `ListHook`: a doubly linked
  list whose items carry their own links; items can `unlink()` themselves,
  and the list unlinks everything when used as a context manager exits.
- `drillbox.channel.BufferedChannel`: a bounded, closable, thread-safe
  channel with `send`, `recv` and `close`. Sending to a closed channel
  raises `ChannelClosedError`; receiving from a closed, drained channel
  returns None.

## Helpers

- `drillbox.sequences`: `numeric_range`, `zip_shortest` and `group`.
- `drillbox.fold`: `fold`, `concat` and the counting `Length` folder.
- `drillbox.local_max.local_max`: the index of the first local maximum, or
  the length of the sequence if there is none.
- `drillbox.strict_iterator`: a bounds-checked bidirectional cursor made
  with `make_strict`, raising `IndexError` when it would leave its sequence.
- `drillbox.dispatch`: `advance` moves integers, `+=`-capable cursors,
  bidirectional cursors and plain iterators; `clear` calls an object's
  `clear()` if it has one.
- `drillbox.concepts`: `is_predicate` and `is_indexable`.
- `drillbox.byte_order.change_byte_order` reverses the bytes of a
  fixed-width integer; `drillbox.multiplication.multiply` multiplies two
  32-bit signed integers, raising `OverflowError` for wider operands.

```python
from drillbox.sequences import group, numeric_range

list(numeric_range(2, 7, 2))            # [2, 4, 6]
list(group([1, 1, 2, 2, 2, 3]))         # [[1, 1], [2, 2, 2], [3]]
```