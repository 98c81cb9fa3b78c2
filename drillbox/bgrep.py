"""Search files and directory trees for byte patterns with wildcard bytes."""

from __future__ import annotations

import argparse
import enum
import os
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, Optional, Sequence, Union

BytePattern = list[Optional[int]]
ErrorHandler = Callable[[str], None]

_PATTERN_RE = re.compile(r"(?:(?:[0-9a-fA-F]{2}|\?\?) )*(?:[0-9a-fA-F]{2}|\?\?)")


class PatternError(ValueError):
    """Raised when a textual byte pattern cannot be parsed."""


class GrepAlgorithm(enum.Enum):
    """Search strategy for patterns without wildcards."""

    REGULAR = "brute"
    BOYER_MOORE = "boyer-moore"


@dataclass
class GrepOptions:
    """Search settings: algorithm, match limit (None is unbounded) and start offset."""

    algo: GrepAlgorithm = GrepAlgorithm.REGULAR
    max_matches: int | None = None
    offset: int = 0

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError("offset must not be negative")
        if self.max_matches is not None and self.max_matches < 0:
            raise ValueError("max_matches must not be negative")


@dataclass(frozen=True)
class Match:
    """One occurrence of a pattern: file path, matched bytes and absolute offset."""

    path: str
    data: bytes
    offset: int


def parse_byte_pattern(pattern: str) -> BytePattern:
    """Parse space-separated hex bytes; ``??`` stands for any byte."""
    if not _PATTERN_RE.fullmatch(pattern):
        raise PatternError(f"invalid pattern: {pattern!r}")
    return [None if token == "??" else int(token, 16) for token in pattern.split(" ")]


def is_simple_pattern(pattern: Union[str, Sequence[Optional[int]]]) -> bool:
    """Return True if the pattern has no wildcard bytes."""
    if isinstance(pattern, str):
        return "??" not in pattern
    return None not in pattern


def to_plain(pattern: Sequence[Optional[int]]) -> bytes:
    """Turn a pattern into bytes, writing zero for every wildcard."""
    return bytes(0 if byte is None else byte for byte in pattern)


def _report(on_error: ErrorHandler | None, what: str) -> None:
    if on_error is not None:
        on_error(what)


def _positions(data: bytes, pattern: BytePattern, start: int, algo: GrepAlgorithm) -> Iterator[int]:
    if is_simple_pattern(pattern):
        needle = to_plain(pattern)
        # Boyer-Moore resumes one byte after a hit, so its matches may overlap.
        step = 1 if algo is GrepAlgorithm.BOYER_MOORE else len(needle)
        position = data.find(needle, start)
        while position != -1:
            yield position
            position = data.find(needle, position + step)
        return

    regex = re.compile(
        b"".join(b"." if byte is None else re.escape(bytes([byte])) for byte in pattern),
        re.DOTALL,
    )
    found = regex.search(data, start)
    while found:
        yield found.start()
        found = regex.search(data, found.start() + len(pattern))


def grep_file(
    path: Union[str, os.PathLike],
    pattern: Sequence[Optional[int]],
    options: GrepOptions | None = None,
    on_error: ErrorHandler | None = None,
) -> Iterator[Match]:
    """Yield matches of ``pattern`` in one file; problems go to ``on_error``."""
    options = options or GrepOptions()
    byte_pattern = list(pattern)
    if not byte_pattern:
        _report(on_error, "Invalid pattern")
        return
    try:
        data = Path(path).read_bytes()
    except OSError:
        _report(on_error, f"Failed to open file: {os.fspath(path)}")
        return

    limit = options.max_matches
    if limit == 0:
        return
    start = min(options.offset, len(data))
    size = len(byte_pattern)
    for count, position in enumerate(_positions(data, byte_pattern, start, options.algo), start=1):
        yield Match(os.fspath(path), data[position:position + size], position)
        if limit is not None and count >= limit:
            return


def grep_directory(
    path: Union[str, os.PathLike],
    pattern: Sequence[Optional[int]],
    options: GrepOptions | None = None,
    on_error: ErrorHandler | None = None,
) -> Iterator[Match]:
    """Yield matches from every regular file below ``path``."""
    walker = os.walk(
        os.fspath(path),
        onerror=lambda exc: _report(on_error, f"Failed to read directory: {exc.filename}"),
    )
    for root, dirs, files in walker:
        dirs.sort()
        for name in sorted(files):
            file_path = os.path.join(root, name)
            if os.path.isfile(file_path):
                yield from grep_file(file_path, pattern, options, on_error)


def grep(
    path: Union[str, os.PathLike],
    pattern: Union[str, Sequence[Optional[int]]],
    options: GrepOptions | None = None,
    on_error: ErrorHandler | None = None,
) -> Iterator[Match]:
    """Search a file or a directory tree; a textual pattern is parsed first."""
    byte_pattern = parse_byte_pattern(pattern) if isinstance(pattern, str) else list(pattern)
    if os.path.isdir(path):
        return grep_directory(path, byte_pattern, options, on_error)
    return grep_file(path, byte_pattern, options, on_error)


def format_match(match: Match, display_path: str | None = None) -> str:
    """Render a match as ``path:offset:hex bytes``."""
    shown = match.path if display_path is None else display_path
    return f"{shown}:{match.offset}:{match.data.hex(' ')}"


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="bgrep", description="Search files for byte patterns.")
    parser.add_argument("pattern", help="hex bytes separated by spaces, '??' matches any byte")
    parser.add_argument("paths", nargs="*", help="files or directories to search")
    parser.add_argument("--matches", default="", help="maximum number of matches (unbounded by default)")
    parser.add_argument("--offset", type=int, default=0, help="offset (0 by default)")
    parser.add_argument("--algo", default="brute", help="brute or boyer-moore (brute by default)")
    args = parser.parse_args(argv)

    try:
        max_matches = int(args.matches) if args.matches else None
    except ValueError:
        parser.error(f"invalid value for --matches: {args.matches!r}")
    if max_matches is not None and max_matches < 0:
        max_matches = None

    algo = GrepAlgorithm.BOYER_MOORE if args.algo == "boyer-moore" else GrepAlgorithm.REGULAR
    options = GrepOptions(algo=algo, max_matches=max_matches, offset=max(args.offset, 0))

    def report(what: str) -> None:
        print(f"Fail: {what}", file=sys.stderr)

    try:
        found = [match for target in args.paths for match in grep(target, args.pattern, options, report)]
    except PatternError as exc:
        print(f"Fail: {exc}", file=sys.stderr)
        return 1

    for match in found:
        print(format_match(match))
    return 0