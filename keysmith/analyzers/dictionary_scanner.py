"""
Dictionary Scanner
===================

Exact-line membership tests against a weak-password dictionary.

Breach lists such as ``rockyou.txt`` run to hundreds of megabytes, so when
caching is disabled the file is streamed in fixed-size chunks instead of
being loaded whole. Each chunk is cut back to its last line break; the
partial line that follows is carried into the next chunk, so every block
handed to the matcher starts and ends on a line boundary. Scanning stops at
the first match.

With caching enabled the first lookup reads the whole file into the
dictionary cache and later lookups search the cached text.
"""

from __future__ import annotations

from typing import Iterator

from keysmith.core.dictionary import DEFAULT_CHUNK_SIZE, DictionaryCache
from keysmith.core.errors import DictionaryReadError, ValidationError

MIN_CHUNK_SIZE = 2


def text_has_line(text: str, line: str) -> bool:
    """Return ``True`` if *line* is a complete line of *text*.

    The final line of *text* counts whether or not it ends with ``\\n``.
    """
    if text == line or text.startswith(line + "\n"):
        return True
    if f"\n{line}\n" in text:
        return True
    return text.endswith("\n" + line)


class DictionaryScanner:
    """Looks up passwords in the dictionary behind a :class:`DictionaryCache`.

    Args:
        cache: Dictionary path and cache state to read through.
        chunk_size: Characters per streamed chunk (minimum 2).

    Raises:
        ValidationError: If *chunk_size* is not an integer >= 2.
    """

    def __init__(
        self,
        cache: DictionaryCache,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        if (
            not isinstance(chunk_size, int)
            or isinstance(chunk_size, bool)
            or chunk_size < MIN_CHUNK_SIZE
        ):
            raise ValidationError(
                f"Chunk size must be an integer >= {MIN_CHUNK_SIZE}."
            )
        self.cache = cache
        self.chunk_size = chunk_size

    def contains_line(self, target: str) -> bool:
        """Return ``True`` if *target* is a line of the dictionary.

        Raises:
            DictionaryReadError: If the dictionary cannot be read.
        """
        if self.cache.cache_enabled:
            text = self.cache.cached_content
            if not text:
                text = self.cache.load()
            return text_has_line(text, target)

        for block in self.iter_blocks():
            if text_has_line(block, target):
                return True
        return False

    def iter_blocks(self) -> Iterator[str]:
        """Yield line-aligned blocks of the dictionary file.

        Every block except possibly the last ends with ``\\n``; the last is
        the file's final line when it has no trailing newline. Closing the
        generator early closes the file.

        Raises:
            DictionaryReadError: If the file cannot be opened, read or
                decoded. Buffered partial lines are discarded.
        """
        path = self.cache.path
        if path is None:
            raise DictionaryReadError("", "no dictionary path configured")

        try:
            with open(path, "r", encoding="utf-8") as fh:
                pending = ""
                while True:
                    chunk = fh.read(self.chunk_size)
                    if not chunk:
                        break
                    data = pending + chunk
                    cut = data.rfind("\n")
                    if cut < 0:
                        pending = data
                        continue
                    pending = data[cut + 1:]
                    yield data[:cut + 1]
                if pending:
                    yield pending
        except (OSError, UnicodeDecodeError) as exc:
            raise DictionaryReadError(path, str(exc)) from exc
