"""Reading id/base64 sample files and counting their characters."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from itertools import islice
from typing import Iterator

from .pair import Pair
from .textutils import Timer, count_english_chars, decode_base64

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_SEPARATOR = "- - - - - - - - - - - - - - - - - - - -"


@dataclass(frozen=True)
class Result:
    """Character counts of one decoded text."""

    id: int = 0
    count: int = 0
    persian_count: int = 0
    english_count: int = 0
    english_ratio: int = 0

    def csv_string(self) -> str:
        """The counts joined by commas."""
        return ",".join(
            str(value)
            for value in (
                self.id,
                self.count,
                self.persian_count,
                self.english_count,
                self.english_ratio,
            )
        )


class CsvReader:
    """Reads ``id , base64`` lines and yields decoded pairs."""

    def __init__(self, name: str) -> None:
        self.file_name = name
        self._file = open(name, encoding="utf-8", errors="surrogateescape", newline="\n")
        self.line_number = 1

    def close(self) -> None:
        self._file.close()

    def next_pair_decoded(self) -> Pair:
        """Read the next line as a pair.

        Raises EOFError when no complete line is left and ValueError when the
        line cannot be parsed.
        """
        if self._file.closed:
            raise EOFError("file is finished")
        line = self._file.readline()
        if not line.endswith("\n"):
            self._file.close()
            raise EOFError("file is finished")

        fields = line.split(",")
        if len(fields) != 2:
            print(
                f"The format of the file is not csv compatible at line <{self.line_number}>: {line}",
                end="",
            )
            if len(fields) < 2:
                raise ValueError(
                    f"The format of the file is not csv compatible at line <{self.line_number}>"
                )
        text = fields[1].strip()
        raw_id = fields[0][:-1].strip()
        if not _ID_PATTERN.fullmatch(raw_id):
            raise ValueError(f"The id is invalid at line <{self.line_number}>")

        self.line_number += 1
        return Pair(id=int(raw_id), text=decode_base64(text))

    def __iter__(self) -> Iterator[Pair]:
        while True:
            try:
                yield self.next_pair_decoded()
            except EOFError:
                return

    def __enter__(self) -> CsvReader:
        return self

    def __exit__(self, *args) -> None:
        self.close()


class Counter:
    """Counts the characters of each pair read from a sample file."""

    def __init__(self, name: str) -> None:
        self._reader = CsvReader(name)

    def close(self) -> None:
        self._reader.close()

    def count_next_pair(self) -> Result:
        """Count the next pair; errors of the reader propagate."""
        pair = self._reader.next_pair_decoded()
        english = count_english_chars(pair.text)
        length = len(pair.text.encode("utf-8", "surrogateescape"))
        return Result(
            id=pair.id,
            count=length,
            persian_count=length - english,
            english_count=english,
            english_ratio=english * 100 // length,
        )

    def __iter__(self) -> Iterator[Result]:
        while True:
            try:
                yield self.count_next_pair()
            except EOFError:
                return

    def __enter__(self) -> Counter:
        return self

    def __exit__(self, *args) -> None:
        self.close()


def _counted(counter: Counter) -> Iterator[Result]:
    """Yield results until the file ends or a line cannot be read."""
    while True:
        try:
            result = counter.count_next_pair()
        except (EOFError, ValueError):
            print("file finished")
            return
        yield result


def count_and_write_one_by_one(input_file: str, output_file: str) -> None:
    """Read, count and write each line in turn."""
    with open(output_file, "w", encoding="utf-8", newline="\n") as output, Counter(
        input_file
    ) as counter:
        for result in _counted(counter):
            output.write(result.csv_string() + "\n")


def count_and_write_in_one_batch(input_file: str, output_file: str, n_samples: int) -> None:
    """Read ``n_samples`` results, format them all, then write them all.

    Exactly ``n_samples`` lines are written; missing results are zeros.
    """
    if n_samples < 0:
        raise ValueError("n_samples must not be negative")
    timer = Timer()
    timer.start()
    print("<Read All>")
    with open(output_file, "w", encoding="utf-8", newline="\n") as output, Counter(
        input_file
    ) as counter:
        results = list(islice(_counted(counter), n_samples))
        results.extend(Result() for _ in range(n_samples - len(results)))
        print(f"Time it took to Read All: <{timer.diff_milli()}> Milliseconds.")

        print(_SEPARATOR)
        print("<Process All>")
        timer.start()
        lines = [result.csv_string() for result in results]
        print(f"Time it took to Process All: <{timer.diff_milli()}> Milliseconds.")

        print(_SEPARATOR)
        print("<Write All>")
        timer.start()
        output.writelines(line + "\n" for line in lines)
        print(f"Time it took to Write All: <{timer.diff_milli()}> Milliseconds.")


def generate_result_file_name(name: str) -> str:
    """The result path next to ``name``, with ``result_`` prefixed."""
    directory = os.path.dirname(name) or "."
    return os.path.normpath(os.path.join(directory, "result_" + os.path.basename(name)))