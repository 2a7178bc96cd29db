"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/serializer.py
Renders a Bucket as sorted, escaped, delimited report lines, and parses them back.

Line format:
    <digest-hex> DELIM <path-1> DELIM <path-2> ... DELIM <path-n>

Inside every field the escape marker is doubled and the delimiter is prefixed
with the escape marker, so a line can always be split back into its fields.
"""

from typing import List, TextIO, Tuple

from uniquefiles.constants import DELIMITER, ESCAPER, LINE_END
from uniquefiles.core.models import Bucket, FileRef, check_markers


class ReportSerializer:
    """Deterministic text rendering of a Bucket."""

    def __init__(self, escaper: str = ESCAPER, delimiter: str = DELIMITER):
        check_markers(escaper, delimiter)
        self.escaper = escaper
        self.delimiter = delimiter

    def escape(self, text: str) -> str:
        # Escaper first, otherwise the escapers added for delimiters would be doubled
        return (text
                .replace(self.escaper, self.escaper + self.escaper)
                .replace(self.delimiter, self.escaper + self.delimiter))

    def unescape(self, text: str) -> str:
        """Reverses escape(). Raises ValueError on a malformed escape sequence."""
        fields = self._split(text)
        if len(fields) != 1:
            raise ValueError(f"Unescaped delimiter in field: {text!r}")
        return fields[0]

    def parse_line(self, line: str) -> Tuple[str, List[str]]:
        """
        Splits one report line (without its line terminator) into digest hex and paths.
        """
        fields = self._split(line)
        if len(fields) < 2:
            raise ValueError(f"Report line has no paths: {line!r}")
        return fields[0], fields[1:]

    def _split(self, text: str) -> List[str]:
        fields = []
        current = []
        esc, delim = self.escaper, self.delimiter
        i = 0
        while i < len(text):
            if text.startswith(esc, i):
                i += len(esc)
                if text.startswith(esc, i):
                    current.append(esc)
                    i += len(esc)
                elif text.startswith(delim, i):
                    current.append(delim)
                    i += len(delim)
                else:
                    raise ValueError(f"Invalid escape sequence at position {i - len(esc)}: {text!r}")
            elif text.startswith(delim, i):
                fields.append("".join(current))
                current = []
                i += len(delim)
            else:
                current.append(text[i])
                i += 1
        fields.append("".join(current))
        return fields

    @staticmethod
    def sorted_groups(bucket: Bucket) -> List[Tuple[bytes, List[FileRef]]]:
        """
        Non-empty groups with paths sorted inside each group, groups ordered by their
        smallest path and then by digest hex.
        """
        groups = []
        for digest, files in bucket.items():
            if not files:
                continue
            groups.append((digest, sorted(files, key=str)))
        groups.sort(key=lambda group: (str(group[1][0]), group[0].hex()))
        return groups

    def render_lines(self, bucket: Bucket) -> List[str]:
        lines = []
        for digest, files in self.sorted_groups(bucket):
            fields = [self.escape(digest.hex())]
            fields.extend(self.escape(str(f)) for f in files)
            lines.append(self.delimiter.join(fields))
        return lines

    def render(self, bucket: Bucket) -> str:
        return "".join(line + LINE_END for line in self.render_lines(bucket))

    def write(self, bucket: Bucket, out: TextIO) -> int:
        """Writes the full report to out and returns the number of lines written."""
        lines = self.render_lines(bucket)
        for line in lines:
            out.write(line + LINE_END)
        out.flush()
        return len(lines)
