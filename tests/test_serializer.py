"""
Unit tests for ReportSerializer.
Verifies ordering, escaping, and parsing of report lines.
"""
import hashlib
import io

import pytest

from uniquefiles.core.models import Bucket, FileRef
from uniquefiles.core.serializer import ReportSerializer


def sha(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


class TestEscaping:
    """Test field escaping with default and custom markers."""

    def test_delimiter_is_escaped(self):
        assert ReportSerializer().escape("a|b.txt") == "a\\|b.txt"

    def test_escaper_is_doubled(self):
        assert ReportSerializer().escape("a\\b") == "a\\\\b"

    def test_escaper_before_delimiter(self):
        """Doubling happens first, so an existing backslash-pipe becomes three backslashes and a pipe."""
        assert ReportSerializer().escape("\\|") == "\\\\\\|"

    def test_plain_text_untouched(self):
        assert ReportSerializer().escape("dir/file.txt") == "dir/file.txt"

    @pytest.mark.parametrize("text", [
        "",
        "plain",
        "a|b",
        "a\\b",
        "\\|\\|",
        "|||",
        "ends with \\",
        "\\\\|",
    ])
    def test_unescape_reverses_escape(self, text):
        serializer = ReportSerializer()
        assert serializer.unescape(serializer.escape(text)) == text

    def test_unescape_reverses_escape_with_custom_markers(self):
        serializer = ReportSerializer(escaper="%$", delimiter=":;")
        text = "a:;b%$c%:d"
        escaped = serializer.escape(text)
        assert escaped == "a%$:;b%$%$c%:d"
        assert serializer.unescape(escaped) == text

    @pytest.mark.parametrize("escaper, delimiter", [
        ("ab", "b"),
        ("ab", "ba"),
        ("ab", "a"),
        ("xyz", "zx"),
        ("\\", "\\\\"),
        ("%%", "|"),
        ("\\", "::"),
    ])
    def test_overlapping_markers_rejected(self, escaper, delimiter):
        """Markers that overlap could not be unescaped back to the original text."""
        with pytest.raises(ValueError):
            ReportSerializer(escaper=escaper, delimiter=delimiter)

    @pytest.mark.parametrize("escaper, delimiter", [
        ("ab", "c"),
        ("ab", "cd"),
        ("%$", ":;"),
        ("<esc>", "\t"),
        ("!", ";"),
    ])
    @pytest.mark.parametrize("text", [
        "ab",
        "abab",
        "aabb",
        "bab",
        "cab",
        "%$%$:;:;%",
        "<esc>\t<esc",
        "!;!!;;",
        "plain",
    ])
    def test_round_trip_with_multi_character_markers(self, escaper, delimiter, text):
        serializer = ReportSerializer(escaper=escaper, delimiter=delimiter)
        escaped = serializer.escape(text)

        assert serializer.unescape(escaped) == text
        assert serializer.parse_line(delimiter.join(["00", escaped, escaped])) == ("00", [text, text])

    def test_hex_is_escaped_for_hex_markers(self):
        """Escaping applies to the digest field too, visible with markers made of hex digits."""
        serializer = ReportSerializer(escaper="e", delimiter="a")
        bucket = Bucket()
        bucket.add(bytes([0xAE]), FileRef("p"))

        assert serializer.render_lines(bucket) == ["eaeeap"]

    @pytest.mark.parametrize("bad", ["\\", "a\\x", "a|b"])
    def test_unescape_rejects_malformed(self, bad):
        with pytest.raises(ValueError):
            ReportSerializer().unescape(bad)


class TestRendering:
    """Test deterministic report output."""

    def test_single_file(self):
        bucket = Bucket()
        bucket.add(sha(b"content"), FileRef("a.txt"))

        assert ReportSerializer().render(bucket) == f"{sha(b'content').hex()}|a.txt\n"

    def test_paths_sorted_within_line(self):
        bucket = Bucket()
        bucket.add(sha(b"hi"), FileRef("y/1.txt"))
        bucket.add(sha(b"hi"), FileRef("x/1.txt"))

        assert ReportSerializer().render_lines(bucket) == [f"{sha(b'hi').hex()}|x/1.txt|y/1.txt"]

    def test_lines_sorted_by_first_path(self):
        bucket = Bucket()
        bucket.add(sha(b"2"), FileRef("b.txt"))
        bucket.add(sha(b"1"), FileRef("c.txt"))
        bucket.add(sha(b"1"), FileRef("a.txt"))

        lines = ReportSerializer().render_lines(bucket)

        assert lines == [
            f"{sha(b'1').hex()}|a.txt|c.txt",
            f"{sha(b'2').hex()}|b.txt",
        ]

    def test_ordinal_not_locale_order(self):
        """Uppercase sorts before lowercase (code point order)."""
        bucket = Bucket()
        bucket.add(sha(b"x"), FileRef("b"))
        bucket.add(sha(b"x"), FileRef("B"))
        bucket.add(sha(b"x"), FileRef("a"))

        _, paths = ReportSerializer().parse_line(ReportSerializer().render_lines(bucket)[0])

        assert paths == ["B", "a", "b"]

    def test_ties_broken_by_digest(self):
        """If two groups share their first path, the smaller digest hex comes first."""
        bucket = Bucket()
        bucket.add(b"\xff", FileRef("same"))
        bucket.add(b"\x01", FileRef("same"))

        assert ReportSerializer().render_lines(bucket) == ["01|same", "ff|same"]

    def test_empty_groups_dropped(self):
        bucket = Bucket()
        bucket.add(b"\x01", FileRef("a"))
        bucket[b"\x01"].clear()

        assert ReportSerializer().render(bucket) == ""

    def test_escaped_path_in_output(self):
        bucket = Bucket()
        bucket.add(sha(b"x"), FileRef("a|b.txt"))

        assert ReportSerializer().render(bucket) == f"{sha(b'x').hex()}|a\\|b.txt\n"

    def test_write_to_stream(self):
        bucket = Bucket()
        bucket.add(b"\x01", FileRef("a"))
        bucket.add(b"\x02", FileRef("b"))
        out = io.StringIO()

        count = ReportSerializer().write(bucket, out)

        assert count == 2
        assert out.getvalue() == "01|a\n02|b\n"

    def test_rendering_is_repeatable(self):
        bucket = Bucket()
        for i, name in enumerate(["q", "w", "e", "r", "t", "y"]):
            bucket.add(bytes([i % 3]), FileRef(name))
        serializer = ReportSerializer()

        assert serializer.render(bucket) == serializer.render(bucket)


class TestParsing:
    """Test splitting report lines back into fields."""

    def test_parse_line(self):
        digest, paths = ReportSerializer().parse_line("abcd|a\\|b.txt|c\\\\d")
        assert digest == "abcd"
        assert paths == ["a|b.txt", "c\\d"]

    def test_parse_rendered_output(self):
        bucket = Bucket()
        names = ["odd|name", "back\\slash", "normal"]
        for name in names:
            bucket.add(sha(b"same"), FileRef(name))
        serializer = ReportSerializer()

        digest, paths = serializer.parse_line(serializer.render_lines(bucket)[0])

        assert digest == sha(b"same").hex()
        assert paths == sorted(names)

    def test_line_without_paths_rejected(self):
        with pytest.raises(ValueError):
            ReportSerializer().parse_line("abcd")
