"""Tests for branchnote.rule.replacement module."""

import re

from branchnote.rule import MatchResult, expand_template, resolve_replacement


def _match(pattern, text):
    return MatchResult.from_match(re.search(pattern, text))


class TestExpandTemplate:
    """Tests for expand_template function."""

    def test_numbered_backreference(self):
        """Test that \\1 is replaced with the first capture."""
        assert expand_template(r"[\1]", _match(r"(123)-topic", "123-topic")) == "[123]"

    def test_several_backreferences(self):
        """Test that each backreference picks its own group."""
        match = _match(r"(\d+)-(\w+)", "42-login")
        assert expand_template(r"\2 #\1", match) == "login #42"

    def test_whole_match(self):
        """Test that \\0 is the whole match."""
        assert expand_template(r"<\0>", _match(r"\d+-\w+", "42-login")) == "<42-login>"

    def test_named_backreference(self):
        """Test that \\k<name> refers to a named group."""
        match = _match(r"(?P<ticket>[A-Z]+-\d+)", "feature/PROJ-7-x")
        assert expand_template(r"\k<ticket>: ", match) == "PROJ-7: "

    def test_whitespace_preserved(self):
        """Test that surrounding whitespace is kept exactly."""
        assert expand_template(r" [\1] ", _match(r"(123)-topic", "123-topic")) == " [123] "

    def test_out_of_range_group_is_empty(self):
        """Test that a group past the last capture expands to nothing."""
        assert expand_template(r"[\1\5]", _match(r"(123)", "123")) == "[123]"

    def test_unmatched_optional_group_is_empty(self):
        """Test that an optional group that did not take part is empty."""
        assert expand_template(r"[\1|\2]", _match(r"(\d+)(-x)?", "7")) == "[7|]"

    def test_plain_text_untouched(self):
        """Test that text without backreferences is returned unchanged."""
        assert expand_template("WIP: ", _match(r"\d", "1")) == "WIP: "


class TestResolveReplacement:
    """Tests for resolve_replacement function."""

    def test_literal_template(self):
        """Test that a non-path value is treated as a template."""
        match = _match(r"(123)-topic", "123-topic")
        assert resolve_replacement("START [\\1] END", match) == "START [123] END"

    def test_file_contents_used_verbatim(self, temp_dir):
        """Test that an existing file's contents are used as is."""
        path = temp_dir / "replacement_text.txt"
        path.write_text("FOO\n")

        match = _match(r"(123)-topic", "123-topic")
        assert resolve_replacement(str(path), match) == "FOO\n"

    def test_file_contents_not_expanded(self, temp_dir):
        """Test that backreferences inside the file are not substituted."""
        path = temp_dir / "replacement_text.txt"
        path.write_text("[\\1] ")

        match = _match(r"(123)-topic", "123-topic")
        assert resolve_replacement(str(path), match) == "[\\1] "

    def test_missing_file_is_template(self, temp_dir):
        """Test that a path that does not exist is a literal template."""
        missing = str(temp_dir / "nope.txt")
        assert resolve_replacement(missing, _match(r"x", "x")) == missing

    def test_directory_is_template(self, temp_dir):
        """Test that a directory path is not read as a file."""
        assert resolve_replacement(str(temp_dir), _match(r"x", "x")) == str(temp_dir)

    def test_empty_replacement(self):
        """Test that an empty replacement resolves to empty text."""
        assert resolve_replacement("", _match(r"x", "x")) == ""


class TestLiteralBackslash:
    """Tests for escaped backslashes in templates."""

    def test_doubled_backslash_is_literal(self):
        """Test that \\\\ followed by a digit is a backslash and the digit."""
        assert expand_template(r"\\1", _match(r"(123)", "123")) == "\\1"

    def test_doubled_backslash_before_backreference(self):
        """Test that an escaped backslash can precede a backreference."""
        assert expand_template(r"\\\1", _match(r"(123)", "123")) == "\\123"


class TestUnreadableReplacementFile:
    """Tests for replacement files that cannot be used."""

    def test_unreadable_file_is_template(self, temp_dir, mocker):
        """Test that an existing but unreadable file is treated as a template."""
        path = temp_dir / "replacement_text.txt"
        path.write_text("FOO\n")
        mocker.patch("branchnote.rule.replacement.os.access", return_value=False)

        assert resolve_replacement(str(path), _match(r"x", "x")) == str(path)

    def test_latin1_file_contents(self, temp_dir):
        """Test that a non-UTF-8 replacement file is read without error."""
        path = temp_dir / "replacement_text.txt"
        path.write_bytes(b"Caf\xe9 ")

        assert resolve_replacement(str(path), _match(r"x", "x")).startswith("Caf")
