import pytest

from pathglob import compile_segment, fnmatch, has_magic


@pytest.mark.parametrize(
    "segment, magic",
    [
        ("file.txt", False),
        ("*.txt", True),
        ("file?.txt", True),
        ("file[1.txt", True),
        ("{a,b}", False),
        ("", False),
        (r"file\*.txt", False),
        (r"\[a]", False),
        (r"a\\*", True),
        (r"\\\?", False),
    ],
)
def test_has_magic(segment, magic):
    assert has_magic(segment) is magic


def test_literal_segment_is_exact_equality():
    m = compile_segment("file.txt")
    assert m.literal
    assert m.matches("file.txt")
    assert not m.matches("fileXtxt")
    assert not m.matches("file.txt2")


def test_star():
    m = compile_segment("*.txt")
    assert not m.literal
    assert m.matches("a.txt")
    assert m.matches(".txt") is False
    assert not m.matches("a.txt.bak")


def test_star_skips_hidden():
    m = compile_segment("*")
    assert m.matches("visible")
    assert not m.matches(".hidden")


def test_dot_segment_allows_hidden():
    m = compile_segment(".*")
    assert m.allows_hidden
    assert m.matches(".hidden")
    assert m.matches(".")
    assert m.matches("..")
    assert not m.matches("visible")


def test_question_mark_is_one_character():
    m = compile_segment("file?.txt")
    assert m.matches("file1.txt")
    assert not m.matches("file.txt")
    assert not m.matches("file12.txt")


def test_dot_is_escaped():
    m = compile_segment("a.b*")
    assert m.matches("a.bc")
    assert not m.matches("axbc")


def test_regex_metacharacters_are_literal():
    m = compile_segment("(x)+$^|*")
    assert m.matches("(x)+$^|yz")
    assert not m.matches("xx")


def test_class_and_range():
    m = compile_segment("file[1-2].txt")
    assert m.matches("file1.txt")
    assert m.matches("file2.txt")
    assert not m.matches("file3.txt")


@pytest.mark.parametrize("segment", ["file[!1].txt", "file[^1].txt"])
def test_negated_class(segment):
    m = compile_segment(segment)
    assert m.matches("file2.txt")
    assert not m.matches("file1.txt")


def test_closing_bracket_first_is_member():
    m = compile_segment("[]a]")
    assert m.matches("]")
    assert m.matches("a")
    assert not m.matches("b")


def test_trailing_dash_is_member():
    m = compile_segment("[a-]")
    assert m.matches("-")
    assert m.matches("a")
    assert not m.matches("b")


def test_reversed_range_never_matches():
    m = compile_segment("file[z-a].txt")
    assert not m.matches("filez.txt")
    assert not m.matches("filea.txt")
    assert not m.matches("filem.txt")


def test_reversed_range_keeps_other_members():
    m = compile_segment("[z-ab]")
    assert m.matches("b")
    assert not m.matches("m")


def test_unterminated_bracket_is_literal():
    m = compile_segment("file[1.txt")
    assert not m.literal
    assert m.matches("file[1.txt")
    assert not m.matches("file1.txt")


def test_posix_class():
    m = compile_segment("[[:digit:]]*")
    assert m.matches("1abc")
    assert not m.matches("abc")
    assert compile_segment("[[:upper:][:digit:]]").matches("Q")


def test_escaped_star_is_literal():
    m = compile_segment(r"file\*.txt")
    assert m.literal
    assert m.name == "file*.txt"
    assert m.matches("file*.txt")
    assert not m.matches("fileX.txt")


def test_escaped_character_inside_class():
    m = compile_segment(r"[\]]x")
    assert m.matches("]x")


@pytest.mark.parametrize(
    "segment, name",
    [(r"\{a", "{a"), (r"a\b", "ab"), (r"x\,y", "x,y")],
)
def test_literal_segment_is_unescaped(segment, name):
    m = compile_segment(segment)
    assert m.literal
    assert m.name == name
    assert m.matches(name)
    assert not m.matches(segment)


def test_trailing_backslash_is_literal():
    m = compile_segment("back\\")
    assert m.literal
    assert m.matches("back\\")


def test_escaped_leading_dot_allows_hidden():
    m = compile_segment(r"\.h*")
    assert m.allows_hidden
    assert m.matches(".hid")
    assert not m.matches("hid")


def test_compile_is_cached():
    assert compile_segment("*.swift") is compile_segment("*.swift")


def test_fnmatch_star_crosses_separator():
    assert fnmatch("a/b/c.txt", "a/*.txt")
    assert not fnmatch("a/b/c.txt", "b/*.txt")


def test_fnmatch_has_no_hidden_rule():
    assert fnmatch(".profile", "*")


def test_fnmatch_negated_class_matches_separator():
    assert fnmatch("a/b", "a[!x]b")
