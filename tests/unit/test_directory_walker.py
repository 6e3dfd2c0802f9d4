from pathglob import DirectoryWalker, MemoryTree
from tests.helpers.trees import FailingListFileSystem, RecordingFileSystem


def test_wildcard_last_segment(glob_tree):
    walker = DirectoryWalker(glob_tree)
    assert walker.walk("/work/*.txt") == {"/work/file1.txt", "/work/file2.txt"}


def test_relative_results_have_no_dot_prefix(glob_tree):
    walker = DirectoryWalker(glob_tree)
    assert walker.walk("*.h") == {"test.h"}


def test_explicit_dot_prefix_is_kept(glob_tree):
    walker = DirectoryWalker(glob_tree)
    assert walker.walk("./*.h") == {"./test.h"}


def test_directories_are_marked(glob_tree):
    walker = DirectoryWalker(glob_tree)
    assert walker.walk("*") == {
        "another/",
        "deep/",
        "empty/",
        "file1.swift",
        "file1.txt",
        "file2.swift",
        "file2.txt",
        "subdir/",
        "test.h",
    }


def test_inner_wildcard_descends_into_directories_only(glob_tree):
    glob_tree.touch("/work/notadir.txt")
    walker = DirectoryWalker(glob_tree)
    assert walker.walk("*/*.txt") == {"another/file4.txt", "subdir/file3.txt"}


def test_three_levels(glob_tree):
    walker = DirectoryWalker(glob_tree)
    assert walker.walk("/work/*/*/*.txt") == {"/work/deep/nested/file.txt"}


def test_literal_segments_do_not_list():
    tree = MemoryTree(cwd="/work")
    tree.import_tree(["/work/a/b/c.txt"])
    fs = RecordingFileSystem(tree)
    assert DirectoryWalker(fs).walk("a/b/c.txt") == {"a/b/c.txt"}
    assert all(name != "list_entries" for name, _ in fs.calls)


def test_literal_last_segment_directory_is_marked(glob_tree):
    walker = DirectoryWalker(glob_tree)
    assert walker.walk("/work/subdir") == {"/work/subdir/"}


def test_literal_missing(glob_tree):
    walker = DirectoryWalker(glob_tree)
    assert walker.walk("/work/nonexistent.txt") == set()


def test_literal_through_file_is_dropped(glob_tree):
    walker = DirectoryWalker(glob_tree)
    assert walker.walk("file1.txt/*") == set()
    assert walker.walk("file1.txt/x") == set()


def test_trailing_separator_without_magic(glob_tree):
    walker = DirectoryWalker(glob_tree)
    assert walker.walk("subdir/") == {"subdir/"}
    assert walker.walk("file1.txt/") == set()
    assert walker.walk("missing/") == set()


def test_trailing_separator_with_magic_keeps_directories(glob_tree):
    walker = DirectoryWalker(glob_tree)
    assert walker.walk("*/") == {"another/", "deep/", "empty/", "subdir/"}


def test_root(glob_tree):
    walker = DirectoryWalker(glob_tree)
    assert walker.walk("/") == {"/"}
    assert walker.walk("/*") == {"/home/", "/work/"}


def test_hidden_entries_need_dot_segment(glob_tree):
    walker = DirectoryWalker(glob_tree)
    assert ".hidden" not in walker.walk("*")
    assert walker.walk("?hidden") == set()
    assert walker.walk(".h*") == {".hidden"}


def test_pseudo_entries_for_dot_segment(glob_tree):
    walker = DirectoryWalker(glob_tree)
    assert walker.walk(".*") == {"./", "../", ".hidden"}
    assert walker.walk(".[!.]*") == {".hidden"}


def test_pseudo_entries_in_empty_directory(glob_tree):
    walker = DirectoryWalker(glob_tree)
    assert walker.walk("empty/.*") == {"empty/./", "empty/../"}


def test_pseudo_entries_inner_segment(glob_tree):
    walker = DirectoryWalker(glob_tree)
    assert walker.walk("subdir/.?/*.h") == {"subdir/../test.h"}
    assert walker.walk("subdir/.*/*.h") == {"subdir/../test.h"}


def test_unterminated_bracket_matches_literal_name(glob_tree):
    glob_tree.touch("/work/file[1.txt")
    walker = DirectoryWalker(glob_tree)
    assert walker.walk("file[1.txt") == {"file[1.txt"}


def test_nonexistent_prefix(glob_tree):
    walker = DirectoryWalker(glob_tree)
    assert walker.walk("/nonexistent/*/file.txt") == set()


def test_unreadable_directory_contributes_nothing(glob_tree):
    glob_tree.deny("/work/subdir")
    walker = DirectoryWalker(glob_tree)
    assert walker.walk("subdir/*") == set()
    assert walker.walk("*/*.txt") == {"another/file4.txt"}
    # a literal path does not need to read the directory
    assert walker.walk("subdir/file3.txt") == {"subdir/file3.txt"}


def test_unreadable_directory_has_no_pseudo_entries(glob_tree):
    glob_tree.deny("/work/subdir")
    walker = DirectoryWalker(glob_tree)
    assert walker.walk("subdir/.*") == set()
    assert walker.walk("subdir/./*") == set()
    # a readable empty directory still has "." and ".."
    assert walker.walk("empty/.*") == {"empty/./", "empty/../"}


def test_listing_error_is_absorbed(glob_tree):
    fs = FailingListFileSystem(glob_tree, denied={"subdir"})
    walker = DirectoryWalker(fs)
    assert walker.walk("*/*.swift") == set()
    assert walker.walk("*/*.txt") == {"another/file4.txt"}


def test_empty_pattern(glob_tree):
    assert DirectoryWalker(glob_tree).walk("") == set()


def test_escaped_literal_segments():
    tree = MemoryTree(cwd="/")
    tree.import_tree(["/d/{a", "/d/ab", "/d/x,y", "/d/sub/f"])
    walker = DirectoryWalker(tree)
    assert walker.walk(r"/d/\{a") == {"/d/{a"}
    assert walker.walk(r"/d/a\b") == {"/d/ab"}
    assert walker.walk(r"/d/x\,y") == {"/d/x,y"}
    assert walker.walk(r"/d/s\ub/*") == {"/d/sub/f"}


def test_escaped_directory_only_pattern():
    tree = MemoryTree(cwd="/")
    tree.import_tree(["/d/sub/", "/d/*/"])
    walker = DirectoryWalker(tree)
    assert walker.walk("/d/s\\ub/") == {"/d/sub/"}
    assert walker.walk("/d/\\*/") == {"/d/*/"}


def test_escaped_leading_dot_matches_hidden():
    tree = MemoryTree(cwd="/")
    tree.import_tree(["/d/.hid", "/d/hid"])
    assert DirectoryWalker(tree).walk(r"/d/\.h*") == {"/d/.hid"}
