"""Tests for reconstructing a directory tree from transcript tokens."""

from __future__ import annotations

import unittest
from pathlib import Path

from transcriptfs.errors import ClassificationError, StructureError
from transcriptfs.fs_tree import Directory, File, FsItem, build, build_tree
from transcriptfs.transcript import FileEntry, LineClassifier, tokenize_transcript

FIXTURES = Path(__file__).resolve().parents[2] / "fixtures"

# Two-level variant without the nested ``a/e`` directory.
FLAT_TRANSCRIPT = """\
$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
29116 f
2557 g
62596 h.lst
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
$ cd ..
"""


def load_short_input() -> str:
    return (FIXTURES / "day07-short.txt").read_text(encoding="utf-8")


def child_names(directory: Directory) -> list[str]:
    return [child.name for child in directory.children]


def subdirectory(directory: Directory, name: str) -> Directory:
    return next(child for child in directory.subdirectories if child.name == name)


def assert_sizes_aggregate(test: unittest.TestCase, item: FsItem) -> None:
    if isinstance(item, File):
        return
    test.assertEqual(item.total_size, sum(child.size for child in item.children))
    for child in item.children:
        assert_sizes_aggregate(test, child)


class BuildTreeTests(unittest.TestCase):
    def test_short_input_sizes(self) -> None:
        root = build(load_short_input())

        self.assertEqual(root.total_size, 48381165)
        self.assertEqual(subdirectory(root, "a").total_size, 94853)
        self.assertEqual(subdirectory(subdirectory(root, "a"), "e").total_size, 584)
        self.assertEqual(subdirectory(root, "d").total_size, 24933642)

    def test_every_directory_total_matches_children(self) -> None:
        for text in (load_short_input(), FLAT_TRANSCRIPT):
            with self.subTest(text=text.splitlines()[2:4]):
                assert_sizes_aggregate(self, build(text))

    def test_root_total_equals_flat_sum_of_file_rows(self) -> None:
        for text in (load_short_input(), FLAT_TRANSCRIPT):
            tokens = tokenize_transcript(text)
            flat_sum = sum(token.size for token in tokens if isinstance(token, FileEntry))
            with self.subTest(flat_sum=flat_sum):
                self.assertEqual(build_tree(tokens).total_size, flat_sum)

    def test_flat_transcript_sizes(self) -> None:
        root = build(FLAT_TRANSCRIPT)

        self.assertEqual(root.total_size, 48380581)
        self.assertEqual(subdirectory(root, "a").total_size, 94269)

    def test_single_file_root(self) -> None:
        root = build("$ cd /\n$ ls\n42 only.txt\n")

        self.assertEqual(root.children, (File("only.txt", 42),))
        self.assertEqual(root.files, (File("only.txt", 42),))
        self.assertEqual(root.subdirectories, ())
        self.assertEqual(root.total_size, 42)

    def test_empty_root_listing(self) -> None:
        root = build("$ cd /\n$ ls\n")

        self.assertEqual(root.children, ())
        self.assertEqual(root.total_size, 0)

    def test_strict_children_follow_listing_order(self) -> None:
        root = build(load_short_input())

        self.assertEqual(child_names(root), ["a", "b.txt", "c.dat", "d"])
        self.assertEqual(child_names(subdirectory(root, "a")), ["e", "f", "g", "h.lst"])

    def test_positional_children_are_files_then_entered_directories(self) -> None:
        root = build(load_short_input(), strict_names=False)

        self.assertEqual(child_names(root), ["b.txt", "c.dat", "a", "d"])
        self.assertEqual(root.total_size, 48381165)

    def test_out_of_order_cd_is_reconciled_by_name(self) -> None:
        text = "$ cd /\n$ ls\ndir a\ndir b\n$ cd b\n$ ls\n2 y\n$ cd ..\n$ cd a\n$ ls\n1 x\n"

        strict_root = build(text)
        positional_root = build(text, strict_names=False)

        self.assertEqual(child_names(strict_root), ["a", "b"])
        self.assertEqual(subdirectory(strict_root, "a").total_size, 1)
        self.assertEqual(child_names(positional_root), ["b", "a"])

    def test_end_of_input_closes_nested_directories(self) -> None:
        root = build("$ cd /\n$ ls\ndir a\n$ cd a\n$ ls\ndir b\n$ cd b\n$ ls\n7 deep\n")

        self.assertEqual(root.total_size, 7)
        self.assertEqual(subdirectory(subdirectory(root, "a"), "b").children, (File("deep", 7),))

    def test_accepts_custom_classifier(self) -> None:
        root = build("$ cd /\n$ ls\n3 f\n", classifier=LineClassifier())

        self.assertEqual(root.total_size, 3)


class BuildTreeErrorTests(unittest.TestCase):
    def assert_structure_error(self, text: str, fragment: str, strict_names: bool = True) -> StructureError:
        with self.assertRaises(StructureError) as exc_info:
            build(text, strict_names=strict_names)
        self.assertIn(fragment, str(exc_info.exception))
        return exc_info.exception

    def test_rejects_transcript_starting_with_ls(self) -> None:
        error = self.assert_structure_error("$ ls\n14 a\n", "must start with `$ cd /`")
        self.assertEqual(error.line_number, 1)

    def test_rejects_empty_transcript(self) -> None:
        self.assert_structure_error("\n\n", "empty transcript")

    def test_rejects_missing_ls_after_cd(self) -> None:
        error = self.assert_structure_error("$ cd /\n$ ls\ndir a\n$ cd a\n5 f\n", "expected `$ ls` after entering /a")
        self.assertEqual(error.line_number, 5)

    def test_rejects_unmatched_cd_up_at_root(self) -> None:
        self.assert_structure_error("$ cd /\n$ ls\n$ cd ..\n", "no open directory to close")

    def test_rejects_cd_root_after_first_line(self) -> None:
        self.assert_structure_error("$ cd /\n$ ls\ndir a\n$ cd a\n$ ls\n$ cd /\n", "only allowed as the first command")

    def test_rejects_listing_rows_after_subdirectories(self) -> None:
        text = "$ cd /\n$ ls\ndir a\n$ cd a\n$ ls\n$ cd ..\n9 stray\n"
        self.assert_structure_error(text, "unexpected '9 stray' in /")

    def test_rejects_second_ls_in_same_directory(self) -> None:
        self.assert_structure_error("$ cd /\n$ ls\n1 f\n$ ls\n", "unexpected '$ ls'")

    def test_strict_rejects_cd_into_unlisted_directory(self) -> None:
        text = "$ cd /\n$ ls\ndir a\n$ cd b\n$ ls\n"
        self.assert_structure_error(text, "`$ cd b` enters a directory not listed in /")
        self.assertEqual(build(text, strict_names=False).subdirectories[0].name, "b")

    def test_strict_rejects_directory_entered_twice(self) -> None:
        text = "$ cd /\n$ ls\ndir a\n$ cd a\n$ ls\n$ cd ..\n$ cd a\n$ ls\n"
        self.assert_structure_error(text, "/a is entered twice")

    def test_strict_rejects_directory_listed_twice(self) -> None:
        text = "$ cd /\n$ ls\ndir a\ndir a\n$ cd a\n$ ls\n10 x\n$ cd ..\n"
        error = self.assert_structure_error(text, "directory /a is listed twice")
        self.assertEqual(error.line_number, 4)

        positional_root = build(text, strict_names=False)
        self.assertEqual(child_names(positional_root), ["a"])
        self.assertEqual(positional_root.total_size, 10)

    def test_deep_nesting_raises_structure_error(self) -> None:
        lines = ["$ cd /", "$ ls", "dir d"]
        for _ in range(5_000):
            lines.extend(["$ cd d", "$ ls", "dir d"])
        self.assert_structure_error("\n".join(lines) + "\n", "transcript nests too deeply", strict_names=False)

    def test_strict_rejects_listed_directory_never_entered(self) -> None:
        text = "$ cd /\n$ ls\ndir a\ndir b\n$ cd a\n$ ls\n1 f\n"
        self.assert_structure_error(text, "/b is listed but never entered")
        self.assertEqual(child_names(build(text, strict_names=False)), ["a"])

    def test_classification_errors_propagate(self) -> None:
        with self.assertRaises(ClassificationError):
            build("$ cd /\n$ ls\nnot a line\n")


if __name__ == "__main__":
    unittest.main()
