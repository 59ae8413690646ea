"""Path Containment — pure checks on canonical paths.

Tests:
    - Strict descendants are contained; the base itself is not
    - Sibling directories sharing a name prefix are not contained
    - Relative paths are never contained
    - Absolute requested names replace the base on join
"""

from pathlib import PurePosixPath

from tos_api.core.path_containment import is_contained, join_requested

BASE = PurePosixPath("/srv/data")


def test_direct_child_is_contained():
    assert is_contained(BASE, PurePosixPath("/srv/data/tos.txt"))


def test_nested_child_is_contained():
    assert is_contained(BASE, PurePosixPath("/srv/data/2025/tos.txt"))


def test_base_itself_is_not_contained():
    assert not is_contained(BASE, BASE)


def test_parent_is_not_contained():
    assert not is_contained(BASE, PurePosixPath("/srv"))


def test_prefix_sibling_is_not_contained():
    assert not is_contained(BASE, PurePosixPath("/srv/data-evil/tos.txt"))


def test_relative_paths_are_rejected():
    assert not is_contained(PurePosixPath("data"), PurePosixPath("data/tos.txt"))


def test_join_relative_name():
    assert join_requested(BASE, "tos.txt") == PurePosixPath("/srv/data/tos.txt")


def test_join_absolute_name_escapes_base():
    joined = join_requested(BASE, "/etc/passwd")
    assert joined == PurePosixPath("/etc/passwd")
    assert not is_contained(BASE, joined)
