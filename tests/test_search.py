import os
from pathlib import Path, PurePosixPath
from unittest import mock

import pytest

from justlib.search import (
    FILENAME,
    Search,
    clean,
    find,
    find_justfile,
    init,
    project_root,
    working_directory_from_justfile,
)
from justlib.search_config import (
    FromInvocationDirectory,
    FromSearchDirectory,
    WithJustfile,
    WithJustfileAndWorkingDirectory,
)
from justlib.search_error import (
    JustfileHadNoParentError,
    MultipleCandidatesError,
    NotFoundError,
    SearchIoError,
)

CONTENTS = "default:\n\techo ok"


def test_not_found(tmp_path):
    with pytest.raises(NotFoundError):
        find_justfile(tmp_path)


def test_multiple_candidates(tmp_path):
    with mock.patch("justlib.search.os.listdir", return_value=["justfile", "JUSTFILE"]):
        with pytest.raises(MultipleCandidatesError) as info:
            find_justfile(tmp_path)
    assert info.value.candidates == [tmp_path / "justfile", tmp_path / "JUSTFILE"]


def test_found(tmp_path):
    (tmp_path / FILENAME).write_text(CONTENTS)
    assert find_justfile(tmp_path) == tmp_path / FILENAME


def test_found_spongebob_case(tmp_path):
    name = "".join(c.upper() if i % 2 == 0 else c for i, c in enumerate(FILENAME))
    (tmp_path / name).write_text(CONTENTS)
    found = find_justfile(tmp_path)
    assert found.parent == tmp_path
    assert found.name.lower() == FILENAME


def test_found_from_inner_dir(tmp_path):
    (tmp_path / FILENAME).write_text(CONTENTS)
    inner = tmp_path / "a" / "b"
    inner.mkdir(parents=True)
    assert find_justfile(inner) == tmp_path / FILENAME


def test_found_and_stopped_at_first_justfile(tmp_path):
    (tmp_path / FILENAME).write_text(CONTENTS)
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / FILENAME).write_text(CONTENTS)
    (tmp_path / "a" / "b").mkdir()
    assert find_justfile(tmp_path / "a" / "b") == tmp_path / "a" / FILENAME


def test_unreadable_directory_is_io_error(tmp_path):
    missing = tmp_path / "missing"
    with pytest.raises(SearchIoError) as info:
        find_justfile(missing)
    assert info.value.directory == missing


def test_justfile_symlink_parent(tmp_path):
    src = tmp_path / "src"
    src.write_text("")
    sub = tmp_path / "sub"
    sub.mkdir()
    justfile = sub / "justfile"
    os.symlink(src, justfile)

    search = find(FromInvocationDirectory(), sub)

    assert search.justfile == justfile
    assert search.working_directory == sub


@pytest.mark.parametrize(
    "prefix, suffix, want",
    [
        ("/", "foo", "/foo"),
        ("/bar", "/foo", "/foo"),
        ("//foo", "bar//baz", "/foo/bar/baz"),
        ("/", "..", "/"),
        ("/", "/..", "/"),
        ("/..", "", "/"),
        ("/../../../..", "../../../", "/"),
        ("/.", "./", "/"),
        ("/foo/../", "bar", "/bar"),
        ("/foo/bar", "..", "/foo"),
        ("/foo/bar/", "..", "/foo"),
    ],
)
def test_clean(prefix, suffix, want):
    assert clean(PurePosixPath(prefix), PurePosixPath(suffix)) == PurePosixPath(want)


def test_find_from_search_directory(tmp_path):
    child = tmp_path / "child"
    child.mkdir()
    (child / FILENAME).write_text(CONTENTS)
    (tmp_path / FILENAME).write_text(CONTENTS)

    search = find(FromSearchDirectory("child"), tmp_path)

    assert search == Search(child / FILENAME, child)


def test_find_from_search_directory_upwards(tmp_path):
    (tmp_path / FILENAME).write_text(CONTENTS)
    child = tmp_path / "child"
    child.mkdir()
    (child / FILENAME).write_text(CONTENTS)

    search = find(FromSearchDirectory("../"), child)

    assert search == Search(tmp_path / FILENAME, tmp_path)


def test_find_with_justfile(tmp_path):
    search = find(WithJustfile("justfile"), tmp_path)
    assert search == Search(tmp_path / "justfile", tmp_path)


def test_find_with_justfile_and_working_directory(tmp_path):
    search = find(WithJustfileAndWorkingDirectory("justfile", "sub"), tmp_path)
    assert search == Search(tmp_path / "justfile", tmp_path / "sub")


def test_init_with_git_in_invocation_directory(tmp_path):
    (tmp_path / ".git").mkdir()
    search = init(FromInvocationDirectory(), tmp_path)
    assert search == Search(tmp_path / FILENAME, tmp_path)


def test_init_parent_dir(tmp_path):
    (tmp_path / ".git").mkdir()
    sub = tmp_path / "sub"
    sub.mkdir()
    search = init(FromInvocationDirectory(), sub)
    assert search == Search(tmp_path / FILENAME, tmp_path)


def test_init_alternate_marker(tmp_path):
    (tmp_path / "_darcs").mkdir()
    assert project_root(tmp_path) == tmp_path


def test_init_search_directory(tmp_path):
    sub = tmp_path / "sub"
    (sub / ".git").mkdir(parents=True)
    search = init(FromSearchDirectory("sub/"), tmp_path)
    assert search == Search(sub / FILENAME, sub)


def test_init_with_justfile(tmp_path):
    sub = tmp_path / "sub"
    (sub / ".git").mkdir(parents=True)
    search = init(WithJustfile(tmp_path / "justfile"), sub)
    assert search == Search(tmp_path / "justfile", tmp_path)


def test_init_with_justfile_and_working_directory(tmp_path):
    search = init(
        WithJustfileAndWorkingDirectory(tmp_path / "justfile", "/"), tmp_path
    )
    assert search.justfile == tmp_path / "justfile"
    assert search.working_directory == Path(tmp_path.anchor)


def test_working_directory_from_relative_justfile():
    assert working_directory_from_justfile(PurePosixPath("a/justfile")) == PurePosixPath(
        "a"
    )


def test_working_directory_from_root_fails():
    with pytest.raises(JustfileHadNoParentError) as info:
        working_directory_from_justfile(PurePosixPath("/"))
    assert info.value.path == PurePosixPath("/")


def test_unknown_config_rejected(tmp_path):
    with pytest.raises(TypeError):
        find(object(), tmp_path)