import os

import pytest

from mdwiki.core.errors import PathOutsideRepoError
from mdwiki.core.paths import breadcrumbs, clean_uri, local, parent_uri


@pytest.fixture
def root(tmp_path):
    r = tmp_path / "wiki"
    r.mkdir()
    return os.path.realpath(r)


def test_local_joins_relative_and_absolute_request_paths(root):
    assert local(root, "notes/todo") == os.path.join(root, "notes", "todo")
    assert local(root, "/notes/todo") == os.path.join(root, "notes", "todo")
    assert local(root, "") == root
    assert local(root, "/") == root


def test_local_allows_dotdot_that_stays_inside(root):
    assert local(root, "a/../b") == os.path.join(root, "b")


@pytest.mark.parametrize("path", ["../escape", "/../../etc/passwd", "a/../../x", "..\\..\\x"])
def test_local_rejects_escapes(root, path):
    with pytest.raises(PathOutsideRepoError) as exc:
        local(root, path)
    assert exc.value.message == "path outside of repo"
    assert exc.value.status_code == 400


def test_local_rejects_sibling_prefix(root):
    os.mkdir(root + "-other")
    with pytest.raises(PathOutsideRepoError):
        local(root, "../" + os.path.basename(root) + "-other/page")


@pytest.mark.parametrize("path", [".git", ".git/config", "/.git/objects/xx", "a/../.git/HEAD"])
def test_local_rejects_metadata_dir(root, path):
    with pytest.raises(PathOutsideRepoError):
        local(root, path)


def test_local_allows_names_that_only_start_like_metadata(root):
    assert local(root, ".gitignore") == os.path.join(root, ".gitignore")


def test_local_rejects_symlink_out_of_root(root, tmp_path):
    outside = tmp_path / "outside"
    outside.mkdir()
    os.symlink(outside, os.path.join(root, "link"))
    with pytest.raises(PathOutsideRepoError):
        local(root, "link/secret")


def test_clean_uri():
    assert clean_uri("") == "/"
    assert clean_uri("/") == "/"
    assert clean_uri("a//b/../c/") == "/a/c"
    assert clean_uri("//a") == "/a"


def test_parent_uri():
    assert parent_uri("a/b") == "/a"
    assert parent_uri("a") == "/"


def test_breadcrumbs_drop_last_segment():
    crumbs = breadcrumbs("/a/b/c")
    assert [(c.name, c.uri) for c in crumbs] == [("home", "/"), ("a", "/a"), ("b", "/a/b")]


def test_breadcrumbs_root_and_single_segment():
    assert [(c.name, c.uri) for c in breadcrumbs("/")] == [("home", "/")]
    assert [(c.name, c.uri) for c in breadcrumbs("/page")] == [("home", "/")]


def test_local_rejects_null_byte(root):
    with pytest.raises(PathOutsideRepoError):
        local(root, "a\x00b")


def test_local_returns_the_link_not_its_target(root):
    os.mkdir(os.path.join(root, "real"))
    os.symlink("real", os.path.join(root, "alias"))
    assert local(root, "alias") == os.path.join(root, "alias")
