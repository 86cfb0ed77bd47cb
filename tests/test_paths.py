import pytest

from caes.paths import (
    cleanup_file_name,
    path_extract_base,
    path_extract_ext,
    path_extract_file_name,
    path_extract_last_dir,
    path_extract_path,
    path_string_split,
)

DIRECTORY = "music/live"
STEM = "song"
EXT = "wav"


def test_cleanup_leaves_plain_path_alone():
    path = f"{DIRECTORY}/{STEM}.{EXT}"
    assert cleanup_file_name(path) == path


def test_cleanup_removes_quotes():
    path = f"{DIRECTORY}/{STEM}.{EXT}"
    assert cleanup_file_name(f"\"'{path}`'\"") == path


def test_cleanup_collapses_slashes():
    result = cleanup_file_name("x//y///z")
    assert "//" not in result
    assert result.replace("/", "") == "xyz"
    assert result.count("/") == 2


def test_split_absolute_path():
    parts = ["usr", "local", "bin"]
    path = "/" + "//".join(parts) + "/"
    found, is_root = path_string_split(path)
    assert found == parts
    assert is_root is True


def test_split_relative_path():
    parts = ["a", "b"]
    found, is_root = path_string_split("/".join(parts))
    assert found == parts
    assert is_root is False


def test_file_name():
    name = f"{STEM}.{EXT}"
    assert path_extract_file_name(f"{DIRECTORY}/{name}") == name
    assert path_extract_file_name(name) == name


@pytest.mark.parametrize("bad", ["", f"{DIRECTORY}/"])
def test_file_name_errors(bad):
    with pytest.raises(ValueError):
        path_extract_file_name(bad)


def test_ext():
    assert path_extract_ext(f"{DIRECTORY}/{STEM}.{EXT}") == EXT
    assert path_extract_ext(f"{DIRECTORY}/{STEM}") == ""
    assert path_extract_ext(f".{STEM}") == STEM


@pytest.mark.parametrize("bad", ["", f"{DIRECTORY}/"])
def test_ext_errors(bad):
    with pytest.raises(ValueError):
        path_extract_ext(bad)


@pytest.mark.parametrize(
    "path",
    [f"{DIRECTORY}/{STEM}.{EXT}", f"{STEM}.{EXT}", f"{DIRECTORY}/{STEM}", f".{STEM}", STEM],
)
def test_base(path):
    assert path_extract_base(path) == STEM


def test_base_keeps_inner_dots():
    assert path_extract_base(f"{STEM}.v2.{EXT}") == f"{STEM}.v2"


def test_base_empty():
    assert path_extract_base("") == ""


def test_path_part():
    name = f"{STEM}.{EXT}"
    assert path_extract_path(f"{DIRECTORY}/{name}") == DIRECTORY
    assert path_extract_path(f"{DIRECTORY}///{name}") == DIRECTORY


def test_path_part_of_directory_is_unchanged():
    path = f"{DIRECTORY}/"
    assert path_extract_path(path) == path


def test_path_part_without_slash():
    assert path_extract_path(STEM) == ""


def test_last_dir():
    assert path_extract_last_dir(f"{DIRECTORY}/{STEM}//") == STEM
    assert path_extract_last_dir(f"/{STEM}") == STEM


@pytest.mark.parametrize("bad", ["", "///"])
def test_last_dir_errors(bad):
    with pytest.raises(ValueError):
        path_extract_last_dir(bad)