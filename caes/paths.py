"""Path-string helpers: cleanup, splitting, and extraction of name, extension, base and directories."""

from __future__ import annotations

_QUOTES = "\"'`"


def cleanup_file_name(path):
    """Drop quote characters (", ', `) and collapse runs of '/' to a single '/'."""
    out = []
    for i, c in enumerate(path):
        if c in _QUOTES:
            continue
        if c == "/" and path[i + 1 : i + 2] == "/":
            continue
        out.append(c)
    return "".join(out)


def path_string_split(path):
    """Split a path into its non-empty components.

    Returns ``(parts, is_root)`` where ``is_root`` tells whether the path
    starts with '/'. The depth of the path is ``len(parts)``.
    """
    return [p for p in path.split("/") if p], path.startswith("/")


def _need_file_part(path):
    if not path:
        raise ValueError("empty path")
    if path.endswith("/"):
        raise ValueError(f"path {path!r} names a directory")


def path_extract_file_name(path):
    """The part of ``path`` after its last '/'.

    Raises ValueError for an empty path or one that ends in '/'.
    """
    _need_file_part(path)
    return path.rsplit("/", 1)[-1]


def path_extract_ext(path):
    """Whatever follows the last '.' of ``path``, or '' when it has none.

    Raises ValueError for an empty path or one that ends in '/'.
    """
    _need_file_part(path)
    dot = path.rfind(".")
    return "" if dot < 0 else path[dot + 1 :]


def path_extract_base(path):
    """The file name of ``path`` without directory or extension.

    A name that is only an extension (a hidden file such as '.rc') gives the
    text after the dot; an empty path gives ''.
    """
    if not path:
        return ""
    stop = len(path) - 1
    while stop > 0 and path[stop] not in "/.":
        stop -= 1
    if stop == 0:
        return path[1:] if path[0] == "." else path
    if path[stop] == "/":
        return path[stop + 1 :]
    start = path.rfind("/", 0, stop)
    return path[start + 1 : stop]


def path_extract_path(path):
    """The directory part of ``path``, without trailing slashes.

    A path that is empty or already ends in '/' is returned unchanged; a
    path with no '/' at all has no directory part and gives ''.
    """
    if not path or path.endswith("/"):
        return path
    slash = path.rfind("/")
    if slash < 0:
        return ""
    return path[:slash].rstrip("/")


def path_extract_last_dir(path):
    """The last component of ``path`` once trailing slashes are removed.

    Raises ValueError for an empty path or one made only of slashes.
    """
    if not path:
        raise ValueError("empty path")
    stripped = path.rstrip("/")
    if not stripped:
        raise ValueError("path is only the root directory")
    return stripped.rsplit("/", 1)[-1]