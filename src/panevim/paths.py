"""Relative path computation between the shell and the editor.

The editor keeps the working directory it was launched in, while later
invocations may run from anywhere. File arguments are therefore rewritten
relative to the editor's directory before being typed into it.

PUBLIC API:
  - relative_path: Path of `to_path` as seen from `from_dir`
  - resolve_for_editor: Translate a shell file argument into the editor's frame
"""

import os


def _contains(ancestor: str, path: str) -> bool:
    """Component-aligned prefix test: "/a/b" contains "/a/b/c" but not "/a/bc"."""
    if path == ancestor:
        return True
    return path.startswith(ancestor.rstrip(os.sep) + os.sep)


def relative_path(from_dir: str, to_path: str) -> str:
    """Return `to_path` relative to the directory `from_dir`.

    Both arguments are canonicalised first (symlinks followed). The working
    copy of `from_dir` loses one trailing component per step until it contains
    `to_path`; each step becomes one ".." segment, followed by the remainder
    of `to_path` below the common ancestor.

    Identical inputs give "". When the only common ancestor is the root, the
    absolute target is returned so the result still begins with a separator.
    """
    base = os.path.realpath(from_dir)
    target = os.path.realpath(to_path)

    common = base
    levels = 0
    while not _contains(common, target):
        common = os.path.dirname(common)
        levels += 1

    tail = target[len(common):].lstrip(os.sep)
    if levels and common == os.sep:
        return os.sep + tail

    parts = [os.pardir] * levels
    if tail:
        parts.append(tail)
    return os.sep.join(parts)


def resolve_for_editor(file: str, invoking_dir: str, editor_dir: str) -> str:
    """Rewrite a file argument given in `invoking_dir` so it is valid in `editor_dir`."""
    absolute = os.path.join(invoking_dir, os.path.expanduser(file))
    resolved = relative_path(editor_dir, absolute)
    # The editor's own directory has no tail; "." keeps :edit from seeing an empty arg
    return resolved or os.curdir
