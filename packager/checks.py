"""
Filesystem freshness checks used to decide whether a file task must run.
"""

import os


def exists(path):
    """
    Return ``True`` if ``path`` exists (file, directory or anything else).
    """
    return os.path.exists(path)


def mtime(path):
    """
    Return the modification time of ``path``, or ``None`` if it's missing.
    """
    try:
        return os.stat(path).st_mtime
    except FileNotFoundError:
        return None


def newer_than(path, otherpath):
    """
    Ensures ``path`` exists and is the same age, or newer, than ``otherpath``.

    A missing ``otherpath`` counts as infinitely old.
    """
    ours = mtime(path)
    if ours is None:
        return False
    theirs = mtime(otherpath)
    return theirs is None or ours >= theirs


def out_of_date(target, sources):
    """
    Return ``True`` if ``target`` is missing or older than any of ``sources``.

    :param str target: Path of the file being produced.
    :param sources: Iterable of prerequisite paths. Missing ones are ignored
        here; callers decide whether a missing prerequisite is an error.
    """
    stamp = mtime(target)
    if stamp is None:
        return True
    for source in sources:
        theirs = mtime(source)
        if theirs is not None and theirs > stamp:
            return True
    return False
