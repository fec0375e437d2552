"""
Lazily-resolved lists of file paths built from glob patterns.
"""

from fnmatch import fnmatch
import glob
import os
import re

from .util import debug


#: Patterns excluded from every new `FileList` until `FileList.clear_exclude`
#: is called.
DEFAULT_EXCLUDES = ("CVS", "*.bak", "*~", "__pycache__", "*.pyc")

_GLOB_CHARS = re.compile(r"[*?\[]")


class FileList(object):
    """
    An ordered list of file paths described by glob patterns.

    Patterns are only expanded against the filesystem when the list is first
    read (iterated, indexed, measured...), so a `FileList` may be set up
    before the files it names exist. Any later `include`/`exclude` call
    causes a fresh expansion on next access.

    Example::

        files = FileList("README.rst", "lib/**/*.py")
        files.exclude("lib/vendor/*")
        for path in files:
            ...
    """

    def __init__(self, *patterns):
        self._items = []
        self._excludes = list(DEFAULT_EXCLUDES)
        self._resolved = None
        self.include(*patterns)

    def include(self, *patterns):
        """
        Add one or more glob ``patterns`` (or plain paths).

        Patterns lacking glob characters are kept verbatim, whether or not
        the named path exists. Returns ``self`` for chaining.
        """
        for pattern in patterns:
            self._items.append(("glob", os.fspath(pattern)))
        self._resolved = None
        return self

    def extend(self, paths):
        """
        Add literal ``paths``; no glob expansion is performed on them.
        """
        for path in paths:
            self._items.append(("path", os.fspath(path)))
        self._resolved = None
        return self

    def exclude(self, *patterns):
        """
        Drop any path matching one of ``patterns``.

        Each pattern is either an `fnmatch`-style string or a compiled regular
        expression. String patterns containing a path separator are matched
        against the whole path; others are matched against every component,
        so excluding a directory name excludes everything beneath it.
        """
        self._excludes.extend(patterns)
        self._resolved = None
        return self

    def clear_exclude(self):
        """
        Forget all exclusions, including the defaults.
        """
        self._excludes = []
        self._resolved = None
        return self

    def is_excluded(self, path):
        parts = os.path.normpath(path).split(os.sep)
        for pattern in self._excludes:
            if hasattr(pattern, "search"):
                if pattern.search(path):
                    return True
            elif "/" in pattern or os.sep in pattern:
                if fnmatch(path, pattern):
                    return True
            elif any(fnmatch(part, pattern) for part in parts):
                return True
        return False

    def resolve(self):
        """
        Expand all patterns now, returning the resulting list of paths.
        """
        seen = set()
        resolved = []
        for kind, value in self._items:
            if kind == "glob" and _GLOB_CHARS.search(value):
                candidates = sorted(glob.glob(value, recursive=True))
            else:
                candidates = [value]
            for path in candidates:
                if path in seen or self.is_excluded(path):
                    continue
                seen.add(path)
                resolved.append(path)
        debug("Resolved {} file(s) from {!r}".format(len(resolved), self))
        self._resolved = resolved
        return resolved

    def to_list(self):
        if self._resolved is None:
            self.resolve()
        return list(self._resolved)

    def __iter__(self):
        return iter(self.to_list())

    def __len__(self):
        return len(self.to_list())

    def __getitem__(self, index):
        return self.to_list()[index]

    def __contains__(self, path):
        return os.fspath(path) in self.to_list()

    def __bool__(self):
        return len(self) > 0

    def __eq__(self, other):
        if isinstance(other, FileList):
            other = other.to_list()
        if not isinstance(other, (list, tuple)):
            return NotImplemented
        return self.to_list() == list(other)

    def __iadd__(self, paths):
        if isinstance(paths, FileList):
            self._items.extend(paths._items)
            self._resolved = None
            return self
        if isinstance(paths, (str, os.PathLike)):
            paths = [paths]
        return self.extend(paths)

    def __repr__(self):
        patterns = [value for _, value in self._items]
        return "<{}: {!r}>".format(self.__class__.__name__, patterns)
