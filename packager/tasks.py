"""
File-producing tasks layered on top of Invoke's `~invoke.tasks.Task`.
"""

import os

from invoke import Task

from .checks import exists, out_of_date
from .exceptions import MissingPrerequisite
from .fileutils import FileOps
from .util import debug, flatten


class FileTask(Task):
    """
    A task which produces the file ``target`` and only runs when it's stale.

    ``prerequisites`` may mix plain paths, `.FileList` objects and other
    tasks. Any tasks among them are handed to Invoke as ``pre`` tasks, so
    Invoke's executor runs them first; everything is then consulted (by
    modification time) to decide whether the body needs to run at all.

    The target is considered stale when:

    * it doesn't exist;
    * any prerequisite path, or the target of any prerequisite `FileTask`,
      is newer than it;
    * a prerequisite `FileTask`'s target is missing (e.g. during a dry run);
    * a prerequisite is a regular, non-file task, which counts as always
      changed.

    `DirectoryTask` prerequisites never make a target stale; they merely
    need to exist.
    """

    def __init__(self, body, target, prerequisites=(), pre=None, **kwargs):
        self.target = os.fspath(target)
        self.prerequisites = list(prerequisites)
        # Only look at the top level here; FileLists must stay unresolved
        # until the task actually runs.
        tasks = [x for x in self.prerequisites if isinstance(x, Task)]
        super().__init__(body, pre=tasks + list(pre or []), **kwargs)

    def needed(self):
        forced = False
        paths = []
        for prereq in flatten(self.prerequisites):
            if isinstance(prereq, DirectoryTask):
                continue
            if isinstance(prereq, FileTask):
                if not exists(prereq.target):
                    forced = True
                paths.append(prereq.target)
            elif isinstance(prereq, Task):
                forced = True
            else:
                if not exists(prereq):
                    raise MissingPrerequisite(self.target, prereq)
                paths.append(prereq)
        return forced or out_of_date(self.target, paths)

    def __call__(self, *args, **kwargs):
        if not self.needed():
            debug("{!r} is up to date, skipping".format(self.target))
            return None
        debug("Building {!r}".format(self.target))
        return super().__call__(*args, **kwargs)

    def __repr__(self):
        return "<{} {!r} -> {!r}>".format(
            self.__class__.__name__, self.name, self.target
        )


class DirectoryTask(FileTask):
    """
    A `FileTask` creating directory ``path`` (and its parents) if missing.
    """

    def __init__(self, path, **kwargs):
        def mkdir(c):
            FileOps(c).mkdir_p(path)

        mkdir.__doc__ = "Create the {} directory".format(path)
        super().__init__(mkdir, path, **kwargs)

    def needed(self):
        return not os.path.isdir(self.target)


def file_task(target, *prerequisites, **kwargs):
    """
    Decorate a function as a `FileTask` building ``target``.

    Positional arguments after ``target`` are its prerequisites; any keyword
    arguments are passed through to `~invoke.tasks.Task` (``name``, ``help``
    and friends). For example::

        @file_task("build/site.tgz", "build/site", name="archive")
        def archive(c):
            c.run("tar zcf build/site.tgz build/site")
    """

    def inner(body):
        return FileTask(body, target, prerequisites, **kwargs)

    return inner


def directory(path, **kwargs):
    """
    Return a `DirectoryTask` for ``path``.
    """
    return DirectoryTask(path, **kwargs)


def when_writing(c, message):
    """
    Return ``True`` unless Invoke is in dry-run mode (``run.dry``).

    In dry-run mode, ``message`` is printed (prefixed with ``DRYRUN:``)
    instead, so actions which don't go through `~invoke.context.Context.run`
    can still report what they would have done::

        if when_writing(c, "Creating GEM"):
            build_the_gem()
    """
    if c.config.run.get("dry", False):
        debug("Dry run, skipping: {}".format(message))
        print("DRYRUN: {}".format(message), flush=True)
        return False
    return True
