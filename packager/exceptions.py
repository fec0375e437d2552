"""
Custom exception classes.

Anything not listed here (failing shell commands, filesystem errors) reaches
the caller as Invoke's own `~invoke.exceptions.UnexpectedExit` or as a plain
`OSError`.
"""


class MissingPrerequisite(Exception):
    """
    A file task depends on a path which neither exists nor has a task to
    build it.
    """

    def __init__(self, target, prerequisite):
        self.target = target
        self.prerequisite = prerequisite

    def __str__(self):
        return "Don't know how to build {!r} (needed by {!r})".format(
            self.prerequisite, self.target
        )
