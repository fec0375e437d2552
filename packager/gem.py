"""
RubyGems package metadata, built by shelling out to ``gem build``.
"""

import os
import tempfile

from .util import debug


def _ruby_str(value):
    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'")
    return "'{}'".format(escaped)


def _ruby_list(values):
    return "[{}]".format(", ".join(_ruby_str(x) for x in values))


class GemSpec(object):
    """
    Metadata describing a RubyGems package.

    Any object offering ``name``, ``version``, ``files`` and a
    ``build(context)`` method which writes ``<name>-<version>.gem`` into the
    current directory can be given to `.PackageTask` as its ``gem_spec``;
    this is the stock implementation.

    :param files:
        Paths to ship in the gem; a list or `.FileList`. Resolved only when
        the gemspec is rendered.
    :param str command:
        Template for the build command; ``{gemspec}`` is replaced with the
        path of the temporary ``.gemspec`` file.
    """

    command = "gem build {gemspec}"

    def __init__(
        self,
        name,
        version,
        files=None,
        summary="",
        description="",
        authors=(),
        platform="ruby",
        require_paths=("lib",),
        requirements=(),
        command=None,
    ):
        self.name = name
        self.version = version
        self.files = files if files is not None else []
        self.summary = summary
        self.description = description
        self.authors = list(authors)
        self.platform = platform
        self.require_paths = list(require_paths)
        self.requirements = list(requirements)
        if command is not None:
            self.command = command

    @property
    def file_name(self):
        return "{}-{}.gem".format(self.name, self.version)

    def to_ruby(self):
        """
        Render this spec as the source of a ``.gemspec`` file.
        """
        lines = [
            "Gem::Specification.new do |s|",
            "  s.name = {}".format(_ruby_str(self.name)),
            "  s.version = {}".format(_ruby_str(self.version)),
            "  s.summary = {}".format(_ruby_str(self.summary)),
        ]
        if self.description:
            lines.append(
                "  s.description = {}".format(_ruby_str(self.description))
            )
        if self.authors:
            lines.append("  s.authors = {}".format(_ruby_list(self.authors)))
        if self.platform != "ruby":
            lines.append("  s.platform = {}".format(_ruby_str(self.platform)))
        lines.append(
            "  s.require_paths = {}".format(_ruby_list(self.require_paths))
        )
        if self.requirements:
            lines.append(
                "  s.requirements = {}".format(_ruby_list(self.requirements))
            )
        lines.append("  s.files = {}".format(_ruby_list(self.files)))
        lines.append("end")
        return "\n".join(lines) + "\n"

    def build(self, c):
        """
        Write a temporary gemspec and run the build command on it.

        The gem lands in the current working directory as `file_name`.
        Returns the `~invoke.runners.Result` of the build command.
        """
        fd, path = tempfile.mkstemp(
            prefix="{}-".format(self.name), suffix=".gemspec", dir="."
        )
        try:
            with os.fdopen(fd, "w") as fp:
                fp.write(self.to_ruby())
            gemspec = os.path.basename(path)
            debug("Building {} from {}".format(self.file_name, gemspec))
            return c.run(self.command.format(gemspec=gemspec))
        finally:
            os.remove(path)

    def __repr__(self):
        return "<{} {}>".format(self.__class__.__name__, self.file_name)
