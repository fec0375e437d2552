"""
Shell-flavored filesystem helpers which honor Invoke's echo & dry-run config.
"""

import os
import shutil

from .util import debug


DEFAULT_ECHO_FORMAT = "\033[1;37m{command}\033[0m"


class FileOps(object):
    """
    Filesystem operations bound to an Invoke `~invoke.context.Context`.

    Each method mirrors a familiar shell command (``mkdir -p``, ``rm -rf``,
    ``ln``...). When the context's ``run.echo`` setting is on, the equivalent
    command line is printed the same way `~invoke.runners.Runner` echoes shell
    commands; under ``run.dry`` nothing touches the disk and, as with
    `~invoke.runners.Runner`, echo is forced on.
    """

    def __init__(self, context, echo=None):
        """
        :param context: The `~invoke.context.Context` supplying configuration.
        :param bool echo:
            Override for the context's ``run.echo`` setting. ``None`` (the
            default) means "use the config value", which is ``True`` under
            ``run.dry``.
        """
        self.context = context
        if echo is None:
            run = context.config.run
            echo = run.echo or run.get("dry", False)
        self.echo = echo

    @property
    def dry(self):
        return self.context.config.run.get("dry", False)

    def quiet(self):
        """
        Return a copy of this object which never echoes.
        """
        return self.__class__(self.context, echo=False)

    def _announce(self, command):
        debug(command)
        if self.echo:
            template = self.context.config.run.get(
                "echo_format", DEFAULT_ECHO_FORMAT
            )
            print(template.format(command=command), flush=True)
        return not self.dry

    def mkdir_p(self, path):
        if self._announce("mkdir -p {}".format(path)):
            os.makedirs(path, exist_ok=True)

    def rm_r(self, path):
        """
        Remove the directory tree (or single file) at ``path``.

        Raises `OSError` if ``path`` doesn't exist, like ``rm -r`` would.
        """
        if self._announce("rm -r {}".format(path)):
            if os.path.isdir(path) and not os.path.islink(path):
                shutil.rmtree(path)
            else:
                os.remove(path)

    def rm_f(self, path):
        if self._announce("rm -f {}".format(path)):
            try:
                os.remove(path)
            except FileNotFoundError:
                pass

    def ln(self, source, dest):
        """
        Hard-link ``source`` to ``dest``.
        """
        if self._announce("ln {} {}".format(source, dest)):
            os.link(source, dest)

    def mv(self, source, dest):
        if self._announce("mv {} {}".format(source, dest)):
            shutil.move(source, dest)
