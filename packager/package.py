"""
The `PackageTask`: declarative packaging of a project into archives.
"""

import contextlib
import os

from invoke import Collection, Task

from .filelist import FileList
from .fileutils import FileOps
from .tasks import DirectoryTask, FileTask, when_writing
from .util import debug


def _describe(text):
    def decorator(func):
        func.__doc__ = text
        return func

    return decorator


class PackageTask(object):
    """
    Register tasks packaging a project into distributable files.

    The following tasks are added to `collection` (names shown as typed on
    the command line):

    ``package``
        Create all the requested package files.
    ``clobber-package``
        Delete the package directory, ignoring errors. Also hooked into a
        ``clobber`` task, which is created when the collection lacks one.
    ``repackage``
        Rebuild the package files from scratch, even if up to date.
    ``gem``
        Create the RubyGems package (only when `gem_spec` is given).
    ``package-tgz``, ``package-zip``, ``package-gem``
        File tasks producing ``<package_dir>/<name>-<version>.tgz`` (etc).
    ``package-stage``
        File task hard-linking every package file into
        ``<package_dir>/<name>-<version>/``, which the archivers then pack.

    Simple example, in a ``tasks.py``::

        from invoke import Collection
        from packager import PackageTask

        ns = Collection()

        def configure(p):
            p.need_tar = True
            p.package_files.include("lib/**/*.py", "README.rst")

        PackageTask("myproject", "1.2.3", configure=configure, collection=ns)

    With a `.GemSpec` the name, version and file list come from the spec::

        spec = GemSpec("rake", "0.4.0", files=FileList("lib/**/*.rb"))
        PackageTask(gem_spec=spec, need_zip=True, collection=ns)
    """

    #: Default shell command templates, registered under the ``package`` key
    #: of the collection's configuration. ``{archive}`` is the archive file
    #: name and ``{name}`` the staged directory, both relative to the package
    #: directory the commands run in.
    defaults = {
        "tar": "tar zcvf {archive} {name}",
        "zip": "zip -r {archive} {name}",
    }

    def __init__(
        self,
        name=None,
        version=None,
        package_dir="pkg",
        package_files=None,
        need_tar=False,
        need_zip=False,
        gem_spec=None,
        collection=None,
        configure=None,
    ):
        """
        Create the package tasks for ``name`` at ``version``.

        Omit ``name`` and ``version`` if a ``gem_spec`` is supplied.

        :param configure:
            Optional callable given this object before any tasks are
            registered, allowing attributes to be tweaked in one place.
        :param collection:
            The `~invoke.collection.Collection` to add tasks to. A new,
            unnamed one is created (and exposed as `collection`) by default.
        """
        #: Name of the package.
        self.name = name
        #: Version of the package (e.g. ``"1.3.2"``).
        self.version = version
        #: Directory used to store the package files.
        self.package_dir = package_dir
        #: `.FileList` of files to be included in the package. A `.FileList`
        #: given here is used as is, so it stays lazy and keeps its excludes.
        if isinstance(package_files, FileList):
            self.package_files = package_files
        else:
            self.package_files = FileList()
            if isinstance(package_files, (str, os.PathLike)):
                package_files = [package_files]
            self.package_files.include(*(package_files or []))
        #: Whether a gzipped tar file should be produced.
        self.need_tar = need_tar
        #: Whether a zip file should be produced.
        self.need_zip = need_zip
        #: Package metadata (e.g. a `.GemSpec`). If given, `name`, `version`
        #: and `package_files` are derived from it, and a ``.gem`` file will
        #: be produced.
        self.gem_spec = gem_spec
        if collection is None:
            collection = Collection()
        #: The `~invoke.collection.Collection` holding the package tasks.
        self.collection = collection
        if configure is not None:
            configure(self)
        self.define()

    @property
    def package_name(self):
        return "{}-{}".format(self.name, self.version)

    @property
    def package_dir_path(self):
        return "{}/{}".format(self.package_dir, self.package_name)

    @property
    def tgz_file(self):
        return "{}.tgz".format(self.package_name)

    @property
    def zip_file(self):
        return "{}.zip".format(self.package_name)

    @property
    def gem_file(self):
        return "{}.gem".format(self.package_name)

    def define(self):
        """
        Register all tasks in `collection`; returns ``self``.
        """
        if self.gem_spec is not None:
            self._copy_from_gem()
        if not self.name or not self.version:
            raise ValueError(
                "PackageTask needs a name and a version (or a gem_spec)"
            )
        debug("Defining package tasks for {}".format(self.package_name))

        @_describe("Remove package products")
        def clobber_package(c):
            with contextlib.suppress(OSError):
                FileOps(c).rm_r(self.package_dir)

        clobber_package = Task(clobber_package, name="clobber_package")
        package_dir = DirectoryTask(self.package_dir, name="package_dir")
        stage = FileTask(
            self._stage_body(),
            self.package_dir_path,
            [self.package_files],
            name="package_stage",
        )
        tasks = [clobber_package, package_dir, stage]

        formats = []
        if self.need_tar:
            formats.append(self._archive_task("tar", self.tgz_file, stage))
        if self.need_zip:
            formats.append(self._archive_task("zip", self.zip_file, stage))
        tasks.extend(formats)
        if self.gem_spec is not None:
            gem_file = FileTask(
                self._gem_body(),
                "{}/{}".format(self.package_dir, self.gem_file),
                [package_dir, self.package_files],
                name="package_gem",
            )

            @_describe("Create a RubyGem for {}".format(self.name))
            def gem(c):
                pass

            gem = Task(gem, name="gem", pre=[gem_file])
            formats.append(gem)
            tasks.extend([gem_file, gem])

        @_describe("Build the package")
        def package(c):
            pass

        package = Task(package, name="package", pre=formats)

        @_describe("Force a rebuild of the package files")
        def repackage(c):
            pass

        repackage = Task(
            repackage, name="repackage", pre=[clobber_package, package]
        )
        tasks.extend([package, repackage])

        for task in tasks:
            self.collection.add_task(task, name=task.name)
        self._hook_clobber(clobber_package)
        # Keep any command templates configured before we got here.
        configured = self.collection.configuration().get("package", {})
        self.collection.configure(
            {"package": dict(self.defaults, **configured)}
        )
        return self

    def _copy_from_gem(self):
        if not callable(getattr(self.gem_spec, "build", None)):
            err = "gem_spec {!r} has no build() method"
            raise TypeError(err.format(self.gem_spec))
        self.name = self.gem_spec.name
        self.version = self.gem_spec.version
        files = getattr(self.gem_spec, "files", None)
        if files is not None:
            self.package_files += files

    def _hook_clobber(self, clobber_package):
        if "clobber" in self.collection.tasks:
            clobber = self.collection.tasks["clobber"]
            clobber.pre = list(clobber.pre) + [clobber_package]
            return

        @_describe("Remove all generated files")
        def clobber(c):
            pass

        clobber = Task(clobber, name="clobber", pre=[clobber_package])
        self.collection.add_task(clobber, name="clobber")

    def _archive_task(self, kind, filename, stage):
        def archive(c):
            settings = dict(self.defaults)
            settings.update(c.config.get("package", {}))
            command = settings[kind].format(
                archive=filename, name=self.package_name
            )
            with c.cd(self.package_dir):
                return c.run(command)

        archive.__doc__ = "Create {}/{}".format(self.package_dir, filename)
        return FileTask(
            archive,
            "{}/{}".format(self.package_dir, filename),
            [stage, self.package_files],
            name="package_{}".format(filename.rsplit(".", 1)[-1]),
        )

    def _stage_body(self):
        def stage(c):
            fs = FileOps(c)
            with contextlib.suppress(OSError):
                fs.mkdir_p(self.package_dir)
            for fn in self.package_files:
                f = self._staged_path(fn)
                fdir = os.path.dirname(f)
                if not os.path.exists(fdir):
                    fs.mkdir_p(fdir)
                if os.path.isdir(fn):
                    fs.mkdir_p(f)
                else:
                    fs.rm_f(f)
                    fs.ln(fn, f)

        stage.__doc__ = "Stage package files in {}".format(
            self.package_dir_path
        )
        return stage

    def _staged_path(self, fn):
        # Absolute paths are rooted at the staging directory.
        relative = os.path.normpath(fn).lstrip(os.sep)
        if relative == os.pardir or relative.startswith(os.pardir + os.sep):
            err = "Package file {!r} would be staged outside {!r}"
            raise ValueError(err.format(fn, self.package_dir_path))
        return os.path.join(self.package_dir_path, relative)

    def _gem_body(self):
        @_describe("Create {}/{}".format(self.package_dir, self.gem_file))
        def build_gem(c):
            # The builder writes into the working directory.
            if when_writing(c, "Creating GEM"):
                self.gem_spec.build(c)
                FileOps(c).quiet().mv(
                    self.gem_file,
                    os.path.join(self.package_dir, self.gem_file),
                )

        return build_gem
