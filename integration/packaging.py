import os
import tarfile
import zipfile

from invoke import Collection, Config, Executor

from packager import PackageTask

from _util import requires


class Package:
    def setup_method(self, method):
        self.cwd = os.getcwd()

    def teardown_method(self, method):
        os.chdir(self.cwd)

    def _project(self, root):
        os.chdir(root)
        for path in ("README", "lib/demo.py", "lib/demo/util.py"):
            os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
            with open(path, "w") as fd:
                fd.write("# {}\n".format(path))
        ns = Collection()
        PackageTask(
            "demo",
            "1.0",
            need_tar=True,
            need_zip=True,
            package_files=["README", "lib/**/*.py"],
            collection=ns,
        )
        return ns

    def _execute(self, ns, *tasks):
        config = Config(overrides={"run": {"hide": True}})
        Executor(ns, config=config).execute(*tasks)

    @requires("tar", "zip")
    def builds_tarball_and_zipfile(self, tmp_path):
        ns = self._project(tmp_path)
        self._execute(ns, "package")
        expected = [
            "demo-1.0/README",
            "demo-1.0/lib/demo.py",
            "demo-1.0/lib/demo/util.py",
        ]
        with tarfile.open("pkg/demo-1.0.tgz") as tgz:
            names = [x.name for x in tgz.getmembers() if x.isfile()]
        assert sorted(names) == expected
        with zipfile.ZipFile("pkg/demo-1.0.zip") as zf:
            names = [x for x in zf.namelist() if not x.endswith("/")]
        assert sorted(names) == expected

    @requires("tar", "zip")
    def repackage_then_clobber(self, tmp_path):
        ns = self._project(tmp_path)
        self._execute(ns, "package")
        self._execute(ns, "repackage")
        assert os.path.exists("pkg/demo-1.0.tgz")
        self._execute(ns, "clobber")
        assert not os.path.exists("pkg")
