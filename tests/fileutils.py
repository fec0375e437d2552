import os

import pytest

from packager import FileOps

from _util import context, touch


class FileOps_:
    class init:
        def echo_defaults_to_run_echo_setting(self):
            assert FileOps(context()).echo is False
            assert FileOps(context(echo=True)).echo is True

        def echo_may_be_overridden(self):
            assert FileOps(context(echo=True), echo=False).echo is False

        def quiet_returns_non_echoing_copy(self):
            c = context(echo=True)
            quiet = FileOps(c).quiet()
            assert quiet.echo is False
            assert quiet.context is c

    class mkdir_p:
        def creates_nested_directories(self, workdir):
            FileOps(context()).mkdir_p("a/b/c")
            assert os.path.isdir("a/b/c")

        def tolerates_existing_directories(self, workdir):
            os.mkdir("a")
            FileOps(context()).mkdir_p("a")
            assert os.path.isdir("a")

    class rm_r:
        def removes_directory_trees(self, workdir):
            touch("a/b/c.txt")
            FileOps(context()).rm_r("a")
            assert not os.path.exists("a")

        def removes_single_files(self, workdir):
            touch("file")
            FileOps(context()).rm_r("file")
            assert not os.path.exists("file")

        def raises_for_missing_paths(self, workdir):
            with pytest.raises(OSError):
                FileOps(context()).rm_r("nope")

    class rm_f:
        def removes_files(self, workdir):
            touch("file")
            FileOps(context()).rm_f("file")
            assert not os.path.exists("file")

        def ignores_missing_files(self, workdir):
            FileOps(context()).rm_f("nope")

    class ln:
        def creates_hard_links(self, workdir):
            touch("source")
            FileOps(context()).ln("source", "dest")
            assert os.path.samefile("source", "dest")

        def raises_when_destination_exists(self, workdir):
            touch("source")
            touch("dest")
            with pytest.raises(FileExistsError):
                FileOps(context()).ln("source", "dest")

    class mv:
        def moves_files(self, workdir):
            touch("source")
            os.mkdir("dir")
            FileOps(context()).mv("source", "dir/dest")
            assert os.path.exists("dir/dest")
            assert not os.path.exists("source")

    class echoing:
        def prints_shell_equivalent_when_echo_enabled(self, workdir, capsys):
            FileOps(context(echo=True)).mkdir_p("a/b")
            assert "mkdir -p a/b" in capsys.readouterr().out

        def honors_echo_format(self, workdir, capsys):
            c = context(echo=True, echo_format="+ {command}")
            FileOps(c).rm_f("nope")
            assert capsys.readouterr().out == "+ rm -f nope\n"

        def silent_by_default(self, workdir, capsys):
            FileOps(context()).mkdir_p("a")
            assert capsys.readouterr().out == ""

        def silent_when_quiet(self, workdir, capsys):
            touch("source")
            FileOps(context(echo=True)).quiet().mv("source", "dest")
            assert capsys.readouterr().out == ""
            assert os.path.exists("dest")

    class dry_run:
        def skips_all_changes(self, workdir):
            touch("source")
            touch("doomed/file")
            fs = FileOps(context(dry=True))
            assert fs.dry
            fs.mkdir_p("a/b")
            fs.ln("source", "link")
            fs.mv("source", "moved")
            fs.rm_r("doomed")
            fs.rm_f("source")
            assert not os.path.exists("a")
            assert not os.path.exists("link")
            assert not os.path.exists("moved")
            assert os.path.exists("doomed/file")
            assert os.path.exists("source")

        def still_echoes(self, workdir, capsys):
            FileOps(context(dry=True, echo=True)).mkdir_p("a")
            assert "mkdir -p a" in capsys.readouterr().out

        def echoes_even_when_echo_is_off(self, workdir, capsys):
            fs = FileOps(context(dry=True, echo=False))
            assert fs.echo is True
            fs.ln("README", "pkg/README")
            assert "ln README pkg/README" in capsys.readouterr().out

        def quiet_copies_stay_silent(self, workdir, capsys):
            FileOps(context(dry=True)).quiet().mv("a.gem", "pkg/a.gem")
            assert capsys.readouterr().out == ""
