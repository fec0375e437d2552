import os
import re

import pytest
from invoke import MockContext

from packager import FileList, GemSpec


class GemSpec_:
    class init:
        def stores_metadata(self):
            spec = GemSpec("rake", "0.4.0", files=["lib/rake.rb"])
            assert spec.name == "rake"
            assert spec.version == "0.4.0"
            assert spec.files == ["lib/rake.rb"]
            assert spec.require_paths == ["lib"]

        def files_default_to_empty(self):
            assert GemSpec("rake", "0.4.0").files == []

        def command_may_be_overridden(self):
            spec = GemSpec("rake", "0.4.0", command="gem2 build {gemspec}")
            assert spec.command == "gem2 build {gemspec}"
            assert GemSpec.command == "gem build {gemspec}"

        def file_name_is_name_dash_version_dot_gem(self):
            assert GemSpec("rake", "0.4.0").file_name == "rake-0.4.0.gem"

        def has_useful_repr(self):
            assert repr(GemSpec("rake", "0.4.0")) == "<GemSpec rake-0.4.0.gem>"

    class to_ruby:
        def renders_core_fields(self):
            spec = GemSpec(
                "rake",
                "0.4.0",
                files=["lib/rake.rb", "README"],
                summary="Ruby based make-like utility.",
                authors=["Jim Weirich"],
            )
            source = spec.to_ruby()
            assert source.startswith("Gem::Specification.new do |s|\n")
            assert source.endswith("end\n")
            assert "  s.name = 'rake'\n" in source
            assert "  s.version = '0.4.0'\n" in source
            assert "  s.summary = 'Ruby based make-like utility.'\n" in source
            assert "  s.authors = ['Jim Weirich']\n" in source
            assert "  s.require_paths = ['lib']\n" in source
            assert "  s.files = ['lib/rake.rb', 'README']\n" in source

        def omits_optional_fields_when_unset(self):
            source = GemSpec("rake", "0.4.0").to_ruby()
            fields = ("description", "authors", "platform", "requirements")
            for field in fields:
                assert "s.{} =".format(field) not in source

        def renders_optional_fields_when_set(self):
            spec = GemSpec(
                "rake",
                "0.4.0",
                description="Make, in Ruby",
                platform="java",
                requirements=["none"],
            )
            source = spec.to_ruby()
            assert "  s.description = 'Make, in Ruby'\n" in source
            assert "  s.platform = 'java'\n" in source
            assert "  s.requirements = ['none']\n" in source

        def escapes_quotes_and_backslashes(self):
            source = GemSpec("rake", "1", summary="Jim's \\ tool").to_ruby()
            assert "  s.summary = 'Jim\\'s \\\\ tool'\n" in source

        def resolves_filelists(self, project):
            source = GemSpec("demo", "1", files=FileList("lib/*.py")).to_ruby()
            assert "  s.files = ['lib/demo.py']\n" in source

    class build:
        def runs_gem_build_on_temporary_gemspec(self, workdir):
            spec = GemSpec("rake", "0.4.0")
            command = re.compile(r"gem build rake-\w+\.gemspec$")
            result = spec.build(MockContext(run={command: True}))
            assert result.ok

        def removes_temporary_gemspec_afterwards(self, workdir):
            spec = GemSpec("rake", "0.4.0")
            spec.build(MockContext(run=True))
            assert os.listdir(".") == []

        def removes_temporary_gemspec_on_failure_too(self, workdir):
            spec = GemSpec("rake", "0.4.0")
            # No results configured: run() raises NotImplementedError.
            with pytest.raises(NotImplementedError):
                spec.build(MockContext())
            assert os.listdir(".") == []

        def uses_configured_command(self, workdir):
            spec = GemSpec("rake", "0.4.0", command="gem2 build -q {gemspec}")
            command = re.compile(r"gem2 build -q rake-\w+\.gemspec$")
            assert spec.build(MockContext(run={command: True})).ok
