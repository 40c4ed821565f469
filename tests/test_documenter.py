"""Tests for pkg_templates_yo.plugins.documenter."""

from __future__ import annotations

import logging

import pytest

from pkg_templates_yo.errors import TemplateNotFoundError
from pkg_templates_yo.kinds import DOCUMENTER, DOCUMENTER_GITLAB, DOCUMENTER_TRAVIS
from pkg_templates_yo.plugin import Plugin, rendered_badges
from pkg_templates_yo.plugins import Documenter, GitLabCI, TravisCI
from pkg_templates_yo.plugins.documenter import _julia_repr


class TestKinds:
    def test_kind_per_ci(self):
        assert Documenter().kind == DOCUMENTER
        assert Documenter(TravisCI).kind == DOCUMENTER_TRAVIS
        assert Documenter(GitLabCI).kind == DOCUMENTER_GITLAB
        assert str(DOCUMENTER_TRAVIS) == "Documenter[TravisCI]"

    def test_ci_by_name(self):
        assert Documenter("TravisCI").kind == DOCUMENTER_TRAVIS

    def test_unsupported_ci(self):
        with pytest.raises(ValueError, match="cannot deploy"):
            Documenter("AppVeyor")

    def test_distinct_kinds_coexist(self, make_template):
        t = make_template(plugins=[Documenter(TravisCI), Documenter(GitLabCI), Documenter()])
        assert len(t.plugins) == 3

    def test_satisfies_protocol(self):
        assert isinstance(Documenter(), Plugin)


class TestCapabilities:
    def test_ignore_patterns(self):
        assert Documenter().ignore_patterns() == ["/docs/build/", "/docs/site/"]

    def test_badges_local(self):
        assert Documenter().badges() == []

    def test_badges_travis(self):
        badges = rendered_badges(Documenter(TravisCI), "alice", "Foo")
        assert len(badges) == 2
        assert "https://alice.github.io/Foo.jl/stable" in badges[0]
        assert "https://alice.github.io/Foo.jl/dev" in badges[1]

    def test_badges_gitlab(self):
        [badge] = rendered_badges(Documenter(GitLabCI), "alice", "Foo")
        assert "https://alice.gitlab.io/Foo.jl/dev" in badge

    def test_describe(self, tmp_path):
        asset = tmp_path / "logo.png"
        asset.write_bytes(b"png")
        p = Documenter(TravisCI, assets=[asset], kwargs={"strict": True})
        assert p.describe() == "Documenter[TravisCI]: 1 extra asset(s), 1 extra keyword(s)"


class TestAssets:
    def test_missing_asset(self, tmp_path):
        with pytest.raises(TemplateNotFoundError, match="Asset file"):
            Documenter(assets=[tmp_path / "missing.css"])

    def test_assets_copied(self, tmp_path, make_template):
        asset = tmp_path / "style.css"
        asset.write_text("body {}")
        t = make_template()
        Documenter(assets=[asset]).generate(t, "Foo")
        docs = t.dir / "Foo" / "docs"
        assert (docs / "src" / "assets" / "style.css").read_text() == "body {}"
        make = (docs / "make.jl").read_text()
        assert '"assets/style.css",' in make


class TestGeneration:
    def test_files(self, make_template):
        t = make_template()
        assert Documenter().generate(t, "Foo") == ["docs/"]
        docs = t.dir / "Foo" / "docs"
        make = (docs / "make.jl").read_text()
        assert "using Foo" in make
        assert "modules=[Foo]," in make
        assert 'repo="https://github.com/alice/Foo.jl/blob/{commit}{path}#L{line}",' in make
        assert 'authors="Jane Doe",' in make
        assert "assets=String[]," in make
        assert "deploydocs" not in make
        index = (docs / "src" / "index.md").read_text()
        assert index.startswith("# Foo.jl\n")
        assert "Modules = [Foo]" in index
        assert "Documenter = " in (docs / "Project.toml").read_text()

    def test_travis_deploydocs(self, make_template):
        t = make_template()
        Documenter(TravisCI).generate(t, "Foo")
        make = (t.dir / "Foo" / "docs" / "make.jl").read_text()
        assert 'deploydocs(;\n    repo="github.com/alice/Foo.jl",\n)' in make

    def test_extra_kwargs(self, make_template, caplog):
        kwargs = {
            "checkdocs": ":none",
            "strict": True,
            "format": ":markdown",
            "stringarg": "string",
        }
        t = make_template()
        with caplog.at_level(logging.WARNING, logger="pkg_templates_yo"):
            Documenter(kwargs=kwargs).generate(t, "Foo")
        assert 'Ignoring predefined Documenter kwargs "format" from additional kwargs' in caplog.text

        make = (t.dir / "Foo" / "docs" / "make.jl").read_text()
        assert '\n    stringarg="string",\n' in make
        assert "\n    strict=true,\n" in make
        assert "\n    checkdocs=:none,\n" in make
        assert "format=:markdown" not in make
        assert "format=Documenter.HTML()" in make


class TestJuliaRepr:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, "true"),
            (False, "false"),
            (3, "3"),
            (1.5, "1.5"),
            ("text", '"text"'),
            (":sym", ":sym"),
            ([1, "a"], '[1, "a"]'),
        ],
    )
    def test_values(self, value, expected):
        assert _julia_repr(value) == expected
