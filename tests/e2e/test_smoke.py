"""
Smoke tests for gobuild against a real Go toolchain.

Run with: pytest --integration
"""

import shutil

import pytest

from gobuild.cli.parser import CLI


@pytest.mark.integration
@pytest.mark.skipif(shutil.which("go") is None, reason="go not installed")
class TestSmoke:
    """Cross-compile a hello world module."""

    def test_cross_compile(self, go_project, capsys):
        """Test: binaries land in per-platform folders."""
        result = CLI().run(
            [
                "--project-root",
                str(go_project),
                "-platform",
                "Linux-AMD64, Windows-AMD64",
            ]
        )

        assert result == 0
        assert (go_project / "output" / "linux-amd64" / "hello").is_file()
        assert (go_project / "output" / "windows-amd64" / "hello.exe").is_file()
        assert capsys.readouterr().out.count("success") == 2

    def test_broken_package_is_reported(self, go_project, capsys):
        """Test: compile errors fail per platform and keep exit code 0."""
        (go_project / "main.go").write_text("package main\n\nfunc main() {\n")

        result = CLI().run(
            ["--project-root", str(go_project), "-platform", "Linux-AMD64,Darwin-ARM64"]
        )

        assert result == 0
        out = capsys.readouterr().out
        assert out.count("fail") == 2
        assert "Command finished with error: exit status 1" in out
