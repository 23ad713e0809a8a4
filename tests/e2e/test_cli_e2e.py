#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/e2e/test_cli_e2e.py
"""End-to-end tests for the org2tg command line.

The CLI runs as a subprocess (``python -m org2tg``) against real files, the
way a user or a bot deployment script would call it.

"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

from org2tg.constants import CONFIG_ENV_VAR


@pytest.mark.e2e
@pytest.mark.cli
@pytest.mark.slow
class TestCLIEndToEnd:
    """End-to-end tests for CLI functionality."""

    @pytest.fixture(autouse=True)
    def workdir(self, tmp_path: Path) -> None:
        self.temp_dir = tmp_path

    def _run_cli(self, args: list[str], stdin: str | None = None) -> subprocess.CompletedProcess:
        """Run the CLI as a subprocess.

        Parameters
        ----------
        args : list[str]
            Command line arguments to pass to the CLI
        stdin : str, optional
            Text fed to standard input

        Returns
        -------
        subprocess.CompletedProcess
            Result of the subprocess execution

        """
        env = {key: value for key, value in os.environ.items() if key != CONFIG_ENV_VAR}
        return subprocess.run(
            [sys.executable, "-m", "org2tg"] + args,
            cwd=self.temp_dir,
            input=stdin,
            capture_output=True,
            text=True,
            encoding="utf-8",
            env=env,
        )

    def _write(self, name: str, content: str) -> Path:
        path = self.temp_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def test_convert_to_stdout(self, sample_org: str) -> None:
        """A file is exported to standard output."""
        source = self._write("notes.org", sample_org)

        result = self._run_cli([str(source)])

        assert result.returncode == 0, result.stderr
        assert result.stdout.startswith("Intro paragraph with a [link](https://example.com)\\.")
        assert "## **Table**" in result.stdout

    def test_convert_to_file(self) -> None:
        """--out writes the export to a file."""
        source = self._write("notes.org", "* Done!\n")
        target = self.temp_dir / "out.md"

        result = self._run_cli([str(source), "-o", str(target)])

        assert result.returncode == 0, result.stderr
        assert result.stdout == ""
        assert target.read_text(encoding="utf-8") == "# **Done\\!**"

    def test_stdin(self) -> None:
        """'-' reads from standard input."""
        result = self._run_cli(["-"], stdin="Hello, world.\n")

        assert result.returncode == 0, result.stderr
        assert result.stdout == "Hello, world\\.\n"

    def test_no_escape(self) -> None:
        """--no-escape keeps reserved characters."""
        source = self._write("notes.org", "v1.0 (beta)!\n")

        result = self._run_cli([str(source), "--no-escape"])

        assert result.returncode == 0, result.stderr
        assert result.stdout == "v1.0 (beta)!\n"

    def test_missing_file(self) -> None:
        """A missing input exits with code 4."""
        result = self._run_cli([str(self.temp_dir / "missing.org")])

        assert result.returncode == 4
        assert "Error:" in result.stderr

    def test_directory_without_out(self) -> None:
        """A directory input without --out exits with code 3."""
        (self.temp_dir / "notes").mkdir()

        result = self._run_cli([str(self.temp_dir / "notes")])

        assert result.returncode == 3

    def test_directory_publish(self) -> None:
        """A directory of Org files is exported file by file."""
        self._write("notes/a.org", "* A\n")
        self._write("notes/sub/b.org", "* B\n")
        out = self.temp_dir / "published"

        result = self._run_cli([str(self.temp_dir / "notes"), "--out", str(out)])

        assert result.returncode == 0, result.stderr
        assert (out / "a.md").read_text(encoding="utf-8") == "# **A**"
        assert (out / "sub" / "b.md").read_text(encoding="utf-8") == "# **B**"

    def test_discovered_config(self) -> None:
        """A config file in the working directory is applied."""
        self._write(".org2tg.toml", "escape = false\n")
        source = self._write("notes.org", "a.b\n")

        result = self._run_cli([str(source)])

        assert result.returncode == 0, result.stderr
        assert result.stdout == "a.b\n"

    def test_bad_config(self) -> None:
        """An invalid config file exits with code 3."""
        config = self._write("bad.yaml", "escape: [1, 2]\n")
        source = self._write("notes.org", "x\n")

        result = self._run_cli([str(source), "--config", str(config)])

        assert result.returncode == 3
        assert "escape" in result.stderr

    def test_version(self) -> None:
        """--version prints the program name and version."""
        result = self._run_cli(["--version"])

        assert result.returncode == 0
        assert result.stdout.startswith("org2tg ")

    def test_trace_logging(self) -> None:
        """--trace writes timing records to stderr."""
        source = self._write("notes.org", "* A\n")

        result = self._run_cli([str(source), "--trace"])

        assert result.returncode == 0
        assert "Rendering (telegram) completed in" in result.stderr
