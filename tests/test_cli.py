"""Unit tests for gola.cli."""

import json
import sys
from unittest.mock import MagicMock, patch

import pytest

from gola.cli import entrypoint, main, split_argv
from gola.errors import LaunchError


@pytest.fixture
def launcher(tmp_path, config_home):
    """An argv0 with an adjacent gola.json mapping python and go."""
    argv0 = tmp_path / "gola"
    argv0.write_bytes(b"")
    config = {
        "dir": ["__main__.py"],
        "map": {"python": {"": sys.executable}, "go": {"": "go"}},
    }
    (tmp_path / "gola.json").write_text(json.dumps(config))
    return str(argv0)


def _script(tmp_path, name, data):
    path = tmp_path / name
    path.write_text(data)
    return str(path)


# ---------------------------------------------------------------------------
# main(): successful launch
# ---------------------------------------------------------------------------


class TestMainSuccess:
    def test_returns_child_exit_code(self, tmp_path, launcher):
        script = _script(tmp_path, "a.py", "#!/usr/bin/env python\nimport sys\nsys.exit(4)\n")
        assert main([script], argv0=launcher) == 4

    def test_passes_script_and_arguments(self, tmp_path, launcher):
        script = _script(tmp_path, "a.go", "#!/usr/bin/env go\n")
        with patch("gola.dispatch.subprocess.run", return_value=MagicMock(returncode=0)) as run:
            assert main([script, "run", "--verbose"], argv0=launcher) == 0
        run.assert_called_once_with(["go", script, "run", "--verbose"], check=False)

    def test_options_after_script_are_passed_through(self, tmp_path, launcher):
        script = _script(
            tmp_path,
            "a.py",
            "#!/usr/bin/env python\nimport sys\nprint(sys.argv[1:])\n",
        )
        with patch("gola.dispatch.subprocess.run", return_value=MagicMock(returncode=0)) as run:
            main([script, "-x", "--flag=1"], argv0=launcher)
        assert run.call_args[0][0] == [sys.executable, script, "-x", "--flag=1"]

    def test_directory_bundle_is_passed_as_given(self, tmp_path, launcher):
        bundle = tmp_path / "app"
        bundle.mkdir()
        (bundle / "__main__.py").write_text("#!/usr/bin/env python\nraise SystemExit(6)\n")
        assert main([str(bundle)], argv0=launcher) == 6


# ---------------------------------------------------------------------------
# main(): failures are reported, not raised
# ---------------------------------------------------------------------------


class TestMainErrors:
    def test_missing_target(self, tmp_path, launcher, capsys):
        assert main([str(tmp_path / "nope.py")], argv0=launcher) == 1
        assert "is not a file" in capsys.readouterr().err

    def test_no_shebang(self, tmp_path, launcher, capsys):
        script = _script(tmp_path, "a.py", "print('hi')\n")
        assert main([script], argv0=launcher) == 1
        assert "could not find interpreter[]" in capsys.readouterr().err

    def test_unmapped_keyword_is_named(self, tmp_path, launcher, capsys):
        script = _script(tmp_path, "a.rb", "#!/usr/bin/env ruby\n")
        assert main([script], argv0=launcher) == 1
        assert "interpreter[ruby]" in capsys.readouterr().err

    def test_invalid_config(self, tmp_path, config_home, capsys):
        argv0 = tmp_path / "gola"
        argv0.write_bytes(b"")
        (tmp_path / "gola.json").write_text("{")
        script = _script(tmp_path, "a.py", "#!/usr/bin/env python\n")
        assert main([script], argv0=str(argv0)) == 1
        assert "could not parse" in capsys.readouterr().err

    def test_empty_script(self, tmp_path, launcher, capsys):
        script = _script(tmp_path, "a.py", "")
        assert main([script], argv0=launcher) == 1
        assert "could not read 2 bytes" in capsys.readouterr().err

    def test_launch_failure(self, tmp_path, launcher, capsys):
        script = _script(tmp_path, "a.go", "#!/usr/bin/env go\n")
        with patch("gola.gola.dispatch", side_effect=LaunchError("could not start 'go'")):
            assert main([script], argv0=launcher) == 1
        assert "could not start 'go'" in capsys.readouterr().err

    def test_interrupt_returns_130(self, tmp_path, launcher):
        script = _script(tmp_path, "a.go", "#!/usr/bin/env go\n")
        with patch("gola.gola.dispatch", side_effect=KeyboardInterrupt):
            assert main([script], argv0=launcher) == 130


# ---------------------------------------------------------------------------
# main(): argparse edge cases
# ---------------------------------------------------------------------------


class TestMainArgparse:
    def test_version_output_contains_version_string(self, capsys):
        with pytest.raises(SystemExit):
            main(["--version"])

        out = capsys.readouterr().out
        assert "0.1.0" in out

    def test_no_args_exits_with_nonzero_code(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code != 0

    def test_debug_flag_before_script(self, tmp_path, launcher):
        script = _script(tmp_path, "a.py", "#!/usr/bin/env python\n")
        with patch("gola.cli.logging.basicConfig") as basic_config:
            main(["-d", script], argv0=launcher)
        assert basic_config.call_args.kwargs["level"] == 10


# ---------------------------------------------------------------------------
# main(): everything after the script reaches the child untouched
# ---------------------------------------------------------------------------


class TestPassThrough:
    def _run(self, argv, launcher):
        with patch("gola.dispatch.subprocess.run", return_value=MagicMock(returncode=0)) as run:
            assert main(argv, argv0=launcher) == 0
        return run.call_args[0][0]

    def test_double_dash_after_script_is_kept(self, tmp_path, launcher):
        script = _script(tmp_path, "a.go", "#!/usr/bin/env go\n")
        assert self._run([script, "--", "x"], launcher) == ["go", script, "--", "x"]

    def test_launcher_options_after_script_are_kept(self, tmp_path, launcher):
        script = _script(tmp_path, "a.go", "#!/usr/bin/env go\n")
        command = self._run([script, "-d", "-V", "--help", "--"], launcher)
        assert command == ["go", script, "-d", "-V", "--help", "--"]

    def test_double_dash_before_script_ends_launcher_options(self, tmp_path, launcher):
        script = _script(tmp_path, "a.go", "#!/usr/bin/env go\n")
        assert self._run(["-d", "--", script, "x"], launcher) == ["go", script, "x"]


class TestSplitArgv:
    def test_options_then_script(self):
        assert split_argv(["-d", "a.py", "-d", "x"]) == (["-d"], ["a.py", "-d", "x"])

    def test_no_script(self):
        assert split_argv(["-d"]) == (["-d"], [])

    def test_double_dash_marks_script(self):
        assert split_argv(["--", "-odd.py", "--"]) == ([], ["-odd.py", "--"])

    def test_stdin_dash_is_a_script(self):
        assert split_argv(["-", "x"]) == ([], ["-", "x"])


# ---------------------------------------------------------------------------
# entrypoint()
# ---------------------------------------------------------------------------


class TestEntrypoint:
    def test_entrypoint_exits_with_child_code(self, tmp_path, launcher):
        script = _script(tmp_path, "a.py", "#!/usr/bin/env python\nraise SystemExit(2)\n")
        with patch.object(sys, "argv", [launcher, script]):
            with pytest.raises(SystemExit) as exc_info:
                entrypoint()

        assert exc_info.value.code == 2

    def test_entrypoint_exits_with_one_on_error(self, tmp_path, launcher):
        with patch.object(sys, "argv", [launcher, str(tmp_path / "missing.py")]):
            with pytest.raises(SystemExit) as exc_info:
                entrypoint()

        assert exc_info.value.code == 1
