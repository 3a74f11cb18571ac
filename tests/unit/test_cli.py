"""
Unit tests for student_registry/cli/

Coverage plan
─────────────
arg parsing   → 4 tests  (demo / gui / list-kinds, bad kind)
demo command  → 3 tests  (walkthrough output, final state, native kind)
main()        → 5 tests  (no subcommand, list-kinds, demo, env errors → exit 1)
layering      → 4 tests  (--unique-ids / --no-unique-ids vs environment)
"""

import pytest

from student_registry.config import RegistryConfig


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _parse(args: list[str]):
    """Call the CLI argument parser and return the parsed namespace."""
    from student_registry.cli.main import build_parser
    parser = build_parser()
    return parser.parse_args(args)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of CLI tests."""
    monkeypatch.delenv("STUDENT_REGISTRY_KIND", raising=False)
    monkeypatch.delenv("STUDENT_REGISTRY_UNIQUE_IDS", raising=False)


# ─────────────────────────────────────────────────────────────────────────────
# 1. Argument parsing
# ─────────────────────────────────────────────────────────────────────────────

class TestArgParsing:

    def test_demo_defaults(self):
        ns = _parse(["demo"])
        assert ns.subcommand == "demo"
        assert ns.kind is None
        assert ns.unique_ids is None

    def test_demo_with_kind_and_unique_ids(self):
        ns = _parse(["demo", "--kind", "native", "--unique-ids"])
        assert ns.kind == "native"
        assert ns.unique_ids is True

    def test_gui_accepts_kind(self):
        ns = _parse(["gui", "--kind", "adapter"])
        assert ns.subcommand == "gui"
        assert ns.kind == "adapter"

    def test_unknown_kind_is_rejected(self):
        with pytest.raises(SystemExit):
            _parse(["demo", "--kind", "sqlite"])


# ─────────────────────────────────────────────────────────────────────────────
# 2. demo command
# ─────────────────────────────────────────────────────────────────────────────

class TestDemoCommand:

    def test_demo_prints_each_stage(self, capsys):
        from student_registry.cli.main import cmd_demo
        cmd_demo(RegistryConfig())
        out = capsys.readouterr().out
        assert out.startswith("Welcome to Student Management System")
        assert out.count("Total Students: 3") == 1
        assert out.count("Total Students: 2") == 2
        assert "Removing student with ID 1002..." in out
        assert out.rstrip().endswith("ID: 1003, Name: Michael Brown Jr., Score: 3.850000")

    def test_demo_final_directory_state(self, capsys):
        from student_registry.cli.main import cmd_demo
        client = cmd_demo(RegistryConfig())
        assert client.directory.get_all_students_info() == [
            "ID: 1001, Name: John Smith, Score: 3.750000",
            "ID: 1003, Name: Michael Brown Jr., Score: 3.850000",
        ]

    def test_demo_with_native_directory(self, capsys):
        from student_registry.cli.main import cmd_demo
        from student_registry.directory.native import InMemoryStudentDirectory
        client = cmd_demo(RegistryConfig(directory_kind="native"))
        assert isinstance(client.directory, InMemoryStudentDirectory)
        assert client.directory.get_total_students() == 2


# ─────────────────────────────────────────────────────────────────────────────
# 3. main()
# ─────────────────────────────────────────────────────────────────────────────

class TestMain:

    def test_no_subcommand_prints_help(self, capsys):
        from student_registry.cli.main import main
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()

    def test_list_kinds(self, capsys):
        from student_registry.cli.main import main
        assert main(["list-kinds"]) == 0
        assert capsys.readouterr().out.splitlines() == ["adapter", "native"]

    def test_demo_exit_code_zero(self, capsys):
        from student_registry.cli.main import main
        assert main(["demo", "--unique-ids"]) == 0
        assert "Michael Brown Jr." in capsys.readouterr().out

    def test_bad_environment_kind_returns_one(self, monkeypatch, capsys):
        from student_registry.cli.main import main
        monkeypatch.setenv("STUDENT_REGISTRY_KIND", "sqlite")
        assert main(["demo"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_bad_environment_flag_returns_one(self, monkeypatch, capsys):
        from student_registry.cli.main import main
        monkeypatch.setenv("STUDENT_REGISTRY_UNIQUE_IDS", "maybe")
        assert main(["demo"]) == 1
        assert "STUDENT_REGISTRY_UNIQUE_IDS" in capsys.readouterr().err


# ─────────────────────────────────────────────────────────────────────────────
# 4. Flag / environment layering
# ─────────────────────────────────────────────────────────────────────────────

class TestConfigLayering:

    def test_no_unique_ids_parses_false(self):
        ns = _parse(["demo", "--no-unique-ids"])
        assert ns.unique_ids is False

    def test_no_unique_ids_overrides_environment(self, monkeypatch):
        from student_registry.cli.main import _config_from_args
        monkeypatch.setenv("STUDENT_REGISTRY_UNIQUE_IDS", "1")
        config = _config_from_args(_parse(["demo", "--no-unique-ids"]))
        assert config.enforce_unique_ids is False

    def test_environment_applies_without_flag(self, monkeypatch):
        from student_registry.cli.main import _config_from_args
        monkeypatch.setenv("STUDENT_REGISTRY_UNIQUE_IDS", "1")
        config = _config_from_args(_parse(["demo"]))
        assert config.enforce_unique_ids is True

    def test_unique_ids_overrides_environment(self, monkeypatch):
        from student_registry.cli.main import _config_from_args
        monkeypatch.setenv("STUDENT_REGISTRY_UNIQUE_IDS", "0")
        config = _config_from_args(_parse(["demo", "--unique-ids"]))
        assert config.enforce_unique_ids is True
