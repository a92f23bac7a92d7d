"""
Tests for configuration loading and the command-line interface.
"""

import io
import json
import os
import sys

import pytest

from suppressaudit.cli import main
from suppressaudit.config import AuditConfig, create_default_config, find_config, load_audit_config, load_config


class TestConfig:
    """Tests for configuration files."""

    def test_defaults(self):
        config = AuditConfig()

        assert config.extensions == [".js", ".jsx", ".ts", ".vue"]
        assert config.exclude_dirs == ["node_modules"]
        assert config.on_error == "abort"
        assert config.to_engine_config()["sort_entries"] is True

    def test_from_dict_nested_scan_section(self):
        config = AuditConfig.from_dict({
            "scan": {"extensions": [".tsx"], "exclude": "dist", "on_error": "skip"},
            "output_dir": "reports",
            "output": {"format": "json"},
            "unknown_key": 1,
        })

        assert config.extensions == [".tsx"]
        assert config.exclude_dirs == ["dist"]
        assert config.on_error == "skip"
        assert config.output_dir == "reports"
        assert config.output.format == "json"

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            AuditConfig(on_error="ignore")
        with pytest.raises(ValueError):
            AuditConfig(extensions=[])
        with pytest.raises(ValueError):
            AuditConfig(encoding="no-such-codec")

    def test_load_yaml_and_json(self, tmp_path):
        yaml_path = tmp_path / "suppressaudit.yaml"
        yaml_path.write_text("scan:\n  extensions:\n    - .ts\n", encoding="utf-8")
        json_path = tmp_path / "suppressaudit.json"
        json_path.write_text(json.dumps({"on_error": "skip"}), encoding="utf-8")

        assert load_config(str(yaml_path)) == {"scan": {"extensions": [".ts"]}}
        assert load_config(str(json_path)) == {"on_error": "skip"}

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_find_config_searches_upwards(self, tmp_path):
        (tmp_path / ".suppressaudit.yml").write_text("on_error: skip\n", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config(str(nested)) == str(tmp_path / ".suppressaudit.yml")
        assert load_audit_config(start_dir=str(nested)).on_error == "skip"

    def test_default_config_round_trips(self, tmp_path):
        path = tmp_path / ".suppressaudit.yaml"
        path.write_text(create_default_config(), encoding="utf-8")

        assert load_audit_config(str(path)) == AuditConfig()


class TestCLI:
    """Tests for the suppressaudit command."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage:" in capsys.readouterr().out

    def test_scan(self, make_tree, tmp_path, capsys):
        root = make_tree({
            "src/a.js": "// eslint-disable-next-line no-console\n",
            "src/b.ts": "/* eslint-disable no-console */\n// eslint-disable-next-line no-var\n",
        })
        out = tmp_path / "reports"

        assert main(["scan", root, "-o", str(out), "--no-color"]) == 0

        rules_path = os.path.join(str(out), "rules_count_report.csv")
        details_path = os.path.join(str(out), "file_details_report.csv")
        with open(rules_path, encoding="utf-8") as f:
            assert f.read() == "Rule,Count\nno-console,2\nno-var,1\n"
        with open(details_path, encoding="utf-8") as f:
            assert f.read().splitlines()[1:] == [
                f"a.js,{os.path.join(root, 'src', 'a.js')},no-console (Line 1)",
                f'b.ts,{os.path.join(root, "src", "b.ts")},"no-console (Line 1), no-var (Line 2)"',
            ]

        stdout = capsys.readouterr().out
        assert rules_path in stdout
        assert details_path in stdout

    def test_dir_flag(self, make_tree, tmp_path):
        root = make_tree({"a.js": "// eslint-disable-next-line a\n"})
        out = tmp_path / "out"

        assert main(["scan", "--dir", root, "--output-dir", str(out)]) == 0
        assert os.path.isfile(os.path.join(str(out), "rules_count_report.csv"))

    def test_json_summary(self, make_tree, tmp_path, capsys):
        root = make_tree({"a.vue": "<!-- eslint-disable vue/no-v-html -->\n"})

        assert main(["scan", root, "-o", str(tmp_path / "out"), "--format", "json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["rule_counts"] == {"vue/no-v-html": 1}
        assert data["reports"]["file_details"].endswith("file_details_report.csv")

    def test_cli_overrides_config_file(self, make_tree, tmp_path, capsys):
        root = make_tree({
            ".suppressaudit.yaml": "scan:\n  extensions: ['.ts']\n",
            "a.js": "// eslint-disable-next-line from-js\n",
            "b.ts": "// eslint-disable-next-line from-ts\n",
        })

        assert main(["scan", root, "-o", str(tmp_path / "one"), "-f", "json"]) == 0
        assert json.loads(capsys.readouterr().out)["rule_counts"] == {"from-ts": 1}

        assert main(["scan", root, "-o", str(tmp_path / "two"), "-f", "json", "--ext", ".js"]) == 0
        assert json.loads(capsys.readouterr().out)["rule_counts"] == {"from-js": 1}

    def test_missing_directory(self, tmp_path, capsys):
        out = tmp_path / "out"

        assert main(["scan", str(tmp_path / "missing"), "-o", str(out)]) == 1

        assert "Error: Directory not found" in capsys.readouterr().err
        assert not out.exists()

    def test_decode_error_aborts_without_reports(self, make_tree, tmp_path, capsys):
        root = make_tree({"a.js": b"\xff// eslint-disable no-console\n"})
        out = tmp_path / "out"

        assert main(["scan", root, "-o", str(out)]) == 1

        assert "Cannot decode" in capsys.readouterr().err
        assert not out.exists()

    def test_skip_policy(self, make_tree, tmp_path, capsys):
        root = make_tree({
            "a.js": b"\xff// eslint-disable no-console\n",
            "b.js": "// eslint-disable no-alert\n",
        })

        assert main(["scan", root, "-o", str(tmp_path / "out"), "--on-error", "skip", "-f", "json"]) == 0

        captured = capsys.readouterr()
        data = json.loads(captured.out)
        assert data["rule_counts"] == {"no-alert": 1}
        assert data["summary"]["files_skipped"] == 1
        assert "WARNING" in captured.err

    def test_init(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)

        assert main(["init"]) == 0
        assert (tmp_path / ".suppressaudit.yaml").is_file()

        assert main(["init"]) == 1
        assert main(["init", "--force"]) == 0

    def test_repeated_runs_follow_current_stderr(self, make_tree, tmp_path, monkeypatch):
        """Each run logs to the stderr in place at the time, even if the previous one was closed."""
        root = make_tree({
            "a.js": b"\xff// eslint-disable no-console\n",
            "b.js": "// eslint-disable no-alert\n",
        })
        args = ["scan", root, "-o", str(tmp_path / "out"), "--on-error", "skip", "-f", "json"]

        first = io.StringIO()
        monkeypatch.setattr(sys, "stderr", first)
        assert main(args) == 0
        assert "WARNING" in first.getvalue()
        first.close()

        second = io.StringIO()
        monkeypatch.setattr(sys, "stderr", second)
        assert main(args) == 0
        assert "WARNING" in second.getvalue()
        assert "Error:" not in second.getvalue()
