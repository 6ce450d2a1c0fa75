# tests/test_cli.py
import logging

import pytest
import yaml

from walletcore.cli.cli import CLI

class TestCLI:
    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        root.handlers = handlers
        root.setLevel(level)

    @pytest.fixture
    def cli(self):
        return CLI()

    def test_no_command_prints_help(self, cli, capsys):
        assert cli.main([]) == 1
        assert "commands" in capsys.readouterr().out

    def test_create(self, cli, capsys):
        assert cli.main(["create"]) == 0
        out = capsys.readouterr().out
        assert "Address: " in out
        assert "-----BEGIN PUBLIC KEY-----" in out

    def test_demo(self, cli, capsys):
        assert cli.main(["--log-level", "WARNING", "demo"]) == 0
        out = capsys.readouterr().out
        assert "Initial balance: 1000" in out
        assert "Sender balance: 500" in out
        assert "Recipient balance: 500" in out
        assert "Tampered copy rejected" in out

    def test_demo_insufficient_funds(self, cli, capsys):
        assert cli.main(["--log-level", "WARNING", "demo", "--issue", "100", "--send", "500"]) == 1
        assert "Send rejected" in capsys.readouterr().out

    def test_bad_config(self, cli, capsys, tmp_path):
        path = tmp_path / "wallet.yaml"
        path.write_text(yaml.safe_dump({"crypto": {"key_size": 512}}))

        assert cli.main(["--config", str(path), "create"]) == 1
        assert "crypto.key_size" in capsys.readouterr().err

    def test_config_address_length(self, cli, capsys, tmp_path):
        path = tmp_path / "wallet.yaml"
        path.write_text(yaml.safe_dump({"address": {"length_bytes": 16}}))

        assert cli.main(["--config", str(path), "--log-level", "WARNING", "create"]) == 0
        address_line = [line for line in capsys.readouterr().out.splitlines() if line.startswith("Address: ")][0]
        assert len(address_line.split(": ")[1]) == 32
