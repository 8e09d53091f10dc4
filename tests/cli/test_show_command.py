"""Tests for ownerfmt CLI commands."""

import json
import pytest
import yaml
from click.testing import CliRunner
from ownerfmt import __version__
from ownerfmt.cli.main import cli


@pytest.fixture
def description_file(tmp_path):
    """Create a sample ownership description file."""
    path = tmp_path / "ownership.json"
    path.write_text(json.dumps({"primaryOwnerId": "alice", "coOwnerIds": ["bob", "carol"]}), encoding='utf-8')
    return str(path)


@pytest.fixture
def config_file(tmp_path):
    """Create a config with a partial email directory."""
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"users": {"alice": "a@x", "carol": "c@x"}}), encoding='utf-8')
    return str(path)


class TestShowCommand:
    """Test show CLI command."""
    
    def test_show_human(self, description_file, config_file):
        runner = CliRunner()
        result = runner.invoke(cli, ['show', description_file, '--config', config_file, '--quiet'])
        
        assert result.exit_code == 0
        assert "alice,bob,carol" in result.output
        assert "a@x,c@x" in result.output
    
    def test_show_json(self, description_file, config_file):
        runner = CliRunner()
        result = runner.invoke(cli, ['show', description_file, '--config', config_file, '--json', '--quiet'])
        
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {
            "ownership_enabled": True,
            "owner_id": "alice",
            "owner_email": "a@x",
            "co_owner_ids": "alice,bob,carol",
            "co_owner_emails": "a@x,c@x"
        }
    
    @pytest.mark.parametrize("field,expected", [
        ("owner-id", "alice"),
        ("owner-email", "a@x"),
        ("co-owner-ids", "alice,bob,carol"),
        ("co-owner-emails", "a@x,c@x"),
    ])
    def test_show_field(self, description_file, config_file, field, expected):
        runner = CliRunner()
        result = runner.invoke(cli, ['show', description_file, '--config', config_file, '--field', field, '--quiet'])
        
        assert result.exit_code == 0
        assert result.output == expected + "\n"
    
    def test_show_human_empty_values(self, tmp_path, config_file):
        """Owners without emails render as a dash in the default output."""
        path = tmp_path / "unowned.json"
        path.write_text(json.dumps({"coOwnerIds": ["bob"]}), encoding='utf-8')
        
        result = CliRunner().invoke(cli, ['show', str(path), '--config', config_file, '--quiet'])
        
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert "unknown,bob" in result.output
        assert next(line for line in lines if "Owner email:" in line).rstrip().endswith("-")
        assert next(line for line in lines if "Owner emails:" in line).rstrip().endswith("-")
    
    def test_show_missing_file(self, config_file):
        runner = CliRunner()
        result = runner.invoke(cli, ['show', 'nonexistent.json', '--config', config_file])
        
        assert result.exit_code == 1
    
    def test_show_missing_config(self, description_file, tmp_path):
        runner = CliRunner()
        result = runner.invoke(cli, ['show', description_file, '--config', str(tmp_path / "missing.yaml")])
        
        assert result.exit_code == 1
        assert "Config file not found" in result.output


class TestCheckOwnerCommand:
    """Test check-owner CLI command."""
    
    def test_primary_owner(self, description_file):
        result = CliRunner().invoke(cli, ['check-owner', description_file, 'alice'])
        
        assert result.exit_code == 0
        assert result.output.strip() == "yes"
    
    def test_co_owner(self, description_file):
        result = CliRunner().invoke(cli, ['check-owner', description_file, 'bob'])
        assert result.exit_code == 0
    
    def test_co_owner_primary_only(self, description_file):
        result = CliRunner().invoke(cli, ['check-owner', description_file, 'bob', '--primary-only'])
        
        assert result.exit_code == 2
        assert result.output.strip() == "no"
    
    def test_missing_file(self):
        result = CliRunner().invoke(cli, ['check-owner', 'nonexistent.json', 'alice'])
        assert result.exit_code == 1
    
    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "ownership.json"
        path.write_bytes(b"\xff\xfe")
        
        result = CliRunner().invoke(cli, ['check-owner', str(path), 'alice'])
        
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
    
    def test_invalid_description(self, tmp_path):
        path = tmp_path / "ownership.json"
        path.write_text(json.dumps({"primaryOwnerId": "alice", "coOwnerIds": "bob"}), encoding='utf-8')
        
        result = CliRunner().invoke(cli, ['check-owner', str(path), 'alice'])
        
        assert result.exit_code == 1
        assert "Invalid ownership description" in result.output


class TestVersion:
    """Test version reporting."""
    
    def test_version_command(self):
        result = CliRunner().invoke(cli, ['version'])
        
        assert result.exit_code == 0
        assert __version__ in result.output
    
    def test_version_option(self):
        result = CliRunner().invoke(cli, ['--version'])
        
        assert result.exit_code == 0
        assert f"ownerfmt version {__version__}" in result.output
