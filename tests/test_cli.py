"""Tests for the seqext command-line interface."""

import json
import logging

import pytest
import yaml
from click.testing import CliRunner

from seqext.cli import cli


@pytest.fixture
def runner(tmp_path, monkeypatch):
    """CliRunner working in an empty directory with no SEQEXT_* overrides."""
    monkeypatch.chdir(tmp_path)
    for name in ("SEQEXT_ON_EMPTY", "SEQEXT_CHUNK_SIZE", "SEQEXT_SCORE_PRECISION", "SEQEXT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


class TestSequenceCommands:
    """Test slice, init, tail, chunk and partition commands."""

    def test_slice(self, runner):
        """Test a window with a negative end."""
        result = runner.invoke(cli, ["slice", "a", "b", "c", "d", "e", "--start", "1", "--end", "-1"])

        assert result.exit_code == 0
        assert result.output.strip() == "b c d"

    def test_slice_default_end(self, runner):
        """Test that omitting --end runs to the last item."""
        result = runner.invoke(cli, ["slice", "a", "b", "c", "--start", "1"])
        assert result.output.strip() == "b c"

    def test_slice_underflow_is_empty(self, runner):
        """Test out-of-range bounds print nothing."""
        result = runner.invoke(cli, ["slice", "a", "b", "--start", "5"])

        assert result.exit_code == 0
        assert result.output.strip() == ""

    def test_init_and_tail(self, runner):
        """Test dropping the last and first items."""
        assert runner.invoke(cli, ["init", "1", "2", "3"]).output.strip() == "1 2"
        assert runner.invoke(cli, ["tail", "1", "2", "3"]).output.strip() == "2 3"

    def test_tail_strict_empty(self, runner):
        """Test --strict turns an empty input into an error."""
        result = runner.invoke(cli, ["tail", "--strict"])

        assert result.exit_code == 1
        assert "empty collection" in result.output

    def test_chunk(self, runner):
        """Test one group per line."""
        result = runner.invoke(cli, ["chunk", "1", "2", "3", "4", "5", "--size", "2"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["1 2", "3 4", "5"]

    def test_chunk_size_from_config(self, runner, tmp_path):
        """Test the default size comes from the config file."""
        (tmp_path / ".seqext.yml").write_text(yaml.dump({"chunk_size": 3}))
        result = runner.invoke(cli, ["chunk", "1", "2", "3", "4"])

        assert result.output.splitlines() == ["1 2 3", "4"]

    def test_chunk_invalid_size(self, runner):
        """Test a zero size is reported as an error."""
        result = runner.invoke(cli, ["chunk", "1", "2", "--size", "0"])

        assert result.exit_code == 1
        assert "1 or greater" in result.output

    def test_chunk_strict_empty_from_config(self, runner, tmp_path):
        """Test the throw policy from the config file."""
        config = tmp_path / "strict.yml"
        config.write_text(yaml.dump({"on_empty": "throw"}))
        result = runner.invoke(cli, ["--config", str(config), "chunk"])

        assert result.exit_code == 1

    def test_partition(self, runner):
        """Test splitting by a regular expression."""
        result = runner.invoke(cli, ["partition", "apple", "berry", "avocado", "--pattern", "^a"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["passed: apple avocado", "failed: berry"]

    def test_partition_bad_pattern(self, runner):
        """Test an invalid regular expression is a usage error."""
        result = runner.invoke(cli, ["partition", "a", "--pattern", "("])
        assert result.exit_code == 2


class TestSimilarityCommands:
    """Test jaccard and rank commands."""

    def test_jaccard(self, runner):
        """Test the coefficient is printed with the configured precision."""
        result = runner.invoke(cli, ["jaccard", "--source", "4,5,6,7,8", "--compare", "1,2,3,4,5"])

        assert result.exit_code == 0
        assert result.output.strip() == "0.2500"

    def test_jaccard_empty(self, runner):
        """Test an empty set is reported as an error."""
        result = runner.invoke(cli, ["jaccard", "--source", "", "--compare", "a"])
        assert result.exit_code == 1

    def test_rank(self, runner):
        """Test the ranking table lists the best candidate first."""
        result = runner.invoke(cli, ["rank", "--source", "1,2,3,4,20", "4,5,6,7,8", "8,9,10,11,12", "1,2,3,4,5"])

        assert result.exit_code == 0
        lines = [line for line in result.output.splitlines() if "0." in line or "1.0" in line]
        assert "0.6667" in lines[0]
        assert "0.1111" in lines[1]
        assert "0.0000" in lines[2]

    def test_rank_empty_candidate(self, runner):
        """Test an empty candidate set is rejected."""
        result = runner.invoke(cli, ["rank", "--source", "a,b", "a", ","])
        assert result.exit_code == 1


class TestConfigCommands:
    """Test config subcommands and validation."""

    def test_config_init(self, runner, tmp_path):
        """Test writing a defaults file."""
        result = runner.invoke(cli, ["config", "init"])

        assert result.exit_code == 0
        assert (tmp_path / ".seqext.yml").exists()

    def test_config_init_existing_aborts(self, runner, tmp_path):
        """Test declining the overwrite prompt keeps the file."""
        path = tmp_path / ".seqext.yml"
        path.write_text(yaml.dump({"chunk_size": 9}))

        result = runner.invoke(cli, ["config", "init"], input="n\n")

        assert "Aborted" in result.output
        assert yaml.safe_load(path.read_text()) == {"chunk_size": 9}

    def test_config_show(self, runner):
        """Test the effective configuration is displayed."""
        result = runner.invoke(cli, ["config", "show"])

        assert result.exit_code == 0
        assert "chunk_size" in result.output

    def test_invalid_config_rejected(self, runner, tmp_path):
        """Test validation errors stop the sequence and similarity commands."""
        (tmp_path / ".seqext.yml").write_text(yaml.dump({"chunk_size": -2}))
        result = runner.invoke(cli, ["slice", "a"])

        assert result.exit_code == 1
        assert "chunk_size" in result.output

    def test_malformed_config_rejected(self, runner, tmp_path):
        """Test a config file that is not a mapping exits cleanly."""
        (tmp_path / ".seqext.yml").write_text("- just\n- a list\n")
        result = runner.invoke(cli, ["slice", "a"])

        assert result.exit_code == 1
        assert "mapping" in result.output

    def test_config_init_force_repairs_invalid_file(self, runner, tmp_path):
        """Test an invalid file can be overwritten with defaults."""
        path = tmp_path / ".seqext.yml"
        path.write_text(yaml.dump({"chunk_size": 0}))

        result = runner.invoke(cli, ["config", "init", "--force"])

        assert result.exit_code == 0
        assert yaml.safe_load(path.read_text())["chunk_size"] == 2
        assert runner.invoke(cli, ["chunk", "a", "b", "c"]).exit_code == 0

    def test_config_init_malformed_file(self, runner, tmp_path):
        """Test a file that is not a mapping can be overwritten too."""
        path = tmp_path / ".seqext.yml"
        path.write_text("- just\n- a list\n")

        result = runner.invoke(cli, ["config", "init", "--force"])

        assert result.exit_code == 0
        assert isinstance(yaml.safe_load(path.read_text()), dict)

    def test_config_init_uses_config_path(self, runner, tmp_path):
        """Test --config chooses where config init writes."""
        result = runner.invoke(cli, ["--config", "custom.yml", "config", "init"])

        assert result.exit_code == 0
        assert (tmp_path / "custom.yml").exists()
        assert not (tmp_path / ".seqext.yml").exists()

    def test_config_show_lists_problems(self, runner, tmp_path):
        """Test an invalid file is displayed with its problems."""
        (tmp_path / ".seqext.yml").write_text(yaml.dump({"chunk_size": 0}))

        result = runner.invoke(cli, ["config", "show"])

        assert result.exit_code == 0
        assert "chunk_size must be a positive integer" in result.output

    def test_config_show_malformed_file(self, runner, tmp_path):
        """Test a file that is not a mapping is reported, not displayed."""
        (tmp_path / ".seqext.yml").write_text("- just\n- a list\n")

        result = runner.invoke(cli, ["config", "show"])

        assert result.exit_code == 1
        assert "mapping" in result.output

    def test_version(self, runner):
        """Test the version option."""
        result = runner.invoke(cli, ["--version"])
        assert "seqext" in result.output


class TestLogging:
    """Test the logging options."""

    def test_log_dir_writes_json_lines(self, runner, tmp_path):
        """Test --log-dir adds a JSON-lines file handler."""
        log_dir = tmp_path / "logs"
        try:
            result = runner.invoke(cli, ["--verbose", "--log-dir", str(log_dir), "slice", "a", "b"])
        finally:
            seqext_logger = logging.getLogger("seqext")
            for handler in seqext_logger.handlers:
                handler.close()
            seqext_logger.handlers.clear()

        assert result.exit_code == 0
        files = list(log_dir.glob("seqext_*.jsonl"))
        assert len(files) == 1
        records = [json.loads(line) for line in files[0].read_text().splitlines()]
        assert any(record.get("operation") == "slice" for record in records)

    def test_no_log_file_by_default(self, runner, tmp_path):
        """Test no log directory is created without --log-dir."""
        result = runner.invoke(cli, ["slice", "a"])

        assert result.exit_code == 0
        assert not (tmp_path / "logs").exists()
