"""Unit tests for verify-vectors command."""

import pytest
from click.testing import CliRunner

from callcharge.cli.commands.verify import verify_vectors


class TestVerifyVectorsCommand:
    """Test suite for verify-vectors command."""

    @pytest.fixture
    def runner(self, clean_env):
        """Create a Click CLI test runner."""
        return CliRunner()

    def test_all_vectors_pass(self, runner, vector_csv, sample_vectors):
        """Test a table where every vector passes."""
        result = runner.invoke(verify_vectors, [str(vector_csv(sample_vectors))])

        assert result.exit_code == 0
        assert "Verification Summary" in result.output
        assert "Vectors:          6" in result.output
        assert "Raised errors:    2" in result.output
        assert "All 6 vector(s) passed" in result.output

    def test_failure_exit_code(self, runner, vector_csv, sample_vectors):
        """Test that a wrong expectation fails the run."""
        rows = sample_vectors + [
            [7, "2023-01-01 00:00:00", "2023-01-01 00:10:00", "false", "0.75"]
        ]

        result = runner.invoke(verify_vectors, [str(vector_csv(rows))])

        assert result.exit_code == 4
        assert "Failed:           1" in result.output
        assert "1 of 7 vector(s) failed" in result.output

    def test_failures_only(self, runner, vector_csv):
        """Test that --failures-only hides passing rows."""
        rows = [
            [1, "2023-01-01 00:00:00", "2023-01-01 00:10:00", "false", "0.5"],
            [2, "2023-01-01 00:00:00", "2023-01-01 00:25:00", "false", "9.99"],
        ]

        result = runner.invoke(
            verify_vectors, [str(vector_csv(rows)), "--failures-only"]
        )

        assert result.exit_code == 4
        assert "9.99" in result.output
        assert "PASS" not in result.output

    def test_tolerance_option(self, runner, vector_csv):
        """Test that --tolerance widens the accepted difference."""
        path = vector_csv(
            [[1, "2023-01-01 00:00:00", "2023-01-01 00:10:00", "false", "0.55"]]
        )

        assert runner.invoke(verify_vectors, [str(path)]).exit_code == 4
        result = runner.invoke(verify_vectors, [str(path), "--tolerance", "0.1"])
        assert result.exit_code == 0

    def test_negative_tolerance_rejected(self, runner, vector_csv, sample_vectors):
        """Test that click rejects a negative tolerance."""
        result = runner.invoke(
            verify_vectors, [str(vector_csv(sample_vectors)), "--tolerance", "-1"]
        )
        assert result.exit_code == 2

    def test_tolerance_from_settings(self, runner, vector_csv, monkeypatch):
        """Test that AMOUNT_TOLERANCE is the default tolerance."""
        monkeypatch.setenv("AMOUNT_TOLERANCE", "0.1")
        path = vector_csv(
            [[1, "2023-01-01 00:00:00", "2023-01-01 00:10:00", "false", "0.55"]]
        )

        assert runner.invoke(verify_vectors, [str(path)]).exit_code == 0

    def test_skipped_rows_reported(self, runner, vector_csv):
        """Test that malformed rows are reported and counted."""
        rows = [
            [1, "2023-01-01 00:00:00", "2023-01-01 00:10:00", "false", "0.5"],
            [2, "2023-01-01 00:00:00", "2023-01-01 00:10:00", "maybe", "0.5"],
        ]

        result = runner.invoke(verify_vectors, [str(vector_csv(rows))])

        assert result.exit_code == 0
        assert "Skipped row 3" in result.output
        assert "Skipped rows:     1" in result.output

    def test_missing_file(self, runner, tmp_path):
        """Test that a missing table exits with the file not found code."""
        result = runner.invoke(verify_vectors, [str(tmp_path / "missing.csv")])

        assert result.exit_code == 5
        assert "File Not Found" in result.output

    def test_empty_table(self, runner, vector_csv):
        """Test that a table without rows passes trivially."""
        result = runner.invoke(verify_vectors, [str(vector_csv([]))])

        assert result.exit_code == 0
        assert "All 0 vector(s) passed" in result.output

    def test_table_with_too_few_columns(self, runner, tmp_path):
        """Test that a three column table exits with the vector table code."""
        path = tmp_path / "short.csv"
        path.write_text("a,b,c\n1,2023-01-01 00:00:00,2023-01-01 00:10:00\n")

        result = runner.invoke(verify_vectors, [str(path)])

        assert result.exit_code == 6
        assert "Invalid Vector Table" in result.output
        assert "found 3" in result.output
        assert "num, start_time, end_time, is_transform, expected_amount" in (
            result.output
        )
        assert "Unexpected Error" not in result.output

    def test_zero_byte_table(self, runner, tmp_path):
        """Test that an empty file exits with the vector table code."""
        path = tmp_path / "empty.csv"
        path.write_bytes(b"")

        result = runner.invoke(verify_vectors, [str(path)])

        assert result.exit_code == 6
        assert "Invalid Vector Table" in result.output
        assert "Unexpected Error" not in result.output

    def test_unparseable_table(self, runner, tmp_path):
        """Test that a CSV with ragged quoting exits with the vector table code."""
        path = tmp_path / "broken.csv"
        path.write_text(
            "num,startTime,endTime,isTransform,pay\n"
            '1,"2023-01-01 00:00:00,2023-01-01 00:10:00,false,0.5\n'
        )

        result = runner.invoke(verify_vectors, [str(path)])

        assert result.exit_code == 6
        assert "Invalid Vector Table" in result.output
