"""
Tests for the gdopp command-line interface.
"""

import polars as pl
import pyarrow.parquet as pq

from gdopp.api.cli import create_parser, main


class TestCreateParser:
    """Test argument parsing."""

    def test_repeatable_tests(self):
        args = create_parser().parse_args(
            ["data.csv", "-t", "signal.noise_check_adv", "-t", "frozen.turb_check_adv"]
        )
        assert args.tests == ["signal.noise_check_adv", "frozen.turb_check_adv"]

    def test_defaults(self):
        args = create_parser().parse_args(["data.csv"])
        assert args.tests is None
        assert args.output is None
        assert args.signal_threshold is None


class TestMain:
    """Test the main entry point."""

    def test_windows_and_writes_csv(self, continuous_record, tmp_path):
        input_file = tmp_path / "record.csv"
        output_file = tmp_path / "verdicts.csv"
        continuous_record.write_csv(input_file)

        exit_code = main(
            [
                str(input_file),
                "-o",
                str(output_file),
                "--freq",
                "1",
                "--window-mins",
                str(10 / 60),
            ]
        )

        assert exit_code == 0
        result = pl.read_csv(output_file)
        assert result["window.idx"].to_list() == [1, 2, 3]
        assert result["failed"].to_list() == [False, True, False]

    def test_parquet_with_existing_windows(self, continuous_record, tmp_path):
        input_file = tmp_path / "windowed.parquet"
        output_file = tmp_path / "verdicts.parquet"
        continuous_record.with_columns(
            pl.Series("window.idx", [7] * 15 + [8] * 15)
        ).write_parquet(input_file)

        exit_code = main(
            [
                str(input_file),
                "-o",
                str(output_file),
                "-t",
                "beam.correlation_check_adv",
                "--correlation-threshold",
                "99",
            ]
        )

        assert exit_code == 0
        result = pl.from_arrow(pq.read_table(output_file))
        assert result.columns == ["window.idx", "beam.correlation_check_adv", "failed"]
        assert result["failed"].to_list() == [True, True]

    def test_stdout(self, continuous_record, tmp_path, capsys):
        input_file = tmp_path / "record.csv"
        continuous_record.write_csv(input_file)

        exit_code = main([str(input_file), "--freq", "1", "--window-mins", "1"])

        assert exit_code == 0
        out = capsys.readouterr().out
        assert out.splitlines()[0].startswith("window.idx,")
        assert len(out.splitlines()) == 2

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "missing.csv")]) == 1

    def test_unknown_test(self, continuous_record, tmp_path):
        input_file = tmp_path / "record.csv"
        continuous_record.write_csv(input_file)
        assert main([str(input_file), "-t", "bogus"]) == 1

    def test_invalid_threshold(self, continuous_record, tmp_path):
        input_file = tmp_path / "record.csv"
        continuous_record.write_csv(input_file)
        assert main([str(input_file), "--signal-threshold", "150"]) == 1
