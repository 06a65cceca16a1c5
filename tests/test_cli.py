"""
Tests for the drawn command line.
"""

import pytest

pytest.importorskip("ROOT")

from drawn.cli import build_parser, main


class TestParser:
    """Tests for argument parsing."""

    def test_hist1d_defaults(self):
        args = build_parser().parse_args(["hist1d", "in.root", "h_a", "h_b"])

        assert args.keys == ["h_a", "h_b"]
        assert args.output == "hist1d.pdf"
        assert args.xrange is None
        assert args.legend == [0.15, 0.4, 0.7, 0.9]

    def test_batch_format_choices(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["batch", "in.root", "--format", "gif"])

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestCommands:
    """End-to-end runs on a small file."""

    def test_hist1d(self, histogram_file, tmp_path, capsys):
        output = tmp_path / "overlay.pdf"
        code = main(["hist1d", histogram_file, "h_data", "h_mc",
                     "--labels", "Data", "--logy", "--output", str(output)])

        assert code == 0
        assert output.exists()
        assert "SUCCESS: 1 plot(s) created" in capsys.readouterr().out

    def test_hist2d(self, histogram_file, tmp_path):
        output = tmp_path / "correlation2d.pdf"
        assert main(["hist2d", histogram_file, "h_2d", "--logz", "--output", str(output)]) == 0
        assert output.exists()

    def test_ratio(self, histogram_file, tmp_path):
        output = tmp_path / "comparison.pdf"
        code = main(["ratio", histogram_file, "h_data", "h_mc",
                     "--ratio-label", "MC/Data", "--ratio-range", "0.5", "1.5",
                     "--output", str(output)])

        assert code == 0
        assert output.exists()

    def test_batch(self, histogram_file, tmp_path):
        out_dir = tmp_path / "plots"
        assert main(["batch", histogram_file, "--output-dir", str(out_dir)]) == 0

        assert (out_dir / "h_data.pdf").exists()
        assert (out_dir / "h_mc.pdf").exists()
        assert not (out_dir / "h_2d.pdf").exists()

    def test_missing_key_fails(self, histogram_file, tmp_path, capsys):
        code = main(["hist1d", histogram_file, "h_missing",
                     "--output", str(tmp_path / "missing.pdf")])

        assert code == 1
        assert "FAILED" in capsys.readouterr().out

    def test_non_histogram_key_reported(self, histogram_file, tmp_path, capsys):
        code = main(["hist1d", histogram_file, "note",
                     "--output", str(tmp_path / "note.pdf")])

        assert code == 1
        assert "not a histogram" in capsys.readouterr().out

    def test_wrong_dimension_fails(self, histogram_file, tmp_path):
        code = main(["hist2d", histogram_file, "h_data",
                     "--output", str(tmp_path / "wrong_dim.pdf")])
        assert code == 1
