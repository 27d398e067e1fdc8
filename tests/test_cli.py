"""Tests for the command-line interface."""

import gzip
import io

import pytest

from nucgrep.cli import EXIT_CONFIG, EXIT_FAILURE, EXIT_OK, main


class TestMain:
    def test_reports_matching_records(self, fasta_file, capsys):
        code = main(["-p", "ATG", "--color", "never", str(fasta_file)])
        assert code == EXIT_OK
        out = capsys.readouterr().out
        assert out == ">r1\nAA[ATG]AAA\n>r3\nGG[ATG]CC\n"

    def test_headers_only(self, fasta_file, capsys):
        assert main(["-p", "ATG", "-H", str(fasta_file)]) == EXIT_OK
        assert capsys.readouterr().out == ">r1\n>r3\n"

    def test_reverse_complement(self, tmp_path, capsys):
        p = tmp_path / "rc.fa"
        p.write_text(">fwd\nAATGA\n>rev\nACATA\n")
        assert main(["-p", "ATG", "-r", "--color", "never", str(p)]) == EXIT_OK
        assert capsys.readouterr().out == ">fwd\nA[ATG]A\n>rev\nA{CAT}A\n"

    def test_reverse_complement_only(self, tmp_path, capsys):
        p = tmp_path / "rc.fa"
        p.write_text(">fwd\nAATGA\n>rev\nACATA\n")
        assert main(["-p", "ATG", "-R", "--color", "never", str(p)]) == EXIT_OK
        assert capsys.readouterr().out == ">rev\nA{CAT}A\n"

    def test_ignore_case(self, tmp_path, capsys):
        p = tmp_path / "mc.fa"
        p.write_text(">mc\nccTCGTgtgCAGcc\n")
        assert main(["-p", "tcgtgtgcag", "-i", "--color", "never", str(p)]) == EXIT_OK
        assert capsys.readouterr().out == ">mc\ncc[TCGTgtgCAG]cc\n"

    def test_line_wrap(self, fasta_file, capsys):
        assert main(["-p", "ATG", "-w", "4", "--color", "never", str(fasta_file)]) == EXIT_OK
        assert capsys.readouterr().out.startswith(">r1\nAA[AT]\n[G]AAA\n")

    def test_fuzzy(self, tmp_path, capsys):
        p = tmp_path / "fz.fa"
        p.write_text(">hit\nGGACGAGG\n>miss\nCCAAGACC\n")
        assert main(["-p", "ACGT", "-N", "1", "--color", "never", str(p)]) == EXIT_OK
        assert capsys.readouterr().out == ">hit\nGG{ACGA}GG\n"

    def test_align_strategy(self, tmp_path, capsys):
        p = tmp_path / "al.fa"
        p.write_text(">hit\nGGGACTTGGG\n")
        args = ["-p", "ACGT", "-N", "1", "--strategy", "align", "--color", "never", str(p)]
        assert main(args) == EXIT_OK
        assert capsys.readouterr().out == ">hit\nGGG{AC}<T>{T}GGG\n"

    def test_color_always(self, fasta_file, capsys):
        assert main(["-p", "ATG", "--color", "always", str(fasta_file)]) == EXIT_OK
        assert "\033[1;32mATG\033[0m" in capsys.readouterr().out

    def test_json_output(self, fasta_file, capsys):
        assert main(["-p", "ATG", "--output", "json", str(fasta_file)]) == EXIT_OK
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 2
        assert lines[0].startswith('{"id": "r1"')

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(">s\nAAATGAAA\n"))
        assert main(["-p", "ATG", "--color", "never"]) == EXIT_OK
        assert capsys.readouterr().out == ">s\nAA[ATG]AAA\n"

    def test_gzipped_input(self, tmp_path, capsys):
        p = tmp_path / "in.fa.gz"
        with gzip.open(p, "wt") as f:
            f.write(">z\nATG\n")
        assert main(["-p", "ATG", "--color", "never", str(p)]) == EXIT_OK
        assert capsys.readouterr().out == ">z\n[ATG]\n"

    def test_no_matches_prints_nothing(self, fasta_file, capsys):
        assert main(["-p", "TTTT", str(fasta_file)]) == EXIT_OK
        assert capsys.readouterr().out == ""


class TestErrors:
    @pytest.mark.parametrize("budget", ["3", "4"])
    def test_budget_too_large(self, fasta_file, capsys, budget):
        assert main(["-p", "ATG", "-N", budget, str(fasta_file)]) == EXIT_CONFIG
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "mismatches" in captured.err

    def test_config_checked_before_opening_file(self, tmp_path, capsys):
        missing = tmp_path / "missing.fa"
        assert main(["-p", "ATG", "-N", "5", str(missing)]) == EXIT_CONFIG

    def test_all_config_errors_reported(self, fasta_file, capsys):
        assert main(["-p", "ATG", "-N", "3", "-w", "0", str(fasta_file)]) == EXIT_CONFIG
        err = capsys.readouterr().err
        assert "mismatches" in err
        assert "line wrap" in err

    def test_non_numeric_budget(self, fasta_file):
        with pytest.raises(SystemExit) as info:
            main(["-p", "ATG", "-N", "A", str(fasta_file)])
        assert info.value.code == 2

    def test_missing_pattern(self, fasta_file):
        with pytest.raises(SystemExit) as info:
            main([str(fasta_file)])
        assert info.value.code == 2

    def test_missing_file(self, tmp_path, capsys):
        missing = tmp_path / "missing.fa"
        assert main(["-p", "ABC", str(missing)]) == EXIT_FAILURE
        err = capsys.readouterr().err
        assert str(missing) in err
        assert "No such file" in err

    def test_malformed_input(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("ACGT\n>a\nACGT\n"))
        assert main(["-p", "A"]) == EXIT_FAILURE
        assert "expected '>'" in capsys.readouterr().err

    def test_undecodable_input(self, tmp_path, capsys):
        p = tmp_path / "bad.fa"
        p.write_bytes(b">r1\nAAATG\xffAAA\n")
        assert main(["-p", "ATG", str(p)]) == EXIT_FAILURE
        err = capsys.readouterr().err
        assert "0xff" in err
        assert "line 2" in err

    def test_closed_output_pipe(self, fasta_file, monkeypatch, capsys):
        class ClosedPipe:
            def write(self, text):
                raise BrokenPipeError(32, "Broken pipe")

            def isatty(self):
                return False

        monkeypatch.setattr("sys.stdout", ClosedPipe())
        assert main(["-p", "ATG", str(fasta_file)]) == EXIT_FAILURE
        assert str(fasta_file) not in capsys.readouterr().err

    def test_untranslatable_pattern(self, fasta_file, capsys):
        assert main(["-p", "AXG", "-r", str(fasta_file)]) == EXIT_FAILURE
        assert "invalid nucleotide" in capsys.readouterr().err

    def test_ambiguous_pattern(self, fasta_file, capsys):
        assert main(["-p", "ATU", "-r", str(fasta_file)]) == EXIT_FAILURE
        assert "both T and U" in capsys.readouterr().err
