"""Shared test fixtures for nucgrep tests."""

import pytest

from nucgrep.config import SearchConfig


@pytest.fixture
def simple_seq():
    """Short sequence with two ATG occurrences."""
    return "AAATGCATGA"


@pytest.fixture
def scenario_seq():
    """Single ATG flanked by A runs."""
    return "AAATGAAA"


@pytest.fixture
def gapped_pattern():
    """Non-periodic 16-mer used for gapped alignment tests."""
    return "GATTACAGCTTGCAAC"


@pytest.fixture
def seq_with_deletion(gapped_pattern):
    """Sequence lacking pattern symbol 8 (a C), with C flanks."""
    return "CCCC" + gapped_pattern[:8] + gapped_pattern[9:] + "CCCC"


@pytest.fixture
def seq_with_insertion(gapped_pattern):
    """Sequence with an extra A after pattern symbol 7, with C flanks."""
    return "CCCC" + gapped_pattern[:8] + "A" + gapped_pattern[8:] + "CCCC"


@pytest.fixture
def default_config():
    """Exact, forward-only search for ATG."""
    return SearchConfig(pattern="ATG", color="never")


@pytest.fixture
def fasta_file(tmp_path):
    p = tmp_path / "records.fa"
    p.write_text(
        ">r1 first record\nAAATGAAA\n"
        ">r2\nCCCCCCCC\n"
        ">r3\nGGAT\nGCC\n"
    )
    return p
