import pytest

from conftest import make_decoded
from readset_pipeline.config import ReadsetConfig
from readset_pipeline.errors import UnreadableFileError
from readset_pipeline.models.read import FilterOutcome, Orientation
from readset_pipeline.pipeline import process_read


def test_secondary_peaks_become_ambiguity_codes(fake_decoder):
    decoder = fake_decoder(make_decoded("x.ab1", "ACGT", "AGGA"))
    result = process_read("x.ab1", Orientation.FORWARD, ReadsetConfig(), decoder)

    assert result.is_present
    assert str(result.sequence) == "ASGW"


def test_trim_uses_trimmed_window_and_trimmed_peak_count(fake_decoder):
    decoder = fake_decoder(make_decoded("x.ab1", "ACGTAC", "TCGTAA", trim_window=(2, 4)))
    result = process_read("x.ab1", Orientation.FORWARD, ReadsetConfig(max_secondary_peaks=0), decoder)

    assert result.outcome is FilterOutcome.PASSED
    assert str(result.sequence) == "CGT"


def test_no_trim_uses_full_read_and_raw_peak_count(fake_decoder):
    decoder = fake_decoder(make_decoded("x.ab1", "ACGTAC", "TCGTAA", trim_window=(2, 4)))

    untrimmed = process_read("x.ab1", Orientation.FORWARD, ReadsetConfig(trim=False), decoder)
    assert str(untrimmed.sequence) == "WCGTAM"

    limited = process_read(
        "x.ab1", Orientation.FORWARD, ReadsetConfig(trim=False, max_secondary_peaks=1), decoder
    )
    assert limited.outcome is FilterOutcome.TOO_MANY_SECONDARY_PEAKS
    assert limited.sequence is None


def test_peak_limit_is_inclusive(fake_decoder):
    decoder = fake_decoder(make_decoded("x.ab1", "ACGT", trimmed_peaks=2))

    assert process_read("x.ab1", Orientation.FORWARD, ReadsetConfig(max_secondary_peaks=2), decoder).is_present
    assert not process_read("x.ab1", Orientation.FORWARD, ReadsetConfig(max_secondary_peaks=1), decoder).is_present


def test_short_read_is_absent(fake_decoder):
    decoder = fake_decoder(make_decoded("x.ab1", "AAAA", trim_window=(2, 3)))
    result = process_read("x.ab1", Orientation.FORWARD, ReadsetConfig(min_length=3), decoder)

    assert result.outcome is FilterOutcome.TOO_SHORT
    assert not result.is_present
    assert result.summary.trim_window == (2, 3)


def test_peak_filter_is_reported_before_length_filter(fake_decoder):
    decoder = fake_decoder(make_decoded("x.ab1", "A", trimmed_peaks=4))
    result = process_read("x.ab1", Orientation.FORWARD, ReadsetConfig(max_secondary_peaks=0, min_length=5), decoder)

    assert result.outcome is FilterOutcome.TOO_MANY_SECONDARY_PEAKS


def test_empty_trim_window_gives_empty_read(fake_decoder):
    decoder = fake_decoder(make_decoded("x.ab1", "ACGT", trim_window=(0, 0)))

    assert process_read("x.ab1", Orientation.FORWARD, ReadsetConfig(), decoder).outcome is FilterOutcome.TOO_SHORT
    kept = process_read("x.ab1", Orientation.FORWARD, ReadsetConfig(min_length=0), decoder)
    assert kept.is_present
    assert len(kept.sequence) == 0


@pytest.mark.parametrize("primary,secondary,window", [
    ("ACGTTGCA", None, (1, 8)),
    ("ACGTTGCA", "ACTTTGCG", (2, 7)),
    ("GGGAAC", "GAGAAC", (1, 6)),
])
def test_reverse_is_reverse_complement_of_forward(fake_decoder, primary, secondary, window):
    decoder = fake_decoder(make_decoded("x.ab1", primary, secondary, trim_window=window))
    config = ReadsetConfig(max_secondary_peaks=3)

    fwd = process_read("x.ab1", Orientation.FORWARD, config, decoder)
    rev = process_read("x.ab1", Orientation.REVERSE, config, decoder)

    assert fwd.outcome is rev.outcome
    assert str(rev.sequence) == str(fwd.sequence.reverse_complement())
    assert fwd.summary == rev.summary


def test_orientation_accepts_plain_string(fake_decoder):
    decoder = fake_decoder(make_decoded("x.ab1", "AACG"))
    result = process_read("x.ab1", "reverse", ReadsetConfig(), decoder)

    assert result.orientation is Orientation.REVERSE
    assert str(result.sequence) == "CGTT"


def test_unreadable_file_propagates(fake_decoder):
    with pytest.raises(UnreadableFileError, match="missing.ab1"):
        process_read("missing.ab1", Orientation.FORWARD, ReadsetConfig(), fake_decoder())
