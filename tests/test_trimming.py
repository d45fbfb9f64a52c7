from readset_pipeline.core.trimming import trim_mott


def test_high_quality_read_is_kept_whole():
    assert trim_mott([50] * 10) == (1, 10)


def test_low_quality_ends_are_trimmed():
    assert trim_mott([5, 5, 40, 40, 40, 40, 40, 40, 5, 5], cutoff=0.01) == (3, 8)


def test_first_base_is_not_trimmed_when_good():
    assert trim_mott([50, 50, 5], cutoff=0.0001)[0] == 1


def test_all_bad_read_keeps_nothing():
    assert trim_mott([2, 3, 2, 1, 2]) == (0, 0)


def test_empty_quality_keeps_nothing():
    assert trim_mott([]) == (0, 0)


def test_window_ends_at_first_maximum():
    # two good stretches of equal worth: the first maximum wins
    start, finish = trim_mott([40, 40, 3, 3, 3, 3, 40, 40], cutoff=0.01)
    assert start == 1
    assert finish == 2
