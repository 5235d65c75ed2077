import math

import pytest

from transportkit.multiplicity import (
    CROSS_TALK,
    EMISSION_SCALE,
    FISSIONS_PER_GRAM,
    MultiplicityResult,
    analyze,
    analyze_files,
    background_distribution,
    bisect,
    foreground_distribution,
    main,
)

TIMES = [50.0 * k for k in range(1, 2001)]
EMITTED = [len(TIMES) * (1 + CROSS_TALK)]


def _write(path, values):
    path.write_text("\n".join(repr(v) for v in values) + "\n", encoding="utf-8")
    return path


def test_bisect_brackets_sqrt_two():
    low, high = bisect(lambda x: x * x - 2, 0.0, 2.0, 1e-6)
    assert low <= math.sqrt(2) <= high
    assert high - low <= 1e-6


def test_bisect_exact_root_at_end():
    assert bisect(lambda x: x - 1.0, 1.0, 3.0, 1e-6) == (1.0, 1.0)


def test_bisect_exact_root_at_midpoint():
    assert bisect(lambda x: x, -4.0, 4.0, 1e-9) == (0.0, 0.0)


def test_bisect_requires_sign_change():
    with pytest.raises(ValueError):
        bisect(lambda x: x * x + 1, -1.0, 1.0, 1e-6)


def test_bisect_rejects_reversed_interval():
    with pytest.raises(ValueError):
        bisect(lambda x: x, 1.0, -1.0, 1e-6)


def test_foreground_small_example():
    times = [10.0, 20.0, 150.0, 160.0, 170.0, 400.0, 1000.0]
    counts = foreground_distribution(times, 100.0, 5)
    assert counts == [2, 1, 1, 0, 0]


def test_foreground_total_equals_gates_opened():
    counts = foreground_distribution(TIMES, 100.0, 25)
    opened = [t for t in TIMES if math.floor(TIMES[-1] * 0.05) <= t < math.floor(TIMES[-1] * 0.95)]
    assert sum(counts) == len(opened)
    assert len(counts) == 25


def test_foreground_overflow_raises():
    times = [float(t) for t in range(100, 2000)]
    with pytest.raises(ValueError):
        foreground_distribution(times, 1000.0, 3)


def test_foreground_empty_times():
    with pytest.raises(ValueError):
        foreground_distribution([], 100.0, 25)


@pytest.mark.parametrize("samples", [2, 5, 1000])
def test_background_counts_samples_minus_one(samples):
    counts = background_distribution(TIMES, 100.0, 25, samples)
    assert sum(counts) == samples - 1


def test_background_first_gate_collects_events():
    times = [10.0, 60.0, 70.0, 80.0, 200.0, 1000.0]
    counts = background_distribution(times, 100.0, 10, 5)
    assert counts[4] == 1
    assert counts[1] == 3


def test_background_single_sample_is_empty():
    assert sum(background_distribution(TIMES, 100.0, 25, 1)) == 0


def test_analyze_empty_window_raises():
    with pytest.raises(ValueError):
        analyze([1.0], [1.0])


def test_analyze_needs_emitted():
    with pytest.raises(ValueError):
        analyze(TIMES, [])


def test_analyze_files_matches_analyze(tmp_path):
    list_path = _write(tmp_path / "LIST.dat", TIMES)
    emit_path = _write(tmp_path / "LIST_emit.dat", EMITTED)
    assert analyze_files(list_path, emit_path) == analyze(TIMES, EMITTED)


def test_main_prints_ten_fields(tmp_path, capsys):
    list_path = _write(tmp_path / "LIST.dat", TIMES)
    emit_path = _write(tmp_path / "LIST_emit.dat", [EMISSION_SCALE])
    assert main([str(list_path), str(emit_path)]) == 0
    fields = capsys.readouterr().out.split()
    assert len(fields) == 10
    assert float(fields[-1]) == pytest.approx(1.0)