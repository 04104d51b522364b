from __future__ import annotations

import math

import matplotlib.pyplot as plt
import numpy as np
import pytest

from nexhex import physique as phy
from nexhex import visualisation as vis
from nexhex.anatomie import generate_preview, make_humerus_phantom
from nexhex.parametres import ScanParameters


def test_visual_cues() -> None:
    assert vis.noise_level(4) == pytest.approx(0.15)
    assert vis.noise_level(1) == pytest.approx(0.6)
    assert vis.blur_amount(512) == 0
    assert vis.blur_amount(128) == pytest.approx(3.84)
    assert vis.step_size(1) == 1
    assert vis.step_size(10) == 8


@pytest.mark.parametrize(
    "thickness, count",
    [(1, 20), (2, 20), (3, 14), (5, 8), (10, 4)],
)
def test_slice_stack_count(thickness, count) -> None:
    stack = vis.slice_stack(thickness)
    assert len(stack) == count
    # sphere: ends are the narrowest, widths symmetric
    widths = [w for w, _ in stack]
    assert widths[0] == pytest.approx(0.0, abs=1e-6)
    assert widths == pytest.approx(widths[::-1])
    for w, opacity in stack:
        assert 0 <= w <= 1
        assert 0.5 - 1e-9 <= opacity <= 0.8


def test_reconstruction_caption_bands() -> None:
    assert vis.reconstruction_caption(1).startswith("Isotropic")
    assert vis.reconstruction_caption(3).startswith("3mm")
    assert vis.reconstruction_caption(4).startswith("Thick")


def test_stair_step_style() -> None:
    assert vis.stair_step_style(2) == ("#4ade80", 2)
    assert vis.stair_step_style(3) == ("#facc15", 2)
    assert vis.stair_step_style(6) == ("#ef4444", 3)


def test_stair_step_path_spans_arc() -> None:
    xs, ys = vis.stair_step_path(5)
    assert (xs[0], ys[0]) == (0.0, 80.0)
    assert xs[-1] == 80.0
    assert all(b >= a for a, b in zip(xs, xs[1:]))
    # thinner slices give more steps
    assert len(vis.stair_step_path(1)[0]) > len(xs)


def test_iron_triangle_figure() -> None:
    outcome = phy.compute_outcome(ScanParameters())
    fig = vis.create_iron_triangle_figure(outcome)
    trace = fig.data[0]
    assert list(trace.r) == [43, 39, 76, 43]
    assert trace.theta[0] == "SNR"


def test_slice_stack_figure() -> None:
    fig = vis.create_slice_stack_figure(5)
    assert len(fig.data[0].x) == 8


def test_stair_step_figure() -> None:
    fig = vis.create_stair_step_figure(7)
    ax = fig.axes[0]
    assert len(ax.lines) == 2
    plt.close(fig)


def test_summarize_params_uses_fallback() -> None:
    summary = vis.summarize_params(ScanParameters(sequence_id="nope"))
    assert summary["Séquence"] == "Proton Density (PD) FSE-2D"
    assert summary["TR"] == "3000 ms"


def test_phantom_shape_and_range() -> None:
    img = make_humerus_phantom(200)
    assert img.shape == (200, 200)
    assert img.max() == pytest.approx(0.9)
    assert img[0, 0] == 0


def test_preview_is_deterministic_and_bounded() -> None:
    p = ScanParameters(nex=1, matrix_size=128, slice_thickness_mm=5)
    a = generate_preview(p, seed=3)
    b = generate_preview(p, seed=3)
    assert a.shape == (200, 200)
    assert np.array_equal(a, b)
    assert a.min() >= 0 and a.max() <= 1


def test_preview_more_nex_less_noise() -> None:
    clean = generate_preview(ScanParameters(nex=4, matrix_size=512), seed=0)
    noisy = generate_preview(ScanParameters(nex=1, matrix_size=512), seed=0)
    reference = make_humerus_phantom(200)
    assert np.abs(clean - reference).mean() < np.abs(noisy - reference).mean()
    assert not math.isnan(clean.mean())
