from __future__ import annotations

import math

import numpy as np
import pytest

from shapes.blob import random_blob
from shapes.builder import build_outline
from shapes.kinds import CATALOGUE, ShapeKind
from shapes.outline import CurveOutline, EllipseOutline, PolygonOutline, outline_bounds
from shapes.polygon import regular_polygon


@pytest.mark.parametrize("n", [3, 4, 5, 6])
def test_regular_polygon_has_n_plus_one_vertices_and_closes(n: int) -> None:
    outline = regular_polygon(n, 30)
    assert len(outline.vertices) == n + 1
    assert outline.is_closed
    assert outline.vertices[0] == pytest.approx((30.0, 0.0))


def test_regular_polygon_vertices_on_circumcircle() -> None:
    outline = regular_polygon(6, 25)
    radii = [math.hypot(x, y) for x, y in outline.vertices]
    assert radii == pytest.approx([25.0] * 7)


def test_regular_polygon_rejects_degenerate() -> None:
    with pytest.raises(ValueError):
        regular_polygon(2, 10)


@pytest.mark.parametrize("n", [3, 4, 5, 6])
def test_regular_polygon_vertex_angles(n: int) -> None:
    outline = regular_polygon(n, 30)
    for i, (x, y) in enumerate(outline.vertices[:-1]):
        angle = math.atan2(y, x) % (2.0 * math.pi)
        assert angle == pytest.approx(i * 2.0 * math.pi / n, abs=1e-9)


def _blob_points(blob: CurveOutline) -> list[tuple[float, float]]:
    """始点 → 各区間の制御点/終点 の順で元の点列を復元する（重複と閉じ点を除く）。"""
    seq = [blob.start] + [p for s in blob.segments for p in (s.control, s.end)]
    pts: list[tuple[float, float]] = []
    for p in seq[:-1]:
        if not pts or pts[-1] != p:
            pts.append(p)
    return pts


def test_random_blob_point_angles(rng: np.random.Generator) -> None:
    for _ in range(30):
        pts = _blob_points(random_blob(30, rng))
        n = len(pts)
        assert 8 <= n <= 12
        for i, (x, y) in enumerate(pts):
            angle = math.atan2(y, x) % (2.0 * math.pi)
            assert angle == pytest.approx(2.0 * math.pi * i / n, abs=1e-9)


def test_circle_and_ellipse_radii() -> None:
    c = build_outline(ShapeKind.CIRCLE, 30)
    e = build_outline(ShapeKind.ELLIPSE, 30)
    assert isinstance(c, EllipseOutline) and (c.rx, c.ry) == (30.0, 30.0)
    assert isinstance(e, EllipseOutline)
    assert e.rx == pytest.approx(30.0)
    assert e.ry == pytest.approx(18.0)


def test_ellipse_flatten_is_closed_and_within_radii() -> None:
    pts = EllipseOutline(30.0, 18.0).flatten(12)
    assert pts.dtype == np.float32
    assert np.array_equal(pts[0], pts[-1])
    assert np.all(np.abs(pts[:, 0]) <= 30.0 + 1e-4)
    assert np.all(np.abs(pts[:, 1]) <= 18.0 + 1e-4)


def test_random_blob_structure(rng: np.random.Generator) -> None:
    for _ in range(50):
        blob = random_blob(30, rng)
        assert isinstance(blob, CurveOutline)
        assert blob.is_closed
        # 8..12 点 → 区間数は floor((n-2)/2)+1 で 4..6
        assert 4 <= len(blob.segments) <= 6
        pts = [blob.start] + [p for s in blob.segments for p in (s.control, s.end)]
        radii = np.hypot(*np.asarray(pts).T)
        assert np.all(radii >= 0.8 * 30 - 1e-9)
        assert np.all(radii <= 1.2 * 30 + 1e-9)


def test_random_blob_is_single_loop(rng: np.random.Generator) -> None:
    blob = random_blob(30, rng)
    ends = [s.end for s in blob.segments]
    # 終点が始点に戻るのは最後の区間だけ
    assert ends.count(blob.start) == 1
    assert ends[-1] == blob.start


def test_random_blob_is_deterministic_for_seed() -> None:
    a = random_blob(30, np.random.default_rng(7))
    b = random_blob(30, np.random.default_rng(7))
    assert a == b


def test_non_random_kinds_ignore_rng() -> None:
    for kind in CATALOGUE:
        if kind is ShapeKind.RANDOM:
            continue
        a = build_outline(kind, 30, np.random.default_rng(1))
        b = build_outline(kind, 30, np.random.default_rng(2))
        assert a == b


def test_build_outline_returns_expected_types() -> None:
    assert isinstance(build_outline(ShapeKind.TRIANGLE, 30), PolygonOutline)
    assert isinstance(build_outline(ShapeKind.RANDOM, 30), CurveOutline)


def test_build_outline_unknown_kind_raises() -> None:
    with pytest.raises(ValueError):
        build_outline("star", 30)  # type: ignore[arg-type]


def test_build_outline_invalid_size_raises() -> None:
    with pytest.raises(ValueError):
        build_outline(ShapeKind.HEXAGON, 0)


def test_outline_bounds() -> None:
    assert outline_bounds(EllipseOutline(30.0, 18.0)) == (-30.0, -18.0, 30.0, 18.0)
    min_x, min_y, max_x, max_y = outline_bounds(regular_polygon(4, 10))
    assert (min_x, max_x) == pytest.approx((-10.0, 10.0), abs=1e-5)
    assert (min_y, max_y) == pytest.approx((-10.0, 10.0), abs=1e-5)


def test_catalogue_has_seven_distinct_kinds() -> None:
    assert len(CATALOGUE) == 7
    assert set(CATALOGUE) == set(ShapeKind)
    assert [k.sides for k in CATALOGUE if k.is_polygon] == [3, 4, 5, 6]
