"""End-to-end tests for the composition generator and service."""

import pytest

from boogie.core.color import classify_size
from boogie.models import (
    BalanceMetrics, BalanceParams, Canvas, GenerationConfig, GenerationParams,
    LayoutParams, ProtectedShape, ShapeRole, SizeClass,
)
from boogie.services.sample import SAMPLE_SEED

SEEDS = ["demo-seed-001", "t1", "mondrian", "broadway", "42"]

# Every split taken, balance left wide open
RELAXED = GenerationParams(
    layout=LayoutParams(split_probability=1.0),
    balance=BalanceParams(
        min_white=0.0, max_white=1.0, max_color_dominance=1.0, max_fill_jump=1.0,
    ),
)

# Every split taken, with an envelope that still binds
ACTIVE = GenerationParams(
    layout=LayoutParams(split_probability=1.0),
    balance=BalanceParams(
        min_white=0.2, max_white=0.6, max_color_dominance=0.5, max_fill_jump=0.5,
    ),
)

MULTI = [pytest.param(RELAXED, id="relaxed"), pytest.param(ACTIVE, id="active")]


def _prefix_metrics(composition):
    """Metrics after each accepted rectangle, in acceptance order."""
    placed = composition.placed
    return [
        BalanceMetrics.from_placed(placed[:k], composition.diamond.area, composition.white)
        for k in range(1, len(placed) + 1)
    ]


class TestDeterminism:

    def test_same_inputs_same_output(self, service, sample_canvas, sample_shapes):
        a = service.generate(sample_canvas, sample_shapes, SAMPLE_SEED)
        b = service.generate(sample_canvas, sample_shapes, SAMPLE_SEED)
        assert a.model_dump() == b.model_dump()

    def test_preview_does_not_perturb_generate(self, service, sample_canvas, sample_shapes):
        before = service.generate(sample_canvas, sample_shapes, SAMPLE_SEED)
        service.preview(sample_canvas, sample_shapes, SAMPLE_SEED)
        after = service.generate(sample_canvas, sample_shapes, SAMPLE_SEED)
        assert before.model_dump() == after.model_dump()

    def test_callback_sees_every_placement(self, service, sample_canvas, sample_shapes):
        seen = []
        composition = service.generate(
            sample_canvas, sample_shapes, SAMPLE_SEED, on_place=seen.append,
        )
        assert seen == composition.placed


def _assert_envelope(composition, bounds):
    steps = _prefix_metrics(composition)
    for prev, nxt in zip(steps, steps[1:]):
        assert nxt.white_ratio <= bounds.max_white + 1e-9
        assert nxt.max_color_ratio <= bounds.max_color_dominance + 1e-9
        assert nxt.filled_ratio - prev.filled_ratio <= bounds.max_fill_jump + 1e-9
        if prev.white_ratio >= bounds.min_white:
            assert nxt.white_ratio >= bounds.min_white


class TestFillProperties:

    @pytest.mark.parametrize("seed", SEEDS)
    def test_fill_avoids_protected_shapes(self, service, sample_canvas, sample_shapes, seed):
        composition = service.generate(sample_canvas, sample_shapes, seed)
        for rect in composition.placed:
            for shape in sample_shapes:
                assert not rect.intersects(shape)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_fill_inside_diamond(self, service, sample_canvas, sample_shapes, seed):
        composition = service.generate(sample_canvas, sample_shapes, seed)
        for rect in composition.placed:
            assert composition.diamond.contains_rect(rect)

    @pytest.mark.parametrize("params", MULTI)
    @pytest.mark.parametrize("seed", SEEDS)
    def test_fill_does_not_overlap_itself(self, service, canvas, seed, params):
        composition = service.generate(canvas, [], seed, params)
        placed = composition.placed
        assert len(placed) >= 2
        for i, a in enumerate(placed):
            for b in placed[i + 1:]:
                assert not a.intersects(b)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_balance_envelope_with_sample(self, service, sample_canvas, sample_shapes, seed):
        composition = service.generate(sample_canvas, sample_shapes, seed)
        _assert_envelope(composition, BalanceParams())

    @pytest.mark.parametrize("seed", SEEDS)
    def test_balance_envelope_defaults(self, service, canvas, seed):
        composition = service.generate(canvas, [], seed)
        _assert_envelope(composition, BalanceParams())

    @pytest.mark.parametrize("seed", SEEDS)
    def test_balance_envelope_active(self, service, canvas, seed):
        composition = service.generate(canvas, [], seed, ACTIVE)
        assert len(composition.placed) >= 2
        _assert_envelope(composition, ACTIVE.balance)
        assert composition.stats.white_ratio >= ACTIVE.balance.min_white

    @pytest.mark.parametrize("params", MULTI)
    @pytest.mark.parametrize("seed", SEEDS)
    def test_pattern_rules_hold(self, service, canvas, seed, params):
        composition = service.generate(canvas, [], seed, params)
        placed = composition.placed
        assert len(placed) >= 2
        for i, rect in enumerate(placed):
            size = classify_size(rect, 20)
            if size == SizeClass.SMALL and i >= 2:
                window = placed[i - 2:i + 1]
                assert sum(classify_size(r, 20) == SizeClass.SMALL for r in window) >= 2
            if size == SizeClass.LARGE:
                for earlier in placed[:i]:
                    if classify_size(earlier, 20) == SizeClass.LARGE:
                        assert not earlier.touches(rect)

    def test_small_rects_cluster(self, service, canvas):
        """Finer cells produce small rectangles, always in company."""
        params = RELAXED.model_copy(update={
            "layout": LayoutParams(split_probability=1.0, min_split_size=20),
        })
        composition = service.generate(canvas, [], "t1", params)
        placed = composition.placed
        assert len(placed) >= 2
        for i, rect in enumerate(placed[2:], start=2):
            if classify_size(rect, 20) == SizeClass.SMALL:
                window = placed[i - 2:i + 1]
                assert sum(classify_size(r, 20) == SizeClass.SMALL for r in window) >= 2

    @pytest.mark.parametrize("params", MULTI)
    @pytest.mark.parametrize("seed", SEEDS)
    def test_placed_sides_respect_min_size(self, service, canvas, seed, params):
        composition = service.generate(canvas, [], seed, params)
        assert len(composition.placed) >= 2
        for rect in composition.placed:
            assert rect.w >= 40 and rect.h >= 40


class TestScenarios:

    def test_empty_canvas_t1(self, service, canvas):
        composition = service.generate(canvas, [], "t1")
        assert len(composition.placed) >= 1
        assert 0.3 <= composition.stats.white_ratio <= 0.55
        assert composition.stats.count == len(composition.placed)

    def test_fully_protected_canvas(self, service, canvas):
        cover = ProtectedShape(id="all", x=0, y=0, w=400, h=400, color="#d62828")
        composition = service.generate(canvas, [cover], "covered")
        assert composition.placed == []
        assert composition.stats.count == 0
        assert composition.stats.filled_ratio == 0.0

    def test_no_splits_single_candidate(self, service, canvas):
        params = GenerationParams(layout=LayoutParams(split_probability=0.0))
        composition = service.generate(canvas, [], "flat", params)
        assert len(composition.placed) <= 1

    def test_grid_strategy(self, service, canvas):
        config = GenerationConfig(strategy="grid")
        composition = service.generate(canvas, [], "grid", config=config)
        assert len(composition.placed) == 1
        assert composition.diamond.contains_rect(composition.placed[0])

    def test_grid_strategy_with_sample(self, service, sample_canvas, sample_shapes):
        config = GenerationConfig(strategy="grid")
        composition = service.generate(sample_canvas, sample_shapes, SAMPLE_SEED, config=config)
        for rect in composition.placed:
            assert composition.diamond.contains_rect(rect)
            assert not any(rect.intersects(s) for s in sample_shapes)

    def test_shapes_outside_diamond_dropped(self, service, canvas):
        corner = ProtectedShape(id="corner", x=0, y=0, w=20, h=20, color="#1f3c88")
        middle = ProtectedShape(id="middle", x=180, y=180, w=40, h=40, color="#1f3c88")
        composition = service.preview(canvas, [corner, middle], "drop")
        assert [s.id for s in composition.protected] == ["middle"]

    def test_preview_has_no_fill(self, service, sample_canvas, sample_shapes):
        composition = service.preview(sample_canvas, sample_shapes, SAMPLE_SEED)
        assert composition.placed == []
        assert composition.stats.count == 0


class TestOutput:

    def test_tape_drawn_last(self, service, sample_canvas, sample_shapes):
        composition = service.generate(sample_canvas, sample_shapes, SAMPLE_SEED)
        order = composition.draw_order()
        assert order[:len(composition.placed)] == composition.placed
        tail = order[-4:]
        assert [s.id for s in tail] == ["b1", "b2", "b3", "b4"]
        assert all(s.role == ShapeRole.TAPE for s in tail)
        assert all(
            s.role == ShapeRole.NORMAL
            for s in order[len(composition.placed):-4]
        )

    def test_tape_colour_marks_tape(self, service, canvas):
        strip = ProtectedShape(id="t", x=180, y=180, w=40, h=40, color="#EDEDED")
        composition = service.preview(canvas, [strip], "tape")
        assert composition.protected[0].role == ShapeRole.TAPE

    def test_report(self, service, sample_canvas, sample_shapes):
        composition = service.generate(sample_canvas, sample_shapes, SAMPLE_SEED)
        report = service.report(composition)
        assert set(report) == {"filled_ratio", "white_ratio", "max_color_ratio", "filled_rects"}
        assert report["filled_rects"] == len(composition.placed)
        assert report["filled_ratio"] == round(composition.stats.filled_ratio, 3)

    def test_unknown_rule_rejected(self, service, canvas):
        config = GenerationConfig(disabled_rules=["pattern.missing"])
        with pytest.raises(ValueError, match="Unknown pattern rules"):
            service.generate(canvas, [], "x", config=config)

    def test_list_rules(self, service):
        assert {r["id"] for r in service.list_rules()} == {
            "pattern.small_cluster", "pattern.large_isolation",
        }


class TestCanvasValidation:

    def test_zero_width_rejected(self):
        with pytest.raises(ValueError):
            Canvas(width=0, height=400)
