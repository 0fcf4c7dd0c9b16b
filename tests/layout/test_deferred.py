"""Tests for DeferredRegion activation."""

import pytest
from unittest.mock import Mock

from quill_layout.exceptions import LayoutError, NoActionBoundError
from quill_layout.layout.deferred import DeferredRegion
from quill_layout.layout.region import Region


class TestDeferredRegionConstruction:
    """Test cases for creating deferred regions."""

    def test_geometry_resolved_against_active_region(self, context):
        box = DeferredRegion(context, (10, 100), {"width": 200, "height": 50})

        assert box.absolute_left == context.margin_box.absolute_left + 10
        assert box.absolute_top == context.margin_box.absolute_bottom + 100
        assert box.width == 200.0
        assert box.height == 50.0

    def test_size_defaults_to_active_region(self, context):
        box = DeferredRegion(context, context.bounds.top_left)

        assert box.width == context.bounds.width
        assert box.height == context.bounds.height
        assert box.absolute_top == context.bounds.absolute_top

    def test_geometry_frozen_after_construction(self, context):
        box = DeferredRegion(context, (0, 100), {"width": 50, "height": 50})
        top = box.absolute_top

        context.bounds = Region(x=300.0, y=400.0, width=10.0, height=10.0)

        assert box.absolute_top == top

    def test_unknown_option(self, context):
        with pytest.raises(ValueError):
            DeferredRegion(context, (0, 0), {"depth": 3})

    def test_no_action_until_bound(self, context):
        box = DeferredRegion(context, (0, 100))

        assert box.has_action is False
        assert box.action is None


class TestBindAction:
    """Test cases for bind_action()."""

    def test_bind_does_not_run_action(self, context):
        action = Mock()
        box = DeferredRegion(context, (0, 100))

        result = box.bind_action(action)

        assert result is None
        action.assert_not_called()
        assert box.has_action

    def test_rebinding_replaces_action(self, context):
        first = Mock()
        second = Mock()
        box = DeferredRegion(context, (0, 100))

        box.bind_action(first)
        box.bind_action(second)
        box.activate()

        first.assert_not_called()
        second.assert_called_once_with()

    def test_rejects_non_callable(self, context):
        box = DeferredRegion(context, (0, 100))

        with pytest.raises(TypeError):
            box.bind_action(42)


class TestActivate:
    """Test cases for activate()."""

    def test_without_action(self, context):
        box = DeferredRegion(context, (0, 100))

        with pytest.raises(NoActionBoundError):
            box.activate()

    def test_no_action_error_is_layout_error(self, context):
        box = DeferredRegion(context, (0, 100))

        with pytest.raises(LayoutError):
            box.activate()

    def test_action_sees_region_and_top(self, context):
        box = DeferredRegion(context, (10, 200), {"width": 100, "height": 40})
        seen = []
        box.bind_action(lambda: seen.append((context.bounds, context.y)))

        box.activate()

        assert seen == [(box.region, box.absolute_top)]

    def test_restores_state_after_success(self, context):
        box = DeferredRegion(context, (10, 200), {"width": 100, "height": 40})
        box.bind_action(lambda: context.move_down(15))
        context.y = 333.0
        bounds_before = context.bounds

        box.activate()

        assert context.bounds is bounds_before
        assert context.y == 333.0

    def test_restores_state_after_failure(self, context):
        box = DeferredRegion(context, (10, 200), {"width": 100, "height": 40})

        def failing():
            context.y = -1.0
            raise RuntimeError("draw failed")

        box.bind_action(failing)
        bounds_before = context.bounds
        y_before = context.y

        with pytest.raises(RuntimeError, match="draw failed"):
            box.activate()

        assert context.bounds is bounds_before
        assert context.y == y_before

    def test_repeatable_determinism(self, flat_context):
        box = DeferredRegion(flat_context, (72, 720), {"width": 200, "height": 50})
        log = []
        box.bind_action(lambda: log.append(flat_context.bounds.absolute_top))

        for _ in range(3):
            flat_context.y = 300.0
            box.activate()
            assert flat_context.y == 300.0

        assert log == [720.0, 720.0, 720.0]
        assert box.activation_count == 3

    def test_each_activation_starts_at_region_top(self, context):
        box = DeferredRegion(context, (0, 300), {"width": 100, "height": 100})
        starts = []

        def action():
            starts.append(context.y)
            context.move_down(20)

        box.bind_action(action)
        box.activate()
        context.y = 10.0
        box.activate()

        assert starts == [box.absolute_top, box.absolute_top]

    def test_action_sees_live_external_state(self, context):
        counter = {"value": 0}
        seen = []
        box = DeferredRegion(context, (0, 100))
        box.bind_action(lambda: seen.append(counter["value"]))

        counter["value"] = 1
        box.activate()
        counter["value"] = 2
        box.activate()

        assert seen == [1, 2]


class TestNestedActivation:
    """Test cases for activations nested inside other activations."""

    def test_inner_restores_before_outer(self, context):
        outer = DeferredRegion(context, (0, 600), {"width": 300, "height": 300})
        inner = DeferredRegion(context, (10, 200), {"width": 50, "height": 50})
        trace = []

        inner.bind_action(lambda: trace.append(("inner", context.bounds)))

        def outer_action():
            trace.append(("outer-before", context.bounds, context.y))
            inner.activate()
            trace.append(("outer-after", context.bounds, context.y))

        outer.bind_action(outer_action)
        bounds_before = context.bounds
        y_before = context.y

        outer.activate()

        assert trace == [
            ("outer-before", outer.region, outer.absolute_top),
            ("inner", inner.region),
            ("outer-after", outer.region, outer.absolute_top),
        ]
        assert context.bounds is bounds_before
        assert context.y == y_before

    def test_deep_failure_restores_every_level(self, context):
        levels = [DeferredRegion(context, (i, 500 - i), {"width": 100, "height": 100}) for i in range(4)]
        observed = []

        def fail():
            raise ValueError("deep failure")

        levels[-1].bind_action(fail)
        for parent, child in zip(levels, levels[1:]):
            def run(parent=parent, child=child):
                try:
                    child.activate()
                finally:
                    observed.append((context.bounds, context.y))
            parent.bind_action(run)

        bounds_before = context.bounds
        y_before = context.y

        with pytest.raises(ValueError, match="deep failure"):
            levels[0].activate()

        # Each level sees its own state again once its child has unwound
        assert observed == [
            (levels[2].region, levels[2].absolute_top),
            (levels[1].region, levels[1].absolute_top),
            (levels[0].region, levels[0].absolute_top),
        ]
        assert context.bounds is bounds_before
        assert context.y == y_before

    def test_region_can_activate_itself_through_another(self, context):
        box = DeferredRegion(context, (0, 100), {"width": 10, "height": 10})
        other = DeferredRegion(context, (0, 200), {"width": 10, "height": 10})
        calls = []
        box.bind_action(lambda: calls.append("box"))
        other.bind_action(lambda: (box.activate(), box.activate()))

        other.activate()

        assert calls == ["box", "box"]
