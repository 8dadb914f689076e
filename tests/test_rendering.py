"""
Tests for scoped high-quality rendering and the drawing helpers.
"""

import pytest
from PySide6.QtGui import QColor, QPainter

from hms_laf.core.drawing import (draw_text, fill_outline, fill_rounded_rectangle,
                                  stroke_rounded_rectangle)
from hms_laf.core.models import (HintValue, QualitySnapshot, RenderHintKey,
                                 ShapeKind, Stroke)
from hms_laf.core.rendering import (HIGH_QUALITY_HINTS, RenderingSession,
                                    setup_high_quality_rendering)

SOURCE_OVER = QPainter.CompositionMode.CompositionMode_SourceOver
MULTIPLY = QPainter.CompositionMode.CompositionMode_Multiply


class TestRenderingSession:
    """Test RenderingSession acquire/release."""

    def test_acquire_sets_high_quality_hints(self, recording_context):
        session = RenderingSession.acquire(recording_context)

        assert recording_context.hints == HIGH_QUALITY_HINTS
        assert not session.released

    def test_snapshot_captures_prior_state(self, make_context):
        context = make_context(
            hints={RenderHintKey.ANTIALIASING: HintValue.ANTIALIAS_OFF},
            color=QColor("red"),
            stroke=Stroke(2.0),
            composite=MULTIPLY,
        )
        session = setup_high_quality_rendering(context)

        assert session.snapshot == QualitySnapshot(
            antialiasing=HintValue.ANTIALIAS_OFF,
            stroke_control=None,
            color=QColor("red"),
            stroke=Stroke(2.0),
            composite=MULTIPLY,
        )

    def test_release_restores_color_stroke_and_composite(self, recording_context):
        session = setup_high_quality_rendering(recording_context)
        recording_context.set_color(QColor("blue"))
        recording_context.set_stroke(Stroke(9.0))
        recording_context.set_composite(MULTIPLY)

        session.release()

        assert recording_context.color == QColor(10, 20, 30)
        assert recording_context.stroke == Stroke(3.0)
        assert recording_context.composite == SOURCE_OVER
        assert session.released

    def test_release_restores_previously_set_hints(self, make_context):
        context = make_context(hints={
            RenderHintKey.ANTIALIASING: HintValue.ANTIALIAS_OFF,
            RenderHintKey.STROKE_CONTROL: HintValue.STROKE_PURE,
        })

        with setup_high_quality_rendering(context):
            assert context.hints[RenderHintKey.ANTIALIASING] is HintValue.ANTIALIAS_ON
            assert context.hints[RenderHintKey.STROKE_CONTROL] is HintValue.STROKE_NORMALIZE

        assert context.hints[RenderHintKey.ANTIALIASING] is HintValue.ANTIALIAS_OFF
        assert context.hints[RenderHintKey.STROKE_CONTROL] is HintValue.STROKE_PURE

    def test_unset_hints_are_left_untouched(self, recording_context):
        with setup_high_quality_rendering(recording_context):
            pass

        # Never set before, so the high-quality values stay in place
        assert recording_context.hints[RenderHintKey.ANTIALIASING] is HintValue.ANTIALIAS_ON
        assert recording_context.hints[RenderHintKey.STROKE_CONTROL] is HintValue.STROKE_NORMALIZE

    def test_text_and_render_quality_hints_are_not_restored(self, make_context):
        context = make_context(hints={
            RenderHintKey.TEXT_ANTIALIASING: HintValue.TEXT_ANTIALIAS_OFF,
            RenderHintKey.RENDERING: HintValue.RENDER_SPEED,
        })

        with setup_high_quality_rendering(context):
            pass

        assert context.hints[RenderHintKey.TEXT_ANTIALIASING] is HintValue.TEXT_ANTIALIAS_ON
        assert context.hints[RenderHintKey.RENDERING] is HintValue.RENDER_QUALITY

    def test_none_values_are_not_restored(self, make_context):
        context = make_context()
        session = setup_high_quality_rendering(context)
        context.set_color(QColor("green"))
        context.set_stroke(Stroke(4.0))

        session.release()

        assert context.color == QColor("green")
        assert context.stroke == Stroke(4.0)
        assert context.composite is None

    def test_release_is_idempotent(self, recording_context):
        session = setup_high_quality_rendering(recording_context)
        session.release()

        recording_context.set_color(QColor("yellow"))
        session.close()

        assert recording_context.color == QColor("yellow")

    def test_release_on_exception(self, recording_context):
        with pytest.raises(RuntimeError, match="boom"):
            with setup_high_quality_rendering(recording_context):
                recording_context.set_color(QColor("purple"))
                raise RuntimeError("boom")

        assert recording_context.color == QColor(10, 20, 30)

    @pytest.mark.parametrize("initial", [
        {},
        {RenderHintKey.ANTIALIASING: HintValue.ANTIALIAS_ON},
        {RenderHintKey.ANTIALIASING: HintValue.ANTIALIAS_OFF,
         RenderHintKey.STROKE_CONTROL: HintValue.STROKE_PURE},
        {RenderHintKey.STROKE_CONTROL: HintValue.STROKE_NORMALIZE},
    ])
    def test_round_trip_for_various_states(self, make_context, initial):
        context = make_context(hints=initial, color=QColor("black"),
                               stroke=Stroke(1.5), composite=MULTIPLY)

        with setup_high_quality_rendering(context):
            context.set_color(QColor("white"))
            context.set_stroke(Stroke(6.0))
            context.set_composite(SOURCE_OVER)

        assert context.color == QColor("black")
        assert context.stroke == Stroke(1.5)
        assert context.composite == MULTIPLY
        for key in (RenderHintKey.ANTIALIASING, RenderHintKey.STROKE_CONTROL):
            expected = initial.get(key, HIGH_QUALITY_HINTS[key])
            assert context.hints[key] is expected


class TestDrawingOperations:
    """Test the drawing helpers against a recording context."""

    def test_fill_rounded_rectangle(self, make_context):
        context = make_context(hints={RenderHintKey.ANTIALIASING: HintValue.ANTIALIAS_OFF},
                               color=QColor("black"))

        fill_rounded_rectangle(context, 0, 0, 30, 20, 4, QColor("orange"))

        (op, shape, color, hints), = context.operations
        assert op == "fill"
        assert shape.kind is ShapeKind.ROUNDED_RECTANGLE
        assert shape.arc_diameter == 8
        assert color == QColor("orange")
        assert hints[RenderHintKey.ANTIALIASING] is HintValue.ANTIALIAS_ON

        assert context.color == QColor("black")
        assert context.hints[RenderHintKey.ANTIALIASING] is HintValue.ANTIALIAS_OFF

    def test_fill_leaves_hints_as_found(self, make_context):
        before = {
            RenderHintKey.ANTIALIASING: HintValue.ANTIALIAS_OFF,
            RenderHintKey.STROKE_CONTROL: HintValue.STROKE_PURE,
        }
        context = make_context(hints=before)

        fill_rounded_rectangle(context, 2, 2, 10, 10, 10, QColor("red"))

        for key, value in before.items():
            assert context.hints[key] is value

    def test_draw_text(self, recording_context):
        draw_text(recording_context, "Hello", 12.5, 30, QColor("navy"))

        (op, text, x, y, color, hints), = recording_context.operations
        assert (op, text, x, y) == ("text", "Hello", 12.5, 30)
        assert color == QColor("navy")
        assert hints[RenderHintKey.TEXT_ANTIALIASING] is HintValue.TEXT_ANTIALIAS_ON
        assert recording_context.color == QColor(10, 20, 30)

    def test_stroke_rounded_rectangle(self, recording_context):
        stroke_rounded_rectangle(recording_context, 1, 1, 40, 20, 5, QColor("gray"), 2.5)

        (op, shape, color, stroke, hints), = recording_context.operations
        assert op == "draw"
        assert shape.kind is ShapeKind.ROUNDED_RECTANGLE
        assert shape.corner_radius == 5
        assert color == QColor("gray")
        assert stroke == Stroke(2.5)
        assert hints[RenderHintKey.STROKE_CONTROL] is HintValue.STROKE_NORMALIZE

        assert recording_context.stroke == Stroke(3.0)

    def test_fill_outline(self, recording_context):
        fill_outline(recording_context, 0, 0, 20, 20, 4, 2, QColor("teal"))

        (op, shape, color, hints), = recording_context.operations
        assert op == "fill"
        assert shape.kind is ShapeKind.COMPOUND_OUTLINE
        assert color == QColor("teal")

    def test_fill_outline_with_degenerate_input_draws_nothing(self, recording_context):
        fill_outline(recording_context, 0, 0, 20, 20, 4, 0, QColor("teal"))

        assert recording_context.operations == []
        assert recording_context.color == QColor(10, 20, 30)
