"""
Scoped high-quality rendering for drawing contexts.
"""

import logging

from .interfaces import DrawingContext
from .models import HintValue, QualitySnapshot, RenderHintKey

logger = logging.getLogger(__name__)

HIGH_QUALITY_HINTS = {
    RenderHintKey.ANTIALIASING: HintValue.ANTIALIAS_ON,
    RenderHintKey.STROKE_CONTROL: HintValue.STROKE_NORMALIZE,
    RenderHintKey.TEXT_ANTIALIASING: HintValue.TEXT_ANTIALIAS_ON,
    RenderHintKey.RENDERING: HintValue.RENDER_QUALITY,
}


class RenderingSession:
    """
    Temporary quality override on a drawing context.

    Use it as a context manager so the captured state is restored on every
    exit path::

        with setup_high_quality_rendering(context):
            context.fill(shape)

    Only the antialiasing and stroke-control hints are restored; text
    antialiasing and render quality keep their high-quality values.
    """

    def __init__(self, context: DrawingContext, snapshot: QualitySnapshot):
        self.context = context
        self.snapshot = snapshot
        self._released = False

    @classmethod
    def acquire(cls, context: DrawingContext) -> "RenderingSession":
        """Capture the context state, then switch it to high-quality rendering."""
        snapshot = QualitySnapshot.capture(context)
        for key, value in HIGH_QUALITY_HINTS.items():
            context.set_rendering_hint(key, value)
        logger.debug(f"High-quality rendering acquired on {type(context).__name__}")
        return cls(context, snapshot)

    @property
    def released(self) -> bool:
        return self._released

    def release(self):
        """Restore the captured state. Calling it again has no effect."""
        if self._released:
            return
        self._released = True

        snapshot = self.snapshot
        # A None hint was never set on the context; leave it alone.
        if snapshot.antialiasing is not None:
            self.context.set_rendering_hint(RenderHintKey.ANTIALIASING, snapshot.antialiasing)
        if snapshot.stroke_control is not None:
            self.context.set_rendering_hint(RenderHintKey.STROKE_CONTROL, snapshot.stroke_control)
        if snapshot.color is not None:
            self.context.set_color(snapshot.color)
        if snapshot.stroke is not None:
            self.context.set_stroke(snapshot.stroke)
        if snapshot.composite is not None:
            self.context.set_composite(snapshot.composite)

    close = release

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()
        return False


def setup_high_quality_rendering(context: DrawingContext) -> RenderingSession:
    """Switch a context to high-quality rendering; release the result to undo."""
    return RenderingSession.acquire(context)
