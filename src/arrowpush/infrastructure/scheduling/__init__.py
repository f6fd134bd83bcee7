"""External tick drivers."""

from .frame_loop import FrameLoop

__all__ = ["FrameLoop"]
