"""Headless driver delivering ticks to a mechanism session."""

import logging
from typing import Callable, List, Optional

from tqdm import tqdm

from ...core.domain.models.transition import BondTransition
from ...core.services.mechanism_session import MechanismSession

logger = logging.getLogger(__name__)


class FrameLoop:
    """Calls ``session.tick()`` until no transition is animating.

    Stands in for a rendering-frame callback when there is no display.
    """

    def __init__(
        self,
        session: MechanismSession,
        max_ticks: Optional[int] = None,
        show_progress: bool = False,
        on_frame: Optional[Callable[[MechanismSession], None]] = None,
    ):
        """
        Initialize loop.

        Args:
            session: Session to advance
            max_ticks: Upper bound on ticks; defaults to ``session.settings.max_ticks``
            show_progress: Display a tqdm bar of ticks delivered
            on_frame: Called after each tick, e.g. to sample transition progress
        """
        self.session = session
        self.max_ticks = max_ticks or session.settings.max_ticks
        self.show_progress = show_progress
        self.on_frame = on_frame
        self.ticks = 0

    def run(self, step: Optional[float] = None) -> List[BondTransition]:
        """
        Tick until idle or until max_ticks is reached.

        Returns:
            Every transition committed during the run, in commit order
        """
        committed: List[BondTransition] = []
        frames = tqdm(
            range(self.max_ticks),
            desc="Animating",
            unit="tick",
            disable=not self.show_progress,
        )
        for _ in frames:
            if not self.session.is_animating():
                break
            committed.extend(self.session.tick(step))
            self.ticks += 1
            if self.on_frame is not None:
                self.on_frame(self.session)
        frames.close()

        if self.session.is_animating():
            logger.warning(
                f"Stopped after {self.max_ticks} ticks with "
                f"{len(self.session.transitions.active_transitions())} transitions still animating"
            )
        return committed

    @property
    def idle(self) -> bool:
        return not self.session.is_animating()
