"""Configuration dataclasses for the electron-pushing engine.

Settings are passed by constructor injection; nothing is read from files or
the environment.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineSettings:
    """Tuning knobs shared by the adapters, transition machine and frame loop."""

    progress_step: float = 0.005
    """Progress added to every active transition per tick. UI tuning only."""

    max_bond_order: int = 3
    """Ceiling for increase transitions."""

    show_implicit_hydrogens: bool = True
    """Keep hydrogens as graph atoms. False strips carbon-bound hydrogens."""

    kekulize: bool = False
    """Replace aromatic bonds by an alternating single/double assignment on load."""

    embed_3d: bool = True
    """Embed 3-D coordinates with ETKDG; otherwise compute 2-D depiction coordinates."""

    random_seed: int = 42
    """Seed for the conformer embedding, for reproducible positions."""

    max_ticks: int = 10000
    """Upper bound on ticks the frame loop will deliver before giving up."""

    def __post_init__(self):
        if not 0 < self.progress_step <= 1:
            raise ValueError(f"progress_step must be in (0, 1], got {self.progress_step}")
        if not 1 <= self.max_bond_order <= 3:
            raise ValueError(f"max_bond_order must be 1, 2 or 3, got {self.max_bond_order}")
        if self.max_ticks < 1:
            raise ValueError(f"max_ticks must be positive, got {self.max_ticks}")

    @classmethod
    def fast(cls) -> "EngineSettings":
        """Coarse steps for headless runs: every transition completes in four ticks."""
        return cls(progress_step=0.25, embed_3d=False)
