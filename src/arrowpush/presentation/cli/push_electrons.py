"""Command-line interface for applying curved-arrow moves to a molecule."""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from ...config import EngineSettings
from ...core.domain.exceptions import ArrowPushError
from ...core.domain.models.move import MoveKind
from ...core.services.mechanism_session import MechanismSession
from ...core.services.molecule_info import MoleculeInfoService
from ...infrastructure.scheduling.frame_loop import FrameLoop


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None) -> None:
    """Configure logging."""
    handlers: List[logging.Handler] = [
        logging.StreamHandler() if verbose else logging.NullHandler()
    ]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=logging.INFO if verbose else logging.ERROR,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def parse_move(text: str) -> Tuple[MoveKind, str]:
    """Parse ``KIND:DESCRIPTOR`` such as ``bond-to-atom:1-2``."""
    kind, sep, descriptor = text.partition(":")
    if not sep or not descriptor:
        raise argparse.ArgumentTypeError(
            f"Move must look like KIND:DESCRIPTOR (e.g. bond-to-atom:1-2), got {text!r}"
        )
    try:
        return MoveKind.parse(kind), descriptor
    except ArrowPushError as e:
        raise argparse.ArgumentTypeError(str(e))


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Push electrons through a molecule and report charges and lone pairs"
    )
    parser.add_argument("smiles", help="SMILES string of the starting structure")
    parser.add_argument(
        "--move",
        dest="moves",
        action="append",
        type=parse_move,
        default=[],
        help="Move as KIND:DESCRIPTOR; kinds: "
        + ", ".join(kind.value for kind in MoveKind)
        + ". Repeat to apply moves in order.",
    )
    parser.add_argument(
        "--step", type=float, default=None, help="Transition progress per tick"
    )
    parser.add_argument(
        "--hide-carbon-hydrogens",
        action="store_true",
        help="Fold carbon-bound hydrogens back into their carbons",
    )
    parser.add_argument("--kekulize", action="store_true", help="Kekulize aromatic rings")
    parser.add_argument("--csv", type=Path, help="Write the final atom table to CSV")
    parser.add_argument("--no-progress", action="store_true", help="Hide the tick progress bar")
    parser.add_argument("--log-file", type=Path, help="Also write logs to this file")
    parser.add_argument("--verbose", action="store_true", help="Show detailed output")
    return parser


def build_settings(args: argparse.Namespace) -> EngineSettings:
    settings = EngineSettings()
    overrides = {
        "show_implicit_hydrogens": not args.hide_carbon_hydrogens,
        "kekulize": args.kekulize,
    }
    if args.step is not None:
        overrides["progress_step"] = args.step
    return dataclasses.replace(settings, **overrides)


def atom_table(session: MechanismSession) -> pd.DataFrame:
    return pd.DataFrame([dataclasses.asdict(state) for state in session.atom_states()])


def bond_table(session: MechanismSession) -> pd.DataFrame:
    return pd.DataFrame(MoleculeInfoService(session.graph).bond_types())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the electron-pushing CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    try:
        session = MechanismSession(build_settings(args)).load_smiles(args.smiles)
    except (ArrowPushError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    status = 0
    for kind, descriptor in args.moves:
        try:
            result = session.apply(kind, descriptor)
        except ArrowPushError as e:
            print(f"Error: {kind.value} {descriptor}: {e}", file=sys.stderr)
            return 1
        if not result.accepted:
            print(f"Rejected {kind.value} {descriptor}: {result.reason}", file=sys.stderr)
            status = 1
            continue
        FrameLoop(session, show_progress=not args.no_progress).run()

    atoms = atom_table(session)
    print(atoms.to_string(index=False))
    print()
    print(bond_table(session).to_string(index=False))

    if args.csv is not None:
        args.csv.parent.mkdir(parents=True, exist_ok=True)
        atoms.to_csv(args.csv, index=False)

    return status


if __name__ == "__main__":
    sys.exit(main())
