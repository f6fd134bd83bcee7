"""Adapter exposing an RDKit molecule as a MoleculeGraph."""

import logging
from typing import List, Optional, Sequence

import numpy as np
from rdkit import Chem
from rdkit.Chem import AllChem

from ...config import EngineSettings
from ...core.domain.exceptions import BondNotFoundError, StructureParseError
from ...core.domain.interfaces.molecule_graph import MoleculeGraph
from ...core.domain.models.bond import Bond, BondOrder, validate_bond_order

logger = logging.getLogger(__name__)

_BOND_TYPES = {
    0: Chem.BondType.ZERO,
    1: Chem.BondType.SINGLE,
    2: Chem.BondType.DOUBLE,
    3: Chem.BondType.TRIPLE,
}


class RDKitMoleculeAdapter(MoleculeGraph):
    """Molecular graph backed by an editable RDKit molecule.

    Hydrogen counts folded into atoms are read once at construction and
    stay fixed while bond orders change, so a carbon losing a bond does not
    silently grow an extra hydrogen.
    """

    def __init__(self, mol: Chem.Mol, smiles: str = ""):
        """Initialize adapter.

        Args:
            mol: Sanitized RDKit molecule; copied into an RWMol
            smiles: Source notation, kept for reloading and reporting
        """
        self.mol = Chem.RWMol(mol)
        self.smiles = smiles
        self.mol.UpdatePropertyCache(strict=False)
        self._implicit_hydrogens = [atom.GetTotalNumHs() for atom in self.mol.GetAtoms()]
        self._positions = self._read_positions()

    @classmethod
    def from_smiles(
        cls, smiles: str, settings: Optional[EngineSettings] = None
    ) -> "RDKitMoleculeAdapter":
        """Parse SMILES, add hydrogens and assign coordinates.

        Args:
            smiles: SMILES string
            settings: Engine settings; hydrogen display, kekulization and
                embedding options are honoured

        Returns:
            RDKitMoleculeAdapter wrapping the prepared molecule

        Raises:
            StructureParseError: If smiles is empty, not a string, or unparsable
        """
        settings = settings or EngineSettings()
        if not isinstance(smiles, str) or not smiles.strip():
            logger.error(f"Invalid SMILES input: {smiles!r}")
            raise StructureParseError("Invalid SMILES string.")

        mol = Chem.MolFromSmiles(smiles)
        if mol is None:
            logger.error(f"RDKit failed to parse SMILES {smiles!r}")
            raise StructureParseError(f"Failed to initialize molecule from {smiles!r}")

        if settings.kekulize:
            Chem.Kekulize(mol, clearAromaticFlags=True)

        mol = Chem.AddHs(mol)
        cls._assign_coordinates(mol, settings)
        if not settings.show_implicit_hydrogens:
            mol = cls._strip_carbon_hydrogens(mol)

        logger.info(f"Loaded {smiles!r} with {mol.GetNumAtoms()} atoms")
        return cls(mol, smiles=smiles)

    @staticmethod
    def _assign_coordinates(mol: Chem.Mol, settings: EngineSettings) -> None:
        """Embed 3-D coordinates, falling back to a 2-D depiction."""
        if settings.embed_3d:
            params = AllChem.ETKDGv3()
            params.randomSeed = settings.random_seed
            if AllChem.EmbedMolecule(mol, params) == 0:
                return
            logger.warning("3-D embedding failed; using 2-D coordinates")
        AllChem.Compute2DCoords(mol)

    @staticmethod
    def _strip_carbon_hydrogens(mol: Chem.Mol) -> Chem.Mol:
        """Remove hydrogen atoms bonded to carbon, folding them back into the carbon."""
        rwmol = Chem.RWMol(mol)
        hydrogens = set()
        for atom in rwmol.GetAtoms():
            if atom.GetSymbol() != "C":
                continue
            carbon_hydrogens = [
                nbr.GetIdx() for nbr in atom.GetNeighbors() if nbr.GetSymbol() == "H"
            ]
            if carbon_hydrogens:
                atom.SetNumExplicitHs(atom.GetNumExplicitHs() + len(carbon_hydrogens))
                atom.SetNoImplicit(True)
                hydrogens.update(carbon_hydrogens)

        # Remove from the highest index down so earlier indices stay valid
        for index in sorted(hydrogens, reverse=True):
            rwmol.RemoveAtom(index)

        stripped = rwmol.GetMol()
        stripped.UpdatePropertyCache(strict=False)
        return stripped

    def copy(self) -> "RDKitMoleculeAdapter":
        clone = RDKitMoleculeAdapter(self.mol, smiles=self.smiles)
        clone._implicit_hydrogens = list(self._implicit_hydrogens)
        clone._positions = self._positions.copy()
        return clone

    def _read_positions(self) -> np.ndarray:
        if self.mol.GetNumConformers() == 0:
            return np.zeros((self.mol.GetNumAtoms(), 3))
        return np.array(self.mol.GetConformer().GetPositions(), dtype=float).reshape(-1, 3)

    def atom_count(self) -> int:
        return self.mol.GetNumAtoms()

    def atom_symbol(self, index: int) -> str:
        return self.mol.GetAtomWithIdx(self.check_index(index)).GetSymbol()

    def atom_charge(self, index: int) -> int:
        return self.mol.GetAtomWithIdx(self.check_index(index)).GetFormalCharge()

    def atom_position(self, index: int) -> np.ndarray:
        return self._positions[self.check_index(index)].copy()

    def connected_atoms(self, index: int) -> Sequence[int]:
        atom = self.mol.GetAtomWithIdx(self.check_index(index))
        return [nbr.GetIdx() for nbr in atom.GetNeighbors()]

    def bond_order(self, atom1: int, atom2: int) -> Optional[BondOrder]:
        bond = self.mol.GetBondBetweenAtoms(self.check_index(atom1), self.check_index(atom2))
        if bond is None:
            return None
        return self._order_of(bond)

    def set_bond_order(self, atom1: int, atom2: int, order: int) -> None:
        atom1, atom2 = self.check_index(atom1), self.check_index(atom2)
        bond = self.mol.GetBondBetweenAtoms(atom1, atom2)
        if bond is None:
            raise BondNotFoundError(atom1, atom2)
        bond.SetBondType(_BOND_TYPES[validate_bond_order(order)])
        bond.SetIsAromatic(False)
        logger.debug(f"Bond {atom1}-{atom2} set to order {order}")

    def implicit_hydrogen_count(self, index: int) -> int:
        return self._implicit_hydrogens[self.check_index(index)]

    def bonds(self) -> List[Bond]:
        return [
            Bond(bond.GetBeginAtomIdx(), bond.GetEndAtomIdx(), self._order_of(bond))
            for bond in self.mol.GetBonds()
        ]

    @staticmethod
    def _order_of(bond: Chem.Bond) -> BondOrder:
        order = bond.GetBondTypeAsDouble()
        return int(order) if float(order).is_integer() else order
