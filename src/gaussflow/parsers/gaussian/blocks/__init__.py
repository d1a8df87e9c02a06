from gaussflow.parsers.gaussian.blocks.energies import ScalarEnergyTracker
from gaussflow.parsers.gaussian.blocks.orbitals import OrbitalSectionTracker

__all__ = [
    "ScalarEnergyTracker",
    "OrbitalSectionTracker",
]
