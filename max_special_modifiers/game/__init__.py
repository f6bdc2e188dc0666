# Simulated host
from .simulated_host import SimulatedHost, Creature

__all__ = ["SimulatedHost", "Creature"]
