"""Traffic engine configuration parameters."""

from dataclasses import dataclass


@dataclass
class EngineConfig:
    """Configuration for the rerooting traffic engine."""
    
    # Arithmetic
    word_bits: int = 64  # Aggregates wrap modulo 2**word_bits
    
    # Identifier policy
    reserve_zero_id: bool = False  # True: city 0 is rejected as in legacy inputs
    
    # Tree precondition
    strict_tree: bool = False  # True: raise on cycles, False: warn and compute
    
    # Diagnostics
    track_evaluations: bool = True  # Count resolve evaluations per directed edge
    
    def __post_init__(self):
        """Validate arithmetic width."""
        if self.word_bits <= 0:
            raise ValueError(f"word_bits must be positive, got {self.word_bits}")
    
    @property
    def mask(self) -> int:
        """Bit mask applied to every aggregate."""
        return (1 << self.word_bits) - 1
