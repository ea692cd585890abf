"""
Process model for the Banker's Algorithm Learning Tool.

Represents a process in a resource-allocation scenario with its current
allocation and declared maximum demand.
"""

from dataclasses import dataclass, field, replace
from typing import List


@dataclass
class Process:
    """
    Represents a process in the operating system scenario.

    Attributes:
        pid: Process identifier (unique within a scenario, e.g. "P0")
        allocation: Resource units currently held [R]
        max_demand: Maximum resource units the process may ever request [R]
        need: Remaining units required to reach max_demand [R]
              (derived, empty until calculate_need() runs)
    """
    pid: str
    allocation: List[int]
    max_demand: List[int]
    need: List[int] = field(default_factory=list)

    def compute_need(self) -> List[int]:
        """
        Compute Need = Max - Allocation for this process.

        Returns:
            New list with one need value per resource type
        """
        return [m - a for m, a in zip(self.max_demand, self.allocation)]

    def with_need(self) -> "Process":
        """
        Return a copy of this process with its need vector derived.

        The original record is left untouched.
        """
        return replace(
            self,
            allocation=list(self.allocation),
            max_demand=list(self.max_demand),
            need=self.compute_need()
        )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Process(pid={self.pid}, alloc={self.allocation}, "
            f"max={self.max_demand}, need={self.need})"
        )
