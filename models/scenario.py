"""
Scenario model for the Banker's Algorithm Learning Tool.

Holds one resource-allocation configuration and exposes the matrices and
vectors used by the safety algorithm.
"""

import numpy as np
from typing import List, Optional
from dataclasses import dataclass, field

from models.process import Process


@dataclass
class Scenario:
    """
    A resource-allocation scenario.

    Attributes:
        processes: Processes in iteration order
        available: Currently unallocated units [R]
        num_resources: Number of resource types
        description: Optional free-text description
        allocation_matrix: [P][R] Current resources held by each process
        max_demand_matrix: [P][R] Maximum resource need declared by each process
        need_matrix: [P][R] Computed as Max - Allocation
        available_vector: [R] Free resource instances by type

    Invariant:
        len(available) == num_resources and every process vector has
        num_resources entries (checked by validate_input, not here)

    Matrices use numpy int arrays, so entries beyond the platform integer
    range (int64 on common platforms) raise OverflowError when built.
    """
    processes: List[Process] = field(default_factory=list)
    available: List[int] = field(default_factory=list)
    num_resources: int = 0
    description: str = ""

    # Matrices and vectors (initialized as None, computed on first access)
    _allocation_matrix: Optional[np.ndarray] = field(default=None, init=False, repr=False, compare=False)
    _max_demand_matrix: Optional[np.ndarray] = field(default=None, init=False, repr=False, compare=False)
    _need_matrix: Optional[np.ndarray] = field(default=None, init=False, repr=False, compare=False)
    _available_vector: Optional[np.ndarray] = field(default=None, init=False, repr=False, compare=False)

    @property
    def num_processes(self) -> int:
        """Number of processes in the scenario."""
        return len(self.processes)

    @property
    def process_ids(self) -> List[str]:
        """Process identifiers in iteration order."""
        return [p.pid for p in self.processes]

    @property
    def allocation_matrix(self) -> np.ndarray:
        """Get allocation matrix [P][R]."""
        if self._allocation_matrix is None:
            self._allocation_matrix = self._build_matrix([p.allocation for p in self.processes])
        return self._allocation_matrix

    @property
    def max_demand_matrix(self) -> np.ndarray:
        """Get max demand matrix [P][R]."""
        if self._max_demand_matrix is None:
            self._max_demand_matrix = self._build_matrix([p.max_demand for p in self.processes])
        return self._max_demand_matrix

    @property
    def need_matrix(self) -> np.ndarray:
        """
        Get need matrix [P][R].
        Computed as: Need = Max - Allocation
        """
        if self._need_matrix is None:
            self._need_matrix = self.max_demand_matrix - self.allocation_matrix
        return self._need_matrix

    @property
    def available_vector(self) -> np.ndarray:
        """Get available resources vector [R]."""
        if self._available_vector is None:
            self._available_vector = np.array(self.available, dtype=int).reshape(-1)
        return self._available_vector

    def _build_matrix(self, rows: List[List[int]]) -> np.ndarray:
        """Build a [P][R] integer matrix from per-process rows."""
        matrix = np.zeros((self.num_processes, self.num_resources), dtype=int)
        for i, row in enumerate(rows):
            for j in range(self.num_resources):
                matrix[i][j] = row[j]
        return matrix

    def display(self) -> str:
        """
        Generate readable string representation of the scenario.

        Returns:
            Formatted string showing all matrices and vectors
        """
        output = []
        output.append("\n" + "="*60)
        output.append("SCENARIO")
        output.append("="*60)
        if self.description:
            output.append(self.description)

        output.append("\nAvailable Resources:")
        avail_str = "  ["
        for i in range(self.num_resources):
            avail_str += f"R{i}:{self.available_vector[i]:2}"
            if i < self.num_resources - 1:
                avail_str += ", "
        avail_str += "]"
        output.append(avail_str)

        for title, matrix in (
            ("Allocation Matrix:", self.allocation_matrix),
            ("Max Demand Matrix:", self.max_demand_matrix),
            ("Need Matrix (Max - Allocation):", self.need_matrix),
        ):
            output.append("\n" + title)
            output.append("     " + " ".join([f"R{i:2}" for i in range(self.num_resources)]))
            for i, process in enumerate(self.processes):
                row = f"  {process.pid}: "
                row += " ".join([f"{matrix[i][j]:3}" for j in range(self.num_resources)])
                output.append(row)

        output.append("\n" + "="*60)
        return "\n".join(output)
