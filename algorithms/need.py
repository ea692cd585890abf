"""
Need derivation for the Banker's Algorithm Learning Tool.

Need[i][j] = Max[i][j] - Allocation[i][j]
"""

from typing import List

from models.process import Process


def calculate_need(processes: List[Process]) -> List[Process]:
    """
    Derive the need vector of every process.

    Input records are not modified; a new Process is returned for each one,
    in the same order. Assumes validate_input() already accepted the
    scenario, so an allocation above max_demand simply shows up as a
    negative need component.

    Args:
        processes: Processes with allocation and max_demand set

    Returns:
        New list of processes with need = max_demand - allocation
    """
    return [process.with_need() for process in processes]
