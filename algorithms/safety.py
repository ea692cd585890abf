"""
Banker's Algorithm safety check for the Banker's Algorithm Learning Tool.

Determines whether a scenario is in a safe state and records every
Need <= Work decision so the run can be replayed step by step.
"""

import numpy as np
from typing import List, Optional

from models.process import Process
from models.result import AlgorithmResult, Step


def run_safety_algorithm(
    processes: List[Process],
    available: List[int],
    num_resources: int
) -> AlgorithmResult:
    """
    Check if the scenario is in a safe state using Banker's Algorithm.

    Algorithm:
    1. Initialize Work = Available, Finish = [False] * num_processes
    2. Scan unfinished processes in the given order; record a Step for each
       Need[i] <= Work test
    3. On the first process where the test holds: Finish[i] = True,
       Work += Allocation[i], add its id to the sequence and restart the
       scan from the first unfinished process
    4. Repeat until all processes finish (SAFE) or a full pass finds no
       candidate (UNSAFE)

    Ties are broken by iteration order only, so the reported sequence and
    trace are fully determined by the order of `processes`.

    Time Complexity: O(P²×R)

    Vectors are numpy int arrays (int64 on common platforms); an entry
    outside that range raises OverflowError when the arrays are built.

    Args:
        processes: Processes in iteration order (need is recomputed from
                   max_demand - allocation, any stored need is ignored)
        available: Available units per resource type (not modified)
        num_resources: Number of resource types

    Returns:
        AlgorithmResult with verdict, full step trace and safe sequence

    References:
        Silberschatz, A., Galvin, P. B., & Gagne, G. (2018).
        Operating System Concepts (10th ed.). Chapter 7.5: Deadlock Avoidance.
    """
    num_processes = len(processes)

    # Step 1: Initialize Work and Finish vectors
    # Work = copy of Available (prevents modification of original)
    work = np.array(available, dtype=int).reshape(num_resources).copy()
    finish = np.zeros(num_processes, dtype=bool)
    allocation = _to_matrix([p.allocation for p in processes], num_resources)
    # Need is always recomputed; a need field on the input is never trusted
    need = _to_matrix([p.compute_need() for p in processes], num_resources)

    steps: List[Step] = []
    safe_sequence: List[str] = []

    # Step 2-4: Find processes that can finish with available resources
    made_progress = True
    while made_progress and not finish.all():
        made_progress = False

        for i, process in enumerate(processes):
            if finish[i]:
                continue

            work_before = work.tolist()
            can_allocate = bool(np.all(need[i] <= work))
            step = Step(
                step_number=len(steps) + 1,
                pid=process.pid,
                work=work_before,
                need=need[i].tolist(),
                can_allocate=can_allocate
            )
            steps.append(step)

            if not can_allocate:
                step.message = (
                    f"Need {step.need} > Work {work_before}: {process.pid} must wait"
                )
                continue

            # Process can finish: add its allocation back to work
            work += allocation[i]
            finish[i] = True
            safe_sequence.append(process.pid)
            step.new_work = work.tolist()
            step.message = (
                f"Need {step.need} <= Work {work_before}: {process.pid} can finish, "
                f"releasing {allocation[i].tolist()} -> Work {step.new_work}"
            )
            made_progress = True
            break  # Restart search from beginning for determinism

    if finish.all():
        return AlgorithmResult(is_safe=True, steps=steps, safe_sequence=safe_sequence)
    return AlgorithmResult(is_safe=False, steps=steps, safe_sequence=None)


def verify_safe_sequence(
    processes: List[Process],
    available: List[int],
    sequence: Optional[List[str]]
) -> bool:
    """
    Replay a sequence and check that it is a valid safe sequence.

    Every process must appear exactly once and, at the point it is
    selected, its Need must fit in the running Work vector.

    Args:
        processes: Processes of the scenario
        available: Available units per resource type
        sequence: Process ids in completion order

    Returns:
        True if the sequence completes every process
    """
    if sequence is None:
        return False

    by_pid = {p.pid: p for p in processes}
    if sorted(sequence) != sorted(by_pid):
        return False

    work = np.array(available, dtype=int).copy()
    for pid in sequence:
        process = by_pid[pid]
        if not np.all(np.array(process.compute_need(), dtype=int) <= work):
            return False
        work += np.array(process.allocation, dtype=int)

    return True


def _to_matrix(rows: List[List[int]], num_resources: int) -> np.ndarray:
    """Build a [P][R] integer matrix; shape is kept for an empty row list."""
    return np.array(rows, dtype=int).reshape(len(rows), num_resources)
