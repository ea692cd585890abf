"""
Input validation for the Banker's Algorithm Learning Tool.

Checks that a scenario is consistent before the safety algorithm runs.
Violations are reported through a ValidationResult, never raised.
"""

import numbers
from typing import List

from models.process import Process
from models.result import ValidationResult


def validate_input(
    num_processes: int,
    num_resources: int,
    processes: List[Process],
    available: List[int]
) -> ValidationResult:
    """
    Validate a scenario, stopping at the first violation.

    Checks (in order):
    1. Counts and vector lengths match num_resources / num_processes
    2. Process identifiers are unique
    3. All allocation, max and available entries are non-negative integers
    4. Allocation <= Max for every process and resource type

    An empty process list is accepted (trivially safe).

    Args:
        num_processes: Number of processes the caller expects
        num_resources: Number of resource types
        processes: Process records in iteration order
        available: Available units per resource type

    Returns:
        ValidationResult with valid flag and first error message
    """
    # Check 1: shapes
    if not _is_int(num_resources) or num_resources <= 0:
        return _invalid(f"Number of resource types must be a positive integer (got {num_resources})")

    if num_processes != len(processes):
        return _invalid(
            f"Process count ({num_processes}) does not match "
            f"number of processes provided ({len(processes)})"
        )

    if len(available) != num_resources:
        return _invalid(
            f"Available vector length ({len(available)}) does not match "
            f"resource count ({num_resources})"
        )

    for process in processes:
        if len(process.allocation) != num_resources:
            return _invalid(
                f"{process.pid}: allocation length ({len(process.allocation)}) "
                f"does not match resource count ({num_resources})"
            )
        if len(process.max_demand) != num_resources:
            return _invalid(
                f"{process.pid}: max length ({len(process.max_demand)}) "
                f"does not match resource count ({num_resources})"
            )

    # Check 2: identifiers
    seen = set()
    for process in processes:
        if process.pid in seen:
            return _invalid(f"Duplicate process id: {process.pid}")
        seen.add(process.pid)

    # Check 3: non-negative integers
    for j, value in enumerate(available):
        if not _is_non_negative_int(value):
            return _invalid(f"Available R{j} must be a non-negative integer (got {value})")

    for process in processes:
        for j, value in enumerate(process.allocation):
            if not _is_non_negative_int(value):
                return _invalid(
                    f"{process.pid}: allocation R{j} must be a non-negative integer (got {value})"
                )
        for j, value in enumerate(process.max_demand):
            if not _is_non_negative_int(value):
                return _invalid(
                    f"{process.pid}: max R{j} must be a non-negative integer (got {value})"
                )

    # Check 4: Allocation <= Max (Need must not be negative)
    for process in processes:
        for j, (alloc, max_d) in enumerate(zip(process.allocation, process.max_demand)):
            if alloc > max_d:
                return _invalid(
                    f"{process.pid}: allocation R{j} ({alloc}) exceeds max R{j} ({max_d})"
                )

    return ValidationResult(valid=True)


def _invalid(message: str) -> ValidationResult:
    return ValidationResult(valid=False, error=message)


def _is_int(value) -> bool:
    # bool is an Integral subclass but not a resource count
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_non_negative_int(value) -> bool:
    return _is_int(value) and value >= 0
