"""
Result models for the Banker's Algorithm Learning Tool.

Defines the values returned by the validator and the safety algorithm.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ValidationResult:
    """
    Outcome of input validation.

    Attributes:
        valid: True if the scenario may be passed to the safety algorithm
        error: Description of the first violation found (None when valid)
    """
    valid: bool
    error: Optional[str] = None


@dataclass
class Step:
    """
    One decision point in the safety algorithm trace.

    Attributes:
        step_number: 1-based position in the trace
        pid: Process examined at this step
        work: Work vector at the time of testing [R]
        need: Need vector of the examined process [R]
        can_allocate: True if Need <= Work for every resource type
        new_work: Work vector after the process releases its allocation
                  (None when the process could not finish)
        message: Human-readable explanation of the decision
    """
    step_number: int
    pid: str
    work: List[int]
    need: List[int]
    can_allocate: bool
    new_work: Optional[List[int]] = None
    message: str = ""


@dataclass
class AlgorithmResult:
    """
    Result of a safety algorithm run.

    Attributes:
        is_safe: Verdict (True = safe state)
        steps: Ordered trace of every Need <= Work test performed
        safe_sequence: Process ids in completion order (None if unsafe)
    """
    is_safe: bool
    steps: List[Step] = field(default_factory=list)
    safe_sequence: Optional[List[str]] = None

    def sequence_display(self) -> str:
        """Format the safe sequence as 'P1 -> P3 -> ...'."""
        if not self.safe_sequence:
            return ""
        return " -> ".join(self.safe_sequence)
