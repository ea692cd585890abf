"""
Trace rendering for the Banker's Algorithm Learning Tool.

Formats safety algorithm steps and verdicts as plain text for display.
"""

from typing import List

from models.result import AlgorithmResult, Step


def format_step(step: Step) -> str:
    """
    Format a single step for display.

    Example:
        Step 2: P1 | Work [3, 3, 2] | Need [1, 2, 2] | CAN FINISH -> Work [5, 3, 2]
    """
    base = f"Step {step.step_number}: {step.pid} | Work {step.work} | Need {step.need}"

    if step.can_allocate:
        return f"{base} | CAN FINISH -> Work {step.new_work}"
    else:
        return f"{base} | MUST WAIT"


def format_trace(steps: List[Step]) -> str:
    """Format all steps for display, one per line."""
    if not steps:
        return "(no steps - no processes to check)"
    return "\n".join(format_step(step) for step in steps)


def format_result(result: AlgorithmResult) -> str:
    """
    Format the verdict block shown after the trace.

    Returns:
        Multi-line summary with verdict, sequence and step count
    """
    lines = ["\n" + "="*60]
    if result.is_safe:
        lines.append("RESULT: SAFE STATE")
        sequence = result.sequence_display() or "(empty)"
        lines.append(f"  Safe sequence: <{sequence}>")
    else:
        lines.append("RESULT: UNSAFE STATE")
        lines.append("  No safe sequence exists - the system may deadlock")
        waiting = _unfinished_pids(result)
        if waiting:
            lines.append(f"  Processes unable to finish: {', '.join(waiting)}")
    lines.append(f"  Steps examined: {len(result.steps)}")
    lines.append("="*60)
    return "\n".join(lines)


def _unfinished_pids(result: AlgorithmResult) -> List[str]:
    """Processes examined but never completed, in first-seen order."""
    finished = {s.pid for s in result.steps if s.can_allocate}
    pending = []
    for step in result.steps:
        if step.pid not in finished and step.pid not in pending:
            pending.append(step.pid)
    return pending
