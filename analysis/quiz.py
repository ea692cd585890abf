"""
Quiz grading for the Banker's Algorithm Learning Tool.

Before the algorithm result is revealed the learner guesses whether the
system is safe; this module compares the guess with the verdict.
"""

from dataclasses import dataclass

from models.result import AlgorithmResult


@dataclass
class QuizOutcome:
    """
    Graded answer to "Is this system in a safe state?".

    Attributes:
        correct: True if the guess matches the verdict
        guess: Learner's answer (True = safe)
        actual: Algorithm verdict (True = safe)
        feedback: Message shown to the learner
    """
    correct: bool
    guess: bool
    actual: bool
    feedback: str


def parse_guess(answer: str) -> bool:
    """
    Convert a textual answer to a boolean guess.

    Args:
        answer: "safe" / "unsafe" (also accepts yes/no, y/n, true/false)

    Returns:
        True for a "safe" answer

    Raises:
        ValueError: If the answer is not recognised
    """
    normalized = answer.strip().lower()
    if normalized in ("safe", "yes", "y", "true"):
        return True
    if normalized in ("unsafe", "no", "n", "false"):
        return False
    raise ValueError(f"Unrecognised answer: {answer!r} (expected 'safe' or 'unsafe')")


def grade_guess(result: AlgorithmResult, guess: bool) -> QuizOutcome:
    """
    Grade a learner's guess against the algorithm result.

    Args:
        result: Result returned by run_safety_algorithm()
        guess: Learner's answer (True = safe)

    Returns:
        QuizOutcome with feedback text
    """
    correct = guess == result.is_safe
    verdict = "a SAFE" if result.is_safe else "an UNSAFE"
    prefix = "Correct!" if correct else "Not quite."
    feedback = f"{prefix} The system is in {verdict} state."

    if result.is_safe:
        feedback += f" Safe sequence: <{result.sequence_display()}>"
    else:
        feedback += " No ordering lets every process finish."

    return QuizOutcome(correct=correct, guess=guess, actual=result.is_safe, feedback=feedback)
