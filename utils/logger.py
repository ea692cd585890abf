"""
Logger utility for the Banker's Algorithm Learning Tool.

Provides step-by-step logging of a safety check with verbosity levels.
"""

from typing import Optional
from datetime import datetime

from models.result import AlgorithmResult, Step, ValidationResult
from analysis.trace import format_step, format_result


class SafetyLogger:
    """
    Logger for validation results, safety algorithm steps and verdicts.

    Format: "Step X: PY | Work [...] | Need [...] | CAN FINISH -> Work [...]"
    """

    def __init__(self, verbose: bool = False, log_file: Optional[str] = None, quiet: bool = False):
        """
        Initialize logger.

        Args:
            verbose: Enable verbose (debug) output
            log_file: Optional file path for logging
            quiet: Suppress info-level console output (errors still shown)
        """
        self.verbose = verbose
        self.quiet = quiet
        self.log_file = log_file
        self.file_handle = None

        if self.log_file:
            self.file_handle = open(self.log_file, 'w', encoding='utf-8')
            self._write_header()

    def _write_header(self) -> None:
        """Write log file header."""
        if self.file_handle:
            timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            self.file_handle.write(f"Safety Check Log - {timestamp}\n")
            self.file_handle.write("="*60 + "\n\n")

    def log(self, message: str, level: str = "info") -> None:
        """
        Log a message.

        Args:
            message: Message to log
            level: Log level (info, debug, warning, error)
        """
        if level == "debug" and not self.verbose:
            return

        formatted = self._format_message(message, level)

        # Console output
        if not self.quiet or level in ("warning", "error"):
            print(formatted)

        # File output
        if self.file_handle:
            self.file_handle.write(formatted + "\n")
            self.file_handle.flush()

    def _format_message(self, message: str, level: str) -> str:
        """Format message with level prefix."""
        if level == "error":
            return f"[ERROR] {message}"
        elif level == "warning":
            return f"[WARNING] {message}"
        elif level == "debug":
            return f"[DEBUG] {message}"
        else:
            return message

    def log_validation(self, result: ValidationResult) -> None:
        """
        Log the outcome of input validation.

        Args:
            result: Result returned by validate_input()
        """
        if result.valid:
            self.log("Input validation passed", "debug")
        else:
            self.log(f"Invalid input: {result.error}", "error")

    def log_step(self, step: Step) -> None:
        """
        Log a single safety algorithm step.

        Args:
            step: Trace step to log
        """
        self.log(format_step(step))
        if step.message:
            self.log(f"  {step.message}", "debug")

    def log_verdict(self, result: AlgorithmResult) -> None:
        """
        Log the final verdict block of a safety check.

        Args:
            result: Result returned by run_safety_algorithm()
        """
        self.log(format_result(result))

    def log_scenario(self, state_str: str) -> None:
        """
        Log scenario matrices.

        Args:
            state_str: Formatted scenario (Scenario.display())
        """
        if self.verbose:
            self.log(f"Scenario:\n{state_str}", "debug")

    def close(self) -> None:
        """Close log file if open."""
        if self.file_handle:
            self.file_handle.close()
            self.file_handle = None

    def __del__(self):
        """Cleanup on destruction."""
        self.close()
