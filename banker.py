#!/usr/bin/env python3
"""
Banker's Algorithm Learning Tool
Main entry point for the safety checker.

Educational tool for checking whether a resource-allocation state is safe
under deadlock-avoidance rules.
"""

import argparse
import sys
from typing import Optional, Tuple, List

from models.scenario import Scenario
from models.result import AlgorithmResult, ValidationResult
from utils.scenario_loader import load_scenario, sample_scenario, ScenarioLoadError
from utils.logger import SafetyLogger
from algorithms.need import calculate_need
from algorithms.validation import validate_input
from algorithms.safety import run_safety_algorithm, verify_safe_sequence
from analysis.quiz import grade_guess, parse_guess


def run_safety_check(
    scenario: Scenario,
    logger: SafetyLogger
) -> Tuple[ValidationResult, Optional[AlgorithmResult]]:
    """
    Run one validate -> derive need -> safety check chain.

    Step Ordering:
    1. Validate input (abort on first violation)
    2. Derive Need = Max - Allocation for every process
    3. Run Banker's safety algorithm
    4. Replay the safe sequence as a sanity check

    Args:
        scenario: Scenario to check (not modified)
        logger: Logger instance

    Returns:
        Tuple of (validation result, algorithm result or None if invalid)
    """
    validation = validate_input(
        scenario.num_processes,
        scenario.num_resources,
        scenario.processes,
        scenario.available
    )
    logger.log_validation(validation)
    if not validation.valid:
        return validation, None

    if scenario.num_processes == 0:
        logger.log("No processes defined - state is trivially safe", "warning")

    processes = calculate_need(scenario.processes)
    if logger.verbose:
        logger.log_scenario(Scenario(
            processes=processes,
            available=scenario.available,
            num_resources=scenario.num_resources
        ).display())

    result = run_safety_algorithm(processes, scenario.available, scenario.num_resources)

    logger.log(f"\n{'-'*60}")
    logger.log("SAFETY ALGORITHM TRACE")
    logger.log(f"{'-'*60}")
    for step in result.steps:
        logger.log_step(step)

    # SANITY CHECK: the reported sequence must replay cleanly
    if result.is_safe and not verify_safe_sequence(processes, scenario.available, result.safe_sequence):
        error_msg = f"INVARIANT VIOLATION: safe sequence {result.safe_sequence} does not replay"
        logger.log(error_msg, "error")
        raise RuntimeError(error_msg)

    return validation, result


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the safety checker."""
    parser = argparse.ArgumentParser(
        description="Banker's Algorithm - deadlock avoidance safety checker"
    )
    parser.add_argument(
        '--scenario',
        type=str,
        default=None,
        help='Path to scenario JSON file (default: built-in textbook example)'
    )
    parser.add_argument(
        '--guess',
        type=str,
        default=None,
        help="Quiz mode: your answer before the result is shown ('safe' or 'unsafe')"
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging (scenario matrices)'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Only print the verdict'
    )
    parser.add_argument(
        '--log-file',
        type=str,
        default=None,
        help='Also write the log to this file'
    )

    args = parser.parse_args(argv)

    # Validate arguments
    if args.verbose and args.quiet:
        parser.error('--verbose and --quiet are mutually exclusive')

    guess = None
    if args.guess is not None:
        try:
            guess = parse_guess(args.guess)
        except ValueError as e:
            parser.error(str(e))

    logger = SafetyLogger(verbose=args.verbose, log_file=args.log_file, quiet=args.quiet)

    try:
        # Load scenario
        try:
            scenario = load_scenario(args.scenario) if args.scenario else sample_scenario()
        except ScenarioLoadError as e:
            logger.log(f"Failed to load scenario: {e}", "error")
            return 1

        logger.log(f"\n{'='*60}")
        logger.log("BANKER'S ALGORITHM SAFETY CHECK")
        logger.log(f"Scenario: {args.scenario or 'built-in sample'}")
        if scenario.description:
            logger.log(scenario.description)
        logger.log(f"Processes: {scenario.num_processes}, Resource types: {scenario.num_resources}")
        logger.log(f"{'='*60}")

        validation, result = run_safety_check(scenario, logger)
        if not validation.valid:
            return 1

        logger.log_verdict(result)
        if args.quiet:
            print("SAFE" if result.is_safe else "UNSAFE")

        if guess is not None:
            outcome = grade_guess(result, guess)
            logger.log(f"\nYour answer: {'SAFE' if guess else 'UNSAFE'}")
            logger.log(outcome.feedback)

        return 0
    finally:
        logger.close()


if __name__ == '__main__':
    sys.exit(main())
