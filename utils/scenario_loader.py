"""
Scenario Loader for the Banker's Algorithm Learning Tool.

Loads JSON scenario files and provides the built-in sample scenario.
Only structural problems are reported here; numeric consistency is left to
validate_input() so its messages reach the user unchanged.
"""

import json
from typing import Dict, List, Any

from models.process import Process
from models.scenario import Scenario


class ScenarioLoadError(Exception):
    """Exception raised when scenario file cannot be loaded or is invalid."""
    pass


# Textbook 5-process, 3-resource configuration (Silberschatz, Chapter 7.5)
SAMPLE_SCENARIO: Dict[str, Any] = {
    'description': "Textbook example: 5 processes, 3 resource types",
    'available': [3, 3, 2],
    'processes': [
        {'id': "P0", 'allocation': [0, 1, 0], 'max': [7, 5, 3]},
        {'id': "P1", 'allocation': [2, 0, 0], 'max': [3, 2, 2]},
        {'id': "P2", 'allocation': [3, 0, 2], 'max': [9, 0, 2]},
        {'id': "P3", 'allocation': [2, 1, 1], 'max': [2, 2, 2]},
        {'id': "P4", 'allocation': [0, 0, 2], 'max': [4, 3, 3]},
    ]
}


def load_scenario(file_path: str) -> Scenario:
    """
    Load scenario from JSON file.

    Args:
        file_path: Path to scenario JSON file

    Returns:
        Scenario with processes in file order

    Raises:
        ScenarioLoadError: If file cannot be loaded or is invalid
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ScenarioLoadError(f"Scenario file not found: {file_path}")
    except json.JSONDecodeError as e:
        raise ScenarioLoadError(f"Invalid JSON in scenario file: {e}")
    except UnicodeDecodeError as e:
        raise ScenarioLoadError(f"Scenario file is not valid UTF-8: {file_path} ({e})")
    except OSError as e:
        raise ScenarioLoadError(f"Cannot read scenario file: {file_path} ({e})")

    return scenario_from_dict(data)


def scenario_from_dict(data: Dict[str, Any]) -> Scenario:
    """
    Build a Scenario from already-parsed scenario data.

    Args:
        data: Dictionary with 'available', 'processes' and optional
              'num_resources' / 'description'

    Returns:
        Scenario object

    Raises:
        ScenarioLoadError: If required fields are missing or malformed
    """
    if not isinstance(data, dict):
        raise ScenarioLoadError("Scenario must be a JSON object")

    # Validate required fields
    if 'available' not in data:
        raise ScenarioLoadError("Scenario missing 'available' field")
    if 'processes' not in data:
        raise ScenarioLoadError("Scenario missing 'processes' field")

    available = _load_vector(data['available'], "'available'")
    num_resources = data.get('num_resources', len(available))

    if not isinstance(data['processes'], list):
        raise ScenarioLoadError("'processes' must be a list")

    processes = [_load_process(proc_data, index) for index, proc_data in enumerate(data['processes'])]

    return Scenario(
        processes=processes,
        available=available,
        num_resources=num_resources,
        description=data.get('description', '')
    )


def sample_scenario() -> Scenario:
    """Return a fresh copy of the built-in textbook scenario."""
    return scenario_from_dict(json.loads(json.dumps(SAMPLE_SCENARIO)))


def _load_process(proc_data: Dict, index: int) -> Process:
    """
    Load a single process from scenario data.

    Args:
        proc_data: Process dictionary from scenario
        index: Position in the process list (used for default id and errors)

    Returns:
        Process object (need not yet derived)
    """
    if not isinstance(proc_data, dict):
        raise ScenarioLoadError(f"Process #{index} must be an object")

    pid = str(proc_data.get('id', f"P{index}"))

    # Validate required fields
    for field in ['allocation', 'max']:
        if field not in proc_data:
            raise ScenarioLoadError(f"Process {pid} missing required field: {field}")

    return Process(
        pid=pid,
        allocation=_load_vector(proc_data['allocation'], f"{pid} 'allocation'"),
        max_demand=_load_vector(proc_data['max'], f"{pid} 'max'")
    )


def _load_vector(values: Any, name: str) -> List[int]:
    """Check that a field holds a list and return a copy of it."""
    if not isinstance(values, list):
        raise ScenarioLoadError(f"{name} must be a list of integers")
    return list(values)


def get_scenario_description(file_path: str) -> str:
    """
    Get description from scenario file without full loading.

    Args:
        file_path: Path to scenario JSON file

    Returns:
        Description string, or empty string if not present
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return ''
    if not isinstance(data, dict):
        return ''
    return data.get('description', '')
