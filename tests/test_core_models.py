"""
Core Model Validation Tests

Tests Process, Scenario, need derivation and input validation.
"""

import sys
from pathlib import Path

import numpy as np

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from models.process import Process
from models.scenario import Scenario
from algorithms.need import calculate_need
from algorithms.validation import validate_input
from utils.scenario_loader import sample_scenario


def _textbook_processes():
    return sample_scenario().processes


def test_process_model():
    """Test Process need helpers."""
    print("\n" + "="*60)
    print("TEST 1: Process Model")
    print("="*60)

    process = Process(pid="P0", allocation=[0, 1, 0], max_demand=[7, 5, 3])
    print(f"\nCreated: {process}")

    assert process.need == [], "Need should not be set before derivation"
    assert process.compute_need() == [7, 4, 3], "Need = Max - Allocation"

    derived = process.with_need()
    assert derived.need == [7, 4, 3], "Derived copy should carry need"
    assert process.need == [], "Original record must not be modified"
    assert derived.allocation is not process.allocation, "Copy must not alias allocation"
    print("  ✓ with_need() returns an independent copy")

    print("\n✅ Process Model Tests PASSED")


def test_calculate_need():
    """Test need derivation on the textbook scenario."""
    print("\n" + "="*60)
    print("TEST 2: Need Derivation")
    print("="*60)

    processes = _textbook_processes()
    derived = calculate_need(processes)

    expected = {
        "P0": [7, 4, 3],
        "P1": [1, 2, 2],
        "P2": [6, 0, 0],
        "P3": [0, 1, 1],
        "P4": [4, 3, 1],
    }
    for process in derived:
        print(f"  {process.pid}: need={process.need}")
        assert process.need == expected[process.pid], f"{process.pid} need incorrect"
        for j in range(3):
            assert process.need[j] == process.max_demand[j] - process.allocation[j]
            assert process.need[j] >= 0, "Validated input never yields negative need"

    assert [p.pid for p in derived] == ["P0", "P1", "P2", "P3", "P4"], "Order must be preserved"
    assert all(p.need == [] for p in processes), "Input processes must not be mutated"
    assert all(a is not b for a, b in zip(processes, derived)), "New records expected"

    print("\n✅ Need Derivation Tests PASSED")


def test_calculate_need_surfaces_negative_need():
    """Unvalidated allocation > max shows up as a negative need component."""
    derived = calculate_need([Process(pid="PX", allocation=[3, 0], max_demand=[2, 1])])
    assert derived[0].need == [-1, 1]


def test_calculate_need_empty():
    assert calculate_need([]) == []


def test_scenario_matrices():
    """Test Scenario matrix building."""
    print("\n" + "="*60)
    print("TEST 3: Scenario Matrices")
    print("="*60)

    scenario = sample_scenario()
    print(f"  Processes: {scenario.num_processes}")
    print(f"  Resources: {scenario.num_resources}")

    assert scenario.num_processes == 5
    assert scenario.num_resources == 3
    assert scenario.process_ids == ["P0", "P1", "P2", "P3", "P4"]

    alloc_matrix = scenario.allocation_matrix
    assert alloc_matrix.shape == (5, 3), "Should be 5x3"
    assert alloc_matrix[2][0] == 3, "P2 should hold R0[3]"

    need_matrix = scenario.need_matrix
    assert need_matrix[0].tolist() == [7, 4, 3], "P0 need should be correct"
    assert np.array_equal(scenario.available_vector, np.array([3, 3, 2]))
    print("  ✓ Need matrix correct (Max - Allocation)")

    display_output = scenario.display()
    print(display_output)
    assert "Need Matrix" in display_output
    assert "P4:" in display_output

    print("\n✅ Scenario Tests PASSED")


def test_validate_accepts_textbook_scenario():
    processes = _textbook_processes()
    result = validate_input(5, 3, processes, [3, 3, 2])
    assert result.valid, f"Textbook scenario should be valid: {result.error}"
    assert result.error is None


def test_validate_accepts_empty_process_set():
    result = validate_input(0, 3, [], [1, 2, 3])
    assert result.valid, "Empty process set is trivially safe, not invalid"


def test_validate_rejects_allocation_exceeding_max():
    """Allocation > Max must be rejected and reported."""
    print("\n" + "="*60)
    print("TEST 4: Allocation Exceeds Max")
    print("="*60)

    processes = [
        Process(pid="P0", allocation=[0, 1], max_demand=[2, 2]),
        Process(pid="P1", allocation=[3, 0], max_demand=[2, 1]),
    ]
    result = validate_input(2, 2, processes, [1, 1])
    print(f"  Error: {result.error}")

    assert not result.valid, "Should reject allocation > max"
    assert "P1" in result.error, "Error should name the process"
    assert "R0" in result.error, "Error should name the resource type"
    assert "exceeds max" in result.error, "Error should reference the condition"

    print("\n✅ Allocation Validation Tests PASSED")


def test_validate_rejects_available_length_mismatch():
    result = validate_input(1, 3, [Process(pid="P0", allocation=[0, 0, 0], max_demand=[1, 1, 1])], [1, 1])
    assert not result.valid
    assert "Available vector length" in result.error


def test_validate_rejects_allocation_length_mismatch():
    result = validate_input(1, 3, [Process(pid="P0", allocation=[0, 0], max_demand=[1, 1, 1])], [1, 1, 1])
    assert not result.valid
    assert "P0: allocation length" in result.error


def test_validate_rejects_max_length_mismatch():
    result = validate_input(1, 2, [Process(pid="P0", allocation=[0, 0], max_demand=[1, 1, 1])], [1, 1])
    assert not result.valid
    assert "P0: max length" in result.error


def test_validate_rejects_process_count_mismatch():
    result = validate_input(3, 3, _textbook_processes(), [3, 3, 2])
    assert not result.valid
    assert "Process count" in result.error


def test_validate_rejects_non_positive_resource_count():
    result = validate_input(0, 0, [], [])
    assert not result.valid
    assert "positive integer" in result.error


def test_validate_rejects_negative_values():
    """Negative entries in any vector are rejected."""
    cases = [
        ([Process(pid="P0", allocation=[0, 0], max_demand=[1, 1])], [1, -1], "Available R1"),
        ([Process(pid="P0", allocation=[-1, 0], max_demand=[1, 1])], [1, 1], "P0: allocation R0"),
        ([Process(pid="P0", allocation=[0, 0], max_demand=[1, -2])], [1, 1], "P0: max R1"),
    ]
    for processes, available, fragment in cases:
        result = validate_input(1, 2, processes, available)
        assert not result.valid, f"Should reject negative value ({fragment})"
        assert fragment in result.error, f"Unexpected error: {result.error}"
        assert "non-negative integer" in result.error


def test_validate_rejects_non_integers():
    processes = [Process(pid="P0", allocation=[0.5, 0], max_demand=[1, 1])]
    result = validate_input(1, 2, processes, [1, 1])
    assert not result.valid
    assert "non-negative integer" in result.error

    processes = [Process(pid="P0", allocation=[0, 0], max_demand=[1, 1])]
    result = validate_input(1, 2, processes, [True, 1])
    assert not result.valid, "bool is not a resource count"


def test_validate_accepts_numpy_integers():
    processes = [Process(pid="P0", allocation=[np.int64(1), 0], max_demand=[2, np.int32(1)])]
    result = validate_input(1, 2, processes, [np.int64(0), 1])
    assert result.valid, f"numpy integers should be accepted: {result.error}"


def test_validate_rejects_duplicate_ids():
    processes = [
        Process(pid="P0", allocation=[0], max_demand=[1]),
        Process(pid="P0", allocation=[0], max_demand=[1]),
    ]
    result = validate_input(2, 1, processes, [1])
    assert not result.valid
    assert "Duplicate process id: P0" == result.error


def test_validate_reports_first_violation_only():
    """Length mismatch is found before the allocation > max violation."""
    processes = [
        Process(pid="P0", allocation=[5, 0], max_demand=[1, 1]),
        Process(pid="P1", allocation=[0], max_demand=[1, 1]),
    ]
    result = validate_input(2, 2, processes, [1, 1])
    assert not result.valid
    assert "P1: allocation length" in result.error


def main():
    """Run all validation tests."""
    print("\n" + "="*70)
    print(" "*15 + "CORE MODEL VALIDATION TESTS")
    print("="*70)

    try:
        test_process_model()
        test_calculate_need()
        test_calculate_need_surfaces_negative_need()
        test_calculate_need_empty()
        test_scenario_matrices()
        test_validate_accepts_textbook_scenario()
        test_validate_accepts_empty_process_set()
        test_validate_rejects_allocation_exceeding_max()
        test_validate_rejects_available_length_mismatch()
        test_validate_rejects_allocation_length_mismatch()
        test_validate_rejects_max_length_mismatch()
        test_validate_rejects_process_count_mismatch()
        test_validate_rejects_non_positive_resource_count()
        test_validate_rejects_negative_values()
        test_validate_rejects_non_integers()
        test_validate_accepts_numpy_integers()
        test_validate_rejects_duplicate_ids()
        test_validate_reports_first_violation_only()

        print("\n" + "="*70)
        print("\n🎉 ALL CORE MODEL TESTS PASSED")
        print("="*70 + "\n")
        return 0

    except AssertionError as e:
        print(f"\n❌ TEST FAILED: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
