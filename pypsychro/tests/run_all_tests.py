#!/usr/bin/env python3
"""
Master test runner for pyPsychro validation suite.
Run from project root: python3 pypsychro/tests/run_all_tests.py
Or with pytest:        python3 -m pytest pypsychro/tests/ -v
"""

import sys
import os

import pytest

# Ensure project root is on path for pypsychro imports
project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.insert(0, project_root)


def main():
    print("=" * 70)
    print("pyPsychro VALIDATION TEST SUITE")
    print("=" * 70)

    tests_dir = os.path.dirname(os.path.abspath(__file__))

    test_modules = [
        ('test_water.py', 'Water Module'),
        ('test_virial.py', 'Virial Module'),
        ('test_zfactor.py', 'Z-Factor Module'),
        ('test_efactor.py', 'Enhancement Factor Module'),
        ('test_air.py', 'Air Module'),
    ]

    failed_modules = []
    for filename, display_name in test_modules:
        print(f"\n--- {display_name} ---")
        code = pytest.main([os.path.join(tests_dir, filename), '-q'])
        if code != 0:
            failed_modules.append(display_name)

    print(f"\n{'=' * 70}")
    if failed_modules:
        print("Failed modules:")
        for name in failed_modules:
            print(f"  - {name}")
    else:
        print(f"TOTAL: all {len(test_modules)} modules passed")
    print("=" * 70)
    return 1 if failed_modules else 0


if __name__ == '__main__':
    sys.exit(main())
