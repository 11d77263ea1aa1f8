import sys
import unittest
from pathlib import Path


def run_tests():
    package_dir = Path(__file__).resolve().parent
    suite_dir = package_dir / 't'
    if not suite_dir.is_dir():
        print("Error: Could not find the test suites.")
        print(f"Expected them in {suite_dir}.")
        sys.exit(1)

    # Discover every test_*.py below structural_shapes/t so that the suites
    # are imported as structural_shapes.t.<module>.
    loader = unittest.TestLoader()
    suite = loader.discover(
        start_dir=str(suite_dir), pattern='test_*.py',
        top_level_dir=str(package_dir.parent)
    )

    runner = unittest.TextTestRunner(verbosity=0)
    result = runner.run(suite)

    sys.exit(not result.wasSuccessful())


if __name__ == '__main__':
    if len(sys.argv) > 1 and sys.argv[1] == 'test':
        run_tests()
    else:
        print("Unknown command.")
        print("Usage: python -m structural_shapes test")
