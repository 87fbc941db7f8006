import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from modesort.generators.dataset_generator import DatasetGenerator
from modesort.sorters.mode_isolating_sort import find_mode


class TestDatasetGenerator(unittest.TestCase):

    def test_size(self):
        self.assertEqual(len(DatasetGenerator(100, seed=1).generate()), 100)

    def test_empty(self):
        self.assertEqual(DatasetGenerator(0, seed=1).generate(), [])

    def test_same_seed_same_data(self):
        a = DatasetGenerator(200, 0.3, seed=11).generate()
        b = DatasetGenerator(200, 0.3, seed=11).generate()
        self.assertEqual(a, b)

    def test_exact_dominant_count(self):
        gen = DatasetGenerator(200, 0.25, low=-50, high=50, seed=5)
        data = gen.generate()
        self.assertEqual(data.count(gen.dominant_value), 50)

    def test_values_in_range(self):
        gen = DatasetGenerator(500, 0.1, low=-10, high=10, seed=2)
        data = gen.generate()
        self.assertTrue(all(-10 <= x <= 10 for x in data))
        self.assertTrue(all(type(x) is int for x in data))

    def test_high_dominance_is_mode(self):
        gen = DatasetGenerator(300, 0.6, seed=8)
        self.assertEqual(find_mode(gen.generate()), gen.dominant_value)

    def test_full_dominance(self):
        gen = DatasetGenerator(10, 1.0, low=3, high=3, seed=0)
        self.assertEqual(gen.generate(), [3] * 10)

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            DatasetGenerator(-1)
        with self.assertRaises(ValueError):
            DatasetGenerator(10, dominance=1.5)
        with self.assertRaises(ValueError):
            DatasetGenerator(10, low=5, high=1)
        with self.assertRaises(ValueError):
            DatasetGenerator(10, dominance=0.5, low=2, high=2)


if __name__ == "__main__":
    unittest.main()
