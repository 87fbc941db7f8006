import unittest
import sys
import os
import random

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from modesort.sorters.merge_sort import merge_sort, merge_sort_counted


class TestMergeSort(unittest.TestCase):
    """Tests for the merge sort backend."""

    def test_empty_list(self):
        self.assertEqual(merge_sort([]), [])

    def test_single_element(self):
        self.assertEqual(merge_sort([42]), [42])

    def test_sorted_list(self):
        self.assertEqual(merge_sort([1, 2, 3, 4, 5]), [1, 2, 3, 4, 5])

    def test_reverse_sorted(self):
        self.assertEqual(merge_sort([5, 4, 3, 2, 1]), [1, 2, 3, 4, 5])

    def test_duplicates(self):
        self.assertEqual(merge_sort([3, 1, 4, 1, 5, 9, 2, 6]), [1, 1, 2, 3, 4, 5, 6, 9])

    def test_negative_numbers(self):
        self.assertEqual(merge_sort([0, -2, 5, -8, 3, 0, 1]), [-8, -2, 0, 0, 1, 3, 5])

    def test_odd_length_tail_run(self):
        self.assertEqual(merge_sort([9, 8, 7, 6, 5, 4, 3]), [3, 4, 5, 6, 7, 8, 9])

    def test_with_key(self):
        data = ["banana", "apple", "cherry"]
        self.assertEqual(merge_sort(data, key=lambda x: x[0]), ["apple", "banana", "cherry"])

    def test_stability(self):
        """Equal keys keep their original order."""
        data = [(1, 'a'), (2, 'b'), (1, 'c'), (2, 'd'), (1, 'e')]
        result = merge_sort(data, key=lambda x: x[0])
        self.assertEqual(result, [(1, 'a'), (1, 'c'), (1, 'e'), (2, 'b'), (2, 'd')])

    def test_does_not_mutate(self):
        data = [3, 1, 2]
        merge_sort(data)
        self.assertEqual(data, [3, 1, 2])

    def test_range_input(self):
        self.assertEqual(merge_sort(range(5, 0, -1)), [1, 2, 3, 4, 5])

    def test_matches_sorted(self):
        rng = random.Random(42)
        for _ in range(50):
            data = [rng.randint(-100, 100) for _ in range(rng.randint(0, 64))]
            self.assertEqual(merge_sort(data), sorted(data))


class TestMergeSortCounted(unittest.TestCase):

    def test_trivial_inputs_make_no_comparisons(self):
        self.assertEqual(merge_sort_counted([]), ([], 0))
        self.assertEqual(merge_sort_counted([7]), ([7], 0))

    def test_two_elements(self):
        self.assertEqual(merge_sort_counted([2, 1]), ([1, 2], 1))

    def test_sorted_four(self):
        # two pair merges of 1 comparison, then the left run drains after 2
        self.assertEqual(merge_sort_counted([1, 2, 3, 4]), ([1, 2, 3, 4], 4))

    def test_upper_bound(self):
        rng = random.Random(7)
        data = [rng.randint(0, 1000) for _ in range(128)]
        result, comparisons = merge_sort_counted(data)
        self.assertEqual(result, sorted(data))
        # n * log2(n) for n = 128
        self.assertLessEqual(comparisons, 128 * 7)


if __name__ == "__main__":
    unittest.main()
