import sys
import os

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from modesort.sorters.mode_isolating_sort import mode_isolating_sort_in_place


def main():
    arr = [4, 2, 4, 3, 4, 1, 4, 6]
    mode_isolating_sort_in_place(arr)
    print(arr)


if __name__ == "__main__":
    main()
