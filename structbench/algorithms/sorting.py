from abc import abstractmethod

from .algorithm import Algorithm


class Sorting(Algorithm):
    """Base class for strategies sorting a list in place into non-decreasing order."""

    @abstractmethod
    def sort(self, numbers: list[int]) -> list[int]:
        pass

    def validate_numbers(self, numbers) -> bool:
        """In-place sorts need a list; tuples and ranges are rejected."""
        return isinstance(numbers, list) and super().validate_numbers(numbers)

    def execute(self, numbers: list[int]) -> list[int]:
        return self.sort(numbers)


class BubbleSort(Sorting):
    """
    Bubble Sort Implementation

    Repeated passes over the list swapping adjacent out-of-order pairs. Each
    pass settles the largest remaining value at the end of the unsorted range,
    so the range shrinks by one per pass. A pass without swaps ends the sort.

    Time Complexity: O(n^2) worst/average case, O(n) on sorted input
    Space Complexity: O(1) - sorts in place
    Stable: yes
    """

    def sort(self, numbers: list[int]) -> list[int]:
        n = len(numbers)
        passes = 0
        swaps = 0

        for i in range(n - 1):
            passes += 1
            swapped = False
            for j in range(n - i - 1):
                if numbers[j] > numbers[j + 1]:
                    numbers[j], numbers[j + 1] = numbers[j + 1], numbers[j]
                    swapped = True
                    swaps += 1
            if not swapped:
                break

        self.additional_info = {"passes": passes, "swaps": swaps}
        return numbers

    def get_algorithm_name(self) -> str:
        return "Bubble sort"


class LibrarySort(Sorting):
    """Built-in list.sort (Timsort): stable, O(n log n) worst case."""

    def sort(self, numbers: list[int]) -> list[int]:
        numbers.sort()
        return numbers

    def get_algorithm_name(self) -> str:
        return "list.sort"
