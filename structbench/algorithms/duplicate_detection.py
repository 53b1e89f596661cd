from abc import abstractmethod

from sortedcontainers import SortedSet

from ..data_structures.hash_table import MIN_SLOTS_POWER, IntHashTable
from .algorithm import Algorithm


class DuplicateDetection(Algorithm):
    """Base class for strategies deciding whether any value repeats."""

    @abstractmethod
    def has_duplicates(self, numbers: list[int]) -> bool:
        pass

    def execute(self, numbers: list[int]) -> bool:
        return self.has_duplicates(numbers)


class PairwiseDuplicateDetection(DuplicateDetection):
    """
    Pairwise duplicate check over a plain list.

    Compares every pair (i, j) with i < j and stops at the first match.

    Time Complexity: O(n^2) worst case (no duplicates)
    Space Complexity: O(1)
    """

    def has_duplicates(self, numbers: list[int]) -> bool:
        n = len(numbers)
        for i in range(n):
            value = numbers[i]
            for j in range(i + 1, n):
                if value == numbers[j]:
                    return True
        return False

    def get_algorithm_name(self) -> str:
        return "Duplicate check using list"


class SetDuplicateDetection(DuplicateDetection):
    """
    Duplicate check through insertion into a hash set.

    Time Complexity: O(n) expected
    Space Complexity: O(n)
    """

    def has_duplicates(self, numbers: list[int]) -> bool:
        seen = set()
        for num in numbers:
            if num in seen:
                return True
            seen.add(num)
        return False

    def get_algorithm_name(self) -> str:
        return "Duplicate check using set"


class HashTableDuplicateDetection(DuplicateDetection):
    """Duplicate check through the open-addressing IntHashTable."""

    def __init__(self, num_slots_power: int = MIN_SLOTS_POWER):
        super().__init__()
        if num_slots_power < MIN_SLOTS_POWER:
            raise ValueError(f"num_slots_power must be >= {MIN_SLOTS_POWER}")
        self.num_slots_power = num_slots_power

    def has_duplicates(self, numbers: list[int]) -> bool:
        table = IntHashTable(num_slots_power=self.num_slots_power)
        for num in numbers:
            if not table.add(num):
                return True
        return False

    def get_algorithm_name(self) -> str:
        return "Duplicate check using IntHashTable"


class SortedSetDuplicateDetection(DuplicateDetection):
    """
    Duplicate check through an ordered container.

    Time Complexity: O(n log n)
    """

    def has_duplicates(self, numbers: list[int]) -> bool:
        seen = SortedSet()
        for num in numbers:
            if num in seen:
                return True
            seen.add(num)
        return False

    def get_algorithm_name(self) -> str:
        return "Duplicate check using SortedSet"
