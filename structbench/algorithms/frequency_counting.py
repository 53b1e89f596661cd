from abc import abstractmethod
from typing import Mapping

from sortedcontainers import SortedDict

from ..data_structures.hash_table import IntHashTable
from .algorithm import Algorithm


class FrequencyCounting(Algorithm):
    """Base class for strategies mapping each distinct value to its count."""

    @abstractmethod
    def count_frequencies(self, numbers: list[int]) -> Mapping[int, int]:
        pass

    def execute(self, numbers: list[int]) -> Mapping[int, int]:
        return self.count_frequencies(numbers)


class HashMapFrequencyCounting(FrequencyCounting):
    """
    Frequency counting with a dict.

    No ordering guarantee over keys beyond insertion order.

    Time Complexity: O(n) expected
    """

    def count_frequencies(self, numbers: list[int]) -> dict[int, int]:
        frequency_map: dict[int, int] = {}
        for num in numbers:
            frequency_map[num] = frequency_map.get(num, 0) + 1
        return frequency_map

    def get_algorithm_name(self) -> str:
        return "Frequency counting using dict"


class OrderedMapFrequencyCounting(FrequencyCounting):
    """
    Frequency counting with a SortedDict. Keys iterate in ascending order.

    Time Complexity: O(n log n)
    """

    def count_frequencies(self, numbers: list[int]) -> SortedDict:
        frequency_map = SortedDict()
        for num in numbers:
            frequency_map[num] = frequency_map.get(num, 0) + 1
        return frequency_map

    def get_algorithm_name(self) -> str:
        return "Frequency counting using SortedDict"


class HashTableFrequencyCounting(FrequencyCounting):
    """Frequency counting with the open-addressing IntHashTable."""

    def count_frequencies(self, numbers: list[int]) -> IntHashTable:
        table = IntHashTable()
        for num in numbers:
            table.increment(num)
        self.additional_info = {
            "resizes": table.resize_count,
            "load_factor": table.load_factor,
        }
        return table

    def get_algorithm_name(self) -> str:
        return "Frequency counting using IntHashTable"
