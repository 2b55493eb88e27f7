from typing import Any, Dict, Iterable, Iterator, List

from faker import Faker

from lazyseq import Randomizer

CITIES = ['ny', 'la', 'chi']


def people(count: int, seed: int = 42) -> List[Dict[str, Any]]:
    """deterministic person records for tests"""
    fake = Faker()
    fake.seed_instance(seed)
    return [
        {
            'id': i,
            'name': fake.first_name(),
            'age': fake.random_int(min=18, max=65),
            'city': fake.random_element(CITIES),
        }
        for i in range(count)
    ]


def words(count: int, seed: int = 7) -> List[str]:
    fake = Faker()
    fake.seed_instance(seed)
    return fake.words(nb=count)


class TrackedSource:
    """
    restartable iterable that records, per cursor, how many elements were
    pulled and whether the cursor was released.
    """

    def __init__(self, items: Iterable[Any]):
        self.items = list(items)
        self.opened = 0
        self.closed = 0
        self.pulled = 0

    def __iter__(self) -> Iterator[Any]:
        def cursor():
            self.opened += 1
            try:
                for item in self.items:
                    self.pulled += 1
                    yield item
            finally:
                self.closed += 1
        return cursor()

    @property
    def all_released(self) -> bool:
        return self.opened == self.closed


class ScriptedRandomizer(Randomizer):
    """replays a fixed list of draws, wrapping each into range"""

    def __init__(self, draws: Iterable[int]):
        self.draws = list(draws)
        self.bounds: List[int] = []
        self._position = 0

    def next(self, bound_exclusive: int) -> int:
        self.bounds.append(bound_exclusive)
        value = self.draws[self._position % len(self.draws)]
        self._position += 1
        return value % bound_exclusive
