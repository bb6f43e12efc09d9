from typing import Iterator, List, Optional

from common.config import REPOSITORY_NAMES


class NameRepository:
    """
    A fixed, ordered collection of names. Every call to iter() starts a fresh traversal.
    """

    def __init__(self, names: Optional[List[str]] = None):
        self._names: tuple = tuple(REPOSITORY_NAMES if names is None else names)

    def __iter__(self) -> Iterator[str]:
        return self._name_generator()

    def __len__(self) -> int:
        return len(self._names)

    def _name_generator(self) -> Iterator[str]:
        """
        Yields the names in insertion order.
        :return: A forward-only cursor over the names.
        """
        for name in self._names:
            yield name
