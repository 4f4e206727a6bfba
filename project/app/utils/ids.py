# app/utils/ids.py

import time


class ProductIdGenerator:
    """
    Генератор числовых ID товаров.

    ID: миллисекунды с начала эпохи, но строго возрастающие:
    если два товара создаются в одну миллисекунду, второй получает last + 1.
    Уникальность гарантируется в пределах одного процесса.
    """

    def __init__(self, clock=None):
        self._clock = clock or (lambda: int(time.time() * 1000))
        self._last = 0

    def next_id(self) -> int:
        candidate = self._clock()
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return candidate
