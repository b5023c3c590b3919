from __future__ import annotations

import random
import secrets

BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
UID_FRAGMENT_LENGTH = 13
MEETING_ID_FRAGMENT_LENGTH = 6
MEETING_ID_FRAGMENT_COUNT = 3
BOOKING_ID_UPPER_BOUND = 10_000


class IdentifierGenerator:
    """Random tokens for bookings and synthetic meeting codes.

    ``random_source`` only needs the ``random.Random`` interface, so tests can
    pass a seeded instance to get reproducible identifiers.
    """

    def __init__(self, random_source: random.Random | None = None) -> None:
        self.random_source = random_source or secrets.SystemRandom()

    def next_uid(self) -> str:
        return self._base36_fragment(UID_FRAGMENT_LENGTH) + self._base36_fragment(
            UID_FRAGMENT_LENGTH
        )

    def next_meeting_id(self) -> str:
        return "-".join(
            self._base36_fragment(MEETING_ID_FRAGMENT_LENGTH)
            for _ in range(MEETING_ID_FRAGMENT_COUNT)
        )

    def next_booking_id(self) -> int:
        return self.random_source.randrange(BOOKING_ID_UPPER_BOUND)

    def _base36_fragment(self, length: int) -> str:
        return "".join(self.random_source.choice(BASE36_ALPHABET) for _ in range(length))
