import random
import re

from app.services.identifier_generator import IdentifierGenerator
from app.services.meeting_link_provider import SyntheticMeetLinkProvider


def test_uid_is_two_base36_fragments() -> None:
    generator = IdentifierGenerator()

    uid = generator.next_uid()

    assert re.fullmatch(r"[0-9a-z]{26}", uid)


def test_meeting_id_is_three_hyphenated_fragments() -> None:
    generator = IdentifierGenerator()

    meeting_id = generator.next_meeting_id()

    assert re.fullmatch(r"[0-9a-z]{6}-[0-9a-z]{6}-[0-9a-z]{6}", meeting_id)


def test_booking_id_stays_within_range() -> None:
    generator = IdentifierGenerator(random.Random(3))

    booking_ids = [generator.next_booking_id() for _ in range(200)]

    assert all(0 <= booking_id < 10_000 for booking_id in booking_ids)


def test_seeded_random_source_is_reproducible() -> None:
    first = IdentifierGenerator(random.Random(42))
    second = IdentifierGenerator(random.Random(42))

    assert first.next_uid() == second.next_uid()
    assert first.next_meeting_id() == second.next_meeting_id()
    assert first.next_booking_id() == second.next_booking_id()


def test_consecutive_uids_differ() -> None:
    generator = IdentifierGenerator()

    uids = {generator.next_uid() for _ in range(50)}

    assert len(uids) == 50


def test_synthetic_meet_link_uses_configured_base_url() -> None:
    provider = SyntheticMeetLinkProvider(
        IdentifierGenerator(random.Random(1)),
        base_url="https://meet.example.test/",
    )

    meeting_link = provider.create_meeting_link("booking-uid")

    assert re.fullmatch(
        r"https://meet\.example\.test/[0-9a-z]{6}-[0-9a-z]{6}-[0-9a-z]{6}",
        meeting_link,
    )
