"""Itinerary cards in the order the grid displays them.

Image paths are site-relative; use ItineraryEntry.image_url() to
prefix the deployment base path.
"""

from __future__ import annotations

from typing import Tuple

from ..domain.models import ItineraryEntry

ITINERARY: Tuple[ItineraryEntry, ...] = (
    ItineraryEntry(
        id="taiwan",
        title="Taiwan",
        description=(
            "Mountain hikes, old mining towns, and dramatic coastline"
            "—Yangmingshan, Jiufen, Jinguashi, and Yehliu."
        ),
        dates="May 2nd - May 6th",
        image="/images/taiwan.jpg",
        column_span=6,
    ),
    ItineraryEntry(
        id="yogyakarta",
        title="Yogyakarta & Kuala Lumpur",
        description="Urban Asia meets Javanese culture—food, temples, art.",
        dates="May 11th - May 15th",
        image="/images/yogyakarta.jpg",
        column_span=6,
        is_tall=True,
    ),
    ItineraryEntry(
        id="komodo",
        title="Komodo National Park",
        description=(
            "Luxury boat journey to pink beaches, island hikes, "
            "and Komodo dragons in the wild."
        ),
        dates="May 17th - May 20th",
        image="/images/komodo.jpg",
        column_span=10,
        is_wide=True,
    ),
    ItineraryEntry(
        id="kinabatangan",
        title="Kinabatangan Safari",
        description=(
            "River safaris through dense rainforest to spot orangutans, "
            "proboscis monkeys, birds, and crocodiles."
        ),
        dates="May 7th - May 10th",
        image="/images/kinabatangan.jpg",
        column_span=4,
        is_tall=True,
    ),
    ItineraryEntry(
        id="bromo",
        title="Mount Bromo",
        description="Sunrise hike across an active volcano",
        dates="May 15th - May 16th",
        image="/images/bromo.jpg",
        column_span=4,
    ),
    ItineraryEntry(
        id="bali",
        title="Bali",
        description="Deliberate downtime by the sea—runs, yoga, cafés.",
        dates="May 20th - May 25th",
        image="/images/bali.jpg",
        column_span=6,
    ),
    ItineraryEntry(
        id="summary",
        title="That's all.",
        description=(
            "Rest of the time in north India with family. "
            "Back in London, June 8th."
        ),
        dates="",
        image="",
        column_span=4,
        is_summary=True,
    ),
)
