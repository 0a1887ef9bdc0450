"""Concert card: the listing read model shown for each concert.

Resolves every reference a concert holds (venue, series, lineup artists and
roles, ticket categories) into plain values ready for display.
"""

from boxoffice.catalog.concert import Concert
from boxoffice.catalog.index import CatalogIndex

STANDALONE = "Standalone"
HEADLINER = "Headliner"


def lineup_entries(concert: Concert, index: CatalogIndex) -> list[dict]:
    entries = []
    for slot in concert.billing:
        artist = index.by_id("artist", str(slot.artist_id))
        role = index.by_id("role", str(slot.role_id))
        entries.append(
            {
                "artist_id": str(artist.id),
                "artist": artist.name,
                "role": role.name,
                "headliner": role.name == HEADLINER,
            }
        )
    return entries


def concert_card(concert: Concert, index: CatalogIndex) -> dict:
    venue = index.by_id("venue", str(concert.venue_id))
    group = index.by_id("group", str(concert.group_id)) if concert.group_id else None

    return {
        "concert_id": str(concert.id),
        "title": concert.title,
        "date": concert.date.isoformat() if concert.date else None,
        "venue": venue.name,
        "city": venue.city,
        "group": group.name if group else STANDALONE,
        "lineup": lineup_entries(concert, index),
        "ticket_categories": [
            {
                "category_id": str(category.id),
                "name": category.name,
                "price": category.price,
                "inventory": category.inventory,
                "sold_out": category.sold_out,
            }
            for category in index.categories_for(concert)
        ],
    }
