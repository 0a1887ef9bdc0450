"""Concert filtering.

``evaluate`` is a pure function of the concerts, the query and the catalogue:
no caching and no side effects, so callers simply recompute it whenever the
search box or a dropdown changes. The result keeps the input order.
"""

from protean.fields import Text

from boxoffice.catalog.concert import Concert
from boxoffice.catalog.index import CatalogIndex
from boxoffice.domain import boxoffice

ALL = "all"


@boxoffice.value_object
class ConcertQuery:
    """Caller-held filter state. Empty text and ``"all"`` select everything."""

    text = Text()
    genre_id = Text(default=ALL)
    venue_id = Text(default=ALL)


def _selects_all(value) -> bool:
    return not value or value == ALL


def matches_text(concert: Concert, text: str | None, index: CatalogIndex) -> bool:
    """Case-insensitive substring match against title + venue name."""
    if not text:
        return True
    venue = index.by_id("venue", str(concert.venue_id))
    haystack = f"{concert.title} {venue.name}".lower()
    return text.lower() in haystack


def matches_genre(concert: Concert, genre_id: str | None, index: CatalogIndex) -> bool:
    """True when any lineup artist carries the genre."""
    if _selects_all(genre_id):
        return True
    return any(genre_id in index.by_id("artist", str(slot.artist_id)).genre_ids for slot in concert.lineup)


def matches_venue(concert: Concert, venue_id: str | None) -> bool:
    if _selects_all(venue_id):
        return True
    return str(concert.venue_id) == venue_id


def evaluate(concerts, query: ConcertQuery | None, index: CatalogIndex) -> list[Concert]:
    if query is None:
        return list(concerts)

    return [
        concert
        for concert in concerts
        if matches_text(concert, query.text, index)
        and matches_genre(concert, query.genre_id, index)
        and matches_venue(concert, query.venue_id)
    ]
