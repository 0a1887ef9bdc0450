"""CatalogIndex: id-keyed lookup tables over the loaded catalogue.

The index is built once per session. Every cross-reference is validated at
build time so that browsing, cart and checkout code can assume referential
integrity. After construction the tables are read-only; the only mutation the
catalogue ever sees is the inventory decrement performed at checkout.
"""

from collections.abc import Iterable

import structlog

from boxoffice.catalog.concert import Concert, ConcertGroup
from boxoffice.catalog.locks import InventoryLocks
from boxoffice.catalog.performers import Artist, Genre, Role
from boxoffice.catalog.ticket_category import TicketCategory
from boxoffice.catalog.venues import Venue
from boxoffice.exceptions import ConfigError, NotFound

logger = structlog.get_logger(__name__)

KINDS = ("genre", "role", "artist", "venue", "group", "concert", "ticket_category")


def _table(kind, entities, problems):
    table = {}
    for entity in entities:
        key = str(entity.id)
        if key in table:
            problems.append(f"duplicate {kind} id {key!r}")
        table[key] = entity
    return table


class CatalogIndex:
    def __init__(self, tables: dict[str, dict]) -> None:
        self._tables = tables
        self._version = 0
        self.locks = InventoryLocks(tables["ticket_category"])

    # -------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------
    @classmethod
    def build(
        cls,
        genres: Iterable[Genre] = (),
        roles: Iterable[Role] = (),
        artists: Iterable[Artist] = (),
        venues: Iterable[Venue] = (),
        groups: Iterable[ConcertGroup] = (),
        concerts: Iterable[Concert] = (),
        ticket_categories: Iterable[TicketCategory] = (),
    ) -> "CatalogIndex":
        """Build the lookup tables and validate every cross-reference.

        Raises:
            ConfigError: listing every duplicate id and unresolved reference.
        """
        problems: list[str] = []
        tables = {
            "genre": _table("genre", genres, problems),
            "role": _table("role", roles, problems),
            "artist": _table("artist", artists, problems),
            "venue": _table("venue", venues, problems),
            "group": _table("group", groups, problems),
            "concert": _table("concert", concerts, problems),
            "ticket_category": _table("ticket_category", ticket_categories, problems),
        }

        def check(kind, ref, owner):
            if ref not in tables[kind]:
                problems.append(f"{owner} references unknown {kind} {ref!r}")

        for artist in tables["artist"].values():
            for genre_id in sorted(artist.genre_ids):
                check("genre", genre_id, f"artist {artist.id!r}")

        for concert in tables["concert"].values():
            owner = f"concert {concert.id!r}"
            check("venue", str(concert.venue_id), owner)
            if concert.group_id:
                check("group", str(concert.group_id), owner)
            for slot in concert.billing:
                check("artist", str(slot.artist_id), owner)
                check("role", str(slot.role_id), owner)
            for category_id in concert.category_ids:
                check("ticket_category", category_id, owner)

        for category in tables["ticket_category"].values():
            check("concert", str(category.concert_id), f"ticket_category {category.id!r}")

        if problems:
            logger.error("Catalog failed integrity checks", problems=problems)
            raise ConfigError(problems)

        logger.info(
            "Catalog index built",
            **{f"{kind}_count": len(table) for kind, table in tables.items()},
        )
        return cls(tables)

    # -------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------
    def by_id(self, kind: str, identifier: str):
        """Return the entity of ``kind`` with ``identifier``.

        Raises:
            NotFound: for an unknown kind or id.
        """
        table = self._tables.get(kind)
        if table is None:
            raise NotFound("kind", kind)
        try:
            return table[str(identifier)]
        except KeyError:
            raise NotFound(kind, str(identifier)) from None

    def category(self, category_id: str) -> TicketCategory:
        return self.by_id("ticket_category", category_id)

    def concerts(self) -> list[Concert]:
        """All concerts, in load order."""
        return list(self._tables["concert"].values())

    def genres(self) -> list[Genre]:
        return list(self._tables["genre"].values())

    def venues(self) -> list[Venue]:
        return list(self._tables["venue"].values())

    def categories_for(self, concert: Concert) -> list[TicketCategory]:
        return [self.category(category_id) for category_id in concert.category_ids]

    def concert_for(self, category: TicketCategory) -> Concert:
        return self.by_id("concert", str(category.concert_id))

    # -------------------------------------------------------------------
    # Versioning
    # -------------------------------------------------------------------
    @property
    def version(self) -> int:
        """Bumped on every inventory change; usable as a cache key."""
        return self._version

    def touch(self) -> None:
        self._version += 1
