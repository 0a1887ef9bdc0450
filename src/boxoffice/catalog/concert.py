"""Concert aggregate with its ordered lineup, and the series a concert may belong to."""

import json

from protean.fields import DateTime, HasMany, Identifier, Integer, String, Text

from boxoffice.domain import boxoffice


@boxoffice.aggregate
class ConcertGroup:
    """A named series of concerts, e.g. "Summer Nights Series"."""

    name = String(required=True, max_length=255)


@boxoffice.entity(part_of="Concert")
class LineupSlot:
    """One (artist, role) pair on a concert's bill."""

    artist_id = Identifier(required=True)
    role_id = Identifier(required=True)
    position = Integer(required=True, min_value=0)


@boxoffice.aggregate
class Concert:
    title = String(required=True, max_length=255)
    date = DateTime()
    venue_id = Identifier(required=True)
    group_id = Identifier()  # Standalone concerts have no group
    lineup = HasMany(LineupSlot)
    ticket_category_ids = Text()  # JSON array, in display order

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, id, title, venue_id, lineup=(), ticket_category_ids=(), date=None, group_id=None):
        """Build a concert.

        Args:
            lineup: Sequence of ``(artist_id, role_id)`` pairs in billing order.
            ticket_category_ids: Ids of the concert's ticket categories.
        """
        concert = cls(
            id=id,
            title=title,
            date=date,
            venue_id=venue_id,
            group_id=group_id,
            ticket_category_ids=json.dumps(list(ticket_category_ids)),
        )
        for position, (artist_id, role_id) in enumerate(lineup):
            concert.add_lineup(LineupSlot(artist_id=artist_id, role_id=role_id, position=position))
        return concert

    @property
    def category_ids(self) -> tuple[str, ...]:
        return tuple(json.loads(self.ticket_category_ids)) if self.ticket_category_ids else ()

    @property
    def billing(self) -> list[LineupSlot]:
        """Lineup slots in billing order."""
        return sorted(self.lineup, key=lambda slot: slot.position)
