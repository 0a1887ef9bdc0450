"""Venue aggregate."""

from protean.fields import Integer, String

from boxoffice.domain import boxoffice


@boxoffice.aggregate
class Venue:
    name = String(required=True, max_length=255)
    city = String(max_length=100)
    capacity = Integer(default=0, min_value=0)
