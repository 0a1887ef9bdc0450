"""Who performs: genres, lineup roles and artists."""

import json

from protean.fields import String, Text

from boxoffice.domain import boxoffice


@boxoffice.aggregate
class Genre:
    name = String(required=True, max_length=100)


@boxoffice.aggregate
class Role:
    """Capacity in which an artist appears on a lineup (Headliner, Opener...)."""

    name = String(required=True, max_length=100)


@boxoffice.aggregate
class Artist:
    name = String(required=True, max_length=255)
    genres = Text()  # JSON array of genre ids

    @classmethod
    def create(cls, id, name, genre_ids=()):
        return cls(id=id, name=name, genres=json.dumps(list(genre_ids)))

    @property
    def genre_ids(self) -> frozenset[str]:
        return frozenset(json.loads(self.genres)) if self.genres else frozenset()
