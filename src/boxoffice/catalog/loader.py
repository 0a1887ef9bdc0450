"""Turn raw catalogue records (seed dict or JSON file) into an indexed catalogue."""

import json
import os
from datetime import datetime
from pathlib import Path

import structlog

from boxoffice.catalog.concert import Concert, ConcertGroup
from boxoffice.catalog.index import CatalogIndex
from boxoffice.catalog.performers import Artist, Genre, Role
from boxoffice.catalog.seed import seed_data
from boxoffice.catalog.ticket_category import TicketCategory
from boxoffice.catalog.venues import Venue
from boxoffice.exceptions import ConfigError, ValidationError

logger = structlog.get_logger(__name__)

CATALOG_FILE_ENV = "BOXOFFICE_CATALOG_FILE"


def _concert(record):
    date = record.get("date")
    return Concert.create(
        id=record["id"],
        title=record["title"],
        date=datetime.fromisoformat(date) if date else None,
        venue_id=record["venueId"],
        group_id=record.get("groupId"),
        lineup=[(slot["artistId"], slot["roleId"]) for slot in record.get("lineup", [])],
        ticket_category_ids=record.get("ticketCategoryIds", []),
    )


def _ticket_category(record):
    return TicketCategory(
        id=record["id"],
        concert_id=record["concertId"],
        name=record["name"],
        price=record["price"],
        inventory=record["inventory"],
        row=record.get("row"),
    )


def load_catalog(data: dict) -> CatalogIndex:
    """Build a CatalogIndex from raw records.

    Malformed records (missing keys, negative prices or inventory, bad dates)
    are reported as ConfigError, the same as dangling references.
    """
    try:
        entities = {
            "genres": [Genre(id=g["id"], name=g["name"]) for g in data.get("genres", [])],
            "roles": [Role(id=r["id"], name=r["name"]) for r in data.get("roles", [])],
            "artists": [
                Artist.create(id=a["id"], name=a["name"], genre_ids=a.get("genres", []))
                for a in data.get("artists", [])
            ],
            "venues": [
                Venue(id=v["id"], name=v["name"], city=v.get("city"), capacity=v.get("capacity", 0))
                for v in data.get("venues", [])
            ],
            "groups": [ConcertGroup(id=g["id"], name=g["name"]) for g in data.get("groups", [])],
            "concerts": [_concert(c) for c in data.get("concerts", [])],
            "ticket_categories": [_ticket_category(t) for t in data.get("ticketCategories", [])],
        }
    except KeyError as exc:
        raise ConfigError([f"missing field {exc.args[0]!r}"]) from exc
    except (ValidationError, ValueError) as exc:
        raise ConfigError([f"malformed record: {exc}"]) from exc

    return CatalogIndex.build(**entities)


def load_catalog_file(path: str | os.PathLike) -> CatalogIndex:
    file_path = Path(path)
    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError([f"cannot read catalog file {str(file_path)!r}: {exc}"]) from exc

    logger.info("Loading catalog file", path=str(file_path))
    return load_catalog(data)


def default_catalog() -> CatalogIndex:
    """The catalogue named by ``BOXOFFICE_CATALOG_FILE``, or the built-in seed."""
    path = os.getenv(CATALOG_FILE_ENV)
    if path:
        return load_catalog_file(path)
    return load_catalog(seed_data())
