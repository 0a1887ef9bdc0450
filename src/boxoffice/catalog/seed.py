"""Built-in demo catalogue.

Shaped like the JSON accepted by ``boxoffice.catalog.loader.load_catalog_file``.
Concert dates are relative to ``now`` so the listing always shows upcoming shows.
"""

from datetime import UTC, datetime, timedelta


def seed_data(now: datetime | None = None) -> dict:
    now = now or datetime.now(UTC)

    def days_ahead(days):
        return (now + timedelta(days=days)).isoformat()

    return {
        "genres": [
            {"id": "g1", "name": "Pop"},
            {"id": "g2", "name": "Rock"},
            {"id": "g3", "name": "Electronic"},
            {"id": "g4", "name": "Classical"},
            {"id": "g5", "name": "Hip-Hop"},
        ],
        "roles": [
            {"id": "r1", "name": "Headliner"},
            {"id": "r2", "name": "Opener"},
            {"id": "r3", "name": "Guest"},
            {"id": "r4", "name": "Conductor"},
        ],
        "artists": [
            {"id": "a1", "name": "Neon Dunes", "genres": ["g2", "g3"]},
            {"id": "a2", "name": "Aurora Vale", "genres": ["g1"]},
            {"id": "a3", "name": "Metro Echo", "genres": ["g3"]},
            {"id": "a4", "name": "Civic Symphony", "genres": ["g4"]},
        ],
        "venues": [
            {"id": "v1", "name": "Harbor Pavilion", "city": "Brooklyn, NY", "capacity": 8500},
            {"id": "v2", "name": "Cedar Hall", "city": "Boston, MA", "capacity": 2200},
            {"id": "v3", "name": "Skyline Bowl", "city": "Chicago, IL", "capacity": 12000},
        ],
        "groups": [
            {"id": "cg1", "name": "Summer Nights Series"},
            {"id": "cg2", "name": "Orchestral Sundays"},
        ],
        "concerts": [
            {
                "id": "c1",
                "title": "Neon Dunes: Live at the Harbor",
                "date": days_ahead(7),
                "venueId": "v1",
                "groupId": "cg1",
                "lineup": [
                    {"artistId": "a1", "roleId": "r1"},
                    {"artistId": "a3", "roleId": "r2"},
                ],
                "ticketCategoryIds": ["tc1", "tc2", "tc3"],
            },
            {
                "id": "c2",
                "title": "Aurora Vale: Moonlight Tour",
                "date": days_ahead(21),
                "venueId": "v3",
                "lineup": [
                    {"artistId": "a2", "roleId": "r1"},
                    {"artistId": "a3", "roleId": "r3"},
                ],
                "ticketCategoryIds": ["tc4", "tc5"],
            },
            {
                "id": "c3",
                "title": "Civic Symphony plays Beethoven 7",
                "date": days_ahead(35),
                "venueId": "v2",
                "groupId": "cg2",
                "lineup": [{"artistId": "a4", "roleId": "r4"}],
                "ticketCategoryIds": ["tc6", "tc7"],
            },
        ],
        "ticketCategories": [
            {"id": "tc1", "concertId": "c1", "name": "VIP Pit", "price": 169, "inventory": 25},
            {"id": "tc2", "concertId": "c1", "name": "Floor GA", "price": 95, "inventory": 260},
            {"id": "tc3", "concertId": "c1", "name": "Balcony", "price": 65, "inventory": 180},
            {"id": "tc4", "concertId": "c2", "name": "Gold", "price": 145, "inventory": 120},
            {"id": "tc5", "concertId": "c2", "name": "Silver", "price": 85, "inventory": 350},
            {"id": "tc6", "concertId": "c3", "name": "Orchestra", "price": 120, "inventory": 200},
            {"id": "tc7", "concertId": "c3", "name": "Mezzanine", "price": 75, "inventory": 180},
        ],
    }
