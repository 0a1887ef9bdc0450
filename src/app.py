"""Box Office FastAPI application.

Serves one storefront session over the catalogue named by
BOXOFFICE_CATALOG_FILE, or the built-in seed catalogue. An invalid catalogue
aborts startup.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from boxoffice.api.application import create_app
from boxoffice.catalog.loader import default_catalog
from boxoffice.domain import boxoffice
from boxoffice.storefront import Storefront

boxoffice.init()

with boxoffice.domain_context():
    storefront = Storefront(default_catalog())

app = create_app(storefront)
