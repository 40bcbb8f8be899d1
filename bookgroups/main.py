# bookgroups/main.py
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .catalog import catalog_router
from .catalog.schemas import Catalog
from .catalog.store import BookRecordSource, load_catalog
from .config import Settings, settings as default_settings


logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    catalog: Optional[Catalog] = None,
    book_source: Optional[BookRecordSource] = None,
) -> FastAPI:
    """Build the application.

    The catalogue is loaded here, before any request is served; a
    ``CatalogLoadError`` propagates to the caller and stops startup.
    """
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if catalog is None:
        catalog = load_catalog(settings.groups_file)
    if book_source is None:
        book_source = BookRecordSource(settings.books_file, settings.title_field)

    app = FastAPI(
        title="Book Groups",
        description=(
            "Read-only lookup of book groups, shelf locations and "
            "typo-tolerant title search."
        ),
        version=__version__,
    )
    app.state.settings = settings
    app.state.catalog = catalog
    app.state.book_source = book_source

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(catalog_router)
    return app


app = create_app()
