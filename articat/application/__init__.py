"""Application layer: the Catalog API and its wiring."""

from articat.application.catalog import Catalog
from articat.application.di import create_container

__all__ = ["Catalog", "create_container"]
