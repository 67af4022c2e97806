from typing import Annotated

from fastapi import Depends, Request

from app.core.config import Settings, get_settings
from app.services.catalog import DEFAULT_CATALOG, HashCatalog
from app.services.detection.classifier import HashClassifier
from app.services.reversal import ReversalRegistry


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_catalog() -> HashCatalog:
    """Get the built-in hash family catalog."""
    return DEFAULT_CATALOG


CatalogDep = Annotated[HashCatalog, Depends(get_catalog)]


def get_classifier(catalog: CatalogDep) -> HashClassifier:
    """Get a classifier over the active catalog."""
    return HashClassifier(catalog)


ClassifierDep = Annotated[HashClassifier, Depends(get_classifier)]


# Reversal registry dependency, created during application startup
def get_reversal_registry(request: Request) -> ReversalRegistry:
    """Get the application's reversal registry."""
    return request.app.state.reversal_registry


ReversalRegistryDep = Annotated[ReversalRegistry, Depends(get_reversal_registry)]
