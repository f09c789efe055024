"""NLTK resource management for the English tokenizer."""

from __future__ import annotations

from enum import Enum
from typing import Final

import nltk

from jpseg.exceptions import NLTKResourceError
from jpseg.logging import get_logger

logger = get_logger("analyzer.nltk_resources")


class NLTKResource(Enum):
    """NLTK resources used by jpseg.

    Each value is a tuple of (data_path, download_name) where:
    - data_path: Path to check in nltk.data.find()
    - download_name: Package name for nltk.download()
    """

    PUNKT_TAB = ("tokenizers/punkt_tab", "punkt_tab")
    POS_TAGGER = ("taggers/averaged_perceptron_tagger_eng", "averaged_perceptron_tagger_eng")


ENGLISH_TOKENIZER_RESOURCES: Final[tuple[NLTKResource, ...]] = (
    NLTKResource.PUNKT_TAB,
    NLTKResource.POS_TAGGER,
)

_available: set[NLTKResource] = set()


def ensure_resource(resource: NLTKResource) -> None:
    """Ensure a single NLTK resource is available.

    Checks if the resource exists locally, and downloads it if not.

    Args:
        resource: NLTK resource to check/download.

    Raises:
        NLTKResourceError: If resource cannot be downloaded.
    """
    if resource in _available:
        return

    path, name = resource.value
    try:
        nltk.data.find(path)
        logger.debug("NLTK resource '%s' already available", name)
    except LookupError:
        logger.debug("Downloading NLTK resource '%s'", name)
        try:
            downloaded = nltk.download(name, quiet=True)
        except Exception as e:
            raise NLTKResourceError(
                f"Failed to download NLTK resource '{name}': {e}",
                resource_name=name,
            ) from e
        if downloaded is False:
            raise NLTKResourceError(
                f"Failed to download NLTK resource '{name}'",
                resource_name=name,
            )
        logger.debug("Successfully downloaded NLTK resource '%s'", name)
    _available.add(resource)


def ensure_resources(resources: tuple[NLTKResource, ...]) -> None:
    """Ensure multiple NLTK resources are available.

    Raises:
        NLTKResourceError: If any resource cannot be downloaded.
    """
    for resource in resources:
        ensure_resource(resource)
