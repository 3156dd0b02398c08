"""Collect the Document Set for a context from a document store."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from hapsite.context.exceptions import MissingDocumentError

if TYPE_CHECKING:
    from hapsite.context.catalog import DocumentDescriptor
    from hapsite.storage.documents import DocumentStore

logger = logging.getLogger(__name__)


def load_documents(store: DocumentStore, descriptors: Sequence[DocumentDescriptor]) -> dict[str, str]:
    """Read every described document, in descriptor order.

    Missing optional documents are left out of the result.

    Raises:
        MissingDocumentError: If a required document is missing.

    """
    documents: dict[str, str] = {}
    for descriptor in descriptors:
        text = store.read(descriptor.path)
        if text is None:
            if descriptor.required:
                raise MissingDocumentError(descriptor.name, descriptor.path)
            logger.debug("Optional document %s not found, omitting section", descriptor.name)
            continue
        documents[descriptor.name] = text
    return documents
