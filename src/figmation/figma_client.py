"""
Figma REST API client.

Fetches local variables and basic file metadata. Requests are single-shot:
no retries and no caching. A 403 is turned into ``FigmaAuthError``; every
other failure is raised unchanged.

Usage:
    async with FigmaClient(token, file_id) as client:
        collections = await client.get_local_variables()
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from .config import FIGMA_API_BASE
from .errors import FigmaAuthError
from .models import FigmaVariable, FigmaVariableCollection, FileInfo

logger = logging.getLogger(__name__)

AUTH_ERROR_MESSAGE = "Invalid Figma access token or insufficient permissions"


class FigmaClient:
    """Thin async wrapper over the Figma variables endpoints."""

    def __init__(
        self,
        access_token: str,
        file_id: str,
        *,
        base_url: str = FIGMA_API_BASE,
        client: httpx.AsyncClient | None = None,
    ):
        self.file_id = file_id
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            headers={"X-Figma-Token": access_token},
        )

    async def __aenter__(self) -> FigmaClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # =========================================================================
    # Public API
    # =========================================================================

    async def get_local_variables(self) -> dict[str, FigmaVariableCollection]:
        """
        Fetch the file's local variables grouped by collection.

        Every returned variable carries ``value`` set to its collection's
        default-mode value.

        Returns:
            Collection id -> collection with its variables

        Raises:
            FigmaAuthError: If Figma answers 403
        """
        logger.info("Fetching variables from Figma file: %s", self.file_id)

        data = await self._get(f"/files/{self.file_id}/variables/local")
        collections = _parse_collections(data.get("meta", {}))

        count = sum(len(c.variables) for c in collections.values())
        logger.info("Fetched %d variables in %d collections", count, len(collections))
        return collections

    async def get_file_info(self) -> FileInfo:
        """Fetch the file's name and last-modified timestamp."""
        data = await self._get(f"/files/{self.file_id}")
        return FileInfo.model_validate(data)

    # =========================================================================
    # Internals
    # =========================================================================

    async def _get(self, endpoint: str) -> dict[str, Any]:
        response = await self._client.get(endpoint)
        if response.status_code == 403:
            raise FigmaAuthError(AUTH_ERROR_MESSAGE)
        response.raise_for_status()
        result: dict[str, Any] = response.json()
        return result


def _parse_collections(meta: dict[str, Any]) -> dict[str, FigmaVariableCollection]:
    """
    Build collections with embedded variables from the ``meta`` payload.

    Figma returns ``variableCollections`` and ``variables`` as two flat maps
    linked by ``variableCollectionId``. Collections that already embed a
    ``variables`` list are taken as they are.
    """
    loose: dict[str, list[dict[str, Any]]] = {}
    for raw in meta.get("variables", {}).values():
        loose.setdefault(raw.get("variableCollectionId", ""), []).append(raw)

    collections: dict[str, FigmaVariableCollection] = {}
    for collection_id, raw_collection in meta.get("variableCollections", {}).items():
        raw_variables = raw_collection.get("variables") or loose.get(collection_id, [])
        default_mode_id = raw_collection.get("defaultModeId")

        variables = []
        for raw in raw_variables:
            variable = FigmaVariable.model_validate(raw)
            if default_mode_id in variable.values_by_mode:
                variable = variable.model_copy(
                    update={"value": variable.values_by_mode[default_mode_id]}
                )
            variables.append(variable)

        fields = {k: v for k, v in raw_collection.items() if k != "variables"}
        fields.setdefault("id", collection_id)
        collection = FigmaVariableCollection.model_validate(fields)
        collections[collection_id] = collection.model_copy(update={"variables": variables})

    return collections
