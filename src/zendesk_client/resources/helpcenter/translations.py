"""
Help Center Translations API.

Articles, sections and categories each carry one translation per locale.
``item_type`` is the plural of the translated object: ``"articles"``,
``"sections"`` or ``"categories"``.

https://developer.zendesk.com/api-reference/help_center/help-center-api/translations/
"""

from typing import Any, Dict, List

from ..base import ResourceClient


class Translations(ResourceClient):
    json_api_names = ("translations", "translation")

    async def list(self, item_type: str, item_id: int) -> List[Dict[str, Any]]:
        return await self._get_all([item_type, item_id, "translations"])

    async def list_missing(self, item_type: str, item_id: int) -> List[str]:
        """Locales the item has not been translated to yet."""
        return await self._get([item_type, item_id, "translations", "missing"], roots=("locales",))

    async def show(self, item_type: str, item_id: int, locale: str) -> Dict[str, Any]:
        return await self._get([item_type, item_id, "translations", locale])

    async def create(self, item_type: str, item_id: int, translation: Dict[str, Any]) -> Dict[str, Any]:
        return await self._post([item_type, item_id, "translations"], translation)

    async def update(self, item_type: str, item_id: int, locale: str, translation: Dict[str, Any]) -> Dict[str, Any]:
        return await self._put([item_type, item_id, "translations", locale], translation)

    async def delete(self, translation_id: int) -> None:
        return await self._delete(["translations", translation_id])

    async def list_enabled_locales(self) -> Dict[str, Any]:
        """The Help Center locales and the default one (``{"locales": [...], "default_locale": ...}``)."""
        return await self._get(["locales"], roots=())
