"""Tag resource handlers, including the machines carrying a tag."""

import logging
from typing import Any, Optional

from ...core.exceptions.resource import InvalidResourceData, ResourceNotFound
from ...platform.cache.application.services.cache_manager import CacheManager
from ..protocols import MaasClient
from ..schemas.collection_query_params import TagCollectionQueryParams
from ..schemas.machine import MaasMachine
from ..schemas.tag import (
    TAG_DETAILS_URI_PATTERN,
    TAG_MACHINES_URI_PATTERN,
    TAGS_LIST_URI_PATTERN,
    GetTagParams,
    MaasTag,
)
from .base_handler import BaseResourceHandler, DetailResourceHandler, ListResourceHandler

logger = logging.getLogger(__name__)


class TagDetailsResourceHandler(DetailResourceHandler[MaasTag, GetTagParams]):
    
    def __init__(self, client: MaasClient, cache_manager: CacheManager):
        super().__init__(
            client,
            cache_manager,
            resource_name="Tag",
            uri_pattern=TAG_DETAILS_URI_PATTERN,
            data_model=MaasTag,
            params_model=GetTagParams,
            api_endpoint="/tags",
        )
    
    def get_resource_id(self, params: GetTagParams) -> Optional[str]:
        return params.tag_name


class TagsListResourceHandler(ListResourceHandler[MaasTag, TagCollectionQueryParams]):
    
    def __init__(self, client: MaasClient, cache_manager: CacheManager):
        super().__init__(
            client,
            cache_manager,
            resource_name="Tags",
            uri_pattern=TAGS_LIST_URI_PATTERN,
            data_model=MaasTag,
            params_model=TagCollectionQueryParams,
            api_endpoint="/tags",
        )


class TagMachinesResourceHandler(BaseResourceHandler[MaasMachine, GetTagParams]):
    """Machines carrying a tag.
    
    The tag is looked up first so a missing tag reports not found rather
    than an empty machine list.
    """
    
    def __init__(self, client: MaasClient, cache_manager: CacheManager):
        super().__init__(
            client,
            cache_manager,
            resource_name="TagMachines",
            uri_pattern=TAG_MACHINES_URI_PATTERN,
            data_model=MaasMachine,
            params_model=GetTagParams,
            api_endpoint="/machines",
        )
    
    def get_resource_id(self, params: GetTagParams) -> Optional[str]:
        return params.tag_name
    
    async def fetch_resource_data(self, params: GetTagParams) -> Any:
        tag_name = params.tag_name
        try:
            await self.client.get(f"/tags/{tag_name}/")
        except Exception as e:
            if getattr(e, "status_code", None) == 404:
                logger.error(f"Tag not found: {tag_name}")
                raise ResourceNotFound(
                    f"Tag '{tag_name}' not found",
                    resource_name=self.resource_name,
                    resource_id=tag_name
                ) from e
            logger.warning(f"Error checking tag {tag_name}: {e}. Proceeding with machines request.")
        
        return await self.client.get(f"{self.api_endpoint}/", {"tags": tag_name})
    
    def validate_data(self, data: Any, resource_id: Optional[str] = None) -> Any:
        if not isinstance(data, list):
            raise InvalidResourceData(
                "Invalid response format: expected an array of machines",
                resource_name=self.resource_name,
                resource_id=resource_id
            )
        return [self._dump_item(item, resource_id) for item in data]
