"""Zone resource handlers."""

from typing import Optional

from ...platform.cache.application.services.cache_manager import CacheManager
from ..protocols import MaasClient
from ..schemas.collection_query_params import ZoneCollectionQueryParams
from ..schemas.zone import (
    ZONE_DETAILS_URI_PATTERN,
    ZONES_LIST_URI_PATTERN,
    GetZoneParams,
    MaasZone,
)
from .base_handler import DetailResourceHandler, ListResourceHandler


class ZoneDetailsResourceHandler(DetailResourceHandler[MaasZone, GetZoneParams]):
    
    def __init__(self, client: MaasClient, cache_manager: CacheManager):
        super().__init__(
            client,
            cache_manager,
            resource_name="Zone",
            uri_pattern=ZONE_DETAILS_URI_PATTERN,
            data_model=MaasZone,
            params_model=GetZoneParams,
            api_endpoint="/zones",
        )
    
    def get_resource_id(self, params: GetZoneParams) -> Optional[str]:
        return params.zone_id


class ZonesListResourceHandler(ListResourceHandler[MaasZone, ZoneCollectionQueryParams]):
    
    def __init__(self, client: MaasClient, cache_manager: CacheManager):
        super().__init__(
            client,
            cache_manager,
            resource_name="Zones",
            uri_pattern=ZONES_LIST_URI_PATTERN,
            data_model=MaasZone,
            params_model=ZoneCollectionQueryParams,
            api_endpoint="/zones",
        )
