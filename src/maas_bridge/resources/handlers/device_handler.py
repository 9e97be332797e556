"""Device resource handlers."""

from typing import Optional

from ...platform.cache.application.services.cache_manager import CacheManager
from ..protocols import MaasClient
from ..schemas.collection_query_params import DeviceCollectionQueryParams
from ..schemas.device import (
    DEVICE_DETAILS_URI_PATTERN,
    DEVICES_LIST_URI_PATTERN,
    GetDeviceParams,
    MaasDevice,
)
from .base_handler import DetailResourceHandler, ListResourceHandler


class DeviceDetailsResourceHandler(DetailResourceHandler[MaasDevice, GetDeviceParams]):
    
    def __init__(self, client: MaasClient, cache_manager: CacheManager):
        super().__init__(
            client,
            cache_manager,
            resource_name="Device",
            uri_pattern=DEVICE_DETAILS_URI_PATTERN,
            data_model=MaasDevice,
            params_model=GetDeviceParams,
            api_endpoint="/devices",
        )
    
    def get_resource_id(self, params: GetDeviceParams) -> Optional[str]:
        return params.system_id


class DevicesListResourceHandler(ListResourceHandler[MaasDevice, DeviceCollectionQueryParams]):
    
    def __init__(self, client: MaasClient, cache_manager: CacheManager):
        super().__init__(
            client,
            cache_manager,
            resource_name="Devices",
            uri_pattern=DEVICES_LIST_URI_PATTERN,
            data_model=MaasDevice,
            params_model=DeviceCollectionQueryParams,
            api_endpoint="/devices",
        )
