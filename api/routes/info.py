"""
Service information endpoint (token protected).
"""

from datetime import datetime

from fastapi import APIRouter, Depends

from api.dependencies import get_conf, require_auth_token
from api.schemas.info import ServiceInfoResponse
from core.config import Conf


router = APIRouter(tags=["Info"], dependencies=[Depends(require_auth_token)])


@router.get("/info", response_model=ServiceInfoResponse)
async def service_info(conf: Conf = Depends(get_conf)) -> ServiceInfoResponse:
    """Public URL, time zone and current server time in that zone."""
    return ServiceInfoResponse(
        public_url=conf.public_url,
        time_zone=conf.time_zone,
        server_time=datetime.now(conf.timezone_location()),
    )
