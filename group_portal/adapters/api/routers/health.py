# group_portal\adapters\api\routers\health.py
from fastapi import APIRouter, Depends, status, Response
from dependency_injector.wiring import inject, Provide
from typing import Dict
import structlog

from group_portal.shared.container import Container
from group_portal.core.ports.group_repository import IGroupRepository
from group_portal.core.ports.membership_store import IMembershipStore

logger = structlog.get_logger()

router = APIRouter(prefix="/health", tags=["System"])

@router.get("/live", status_code=status.HTTP_200_OK)
def liveness_probe():
    """
    K8s Liveness Probe.
    Returns 200 OK if the service is operational.
    """
    return {"status": "ok", "service": "group-portal"}

@router.get("/ready", status_code=status.HTTP_200_OK)
@inject
def readiness_probe(
    response: Response,
    groups: IGroupRepository = Depends(Provide[Container.group_repository]),
    memberships: IMembershipStore = Depends(Provide[Container.membership_store]),
) -> Dict[str, str]:
    """
    K8s Readiness Probe.
    Checks content storage and the membership store.
    Returns 503 Service Unavailable if either is down.
    """
    health_status = {
        "content": "down",
        "memberships": "down",
    }

    try:
        if groups.health_check():
            health_status["content"] = "up"
    except Exception as e:
        logger.error("health_check_failed", component="content", error=str(e))

    try:
        if memberships.health_check():
            health_status["memberships"] = "up"
    except Exception as e:
        logger.error("health_check_failed", component="memberships", error=str(e))

    if not all(value == "up" for value in health_status.values()):
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("readiness_probe_failed", status=health_status)

    return health_status
