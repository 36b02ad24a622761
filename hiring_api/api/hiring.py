"""Hiring status API router."""

import logging

from fastapi import APIRouter, Depends

from hiring_api.core import features
from hiring_api.core.features import FeatureFlags, get_feature_flags
from hiring_api.schemas.schemas import HiringStatusResponse

logger = logging.getLogger("hiring_api")

router = APIRouter(tags=["hiring"])

HIRED_MESSAGE = (
    "Congratulations! We're thrilled to offer you a position on our team. "
    "Welcome aboard!"
)
NOT_HIRED_MESSAGE = (
    "Thank you for your interest in joining our team. While we were impressed "
    "with your qualifications, we've decided to move forward with other "
    "candidates at this time. We wish you the best in your job search!"
)


@router.get("/hiring-status", response_model=HiringStatusResponse)
async def hiring_status(flags: FeatureFlags = Depends(get_feature_flags)):
    """Report whether the candidate was hired."""
    hired = flags.is_enabled(features.HIRED)
    logger.info("Hiring status checked. Hired=%s", hired)
    return HiringStatusResponse(
        hired=hired,
        message=HIRED_MESSAGE if hired else NOT_HIRED_MESSAGE,
    )
