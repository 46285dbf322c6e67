"""
Evaluation settings lookup.
"""

import logging

from evalserver import config
from evalserver.repositories.base import EvaluationStore
from evalserver.schemas import EvaluationSettingsData

logger = logging.getLogger(__name__)


def default_settings() -> EvaluationSettingsData:
    """Settings used until an administrator saves their own."""
    return EvaluationSettingsData(
        current_semester=config.DEFAULT_SEMESTER,
        school_year=config.DEFAULT_SCHOOL_YEAR,
        is_evaluation_active=True,
    )


async def current_settings(store: EvaluationStore) -> EvaluationSettingsData:
    settings = await store.get_settings()
    if settings is None:
        logger.debug("No evaluation settings saved, using defaults")
        return default_settings()
    return settings
