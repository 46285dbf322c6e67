from fastapi import APIRouter, Depends

from evalserver.business_logic.settings import current_settings
from evalserver.dependencies import get_store
from evalserver.repositories import EvaluationStore
from evalserver.schemas import EvaluationSettingsData

router = APIRouter()


@router.get("/", response_model=EvaluationSettingsData)
async def get_settings(store: EvaluationStore = Depends(get_store)):
    """Get the current evaluation period."""
    return await current_settings(store)


@router.put("/", response_model=EvaluationSettingsData)
async def update_settings(
    settings: EvaluationSettingsData,
    store: EvaluationStore = Depends(get_store)
):
    """Change the current evaluation period or open/close submissions."""
    return await store.save_settings(settings)
