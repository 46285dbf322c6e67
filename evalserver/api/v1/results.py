import logging
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from typing import Optional

from evalserver.business_logic.aggregator import EvaluationAggregator
from evalserver.business_logic.rankings import rank_results
from evalserver.business_logic.settings import current_settings
from evalserver.dependencies import get_store
from evalserver.repositories import EvaluationStore, StoreError
from evalserver.schemas import ComputeResultsResponse, RankedResultList

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/compute", response_model=ComputeResultsResponse)
async def compute_results(store: EvaluationStore = Depends(get_store)):
    """
    Recompute the results of every evaluated teacher for the current period.
    
    Teachers whose results fail to store are skipped; the failures are only
    logged.
    """
    aggregator = EvaluationAggregator(store)
    try:
        await aggregator.run()
    except StoreError as e:
        logger.error(f"Error computing evaluation results: {str(e)}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ComputeResultsResponse(success=False, message=str(e)).model_dump()
        )

    return ComputeResultsResponse(success=True, message="Evaluation results computed successfully")


@router.get("/", response_model=RankedResultList)
async def get_results(
    period: Optional[str] = Query(None, description="Evaluation period, defaults to the current one"),
    store: EvaluationStore = Depends(get_store)
):
    """Get the stored results of a period with overall and category ranks."""
    if period is None:
        period = (await current_settings(store)).evaluation_period

    results = rank_results(await store.list_results(evaluation_period=period))
    return RankedResultList(evaluation_period=period, results=results, total=len(results))
