"""Insights, recipes and clusters endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from nutrition_insights.api.filters import parse_filter_spec
from nutrition_insights.api.models import (
    ClustersResponse,
    InsightsResponse,
    RecipesResponse,
    build_meta,
    cluster_out,
    insights_response,
    recipe_out,
)
from nutrition_insights.domain.filters import FilterSpec  # noqa: TC001

if TYPE_CHECKING:
    from nutrition_insights.containers import AppContainer

router = APIRouter(prefix="/api", tags=["insights"])
logger = logging.getLogger(__name__)


def resolve_filter(
    request: Request,
    diet_type: str | None = Query(default=None, alias="dietType"),
    q: str | None = None,
    page: str | None = None,
    page_size: str | None = Query(default=None, alias="pageSize"),
) -> FilterSpec:
    """Parse the shared filter query parameters without rejecting bad numbers."""
    container: AppContainer = request.app.state.container
    return parse_filter_spec(
        diet_type,
        q,
        page,
        page_size,
        default_page_size=container.settings.default_page_size,
    )


@router.get("/insights", response_model=InsightsResponse)
async def get_insights(
    request: Request, spec: FilterSpec = Depends(resolve_filter)
) -> InsightsResponse:
    """Return chart data and summary statistics for matching diets."""
    container: AppContainer = request.app.state.container
    try:
        report = container.insights_service.get_insights(spec)
    except Exception as exc:
        logger.exception("Failed to load insights")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
        ) from exc
    return insights_response(
        report.charts, report.summary, build_meta(spec, report.total)
    )


@router.get("/recipes", response_model=RecipesResponse)
async def get_recipes(
    request: Request, spec: FilterSpec = Depends(resolve_filter)
) -> RecipesResponse:
    """Return a page of recipes matching the filter."""
    container: AppContainer = request.app.state.container
    try:
        result = container.recipe_service.list_recipes(spec)
    except Exception as exc:
        logger.exception("Failed to load recipes")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
        ) from exc
    return RecipesResponse(
        recipes=[recipe_out(recipe) for recipe in result.items],
        meta=build_meta(spec, result.total),
    )


@router.get("/clusters", response_model=ClustersResponse)
async def get_clusters(request: Request) -> ClustersResponse:
    """Return the static food clusters."""
    container: AppContainer = request.app.state.container
    return ClustersResponse(
        clusters=[
            cluster_out(cluster)
            for cluster in container.cluster_service.list_clusters()
        ]
    )
