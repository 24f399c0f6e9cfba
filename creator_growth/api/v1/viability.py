from fastapi import APIRouter, Query

from creator_growth.reference import list_products
from creator_growth.schemas.viability import (
    CommercialReport,
    CommercialReportRequest,
    ProductViability,
    ViableProductsRequest,
)
from creator_growth.services.commercial_viability import (
    calculate_commercial_viability,
    generate_commercial_report,
    get_viable_products_for_creator,
)

router = APIRouter()


@router.get("/viability/products", response_model=list[ProductViability])
def viability_products():
    return [calculate_commercial_viability(product.product_id, 0, 0.0) for product in list_products()]


@router.get("/viability/products/{product_id}", response_model=ProductViability)
def viability_product(
    product_id: str,
    download_count: int = Query(default=0, ge=0),
    engagement: float = Query(default=0.0, ge=0.0, le=1.0),
):
    return calculate_commercial_viability(product_id, download_count, engagement)


@router.post("/viability/report", response_model=CommercialReport)
def viability_report(payload: CommercialReportRequest):
    return generate_commercial_report(payload.downloads, payload.niche)


@router.post("/viability/recommendations", response_model=list[ProductViability])
def viability_recommendations(payload: ViableProductsRequest):
    return get_viable_products_for_creator(
        payload.niche,
        payload.followers,
        payload.engagement_rate,
        payload.monetization_goal,
    )
