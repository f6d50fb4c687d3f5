"""Catalog endpoints - product details and business location for the site"""
from fastapi import APIRouter, Depends
from typing import List

from contact_relay.config import Settings, get_settings
from contact_relay.models.catalog import ProductDetail, ProductSummary, SiteInfo
from contact_relay.services.catalog_service import get_product, get_site_info, list_products

router = APIRouter()


@router.get("/products", response_model=List[ProductSummary])
async def products():
    """List products (PUBLIC endpoint)"""
    return list_products()


@router.get("/products/{product_key}", response_model=ProductDetail)
async def product_detail(product_key: str):
    """
    Get product details for the product modal (PUBLIC endpoint)
    Unknown products fall back to the default product
    """
    return get_product(product_key)


@router.get("/site", response_model=SiteInfo)
async def site_info(settings: Settings = Depends(get_settings)):
    """Business name, contact details and map location (PUBLIC endpoint)"""
    return get_site_info(settings.site_name, settings.mail_to)
