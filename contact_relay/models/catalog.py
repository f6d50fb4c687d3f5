"""Product catalog and site info Pydantic models"""
from pydantic import BaseModel
from typing import List


class ProductSummary(BaseModel):
    """Product list entry"""
    key: str
    title: str


class ProductDetail(BaseModel):
    """Product details shown in the product modal"""
    key: str
    title: str
    image_url: str
    specifications: List[str]
    applications: str
    benefits: List[str]


class Location(BaseModel):
    lat: float
    lng: float


class SiteInfo(BaseModel):
    """Business card shown alongside the location map"""
    name: str
    address: str
    phone: str
    email: str
    location: Location
    zoom: int = 15
    directions_url: str
