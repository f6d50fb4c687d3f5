"""Static product catalog and business location data"""
from typing import List

from contact_relay.models.catalog import Location, ProductDetail, ProductSummary, SiteInfo

DEFAULT_PRODUCT = "cement"

PRODUCTS = {
    "cement": ProductDetail(
        key="cement",
        title="Cement Interlocking Bricks",
        image_url="https://placehold.co/600x300/1e3a8a/ffffff?text=Cement+Interlocking+Bricks",
        specifications=[
            "Compressive Strength: 35-40 N/mm²",
            "Size: Available in multiple dimensions",
            "Water Absorption: Less than 10%",
            "Available in Double and Triple lock variants",
        ],
        applications=(
            "Perfect for residential buildings, commercial complexes, boundary walls, "
            "and industrial structures requiring superior strength and precision."
        ),
        benefits=[
            "Faster construction with precise interlocking",
            "Reduced mortar consumption",
            "Excellent load-bearing capacity",
            "Cost-effective solution",
        ],
    ),
    "soil": ProductDetail(
        key="soil",
        title="Classic Cement Bricks",
        image_url="https://placehold.co/600x300/059669/ffffff?text=Classic+Cement+Bricks",
        specifications=[
            "Compressive Strength: 30-35 N/mm²",
            "Made from premium cement, sand, and aggregates",
            "Low water absorption rate",
            "Standard brick dimensions",
        ],
        applications=(
            "Ideal for traditional construction methods, load-bearing walls, and projects "
            "requiring proven reliability at an economical price point."
        ),
        benefits=[
            "Budget-friendly without compromising quality",
            "Natural thermal insulation properties",
            "Time-tested durability",
            "Easy availability and handling",
        ],
    ),
    "custom": ProductDetail(
        key="custom",
        title="Light Weight Bricks",
        image_url="https://placehold.co/600x300/4f46e5/ffffff?text=Light+Weight+Bricks",
        specifications=[
            "Weight: 40-50% lighter than conventional bricks",
            "High load-bearing capacity despite low weight",
            "Superior thermal insulation",
            "Made with imported lightweight aggregates",
        ],
        applications=(
            "Perfect for high-rise buildings, partition walls, and projects where reduced "
            "structural load and improved insulation are priorities."
        ),
        benefits=[
            "Reduced transportation and handling costs",
            "Lower structural load on foundation",
            "Excellent thermal and acoustic insulation",
            "Faster construction due to easy handling",
        ],
    ),
}

BUSINESS_LOCATION = Location(lat=10.3102, lng=76.3267)


def list_products() -> List[ProductSummary]:
    return [ProductSummary(key=p.key, title=p.title) for p in PRODUCTS.values()]


def get_product(key: str) -> ProductDetail:
    """Look up a product; unknown keys fall back to the default product"""
    return PRODUCTS.get(key, PRODUCTS[DEFAULT_PRODUCT])


def get_site_info(site_name: str, email: str) -> SiteInfo:
    return SiteInfo(
        name=site_name,
        address="Chalakudy, Kerala, India",
        phone="+91 98765 43210",
        email=email,
        location=BUSINESS_LOCATION,
        directions_url=f"https://maps.google.com/?q={BUSINESS_LOCATION.lat},{BUSINESS_LOCATION.lng}"
    )
