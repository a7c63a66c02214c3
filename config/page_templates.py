"""
Page template catalogue for ComponentCraft

Declarative page descriptions used by the page composer. Each page template
is an ordered list of sections; each section holds an ordered list of
component specs and a layout.
"""

from typing import Any, Dict


def _spec(id: str, type: str, prompt: str, column: int = 0, width: int = 12) -> Dict[str, Any]:
    return {
        "id": id,
        "type": type,
        "prompt": prompt,
        "position": {"row": 0, "column": column, "width": width, "height": 1},
    }


PAGE_TEMPLATES: Dict[str, Dict[str, Any]] = {
    "landing-startup": {
        "id": "landing-startup",
        "name": "Startup Landing Page",
        "description": "Modern landing page with hero, features, pricing, and CTA",
        "category": "landing",
        "sections": [
            {
                "id": "hero",
                "name": "Hero Section",
                "description": "Eye-catching hero with headline and CTA",
                "components": [
                    _spec("hero-main", "hero", "modern hero section with gradient background and animated elements"),
                ],
                "layout": {"type": "flex", "columns": 1},
            },
            {
                "id": "features",
                "name": "Features Section",
                "description": "Key features in a grid layout",
                "components": [
                    _spec("feature-1", "card", 'feature card with icon and description for "Fast Performance"', 0, 4),
                    _spec("feature-2", "card", 'feature card with icon and description for "Secure & Reliable"', 4, 4),
                    _spec("feature-3", "card", 'feature card with icon and description for "Easy Integration"', 8, 4),
                ],
                "layout": {"type": "grid", "columns": 3, "gap": "2rem", "padding": "4rem 2rem"},
            },
            {
                "id": "pricing",
                "name": "Pricing Section",
                "description": "Tiered pricing plans",
                "components": [
                    _spec("pricing-table", "pricing", "modern pricing table with 3 tiers for SaaS startup"),
                ],
                "layout": {"type": "flex", "columns": 1, "padding": "4rem 2rem"},
            },
            {
                "id": "cta",
                "name": "Call to Action",
                "description": "Final CTA section",
                "components": [
                    _spec("cta-banner", "banner", 'CTA banner with "Start Your Free Trial" message and email signup'),
                ],
                "layout": {"type": "flex", "columns": 1, "padding": "4rem 2rem"},
            },
        ],
    },
    "dashboard-analytics": {
        "id": "dashboard-analytics",
        "name": "Analytics Dashboard",
        "description": "Data dashboard with charts, metrics, and tables",
        "category": "dashboard",
        "sections": [
            {
                "id": "header",
                "name": "Dashboard Header",
                "description": "Navigation and user info",
                "components": [
                    _spec("nav-bar", "navigation", "dashboard navigation bar with logo, menu items, and user avatar"),
                ],
                "layout": {"type": "flex", "columns": 1},
            },
            {
                "id": "metrics",
                "name": "Key Metrics",
                "description": "Important KPI cards",
                "components": [
                    _spec("metric-revenue", "metric-card", "metric card showing revenue with trend indicator", 0, 3),
                    _spec("metric-users", "metric-card", "metric card showing active users with percentage change", 3, 3),
                    _spec("metric-conversion", "metric-card", "metric card showing conversion rate with chart", 6, 3),
                    _spec("metric-satisfaction", "metric-card", "metric card showing customer satisfaction score", 9, 3),
                ],
                "layout": {"type": "grid", "columns": 4, "gap": "1.5rem", "padding": "2rem"},
            },
            {
                "id": "charts",
                "name": "Data Visualization",
                "description": "Charts and graphs",
                "components": [
                    _spec("chart-line", "chart", "line chart component showing revenue over time", 0, 8),
                    _spec("chart-pie", "chart", "pie chart showing traffic sources distribution", 8, 4),
                ],
                "layout": {"type": "grid", "columns": 12, "gap": "1.5rem", "padding": "2rem"},
            },
        ],
    },
    "ecommerce-products": {
        "id": "ecommerce-products",
        "name": "Product Showcase",
        "description": "E-commerce product listing with filters",
        "category": "ecommerce",
        "sections": [
            {
                "id": "filters",
                "name": "Filter Sidebar",
                "description": "Product filtering options",
                "components": [
                    _spec("filter-panel", "filter", "product filter sidebar with categories, price range, and ratings", 0, 3),
                ],
                "layout": {"type": "flex", "columns": 1},
            },
            {
                "id": "products",
                "name": "Product Grid",
                "description": "Product cards in grid",
                "components": [
                    _spec("product-1", "product-card", "product card with image, title, price, and add to cart button", 0, 3),
                    _spec("product-2", "product-card", "product card with sale badge and discount price", 3, 3),
                    _spec("product-3", "product-card", 'product card with "new arrival" label', 6, 3),
                    _spec("product-4", "product-card", "product card with customer rating stars", 9, 3),
                ],
                "layout": {"type": "grid", "columns": 4, "gap": "2rem", "padding": "2rem"},
            },
        ],
    },
}

SECTION_PREVIEW_TEMPLATES: Dict[str, Dict[str, Any]] = {
    "hero": {
        "id": "hero-preview",
        "name": "Hero Section",
        "description": "Hero section preview",
        "components": [_spec("hero-main", "hero", "modern hero section with headline and CTA")],
        "layout": {"type": "flex", "columns": 1},
    },
    "features": {
        "id": "features-preview",
        "name": "Features Section",
        "description": "Features section preview",
        "components": [
            _spec("feature-1", "feature-card", "feature card with icon", 0, 4),
            _spec("feature-2", "feature-card", "feature card with icon", 4, 4),
            _spec("feature-3", "feature-card", "feature card with icon", 8, 4),
        ],
        "layout": {"type": "grid", "columns": 3, "gap": "2rem"},
    },
    "pricing": {
        "id": "pricing-preview",
        "name": "Pricing Section",
        "description": "Pricing section preview",
        "components": [_spec("pricing-table", "pricing", "pricing table with 3 tiers")],
        "layout": {"type": "flex", "columns": 1},
    },
    "testimonials": {
        "id": "testimonials-preview",
        "name": "Testimonials Section",
        "description": "Testimonials section preview",
        "components": [
            _spec("testimonial-1", "testimonial", "testimonial card with quote and author", 0, 4),
            _spec("testimonial-2", "testimonial", "testimonial card with rating", 4, 4),
            _spec("testimonial-3", "testimonial", "testimonial card with company logo", 8, 4),
        ],
        "layout": {"type": "grid", "columns": 3, "gap": "2rem"},
    },
    "footer": {
        "id": "footer-preview",
        "name": "Footer Section",
        "description": "Footer section preview",
        "components": [_spec("footer-main", "footer", "footer with links, social media, and copyright")],
        "layout": {"type": "flex", "columns": 1},
    },
}
