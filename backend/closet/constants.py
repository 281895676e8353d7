"""
Fixed enumerations shared by validation and the presentation layer.

Bump ENUMS_VERSION whenever one of the value lists changes so clients can
tell their cached copy is stale.
"""

ENUMS_VERSION = 1

CATEGORIES = (
    "Top",
    "Bottom",
    "Dress",
    "Shoes",
    "Jacket",
    "Accessories",
    "Bag",
    "Hat",
)

COLORS = (
    "Pink",
    "Red",
    "Orange",
    "Yellow",
    "Green",
    "Blue",
    "Purple",
    "White",
    "Black",
    "Brown",
    "Beige",
    "Gray",
    "Multi",
)

SEASONS = ("Spring", "Summer", "Fall", "Winter")

# Suggested vocabulary only; the server stores whatever tags it receives
TAGS = (
    "kawaii",
    "casual",
    "formal",
    "comfy",
    "sporty",
    "elegant",
    "cute",
    "vintage",
    "trendy",
    "minimal",
)


def season_for_month(month: int) -> str:
    """Map a calendar month (1-12) to its season: Mar-May Spring, Jun-Aug Summer, Sep-Nov Fall."""
    if 3 <= month <= 5:
        return "Spring"
    if 6 <= month <= 8:
        return "Summer"
    if 9 <= month <= 11:
        return "Fall"
    return "Winter"
