"""
Point-of-Interest Catalog
=========================

Static tables of named Paris locations.

Two catalogs exist:
    - BUSY_AREAS: fine-grained catalog driving the density field
    - LEGACY_HOTSPOTS: coarser catalog driving the hexagon traffic view

Spreads are in degrees. Intensities are on a 0-100 scale.
"""

from typing import Tuple

from paris_traffic.models.poi import Bounds, Category, PointOfInterest


PARIS_BOUNDS = Bounds(min_lat=48.815, max_lat=48.905, min_lng=2.22, max_lng=2.47)

# Visible map extent, slightly tighter in the north than the sampling box
MAP_BOUNDS = Bounds(min_lat=48.815, max_lat=48.902, min_lng=2.22, max_lng=2.47)

# Cells of the legacy view are kept only when their centre falls in here
LEGACY_BOUNDS = Bounds(min_lat=48.80, max_lat=48.92, min_lng=2.20, max_lng=2.48)

PARIS_CENTER: Tuple[float, float] = (48.8566, 2.3522)


def _poi(
    name: str,
    lat: float,
    lng: float,
    intensity: float,
    spread: float,
    category: Category,
) -> PointOfInterest:
    return PointOfInterest(
        name=name,
        latitude=lat,
        longitude=lng,
        category=category,
        base_intensity=intensity,
        spatial_spread=spread,
    )


T, S, B, TR, N, P, E, R = (
    Category.TOURIST,
    Category.SHOPPING,
    Category.BUSINESS,
    Category.TRANSPORT,
    Category.NIGHTLIFE,
    Category.PARK,
    Category.EDUCATION,
    Category.RESIDENTIAL,
)


BUSY_AREAS: Tuple[PointOfInterest, ...] = (
    # Major tourist hotspots
    _poi("Tour Eiffel", 48.8584, 2.2945, 100, 0.008, T),
    _poi("Louvre", 48.8606, 2.3376, 95, 0.012, T),
    _poi("Notre-Dame", 48.8530, 2.3499, 85, 0.007, T),
    _poi("Sacré-Cœur", 48.8867, 2.3431, 90, 0.009, T),
    _poi("Arc de Triomphe", 48.8738, 2.2950, 85, 0.007, T),
    _poi("Musée d'Orsay", 48.8600, 2.3266, 75, 0.006, T),
    _poi("Centre Pompidou", 48.8606, 2.3522, 70, 0.006, T),
    _poi("Trocadéro", 48.8616, 2.2875, 80, 0.008, T),
    _poi("Invalides", 48.8550, 2.3125, 65, 0.007, T),

    # Shopping & commercial districts
    _poi("Champs-Élysées Nord", 48.8738, 2.3050, 90, 0.006, S),
    _poi("Champs-Élysées Centre", 48.8710, 2.3025, 95, 0.007, S),
    _poi("Champs-Élysées Sud", 48.8680, 2.3000, 85, 0.006, S),
    _poi("Galeries Lafayette", 48.8738, 2.3320, 88, 0.006, S),
    _poi("Printemps", 48.8745, 2.3285, 82, 0.005, S),
    _poi("Le Marais Nord", 48.8600, 2.3622, 78, 0.008, S),
    _poi("Le Marais Sud", 48.8540, 2.3600, 75, 0.007, S),
    _poi("Saint-Germain", 48.8539, 2.3338, 72, 0.009, S),
    _poi("Les Halles", 48.8622, 2.3461, 85, 0.008, S),
    _poi("Rue de Rivoli", 48.8590, 2.3420, 70, 0.012, S),
    _poi("Boulevard Haussmann", 48.8750, 2.3300, 75, 0.010, S),

    # Business districts
    _poi("La Défense Centre", 48.8918, 2.2362, 85, 0.012, B),
    _poi("La Défense Est", 48.8900, 2.2450, 75, 0.008, B),
    _poi("Opéra", 48.8700, 2.3319, 80, 0.008, B),
    _poi("Bourse", 48.8690, 2.3410, 70, 0.006, B),
    _poi("Saint-Lazare Business", 48.8750, 2.3260, 72, 0.006, B),

    # Transport hubs
    _poi("Gare du Nord", 48.8809, 2.3553, 92, 0.009, TR),
    _poi("Gare de l'Est", 48.8768, 2.3591, 85, 0.007, TR),
    _poi("Gare de Lyon", 48.8443, 2.3735, 88, 0.009, TR),
    _poi("Gare Montparnasse", 48.8410, 2.3219, 82, 0.008, TR),
    _poi("Gare Saint-Lazare", 48.8764, 2.3247, 85, 0.007, TR),
    _poi("Châtelet", 48.8584, 2.3474, 90, 0.010, TR),
    _poi("République", 48.8675, 2.3640, 75, 0.007, TR),
    _poi("Nation", 48.8485, 2.3958, 70, 0.006, TR),
    _poi("Bastille", 48.8533, 2.3692, 78, 0.007, TR),

    # Entertainment & nightlife
    _poi("Pigalle", 48.8821, 2.3375, 70, 0.006, N),
    _poi("Moulin Rouge", 48.8841, 2.3323, 75, 0.004, N),
    _poi("Oberkampf", 48.8656, 2.3778, 68, 0.007, N),
    _poi("Canal Saint-Martin", 48.8710, 2.3650, 65, 0.008, N),
    _poi("Grands Boulevards", 48.8710, 2.3420, 72, 0.008, N),

    # Parks & recreation
    _poi("Jardin du Luxembourg", 48.8462, 2.3372, 55, 0.012, P),
    _poi("Tuileries", 48.8634, 2.3275, 60, 0.010, P),
    _poi("Champ de Mars", 48.8556, 2.2986, 70, 0.012, P),
    _poi("Parc Monceau", 48.8794, 2.3089, 45, 0.006, P),
    _poi("Buttes-Chaumont", 48.8811, 2.3828, 40, 0.010, P),

    # Universities & cultural
    _poi("Quartier Latin", 48.8497, 2.3471, 70, 0.010, E),
    _poi("Sorbonne", 48.8489, 2.3443, 65, 0.006, E),
    _poi("Odéon", 48.8515, 2.3388, 62, 0.005, E),

    # Secondary busy areas
    _poi("Belleville", 48.8717, 2.3850, 50, 0.008, R),
    _poi("Ménilmontant", 48.8660, 2.3900, 45, 0.007, R),
    _poi("Batignolles", 48.8867, 2.3172, 42, 0.008, R),
    _poi("Alésia", 48.8280, 2.3270, 45, 0.007, R),
    _poi("Convention", 48.8375, 2.2968, 40, 0.007, R),
    _poi("Denfert-Rochereau", 48.8337, 2.3326, 48, 0.006, R),
    _poi("Place d'Italie", 48.8311, 2.3558, 55, 0.008, R),
    _poi("Bercy", 48.8396, 2.3825, 52, 0.009, R),
    _poi("Père Lachaise", 48.8614, 2.3933, 35, 0.010, P),
)


LEGACY_HOTSPOTS: Tuple[PointOfInterest, ...] = (
    # Major tourist attractions
    _poi("Tour Eiffel", 48.8584, 2.2945, 95, 0.012, T),
    _poi("Louvre", 48.8606, 2.3376, 90, 0.015, T),
    _poi("Notre-Dame", 48.8530, 2.3499, 85, 0.010, T),
    _poi("Sacré-Cœur", 48.8867, 2.3431, 80, 0.012, T),
    _poi("Arc de Triomphe", 48.8738, 2.2950, 75, 0.010, T),
    _poi("Musée d'Orsay", 48.8600, 2.3266, 70, 0.008, T),
    _poi("Centre Pompidou", 48.8606, 2.3522, 65, 0.008, T),

    # Shopping areas
    _poi("Champs-Élysées", 48.8698, 2.3075, 85, 0.020, S),
    _poi("Galeries Lafayette", 48.8738, 2.3320, 80, 0.010, S),
    _poi("Le Marais", 48.8566, 2.3622, 75, 0.018, S),
    _poi("Saint-Germain", 48.8539, 2.3338, 70, 0.015, S),
    _poi("Les Halles", 48.8622, 2.3461, 75, 0.012, S),

    # Business districts
    _poi("La Défense", 48.8918, 2.2362, 80, 0.025, B),
    _poi("Opéra", 48.8700, 2.3319, 75, 0.015, B),

    # Transportation hubs
    _poi("Gare du Nord", 48.8809, 2.3553, 85, 0.015, TR),
    _poi("Gare de Lyon", 48.8443, 2.3735, 80, 0.012, TR),
    _poi("Gare Montparnasse", 48.8410, 2.3219, 75, 0.012, TR),
    _poi("Gare Saint-Lazare", 48.8764, 2.3247, 75, 0.010, TR),
    _poi("Châtelet", 48.8584, 2.3474, 85, 0.015, TR),

    # Entertainment areas
    _poi("Pigalle", 48.8821, 2.3375, 65, 0.010, N),
    _poi("Bastille", 48.8533, 2.3692, 70, 0.012, N),
    _poi("Oberkampf", 48.8656, 2.3778, 60, 0.010, N),

    # Parks & recreation
    _poi("Jardin du Luxembourg", 48.8462, 2.3372, 60, 0.015, P),
    _poi("Tuileries", 48.8634, 2.3275, 55, 0.015, P),
    _poi("Champ de Mars", 48.8556, 2.2986, 65, 0.018, P),

    # Residential/local areas
    _poi("Belleville", 48.8717, 2.3850, 45, 0.015, R),
    _poi("Batignolles", 48.8867, 2.3172, 40, 0.012, R),
    _poi("Buttes-Chaumont", 48.8811, 2.3828, 35, 0.015, R),
)
