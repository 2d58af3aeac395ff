"""Initial road network loaded into an empty registry."""

from __future__ import annotations

from roadctl.domain.registry import InfrastructureRegistry

SEED_CITIES: tuple[str, ...] = (
    "Kigali",
    "Huye",
    "Muhanga",
    "Musanze",
    "Nyagatare",
    "Rubavu",
    "Rusizi",
)

# (city_a, city_b, budget in billion RWF)
SEED_ROADS: tuple[tuple[str, str, float], ...] = (
    ("Kigali", "Muhanga", 28.6),
    ("Kigali", "Musanze", 28.6),
    ("Kigali", "Nyagatare", 70.84),
    ("Muhanga", "Huye", 56.7),
    ("Musanze", "Rubavu", 33.7),
    ("Huye", "Rusizi", 80.96),
    ("Muhanga", "Rusizi", 117.5),
    ("Musanze", "Nyagatare", 96.14),
    ("Muhanga", "Musanze", 66.3),
)


def seed_registry(registry: InfrastructureRegistry) -> InfrastructureRegistry:
    """Load the seed cities and roads into *registry* (expected empty)."""
    for name in SEED_CITIES:
        registry.add_city(name)
    for city_a, city_b, budget in SEED_ROADS:
        registry.add_road(city_a, city_b)
        registry.set_budget(city_a, city_b, budget)
    return registry
