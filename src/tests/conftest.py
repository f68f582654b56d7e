import pytest
from datetime import datetime, timezone
from library_core.library import Library

FIXED_NOW = datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)

@pytest.fixture
def now():
    return FIXED_NOW

@pytest.fixture
def library(now):
    return Library("Central", "Av.1", loan_days=14, clock=lambda: now)

@pytest.fixture
def stocked(library):
    """Library with four books (IDs 1-4) and four users (IDs 5-8)."""
    for i, pages in enumerate([863, 471, 380, 120], start=1):
        library.add_book(f"Libro {i}", f"Autor {i}", f"ISBN-{i}", pages)
    for name in ["Carlos", "Maria", "Juan", "Pedro"]:
        library.register_user(name, f"{name.lower()}@x.com", "999")
    return library
