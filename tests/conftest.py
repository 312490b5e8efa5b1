"""
Pytest configuration and shared fixtures for ventadapter tests.
"""

import pytest


# ─── Raw configuration dicts ─────────────────────────────────────────────


def _config_small():
    """40mm fan into a 30mm pipe - few vent holes, quick to build."""
    return {
        "fan": {"size_mm": 40},
        "grille": {"cell_width_mm": 4.0, "web_width_mm": 1.0},
        "pipe": {"diameter_mm": 30, "fit": "inside", "sleeve_length_mm": 10},
    }


@pytest.fixture
def config_small():
    return _config_small()


@pytest.fixture
def config_120mm():
    """120mm fan over a 100mm pipe."""
    return {
        "fan": {"size_mm": 120},
        "pipe": {"diameter_mm": 100, "fit": "outside"},
    }


# ─── Typed params ────────────────────────────────────────────────────────


@pytest.fixture
def default_params():
    """Stock adapter: 80mm fan, 75mm pipe."""
    from ventadapter.io import AdapterParams
    return AdapterParams()


@pytest.fixture(scope="module")
def small_params():
    """Module-scoped small adapter params."""
    from ventadapter.io import adapter_from_dict
    return adapter_from_dict(_config_small())


# ─── Module-scoped built geometry ────────────────────────────────────────


@pytest.fixture(scope="module")
def small_geometry(small_params):
    """Module-scoped small adapter geometry (not yet built)."""
    from ventadapter import VentAdapterGeometry
    return VentAdapterGeometry(small_params)


@pytest.fixture(scope="module")
def built_small_adapter(small_geometry):
    """Module-scoped built small adapter."""
    return small_geometry.build()
