from __future__ import annotations

import pytest

from coolcalc_core.catalog import load_catalog


@pytest.fixture()
def catalog():
    return load_catalog()
