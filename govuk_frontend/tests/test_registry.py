"""
Component registry: every render function is reachable by kebab-case name.

Why:
    The CLI and any framework integration look components up by name, so a
    component added to the package must show up here without extra wiring.
"""
from __future__ import annotations

import govuk_frontend
from govuk_frontend import COMPONENTS, govuk_back_link, govuk_date_input


def test_registry_maps_kebab_case_names():
    assert COMPONENTS["back-link"] is govuk_back_link
    assert COMPONENTS["date-input"] is govuk_date_input


def test_registry_covers_every_component():
    assert len(COMPONENTS) == 36
    for name, render in COMPONENTS.items():
        assert "_" not in name
        assert render.__name__ == "govuk_" + name.replace("-", "_")


def test_package_exports_render_functions():
    for render in COMPONENTS.values():
        assert render.__name__ in govuk_frontend.__all__
    assert "govuk_template" in govuk_frontend.__all__
