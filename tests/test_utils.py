from __future__ import annotations

import logging

from nexhex import utils
from nexhex.physique import Advisory


def test_advisory_html_uses_severity_class() -> None:
    html = utils.advisory_html(Advisory("good", "isotropic-class slices: high-fidelity 3D reformat."))
    assert 'class="adv-good"' in html
    assert "Isotropic-class slices" in html
    assert 'class="adv-medium"' in utils.advisory_html(Advisory("unknown", "x"))


def test_configure_logging_does_not_override_existing_handlers() -> None:
    root = logging.getLogger()
    handlers = list(root.handlers)
    utils.configure_logging("DEBUG")
    if handlers:
        assert root.handlers == handlers
    else:
        assert root.handlers
