"""Shared pytest configuration for the blog app tests."""

import os

import django
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "portfolio.settings")
django.setup()


@pytest.fixture
def gallery_marker():
    """Build a marker div the way the editor inserts it."""

    def _marker(payload):
        return f"<div class=\"gallery-container\" data-gallery='{payload}'></div>"

    return _marker
