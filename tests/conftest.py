"""Shared test fixtures for scenariopilot tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from scenariopilot.contracts.config import AnalysisRules

CHECKOUT_DOCUMENT = """\
# Checkout Platform

Requirements for the new checkout flow.

Version: 2.1
Author: Jane Doe
Stakeholders: Product, QA; Support

## Feature: Shopping Cart [high]
Customers manage items before checkout.
Depends on: Product Catalog
- Add items to the cart
- Remove items from the cart

## Notes

- Payment processing: charge the customer card securely [high] (depends on Shopping Cart)
AC: Given a valid card When the customer pays Then the order is confirmed

As a shopper, I want to save my cart so that I can finish checkout later.
"""

LOGIN_DOCUMENT = (
    "As a user, I want to login so that I can access my account.\n"
    "- Rate limiting: must block after 5 failed attempts [high]"
)


@pytest.fixture
def checkout_text() -> str:
    """A document exercising metadata, a feature block, a bare requirement, a criterion and a story."""
    return CHECKOUT_DOCUMENT


@pytest.fixture
def login_text() -> str:
    """One user story plus one high-priority bare requirement."""
    return LOGIN_DOCUMENT


@pytest.fixture
def checkout_file(tmp_path: Path) -> Path:
    path = tmp_path / "checkout.md"
    path.write_text(CHECKOUT_DOCUMENT, encoding="utf-8")
    return path


@pytest.fixture
def rules() -> AnalysisRules:
    return AnalysisRules()
