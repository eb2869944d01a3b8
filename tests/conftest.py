"""
Global test configuration and fixtures
"""

import pytest

from codegraph_jsxdiff.common.observability import reset_logging
from codegraph_jsxdiff.diff import parse_diff
from codegraph_jsxdiff.models import DiffFile

# Checkout component: data-test-id renamed on line 7
CHECKOUT_SOURCE = """\
import React from 'react'

export function CheckoutForm() {
  return (
    <div>
      <p>Order summary</p>
      <button data-test-id="checkout-button">Confirm payment</button>
    </div>
  )
}"""

CHECKOUT_DIFF = """\
diff --git a/app/components/Checkout.tsx b/app/components/Checkout.tsx
index abc1234..def5678 100644
--- a/app/components/Checkout.tsx
+++ b/app/components/Checkout.tsx
@@ -4,7 +4,7 @@ export function CheckoutForm() {
   return (
     <div>
       <p>Order summary</p>
-      <button data-test-id="checkout-btn">Pay</button>
+      <button data-test-id="checkout-button">Confirm payment</button>
     </div>
   )
 }"""

# One div removed, three elements added (div + two new tags)
PANEL_SOURCE = """\
export function Panel() {
  return (
    <div>
      <div data-test-id="panel-body">Body</div>
      <section data-test-id="panel-section">Section</section>
      <span data-test-id="panel-label">Label</span>
    </div>
  )
}"""

PANEL_DIFF = """\
diff --git a/src/Panel.tsx b/src/Panel.tsx
index 1111111..2222222 100644
--- a/src/Panel.tsx
+++ b/src/Panel.tsx
@@ -1,7 +1,9 @@
 export function Panel() {
   return (
     <div>
-      <div data-test-id="panel-content">Body</div>
+      <div data-test-id="panel-body">Body</div>
+      <section data-test-id="panel-section">Section</section>
+      <span data-test-id="panel-label">Label</span>
     </div>
   )
 }"""

MULTI_FILE_DIFF = """\
diff --git a/app/components/Checkout.tsx b/app/components/Checkout.tsx
index abc1234..def5678 100644
--- a/app/components/Checkout.tsx
+++ b/app/components/Checkout.tsx
@@ -5,4 +5,4 @@ export function CheckoutForm() {
-      <button data-test-id="checkout-btn">Pay</button>
+      <button data-test-id="checkout-button">Confirm payment</button>
diff --git a/app/components/Cart.tsx b/app/components/Cart.tsx
index 1111111..2222222 100644
--- a/app/components/Cart.tsx
+++ b/app/components/Cart.tsx
@@ -3,4 +3,4 @@ export function Cart() {
-  const total = items.length
+  const total = items.reduce((sum, i) => sum + i.price, 0)
"""


def parse_single_file(raw_diff: str) -> DiffFile:
    """Parse a diff expected to hold exactly one file."""
    files = parse_diff(raw_diff)
    assert len(files) == 1
    return files[0]


@pytest.fixture
def parse_single():
    """Parser for diffs holding exactly one file"""
    return parse_single_file


@pytest.fixture
def checkout_source() -> str:
    return CHECKOUT_SOURCE


@pytest.fixture
def checkout_file() -> DiffFile:
    return parse_single_file(CHECKOUT_DIFF)


@pytest.fixture
def panel_source() -> str:
    return PANEL_SOURCE


@pytest.fixture
def multi_file_diff() -> str:
    return MULTI_FILE_DIFF


@pytest.fixture
def panel_file() -> DiffFile:
    return parse_single_file(PANEL_DIFF)


@pytest.fixture(autouse=True)
def _fresh_logging():
    """Each test starts from an unconfigured logging state"""
    reset_logging()
    yield
    reset_logging()


# Pytest hooks
def pytest_configure(config):
    """Register markers"""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated, no tree-sitter)")
    config.addinivalue_line("markers", "integration: Integration tests (tree-sitter parsing)")


def pytest_collection_modifyitems(config, items):
    """Path-based markers"""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
