"""
Test suite for the WordPress.com end-to-end page objects.

This package contains:
- unit/: Page, component, flow and session tests against an in-memory browser
- e2e/: Live scenarios (page editor, sign-up) run against WordPress.com
- mocks/: Fake Playwright objects and a fake clock used by the unit tests
"""
