"""
Live browser scenarios for WordPress.com.

This package contains Playwright-driven scenarios and demonstrates:
- Scenario groups as test classes with bail-on-first-failure
- One browser session per test module
- Screenshot capture on failure
"""
