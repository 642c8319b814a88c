"""
Fakes for the browser client.

This package provides in-memory stand-ins that let the unit tests:
- Drive page and component objects without a browser
- Control element timing deterministically with a fake clock
- Simulate client failures (closed contexts, launch errors)
"""
