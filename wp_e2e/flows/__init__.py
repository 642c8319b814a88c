"""Flows: single-use, ordered sequences of page interactions."""

from wp_e2e.flows.login_flow import LoginFlow
from wp_e2e.flows.signup_flow import SignUpFlow

__all__ = ["LoginFlow", "SignUpFlow"]
