"""
Generated scenario data: titles, blog names, email addresses, passwords.

Values are unique per call so concurrent runs (one per viewport) never
collide on the shared test site.
"""

from __future__ import annotations

import time

from faker import Faker

# Initialize Faker for generating test data
fake = Faker()


def random_phrase() -> str:
    """A short title-cased phrase, e.g. ``"Quiet Harbor Lantern"``."""
    return " ".join(word.capitalize() for word in fake.words(nb=3, unique=True))


def new_blog_name() -> str:
    """
    A blog name that is valid as a ``*.wordpress.com`` sub-domain.

    Lowercase letters and digits only, prefixed so test sites are easy to find.
    """
    return f"e2eflowtesting{int(time.time())}{fake.numerify('###')}"


def email_address(blog_name: str, inbox_domain: str) -> str:
    return f"{blog_name}@{inbox_domain}"


def new_password() -> str:
    """A password unique to this moment, used for password protected content."""
    return f"e2e{int(time.time() * 1000)}"


def signup_password(configured: str | None = None) -> str:
    """The configured sign-up password, or a strong generated one."""
    return configured or fake.password(length=16, special_chars=False)
