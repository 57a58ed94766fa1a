"""
ACL Text - Identifier Normalization
===================================
Roles and actions are compared by their slug form only.
"""

from __future__ import annotations

from django.utils.text import slugify


def slug(value) -> str:
    """
    Normalize a role/action token into its canonical slug.

    "Edit Post", "edit_post" and "edit-post" all become "edit-post".
    """
    # slugify() keeps underscores; treat them as word separators too.
    return slugify(str(value).replace("_", " "))
