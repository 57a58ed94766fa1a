"""
ACL Memory Store - Key-Value Records
====================================
MemoryRecord holds one top-level memory key and its JSON value.
"""

from __future__ import annotations

from django.db import models


class MemoryRecord(models.Model):
    name = models.CharField(max_length=191, unique=True)
    value = models.JSONField(default=dict)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "acl_memory_records"
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name
