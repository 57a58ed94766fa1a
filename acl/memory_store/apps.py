"""
ACL Memory Store - App Configuration
====================================
Persistent key-value records backing DbMemoryStore.
"""

from django.apps import AppConfig


class AclMemoryStoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "acl.memory_store"
    label = "acl_memory_store"
    verbose_name = "ACL Memory Store"
