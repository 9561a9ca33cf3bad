"""Enums shared across the domain layer."""

from enum import Enum


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"
