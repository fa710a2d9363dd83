"""
Example enum builders.

Small, realistic label sets used by the demo script and the tests:
compass directions, traffic light phases and access roles.
"""
from labelset.model import Enum


def build_compass() -> Enum:
    return Enum.of("NORTH", "EAST", "SOUTH", "WEST")


def build_traffic_light() -> Enum:
    return Enum.of("RED", "AMBER", "GREEN")


def build_roles(*extra_roles: str) -> Enum:
    """
    Access roles ordered from least to most privileged.

    Extra roles are appended after ADMIN and validated like any other
    label, so a repeated or non-string role raises.
    """
    return Enum.of("VIEWER", "EDITOR", "ADMIN", *extra_roles)
