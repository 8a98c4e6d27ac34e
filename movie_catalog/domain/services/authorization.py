from typing import Iterable

from movie_catalog.domain.models.role import Role

ADMIN_ROLES = frozenset({Role.ADMIN, Role.SUPER_ADMIN})


def is_admin(roles: Iterable[Role]) -> bool:
    return any(role in ADMIN_ROLES for role in roles)


def has_required_role(roles: Iterable[Role], required: Role) -> bool:
    """A role admits every caller holding it or a role above it in the hierarchy"""
    return any(role.rank >= required.rank for role in roles)
