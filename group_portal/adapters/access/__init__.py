from .role_access_oracle import RoleAccessOracle

__all__ = ["RoleAccessOracle"]
