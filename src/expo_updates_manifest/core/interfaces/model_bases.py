"""Nominal marker base classes for model standardization.

`DomainModel` is the base for Pydantic-based domain and configuration
models; `InternalDTO` marks internal dataclass-based DTOs that never leave
the process in their typed form.
"""

from __future__ import annotations

from pydantic import BaseModel


class DomainModel(BaseModel):
    """Nominal marker for Pydantic-based domain and API models."""

    def __repr__(self) -> str:
        """Provide a concise, one-line summary of the object."""
        class_name = self.__class__.__name__

        repr_attrs = ("id", "name", "key")
        for attr in repr_attrs:
            if hasattr(self, attr):
                attr_value = getattr(self, attr)
                if attr_value is not None:
                    return f'<{class_name} {attr}="{attr_value}">'

        return f"<{class_name}>"


class InternalDTO:
    """Nominal marker for internal dataclass DTOs.

    Mixed into dataclass definitions to make their intent explicit for mypy
    checks.
    """
