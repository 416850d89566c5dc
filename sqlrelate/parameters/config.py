"""Binder configuration."""

from typing import Optional

__all__ = ("DEFAULT_BINDER_CONFIG", "BinderConfig")


class BinderConfig:
    """Declarative configuration for named parameter binding."""

    __slots__ = ("strict", "validate_list_lengths")

    def __init__(self, strict: bool = False, validate_list_lengths: Optional[bool] = None) -> None:
        """Initialize binder configuration.

        Args:
            strict: Raise :class:`~sqlrelate.exceptions.UnknownParameterError` when a bound
                name has no placeholder in the statement. When False, such binds are no-ops.
            validate_list_lengths: Raise :class:`~sqlrelate.exceptions.ListParameterError`
                when a list value does not match its declared element count. Defaults to ``strict``.
        """
        self.strict = strict
        self.validate_list_lengths = strict if validate_list_lengths is None else validate_list_lengths

    def hash(self) -> int:
        return hash((self.strict, self.validate_list_lengths))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.strict == other.strict and self.validate_list_lengths == other.validate_list_lengths

    def __hash__(self) -> int:
        return self.hash()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(strict={self.strict!r}, validate_list_lengths={self.validate_list_lengths!r})"


DEFAULT_BINDER_CONFIG = BinderConfig()
