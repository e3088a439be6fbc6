from typing import Any, Optional, Type, Callable, Generic, TypeVar


T = TypeVar("T")

_TRUE_STRINGS = ("true", "1", "on", "yes")
_FALSE_STRINGS = ("false", "0", "off", "no", "")


class ValidationError(ValueError):
    """Raised when a value is rejected by the validator of a Var."""

    pass


class Var(Generic[T]):
    """
    A single typed setting, e.g. the width of the laser bed. New values
    are coerced to the declared type and checked by the validator.
    """

    def __init__(
        self,
        key: str,
        label: str,
        var_type: Type[T],
        description: Optional[str] = None,
        default: Optional[T] = None,
        value: Optional[T] = None,
        validator: Optional[Callable[[T], None]] = None,
    ):
        """
        Args:
            key: The machine-readable identifier, used in config files.
            label: The human-readable name, used as property key.
            var_type: The expected Python type of the value.
            description: A longer, human-readable description.
            default: The default value.
            value: The initial value. If provided, it overrides the default.
            validator: An optional callable that raises an exception if a
                       new value is invalid.
        """
        self.key = key
        self.label = label
        self.var_type = var_type
        self.description = description
        self.default = default
        self.validator = validator
        self._value: Optional[T] = None

        self.value = value if value is not None else default

    @property
    def value(self) -> Optional[T]:
        return self._value

    @value.setter
    def value(self, new_value: Any):
        if new_value is None:
            self._value = None
            return

        value = self._coerce(new_value)
        if self.validator:
            try:
                self.validator(value)
            except Exception as e:
                raise ValidationError(
                    f"Validation failed for key '{self.key}' with value "
                    f"'{value}': {e}"
                ) from e
        self._value = value

    def _coerce(self, new_value: Any) -> T:
        if self.var_type is bool and isinstance(new_value, str):
            lowered = new_value.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True  # type: ignore[return-value]
            if lowered in _FALSE_STRINGS:
                return False  # type: ignore[return-value]
        elif self.var_type is bool and isinstance(new_value, (int, float)):
            return bool(new_value)  # type: ignore[return-value]
        elif self.var_type is int and isinstance(new_value, str):
            # "12.0" is a valid int setting
            try:
                return int(float(new_value))  # type: ignore[return-value]
            except ValueError:
                pass
        elif self.var_type is not bool:
            try:
                return self.var_type(new_value)  # type: ignore[call-arg]
            except (ValueError, TypeError):
                pass
        raise TypeError(
            f"Value '{new_value}' for key '{self.key}' cannot be coerced "
            f"to type {self.var_type.__name__}"
        )

    def reset(self) -> None:
        self.value = self.default

    def __repr__(self) -> str:
        return (
            f"Var(key='{self.key}', value={self.value}, "
            f"type={self.var_type.__name__})"
        )
