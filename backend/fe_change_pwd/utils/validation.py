"""Configuration value validation utilities.

Static helpers used by the configuration loader to turn raw environment
strings or host settings values into typed values. Every helper raises
ValidationError with the offending field name on bad input.
"""

from enum import Enum
from typing import Any

from fe_change_pwd.core.errors import ValidationError

TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off")


class ConfigValidationUtils:
    """Static validators for configuration loading."""

    @staticmethod
    def validate_string(
        value: Any,
        field_name: str,
        required: bool = True,
        min_length: int = 0,
        max_length: int | None = None,
    ) -> str | None:
        """
        Validate string value.

        Args:
            value: Value to validate
            field_name: Field name for error messages
            required: Whether field is required
            min_length: Minimum string length
            max_length: Maximum string length

        Returns:
            str | None: Validated string value

        Raises:
            ValidationError: If validation fails
        """
        if value is None or value == "":
            if required:
                raise ValidationError(f"{field_name} is required", field=field_name)
            return None

        str_value = str(value).strip()

        if min_length > 0 and len(str_value) < min_length:
            raise ValidationError(
                f"{field_name} must be at least {min_length} characters",
                field=field_name,
            )

        if max_length and len(str_value) > max_length:
            raise ValidationError(
                f"{field_name} must be at most {max_length} characters",
                field=field_name,
            )

        return str_value

    @staticmethod
    def validate_integer(
        value: Any,
        field_name: str,
        required: bool = True,
        min_value: int | None = None,
        max_value: int | None = None,
    ) -> int | None:
        """
        Validate integer value with range checks.

        Raises:
            ValidationError: If validation fails
        """
        if value is None or value == "":
            if required:
                raise ValidationError(f"{field_name} is required", field=field_name)
            return None

        if isinstance(value, bool):
            raise ValidationError(
                f"{field_name} must be a valid integer", field=field_name
            )

        try:
            int_value = int(value)
        except (ValueError, TypeError) as e:
            raise ValidationError(
                f"{field_name} must be a valid integer", field=field_name
            ) from e

        if min_value is not None and int_value < min_value:
            raise ValidationError(
                f"{field_name} must be at least {min_value}", field=field_name
            )

        if max_value is not None and int_value > max_value:
            raise ValidationError(
                f"{field_name} must be at most {max_value}", field=field_name
            )

        return int_value

    @staticmethod
    def validate_boolean(
        value: Any, field_name: str, required: bool = True
    ) -> bool | None:
        """
        Validate boolean value with flexible input handling.

        Accepts bools, integers (0/1 as stored by the host) and the usual
        string spellings.

        Raises:
            ValidationError: If validation fails
        """
        if value is None or value == "":
            if required:
                raise ValidationError(f"{field_name} is required", field=field_name)
            return None

        if isinstance(value, bool):
            return value

        if isinstance(value, str):
            normalized = value.lower().strip()
            if normalized in TRUE_VALUES:
                return True
            if normalized in FALSE_VALUES:
                return False
            raise ValidationError(
                f"{field_name} must be a valid boolean value", field=field_name
            )

        if isinstance(value, int):
            return bool(value)

        raise ValidationError(
            f"{field_name} must be a valid boolean value", field=field_name
        )

    @staticmethod
    def validate_enum(
        value: Any, enum_class: type[Enum], field_name: str, required: bool = True
    ) -> Enum | None:
        """
        Validate enum value, matching by value first and then by name.

        Raises:
            ValidationError: If validation fails
        """
        if value is None or value == "":
            if required:
                raise ValidationError(f"{field_name} is required", field=field_name)
            return None

        if isinstance(value, enum_class):
            return value

        try:
            return enum_class(value)
        except (ValueError, TypeError):
            pass

        if isinstance(value, str):
            value_upper = value.strip().upper()
            for enum_value in enum_class:
                if enum_value.name.upper() == value_upper:
                    return enum_value

        allowed = ", ".join(member.name.lower() for member in enum_class)
        raise ValidationError(
            f"{field_name} must be one of: {allowed}", field=field_name
        )

    @staticmethod
    def validate_list(
        value: Any,
        field_name: str,
        item_type: type[Any] = str,
        required: bool = True,
    ) -> list[Any] | None:
        """
        Validate list with item type conversion.

        Comma separated strings are split into items.

        Raises:
            ValidationError: If validation fails
        """
        if value is None or value == "":
            if required:
                raise ValidationError(f"{field_name} is required", field=field_name)
            return None

        if isinstance(value, str):
            value = [item.strip() for item in value.split(",") if item.strip()]

        if not isinstance(value, list | tuple):
            raise ValidationError(f"{field_name} must be a list", field=field_name)

        validated_items = []
        for i, item in enumerate(value):
            if not isinstance(item, item_type):
                try:
                    item = item_type(item)
                except (ValueError, TypeError) as e:
                    raise ValidationError(
                        f"{field_name}[{i}] must be of type {item_type.__name__}",
                        field=field_name,
                    ) from e
            validated_items.append(item)

        return validated_items


validate_string = ConfigValidationUtils.validate_string
validate_integer = ConfigValidationUtils.validate_integer
validate_boolean = ConfigValidationUtils.validate_boolean
validate_enum = ConfigValidationUtils.validate_enum
validate_list = ConfigValidationUtils.validate_list
