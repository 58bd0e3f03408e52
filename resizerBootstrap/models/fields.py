# Copyright (c) 2018 Ultimaker
# !/usr/bin/env python
# -*- coding: utf-8 -*-
from typing import Dict, List, Type, Optional

import re


def pascal_to_lowercase(value: str) -> str:
    """
    Converts a string from pascal case into lower-case underscore separated strings.
    e.g. arbiterOnly => arbiter_only.
    Note: MongoDB documents use pascal cased keys, but in Python we use lower-cased strings with underscores instead.
    :param value: The string to be converted.
    :return: The converted string.
    """
    return re.sub(r"([a-z0-9]+)([A-Z])", r"\1_\2", value).lower()


def lowercase_to_pascal(value: str) -> str:
    """
    Converts a string from lower-case underscore separated strings into pascal case.
    e.g. arbiter_only => arbiterOnly.
    :param value: The string to be converted.
    :return: The converted string.
    """
    return re.sub(r"([a-z0-9]+)_([a-z])", lambda m: m.group(1) + m.group(2).upper(), value)


class Field:
    """
    Base field that can be used in the models. This field does no validation whatsoever.
    """
    def __init__(self, required: bool, default: any = None):
        """
        :param required: Whether this field is required.
        :param default: The value used when none is given to the model.
        """
        self.required = required
        self.default = default

    def validate(self, value: any) -> None:
        """
        Checks whether the value is valid for this field.
        :param value: The value to be validated.
        :raise ValueError: If the field is invalid.
        """
        if value is None and self.required:
            raise ValueError("The field is required.")

    def parse(self, value: any) -> any:
        """
        Parses the field value.
        :param value: The value to be parsed.
        :return: The parsed value.
        """
        self.validate(value)
        return value

    def to_dict(self, value, skip_validation: bool = False) -> any:
        """
        Returns a the value of this field as it should be set in the model dictionaries.
        :param value: The value to be converted.
        :param skip_validation: Whether the validation should be skipped.
        :return: The value of this field.
        """
        if not skip_validation:
            self.validate(value)
        return value


class StringField(Field):
    """
    Field that converts the given value into a non-empty string.
    """
    def parse(self, value: any) -> str:
        value = str(value)
        if not value:
            raise ValueError("The field cannot be empty.")
        return super().parse(value)


class IntegerField(Field):
    """
    Field that only accepts integers, optionally with a lower bound.
    """
    def __init__(self, required: bool, minimum: Optional[int] = None, default: Optional[int] = None):
        super().__init__(required, default)
        self.minimum = minimum

    def parse(self, value: any) -> int:
        # bool is a subclass of int, but `True` is not a valid member id or version.
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError("Expected an integer (got {}).".format(repr(value)))
        if self.minimum is not None and value < self.minimum:
            raise ValueError("The value must be at least {} (got {}).".format(self.minimum, value))
        return super().parse(value)


class BooleanField(Field):
    """
    Field that only accepts booleans.
    """
    def parse(self, value: any) -> bool:
        if not isinstance(value, bool):
            raise ValueError("Expected a boolean (got {}).".format(repr(value)))
        return super().parse(value)


class EmbeddedListField(Field):
    """
    Field that holds a non-empty list of sub-models.
    """
    def __init__(self, field_type: Type, required: bool):
        """
        :param field_type: A reference to the type of the list items, i.e. the model class.
        :param required: Whether this field is required.
        """
        super().__init__(required)
        self.field_type = field_type

    def validate(self, value: any) -> None:
        super().validate(value)
        if value is not None and not value:
            raise ValueError("The list cannot be empty.")

    def parse(self, value: List[any]) -> List[any]:
        if not isinstance(value, list):
            raise ValueError("Expected a list of {} (got {}).".format(self.field_type.__name__, repr(value)))
        return super().parse([self._parseItem(item) for item in value])

    def _parseItem(self, item: any) -> any:
        if isinstance(item, self.field_type):
            return item
        if not isinstance(item, dict):
            raise ValueError("Invalid value passed to {} field: {}.".format(self.field_type.__name__, repr(item)))
        try:
            values = {pascal_to_lowercase(field_name): field_value for field_name, field_value in item.items()}
            return self.field_type(**values)
        except TypeError as err:
            raise ValueError("Invalid values passed to {} field: {}. Received {}."
                             .format(self.field_type.__name__, err, item))

    def to_dict(self, value, skip_validation: bool = False) -> Optional[List[Dict[str, any]]]:
        value = super().to_dict(value, skip_validation)
        if value is None:
            return None
        return [item.to_dict(skip_validation=skip_validation) for item in value]
