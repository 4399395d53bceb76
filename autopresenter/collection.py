# coding: utf-8
# Copyright (c) Max-Planck-Institut für Eisenforschung GmbH - Computational Materials Design (CM) Department
# Distributed under the terms of "New BSD License", see the LICENSE file.
"""
A list of decorated resources, e.g. the result of decorating a query result, that serializes all of them at once.
"""

from typing import Any, List

import pandas

__copyright__ = (
    "Copyright 2024, Max-Planck-Institut für Eisenforschung GmbH - "
    "Computational Materials Design (CM) Department"
)
__version__ = "1.0"
__status__ = "production"
__date__ = "Mar 4, 2024"


class PresenterList(list):
    """
    Plain list of presenters (or any other items) with bulk conversion.

    >>> from autopresenter.presenter import BasePresenter
    >>> class NamePresenter(BasePresenter):
    ...     exposed_fields = ["name"]
    >>> people = PresenterList(
    ...     NamePresenter(r) for r in [{"name": "ada", "age": 36}, {"name": "alan", "age": 41}]
    ... )
    >>> people.to_dict()
    [{'name': 'ada'}, {'name': 'alan'}]
    """

    def to_dict(self) -> List[Any]:
        """
        Convert every item with its own `to_dict()`; items without one are returned as they are.

        Returns:
            list: converted items in order
        """
        return [
            item.to_dict() if callable(getattr(item, "to_dict", None)) else item
            for item in self
        ]

    def to_dataframe(self) -> pandas.DataFrame:
        """
        Tabulate the items, one row per item and one column per exposed field.

        Returns:
            pandas.DataFrame: table of the converted items
        """
        return pandas.DataFrame(self.to_dict())

    def __repr__(self):
        return f"{type(self).__name__}({super().__repr__()})"
