# coding: utf-8
# Copyright (c) Max-Planck-Institut für Eisenforschung GmbH - Computational Materials Design (CM) Department
# Distributed under the terms of "New BSD License", see the LICENSE file.
"""
Automatic decoration of resources, e.g. right before they are handed to a template.
"""

from typing import Any

from pyiron_snippets.logger import logger

from autopresenter.collection import PresenterList
from autopresenter.interfaces.has_presenter import HasPresenter
from autopresenter.presenter import BasePresenter

__copyright__ = (
    "Copyright 2024, Max-Planck-Institut für Eisenforschung GmbH - "
    "Computational Materials Design (CM) Department"
)
__version__ = "1.0"
__status__ = "production"
__date__ = "Mar 4, 2024"


def decorate(subject: Any) -> Any:
    """
    Wrap `subject` in its presenter, if it has one.

    Lists and tuples become a :class:`.PresenterList` of their decorated items and dictionaries get their values
    decorated, recursively.  Presenters are never wrapped twice and anything else is returned as is.

    Args:
        subject (object): resource, presenter or container of them

    Raises:
        TypeError: if a :class:`.HasPresenter` names a presenter class that does not derive from
            :class:`.BasePresenter`

    Returns:
        object: the decorated subject
    """
    if isinstance(subject, BasePresenter):
        return subject
    if isinstance(subject, HasPresenter):
        return _decorate_resource(subject)
    if isinstance(subject, (list, tuple)):
        return PresenterList(decorate(item) for item in subject)
    if isinstance(subject, dict):
        return {k: decorate(v) for k, v in subject.items()}
    return subject


def _decorate_resource(resource: HasPresenter) -> Any:
    presenter_class = resource.get_presenter_class()
    if presenter_class is None:
        return resource
    if not (
        isinstance(presenter_class, type) and issubclass(presenter_class, BasePresenter)
    ):
        raise TypeError(
            f"{type(resource).__name__} names {presenter_class!r} as presenter, which is not a BasePresenter"
        )
    logger.debug(
        f"Decorating {type(resource).__name__} with {presenter_class.__name__}"
    )
    return presenter_class(resource)
