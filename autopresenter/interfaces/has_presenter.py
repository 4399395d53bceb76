# coding: utf-8
# Copyright (c) Max-Planck-Institut für Eisenforschung GmbH - Computational Materials Design (CM) Department
# Distributed under the terms of "New BSD License", see the LICENSE file.
"""
Interface for resources that know which presenter should decorate them.
"""

from abc import ABC
from typing import Optional, Type

__copyright__ = (
    "Copyright 2024, Max-Planck-Institut für Eisenforschung GmbH - "
    "Computational Materials Design (CM) Department"
)
__version__ = "1.0"
__status__ = "production"
__date__ = "Mar 4, 2024"


class HasPresenter(ABC):
    """
    A base class for resources that are decorated automatically by :func:`autopresenter.decorator.decorate`.

    Sub classes either set :attr:`presenter_class` or override :meth:`get_presenter_class` to choose the presenter
    depending on their state.  Classes that cannot derive from it can be registered with `HasPresenter.register` and
    must then provide `get_presenter_class` themselves.

    Attributes:
        presenter_class (type): :class:`~autopresenter.presenter.BasePresenter` subclass, `None` to leave the
            resource undecorated
    """

    presenter_class: Optional[Type] = None

    def get_presenter_class(self) -> Optional[Type]:
        return self.presenter_class
