# coding: utf-8
# Copyright (c) Max-Planck-Institut für Eisenforschung GmbH - Computational Materials Design (CM) Department
# Distributed under the terms of "New BSD License", see the LICENSE file.

# API of the autopresenter module - in alphabetical order
from autopresenter.collection import PresenterList
from autopresenter.decorator import decorate
from autopresenter.interfaces.has_presenter import HasPresenter
from autopresenter.presenter import BasePresenter, field
from autopresenter.state import state
from autopresenter.state.settings import Settings
from autopresenter.utils.error import ResourceMethodNotFound

__version__ = "0.1.0"

__all__ = [
    "BasePresenter",
    "field",
    "decorate",
    "HasPresenter",
    "PresenterList",
    "ResourceMethodNotFound",
    "Settings",
    "state",
]
