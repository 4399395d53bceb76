# coding: utf-8
# Copyright (c) Max-Planck-Institut für Eisenforschung GmbH - Computational Materials Design (CM) Department
# Distributed under the terms of "New BSD License", see the LICENSE file.
"""
The `state` module holds the global state shared by all presenters.
Such "global" behaviour is achieved by using the `Singleton` metaclass to guarantee that each class only ever has a
single instance per session; both are collected here under the `state` object as a single point of access.
"""

from typing import Dict, Union

from pyiron_snippets.logger import logger as _logger
from pyiron_snippets.singleton import Singleton

from autopresenter.state.settings import settings as _settings

__copyright__ = (
    "Copyright 2024, Max-Planck-Institut für Eisenforschung GmbH - "
    "Computational Materials Design (CM) Department"
)
__version__ = "1.0"
__status__ = "production"
__date__ = "Mar 4, 2024"


class State(metaclass=Singleton):
    """
    A helper class to give quick and easy access to all the singleton classes which together define the state module.

    Attributes:
        logger: Self-explanatory.
        settings: Package wide presenter defaults.
    """

    @property
    def logger(self):
        return _logger

    @property
    def settings(self):
        return _settings

    def update(self, config_dict: Union[Dict, None] = None) -> None:
        """
        Re-reads the settings configuration.

        Args:
            config_dict (dict): A new set of configuration parameters to use. (Default is None, which attempts to read
                the configuration from system environment xor configuration files.)
        """
        self.settings.update(user_dict=config_dict)


state = State()
