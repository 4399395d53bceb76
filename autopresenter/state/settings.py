# coding: utf-8
# Copyright (c) Max-Planck-Institut für Eisenforschung GmbH - Computational Materials Design (CM) Department
# Distributed under the terms of "New BSD License", see the LICENSE file.
"""
The :class:`Settings` object controls the package wide defaults of all presenters: what happens when a presenter reads a
field its resource does not have, and how loudly reads of hidden fields are reported.
The python interpreter only ever sees a single instance of it, so modifications to the :class:`Settings` in one place
are available everywhere else that `Settings` gets/has gotten instantiated.

Default values from the codebase are overwritten in an XOR priority order, where input from only one source is used:
The highest priority is available only with the `update` method after the `Settings` object already exists, and is to
take values from a user-provided dictionary.
If no such dictionary is provided, or at initialization time, the highest priority is to read values from system
environment variables starting with 'AUTOPRESENTER'.
If none of these except 'AUTOPRESENTERCONFIG' are found, next `Settings` will try to read a configuration file stored at
this location.
If 'AUTOPRESENTERCONFIG' was not specified, `Settings` will instead try to read a file at the default location:
`~/.autopresenter`.
Finally, if none of these were specified, only the default values from the codebase are used.
"""

import os
from configparser import ConfigParser
from copy import deepcopy
from typing import Dict, List, Union

from pyiron_snippets.logger import logger
from pyiron_snippets.singleton import Singleton

from autopresenter.utils.strtobool import strtobool

__copyright__ = (
    "Copyright 2024, Max-Planck-Institut für Eisenforschung GmbH - "
    "Computational Materials Design (CM) Department"
)
__version__ = "1.0"
__status__ = "production"
__date__ = "Mar 4, 2024"


CONFIG_ENVIRONMENT_NAME = "AUTOPRESENTERCONFIG"


class Settings(metaclass=Singleton):
    """The unique settings object (singleton) for the currently running interpreter.

    Here are the configuration keys as the appear in the python code/config files/system env variables:

        missing_field / MISSING_FIELD / AUTOPRESENTERMISSINGFIELD ("error"|"none"): What a presenter does when a field
            is read that its resource does not have; "error" lets the lookup error propagate, "none" returns None.
            (Default is "error".)
        hidden_field_warning / HIDDEN_FIELD_WARNING / AUTOPRESENTERHIDDENFIELDWARNING (bool): Whether reading a field
            that is not exposed is logged as a warning instead of a debug message. (Default is False.)

    Properties:
        configuration (dict): Global variables for configuring presenters.
        missing_field (str): A shortcut to the configuration value of the same name.
        hidden_field_warning (bool): A shortcut to the configuration value of the same name.
        default_configuration (dict): Default values for configuration items.
        environment_configuration_map (dict): A map between system environment variable names and the configuration.
        file_configuration_map (dict): A map between config file variable names and the configuration.
    """

    def __init__(self):
        self._configuration = None
        self.update()

    @property
    def configuration(self) -> Dict:
        return self._configuration

    def update(self, user_dict: Union[Dict, None] = None) -> None:
        """
        Starting from a clean set of defaults, overwrite with input from exactly one source with the following priority:
        - User input
        - System environment variables
        - A config file at a locations specified in the AUTOPRESENTERCONFIG system environment variable
        - A config file at ~/.autopresenter
        - Nothing, just use defaults.

        Args:
            user_dict (dict): Configuration items
        """
        self._configuration = dict(self.default_configuration)
        env_dict = self._get_config_from_environment()
        file_dict = self._get_config_from_file()
        if user_dict is not None:
            self._update_from_dict(user_dict)
        elif env_dict is not None:
            self._update_from_dict(env_dict)
        elif file_dict is not None:
            self._update_from_dict(file_dict)
        logger.debug(f"autopresenter configuration: {self._configuration}")

    @property
    def default_configuration(self) -> Dict:
        return deepcopy(
            {
                "missing_field": "error",
                "hidden_field_warning": False,
            }
        )

    @property
    def environment_configuration_map(self) -> Dict:
        return {
            "AUTOPRESENTERMISSINGFIELD": "missing_field",
            "AUTOPRESENTERHIDDENFIELDWARNING": "hidden_field_warning",
        }

    @property
    def file_configuration_map(self) -> Dict:
        return {
            "MISSING_FIELD": "missing_field",
            "HIDDEN_FIELD_WARNING": "hidden_field_warning",
        }

    @property
    def missing_field(self) -> str:
        return self._configuration["missing_field"]

    @property
    def hidden_field_warning(self) -> bool:
        return self._configuration["hidden_field_warning"]

    @property
    def _valid_missing_field_policies(self) -> List[str]:
        return ["error", "none"]

    def _validate_missing_field(self, value: str) -> str:
        if value not in self._valid_missing_field_policies:
            raise ValueError(
                f"missing_field {value} not recognized, please choose among {self._valid_missing_field_policies}"
            )
        return value

    def _get_config_from_environment(self) -> Union[Dict, None]:
        config = {}
        for k, v in os.environ.items():
            if k in self.environment_configuration_map:
                config[self.environment_configuration_map[k]] = v
        return config if len(config) > 0 else None

    def _get_config_from_file(self) -> Union[Dict, None]:
        if CONFIG_ENVIRONMENT_NAME in os.environ.keys():
            config_file = os.environ[CONFIG_ENVIRONMENT_NAME]
        else:
            config_file = os.path.expanduser(os.path.join("~", ".autopresenter"))
        return self._parse_config_file(config_file, self.file_configuration_map)

    @staticmethod
    def _parse_config_file(config_file, map_dict):
        if os.path.isfile(config_file):
            parser = ConfigParser(inline_comment_prefixes=(";",), interpolation=None)
            parser.read(config_file)
            config = {}
            for sec_name, section in parser.items():
                for k, v in section.items():
                    if k.upper() in map_dict:
                        config[map_dict[k.upper()]] = v
            return config
        else:
            return None

    def _update_from_dict(self, config: Dict) -> None:
        """
        Overwrite values of the configuration dictionary based on a new dictionary.

        String items are converted to the expected type and validated.
        """
        for key, value in config.items():
            if key == "missing_field":
                self._configuration[key] = self._validate_missing_field(
                    value.strip().lower() if isinstance(value, str) else value
                )
            elif key == "hidden_field_warning":
                self._configuration[key] = (
                    value if isinstance(value, bool) else strtobool(value)
                )
            else:
                raise KeyError(
                    f"Got unexpected configuration key {key}, please choose from among {self._configuration.keys()}"
                )


settings = Settings()
