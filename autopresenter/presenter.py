# coding: utf-8
# Copyright (c) Max-Planck-Institut für Eisenforschung GmbH - Computational Materials Design (CM) Department
# Distributed under the terms of "New BSD License", see the LICENSE file.
"""
A presenter wraps a single domain object, its resource, and mediates all access to it.

Presenters restrict which fields of the resource are visible, let subclasses compute derived fields with :class:`field`
and forward everything else to the resource.  They are read only views: the resource is never copied and can be shared
with other holders.

Through out the code inside methods of :class:`BasePresenter` will use `object.__setattr__` and `self.__dict__` to
avoid recursing into the overloaded attribute access.
"""

import dataclasses
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from pyiron_snippets.deprecate import deprecate
from pyiron_snippets.logger import logger

from autopresenter.state import state
from autopresenter.utils.error import ResourceMethodNotFound

__copyright__ = (
    "Copyright 2024, Max-Planck-Institut für Eisenforschung GmbH - "
    "Computational Materials Design (CM) Department"
)
__version__ = "1.0"
__status__ = "production"
__date__ = "Mar 4, 2024"


_MISSING = object()


def _to_field_tuple(fields: Iterable[str]) -> Tuple[str, ...]:
    if isinstance(fields, str):
        raise TypeError(
            f"exposed fields must be a sequence of names, not the string {fields!r}"
        )
    return tuple(fields)


class field:
    """
    Mark a zero argument method of a presenter as a computed field.

    Reading the attribute on a presenter instance goes through :meth:`BasePresenter.get_field`, so the computed value
    is only returned if the field is exposed; hidden fields read as `None` even when the presenter overrides them.

    Args:
        func (function): method computing the value from the presenter
    """

    def __init__(self, func):
        self.func = func
        self.name = func.__name__
        self.__doc__ = func.__doc__

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return instance.get_field(self.name)

    def __set__(self, instance, value):
        raise AttributeError(
            f"field {self.name} of {type(instance).__name__} is computed and cannot be set"
        )

    def compute(self, presenter: "BasePresenter") -> Any:
        return self.func(presenter)


class BasePresenter:
    """
    Decorate a resource, exposing a filtered, forwarding view of it.

    Subclasses restrict the visible fields by setting :attr:`exposed_fields`.  If it is left empty, every field of the
    resource is visible; otherwise it is a white list.  Attribute reads on the presenter resolve in this order:

        1. fields that are not exposed read as `None`,
        2. fields computed on the presenter with :class:`field`,
        3. the attribute (or the item, for mappings) of the same name on the resource.

    Methods of the resource can be called on the presenter as long as they are exposed, anything else raises
    :exc:`.ResourceMethodNotFound`.

    >>> class Person:
    ...     def __init__(self, name, password):
    ...         self.name = name
    ...         self.password = password
    ...     def greet(self, other):
    ...         return f"Hi {other}, I am {self.name}"
    ...     def to_dict(self):
    ...         return {"name": self.name, "password": self.password}
    >>> class PersonPresenter(BasePresenter):
    ...     exposed_fields = ["name", "shout", "greet"]
    ...     @field
    ...     def shout(self):
    ...         return self.resource.name.upper()
    >>> p = PersonPresenter(Person("ada", "secret"))
    >>> p.name
    'ada'
    >>> p.shout
    'ADA'
    >>> p.password is None
    True
    >>> p.greet("bob")
    'Hi bob, I am ada'
    >>> p.to_dict()
    {'name': 'ada'}

    Reading a field the resource does not have is an error by default, see :attr:`missing_field`.

    >>> p.fly()
    Traceback (most recent call last):
        ...
    autopresenter.utils.error.ResourceMethodNotFound: Presenter: PersonPresenter::fly method does not exist

    Attributes:
        exposed_fields (tuple): names of the fields visible through the presenter, empty means all of them
        missing_field (str): "error" to raise when a field is missing on the resource, "none" to read it as `None`;
            `None` uses the package wide default from :attr:`autopresenter.state.state.settings`
    """

    exposed_fields: Tuple[str, ...] = ()
    missing_field: Optional[str] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.exposed_fields = _to_field_tuple(cls.exposed_fields)
        if cls.missing_field not in (None, "error", "none"):
            raise ValueError(
                f"missing_field of {cls.__name__} must be 'error', 'none' or None, not {cls.missing_field!r}"
            )

    def __init__(self, resource: Any, exposed_fields: Optional[Iterable[str]] = None):
        """
        Args:
            resource (object): the object to present, kept by reference
            exposed_fields (list, optional): white list overriding the class default for this instance
        """
        object.__setattr__(self, "_resource", resource)
        object.__setattr__(
            self,
            "_exposed_fields",
            (
                _to_field_tuple(exposed_fields)
                if exposed_fields is not None
                else type(self).exposed_fields
            ),
        )

    @property
    def resource(self) -> Any:
        return self._resource

    def get_resource(self) -> Any:
        """
        The object this presenter decorates, exactly as it was given.

        Returns:
            object: the resource
        """
        return self._resource

    def get_exposed_fields(self) -> Tuple[str, ...]:
        """
        Fields this presenter wishes to provide.

        Returns:
            tuple: field names, empty if all fields are exposed
        """
        return self._exposed_fields

    def field_is_exposed(self, key: str) -> bool:
        """
        Not all fields may be accessible.  Any field that is not, simply reads as `None`.

        Args:
            key (str): field name

        Returns:
            bool: True if no white list is set or `key` is on it
        """
        fields = self.get_exposed_fields()
        if not fields:
            return True
        return key in fields

    def get_field(self, key: str) -> Any:
        """
        Return the value for a given field.

        Args:
            key (str): field name

        Raises:
            AttributeError: if the resource has no such field and the missing field policy is "error"

        Returns:
            object: the computed or forwarded value, `None` for fields that are not exposed
        """
        if not self.field_is_exposed(key):
            self._log_hidden_field(key)
            return None
        override = self._get_field_override(key)
        if override is not None:
            return override.compute(self)
        value, _ = self._lookup(key)
        if value is _MISSING:
            if self._get_missing_field_policy() == "none":
                return None
            # let the resource raise its own error
            return getattr(self._resource, key)
        return value

    def call_method(self, key: str, *args, **kwargs) -> Any:
        """
        Call a method of the resource, if it is exposed.

        Args:
            key (str): method name
            *args: passed on to the method
            **kwargs: passed on to the method

        Raises:
            ResourceMethodNotFound: if the method is not exposed or the resource does not have it

        Returns:
            object: whatever the method returns
        """
        if self.field_is_exposed(key):
            method, is_method = self._lookup(key)
            if is_method:
                return method(*args, **kwargs)
        raise ResourceMethodNotFound(type(self), key)

    def has_field(self, key: str) -> bool:
        """
        Check whether the resource has an entry `key`, regardless of it being exposed.

        Args:
            key (str): field name

        Returns:
            bool: True if `key in resource` for containers, `hasattr(resource, key)` otherwise
        """
        resource = self._resource
        if hasattr(type(resource), "__contains__"):
            try:
                return key in resource
            except TypeError:
                return False
        return hasattr(resource, key)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the resource to a dictionary with only the exposed fields.

        The resource is converted with its own `to_dict()` method, or directly if it is a mapping or a dataclass.

        Raises:
            TypeError: if the resource cannot be converted

        Returns:
            dict: the resource's fields in the resource's order
        """
        attributes = self._resource_to_dict()
        fields = self.get_exposed_fields()
        if fields:
            attributes = {k: v for k, v in attributes.items() if k in fields}
        return attributes

    @deprecate("use to_dict() instead")
    def to_array(self) -> Dict[str, Any]:
        return self.to_dict()

    def _resource_to_dict(self) -> Dict[str, Any]:
        resource = self._resource
        to_dict = getattr(resource, "to_dict", None)
        if callable(to_dict):
            return to_dict()
        if isinstance(resource, Mapping):
            return dict(resource)
        if dataclasses.is_dataclass(resource) and not isinstance(resource, type):
            return dataclasses.asdict(resource)
        raise TypeError(
            f"{type(resource).__name__} cannot be converted to a dict, give it a to_dict() method"
        )

    def _lookup(self, key: str) -> Tuple[Any, bool]:
        """
        Find `key` on the resource.

        Items of mappings take precedence over their attributes and are never treated as methods.

        Returns:
            tuple: the value (or `_MISSING`) and whether it is a method
        """
        resource = self._resource
        if isinstance(resource, Mapping) and key in resource:
            return resource[key], False
        value = getattr(resource, key, _MISSING)
        return value, value is not _MISSING and callable(value)

    def _get_field_override(self, key: str) -> Union[field, None]:
        override = getattr(type(self), key, None)
        return override if isinstance(override, field) else None

    def _get_missing_field_policy(self) -> str:
        if self.missing_field is not None:
            return self.missing_field
        return state.settings.missing_field

    def _log_hidden_field(self, key: str) -> None:
        msg = f"{type(self).__name__}.{key} is not exposed, reading it as None"
        if state.settings.hidden_field_warning:
            logger.warning(msg)
        else:
            logger.debug(msg)

    def __getattr__(self, key):
        if key.startswith("__") and key.endswith("__"):
            raise AttributeError(key)
        if "_resource" not in self.__dict__:
            raise AttributeError(key)
        if self._get_field_override(key) is not None:
            # an AttributeError raised inside an override lands here, compute it again to surface it
            return self.get_field(key)
        value, is_method = self._lookup(key)
        if is_method:
            if self.field_is_exposed(key):
                return value
            raise ResourceMethodNotFound(type(self), key)
        if value is _MISSING and self._get_missing_field_policy() == "error":
            raise ResourceMethodNotFound(type(self), key)
        return self.get_field(key)

    def __setattr__(self, key, value):
        if key.startswith("_"):
            object.__setattr__(self, key, value)
        else:
            raise AttributeError(
                f"{type(self).__name__} is a read only view of its resource, cannot set {key}"
            )

    def __contains__(self, key):
        return self.has_field(key)

    def __dir__(self):
        attributes = set(super().__dir__())
        resource = self._resource
        fields = self.get_exposed_fields()
        if fields:
            attributes.update(fields)
        elif isinstance(resource, Mapping):
            attributes.update(k for k in resource.keys() if isinstance(k, str))
        else:
            attributes.update(k for k in dir(resource) if not k.startswith("_"))
        return sorted(attributes)

    def __str__(self):
        return str(self._resource)

    def __repr__(self):
        return f"{type(self).__name__}({self._resource!r})"
