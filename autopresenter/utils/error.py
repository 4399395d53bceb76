# coding: utf-8
# Copyright (c) Max-Planck-Institut für Eisenforschung GmbH - Computational Materials Design (CM) Department
# Distributed under the terms of "New BSD License", see the LICENSE file.

"""
Exceptions raised by presenters.
In order to be accessible from anywhere in autopresenter, they *must* remain free of any imports from autopresenter!
"""

__copyright__ = (
    "Copyright 2024, Max-Planck-Institut für Eisenforschung GmbH - "
    "Computational Materials Design (CM) Department"
)
__version__ = "1.0"
__status__ = "production"
__date__ = "Mar 4, 2024"


class ResourceMethodNotFound(AttributeError):
    """
    Raised when a method is called on a presenter that neither the presenter nor its resource provides, or that the
    presenter does not expose.

    Derives from :exc:`AttributeError`, so `hasattr` and `getattr` with a default keep working on presenters.

    Args:
        presenter_class (type): concrete presenter class the call was made on
        method_name (str): name of the missing method
    """

    def __init__(self, presenter_class, method_name):
        self.presenter_class = presenter_class
        self.method_name = method_name
        super().__init__(
            f"Presenter: {presenter_class.__name__}::{method_name} method does not exist"
        )

    def __reduce__(self):
        return type(self), (self.presenter_class, self.method_name)
