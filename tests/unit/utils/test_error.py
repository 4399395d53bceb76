# coding: utf-8
# Copyright (c) Max-Planck-Institut für Eisenforschung GmbH - Computational Materials Design (CM) Department
# Distributed under the terms of "New BSD License", see the LICENSE file.

import pickle
import unittest

from autopresenter.presenter import BasePresenter
from autopresenter.utils.error import ResourceMethodNotFound


class TestResourceMethodNotFound(unittest.TestCase):
    def test_payload(self):
        """The exception should name the presenter class and the method."""
        err = ResourceMethodNotFound(BasePresenter, "foo")
        self.assertIs(BasePresenter, err.presenter_class)
        self.assertEqual("foo", err.method_name)
        self.assertEqual("Presenter: BasePresenter::foo method does not exist", str(err))

    def test_is_attribute_error(self):
        """getattr with a default must treat it like any other missing attribute."""
        self.assertTrue(issubclass(ResourceMethodNotFound, AttributeError))

    def test_pickle(self):
        err = pickle.loads(pickle.dumps(ResourceMethodNotFound(BasePresenter, "foo")))
        self.assertIs(BasePresenter, err.presenter_class)
        self.assertEqual("foo", err.method_name)
