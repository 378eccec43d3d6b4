# Licensed to the Apache Software Foundation (ASF) under one
# or more contributor license agreements.  See the NOTICE file
# distributed with this work for additional information
# regarding copyright ownership.  The ASF licenses this file
# to you under the Apache License, Version 2.0 (the
# "License"); you may not use this file except in compliance
# with the License.  You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
wordcount.mapredtest

Provide a simple way of unit-testing mappers and reducers
locally. This is loosely based on Cloudera's MRUnit design:
bind an input, the expected output and optionally expected
counter values, then call run().
"""

import inspect
from itertools import zip_longest

from wordcount.core import itermap, iterreduce, itermapred
from wordcount.counters import Counters

__all__ = ['MapDriver', 'ReduceDriver', 'MapReduceDriver']


def assert_iters_equal(expected, actual):
    """:Raise AssertionError: If the elements of iterators `expected` and `actual`
    are not equal (or one has more elements than the other)."""
    sentinel = object()
    pairs = zip_longest(iter(expected), iter(actual), fillvalue=sentinel)
    expdiff, actdiff = next(((e, a) for e, a in pairs if e is sentinel or
                             a is sentinel or e != a), (None, None))
    if expdiff is sentinel:
        raise AssertionError("expected sequence exhausted before actual at element {0}".format(actdiff))
    elif actdiff is sentinel:
        raise AssertionError("actual sequence exhausted before expected at element {0}".format(expdiff))
    elif expdiff != actdiff:
        raise AssertionError("Element {0} did not match expected output: {1}".format(actdiff, expdiff))


class BaseDriver(object):
    """A Generic test driver that passes
    input stream through a callable and
    checks output stream matches specified one.
    Classes are instantiated with the driver's counters."""

    def __init__(self, kallable):
        self.counters = Counters()
        self._callable = self._instantiate(kallable)
        self._input_source = None
        self._output_source = None
        self._expected_counters = []

    def _instantiate(self, kallable):
        if inspect.isclass(kallable):
            return kallable(self.counters)
        return kallable

    def with_input(self, input_source):
        """Bind input stream"""
        self._input_source = iter(input_source)
        return self

    def with_output(self, output_source):
        """Bind output stream"""
        self._output_source = iter(output_source)
        return self

    def with_counter(self, name, value):
        """Expect counter `name` to hold `value` after the run"""
        self._expected_counters.append((name, value))
        return self

    def run(self):
        """Run test"""
        assert_iters_equal(self._output_source, self._outputs())
        for name, expected in self._expected_counters:
            actual = self.counters[name].value
            if actual != expected:
                raise AssertionError("Counter {0} is {1}, expected {2}".format(name, actual, expected))

    def _outputs(self):
        raise NotImplementedError


class MapDriver(BaseDriver):
    """Driver for Map operations"""

    @property
    def mapper(self):
        return self._callable

    def _outputs(self):
        return itermap(self._input_source, self._callable)


class ReduceDriver(BaseDriver):
    """Driver for Reduce operations, fed with (key, values) groups"""

    @property
    def reducer(self):
        return self._callable

    def _outputs(self):
        return iterreduce(self._input_source, self._callable)


class MapReduceDriver(BaseDriver):
    """Driver for a full map, shuffle and reduce"""

    def __init__(self, mapper, reducer):
        BaseDriver.__init__(self, None)
        self._mapper = self._instantiate(mapper)
        self._reducer = self._instantiate(reducer)

    @property
    def mapper(self):
        return self._mapper

    @property
    def reducer(self):
        return self._reducer

    def _outputs(self):
        return itermapred(self._input_source, self._mapper, self._reducer)
