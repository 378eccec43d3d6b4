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

import sys
import threading

TOTAL_WORDS = 'TOTAL_WORDS'


class Counter(object):

    def __init__(self, name, group='Program'):
        self.group = group
        self.name = name
        self._value = 0
        self._lock = threading.Lock()

    def incr(self, amount=1):
        with self._lock:
            self._value += amount
        return self
    __iadd__ = incr

    @property
    def value(self):
        return self._value

    def __repr__(self):
        return 'Counter(%s,%s=%d)' % (self.group, self.name, self._value)


class Counters(object):
    """
    Run-scoped registry of named counters. Unknown names are
    created on first access, so ``counters['x'] += 1`` works.
    """

    def __init__(self, names=(), group='Program'):
        self.group = group
        self.counters = {}
        self._lock = threading.Lock()
        for name in names:
            self[name]

    def __getitem__(self, key):
        with self._lock:
            try:
                return self.counters[key]
            except KeyError:
                counter = Counter(str(key), self.group)
                self.counters[key] = counter
                return counter

    def __setitem__(self, key, value):
        pass  # += already updated the counter in place

    def __contains__(self, key):
        return key in self.counters

    def __iter__(self):
        return iter(sorted(self.counters))

    def snapshot(self):
        return dict((name, counter.value) for name, counter in self.counters.items())

    def report(self, stream=None):
        stream = stream or sys.stderr
        for name in self:
            counter = self.counters[name]
            print('reporter:counter:%s,%s,%s' % (counter.group, counter.name,
                                                 counter.value), file=stream)
