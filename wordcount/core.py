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

from itertools import groupby
from operator import itemgetter


class Error(Exception):
    pass


class InputError(Error):
    """The input could not be found, read or decoded."""


class OutputError(Error):
    """The output could not be created, written or published."""


class PreconditionViolation(AssertionError):
    """A mapper or reducer was invoked in a way the engine never does."""


def itermap(data, mapfunc):
    for (key, value) in data:
        for output in mapfunc(key, value):
            yield output


def shuffle(data):
    """
    Group (key, value) pairs by key.

    Consumes all of ``data`` before returning. Groups come out in
    ascending key order and, the sort being stable, each group's
    values keep the order in which they were emitted.

    >>> shuffle([('b', 1), ('a', 2), ('b', 3)])
    [('a', [2]), ('b', [1, 3])]
    """
    data = sorted(data, key=itemgetter(0))
    return [(key, [v[1] for v in values])
            for key, values in groupby(data, itemgetter(0))]


def iterreduce(data, redfunc):
    for (key, values) in data:
        for output in redfunc(key, values):
            yield output


def itercombine(data, combfunc):
    return iterreduce(shuffle(data), combfunc)


def itermapred(data, mapfunc, redfunc):
    return iterreduce(shuffle(itermap(data, mapfunc)), redfunc)
