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

import re

from wordcount.core import PreconditionViolation
from wordcount.counters import TOTAL_WORDS

# the delimiters of java.util.StringTokenizer
DELIMITERS = re.compile(r"[ \t\n\r\f]+")


def tokenize(text):
    return [token for token in DELIMITERS.split(text) if token]


class WordMapper(object):
    """
    Emits (word, 1) for every whitespace separated token of a line.

    When given a counters registry, the counter named ``countername``
    is incremented once per emitted pair.
    """

    def __init__(self, counters=None, countername=TOTAL_WORDS):
        if counters is not None:
            self.counter = counters[countername]
        else:
            self.counter = None

    def __call__(self, key, value):
        if value is None:
            raise PreconditionViolation('mapper invoked without a record')
        return self.map(value)

    def map(self, value):
        for word in tokenize(value):
            if self.counter is not None:
                self.counter += 1
            yield word, 1


def sumreducer(key, values):
    values = iter(values)
    try:
        total = next(values)
    except StopIteration:
        raise PreconditionViolation('no values to reduce for key %r' % (key,))
    yield key, total + sum(values)
