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

import os
from collections import defaultdict
from configparser import ConfigParser, NoSectionError


def dumptext(outputs):
    for key, value in outputs:
        yield '%s\t%s' % (key, value)


def loadtext(inputs):
    """Turn lines into (offset, line) records, stripping line terminators."""
    offset = 0
    for input in inputs:
        yield (offset, input.rstrip('\r\n'))
        offset += len(input)


class Options(object):
    """
    Multi-valued option set: a key can hold several values,
    ordered by when each was last added.
    """

    def __init__(self, seq=()):
        self._opts = defaultdict(list)
        for k, v in seq:
            self.add(k, v)

    def add(self, key, value):
        optlist = self._opts[key]
        if value in optlist:
            optlist.remove(value)
        optlist.append(value)

    def update(self, key, values):
        for value in values:
            self.add(key, value)

    def get(self, key):
        return list(self._opts.get(key, ()))
    __getitem__ = get

    def first(self, key, default=None):
        values = self.get(key)
        return values[0] if values else default

    def __iadd__(self, opts):
        if not isinstance(opts, (Options, list, tuple, set)):
            raise ValueError('Invalid opts type. Must be an iterable of (key, value)')
        for k, v in opts:
            self.add(k, v)
        return self

    def __iter__(self):
        return iter(self.allopts())

    def __contains__(self, key):
        return key in self._opts

    def allopts(self):
        """Return a list with all the options in the form of (key, value)"""
        return [(k, v) for k, vs in self._opts.items() for v in vs]


def parseargs(args):
    (opts, key, values) = (Options(), None, [])
    for arg in args:
        if arg[0] == '-' and len(arg) > 1:
            if key:
                opts.add(key, ' '.join(values))
            (key, values) = (arg[1:], [])
        else:
            values.append(arg)
    if key:
        opts.add(key, ' '.join(values))
    return opts


def configfiles():
    return ['/etc/wordcount.conf', os.path.expanduser('~/.wordcountrc')]


def configopts(section, prog=None, opts=None):
    if prog:
        prog = prog.split('/')[-1]
        prog = prog[:-3] if prog.endswith('.py') else prog
        defaults = {'prog': prog}
    else:
        defaults = {}
    for name in ('user', 'pwd'):
        if name.upper() in os.environ:
            defaults[name] = os.environ[name.upper()]
    for (key, value) in opts or Options():
        defaults[key.lower()] = value
    parser = ConfigParser(defaults)
    parser.read(configfiles())
    (results, excludes) = ([], set(defaults))
    try:
        for (key, value) in parser.items(section):
            if not key.lower() in excludes:
                results.append((key.split('_', 1)[0], value))
    except NoSectionError:
        pass
    return results
