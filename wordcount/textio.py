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
wordcount.textio

Line oriented text input and tab separated text output. Output
is written to a temporary directory next to the destination and
only renamed into place once everything has been written.
"""

import os
import sys
import shutil
import tempfile

from wordcount.core import InputError, OutputError
from wordcount.util import loadtext, dumptext

PART_FILE = 'part-r-00000'
SUCCESS_FILE = '_SUCCESS'


def ishidden(name):
    return name.startswith('_') or name.startswith('.')


def listinputs(paths):
    files = []
    for path in paths:
        if os.path.isdir(path):
            files.extend(os.path.join(path, name)
                         for name in sorted(os.listdir(path))
                         if not ishidden(name))
        else:
            files.append(path)
    return files


class TextInput(object):
    """Reads (offset, line) records from one or more files."""

    def __init__(self, paths, encoding='utf-8'):
        if isinstance(paths, str):
            paths = [paths]
        self.paths = list(paths)
        self.encoding = encoding

    def sources(self):
        """Yield one list of records per input file."""
        for path in listinputs(self.paths):
            yield self.read(path)

    def read(self, path):
        print('INFO: consuming %s' % path, file=sys.stderr)
        try:
            with open(path, 'r', encoding=self.encoding, newline='') as f:
                return list(loadtext(f))
        except OSError as e:
            raise InputError('cannot read input %s: %s' % (path, e.strerror or e))
        except UnicodeError as e:
            raise InputError('cannot decode input %s: %s' % (path, e))

    def __iter__(self):
        for records in self.sources():
            for record in records:
                yield record


class TextOutput(object):
    """
    Writes aggregates as ``key\\tvalue`` lines into ``<path>/part-r-00000``.

    Nothing is visible at ``path`` until :meth:`commit` succeeds.
    """

    def __init__(self, path, overwrite=False, encoding='utf-8'):
        self.path = path
        self.overwrite = overwrite
        self.encoding = encoding
        self.tmpdir = None
        self._file = None

    def open(self):
        if os.path.exists(self.path) and not self.overwrite:
            raise OutputError('output path exists already: %s' % self.path)
        parent = os.path.dirname(os.path.abspath(self.path))
        try:
            os.makedirs(parent, exist_ok=True)
            self.tmpdir = tempfile.mkdtemp(prefix='.%s-' % os.path.basename(self.path),
                                           suffix='._temporary', dir=parent)
            self._file = open(os.path.join(self.tmpdir, PART_FILE), 'w',
                              encoding=self.encoding, newline='\n')
        except OSError as e:
            self.abort()
            raise OutputError('cannot create output %s: %s' % (self.path, e.strerror or e))

    def write(self, key, value):
        try:
            for line in dumptext([(key, value)]):
                self._file.write(line + '\n')
        except OSError as e:
            raise OutputError('cannot write output %s: %s' % (self.path, e.strerror or e))

    def commit(self):
        try:
            self._file.close()
            self._file = None
            open(os.path.join(self.tmpdir, SUCCESS_FILE), 'w').close()
            if os.path.exists(self.path):
                if os.path.isdir(self.path):
                    shutil.rmtree(self.path)
                else:
                    os.remove(self.path)
            os.rename(self.tmpdir, self.path)
            self.tmpdir = None
        except OSError as e:
            raise OutputError('cannot publish output %s: %s' % (self.path, e.strerror or e))

    def abort(self):
        if self._file is not None:
            self._file.close()
            self._file = None
        if self.tmpdir is not None:
            shutil.rmtree(self.tmpdir, ignore_errors=True)
            self.tmpdir = None
